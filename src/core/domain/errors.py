"""Errores del dominio."""

from __future__ import annotations


class CannotPerformActionError(Exception):
    """A variant was asked to do something its abstraction promised but it cannot.

    Only the violating Liskov example raises it; the compliant designs make the
    call impossible instead.
    """
