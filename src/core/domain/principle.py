"""Principle and variant identifiers.

Centralizes the five SOLID principles so the CLI, the runner and each
demonstration module share a single source of truth without importing
each other.
"""

from __future__ import annotations

from enum import Enum


class Principle(str, Enum):
    """The five SOLID principles, in canonical S-O-L-I-D order."""

    SINGLE_RESPONSIBILITY = "srp"
    OPEN_CLOSED = "ocp"
    LISKOV_SUBSTITUTION = "lsp"
    INTERFACE_SEGREGATION = "isp"
    DEPENDENCY_INVERSION = "dip"

    @classmethod
    def from_alias(cls, value: str) -> "Principle":
        """Resolve a short key (`srp`) or a full name (`single-responsibility`)."""

        key = value.strip().lower().replace("_", "-")
        for principle in cls:
            if key in (principle.value, principle.slug()):
                return principle
        raise ValueError(f"Unknown principle: {value!r}")

    def slug(self) -> str:
        return self.name.lower().replace("_", "-")

    def label(self) -> str:
        """Human readable label for tables and panels."""

        return self.name.replace("_", " ").title()


class Variant(str, Enum):
    """Which half of a demonstration to run."""

    VIOLATION = "violation"
    COMPLIANT = "compliant"
