"""Liskov Substitution Principle (LSP).

Objects of a superclass should be replaceable with objects of its subclasses
without breaking the program. `Penguin` breaks `Birds` by raising from
`fly()`; the compliant hierarchy splits birds by what they can actually do.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from adapters.console_output import default_output
from core.config import AppSettings
from core.domain.errors import CannotPerformActionError
from core.domain.principle import Principle
from core.interfaces.demonstration import Demonstration
from core.interfaces.output import Output


# Violation ------------------------------------------------------------------


class Birds(ABC):
    def __init__(self, output: Output) -> None:
        self._output = output

    @abstractmethod
    def fly(self) -> None:
        ...


class Sparrow(Birds):
    def fly(self) -> None:
        self._output.emit("The sparrow is flying")


class Penguin(Birds):
    """Cannot stand in for `Birds`: code calling `fly()` on it fails at runtime."""

    def fly(self) -> None:
        raise CannotPerformActionError("Penguins cannot fly")


# Compliant ------------------------------------------------------------------


class Bird(ABC):
    """Only what every bird does."""

    def __init__(self, output: Output) -> None:
        self._output = output

    @abstractmethod
    def lay_eggs(self) -> None:
        ...


class FlyingBird(Bird):
    def lay_eggs(self) -> None:
        self._output.emit("The bird is laying eggs")

    @abstractmethod
    def fly(self) -> None:
        ...


class SwimmingBird(Bird):
    def lay_eggs(self) -> None:
        self._output.emit("The bird is laying eggs")

    @abstractmethod
    def swim(self) -> None:
        ...


class Eagle(FlyingBird):
    def fly(self) -> None:
        self._output.emit("The eagle is flying")


class Duck(SwimmingBird):
    def swim(self) -> None:
        self._output.emit("The duck is swimming")


def make_fly(bird: FlyingBird) -> None:
    bird.fly()


def make_swim(bird: SwimmingBird) -> None:
    bird.swim()


class LiskovSubstitutionDemo(Demonstration):
    principle = Principle.LISKOV_SUBSTITUTION
    title = "Liskov Substitution"
    summary = "Birds are split into flying and swimming refinements; no bird is asked to fly if it cannot."

    def run_violation(self, output: Output, settings: AppSettings) -> None:
        birds: list[Birds] = [Sparrow(output), Penguin(output)]
        for bird in birds:
            bird.fly()

    def run_compliant(self, output: Output, settings: AppSettings) -> None:
        eagle = Eagle(output)
        duck = Duck(output)
        make_fly(eagle)
        make_swim(duck)
        for bird in (eagle, duck):
            bird.lay_eggs()


def main() -> None:
    output = default_output()
    sparrow: Birds = Sparrow(output)
    sparrow.fly()
    penguin: Birds = Penguin(output)
    penguin.fly()  # raises CannotPerformActionError


if __name__ == "__main__":
    main()
