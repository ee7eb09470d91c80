"""Interface Segregation Principle (ISP).

No client should be forced to implement methods it does not need. The fat
`Car` interface makes `Tesla` carry an empty `fuel()`; the split interfaces
let each truck declare only what it can really do.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from adapters.console_output import default_output
from core.config import AppSettings
from core.domain.principle import Principle
from core.interfaces.demonstration import Demonstration
from core.interfaces.output import Output


# Violation ------------------------------------------------------------------


@runtime_checkable
class Car(Protocol):
    def pedal(self) -> None:
        ...

    # Not every car takes fuel.
    def fuel(self) -> None:
        ...


class Innova(Car):
    def __init__(self, output: Output) -> None:
        self._output = output

    def pedal(self) -> None:
        self._output.emit("Innova pedals")

    def fuel(self) -> None:
        self._output.emit("Fuel is petrol")


class Tesla(Car):
    """Electric car forced to provide `fuel()`."""

    def __init__(self, output: Output) -> None:
        self._output = output

    def pedal(self) -> None:
        self._output.emit("Tesla pedals")

    def fuel(self) -> None:
        # Required by `Car`, meaningless here.
        pass


# Compliant ------------------------------------------------------------------


@runtime_checkable
class Truck(Protocol):
    def pedal(self) -> None:
        ...


@runtime_checkable
class Fuel(Protocol):
    def add_fuel(self) -> None:
        ...


@runtime_checkable
class Electric(Protocol):
    def plug_in_charge(self) -> None:
        ...


class MercedesTruck(Truck, Fuel):
    def __init__(self, output: Output) -> None:
        self._output = output

    def pedal(self) -> None:
        self._output.emit("The truck is pedalling")

    def add_fuel(self) -> None:
        self._output.emit("The truck is adding fuel at the station")


class TeslaTruck(Truck, Electric):
    def __init__(self, output: Output) -> None:
        self._output = output

    def pedal(self) -> None:
        self._output.emit("The Tesla truck is pedalling")

    def plug_in_charge(self) -> None:
        self._output.emit("Tesla truck is charging at the station")


def refuel(vehicle: Fuel) -> None:
    vehicle.add_fuel()


def recharge(vehicle: Electric) -> None:
    vehicle.plug_in_charge()


class InterfaceSegregationDemo(Demonstration):
    principle = Principle.INTERFACE_SEGREGATION
    title = "Interface Segregation"
    summary = "Trucks implement only the Truck/Fuel/Electric capabilities they have."

    def run_violation(self, output: Output, settings: AppSettings) -> None:
        for car in (Innova(output), Tesla(output)):
            car.pedal()
            car.fuel()

    def run_compliant(self, output: Output, settings: AppSettings) -> None:
        mercedes = MercedesTruck(output)
        tesla = TeslaTruck(output)
        mercedes.pedal()
        refuel(mercedes)
        tesla.pedal()
        recharge(tesla)


def main() -> None:
    InterfaceSegregationDemo().run_compliant(default_output(), AppSettings())


if __name__ == "__main__":
    main()
