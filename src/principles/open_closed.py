"""Open/Closed Principle (OCP).

Software entities should be open for extension but closed for modification.
The violating calculator branches on concrete shape classes, so every new
shape means editing it; the compliant calculator only sums what each shape
computes for itself.
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol, runtime_checkable

from adapters.console_output import default_output
from core.config import AppSettings
from core.domain.principle import Principle
from core.interfaces.demonstration import Demonstration
from core.interfaces.output import Output

PI_APPROXIMATION = 3.14


# Violation ------------------------------------------------------------------


class RectangleWithoutOCP:
    def __init__(self, *, height: float, width: float) -> None:
        self.height = height
        self.width = width

    def get_area(self) -> float:
        return self.height * self.width


class CircleWithoutOCP:
    def __init__(self, *, radius: float) -> None:
        self.radius = radius

    def get_area(self) -> float:
        return PI_APPROXIMATION * self.radius * self.radius


class TriangleWithoutOCP:
    """Added after the calculator was written; the calculator does not know it."""

    def __init__(self, *, base: float, height: float) -> None:
        self.base = base
        self.height = height

    def get_area(self) -> float:
        return 0.5 * self.base * self.height


class AreaCalculatorWithoutOCP:
    def get_total_area_of_shapes(self, shapes: Iterable[Any]) -> float:
        # Every new shape needs another branch here.
        total_area = 0.0
        for shape in shapes:
            if isinstance(shape, RectangleWithoutOCP):
                total_area += shape.get_area()
            elif isinstance(shape, CircleWithoutOCP):
                total_area += shape.get_area()
        return total_area


# Compliant ------------------------------------------------------------------


@runtime_checkable
class Shape(Protocol):
    def get_total_area(self) -> float:
        ...


class Rectangle(Shape):
    def __init__(self, *, height: float, width: float) -> None:
        self.height = height
        self.width = width

    def get_total_area(self) -> float:
        return self.height * self.width


class Circle(Shape):
    def __init__(self, *, radius: float) -> None:
        self.radius = radius

    def get_total_area(self) -> float:
        return PI_APPROXIMATION * self.radius * self.radius


class Triangle(Shape):
    def __init__(self, *, base: float, height: float) -> None:
        self.base = base
        self.height = height

    def get_total_area(self) -> float:
        return 0.5 * self.base * self.height


class AreaCalculator:
    """Closed for modification: new shapes only implement `Shape`."""

    def get_total_areas_of_shapes(self, shapes: Iterable[Shape]) -> float:
        total_area = 0.0
        for shape in shapes:
            total_area += shape.get_total_area()
        return total_area


class OpenClosedDemo(Demonstration):
    principle = Principle.OPEN_CLOSED
    title = "Open/Closed"
    summary = "Each shape computes its own area; the calculator never branches on shape type."

    def run_violation(self, output: Output, settings: AppSettings) -> None:
        calculator = AreaCalculatorWithoutOCP()
        shapes = [
            RectangleWithoutOCP(height=10.0, width=5.0),
            CircleWithoutOCP(radius=3.0),
        ]
        output.emit(f"Total Area without OCP: {calculator.get_total_area_of_shapes(shapes):.2f}")

        shapes.append(TriangleWithoutOCP(base=4.0, height=3.0))
        total = calculator.get_total_area_of_shapes(shapes)
        output.emit(f"Total Area without OCP after adding a triangle: {total:.2f} (triangle ignored)")

    def run_compliant(self, output: Output, settings: AppSettings) -> None:
        calculator = AreaCalculator()
        shapes: list[Shape] = [Rectangle(height=10.0, width=5.0), Circle(radius=3.0)]
        output.emit(f"Total Area with OCP: {calculator.get_total_areas_of_shapes(shapes):.2f}")

        shapes.append(Triangle(base=4.0, height=3.0))
        total = calculator.get_total_areas_of_shapes(shapes)
        output.emit(f"Total Area with OCP after adding a triangle: {total:.2f}")


def main() -> None:
    OpenClosedDemo().run_compliant(default_output(), AppSettings())


if __name__ == "__main__":
    main()
