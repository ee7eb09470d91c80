# tests/test_open_closed.py
"""Tests for the Open/Closed demonstration."""

from __future__ import annotations

import pytest

from principles.open_closed import (
    AreaCalculator,
    AreaCalculatorWithoutOCP,
    Circle,
    CircleWithoutOCP,
    OpenClosedDemo,
    Rectangle,
    RectangleWithoutOCP,
    Shape,
    Triangle,
    TriangleWithoutOCP,
    main,
)


def test_total_area_is_sum_of_each_shape():
    shapes = [Rectangle(height=10, width=5), Circle(radius=3)]

    total = AreaCalculator().get_total_areas_of_shapes(shapes)

    assert total == pytest.approx(78.26)
    assert total == pytest.approx(sum(s.get_total_area() for s in shapes))


def test_new_shape_needs_no_calculator_change():
    shapes = [Rectangle(height=10, width=5), Circle(radius=3), Triangle(base=4, height=3)]

    assert AreaCalculator().get_total_areas_of_shapes(shapes) == pytest.approx(84.26)


def test_any_shape_protocol_implementation_is_accepted():
    class Square:
        def __init__(self, side: float) -> None:
            self.side = side

        def get_total_area(self) -> float:
            return self.side * self.side

    square = Square(2)

    assert isinstance(square, Shape)
    assert AreaCalculator().get_total_areas_of_shapes([square]) == pytest.approx(4.0)


def test_empty_sequence_is_zero():
    assert AreaCalculator().get_total_areas_of_shapes([]) == 0.0


def test_violating_calculator_matches_for_known_shapes():
    shapes = [RectangleWithoutOCP(height=10, width=5), CircleWithoutOCP(radius=3)]

    assert AreaCalculatorWithoutOCP().get_total_area_of_shapes(shapes) == pytest.approx(78.26)


def test_violating_calculator_silently_ignores_unknown_shape():
    triangle = TriangleWithoutOCP(base=4, height=3)
    calculator = AreaCalculatorWithoutOCP()

    assert triangle.get_area() == pytest.approx(6.0)
    assert calculator.get_total_area_of_shapes([triangle]) == 0.0
    assert calculator.get_total_area_of_shapes(
        [RectangleWithoutOCP(height=10, width=5), CircleWithoutOCP(radius=3), triangle]
    ) == pytest.approx(78.26)


def test_demo_output(recorder, settings):
    demo = OpenClosedDemo()
    demo.run_violation(recorder, settings)
    demo.run_compliant(recorder, settings)

    assert recorder.lines == [
        "Total Area without OCP: 78.26",
        "Total Area without OCP after adding a triangle: 78.26 (triangle ignored)",
        "Total Area with OCP: 78.26",
        "Total Area with OCP after adding a triangle: 84.26",
    ]


def test_main_prints_total_areas(capsys):
    main()

    assert capsys.readouterr().out.splitlines() == [
        "Total Area with OCP: 78.26",
        "Total Area with OCP after adding a triangle: 84.26",
    ]
