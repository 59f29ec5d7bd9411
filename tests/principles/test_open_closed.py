"""Tests for the open-closed examples."""
import math

import pytest

from solid_examples.principles.open_closed import (
    AreaCalculator,
    AreaCalculatorBad,
    BuyOneGetOneDiscount,
    Circle,
    DiscountStrategy,
    FixedAmountDiscount,
    NoDiscount,
    Pentagon,
    PercentageDiscount,
    PriceCalculator,
    Rectangle,
    SeasonalDiscount,
    Shape,
    Triangle,
    demonstrate_ocp,
)


def test_shape_formulas():
    assert Rectangle(5, 4).area() == 20
    assert Rectangle(5, 4).perimeter() == 18
    assert Circle(3).area() == pytest.approx(math.pi * 9)
    assert Circle(3).perimeter() == pytest.approx(6 * math.pi)
    assert Triangle(6, 4, 5, 5).area() == 12
    assert Triangle(6, 4, 5, 5).perimeter() == 16
    assert Pentagon(3).area() == pytest.approx(15.4843, abs=1e-4)
    assert Pentagon(3).perimeter() == 15


def test_calculator_totals_and_report():
    shapes = [Rectangle(5, 4), Circle(3), Triangle(6, 4, 5, 5), Pentagon(3)]
    calculator = AreaCalculator()

    assert calculator.total_area(shapes) == pytest.approx(75.7586, abs=1e-4)
    assert calculator.total_perimeter(shapes) == pytest.approx(18 + 6 * math.pi + 16 + 15)
    assert calculator.shape_report(shapes).splitlines()[0] == "Rectangle: Area = 20.00, Perimeter = 18.00"


def test_calculator_accepts_new_shapes_without_changes():
    class Square(Shape):
        def __init__(self, side: float) -> None:
            self.side = side

        def area(self) -> float:
            return self.side**2

        def perimeter(self) -> float:
            return 4 * self.side

        @property
        def name(self) -> str:
            return "Square"

    assert AreaCalculator().total_area([Square(2), Rectangle(1, 1)]) == 5
    assert AreaCalculator().shape_report([Square(2)]) == "Square: Area = 4.00, Perimeter = 8.00"


def test_empty_shape_list():
    assert AreaCalculator().total_area([]) == 0
    assert AreaCalculator().shape_report([]) == ""


def test_bad_calculator_ignores_unknown_shapes():
    shapes = [
        {"type": "rectangle", "width": 2, "height": 3},
        {"type": "triangle", "base": 4, "height": 2},
        {"type": "hexagon", "side": 1},
    ]
    assert AreaCalculatorBad().calculate_area(shapes) == 10


@pytest.mark.parametrize(
    ("strategy", "discount", "name"),
    [
        (NoDiscount(), 0, "No Discount"),
        (PercentageDiscount(20), 20, "20% Discount"),
        (FixedAmountDiscount(15), 15, "$15 Off"),
        (BuyOneGetOneDiscount(), 50, "Buy One Get One Free"),
        (SeasonalDiscount(1.5), 15, "Seasonal Discount (1.5x)"),
    ],
)
def test_discount_strategies(strategy: DiscountStrategy, discount, name):
    assert strategy.calculate_discount(100) == pytest.approx(discount)
    assert strategy.name == name


def test_fixed_discount_never_exceeds_amount():
    assert FixedAmountDiscount(15).calculate_discount(10) == 10
    assert PriceCalculator().final_price(10, FixedAmountDiscount(15)) == 0


def test_price_breakdown():
    breakdown = PriceCalculator().price_breakdown(100, PercentageDiscount(20))

    assert breakdown.original_amount == 100
    assert breakdown.discount_type == "20% Discount"
    assert breakdown.discount_amount == pytest.approx(20)
    assert breakdown.final_price == pytest.approx(80)
    assert breakdown.savings_percentage == "20.00%"


def test_price_breakdown_for_zero_amount():
    breakdown = PriceCalculator().price_breakdown(0, PercentageDiscount(20))

    assert breakdown.final_price == 0
    assert breakdown.savings_percentage == "0.00%"


def test_demonstrate_ocp_narrates(narration):
    demonstrate_ocp()

    messages = narration.messages
    assert "Total Area: 75.76" in messages
    assert "Pentagon: Area = 15.48, Perimeter = 15.00" in messages
    assert "Seasonal Discount (1.5x): $85.00 (15.00% savings)" in messages
