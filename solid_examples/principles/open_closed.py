"""Open-Closed Principle (OCP).

Software entities should be open for extension but closed for modification:
new shapes and discounts plug in without touching the calculators.
"""
from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from ..display import HEADING

logger = logging.getLogger(__name__)


# Violates OCP: every new shape means editing this method.
class AreaCalculatorBad:
    def calculate_area(self, shapes: Iterable[Mapping[str, Any]]) -> float:
        total_area = 0.0
        for shape in shapes:
            kind = shape["type"]
            if kind == "rectangle":
                total_area += shape["width"] * shape["height"]
            elif kind == "circle":
                total_area += math.pi * shape["radius"] ** 2
            elif kind == "triangle":
                total_area += 0.5 * shape["base"] * shape["height"]
        return total_area


class Shape(ABC):
    @abstractmethod
    def area(self) -> float: ...

    @abstractmethod
    def perimeter(self) -> float: ...

    @property
    @abstractmethod
    def name(self) -> str: ...


class Rectangle(Shape):
    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)

    @property
    def name(self) -> str:
        return "Rectangle"


class Circle(Shape):
    def __init__(self, radius: float) -> None:
        self.radius = radius

    def area(self) -> float:
        return math.pi * self.radius**2

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius

    @property
    def name(self) -> str:
        return "Circle"


class Triangle(Shape):
    """Triangle described by base, height and the two remaining sides."""

    def __init__(self, base: float, height: float, side_a: float, side_b: float) -> None:
        self.base = base
        self.height = height
        self.side_a = side_a
        self.side_b = side_b

    def area(self) -> float:
        return 0.5 * self.base * self.height

    def perimeter(self) -> float:
        return self.base + self.side_a + self.side_b

    @property
    def name(self) -> str:
        return "Triangle"


class Pentagon(Shape):
    """Regular pentagon."""

    def __init__(self, side: float) -> None:
        self.side = side

    def area(self) -> float:
        return 0.25 * math.sqrt(25 + 10 * math.sqrt(5)) * self.side**2

    def perimeter(self) -> float:
        return 5 * self.side

    @property
    def name(self) -> str:
        return "Pentagon"


class AreaCalculator:
    """Works with any Shape, including ones added later."""

    def total_area(self, shapes: Iterable[Shape]) -> float:
        return sum(shape.area() for shape in shapes)

    def total_perimeter(self, shapes: Iterable[Shape]) -> float:
        return sum(shape.perimeter() for shape in shapes)

    def shape_report(self, shapes: Iterable[Shape]) -> str:
        return "\n".join(
            f"{shape.name}: Area = {shape.area():.2f}, Perimeter = {shape.perimeter():.2f}"
            for shape in shapes
        )


class DiscountStrategy(ABC):
    @abstractmethod
    def calculate_discount(self, amount: float) -> float: ...

    @property
    @abstractmethod
    def name(self) -> str: ...


class NoDiscount(DiscountStrategy):
    def calculate_discount(self, amount: float) -> float:
        return 0.0

    @property
    def name(self) -> str:
        return "No Discount"


class PercentageDiscount(DiscountStrategy):
    def __init__(self, percentage: float) -> None:
        self.percentage = percentage

    def calculate_discount(self, amount: float) -> float:
        return amount * (self.percentage / 100)

    @property
    def name(self) -> str:
        return f"{self.percentage:g}% Discount"


class FixedAmountDiscount(DiscountStrategy):
    def __init__(self, discount_amount: float) -> None:
        self.discount_amount = discount_amount

    def calculate_discount(self, amount: float) -> float:
        # never discount more than the price
        return min(self.discount_amount, amount)

    @property
    def name(self) -> str:
        return f"${self.discount_amount:g} Off"


class BuyOneGetOneDiscount(DiscountStrategy):
    def calculate_discount(self, amount: float) -> float:
        return amount * 0.5

    @property
    def name(self) -> str:
        return "Buy One Get One Free"


class SeasonalDiscount(DiscountStrategy):
    """10% base discount scaled by a seasonal multiplier."""

    def __init__(self, season_multiplier: float) -> None:
        self.season_multiplier = season_multiplier

    def calculate_discount(self, amount: float) -> float:
        return amount * 0.1 * self.season_multiplier

    @property
    def name(self) -> str:
        return f"Seasonal Discount ({self.season_multiplier:g}x)"


@dataclass(frozen=True, slots=True)
class PriceBreakdown:
    original_amount: float
    discount_type: str
    discount_amount: float
    final_price: float
    savings_percentage: str


class PriceCalculator:
    """Applies any DiscountStrategy without knowing its concrete type."""

    def final_price(self, original_amount: float, strategy: DiscountStrategy) -> float:
        return original_amount - strategy.calculate_discount(original_amount)

    def price_breakdown(self, original_amount: float, strategy: DiscountStrategy) -> PriceBreakdown:
        discount = strategy.calculate_discount(original_amount)
        savings = (discount / original_amount) * 100 if original_amount else 0.0
        return PriceBreakdown(
            original_amount=original_amount,
            discount_type=strategy.name,
            discount_amount=discount,
            final_price=original_amount - discount,
            savings_percentage=f"{savings:.2f}%",
        )


def demonstrate_ocp() -> None:
    logger.info("Open-Closed Principle", extra=HEADING)

    legacy_shapes = [
        {"type": "rectangle", "width": 5, "height": 4},
        {"type": "circle", "radius": 3},
    ]
    logger.info(
        "Type-switching calculator total: %.2f",
        AreaCalculatorBad().calculate_area(legacy_shapes),
    )

    shapes: list[Shape] = [
        Rectangle(5, 4),
        Circle(3),
        Triangle(6, 4, 5, 5),
        Pentagon(3),
    ]
    area_calculator = AreaCalculator()

    logger.info("Shape Calculations", extra=HEADING)
    logger.info("Total Area: %.2f", area_calculator.total_area(shapes))
    logger.info("Total Perimeter: %.2f", area_calculator.total_perimeter(shapes))

    logger.info("Shape Report", extra=HEADING)
    for line in area_calculator.shape_report(shapes).splitlines():
        logger.info(line)

    original_price = 100.0
    strategies: list[DiscountStrategy] = [
        NoDiscount(),
        PercentageDiscount(20),
        FixedAmountDiscount(15),
        BuyOneGetOneDiscount(),
        SeasonalDiscount(1.5),
    ]
    price_calculator = PriceCalculator()

    logger.info("Discount Calculations", extra=HEADING)
    for strategy in strategies:
        breakdown = price_calculator.price_breakdown(original_price, strategy)
        logger.info(
            "%s: $%.2f (%s savings)",
            strategy.name,
            breakdown.final_price,
            breakdown.savings_percentage,
        )
