"""Shorthand constructors for unit expressions and quantities.

Example:
    from unit_algebra.units.types import meter, second

    speed = meter(20.0) / second(2.0)  # 10.0m/s
"""

from typing import TypeVar

from ..quantity.quantity import Quantity
from .core import Native, Power, Product, Ratio, UnitExpr
from .native import NativeUnit

T = TypeVar("T")


def native(unit: NativeUnit) -> Native:
    """Return the expression for a base unit."""
    return Native(unit)


def ratio(numerator: UnitExpr, denominator: UnitExpr) -> Ratio:
    """Return the expression ``numerator/denominator``."""
    return Ratio(numerator, denominator)


def product(left: UnitExpr, right: UnitExpr) -> Product:
    """Return the expression ``left*right``."""
    return Product(left, right)


def power(base: UnitExpr, exponent: int) -> Power:
    """Return the expression ``base^exponent``."""
    return Power(base, exponent)


def unit(value: T, expr: UnitExpr) -> Quantity[T]:
    """Pair a value with an arbitrary unit expression."""
    return Quantity(value, expr)


def meter(value: T) -> Quantity[T]:
    """Represents a length in meters."""
    return Quantity(value, Native(NativeUnit.METER))


def liter(value: T) -> Quantity[T]:
    """Represents a volume in liters."""
    return Quantity(value, Native(NativeUnit.LITER))


def gram(value: T) -> Quantity[T]:
    """Represents a mass in grams."""
    return Quantity(value, Native(NativeUnit.GRAM))


def second(value: T) -> Quantity[T]:
    """Represents a duration in seconds."""
    return Quantity(value, Native(NativeUnit.SECOND))


def minute(value: T) -> Quantity[T]:
    """Represents a duration in minutes."""
    return Quantity(value, Native(NativeUnit.MINUTE))


def hour(value: T) -> Quantity[T]:
    """Represents a duration in hours."""
    return Quantity(value, Native(NativeUnit.HOUR))


def day(value: T) -> Quantity[T]:
    """Represents a duration in days."""
    return Quantity(value, Native(NativeUnit.DAY))


def week(value: T) -> Quantity[T]:
    """Represents a duration in weeks."""
    return Quantity(value, Native(NativeUnit.WEEK))


def year(value: T) -> Quantity[T]:
    """Represents a duration in years."""
    return Quantity(value, Native(NativeUnit.YEAR))


def m_per_s(value: T) -> Quantity[T]:
    """Represents a speed in meters per second."""
    return Quantity(
        value, Ratio(Native(NativeUnit.METER), Native(NativeUnit.SECOND))
    )


def area(value: T) -> Quantity[T]:
    """Represents an area in square meters."""
    return Quantity(value, Power(Native(NativeUnit.METER), 2))


def volume(value: T) -> Quantity[T]:
    """Represents a volume in cubic meters."""
    return Quantity(value, Power(Native(NativeUnit.METER), 3))
