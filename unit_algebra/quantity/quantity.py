"""Quantity: a magnitude paired with a unit expression.

Arithmetic between quantities infers the unit of the result:

    from unit_algebra.units.types import meter, second

    meter(20.0) / second(2.0)                 # 10.0m/s
    meter(20.0) / second(2.0) * second(2.0)   # 20.0m
    meter(2) * meter(3) * meter(4)            # 24m^3
    meter(1) + second(1)                      # UnitError: cannot add m with s

Ordering is only defined between quantities with equal units. Otherwise every
relational operator returns False and `Quantity.compare` returns None.
"""

from collections.abc import Iterator
from typing import Any, Generic, Self, TypeVar

from ..units import UnitExpr
from . import errors
from .inference import divide_units, multiply_units

T = TypeVar("T")


def _is_scalar(value: object) -> bool:
    """Check for a plain dimensionless int or float."""
    return isinstance(value, int | float) and not isinstance(value, bool)


class Quantity(Generic[T]):
    """A magnitude of any numeric-like type with an attached unit."""

    def __init__(self, magnitude: T, unit: UnitExpr):
        """Initialise quantity instance.

        Args:
            magnitude: The numeric value. Any type supporting the arithmetic
                used on the quantity works, e.g. int, float, Fraction.
            unit: The unit expression attached to the value.
        """
        self._magnitude = magnitude
        self.unit = unit

    @property
    def magnitude(self) -> T:
        """The numeric value of the quantity."""
        return self._magnitude

    @magnitude.setter
    def magnitude(self, value: T) -> None:
        self._magnitude = value

    @property
    def unit(self) -> UnitExpr:
        """The unit expression of the quantity."""
        return self._unit

    @unit.setter
    def unit(self, value: UnitExpr) -> None:
        if not isinstance(value, UnitExpr):
            raise TypeError(f"Not a unit expression: {value!r}")
        self._unit = value

    def into_magnitude(self) -> T:
        """Return the magnitude, discarding the unit."""
        return self._magnitude

    def into_unit(self) -> UnitExpr:
        """Return the unit, discarding the magnitude."""
        return self._unit

    def __iter__(self) -> Iterator[Any]:
        """Allow unpacking as ``magnitude, unit = quantity``."""
        yield self._magnitude
        yield self._unit

    def copy(self) -> Self:
        """Return a new quantity with the same magnitude and unit."""
        return type(self)(self._magnitude, self._unit)

    def __str__(self) -> str:
        """Return the magnitude followed by the rendered unit, e.g. ``10.0m/s``."""
        return f"{self._magnitude}{self._unit}"

    def __repr__(self) -> str:
        """Return a detailed string representation of the quantity."""
        return f"Quantity({self._magnitude!r}, {self._unit!r})"

    # Comparison

    def __eq__(self, other: object) -> bool:
        """Check equality of magnitude and unit."""
        if not isinstance(other, Quantity):
            return NotImplemented
        return bool(self._unit == other._unit and self._magnitude == other._magnitude)

    def __lt__(self, other: "Quantity[T]") -> bool:
        """Less than; False when the units differ."""
        if not isinstance(other, Quantity):
            return NotImplemented
        return bool(self._unit == other._unit and self._magnitude < other._magnitude)

    def __le__(self, other: "Quantity[T]") -> bool:
        """Less than or equal; False when the units differ."""
        if not isinstance(other, Quantity):
            return NotImplemented
        return bool(self._unit == other._unit and self._magnitude <= other._magnitude)

    def __gt__(self, other: "Quantity[T]") -> bool:
        """Greater than; False when the units differ."""
        if not isinstance(other, Quantity):
            return NotImplemented
        return bool(self._unit == other._unit and self._magnitude > other._magnitude)

    def __ge__(self, other: "Quantity[T]") -> bool:
        """Greater than or equal; False when the units differ."""
        if not isinstance(other, Quantity):
            return NotImplemented
        return bool(self._unit == other._unit and self._magnitude >= other._magnitude)

    def compare(self, other: "Quantity[T]") -> int | None:
        """Compare two quantities.

        Returns:
            -1, 0 or 1 if this quantity is less than, equal to or greater than
            the other, or None if the two are incomparable (different units, or
            magnitudes without an ordering such as NaN).
        """
        if self < other:
            return -1
        if self > other:
            return 1
        if self == other:
            return 0
        return None

    def max(self, other: "Quantity[T]") -> "Quantity[T]":
        """Return the greater of two quantities, preferring self on ties.

        Raises:
            UnitError: If the units differ, since neither operand is greater.
        """
        if self._unit != other._unit:
            raise errors.u003_error_factory(self._unit, other._unit)
        return self if self >= other else other

    def min(self, other: "Quantity[T]") -> "Quantity[T]":
        """Return the lesser of two quantities, preferring self on ties.

        Raises:
            UnitError: If the units differ, since neither operand is lesser.
        """
        if self._unit != other._unit:
            raise errors.u003_error_factory(self._unit, other._unit)
        return self if self <= other else other

    # Arithmetic

    def __add__(self, other: "Quantity[T]") -> "Quantity[T]":
        """Add two quantities with equal units.

        Raises:
            UnitError: If the units differ.
        """
        if not isinstance(other, Quantity):
            return NotImplemented
        if self._unit != other._unit:
            raise errors.u001_error_factory(self._unit, other._unit)
        return Quantity(self._magnitude + other._magnitude, self._unit)

    def __sub__(self, other: "Quantity[T]") -> "Quantity[T]":
        """Subtract two quantities with equal units.

        Raises:
            UnitError: If the units differ.
        """
        if not isinstance(other, Quantity):
            return NotImplemented
        if self._unit != other._unit:
            raise errors.u002_error_factory(self._unit, other._unit)
        return Quantity(self._magnitude - other._magnitude, self._unit)

    def __mul__(self, other: "Quantity[T] | int | float") -> "Quantity[T]":
        """Multiply by another quantity or by a dimensionless scalar."""
        if isinstance(other, Quantity):
            return Quantity(
                self._magnitude * other._magnitude,
                multiply_units(self._unit, other._unit),
            )
        if _is_scalar(other):
            return Quantity(self._magnitude * other, self._unit)
        return NotImplemented

    def __rmul__(self, other: int | float) -> "Quantity[T]":
        """Multiply a dimensionless scalar by this quantity."""
        if _is_scalar(other):
            return Quantity(other * self._magnitude, self._unit)
        return NotImplemented

    def __truediv__(self, other: "Quantity[T] | int | float") -> "Quantity[T]":
        """Divide by another quantity or by a dimensionless scalar."""
        if isinstance(other, Quantity):
            return Quantity(
                self._magnitude / other._magnitude,
                divide_units(self._unit, other._unit),
            )
        if _is_scalar(other):
            return Quantity(self._magnitude / other, self._unit)
        return NotImplemented

    def __neg__(self) -> "Quantity[T]":
        """Negate the magnitude, keeping the unit."""
        return Quantity(-self._magnitude, self._unit)

    def __pos__(self) -> "Quantity[T]":
        """Return an equal quantity."""
        return Quantity(self._magnitude, self._unit)

    def powi(self, n: int) -> "Quantity[T]":
        """Raise the magnitude to an integer power.

        The unit is left unchanged: unit powers are only built by multiplying
        quantities together.
        """
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError(f"Integer exponent required, got {type(n).__name__}")
        return Quantity(self._magnitude**n, self._unit)

    def powf(self, n: float) -> "Quantity[T]":
        """Raise the magnitude to a real power, leaving the unit unchanged."""
        return Quantity(self._magnitude**n, self._unit)
