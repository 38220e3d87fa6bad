"""Unit expressions: a symbolic tree describing the unit of a quantity.

A unit expression is one of:
- `Native`: one of the fixed base units (e.g. ``m``, ``s``).
- `Custom`: an arbitrary named unit.
- `Ratio`: one expression "per" another, rendered ``n/d``.
- `Product`: two expressions multiplied, rendered ``a*b``.
- `Power`: an expression raised to a non-negative integer, rendered ``u^p``.
- `NoUnit`: the dimensionless unit, rendered as an empty string.

Expressions are immutable and compared structurally: two expressions are equal
only if they are the same variant with equal children. Nothing is normalised,
so ``Ratio(a, b)`` and ``Product(a, Power(b, 1))`` are different units.

Rendering never adds parentheses, so deeply nested expressions can render
ambiguously (``Ratio(Ratio(m, s), s)`` and ``Ratio(m, Ratio(s, s))`` both render
as ``m/s/s``).
"""

from dataclasses import dataclass

from .native import NativeUnit


class UnitExpr:
    """Base class for all unit expression variants."""

    def render(self) -> str:
        """Return the canonical symbol string of the expression."""
        raise NotImplementedError

    def equals(self, other: object) -> bool:
        """Check structural equality with another expression."""
        return self == other

    def __str__(self) -> str:
        """Return the rendered expression."""
        return self.render()


def _check_child(name: str, value: object) -> None:
    if not isinstance(value, UnitExpr):
        raise TypeError(
            f"{name} must be a unit expression, got {type(value).__name__}"
        )


@dataclass(frozen=True)
class Native(UnitExpr):
    """A base unit."""

    unit: NativeUnit

    def __post_init__(self) -> None:
        """Validate the wrapped unit."""
        if not isinstance(self.unit, NativeUnit):
            raise TypeError(f"Not a native unit: {self.unit!r}")

    def render(self) -> str:
        """Return the symbol of the base unit."""
        return str(self.unit)


@dataclass(frozen=True)
class Custom(UnitExpr):
    """A unit identified only by its name."""

    name: str

    def __post_init__(self) -> None:
        """Validate the unit name."""
        if not isinstance(self.name, str):
            raise TypeError(f"Custom unit name must be a string: {self.name!r}")

    def render(self) -> str:
        """Return the unit name as given."""
        return self.name


@dataclass(frozen=True)
class Ratio(UnitExpr):
    """The numerator unit per the denominator unit, e.g. m/s."""

    numerator: UnitExpr
    denominator: UnitExpr

    def __post_init__(self) -> None:
        """Validate both sides of the ratio."""
        _check_child("numerator", self.numerator)
        _check_child("denominator", self.denominator)

    def render(self) -> str:
        """Render as ``numerator/denominator``."""
        return f"{self.numerator.render()}/{self.denominator.render()}"


@dataclass(frozen=True)
class Product(UnitExpr):
    """Two units multiplied together, e.g. m*s."""

    left: UnitExpr
    right: UnitExpr

    def __post_init__(self) -> None:
        """Validate both factors."""
        _check_child("left", self.left)
        _check_child("right", self.right)

    def render(self) -> str:
        """Render as ``left*right``."""
        return f"{self.left.render()}*{self.right.render()}"


@dataclass(frozen=True)
class Power(UnitExpr):
    """A unit raised to a non-negative integer exponent, e.g. m^2."""

    base: UnitExpr
    exponent: int

    def __post_init__(self) -> None:
        """Validate the base and the exponent.

        Raises:
            TypeError: If the base is not a unit expression or the exponent is
                not an integer.
            ValueError: If the exponent is negative.
        """
        _check_child("base", self.base)
        # bool is an int subclass but never a meaningful exponent
        if not isinstance(self.exponent, int) or isinstance(self.exponent, bool):
            raise TypeError(f"Exponent must be an integer: {self.exponent!r}")
        if self.exponent < 0:
            raise ValueError(f"Exponent must be non-negative: {self.exponent}")

    def render(self) -> str:
        """Render as ``base^exponent``."""
        return f"{self.base.render()}^{self.exponent}"


@dataclass(frozen=True)
class NoUnit(UnitExpr):
    """The dimensionless unit."""

    def render(self) -> str:
        """Render as an empty string."""
        return ""


NONE = NoUnit()
