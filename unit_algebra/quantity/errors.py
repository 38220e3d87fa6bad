"""Module for creating errors representing invalid unit operations."""

from ..units import UnitExpr


class UnitError(Exception):
    """Raised when an operation is applied to quantities with incompatible units."""

    def __init__(self, code: str, message: str):
        """Initialise a new unit error."""
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        """Return a string representation of the error."""
        return f"UnitError(code={self.code!r}, message={self.message!r})"


def u001_error_factory(left_unit: UnitExpr, right_unit: UnitExpr) -> UnitError:
    """Factory for U001: Cannot add operands with different units."""
    return UnitError(
        code="U001",
        message=f"cannot add {left_unit} with {right_unit}",
    )


def u002_error_factory(left_unit: UnitExpr, right_unit: UnitExpr) -> UnitError:
    """Factory for U002: Cannot subtract operands with different units."""
    return UnitError(
        code="U002",
        message=f"cannot subtract {left_unit} with {right_unit}",
    )


def u003_error_factory(left_unit: UnitExpr, right_unit: UnitExpr) -> UnitError:
    """Factory for U003: Cannot compare operands with different units."""
    return UnitError(
        code="U003",
        message=f"cannot compare {left_unit} with {right_unit}",
    )
