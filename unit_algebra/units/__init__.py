"""Units module."""

from .core import NONE, Custom, Native, NoUnit, Power, Product, Ratio, UnitExpr
from .native import NativeUnit

__all__ = [
    "NONE",
    "Custom",
    "Native",
    "NativeUnit",
    "NoUnit",
    "Power",
    "Product",
    "Ratio",
    "UnitExpr",
]
