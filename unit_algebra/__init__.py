"""Unit Algebra: numeric values with symbolic units inferred through arithmetic."""

from contextlib import suppress
from importlib.metadata import PackageNotFoundError, version

from .quantity import Quantity, UnitError
from .units import NONE, Custom, Native, NativeUnit, NoUnit, Power, Product, Ratio
from .units import UnitExpr
from .units.types import (
    area,
    day,
    gram,
    hour,
    liter,
    m_per_s,
    meter,
    minute,
    second,
    unit,
    volume,
    week,
    year,
)

with suppress(PackageNotFoundError):
    __version__ = version("unit-algebra")

__all__ = [
    "NONE",
    "Custom",
    "Native",
    "NativeUnit",
    "NoUnit",
    "Power",
    "Product",
    "Quantity",
    "Ratio",
    "UnitError",
    "UnitExpr",
    "area",
    "day",
    "gram",
    "hour",
    "liter",
    "m_per_s",
    "meter",
    "minute",
    "second",
    "unit",
    "volume",
    "week",
    "year",
]
