"""Quantity module."""

from .errors import UnitError
from .quantity import Quantity

__all__ = ["Quantity", "UnitError"]
