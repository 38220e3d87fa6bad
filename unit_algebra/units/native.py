"""Native (base) units.

Time subdivisions are separate units: there is no conversion factor between
``s``, ``min`` and ``h``, so quantities expressed in each never mix.
"""

from enum import Enum


class NativeUnit(Enum):
    """Fixed set of atomic units, valued by their rendering symbol."""

    METER = "m"
    LITER = "l"
    GRAM = "g"
    SECOND = "s"
    MINUTE = "min"
    HOUR = "h"
    DAY = "d"
    WEEK = "w"
    YEAR = "y"

    def __str__(self) -> str:
        """Return the symbol of the unit."""
        return self.value
