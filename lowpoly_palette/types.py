"""Common type aliases and enumerations.

Category and theme identifiers are plain strings so that stale or unknown ids
(e.g. restored from an old selection file) can flow through lookups and fail
open instead of raising.
"""

from enum import StrEnum, auto
from typing import Tuple


CategoryID = str
ThemeID = str

RGB = Tuple[int, int, int]
Range = Tuple[float, float]
Matrix3 = Tuple[
    Tuple[float, float, float],
    Tuple[float, float, float],
    Tuple[float, float, float],
]


class ColorblindMode(StrEnum):
    """Supported colour-vision deficiency simulations."""

    NONE = auto()
    PROTANOPIA = auto()
    DEUTERANOPIA = auto()
    TRITANOPIA = auto()
    ACHROMATOPSIA = auto()
