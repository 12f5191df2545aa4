"""lowpoly_palette.components
=================================

Aggregate import surface for the immutable value objects the palette engine
passes around::

    from lowpoly_palette.components import Category, Theme, ResolvedAdjustment

All classes are frozen ``@dataclass`` records with no behaviour beyond simple
lookups; the ``systems`` package holds the colour maths that consumes them.
"""

from .category import Category, ColorRanges, GridPosition, TileSize
from .theme import Adjustment, NEUTRAL_ADJUSTMENT, ResolvedAdjustment, Theme

__all__ = [
    "Adjustment",
    "Category",
    "ColorRanges",
    "GridPosition",
    "NEUTRAL_ADJUSTMENT",
    "ResolvedAdjustment",
    "Theme",
    "TileSize",
]
