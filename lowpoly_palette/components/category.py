"""Category component.

A ``Category`` is one material class on the palette sheet. Its tile grid is
placed at ``position`` (top-left, in tile units) and every tile's colour is
interpolated from the three closed ``ColorRanges`` intervals.
"""

from dataclasses import dataclass

from lowpoly_palette.types import CategoryID, Range


@dataclass(frozen=True)
class TileSize:
    """Grid dimensions in tiles.

    Attributes:
        width: Number of tile columns (>= 1).
        height: Number of tile rows (>= 1).
    """

    width: int
    height: int


@dataclass(frozen=True)
class GridPosition:
    """Top-left corner in tile units.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int


@dataclass(frozen=True)
class ColorRanges:
    """Closed HSL intervals.

    Attributes:
        hue_range: Hue degrees ``(lo, hi)``, 0-360. Varies top to bottom.
        saturation_range: Saturation percent ``(lo, hi)``, 0-100.
        lightness_range: Lightness percent ``(lo, hi)``, 0-100. Light on the
            left, dark on the right.
    """

    hue_range: Range
    saturation_range: Range
    lightness_range: Range


@dataclass(frozen=True)
class Category:
    id: CategoryID
    name: str
    tiles: TileSize
    position: GridPosition
    colors: ColorRanges
    icon: str = ""
    description: str = ""
