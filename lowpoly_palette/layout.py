"""Layout engine: category grids to pixel rectangles and back.

Categories are packed into horizontal bands. Each band sits
``band * label_height`` pixels lower than its tile position alone would put
it, leaving room for the labels drawn above every region.

Forward mapping::

    left   = padding + position.x * tile
    top    = padding + band * label_height + position.y * tile
    width  = tiles.width * tile
    height = tiles.height * tile

The inverse (:func:`find_category_at`) undoes the same arithmetic: x is
resolved to a tile column, y is compared in pixels against each region's
band-shifted top, so every pixel inside a rectangle from
:func:`region_rect` maps back to its category.
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from lowpoly_palette.catalog.categories import CATEGORIES
from lowpoly_palette.components import Category
from lowpoly_palette.config import DEFAULT_LAYOUT, LayoutConfig
from lowpoly_palette.state import PaletteState


# Ordered (y_upper_bound, band) pairs: the first bound with y < bound wins.
# Coupled to the catalog's band y positions; rerun validate_catalog after edits.
ROW_BANDS: Tuple[Tuple[int, int], ...] = (
    (1, 0),
    (80, 1),
    (112, 2),
    (136, 3),
    (160, 4),
)
LAST_ROW = 5


@dataclass(frozen=True)
class Rect:
    """Axis-aligned pixel rectangle, half-open on the right and bottom."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def center(self) -> Tuple[float, float]:
        return (self.left + self.width / 2, self.top + self.height / 2)

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom

    def overlaps(self, other: "Rect") -> bool:
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )

    def scaled(self, scale: float) -> "Rect":
        return Rect(
            self.left * scale, self.top * scale, self.width * scale, self.height * scale
        )


@dataclass(frozen=True)
class RegionHighlight:
    """Caller-facing hover descriptor in display pixels.

    Attributes:
        category_id: Matched category.
        label: Text to show with the highlight.
        rect: Region rectangle multiplied by the caller's scale.
        label_above: True when the region sits in the lower half of the sheet,
            so the label should go above rather than below it.
    """

    category_id: str
    label: str
    rect: Rect
    label_above: bool


def row_of(y: int) -> int:
    """Band index for a category whose top edge is at tile row ``y``."""
    for upper_bound, row in ROW_BANDS:
        if y < upper_bound:
            return row
    return LAST_ROW


def row_offset(y: int, config: LayoutConfig = DEFAULT_LAYOUT) -> int:
    return row_of(y) * config.label_height


def region_rect(category: Category, config: LayoutConfig = DEFAULT_LAYOUT) -> Rect:
    """Absolute pixel rectangle covered by ``category``."""
    tile = config.tile_size
    return Rect(
        left=config.padding_px + category.position.x * tile,
        top=config.padding_px
        + row_offset(category.position.y, config)
        + category.position.y * tile,
        width=category.tiles.width * tile,
        height=category.tiles.height * tile,
    )


def tile_rect(
    category: Category, col: int, row: int, config: LayoutConfig = DEFAULT_LAYOUT
) -> Rect:
    """Pixel cell of the tile at ``(col, row)`` inside ``category``."""
    region = region_rect(category, config)
    tile = config.tile_size
    return Rect(region.left + col * tile, region.top + row * tile, tile, tile)


def visible_categories(
    state: PaletteState, categories: Iterable[Category] = CATEGORIES
) -> List[Category]:
    """Categories that occupy a region, in catalog order."""
    return [c for c in categories if state.is_visible(c.id)]


def find_category_at(
    x: float,
    y: float,
    state: PaletteState,
    categories: Sequence[Category] = CATEGORIES,
    config: LayoutConfig = DEFAULT_LAYOUT,
    scale: float = 1.0,
) -> Optional[Category]:
    """Return the category under a pointer, or ``None``.

    Args:
        x, y: Pointer position in display pixels.
        state: Current palette state; omitted unselected categories never match.
        categories: Scan order.
        config: Sheet geometry.
        scale: Display pixels per raster pixel (zoom); divided out first.
            A non-positive scale matches nothing.
    """
    if scale <= 0:
        return None
    native_x = x / scale
    native_y = y / scale
    tile_x = math.floor((native_x - config.padding_px) / config.tile_size)
    y_px = native_y - config.padding_px

    for category in categories:
        if not state.is_visible(category.id):
            continue
        position, tiles = category.position, category.tiles
        top = row_offset(position.y, config) + position.y * config.tile_size
        bottom = top + tiles.height * config.tile_size
        if position.x <= tile_x < position.x + tiles.width and top <= y_px < bottom:
            return category
    return None


def region_highlight(
    category: Category, scale: float = 1.0, config: LayoutConfig = DEFAULT_LAYOUT
) -> RegionHighlight:
    center_y = category.position.y + category.tiles.height / 2
    return RegionHighlight(
        category_id=category.id,
        label=category.name,
        rect=region_rect(category, config).scaled(scale),
        label_above=center_y > config.grid_size / 2,
    )


def validate_catalog(
    categories: Sequence[Category] = CATEGORIES, config: LayoutConfig = DEFAULT_LAYOUT
) -> None:
    """Check catalog invariants.

    Raises:
        ValueError: On duplicate ids, empty grids, inverted ranges, regions
            outside the canvas, or overlapping regions.
    """
    seen = set()
    for category in categories:
        if category.id in seen:
            raise ValueError(f"Duplicate category id: {category.id}")
        seen.add(category.id)
        if category.tiles.width < 1 or category.tiles.height < 1:
            raise ValueError(f"Category {category.id} has an empty tile grid")
        colors = category.colors
        for label, (lo, hi) in (
            ("hue", colors.hue_range),
            ("saturation", colors.saturation_range),
            ("lightness", colors.lightness_range),
        ):
            if lo > hi:
                raise ValueError(f"Category {category.id} has inverted {label} range")
        rect = region_rect(category, config)
        if rect.left < 0 or rect.top < 0 or rect.right > config.canvas_size or (
            rect.bottom > config.canvas_size
        ):
            raise ValueError(f"Category {category.id} falls outside the canvas")

    rects = [(c.id, region_rect(c, config)) for c in categories]
    for i, (id_a, rect_a) in enumerate(rects):
        for id_b, rect_b in rects[i + 1 :]:
            if rect_a.overlaps(rect_b):
                raise ValueError(f"Categories {id_a} and {id_b} overlap")
