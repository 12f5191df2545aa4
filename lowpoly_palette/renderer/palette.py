import logging
from functools import lru_cache
from typing import Dict, Optional, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from lowpoly_palette.catalog.categories import CATEGORIES
from lowpoly_palette.components import Category
from lowpoly_palette.config import DEFAULT_LAYOUT, LayoutConfig
from lowpoly_palette.layout import region_rect, visible_categories
from lowpoly_palette.state import PaletteState
from lowpoly_palette.systems.adjustment import resolve_state_adjustment
from lowpoly_palette.systems.tile_color import (
    generate_category_colors,
    generate_muted_colors,
)
from lowpoly_palette.types import CategoryID
from lowpoly_palette.utils.color import UInt8Array

logger = logging.getLogger(__name__)

BACKGROUND_RGB: Tuple[int, int, int] = (10, 10, 10)

RGBA = Tuple[int, int, int, int]

SELECTED_BORDER: RGBA = (74, 222, 128, round(0.3 * 255))
UNSELECTED_BORDER: RGBA = (255, 255, 255, round(0.05 * 255))
SELECTED_LABEL: RGBA = (74, 222, 128, round(0.95 * 255))
UNSELECTED_LABEL: RGBA = (255, 255, 255, round(0.4 * 255))
LABEL_GAP = 4

PaletteGrids = Dict[CategoryID, UInt8Array]


@lru_cache(maxsize=1)
def _label_font() -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    return ImageFont.load_default()


def category_grid(category: Category, state: PaletteState) -> UInt8Array:
    """Colour grid for one category: full colours if selected, muted otherwise."""
    if not state.is_selected(category.id):
        return generate_muted_colors(category)
    return generate_category_colors(
        category,
        resolve_state_adjustment(state, category.id),
        state.colorblind_mode,
    )


def compute_palette(
    state: PaletteState, categories: Sequence[Category] = CATEGORIES
) -> PaletteGrids:
    """
    Colour grids for every visible category, in catalog order.
    """
    return {c.id: category_grid(c, state) for c in visible_categories(state, categories)}


def _paint_regions(
    canvas: UInt8Array,
    grids: PaletteGrids,
    categories: Sequence[Category],
    config: LayoutConfig,
) -> None:
    tile = config.tile_size
    for category in categories:
        grid = grids.get(category.id)
        if grid is None:
            continue
        rect = region_rect(category, config)
        block = np.repeat(np.repeat(grid, tile, axis=0), tile, axis=1)
        top, left = int(rect.top), int(rect.left)
        canvas[top : top + block.shape[0], left : left + block.shape[1]] = block


def _draw_decorations(
    image: Image.Image,
    state: PaletteState,
    categories: Sequence[Category],
    config: LayoutConfig,
) -> None:
    overlay = Image.new("RGBA", image.size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(overlay)
    font = _label_font()
    for category in categories:
        selected = state.is_selected(category.id)
        rect = region_rect(category, config)
        left, top = int(rect.left), int(rect.top)
        right, bottom = int(rect.right) - 1, int(rect.bottom) - 1
        draw.rectangle(
            [left, top, right, bottom],
            outline=SELECTED_BORDER if selected else UNSELECTED_BORDER,
        )

        # Centered horizontally, bottom edge LABEL_GAP px above the region
        x0, y0, x1, y1 = draw.textbbox((0, 0), category.name, font=font)
        label_x = rect.left + rect.width / 2 - (x1 - x0) / 2 - x0
        label_y = rect.top - LABEL_GAP - y1
        draw.text(
            (label_x, label_y),
            category.name,
            font=font,
            fill=SELECTED_LABEL if selected else UNSELECTED_LABEL,
        )
    image.alpha_composite(overlay)


def render(
    state: PaletteState,
    config: LayoutConfig = DEFAULT_LAYOUT,
    categories: Sequence[Category] = CATEGORIES,
    grids: Optional[PaletteGrids] = None,
    labels: bool = True,
) -> Image.Image:
    """
    Renders a palette state as a fresh RGBA PIL Image of ``config.canvas_size``.

    ``grids`` may be passed to reuse a :func:`compute_palette` result for the
    same state. With ``labels=False`` only the colour regions are drawn.
    """
    if grids is None:
        grids = compute_palette(state, categories)
    shown = [c for c in categories if c.id in grids]

    size = config.canvas_size
    canvas: UInt8Array = np.empty((size, size, 3), dtype=np.uint8)
    canvas[...] = BACKGROUND_RGB
    _paint_regions(canvas, grids, shown, config)

    img = Image.fromarray(canvas).convert("RGBA")
    if labels:
        _draw_decorations(img, state, shown, config)
    logger.debug("Rendered %d of %d regions", len(shown), len(categories))
    return img


class PaletteRenderer:
    config: LayoutConfig
    categories: Sequence[Category]
    labels: bool

    def __init__(
        self,
        config: LayoutConfig = DEFAULT_LAYOUT,
        categories: Sequence[Category] = CATEGORIES,
        labels: bool = True,
    ):
        self.config = config
        self.categories = categories
        self.labels = labels

    def render(self, state: PaletteState) -> Image.Image:
        return render(
            state,
            config=self.config,
            categories=self.categories,
            labels=self.labels,
        )
