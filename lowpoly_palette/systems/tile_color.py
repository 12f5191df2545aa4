"""Tile colour generation system.

Turns a category's HSL ranges into a ``(height, width, 3)`` uint8 grid:

* lightness falls left to right (``light_t = x / max(W-1, 1)``),
* hue runs top to bottom (``hue_t = y / max(H-1, 1)``),
* saturation follows the diagonal (``sat_t = (x+y) / max(W+H-2, 1)``).

The resolved adjustment is applied before conversion: hue wraps into
``[0, 360)``, saturation clamps to ``[0, 100]`` and lightness clamps to
``[5, 95]`` so that extreme themes never collapse a tile to pure black or
white. The colour-blind filter runs last.
"""

from typing import Tuple

import numpy as np

from lowpoly_palette.components import Category, ResolvedAdjustment
from lowpoly_palette.systems.colorblind import apply_colorblind_simulation_grid
from lowpoly_palette.types import RGB, ColorblindMode
from lowpoly_palette.utils.color import (
    FloatArray,
    UInt8Array,
    clamp,
    hsl_to_rgb,
    hsl_to_rgb_np,
    wrap_hue,
)

MIN_LIGHTNESS = 5.0
MAX_LIGHTNESS = 95.0
MIN_SATURATION = 0.0
MAX_SATURATION = 100.0

MUTED_LIGHT = 25
MUTED_DARK = 20

NEUTRAL = ResolvedAdjustment()


def category_hsl_grid(
    category: Category, adjustment: ResolvedAdjustment = NEUTRAL
) -> Tuple[FloatArray, FloatArray, FloatArray]:
    """Return the adjusted (hue, saturation, lightness) planes, each ``(H, W)``."""
    width, height = category.tiles.width, category.tiles.height
    h_lo, h_hi = category.colors.hue_range
    s_lo, s_hi = category.colors.saturation_range
    l_lo, l_hi = category.colors.lightness_range

    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)

    light_t = xs / max(width - 1, 1)
    hue_t = ys / max(height - 1, 1)
    sat_t = (xs + ys) / max(width + height - 2, 1)

    lightness = l_hi - light_t * (l_hi - l_lo)
    hue = h_lo + hue_t * (h_hi - h_lo)
    saturation = s_lo + sat_t * (s_hi - s_lo)

    hue = wrap_hue(hue + adjustment.hue_adjust)
    saturation = np.clip(
        saturation * adjustment.sat_multiplier, MIN_SATURATION, MAX_SATURATION
    )
    lightness = np.clip(
        lightness + adjustment.light_adjust, MIN_LIGHTNESS, MAX_LIGHTNESS
    )
    return hue, saturation, lightness


def generate_category_colors(
    category: Category,
    adjustment: ResolvedAdjustment = NEUTRAL,
    colorblind_mode: str = ColorblindMode.NONE,
) -> UInt8Array:
    """Generate the full RGB grid for a selected category.

    Args:
        category (Category): Category to colour.
        adjustment (ResolvedAdjustment): Output of
            :func:`lowpoly_palette.systems.adjustment.resolve_adjustment`.
        colorblind_mode (str): Simulation applied to every tile.

    Returns:
        UInt8Array: Fresh ``(height, width, 3)`` array indexed ``[y, x]``.
    """
    hue, saturation, lightness = category_hsl_grid(category, adjustment)
    rgb = hsl_to_rgb_np(hue, saturation, lightness)
    return apply_colorblind_simulation_grid(rgb, colorblind_mode)


def generate_muted_colors(category: Category) -> UInt8Array:
    """Placeholder grid for unselected categories: a dark grey checkerboard."""
    ys, xs = np.mgrid[0 : category.tiles.height, 0 : category.tiles.width]
    values = np.where((xs + ys) % 2 == 0, MUTED_LIGHT, MUTED_DARK).astype(np.uint8)
    return np.repeat(values[..., np.newaxis], 3, axis=-1)


def swatch_color(category: Category) -> RGB:
    """Representative colour for list entries (mid hue, boosted saturation)."""
    colors = category.colors
    hue = sum(colors.hue_range) / 2
    sat = clamp(sum(colors.saturation_range) / 2 + 10, 0, 100)
    light = min(sum(colors.lightness_range) / 2, 50)
    return hsl_to_rgb(hue, sat, light)
