"""Theme table.

Each theme applies a global hue/saturation/lightness shift and may refine
individual categories through ``category_overrides``. Lookups through
:func:`get_theme` fail open to the neutral ``none`` theme.
"""

import logging
from typing import Dict

from pyrsistent import pmap

from lowpoly_palette.components import Adjustment, Theme
from lowpoly_palette.types import ThemeID

logger = logging.getLogger(__name__)


DEFAULT_THEME_ID: ThemeID = "none"

NONE_THEME = Theme(id=DEFAULT_THEME_ID, name="None (Default)")

SUNSET_THEME = Theme(
    id="sunset",
    name="Sunset",
    hue_shift=-20,
    saturation_multiplier=1.1,
    lightness_shift=5,
    category_overrides=pmap(
        {
            "wood": Adjustment(hue_shift=10, saturation_multiplier=1.2),
            "foliage": Adjustment(hue_shift=-30, saturation_multiplier=1.3),
            "water": Adjustment(hue_shift=-60, lightness_shift=10),
            "stone": Adjustment(hue_shift=15, saturation_multiplier=0.8),
            "emissive": Adjustment(hue_shift=-30, saturation_multiplier=1.4),
        }
    ),
)

ICY_THEME = Theme(
    id="icy",
    name="Icy / Winter",
    hue_shift=30,
    saturation_multiplier=0.7,
    lightness_shift=15,
    category_overrides=pmap(
        {
            "wood": Adjustment(saturation_multiplier=0.5, lightness_shift=-10),
            "foliage": Adjustment(hue_shift=60, saturation_multiplier=0.4),
            "water": Adjustment(hue_shift=20, lightness_shift=20),
            "stone": Adjustment(saturation_multiplier=0.3, lightness_shift=20),
            "grass": Adjustment(hue_shift=40, saturation_multiplier=0.3),
        }
    ),
)

RUSTIC_THEME = Theme(
    id="rustic",
    name="Rustic / Earthy",
    hue_shift=10,
    saturation_multiplier=0.85,
    lightness_shift=-10,
    category_overrides=pmap(
        {
            "wood": Adjustment(saturation_multiplier=1.3, lightness_shift=-5),
            "metal_raw": Adjustment(hue_shift=20, saturation_multiplier=1.2),
            "stone": Adjustment(hue_shift=15, saturation_multiplier=0.9),
            "dirt": Adjustment(saturation_multiplier=1.2),
            "foliage": Adjustment(hue_shift=20, saturation_multiplier=0.7),
        }
    ),
)

TROPICAL_THEME = Theme(
    id="tropical",
    name="Tropical",
    hue_shift=-10,
    saturation_multiplier=1.3,
    lightness_shift=5,
    category_overrides=pmap(
        {
            "foliage": Adjustment(saturation_multiplier=1.5, lightness_shift=10),
            "water": Adjustment(saturation_multiplier=1.4, lightness_shift=15),
            "flowers": Adjustment(saturation_multiplier=1.5),
            "sand": Adjustment(hue_shift=-10, lightness_shift=10),
        }
    ),
)

MIDNIGHT_THEME = Theme(
    id="midnight",
    name="Midnight",
    hue_shift=60,
    saturation_multiplier=0.6,
    lightness_shift=-25,
    category_overrides=pmap(
        {
            "emissive": Adjustment(saturation_multiplier=1.5, lightness_shift=20),
            "water": Adjustment(hue_shift=40, lightness_shift=-15),
            "foliage": Adjustment(saturation_multiplier=0.4, lightness_shift=-20),
            "magic": Adjustment(saturation_multiplier=1.6, lightness_shift=15),
        }
    ),
)

AUTUMN_THEME = Theme(
    id="autumn",
    name="Autumn",
    hue_shift=-15,
    saturation_multiplier=1.1,
    lightness_shift=-5,
    category_overrides=pmap(
        {
            "foliage": Adjustment(hue_shift=-40, saturation_multiplier=1.4),
            "grass": Adjustment(hue_shift=-50, saturation_multiplier=1.2),
            "wood": Adjustment(hue_shift=-10, saturation_multiplier=1.1),
        }
    ),
)

PASTEL_THEME = Theme(
    id="pastel",
    name="Pastel",
    saturation_multiplier=0.5,
    lightness_shift=25,
)

NEON_THEME = Theme(
    id="neon",
    name="Neon / Cyberpunk",
    saturation_multiplier=1.5,
    category_overrides=pmap(
        {
            "emissive": Adjustment(saturation_multiplier=1.8, lightness_shift=15),
            "magic": Adjustment(saturation_multiplier=1.8, lightness_shift=10),
            "plastic": Adjustment(saturation_multiplier=1.6, lightness_shift=10),
            "metal_raw": Adjustment(hue_shift=60, saturation_multiplier=0.3),
        }
    ),
)

THEME_REGISTRY: Dict[ThemeID, Theme] = {
    theme.id: theme
    for theme in (
        NONE_THEME,
        SUNSET_THEME,
        ICY_THEME,
        RUSTIC_THEME,
        TROPICAL_THEME,
        MIDNIGHT_THEME,
        AUTUMN_THEME,
        PASTEL_THEME,
        NEON_THEME,
    )
}


def get_theme(theme_id: ThemeID) -> Theme:
    """Return the registered theme, or the neutral theme for unknown ids."""
    theme = THEME_REGISTRY.get(theme_id)
    if theme is None:
        logger.debug("Unknown theme %r, using %r", theme_id, DEFAULT_THEME_ID)
        return NONE_THEME
    return theme
