"""Adjustment composition system.

Stacks three layers into one :class:`ResolvedAdjustment` per category:

1. the active theme's global shifts,
2. the theme's override for the category (neutral if absent),
3. the global warmth bias (hue only).

Hue and lightness layers add; saturation layers multiply.
"""

from lowpoly_palette.catalog.themes import get_theme
from lowpoly_palette.components import ResolvedAdjustment, Theme
from lowpoly_palette.state import PaletteState
from lowpoly_palette.types import CategoryID


def resolve_adjustment(
    theme: Theme, category_id: CategoryID, warmth: float = 0
) -> ResolvedAdjustment:
    override = theme.override_for(category_id)
    hue_shift = override.hue_shift if override.hue_shift is not None else 0
    sat_mult = (
        override.saturation_multiplier
        if override.saturation_multiplier is not None
        else 1.0
    )
    light_shift = override.lightness_shift if override.lightness_shift is not None else 0
    return ResolvedAdjustment(
        hue_adjust=theme.hue_shift + hue_shift + warmth,
        sat_multiplier=theme.saturation_multiplier * sat_mult,
        light_adjust=theme.lightness_shift + light_shift,
    )


def resolve_state_adjustment(
    state: PaletteState, category_id: CategoryID
) -> ResolvedAdjustment:
    """Resolve using the state's theme id (unknown ids act as ``none``) and warmth."""
    return resolve_adjustment(get_theme(state.theme_id), category_id, state.warmth)
