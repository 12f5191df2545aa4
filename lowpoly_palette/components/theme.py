"""Theme and adjustment components.

A :class:`Theme` shifts every category globally and may carry a partial
:class:`Adjustment` per category. Fields left as ``None`` on an
``Adjustment`` take the neutral value of their operator (``0`` for the
additive shifts, ``1`` for the saturation multiplier).
"""

from dataclasses import dataclass, field
from typing import Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from lowpoly_palette.types import CategoryID, ThemeID


@dataclass(frozen=True)
class Adjustment:
    """Partial per-category override."""

    hue_shift: Optional[float] = None
    saturation_multiplier: Optional[float] = None
    lightness_shift: Optional[float] = None


NEUTRAL_ADJUSTMENT = Adjustment()


@dataclass(frozen=True)
class Theme:
    """Named global adjustment preset.

    Attributes:
        id: Registry key.
        name: Display name.
        hue_shift: Signed degrees added to every hue.
        saturation_multiplier: Multiplies every saturation.
        lightness_shift: Signed percent added to every lightness.
        category_overrides: Category id -> partial ``Adjustment`` stacked on top.
    """

    id: ThemeID
    name: str
    hue_shift: float = 0
    saturation_multiplier: float = 1.0
    lightness_shift: float = 0
    category_overrides: PMap[CategoryID, Adjustment] = field(
        default_factory=lambda: pmap()
    )

    def override_for(self, category_id: CategoryID) -> Adjustment:
        return self.category_overrides.get(category_id, NEUTRAL_ADJUSTMENT)


@dataclass(frozen=True)
class ResolvedAdjustment:
    """Fully composed adjustment for one category.

    Attributes:
        hue_adjust: Degrees added to hue before wrapping into ``[0, 360)``.
        sat_multiplier: Saturation factor applied before clamping to ``[0, 100]``.
        light_adjust: Percent added to lightness before clamping to ``[5, 95]``.
    """

    hue_adjust: float = 0
    sat_multiplier: float = 1.0
    light_adjust: float = 0
