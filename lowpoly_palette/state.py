"""Immutable palette ``PaletteState`` dataclass.

This module defines the frozen :class:`PaletteState` that captures every user
choice the palette sheet depends on. User actions never mutate a state in
place; the transition functions in :mod:`lowpoly_palette.actions` return a new
instance and the renderer recomputes the whole sheet from it. Rendering the
same state twice therefore yields byte-identical output.

Design notes:

* ``selected`` is a persistent set (``pyrsistent.PSet``) of category ids. Ids
    are validated against the catalog by the transitions and by
    :func:`lowpoly_palette.persistence.restore`.
* ``theme_id`` and ``colorblind_mode`` are stored as plain strings; lookups
    fail open (neutral theme, pass-through filter) for unknown values.
* ``warmth`` is a signed hue offset in degrees stacked on top of the theme.
"""

from dataclasses import dataclass, field

from pyrsistent import pset
from pyrsistent.typing import PSet

from lowpoly_palette.catalog.themes import DEFAULT_THEME_ID
from lowpoly_palette.types import CategoryID, ColorblindMode, ThemeID


@dataclass(frozen=True)
class PaletteState:
    """Immutable palette configuration.

    Attributes:
        selected (PSet[CategoryID]): Categories rendered in full colour.
        theme_id (ThemeID): Active theme registry key.
        warmth (int): Global additive hue bias in degrees.
        colorblind_mode (str): Active simulation mode (``"none"`` disables it).
        omit_unselected (bool): If True unselected categories are not drawn at
            all; otherwise they render as a muted placeholder checkerboard.
    """

    selected: PSet[CategoryID] = field(default_factory=lambda: pset())
    theme_id: ThemeID = DEFAULT_THEME_ID
    warmth: int = 0
    colorblind_mode: str = ColorblindMode.NONE.value
    omit_unselected: bool = False

    def is_selected(self, category_id: CategoryID) -> bool:
        return category_id in self.selected

    def is_visible(self, category_id: CategoryID) -> bool:
        """True if the category occupies its region on the sheet."""
        return not self.omit_unselected or category_id in self.selected
