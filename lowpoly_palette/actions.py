"""Palette state transitions.

Every user action maps to a pure function returning a new
:class:`lowpoly_palette.state.PaletteState`. :func:`apply_action` dispatches a
:class:`PaletteAction` for front ends that route events through a single
entry point.
"""

import logging
from dataclasses import replace
from enum import StrEnum, auto
from typing import Any, Iterable, Optional

from pyrsistent import pset

from lowpoly_palette.catalog.categories import CATEGORY_BY_ID, CATEGORY_IDS
from lowpoly_palette.catalog.colorblind import COLORBLIND_MATRICES
from lowpoly_palette.catalog.themes import DEFAULT_THEME_ID, THEME_REGISTRY
from lowpoly_palette.state import PaletteState
from lowpoly_palette.types import CategoryID, ColorblindMode, ThemeID

logger = logging.getLogger(__name__)


class PaletteAction(StrEnum):
    """String enum of user actions.

    Members:
        TOGGLE_CATEGORY: Flip selection of one category (value: category id).
        SELECT_ALL, CLEAR_ALL: Select or deselect every category.
        SET_THEME: Switch theme (value: theme id).
        SET_WARMTH: Set warmth bias (value: int degrees).
        SET_COLORBLIND_MODE: Switch simulation (value: mode id).
        SET_OMIT_UNSELECTED: Hide or show unselected regions (value: bool).
    """

    TOGGLE_CATEGORY = auto()
    SELECT_ALL = auto()
    CLEAR_ALL = auto()
    SET_THEME = auto()
    SET_WARMTH = auto()
    SET_COLORBLIND_MODE = auto()
    SET_OMIT_UNSELECTED = auto()


def toggle_category(state: PaletteState, category_id: CategoryID) -> PaletteState:
    """Select ``category_id`` if unselected, deselect it otherwise.

    Unknown ids leave the state unchanged.
    """
    if category_id not in CATEGORY_BY_ID:
        logger.debug("Ignoring toggle of unknown category %r", category_id)
        return state
    if category_id in state.selected:
        return replace(state, selected=state.selected.remove(category_id))
    return replace(state, selected=state.selected.add(category_id))


def select_categories(
    state: PaletteState, category_ids: Iterable[CategoryID]
) -> PaletteState:
    """Replace the selection with the known ids among ``category_ids``."""
    return replace(
        state, selected=pset(cid for cid in category_ids if cid in CATEGORY_BY_ID)
    )


def select_all(state: PaletteState) -> PaletteState:
    return replace(state, selected=pset(CATEGORY_IDS))


def clear_all(state: PaletteState) -> PaletteState:
    return replace(state, selected=pset())


def set_theme(state: PaletteState, theme_id: ThemeID) -> PaletteState:
    if theme_id not in THEME_REGISTRY:
        logger.debug("Unknown theme %r, falling back to %r", theme_id, DEFAULT_THEME_ID)
        theme_id = DEFAULT_THEME_ID
    return replace(state, theme_id=theme_id)


def set_warmth(state: PaletteState, warmth: int) -> PaletteState:
    return replace(state, warmth=int(warmth))


def set_colorblind_mode(state: PaletteState, mode: str) -> PaletteState:
    if mode not in COLORBLIND_MATRICES:
        logger.debug("Unknown colorblind mode %r, disabling simulation", mode)
        mode = ColorblindMode.NONE
    return replace(state, colorblind_mode=str(mode))


def set_omit_unselected(state: PaletteState, omit: bool) -> PaletteState:
    return replace(state, omit_unselected=bool(omit))


def apply_action(
    state: PaletteState, action: PaletteAction, value: Optional[Any] = None
) -> PaletteState:
    """Apply one user action and return the next state.

    Args:
        state (PaletteState): Current state.
        action (PaletteAction): Action to apply.
        value (Any | None): Action payload; ignored by ``SELECT_ALL`` and
            ``CLEAR_ALL``.

    Returns:
        PaletteState: The next state.

    Raises:
        ValueError: If the action is not recognized.
    """
    if action == PaletteAction.TOGGLE_CATEGORY:
        return toggle_category(state, value)
    elif action == PaletteAction.SELECT_ALL:
        return select_all(state)
    elif action == PaletteAction.CLEAR_ALL:
        return clear_all(state)
    elif action == PaletteAction.SET_THEME:
        return set_theme(state, value)
    elif action == PaletteAction.SET_WARMTH:
        return set_warmth(state, value)
    elif action == PaletteAction.SET_COLORBLIND_MODE:
        return set_colorblind_mode(state, value)
    elif action == PaletteAction.SET_OMIT_UNSELECTED:
        return set_omit_unselected(state, value)
    raise ValueError("Action is not valid")
