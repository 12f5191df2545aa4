import pytest
from pyrsistent import pmap

from lowpoly_palette.catalog.themes import (
    MIDNIGHT_THEME,
    NONE_THEME,
    SUNSET_THEME,
    THEME_REGISTRY,
)
from lowpoly_palette.components import Adjustment, ResolvedAdjustment, Theme
from lowpoly_palette.systems.adjustment import (
    resolve_adjustment,
    resolve_state_adjustment,
)
from tests.test_utils import make_state


def test_none_theme_is_neutral() -> None:
    assert resolve_adjustment(NONE_THEME, "wood") == ResolvedAdjustment(0, 1.0, 0)


def test_warmth_adds_to_hue_only() -> None:
    adj = resolve_adjustment(NONE_THEME, "wood", warmth=12)
    assert adj.hue_adjust == 12
    assert adj.sat_multiplier == 1.0
    assert adj.light_adjust == 0


def test_theme_and_override_stack() -> None:
    adj = resolve_adjustment(SUNSET_THEME, "wood")
    assert adj.hue_adjust == -10
    assert adj.sat_multiplier == pytest.approx(1.1 * 1.2)
    assert adj.light_adjust == 5


def test_partial_override_uses_neutral_defaults() -> None:
    # sunset water overrides hue and lightness only
    adj = resolve_adjustment(SUNSET_THEME, "water")
    assert adj.hue_adjust == -80
    assert adj.sat_multiplier == pytest.approx(1.1)
    assert adj.light_adjust == 15


def test_category_without_override_gets_theme_globals() -> None:
    adj = resolve_adjustment(SUNSET_THEME, "bark", warmth=-5)
    assert adj.hue_adjust == -25
    assert adj.sat_multiplier == pytest.approx(1.1)
    assert adj.light_adjust == 5


def test_all_three_layers() -> None:
    adj = resolve_adjustment(MIDNIGHT_THEME, "water", warmth=15)
    assert adj.hue_adjust == 60 + 40 + 15
    assert adj.sat_multiplier == pytest.approx(0.6)
    assert adj.light_adjust == -40


def test_custom_theme_override() -> None:
    theme = Theme(
        id="custom",
        name="Custom",
        hue_shift=5,
        saturation_multiplier=2.0,
        lightness_shift=-3,
        category_overrides=pmap({"x": Adjustment(saturation_multiplier=0.25)}),
    )
    assert resolve_adjustment(theme, "x") == ResolvedAdjustment(5, 0.5, -3)
    assert resolve_adjustment(theme, "y") == ResolvedAdjustment(5, 2.0, -3)


def test_resolve_is_idempotent() -> None:
    for theme in THEME_REGISTRY.values():
        first = resolve_adjustment(theme, "foliage", warmth=7)
        second = resolve_adjustment(theme, "foliage", warmth=7)
        assert first == second


def test_state_adjustment_uses_state_theme_and_warmth() -> None:
    state = make_state(theme_id="sunset", warmth=10)
    assert resolve_state_adjustment(state, "wood") == resolve_adjustment(
        SUNSET_THEME, "wood", warmth=10
    )


def test_state_adjustment_unknown_theme_is_neutral() -> None:
    state = make_state(theme_id="does_not_exist", warmth=3)
    assert resolve_state_adjustment(state, "wood") == ResolvedAdjustment(3, 1.0, 0)
