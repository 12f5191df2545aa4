import numpy as np

from lowpoly_palette.actions import select_all, set_colorblind_mode, set_theme, set_warmth
from lowpoly_palette.catalog.categories import CATEGORIES, CATEGORY_BY_ID
from lowpoly_palette.layout import tile_rect
from lowpoly_palette.renderer.palette import (
    BACKGROUND_RGB,
    PaletteRenderer,
    compute_palette,
    render,
)
from lowpoly_palette.state import PaletteState
from lowpoly_palette.systems.adjustment import resolve_state_adjustment
from lowpoly_palette.systems.tile_color import generate_category_colors
from tests.test_utils import make_state


def _pixel(image_array: np.ndarray, category_id: str, col: int, row: int) -> tuple:
    # interior pixel of the tile, clear of the 1px region border
    rect = tile_rect(CATEGORY_BY_ID[category_id], col, row)
    x, y = int(rect.left) + 2, int(rect.top) + 2
    return tuple(int(v) for v in image_array[y, x, :3])


def test_render_size_and_mode() -> None:
    image = render(PaletteState())
    assert image.size == (1024, 1024)
    assert image.mode == "RGBA"


def test_omit_with_nothing_selected_renders_no_regions() -> None:
    state = make_state([], omit_unselected=True)
    assert compute_palette(state) == {}
    arr = np.array(render(state))
    assert np.all(arr[..., :3] == BACKGROUND_RGB)
    assert np.all(arr[..., 3] == 255)


def test_selected_region_matches_generated_grid() -> None:
    state = make_state(["wood"], theme_id="sunset", warmth=6)
    expected = generate_category_colors(
        CATEGORY_BY_ID["wood"], resolve_state_adjustment(state, "wood")
    )
    arr = np.array(render(state))
    for col, row in [(1, 1), (5, 3), (20, 40), (46, 46)]:
        assert _pixel(arr, "wood", col, row) == tuple(int(v) for v in expected[row, col])


def test_unselected_region_is_muted_checkerboard() -> None:
    arr = np.array(render(PaletteState(), labels=False))
    assert _pixel(arr, "stone", 0, 0) == (25, 25, 25)
    assert _pixel(arr, "stone", 1, 0) == (20, 20, 20)
    assert _pixel(arr, "stone", 1, 1) == (25, 25, 25)


def test_omitted_region_is_background() -> None:
    state = make_state(["glass"], omit_unselected=True)
    arr = np.array(render(state))
    assert _pixel(arr, "wood", 10, 10) == BACKGROUND_RGB
    assert _pixel(arr, "glass", 10, 10) != BACKGROUND_RGB


def test_colorblind_mode_reaches_raster() -> None:
    state = set_colorblind_mode(make_state(["flowers"]), "achromatopsia")
    arr = np.array(render(state, labels=False))
    r, g, b = _pixel(arr, "flowers", 7, 3)
    assert r == g == b


def test_labels_do_not_touch_regions() -> None:
    state = select_all(PaletteState())
    with_labels = np.array(render(state))
    without_labels = np.array(render(state, labels=False))
    for category in CATEGORIES:
        for col, row in [(1, 1), (category.tiles.width - 2, category.tiles.height - 2)]:
            assert _pixel(with_labels, category.id, col, row) == _pixel(
                without_labels, category.id, col, row
            )


def test_recomputation_is_idempotent() -> None:
    state = set_warmth(set_theme(select_all(PaletteState()), "neon"), -17)
    first = compute_palette(state)
    second = compute_palette(state)
    assert list(first) == [c.id for c in CATEGORIES]
    for category_id, grid in first.items():
        assert grid.tobytes() == second[category_id].tobytes()
    assert render(state).tobytes() == render(state).tobytes()


def test_state_change_replaces_output() -> None:
    state = make_state(["water"])
    before = compute_palette(state)["water"]
    after = compute_palette(set_theme(state, "midnight"))["water"]
    assert not np.array_equal(before, after)
    # previous result untouched
    assert np.array_equal(before, compute_palette(state)["water"])


def test_renderer_class_matches_function() -> None:
    state = make_state(["bark", "ice"], theme_id="pastel")
    assert PaletteRenderer().render(state).tobytes() == render(state).tobytes()
