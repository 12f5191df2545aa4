import numpy as np
import pytest

from lowpoly_palette.catalog.colorblind import COLORBLIND_MATRICES
from lowpoly_palette.systems.colorblind import (
    apply_colorblind_simulation,
    apply_colorblind_simulation_grid,
)
from lowpoly_palette.types import ColorblindMode

SAMPLES = [(0, 0, 0), (255, 255, 255), (255, 0, 0), (12, 200, 99), (128, 64, 250)]


@pytest.mark.parametrize("rgb", SAMPLES)
def test_none_is_identity(rgb: tuple[int, int, int]) -> None:
    assert apply_colorblind_simulation(rgb, "none") == rgb
    assert apply_colorblind_simulation(rgb, ColorblindMode.NONE) == rgb


def test_unknown_mode_fails_open() -> None:
    assert apply_colorblind_simulation((1, 2, 3), "tetrachromacy") == (1, 2, 3)
    grid = np.array([[[1, 2, 3]]], dtype=np.uint8)
    assert np.array_equal(apply_colorblind_simulation_grid(grid, "bogus"), grid)


def test_achromatopsia_luma() -> None:
    assert apply_colorblind_simulation((255, 0, 0), "achromatopsia") == (76, 76, 76)


def test_deuteranopia_rounds_half_up() -> None:
    assert apply_colorblind_simulation((100, 200, 50), "deuteranopia") == (138, 130, 95)


def test_white_stays_white() -> None:
    for mode in COLORBLIND_MATRICES:
        assert apply_colorblind_simulation((255, 255, 255), mode) == (255, 255, 255)


@pytest.mark.parametrize("mode", [m for m in ColorblindMode])
def test_grid_matches_scalar(mode: ColorblindMode) -> None:
    rng = np.random.default_rng(7)
    grid = rng.integers(0, 256, size=(6, 5, 3), dtype=np.uint8)
    out = apply_colorblind_simulation_grid(grid, mode)
    assert out.shape == grid.shape
    assert out.dtype == np.uint8
    for y in range(grid.shape[0]):
        for x in range(grid.shape[1]):
            r, g, b = (int(v) for v in grid[y, x])
            assert tuple(int(v) for v in out[y, x]) == apply_colorblind_simulation(
                (r, g, b), mode
            )


def test_grid_input_not_mutated() -> None:
    grid = np.full((2, 2, 3), 200, dtype=np.uint8)
    grid[0, 0] = (255, 0, 0)
    before = grid.copy()
    apply_colorblind_simulation_grid(grid, "protanopia")
    assert np.array_equal(grid, before)
