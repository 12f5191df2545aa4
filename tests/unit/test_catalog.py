from lowpoly_palette.catalog import (
    CATEGORIES,
    CATEGORY_BY_ID,
    CATEGORY_IDS,
    COLORBLIND_LABELS,
    COLORBLIND_MATRICES,
    NONE_THEME,
    THEME_REGISTRY,
    get_category,
    get_colorblind_matrix,
    get_theme,
)
from lowpoly_palette.types import ColorblindMode


def test_catalog_sizes() -> None:
    assert len(CATEGORIES) == 47
    assert len(set(CATEGORY_IDS)) == len(CATEGORIES)
    assert len(THEME_REGISTRY) == 9
    assert set(COLORBLIND_MATRICES) == set(ColorblindMode)
    assert set(COLORBLIND_LABELS) == set(ColorblindMode)


def test_catalog_order_preserved() -> None:
    assert CATEGORY_IDS[:3] == ("wood", "bark", "metal_raw")
    assert CATEGORY_IDS[-1] == "sand_variants"


def test_get_category() -> None:
    assert get_category("moss") is CATEGORY_BY_ID["moss"]
    assert get_category("adamantium") is None


def test_get_theme_fails_open() -> None:
    assert get_theme("sunset").name == "Sunset"
    assert get_theme("vaporwave") is NONE_THEME


def test_theme_overrides_reference_known_categories() -> None:
    for theme in THEME_REGISTRY.values():
        for category_id in theme.category_overrides:
            assert category_id in CATEGORY_BY_ID, (theme.id, category_id)


def test_colorblind_matrix_lookup() -> None:
    assert get_colorblind_matrix("none") is None
    assert get_colorblind_matrix("unknown") is None
    matrix = get_colorblind_matrix("protanopia")
    assert matrix is not None and len(matrix) == 3
