"""Static palette data: categories, themes and simulation matrices.

Everything here is read-only configuration consumed at import time. See
:func:`lowpoly_palette.layout.validate_catalog` for the checks to rerun after
editing :data:`CATEGORIES`.
"""

from .categories import CATEGORIES, CATEGORY_BY_ID, CATEGORY_IDS, get_category
from .colorblind import COLORBLIND_LABELS, COLORBLIND_MATRICES, get_colorblind_matrix
from .themes import DEFAULT_THEME_ID, NONE_THEME, THEME_REGISTRY, get_theme

__all__ = [
    "CATEGORIES",
    "CATEGORY_BY_ID",
    "CATEGORY_IDS",
    "COLORBLIND_LABELS",
    "COLORBLIND_MATRICES",
    "DEFAULT_THEME_ID",
    "NONE_THEME",
    "THEME_REGISTRY",
    "get_category",
    "get_colorblind_matrix",
    "get_theme",
]
