"""Colour-vision deficiency simulation matrices.

Each matrix multiplies an ``(r, g, b)`` column vector in 0-255 space. Rows
give the output channel weights.
"""

from typing import Dict, Optional

from lowpoly_palette.types import ColorblindMode, Matrix3


COLORBLIND_MATRICES: Dict[ColorblindMode, Optional[Matrix3]] = {
    ColorblindMode.NONE: None,
    ColorblindMode.PROTANOPIA: (
        (0.567, 0.433, 0.000),
        (0.558, 0.442, 0.000),
        (0.000, 0.242, 0.758),
    ),
    ColorblindMode.DEUTERANOPIA: (
        (0.625, 0.375, 0.000),
        (0.700, 0.300, 0.000),
        (0.000, 0.300, 0.700),
    ),
    ColorblindMode.TRITANOPIA: (
        (0.950, 0.050, 0.000),
        (0.000, 0.433, 0.567),
        (0.000, 0.475, 0.525),
    ),
    ColorblindMode.ACHROMATOPSIA: (
        (0.299, 0.587, 0.114),
        (0.299, 0.587, 0.114),
        (0.299, 0.587, 0.114),
    ),
}

COLORBLIND_LABELS: Dict[ColorblindMode, str] = {
    ColorblindMode.NONE: "None",
    ColorblindMode.PROTANOPIA: "Protanopia (red-blind)",
    ColorblindMode.DEUTERANOPIA: "Deuteranopia (green-blind)",
    ColorblindMode.TRITANOPIA: "Tritanopia (blue-blind)",
    ColorblindMode.ACHROMATOPSIA: "Achromatopsia (monochrome)",
}


def get_colorblind_matrix(mode: str) -> Optional[Matrix3]:
    """Return the matrix for ``mode``; ``None`` means pass-through."""
    return COLORBLIND_MATRICES.get(mode)  # type: ignore[call-overload]
