"""Colour-blind simulation system.

Applies the active mode's 3x3 matrix to RGB colours. ``none`` and unknown
modes are the identity, so a bad mode id never breaks rendering.
"""

import numpy as np

from lowpoly_palette.catalog.colorblind import get_colorblind_matrix
from lowpoly_palette.types import RGB
from lowpoly_palette.utils.color import UInt8Array


def apply_colorblind_simulation(rgb: RGB, mode: str) -> RGB:
    matrix = get_colorblind_matrix(mode)
    if matrix is None:
        return rgb
    r, g, b = rgb
    out = []
    for row in matrix:
        value = int(np.floor(row[0] * r + row[1] * g + row[2] * b + 0.5))
        out.append(max(0, min(255, value)))
    return (out[0], out[1], out[2])


def apply_colorblind_simulation_grid(grid: UInt8Array, mode: str) -> UInt8Array:
    """Vectorized :func:`apply_colorblind_simulation` over an ``(..., 3)`` array.

    Returns a new array; ``grid`` itself is returned for pass-through modes.
    """
    matrix = get_colorblind_matrix(mode)
    if matrix is None:
        return grid
    m = np.asarray(matrix, dtype=np.float64)
    # Same accumulation order as the scalar path: r*m0 + g*m1 + b*m2
    rgb = grid.astype(np.float64)
    mixed = (
        rgb[..., 0:1] * m[:, 0]
        + rgb[..., 1:2] * m[:, 1]
        + rgb[..., 2:3] * m[:, 2]
    )
    return np.clip(np.floor(mixed + 0.5), 0, 255).astype(np.uint8)
