"""HSL colour helpers.

Channel rounding is half-up (``floor(v + 0.5)``) everywhere so that grid
generation and single-colour helpers agree on ``.5`` boundaries.
"""

import colorsys
import numpy as np
import numpy.typing as npt
from typing import Tuple

from lowpoly_palette.types import RGB

# Type aliases for clarity
FloatArray = npt.NDArray[np.float64]
UInt8Array = npt.NDArray[np.uint8]


def round_half_up(value: float) -> int:
    return int(np.floor(value + 0.5))


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def wrap_hue(hue: FloatArray) -> FloatArray:
    """Normalize hue degrees into ``[0, 360)``, wrapping negatives forward."""
    wrapped: FloatArray = np.mod(hue, 360.0)
    # np.mod can land exactly on 360.0 for tiny negative inputs
    return np.where(wrapped >= 360.0, 0.0, wrapped)


def _hue_to_rgb_np(p: FloatArray, q: FloatArray, t: FloatArray) -> FloatArray:
    t = np.where(t < 0.0, t + 1.0, t)
    t = np.where(t > 1.0, t - 1.0, t)
    return np.where(
        t < 1.0 / 6.0,
        p + (q - p) * 6.0 * t,
        np.where(
            t < 0.5,
            q,
            np.where(t < 2.0 / 3.0, p + (q - p) * (2.0 / 3.0 - t) * 6.0, p),
        ),
    )


def hsl_to_rgb_np(
    hue: FloatArray, saturation: FloatArray, lightness: FloatArray
) -> UInt8Array:
    """
    Vectorized HSL->RGB. Hue in degrees, saturation/lightness in percent.
    Returns a uint8 array with a trailing channel axis of length 3.
    """
    h: FloatArray = np.asarray(hue, dtype=np.float64) / 360.0
    s: FloatArray = np.asarray(saturation, dtype=np.float64) / 100.0
    l: FloatArray = np.asarray(lightness, dtype=np.float64) / 100.0

    q: FloatArray = np.where(l < 0.5, l * (1.0 + s), l + s - l * s)
    p: FloatArray = 2.0 * l - q

    achromatic = s == 0.0
    r: FloatArray = np.where(achromatic, l, _hue_to_rgb_np(p, q, h + 1.0 / 3.0))
    g: FloatArray = np.where(achromatic, l, _hue_to_rgb_np(p, q, h))
    b: FloatArray = np.where(achromatic, l, _hue_to_rgb_np(p, q, h - 1.0 / 3.0))

    rgb: FloatArray = np.stack([r, g, b], axis=-1)
    return np.clip(np.floor(rgb * 255.0 + 0.5), 0, 255).astype(np.uint8)


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> RGB:
    """Single-colour HSL->RGB (degrees, percent, percent)."""
    r, g, b = colorsys.hls_to_rgb(
        (hue % 360.0) / 360.0, lightness / 100.0, saturation / 100.0
    )
    return (
        int(clamp(round_half_up(r * 255), 0, 255)),
        int(clamp(round_half_up(g * 255), 0, 255)),
        int(clamp(round_half_up(b * 255), 0, 255)),
    )


def hex_color(rgb: Tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)
