"""Premultiplied RGBA / linear RGB -> Oklab."""

import math
import numpy as np

from ..errors import TransparentColorError
from ..types.format_type import MAX_16
from . import matrices as M
from .transfer import to_linear, np_to_linear


def linear_rgb_to_oklab(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Linear RGB -> Oklab via LMS intermediate."""
    l, m, s = M.apply(M.RGB_TO_LMS, r, g, b)
    # Real cube root; negative LMS only appears for out-of-gamut linear input
    l_, m_, s_ = math.cbrt(l), math.cbrt(m), math.cbrt(s)
    return M.apply(M.LMS_TO_OKLAB, l_, m_, s_)


def unit_rgb_to_oklab(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Gamma-encoded sRGB in [0, 1] (straight alpha) -> Oklab."""
    return linear_rgb_to_oklab(to_linear(r), to_linear(g), to_linear(b))


def rgba64_to_oklab(r32: int, g32: int, b32: int, a32: int) -> tuple[float, float, float, float]:
    """
    Premultiplied 16-bit RGBA -> Oklab with straight alpha.

    Args:
        r32, g32, b32: Premultiplied channels in [0, 65535]
        a32: Alpha in [0, 65535]

    Returns:
        (L, a, b, alpha) tuple, alpha in [0, 1]

    Raises:
        TransparentColorError: if a32 is 0; a fully transparent pixel cannot
            be un-premultiplied.
    """
    if a32 == 0:
        raise TransparentColorError(
            f"cannot un-premultiply fully transparent color {(r32, g32, b32, a32)!r}"
        )
    L, a, b = unit_rgb_to_oklab(r32 / a32, g32 / a32, b32 / a32)
    return L, a, b, a32 / MAX_16


def np_linear_rgb_to_oklab(r: np.ndarray, g: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Vectorized linear RGB -> Oklab. Returns an array of shape (..., 3)."""
    l, m, s = M.apply(M.RGB_TO_LMS, r, g, b)
    L, a, b_ = M.apply(M.LMS_TO_OKLAB, np.cbrt(l), np.cbrt(m), np.cbrt(s))
    return np.stack([L, a, b_], axis=-1)


def np_rgba64_to_oklab(rgba: np.ndarray) -> np.ndarray:
    """
    Vectorized premultiplied 16-bit RGBA -> Oklab.

    Args:
        rgba: Array of shape (..., 4) with channels in [0, 65535]

    Returns:
        float64 array of shape (..., 4) holding (L, a, b, alpha)

    Raises:
        TransparentColorError: if any pixel has zero alpha.
    """
    rgba = np.asarray(rgba, dtype=np.float64)
    if rgba.shape[-1] != 4:
        raise ValueError(f"rgba64 expects last dimension to be 4, got shape {rgba.shape}")

    alpha = rgba[..., 3]
    if np.any(alpha == 0):
        raise TransparentColorError(
            f"cannot un-premultiply {int(np.count_nonzero(alpha == 0))} fully transparent pixel(s)"
        )

    r = np_to_linear(rgba[..., 0] / alpha)
    g = np_to_linear(rgba[..., 1] / alpha)
    b = np_to_linear(rgba[..., 2] / alpha)
    lab = np_linear_rgb_to_oklab(r, g, b)
    return np.concatenate([lab, (alpha / MAX_16)[..., None]], axis=-1)
