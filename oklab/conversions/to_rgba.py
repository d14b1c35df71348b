"""Oklab -> linear RGB / premultiplied RGBA."""

import numpy as np
from boundednumbers.functions import clamp01

from ..types.format_type import MAX_16
from . import matrices as M
from .transfer import to_non_linear, np_to_non_linear


def oklab_to_linear_rgb(L: float, a: float, b: float) -> tuple[float, float, float]:
    """Oklab -> Linear RGB via LMS intermediate. May leave [0, 1]."""
    l_, m_, s_ = M.apply(M.OKLAB_TO_LMS, L, a, b)
    l, m, s = l_ * l_ * l_, m_ * m_ * m_, s_ * s_ * s_
    return M.apply(M.LMS_TO_RGB, l, m, s)


def oklab_to_unit_rgb(L: float, a: float, b: float) -> tuple[float, float, float]:
    """Oklab -> gamma-encoded sRGB, unclamped."""
    r_, g_, b_ = oklab_to_linear_rgb(L, a, b)
    return to_non_linear(r_), to_non_linear(g_), to_non_linear(b_)


def oklab_to_rgba64(L: float, a: float, b: float, alpha: float) -> tuple[int, int, int, int]:
    """
    Oklab with straight alpha -> premultiplied 16-bit RGBA.

    Each of r, g, b and alpha is clipped to [0, 1] on its own (no gamut
    mapping), then the color is premultiplied and truncated to integers.
    """
    r, g, b_ = (clamp01(c) for c in oklab_to_unit_rgb(L, a, b))
    alpha = clamp01(alpha)
    return (
        int(alpha * r * MAX_16),
        int(alpha * g * MAX_16),
        int(alpha * b_ * MAX_16),
        int(alpha * MAX_16),
    )


def np_oklab_to_linear_rgb(L: np.ndarray, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Vectorized Oklab -> linear RGB. Returns an array of shape (..., 3)."""
    l_, m_, s_ = M.apply(M.OKLAB_TO_LMS, L, a, b)
    r, g, b_ = M.apply(M.LMS_TO_RGB, l_ * l_ * l_, m_ * m_ * m_, s_ * s_ * s_)
    return np.stack([r, g, b_], axis=-1)


def np_oklab_to_rgba64(lab: np.ndarray) -> np.ndarray:
    """
    Vectorized Oklab -> premultiplied 16-bit RGBA.

    Args:
        lab: Array of shape (..., 4) holding (L, a, b, alpha)

    Returns:
        uint16 array of shape (..., 4)
    """
    lab = np.asarray(lab, dtype=np.float64)
    if lab.shape[-1] != 4:
        raise ValueError(f"oklab expects last dimension to be 4, got shape {lab.shape}")

    rgb = np_oklab_to_linear_rgb(lab[..., 0], lab[..., 1], lab[..., 2])
    rgb = np.clip(np_to_non_linear(rgb), 0.0, 1.0)
    alpha = np.clip(lab[..., 3], 0.0, 1.0)[..., None]

    out = np.concatenate([alpha * rgb * MAX_16, alpha * MAX_16], axis=-1)
    return np.trunc(out).astype(np.uint16)
