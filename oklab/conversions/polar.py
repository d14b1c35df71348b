"""Oklab <-> Oklch (polar form of the a/b plane).

Reference: https://www.w3.org/TR/css-color-4/#lab-to-lch

Hue is in radians. On the scalar functions an undefined hue (achromatic
color) is ``None``; array functions use NaN in its place.
"""

import math
from typing import Optional
import numpy as np


def is_undefined_hue(H: Optional[float]) -> bool:
    """True for the undefined-hue marker, accepting both None and NaN."""
    return H is None or math.isnan(H)


def oklab_to_oklch(L: float, a: float, b: float) -> tuple[float, float, Optional[float]]:
    """Oklab -> Oklch. Returns (L, C, H) with H in (-pi, pi] or None."""
    if a == 0 and b == 0:
        return L, 0.0, None
    return L, math.hypot(a, b), math.atan2(b, a)


def oklch_to_oklab(L: float, C: float, H: Optional[float]) -> tuple[float, float, float]:
    """Oklch -> Oklab. An undefined hue yields a = b = 0 whatever C is."""
    if is_undefined_hue(H):
        return L, 0.0, 0.0
    return L, C * math.cos(H), C * math.sin(H)


def np_oklab_to_oklch(lab: np.ndarray) -> np.ndarray:
    """
    Vectorized Oklab -> Oklch.

    Args:
        lab: Array of shape (..., 3) or (..., 4); a trailing alpha passes through

    Returns:
        float64 array of the same shape holding (L, C, H[, alpha]), H NaN where a == b == 0
    """
    lab = np.asarray(lab, dtype=np.float64)
    a, b = lab[..., 1], lab[..., 2]
    achromatic = (a == 0) & (b == 0)

    out = lab.copy()
    out[..., 1] = np.where(achromatic, 0.0, np.hypot(a, b))
    out[..., 2] = np.where(achromatic, np.nan, np.arctan2(b, a))
    return out


def np_oklch_to_oklab(lch: np.ndarray) -> np.ndarray:
    """
    Vectorized Oklch -> Oklab.

    Args:
        lch: Array of shape (..., 3) or (..., 4); NaN hue marks achromatic entries

    Returns:
        float64 array of the same shape holding (L, a, b[, alpha])
    """
    lch = np.asarray(lch, dtype=np.float64)
    C, H = lch[..., 1], lch[..., 2]
    undefined = np.isnan(H)
    H_safe = np.where(undefined, 0.0, H)

    out = lch.copy()
    out[..., 1] = np.where(undefined, 0.0, C * np.cos(H_safe))
    out[..., 2] = np.where(undefined, 0.0, C * np.sin(H_safe))
    return out
