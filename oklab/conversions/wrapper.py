import numpy as np
from typing import Callable, cast

from ..types.color_types import ColorElement, ColorSpace, element_to_array
from .to_oklab import rgba64_to_oklab, np_rgba64_to_oklab
from .to_rgba import oklab_to_rgba64, np_oklab_to_rgba64
from .polar import oklab_to_oklch, oklch_to_oklab, np_oklab_to_oklch, np_oklch_to_oklab

TUPLE_SPACES = (ColorSpace.RGBA64, ColorSpace.OKLAB, ColorSpace.OKLCH)


def _to_oklab(color: tuple, space: ColorSpace) -> tuple:
    if space == ColorSpace.OKLAB:
        return tuple(float(v) for v in color)
    if space == ColorSpace.OKLCH:
        L, C, H, alpha = color
        return oklch_to_oklab(L, C, H) + (float(alpha),)
    return rgba64_to_oklab(*(int(v) for v in color))


def _from_oklab(lab: tuple, space: ColorSpace) -> tuple:
    if space == ColorSpace.OKLAB:
        return lab
    if space == ColorSpace.OKLCH:
        L, a, b, alpha = lab
        return oklab_to_oklch(L, a, b) + (alpha,)
    return oklab_to_rgba64(*lab)


# Everything goes through Oklab, which is the pivot space
FROM_OKLAB_NUMPY: dict[ColorSpace, Callable[[np.ndarray], np.ndarray]] = {
    ColorSpace.OKLAB: lambda lab: lab,
    ColorSpace.OKLCH: np_oklab_to_oklch,
    ColorSpace.RGBA64: np_oklab_to_rgba64,
}

TO_OKLAB_NUMPY: dict[ColorSpace, Callable[[np.ndarray], np.ndarray]] = {
    ColorSpace.OKLAB: lambda lab: lab,
    ColorSpace.OKLCH: np_oklch_to_oklab,
    ColorSpace.RGBA64: np_rgba64_to_oklab,
}


def normalize_space(space: str) -> ColorSpace:
    try:
        resolved = ColorSpace(space.lower())
    except ValueError:
        raise ValueError(f"Unknown color space: {space!r}") from None
    if resolved not in TUPLE_SPACES:
        raise ValueError(
            f"Color space {space!r} has no tuple form; expected one of "
            f"{[s.value for s in TUPLE_SPACES]}"
        )
    return resolved


def convert(
    color: ColorElement,
    from_space: str,
    to_space: str,
) -> ColorElement:
    """
    Convert a raw 4-channel tuple between rgba64, oklab and oklch.

    rgba64 is premultiplied 16-bit RGBA; oklab is (L, a, b, alpha);
    oklch is (L, C, H, alpha) with H in radians or None.
    """
    fs, ts = normalize_space(from_space), normalize_space(to_space)
    if len(color) != 4:
        raise ValueError(f"{fs.value} expects a 4-channel tuple, got {color!r}")
    if fs == ts:
        return color  # No conversion needed
    return cast(ColorElement, _from_oklab(_to_oklab(tuple(color), fs), ts))


def np_convert(
    color: np.ndarray,
    from_space: str,
    to_space: str,
) -> np.ndarray:
    """Vectorized :func:`convert` over arrays of shape (..., 4)."""
    fs, ts = normalize_space(from_space), normalize_space(to_space)
    if fs == ts:
        return color  # No conversion needed
    arr = element_to_array(color) if isinstance(color, tuple) else np.asarray(color)
    if arr.shape[-1] != 4:
        raise ValueError(f"{fs.value} expects last dimension to be 4, got shape {arr.shape}")
    lab = TO_OKLAB_NUMPY[fs](arr.astype(np.float64))
    return FROM_OKLAB_NUMPY[ts](lab)
