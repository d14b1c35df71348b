"""
Color mixing in Oklab / Oklch.

Hue rules follow CSS Color 4 interpolation: a missing (undefined) hue takes
the other endpoint's hue, and the hue arc is chosen by direction.
"""

import math
from typing import Any, Optional

from boundednumbers.functions import cyclic_wrap_float

from ..colors.color_base import ColorBase
from ..colors.oklab import Oklab
from ..colors.oklch import Oklch
from ..models import OklabModel, OklchModel
from ..types.color_types import ColorSpace, HueDirection

TAU = 2 * math.pi


def _lerp(x0: float, x1: float, t: float) -> float:
    return x0 + (x1 - x0) * t


def _wrap(h: float) -> float:
    """Wrap an angle into [-pi, pi)."""
    h = cyclic_wrap_float(h, -math.pi, math.pi)
    # just below -pi can round up to pi
    return -math.pi if h >= math.pi else h


def interpolate_hue(
    h0: Optional[float],
    h1: Optional[float],
    t: float,
    direction: HueDirection = "shortest",
) -> Optional[float]:
    """
    Interpolate between two hue angles in radians.

    Args:
        h0: Start hue, or None if undefined
        h1: End hue, or None if undefined
        t: Interpolation coefficient, 0 gives h0 and 1 gives h1
        direction: 'shortest', 'longest', 'increasing' or 'decreasing'

    Returns:
        Interpolated hue in [-pi, pi), or None when both hues are undefined
    """
    if h0 is None and h1 is None:
        return None
    if h0 is None:
        h0 = h1
    elif h1 is None:
        h1 = h0

    # delta in [0, 2pi)
    delta = (h1 - h0) % TAU
    if direction == "shortest":
        if delta > math.pi:
            delta -= TAU
    elif direction == "longest":
        if 0 < delta < math.pi:
            delta -= TAU
    elif direction == "increasing":
        pass
    elif direction == "decreasing":
        if delta > 0:
            delta -= TAU
    else:
        raise ValueError(f"Invalid hue direction: {direction}")

    return _wrap(h0 + delta * t)


def mix(
    c0: Any,
    c1: Any,
    t: float = 0.5,
    space: ColorSpace | str = ColorSpace.OKLAB,
    hue_direction: HueDirection = "shortest",
) -> ColorBase:
    """
    Linearly interpolate two colors in Oklab or Oklch.

    Both endpoints may be any color the models accept. Alpha is interpolated
    straight (not premultiplied).

    Args:
        c0: Start color
        c1: End color
        t: Interpolation coefficient; not clamped, so values outside [0, 1]
            extrapolate
        space: "oklab" (default) or "oklch"
        hue_direction: Hue arc for "oklch", see :func:`interpolate_hue`

    Returns:
        An Oklab or Oklch instance
    """
    space = space.lower()
    if space == ColorSpace.OKLAB:
        p, q = OklabModel.convert(c0), OklabModel.convert(c1)
        return Oklab(tuple(_lerp(x0, x1, t) for x0, x1 in zip(p.value, q.value)))

    if space == ColorSpace.OKLCH:
        p, q = OklchModel.convert(c0), OklchModel.convert(c1)
        H = interpolate_hue(p.H, q.H, t, hue_direction)
        return Oklch((
            _lerp(p.L, q.L, t),
            _lerp(p.C, q.C, t) if H is not None else 0.0,
            H,
            _lerp(p.alpha, q.alpha, t),
        ))

    raise ValueError(f"Unsupported mixing space: {space!r}")
