"""
Oklab Color Space Conversions
=============================

Scalar and vectorized (numpy) conversions between premultiplied 16-bit RGBA,
Oklab and Oklch.

Pipeline
--------
Forward:  RGBA64 -> un-premultiply -> to_linear -> LMS -> cbrt -> Oklab
Inverse:  Oklab -> LMS (cubed) -> linear RGB -> to_non_linear -> clamp -> RGBA64
Polar:    Oklab (a, b) <-> Oklch (C, H), H in radians

Conversion Functions
-------------------

Transfer curve:
    to_linear(x), to_non_linear(x)
    np_to_linear(x), np_to_non_linear(x)

RGB -> Oklab:
    linear_rgb_to_oklab(r, g, b)
    unit_rgb_to_oklab(r, g, b)
    rgba64_to_oklab(r, g, b, a)
    np_linear_rgb_to_oklab(r, g, b)
    np_rgba64_to_oklab(rgba)

Oklab -> RGB:
    oklab_to_linear_rgb(L, a, b)
    oklab_to_unit_rgb(L, a, b)
    oklab_to_rgba64(L, a, b, alpha)
    np_oklab_to_linear_rgb(L, a, b)
    np_oklab_to_rgba64(lab)

Oklab <-> Oklch:
    oklab_to_oklch(L, a, b), oklch_to_oklab(L, C, H)
    np_oklab_to_oklch(lab), np_oklch_to_oklab(lch)

High-Level API
-------------
    convert(color, from_space, to_space)
        Tuple converter between "rgba64", "oklab" and "oklch"
    np_convert(color, from_space, to_space)
        Vectorized converter over (..., 4) arrays

Examples
--------
>>> from oklab.conversions import convert
>>> convert((0, 0, 0, 65535), "rgba64", "oklab")
(0.0, 0.0, 0.0, 1.0)
>>> convert((0.0, 0.0, 0.0, 1.0), "oklab", "rgba64")
(0, 0, 0, 65535)
"""

from .transfer import to_linear, to_non_linear, np_to_linear, np_to_non_linear

from .to_oklab import (
    linear_rgb_to_oklab,
    unit_rgb_to_oklab,
    rgba64_to_oklab,
    np_linear_rgb_to_oklab,
    np_rgba64_to_oklab,
)

from .to_rgba import (
    oklab_to_linear_rgb,
    oklab_to_unit_rgb,
    oklab_to_rgba64,
    np_oklab_to_linear_rgb,
    np_oklab_to_rgba64,
)

from .polar import (
    is_undefined_hue,
    oklab_to_oklch,
    oklch_to_oklab,
    np_oklab_to_oklch,
    np_oklch_to_oklab,
)

# High-level API
from .wrapper import convert, np_convert

__all__ = [
    # Transfer curve
    'to_linear',
    'to_non_linear',
    'np_to_linear',
    'np_to_non_linear',

    # RGB -> Oklab
    'linear_rgb_to_oklab',
    'unit_rgb_to_oklab',
    'rgba64_to_oklab',
    'np_linear_rgb_to_oklab',
    'np_rgba64_to_oklab',

    # Oklab -> RGB
    'oklab_to_linear_rgb',
    'oklab_to_unit_rgb',
    'oklab_to_rgba64',
    'np_oklab_to_linear_rgb',
    'np_oklab_to_rgba64',

    # Oklab <-> Oklch
    'is_undefined_hue',
    'oklab_to_oklch',
    'oklch_to_oklab',
    'np_oklab_to_oklch',
    'np_oklch_to_oklab',

    # High-level API
    'convert',
    'np_convert',
]
