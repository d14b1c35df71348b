"""
Oklab Color Classes
===================

Immutable color value types for Oklab, Oklch and premultiplied sRGB.

Usage
-----
>>> from oklab.colors import Oklab, RGBA
>>> red = RGBA((255, 0, 0, 255))
>>> lab = red.convert("oklab")
>>> round(lab.L, 4)
0.628
>>> lch = lab.convert("oklch")
>>> round(lch.hue_degrees, 1)
29.2

Color Classes
-------------
    - Oklab: (L, a, b, alpha), unbounded float channels
    - Oklch: (L, C, H, alpha), H in radians or None when achromatic
    - ColorRGBA / RGBA: premultiplied sRGB, 8 bits per channel
    - ColorRGBA64 / RGBA64: premultiplied sRGB, 16 bits per channel

Notes
-----
- Instances are frozen after initialization and compare by value
- A 3-channel tuple gets an opaque alpha appended
- sRGB channels are truncated to int and clamped to the channel maximum
- Every class exposes ``rgba()`` -> premultiplied 16-bit RGBA tuple
"""

from .color_base import ColorBase, WithAlpha
from .oklab import Oklab
from .oklch import Oklch
from .rgba import ColorRGBA, ColorRGBA64, RGBA, RGBA64
from .color import color_convert, convert_color, get_color_class, unified_space_to_class


__all__ = [
    'ColorBase',
    'WithAlpha',
    'Oklab',
    'Oklch',
    'ColorRGBA',
    'ColorRGBA64',
    'RGBA',
    'RGBA64',
    'color_convert',
    'convert_color',
    'get_color_class',
    'unified_space_to_class',
]
