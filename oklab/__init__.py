"""Oklab: Oklab / Oklch color values and conversions."""

from .colors import (
    ColorBase,
    Oklab,
    Oklch,
    ColorRGBA,
    ColorRGBA64,
    RGBA,
    RGBA64,
    color_convert,
)
from .models import Model, OklabModel, OklchModel, RGBAModel, RGBA64Model
from .conversions import (
    to_linear,
    to_non_linear,
    rgba64_to_oklab,
    oklab_to_rgba64,
    oklab_to_oklch,
    oklch_to_oklab,
    np_rgba64_to_oklab,
    np_oklab_to_rgba64,
    np_oklab_to_oklch,
    np_oklch_to_oklab,
    convert,
    np_convert,
)
from .types.color_types import ColorSpace
from .errors import TransparentColorError
from .utils.interpolate import mix, interpolate_hue

__version__ = "1.0.0"

__all__ = [
    # core color types
    "ColorBase",
    "Oklab",
    "Oklch",
    "ColorRGBA",
    "ColorRGBA64",
    "RGBA",
    "RGBA64",
    "color_convert",

    # models
    "Model",
    "OklabModel",
    "OklchModel",
    "RGBAModel",
    "RGBA64Model",

    # conversions
    "to_linear",
    "to_non_linear",
    "rgba64_to_oklab",
    "oklab_to_rgba64",
    "oklab_to_oklch",
    "oklch_to_oklab",
    "np_rgba64_to_oklab",
    "np_oklab_to_rgba64",
    "np_oklab_to_oklch",
    "np_oklch_to_oklab",
    "convert",
    "np_convert",

    # types and errors
    "ColorSpace",
    "TransparentColorError",

    # mixing
    "mix",
    "interpolate_hue",
]
