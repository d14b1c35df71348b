from __future__ import annotations
from .color_base import ColorBase, build_registry
from .oklab import Oklab
from .oklch import Oklch
from .rgba import ColorRGBA, ColorRGBA64
from ..types.color_types import ColorSpace

unified_space_to_class: dict[ColorSpace, type[ColorBase]] = build_registry(
    Oklab,
    Oklch,
    ColorRGBA,
    ColorRGBA64,
)


def get_color_class(color_space: ColorSpace | str) -> type[ColorBase]:
    try:
        space = ColorSpace(color_space.lower())
    except ValueError:
        raise ValueError(f"Unsupported color space: {color_space!r}") from None
    return unified_space_to_class[space]


def color_convert(self: ColorBase, to_space: ColorSpace | str | None = None) -> ColorBase:
    """
    Convert this color to another color space.

    Args:
        to_space: Target color space ("oklab", "oklch", "rgba", "rgba64").
            Defaults to the color's own space.

    Returns:
        New ColorBase instance in the target space, or ``self`` when no
        conversion is needed.
    """
    from ..models import MODELS  # local import to avoid cycles

    cls = get_color_class(to_space or self.mode)
    return MODELS[cls.mode].convert(self)


ColorBase.convert = color_convert


def convert_color(value, color_space: ColorSpace | str) -> ColorBase:
    """Build a color of ``color_space`` from a ColorBase or a raw channel tuple."""
    color_class = get_color_class(color_space)
    if isinstance(value, ColorBase):
        return value.convert(color_class.mode)
    return color_class(value)
