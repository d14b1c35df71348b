"""
Color models: normalize a color of any kind into one specific color type.

A model is a stateless object with a single ``convert`` method. Dispatch is
on the color's ``mode`` tag; anything without a known tag only needs an
``rgba()`` method returning premultiplied 16-bit RGBA.

>>> from oklab import OklabModel, RGBAModel, RGBA
>>> red = OklabModel.convert(RGBA((255, 0, 0, 255)))
>>> RGBAModel.convert(red)
ColorRGBA(r=255, g=0, b=0, alpha=255)
"""

from __future__ import annotations
from typing import Any, Callable, Generic, TypeVar

from .colors.oklab import Oklab
from .colors.oklch import Oklch
from .colors.rgba import ColorRGBA, ColorRGBA64
from .conversions import rgba64_to_oklab
from .types.color_types import ColorSpace, RGBA64Tuple
from .types.format_type import channel_shift

T = TypeVar('T')


class Model(Generic[T]):
    """Wraps a conversion function; holds no state of its own."""

    __slots__ = ('_func', 'name')

    def __init__(self, func: Callable[[Any], T], name: str) -> None:
        self._func = func
        self.name = name

    def convert(self, color: Any) -> T:
        return self._func(color)

    def __repr__(self) -> str:
        return f"<Model {self.name}>"


def _rgba64_of(color: Any) -> RGBA64Tuple:
    rgba = getattr(color, "rgba", None)
    if not callable(rgba):
        raise TypeError(
            f"{type(color).__name__} is not a color: expected an Oklab/Oklch value "
            f"or an object with an rgba() method"
        )
    return rgba()


def oklab_model_func(color: Any) -> Oklab:
    match getattr(color, "mode", None):
        case ColorSpace.OKLAB:
            return color
        case ColorSpace.OKLCH:
            return color.oklab()
        case _:
            return Oklab(rgba64_to_oklab(*_rgba64_of(color)))


def oklch_model_func(color: Any) -> Oklch:
    match getattr(color, "mode", None):
        case ColorSpace.OKLCH:
            return color
        case _:
            return oklab_model_func(color).oklch()


def _narrowing_model_func(cls: type[ColorRGBA]) -> Callable[[Any], ColorRGBA]:
    shift = channel_shift[cls.depth]

    def model_func(color: Any) -> ColorRGBA:
        if getattr(color, "mode", None) == cls.mode:
            return color
        return cls(tuple(v >> shift for v in _rgba64_of(color)))

    return model_func


OklabModel: Model[Oklab] = Model(oklab_model_func, ColorSpace.OKLAB.value)
OklchModel: Model[Oklch] = Model(oklch_model_func, ColorSpace.OKLCH.value)
RGBAModel: Model[ColorRGBA] = Model(_narrowing_model_func(ColorRGBA), ColorSpace.RGBA.value)
RGBA64Model: Model[ColorRGBA64] = Model(_narrowing_model_func(ColorRGBA64), ColorSpace.RGBA64.value)

MODELS: dict[ColorSpace, Model] = {
    ColorSpace.OKLAB: OklabModel,
    ColorSpace.OKLCH: OklchModel,
    ColorSpace.RGBA: RGBAModel,
    ColorSpace.RGBA64: RGBA64Model,
}