from typing import ClassVar, Tuple
from ..types.format_type import ChannelDepth, max_channel
from ..types.color_types import ColorSpace, RGBA64Tuple
from .color_base import ColorBase, WithAlpha


class ColorRGBA(ColorBase, WithAlpha):
    """Premultiplied sRGB color with 8 bits per channel."""
    mode:       ClassVar[ColorSpace] = ColorSpace.RGBA
    _type:      ClassVar[type] = int
    depth:      ClassVar[ChannelDepth] = ChannelDepth.BIT8
    channels:   ClassVar[Tuple[str, ...]] = ("r", "g", "b", "alpha")
    maxima:     ClassVar[Tuple[int, int, int, int]] = (0xff, 0xff, 0xff, 0xff)
    alpha_max:  ClassVar[int] = max_channel[ChannelDepth.BIT8]

    @property
    def r(self) -> int:
        return self.value[0]

    @property
    def g(self) -> int:
        return self.value[1]

    @property
    def b(self) -> int:
        return self.value[2]

    def rgba(self) -> RGBA64Tuple:
        # 0xab -> 0xabab so that 0xff maps onto 0xffff
        r, g, b, a = (v | v << 8 for v in self.value)
        return r, g, b, a


class ColorRGBA64(ColorRGBA):
    """Premultiplied sRGB color with 16 bits per channel."""
    mode:       ClassVar[ColorSpace] = ColorSpace.RGBA64
    depth:      ClassVar[ChannelDepth] = ChannelDepth.BIT16
    maxima:     ClassVar[Tuple[int, int, int, int]] = (0xffff, 0xffff, 0xffff, 0xffff)
    alpha_max:  ClassVar[int] = max_channel[ChannelDepth.BIT16]

    def rgba(self) -> RGBA64Tuple:
        r, g, b, a = self.value
        return r, g, b, a


RGBA = ColorRGBA
RGBA64 = ColorRGBA64
