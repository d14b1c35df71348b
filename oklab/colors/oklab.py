from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Optional, Tuple
from ..types.color_types import ColorSpace, RGBA64Tuple
from ..conversions import oklab_to_rgba64, oklab_to_oklch
from .color_base import ColorBase, WithAlpha

if TYPE_CHECKING:
    from .oklch import Oklch


class Oklab(ColorBase, WithAlpha):
    """
    A color in the Oklab color space.

    ``L`` is perceptual lightness (nominally 0-1), ``a`` and ``b`` the
    green/red and blue/yellow opponent axes, ``alpha`` straight opacity.
    None of the channels are clamped; values outside the sRGB gamut are only
    clipped when converting to RGBA.
    """
    mode:       ClassVar[ColorSpace] = ColorSpace.OKLAB
    channels:   ClassVar[Tuple[str, ...]] = ("L", "a", "b", "alpha")
    maxima:     ClassVar[Tuple[Optional[float], ...]] = (None, None, None, None)

    @property
    def L(self) -> float:
        return self.value[0]

    @property
    def a(self) -> float:
        return self.value[1]

    @property
    def b(self) -> float:
        return self.value[2]

    def rgba(self) -> RGBA64Tuple:
        """Premultiplied 16-bit RGBA, each channel clipped into [0, 65535]."""
        return oklab_to_rgba64(*self.value)

    def oklch(self) -> Oklch:
        """Polar form of this color; achromatic colors get an undefined hue."""
        from .oklch import Oklch  # local import to avoid cycles
        L, C, H = oklab_to_oklch(self.L, self.a, self.b)
        return Oklch((L, C, H, self.alpha))
