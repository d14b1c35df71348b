from __future__ import annotations
import math
import warnings
from typing import Any, ClassVar, Optional, Tuple
from ..types.color_types import ColorSpace, RGBA64Tuple
from ..conversions import oklch_to_oklab, is_undefined_hue
from .color_base import ColorBase, WithAlpha
from .oklab import Oklab


class Oklch(ColorBase, WithAlpha):
    """
    A color in the Oklch color space, the polar form of Oklab.

    ``C`` is chroma, ``H`` the hue angle in radians. ``H`` is ``None`` for
    achromatic colors; a NaN hue is accepted and stored as ``None``.
    """
    mode:       ClassVar[ColorSpace] = ColorSpace.OKLCH
    channels:   ClassVar[Tuple[str, ...]] = ("L", "C", "H", "alpha")
    maxima:     ClassVar[Tuple[Optional[float], ...]] = (None, None, None, None)

    def _normalize(self, value: Tuple[Any, ...]) -> Tuple[Any, ...]:
        L, C, H, alpha = value
        H = None if is_undefined_hue(H) else float(H)
        if H is None and C:
            warnings.warn(
                f"Oklch with undefined hue but chroma {C!r}; chroma is ignored in conversions",
                stacklevel=3,
            )
        return float(L), float(C), H, float(alpha)

    @property
    def L(self) -> float:
        return self.value[0]

    @property
    def C(self) -> float:
        return self.value[1]

    @property
    def H(self) -> Optional[float]:
        return self.value[2]

    @property
    def hue_degrees(self) -> Optional[float]:
        """Hue in degrees in [0, 360), or None when undefined."""
        if self.H is None:
            return None
        d = math.degrees(self.H) % 360
        # a tiny negative hue rounds up to 360
        return 0.0 if d == 360 else d

    @property
    def is_achromatic(self) -> bool:
        return self.H is None

    def oklab(self) -> Oklab:
        L, a, b = oklch_to_oklab(self.L, self.C, self.H)
        return Oklab((L, a, b, self.alpha))

    def rgba(self) -> RGBA64Tuple:
        """Premultiplied 16-bit RGBA, by way of Oklab."""
        return self.oklab().rgba()
