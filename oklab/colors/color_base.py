from __future__ import annotations
from typing import Any, Callable, ClassVar, Iterator, Optional, Self, Tuple, cast
from abc import ABC
from boundednumbers.functions import clamp
from ..types.color_types import ColorSpace, HUE_SPACES, Scalar, ScalarVector


class ColorBase:
    __slots__ = ('_value',)  # no new attributes after construction

    num_channels: ClassVar[int] = 4
    mode:       ClassVar[ColorSpace]
    _type:      ClassVar[type] = float
    channels:   ClassVar[Tuple[str, ...]]
    # None means the channel is unbounded
    maxima:     ClassVar[Tuple[Optional[Scalar], ...]]
    _is_frozen: bool = False   # class-level default (instance gets its own slot)
    # def color_convert(self: ColorBase, to_space: ColorSpace | str) -> ColorBase:
    convert: Callable[[ColorBase, ColorSpace | str], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ScalarVector | ColorBase) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode:
                value = value.value
            else:
                value = value.convert(self.mode).value

        value = tuple(value)
        if len(value) == self.num_channels - 1 and isinstance(self, WithAlpha):
            # Missing alpha means opaque
            value = value + (self.alpha_max,)
        if len(value) != self.num_channels:
            raise ValueError(
                f"{self.mode.value} expects {self.num_channels} channels {self.channels!r}, "
                f"got {len(value)}"
            )

        self._value = self._normalize(value)

        # freeze instance: no more writes allowed
        super().__setattr__('_is_frozen', True)

    def _normalize(self, value: Tuple[Any, ...]) -> Tuple[Any, ...]:
        """Type enforcement plus clamping to the per-channel maxima."""
        out = []
        for v, m in zip(value, self.maxima):
            v = self._type(v)
            if m is not None:
                v = clamp(v, 0, m)
            out.append(v)
        return tuple(out)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Any, ...]:
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    def __iter__(self) -> Iterator[Any]:
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode.value, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{n}={v!r}" for n, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({fields})"


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """

    # Tell static checkers these come from the real subclass (ColorBase)
    num_channels: ClassVar[int]
    mode: ClassVar[ColorSpace]
    value: Tuple[Any, ...]

    alpha_index: ClassVar[int] = -1
    alpha_max:   ClassVar[Scalar] = 1.0

    @property
    def alpha(self) -> Scalar:
        """Get alpha channel value."""
        return cast(Scalar, self.value[self.alpha_index])

    def with_alpha(self, alpha: Scalar) -> Self:
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value, clamped to [0, alpha_max].

        Returns:
            New color instance with updated alpha.
        """
        a = clamp(alpha, 0, self.alpha_max)
        return self.__class__(self.value[:-1] + (a,))  # type: ignore


def build_registry(*classes: type[ColorBase]) -> dict[ColorSpace, type[ColorBase]]:
    return {
        cls.mode: cls
        for cls in classes
    }
