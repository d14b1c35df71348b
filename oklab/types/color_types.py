from __future__ import annotations
from enum import Enum
from typing import Literal, Optional, Protocol, Tuple, Union, runtime_checkable
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
RGBA64Tuple = Tuple[int, int, int, int]
OklabTuple = Tuple[float, float, float, float]
OklchTuple = Tuple[float, float, Optional[float], float]
ColorElement = Union[RGBA64Tuple, OklabTuple, OklchTuple]
HueDirection = Literal["shortest", "longest", "increasing", "decreasing"]


class ColorSpace(str, Enum):
    OKLAB = "oklab"
    OKLCH = "oklch"
    RGBA = "rgba"
    RGBA64 = "rgba64"


HUE_SPACES = (ColorSpace.OKLCH,)


@runtime_checkable
class RGBAConvertible(Protocol):
    """Anything that can report itself as premultiplied 16-bit RGBA."""

    def rgba(self) -> RGBA64Tuple: ...


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float64 numpy array.

    Args:
        element: Tuple of channels or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element
    return np.array([np.nan if v is None else v for v in element], dtype=np.float64)

