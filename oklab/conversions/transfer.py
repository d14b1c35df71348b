"""sRGB transfer function (companding curve).

Reference: https://bottosson.github.io/posts/colorwrong/#what-can-we-do%3F
"""

import math
import numpy as np

# Breakpoints of the piecewise curve on each side of the transfer
_ENCODED_THRESHOLD = 0.04045
_LINEAR_THRESHOLD = 0.0031308


def to_linear(x: float) -> float:
    """sRGB gamma-encoded -> linear light (per channel)."""
    if x >= _ENCODED_THRESHOLD:
        return math.pow((x + 0.055) / (1 + 0.055), 2.4)
    return x / 12.92


def to_non_linear(x: float) -> float:
    """Linear light -> sRGB gamma encoding (per channel)."""
    if x >= _LINEAR_THRESHOLD:
        return 1.055 * math.pow(x, 1.0 / 2.4) - 0.055
    return 12.92 * x


def np_to_linear(x: np.ndarray) -> np.ndarray:
    x = np.asarray(x, dtype=np.float64)
    high = x >= _ENCODED_THRESHOLD
    # Only feed the power branch values it is defined for
    safe = np.where(high, x, _ENCODED_THRESHOLD)
    return np.where(high, np.power((safe + 0.055) / (1 + 0.055), 2.4), x / 12.92)


def np_to_non_linear(x: np.ndarray) -> np.ndarray:
    x = np.asarray(x, dtype=np.float64)
    high = x >= _LINEAR_THRESHOLD
    safe = np.where(high, x, _LINEAR_THRESHOLD)
    return np.where(high, 1.055 * np.power(safe, 1.0 / 2.4) - 0.055, 12.92 * x)
