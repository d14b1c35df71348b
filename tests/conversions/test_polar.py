import math
import random
import numpy as np
import pytest

from oklab.conversions import (
    is_undefined_hue,
    oklab_to_oklch,
    oklch_to_oklab,
    np_oklab_to_oklch,
    np_oklch_to_oklab,
)


def test_achromatic_has_undefined_hue():
    assert oklab_to_oklch(0.5, 0.0, 0.0) == (0.5, 0.0, None)
    assert oklab_to_oklch(0.5, -0.0, 0.0) == (0.5, 0.0, None)


def test_undefined_hue_ignores_chroma():
    assert oklch_to_oklab(0.5, 0.3, None) == (0.5, 0.0, 0.0)
    assert oklch_to_oklab(0.5, 0.3, math.nan) == (0.5, 0.0, 0.0)


def test_zero_chroma_with_defined_hue_is_not_special():
    L, a, b = oklch_to_oklab(0.5, 0.0, 1.0)
    assert (L, a, b) == (0.5, 0.0, 0.0)


def test_is_undefined_hue():
    assert is_undefined_hue(None)
    assert is_undefined_hue(math.nan)
    assert not is_undefined_hue(0.0)
    assert not is_undefined_hue(-math.pi)


def test_hue_range():
    assert oklab_to_oklch(0.5, -0.1, 0.0)[2] == math.pi
    assert oklab_to_oklch(0.5, 0.0, -0.1)[2] == -math.pi / 2
    assert oklab_to_oklch(0.5, 0.1, 0.0)[2] == 0.0


def test_chroma_is_hypot():
    _, C, _ = oklab_to_oklch(0.5, 0.3, -0.4)
    assert C == pytest.approx(0.5, rel=1e-15)


def test_round_trip():
    rng = random.Random(1234)
    for _ in range(500):
        L, a, b = rng.uniform(0, 1), rng.uniform(-0.5, 0.5), rng.uniform(-0.5, 0.5)
        L2, a2, b2 = oklch_to_oklab(*oklab_to_oklch(L, a, b))
        assert L2 == L
        assert a2 == pytest.approx(a, rel=1e-9, abs=1e-15)
        assert b2 == pytest.approx(b, rel=1e-9, abs=1e-15)


def test_numpy_forward_marks_achromatic_with_nan():
    lab = np.array([
        [0.5, 0.0, 0.0, 1.0],
        [0.5, 0.3, -0.4, 0.25],
    ])
    lch = np_oklab_to_oklch(lab)
    assert lch[0, 1] == 0.0
    assert np.isnan(lch[0, 2])
    assert lch[1, 1] == pytest.approx(0.5)
    assert lch[1, 2] == pytest.approx(math.atan2(-0.4, 0.3))
    # L and alpha pass through
    np.testing.assert_array_equal(lch[:, [0, 3]], lab[:, [0, 3]])


def test_numpy_inverse_zeroes_nan_hue():
    lch = np.array([[0.5, 0.2, np.nan], [0.5, 0.2, math.pi / 2]])
    lab = np_oklch_to_oklab(lch)
    np.testing.assert_array_equal(lab[0], [0.5, 0.0, 0.0])
    np.testing.assert_allclose(lab[1], [0.5, 0.0, 0.2], atol=1e-15)


def test_numpy_round_trip():
    rng = np.random.default_rng(3)
    lab = np.column_stack([rng.random(200), rng.uniform(-0.4, 0.4, 200), rng.uniform(-0.4, 0.4, 200)])
    np.testing.assert_allclose(np_oklch_to_oklab(np_oklab_to_oklch(lab)), lab, rtol=1e-9, atol=1e-15)
