import math
import pytest

from oklab import mix, interpolate_hue, Oklab, Oklch, RGBA, RGBAModel, OklchModel


class TestInterpolateHue:

    def test_endpoints(self):
        assert interpolate_hue(0.5, 1.5, 0.0) == pytest.approx(0.5)
        assert interpolate_hue(0.5, 1.5, 1.0) == pytest.approx(1.5)

    def test_shortest_crosses_the_seam(self):
        h = interpolate_hue(math.radians(170), math.radians(-170), 0.5)
        assert abs(abs(h) - math.pi) < 1e-9

    def test_longest(self):
        h = interpolate_hue(0.0, math.pi / 2, 0.5, "longest")
        assert h == pytest.approx(-3 * math.pi / 4)

    def test_increasing(self):
        h = interpolate_hue(math.pi / 2, 0.0, 0.5, "increasing")
        assert h == pytest.approx(-3 * math.pi / 4)

    def test_decreasing(self):
        h = interpolate_hue(0.0, math.pi / 2, 0.5, "decreasing")
        assert h == pytest.approx(-3 * math.pi / 4)

    def test_result_is_wrapped(self):
        for t in (0.0, 0.25, 0.5, 0.75, 1.0):
            h = interpolate_hue(3.0, -3.0, t, "longest")
            assert -math.pi <= h < math.pi

    def test_seam_maps_to_minus_pi(self):
        below = math.nextafter(-math.pi, -math.inf)
        h = interpolate_hue(below, below, 0.5)
        assert -math.pi <= h < math.pi
        assert interpolate_hue(math.pi, math.pi, 0.5) == -math.pi

    def test_missing_hue_takes_the_other(self):
        assert interpolate_hue(None, 1.0, 0.3) == pytest.approx(1.0)
        assert interpolate_hue(1.0, None, 0.3) == pytest.approx(1.0)
        assert interpolate_hue(None, None, 0.3) is None

    def test_invalid_direction(self):
        with pytest.raises(ValueError):
            interpolate_hue(0.0, 1.0, 0.5, "sideways")


class TestMix:

    def test_oklab_endpoints(self):
        black = RGBA((0, 0, 0, 255))
        white = RGBA((255, 255, 255, 255))
        assert mix(black, white, 0.0) == Oklab((0.0, 0.0, 0.0, 1.0))
        assert RGBAModel.convert(mix(black, white, 1.0)) == white

    def test_oklab_midpoint(self):
        p = Oklab((0.2, 0.1, -0.1, 1.0))
        q = Oklab((0.6, -0.1, 0.3, 0.5))
        m = mix(p, q, 0.5)
        assert isinstance(m, Oklab)
        assert m.value == pytest.approx((0.4, 0.0, 0.1, 0.75))

    def test_oklch_uses_hue_of_chromatic_endpoint(self):
        red = OklchModel.convert(RGBA((255, 0, 0, 255)))
        gray = Oklch((0.5, 0.0, None, 1.0))
        m = mix(gray, red, 0.5, space="oklch")
        assert isinstance(m, Oklch)
        assert m.H == pytest.approx(red.H)
        assert m.C == pytest.approx(red.C / 2)
        assert m.L == pytest.approx((0.5 + red.L) / 2)

    def test_oklch_both_achromatic(self):
        m = mix(Oklch((0.2, 0.0, None)), Oklch((0.8, 0.0, None)), 0.5, space="oklch")
        assert m.L == pytest.approx(0.5)
        assert m.C == 0.0
        assert m.H is None
        assert m.alpha == 1.0

    def test_oklch_hue_direction(self):
        p = Oklch((0.6, 0.1, 0.0))
        q = Oklch((0.6, 0.1, math.pi / 2))
        assert mix(p, q, 0.5, space="oklch").H == pytest.approx(math.pi / 4)
        assert mix(p, q, 0.5, space="oklch", hue_direction="longest").H == pytest.approx(-3 * math.pi / 4)

    def test_unknown_space(self):
        with pytest.raises(ValueError):
            mix(Oklab((0.5, 0.0, 0.0)), Oklab((0.6, 0.0, 0.0)), 0.5, space="hsl")
