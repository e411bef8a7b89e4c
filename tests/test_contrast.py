"""Tests for cvd_checker.core.contrast — relative luminance and contrast ratio."""

from decimal import Decimal

from cvd_checker.core.contrast import contrast_ratio, relative_luminance
from cvd_checker.core.types import Colour

WHITE = Colour(255, 255, 255)
BLACK = Colour(0, 0, 0)


class TestRelativeLuminance:
    def test_black(self):
        assert relative_luminance(BLACK) == 0.0

    def test_white(self):
        assert abs(relative_luminance(WHITE) - 1.0) < 1e-9

    def test_green_weighs_most(self):
        red = relative_luminance(Colour(255, 0, 0))
        green = relative_luminance(Colour(0, 255, 0))
        blue = relative_luminance(Colour(0, 0, 255))
        assert green > red > blue

    def test_alpha_ignored(self):
        assert relative_luminance(Colour(10, 20, 30, 0.0)) == relative_luminance(Colour(10, 20, 30))


class TestContrastRatio:
    def test_white_on_black(self):
        assert contrast_ratio(WHITE, BLACK) == Decimal('21.00')

    def test_same_colour(self):
        grey = Colour(128, 128, 128)
        assert contrast_ratio(grey, grey) == Decimal('1.00')

    def test_two_decimal_places(self):
        ratio = contrast_ratio(Colour(118, 118, 118), WHITE)
        assert ratio.as_tuple().exponent == -2
        assert str(ratio) == '4.54'

    def test_just_below_aa(self):
        assert contrast_ratio(Colour(119, 119, 119), WHITE) < Decimal('4.5')

    def test_symmetric(self):
        pairs = [
            (Colour(118, 118, 118), WHITE),
            (Colour(255, 0, 0), Colour(0, 0, 255)),
            (Colour(12, 200, 99), Colour(250, 240, 10)),
        ]
        for a, b in pairs:
            assert contrast_ratio(a, b) == contrast_ratio(b, a)

    def test_at_least_one(self):
        for v in range(0, 256, 15):
            for w in range(0, 256, 15):
                assert contrast_ratio(Colour(v, v, v), Colour(w, 0, w)) >= Decimal('1.00')

    def test_alpha_not_composited(self):
        assert contrast_ratio(Colour(0, 0, 0, 0.0), WHITE) == Decimal('21.00')
