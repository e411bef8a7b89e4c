"""Tests for cvd_checker.core.policy — large text and the pass/fail decision."""

from decimal import Decimal

import pytest
from cvd_checker.core.policy import ThresholdPolicy, font_size_px, is_sufficient, required_ratio
from cvd_checker.core.types import TextStyle


class TestFontSizePx:
    def test_px(self):
        assert font_size_px('16px', 16.0) == 16.0

    def test_pt(self):
        assert font_size_px('18pt', 16.0) == pytest.approx(24.0)

    def test_em_and_rem(self):
        assert font_size_px('1.5em', 16.0) == 24.0
        assert font_size_px('2rem', 10.0) == 20.0

    def test_percent(self):
        assert font_size_px('150%', 16.0) == 24.0

    def test_bare_number(self):
        assert font_size_px(20, 16.0) == 20.0
        assert font_size_px('20', 16.0) == 20.0

    def test_unreadable(self):
        assert font_size_px('large', 16.0) is None
        assert font_size_px('12vw', 16.0) is None
        assert font_size_px(None, 16.0) is None


class TestRequiredRatio:
    def test_body_text(self):
        assert required_ratio(TextStyle('16px', '400')) == '4.5'

    def test_18pt_regular_is_large(self):
        assert required_ratio(TextStyle('24px', 'normal')) == '3.0'
        assert required_ratio(TextStyle('18pt')) == '3.0'

    def test_just_under_18pt_regular(self):
        assert required_ratio(TextStyle('23px', 'normal')) == '4.5'

    def test_14pt_bold_is_large(self):
        assert required_ratio(TextStyle('14pt', 'bold')) == '3.0'
        assert required_ratio(TextStyle('14pt', '700')) == '3.0'
        assert required_ratio(TextStyle('14pt', 700)) == '3.0'
        assert required_ratio(TextStyle('18.67px', 'bolder')) == '3.0'

    def test_14pt_semibold_is_not_large(self):
        assert required_ratio(TextStyle('14pt', '600')) == '4.5'

    def test_bold_under_14pt(self):
        assert required_ratio(TextStyle('18px', 'bold')) == '4.5'

    def test_relative_units(self):
        assert required_ratio(TextStyle('1.5em')) == '3.0'
        assert required_ratio(TextStyle('150%')) == '3.0'
        assert required_ratio(TextStyle('1.2rem', 'bold')) == '3.0'

    def test_missing_or_ambiguous_defaults_to_normal_text(self):
        assert required_ratio(None) == '4.5'
        assert required_ratio(TextStyle()) == '4.5'
        assert required_ratio(TextStyle('large', 'bold')) == '4.5'
        assert required_ratio(TextStyle(None, 'bold')) == '4.5'
        assert required_ratio(TextStyle('30px', 'heavy')) == '3.0'

    def test_configurable_thresholds(self):
        policy = ThresholdPolicy(large_pt=12.0)
        assert policy.required_ratio(TextStyle('16px')) == '3.0'
        policy = ThresholdPolicy(bold_large_pt=20.0)
        assert policy.required_ratio(TextStyle('14pt', 'bold')) == '4.5'

    def test_body_font_size(self):
        policy = ThresholdPolicy(body_font_px=20.0)
        assert policy.required_ratio(TextStyle('1.2em')) == '3.0'
        assert required_ratio(TextStyle('1.2em')) == '4.5'


class TestIsSufficient:
    def test_inclusive_boundary(self):
        assert is_sufficient('4.50', '4.5') is True
        assert is_sufficient('3.00', '3.0') is True

    def test_just_below(self):
        assert is_sufficient('4.49', '4.5') is False
        assert is_sufficient('2.99', '3.0') is False

    def test_numeric_not_lexical(self):
        # '10.00' sorts before '4.5' as a string
        assert is_sufficient('10.00', '4.5') is True
        assert is_sufficient('21.00', '3.0') is True

    def test_decimal_and_float_inputs(self):
        assert is_sufficient(Decimal('4.50'), '4.5') is True
        assert is_sufficient(4.5, '4.5') is True
        assert is_sufficient(4.49, 4.5) is False

    def test_same_ratio_fails_both_thresholds(self):
        assert is_sufficient('1.00', '3.0') is False
        assert is_sufficient('1.00', '4.5') is False

    def test_not_a_ratio(self):
        with pytest.raises(ValueError):
            is_sufficient('abc', '4.5')

    @pytest.mark.parametrize('ratio', ['NaN', 'Infinity', Decimal('NaN'), float('nan')])
    def test_non_finite_ratio(self, ratio):
        with pytest.raises(ValueError, match='not a contrast ratio'):
            is_sufficient(ratio, '4.5')
