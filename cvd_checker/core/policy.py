"""Required contrast ratio by text size, and the pass/fail decision.

Large text is bold text of at least 14pt or any text of at least 18pt. Both
thresholds are configurable. Font sizes may be given in px, pt, em, rem or
%; relative units resolve against the body font size (16px by default).

Anything the policy cannot read (missing size, unknown unit, odd weight)
is treated as regular text, so required_ratio() never raises.

Ratios are compared as Decimals, never as strings ('10.00' < '4.50'
lexically).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from cvd_checker.core.types import TextStyle

LARGE_TEXT_RATIO = '3.0'
NORMAL_TEXT_RATIO = '4.5'

PX_PER_PT = 4 / 3

_SIZE_RE = re.compile(r'^\s*(\d*\.?\d+)\s*(px|pt|rem|em|%)?\s*$', re.IGNORECASE)


def font_size_px(font_size: str | float | None, body_font_px: float) -> float | None:
    if font_size is None or isinstance(font_size, bool):
        return None
    if isinstance(font_size, (int, float)):
        return float(font_size)
    m = _SIZE_RE.match(str(font_size))
    if not m:
        return None
    value = float(m.group(1))
    unit = (m.group(2) or 'px').lower()
    if unit == 'px':
        return value
    if unit == 'pt':
        return value * PX_PER_PT
    if unit in ('em', 'rem'):
        return value * body_font_px
    return value / 100.0 * body_font_px  # %


def _is_bold(font_weight: str | int | None) -> bool:
    if font_weight is None or isinstance(font_weight, bool):
        return False
    if isinstance(font_weight, (int, float)):
        return font_weight >= 700
    weight = str(font_weight).strip().lower()
    if weight in ('bold', 'bolder'):
        return True
    try:
        return float(weight) >= 700
    except ValueError:
        return False


def _as_decimal(value: str | Decimal | float) -> Decimal:
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f'not a contrast ratio: {value!r}') from None
    if not result.is_finite():
        raise ValueError(f'not a contrast ratio: {value!r}')
    return result


@dataclass(frozen=True)
class ThresholdPolicy:
    """Large-text thresholds, in points, plus the body font size for relative units."""

    large_pt: float = 18.0
    bold_large_pt: float = 14.0
    body_font_px: float = 16.0

    def is_large_text(self, style: TextStyle) -> bool:
        size_px = font_size_px(style.font_size, self.body_font_px)
        if size_px is None:
            return False
        size_pt = size_px / PX_PER_PT
        # Tolerate float noise from unit conversion (24px is exactly 18pt)
        if size_pt + 1e-9 >= self.large_pt:
            return True
        return _is_bold(style.font_weight) and size_pt + 1e-9 >= self.bold_large_pt

    def required_ratio(self, style: TextStyle | None) -> str:
        if style is None:
            return NORMAL_TEXT_RATIO
        return LARGE_TEXT_RATIO if self.is_large_text(style) else NORMAL_TEXT_RATIO

    def is_sufficient(self, ratio: str | Decimal | float, required_ratio: str | Decimal | float) -> bool:
        """True iff ratio >= required_ratio, compared numerically."""
        return _as_decimal(ratio) >= _as_decimal(required_ratio)


DEFAULT_POLICY = ThresholdPolicy()


def required_ratio(style: TextStyle | None) -> str:
    return DEFAULT_POLICY.required_ratio(style)


def is_sufficient(ratio: str | Decimal | float, required: str | Decimal | float) -> bool:
    return DEFAULT_POLICY.is_sufficient(ratio, required)
