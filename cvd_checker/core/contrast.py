"""WCAG relative luminance and contrast ratio."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

import numpy as np

from cvd_checker.core.types import Colour

_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])
_TWO_PLACES = Decimal('0.01')


def _linearise(channels: np.ndarray) -> np.ndarray:
    c = channels / 255.0
    return np.where(c <= 0.03928, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)


def relative_luminance(colour: Colour) -> float:
    """Relative luminance of the colour's RGB channels. Alpha is ignored."""
    lin = _linearise(np.array(colour.rgb, dtype=np.float64))
    return float(np.dot(_WEIGHTS, lin))


def contrast_ratio(foreground: Colour, background: Colour) -> Decimal:
    """Contrast ratio between two opaque colours, rounded half-up to two decimals.

    Both inputs are treated as opaque; translucent colours must be composited
    onto their backdrop first (see cvd_checker.core.colour.composite).
    """
    l1 = relative_luminance(foreground)
    l2 = relative_luminance(background)
    lighter, darker = max(l1, l2), min(l1, l2)
    raw = (lighter + 0.05) / (darker + 0.05)
    return Decimal(raw).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
