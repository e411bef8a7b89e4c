"""Colour string parsing, normalisation hooks and alpha compositing.

parse_colour() understands the forms browsers report for computed styles:
#rgb, #rrggbb, rgb(r, g, b) and rgba(r, g, b, a). Anything else raises
InvalidColourError unless an injected normaliser claims it first.

Some engines report a computed background of 'transparent' instead of
rgba(0, 0, 0, 0). transparent_as_zero_alpha is the normaliser for that case;
the candidates loader passes it explicitly, nothing is patched globally.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from cvd_checker.core.types import Colour, InvalidColourError

Normaliser = Callable[[str], Colour | None]

WHITE = Colour(255, 255, 255)
BLACK = Colour(0, 0, 0)
TRANSPARENT = Colour(0, 0, 0, 0.0)

_HEX_RE = re.compile(r'^#([0-9a-f]{3}|[0-9a-f]{6})$')
_RGB_RE = re.compile(
    r'^rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*(\d*\.?\d+)\s*)?\)$',
)


def transparent_as_zero_alpha(text: str) -> Colour | None:
    """Map the 'transparent' keyword to a zero-alpha black; leave everything else alone."""
    if text.strip().lower() == 'transparent':
        return TRANSPARENT
    return None


def hex_to_rgb(text: str) -> tuple[int, int, int]:
    """Parse '#rgb' or '#rrggbb' (hash optional) to an RGB tuple."""
    h = text.strip().lower()
    if not h.startswith('#'):
        h = '#' + h
    m = _HEX_RE.match(h)
    if not m:
        raise InvalidColourError(f'invalid colour: {text!r}')
    digits = m.group(1)
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def parse_colour(text: str, normalise: Normaliser | None = None) -> Colour:
    """Parse a CSS colour string into a Colour.

    If `normalise` is given it is consulted first; a non-None result wins.
    """
    if not isinstance(text, str):
        raise InvalidColourError(f'invalid colour: {text!r} is not a string')

    if normalise is not None:
        normalised = normalise(text)
        if normalised is not None:
            return normalised

    s = text.strip().lower()
    if s.startswith('#'):
        return Colour(*hex_to_rgb(s))

    m = _RGB_RE.match(s)
    if m:
        r, g, b = int(m.group(1)), int(m.group(2)), int(m.group(3))
        alpha = float(m.group(4)) if m.group(4) is not None else 1.0
        return Colour(r, g, b, alpha)

    raise InvalidColourError(f'invalid colour: {text!r}')


def _round_channel(value: float) -> int:
    # Half-up, so compositing never depends on banker's rounding
    return int(value + 0.5)


def composite(over: Colour, under: Colour) -> Colour:
    """Flatten `over` onto `under` with source-over alpha compositing."""
    a = over.alpha
    under_weight = under.alpha * (1 - a)
    alpha = 1.0 if under.alpha == 1.0 else min(a + under_weight, 1.0)
    if alpha == 0.0:
        return TRANSPARENT

    def channel(top: int, bottom: int) -> int:
        # Channels are premultiplied, then divided back out by the result alpha
        return _round_channel((a * top + under_weight * bottom) / alpha)

    return Colour(
        channel(over.red, under.red),
        channel(over.green, under.green),
        channel(over.blue, under.blue),
        alpha,
    )
