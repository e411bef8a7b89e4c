"""Loader for candidates files: page elements already resolved to colours and styles.

A candidates file is JSON, either a bare list of elements or an object:

    {
      "page": "home",
      "page_background": "#ffffff",
      "body_font_size": "16px",
      "elements": [
        {"selector": "h1", "color": "#767676", "background": "transparent",
         "font_size": "32px", "font_weight": "700"}
      ]
    }

Backgrounds go through transparent_as_zero_alpha and are flattened onto the
page background; foregrounds are flattened onto the resolved background.
The core only ever sees opaque colours.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from cvd_checker.core.colour import WHITE, composite, parse_colour, transparent_as_zero_alpha
from cvd_checker.core.types import Candidate, CandidateError, Colour, InvalidColourError, TextStyle


@dataclass
class CandidateSet:
    """Parsed candidates file."""

    page: str = 'unknown'
    page_background: Colour = WHITE
    body_font_size: str | float | None = None
    candidates: list[Candidate] = field(default_factory=list)


def parse_candidates_file(path: str) -> CandidateSet:
    """Parse a candidates file from disk."""
    try:
        with open(path, encoding='utf-8') as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise CandidateError(f'candidates are not valid UTF-8: {e}') from e
    return parse_candidates_string(text)


def parse_candidates_string(text: str) -> CandidateSet:
    """Parse candidates from a JSON string."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise CandidateError(f'candidates are not valid JSON: {e}') from e

    if isinstance(raw, list):
        raw = {'elements': raw}
    if not isinstance(raw, dict) or not isinstance(raw.get('elements'), list):
        raise CandidateError('candidates must be a list of elements or an object with an "elements" list')

    try:
        page_bg = parse_colour(raw.get('page_background', '#ffffff'), transparent_as_zero_alpha)
    except InvalidColourError as e:
        raise CandidateError(f'page_background: {e}') from e
    # The page itself sits on an opaque canvas
    page_bg = composite(page_bg, WHITE)

    result = CandidateSet(
        page=str(raw.get('page') or 'unknown'),
        page_background=page_bg,
        body_font_size=raw.get('body_font_size'),
    )
    for index, element in enumerate(raw['elements']):
        result.candidates.append(_parse_element(index, element, page_bg))
    return result


def _parse_element(index: int, element: Any, page_bg: Colour) -> Candidate:
    if not isinstance(element, dict):
        raise CandidateError(f'element {index}: expected an object, got {type(element).__name__}')
    if 'color' not in element:
        raise CandidateError(f'element {index}: missing "color"')

    selector = str(element.get('selector') or f'element-{index}')
    try:
        bg = parse_colour(element.get('background', 'transparent'), transparent_as_zero_alpha)
        fg = parse_colour(element['color'], transparent_as_zero_alpha)
    except InvalidColourError as e:
        raise CandidateError(f'element {index} ({selector}): {e}') from e

    if bg.alpha < 1.0:
        bg = composite(bg, page_bg)
    if fg.alpha < 1.0:
        fg = composite(fg, bg)

    style = TextStyle(font_size=element.get('font_size'), font_weight=element.get('font_weight'))
    return Candidate(element=selector, foreground=fg, background=bg, style=style)
