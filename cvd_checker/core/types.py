"""Shared types for cvd-tool: Colour, Deficiency, TextStyle, ContrastSample, Finding, Check, Report."""

from __future__ import annotations

import math
import numbers
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class InvalidColourError(ValueError):
    """A colour channel is out of range, non-finite, or the colour string cannot be parsed."""


class UnsupportedDeficiencyError(ValueError):
    """A deficiency name that is not one of protanopia, deuteranopia, tritanopia."""


class CandidateError(ValueError):
    """A candidates file entry is missing fields or holds malformed values."""


@dataclass(frozen=True)
class Colour:
    """An RGBA colour. Channels are 0-255 integers, alpha is 0.0-1.0."""

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ('red', 'green', 'blue'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidColourError(f'invalid colour: {name}={value!r} is not an integer')
            if not 0 <= value <= 255:
                raise InvalidColourError(f'invalid colour: {name}={value} outside 0-255')
            object.__setattr__(self, name, int(value))

        alpha = self.alpha
        if isinstance(alpha, bool) or not isinstance(alpha, numbers.Real) or not math.isfinite(alpha):
            raise InvalidColourError(f'invalid colour: alpha={alpha!r} is not a finite number')
        if not 0.0 <= alpha <= 1.0:
            raise InvalidColourError(f'invalid colour: alpha={alpha} outside 0.0-1.0')
        object.__setattr__(self, 'alpha', float(alpha))

    def __str__(self) -> str:
        if self.alpha == 1.0:
            return f'rgb({self.red}, {self.green}, {self.blue})'
        return f'rgba({self.red},{self.green},{self.blue},{self.alpha!r})'

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    @property
    def hex(self) -> str:
        return f'#{self.red:02x}{self.green:02x}{self.blue:02x}'


class Deficiency(Enum):
    """Colour-vision deficiencies that can be simulated.

    Each member carries the short algorithm identifier used in combination
    keys and the display name shown in reports.
    """

    PROTANOPIA = ('protan', 'protanopia')
    DEUTERANOPIA = ('deutan', 'deuteranopia')
    TRITANOPIA = ('tritan', 'tritanopia')

    def __init__(self, algorithm: str, display_name: str):
        self.algorithm = algorithm
        self.display_name = display_name

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def parse(cls, value: Deficiency | str) -> Deficiency:
        """Resolve a member, algorithm id ('protan') or display name ('protanopia')."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if wanted in (member.algorithm, member.display_name):
                    return member
        names = ', '.join(m.display_name for m in cls)
        raise UnsupportedDeficiencyError(f'unsupported deficiency: {value!r}. Supported: {names}')


# Order matches the order reports list the vision types in
COLOUR_BLINDNESS: tuple[Deficiency, ...] = (
    Deficiency.PROTANOPIA,
    Deficiency.DEUTERANOPIA,
    Deficiency.TRITANOPIA,
)

NORMAL_VISION = 'normal'


def vision_name(deficiency: Deficiency | None) -> str:
    return deficiency.display_name if deficiency is not None else 'normal vision'


@dataclass(frozen=True)
class TextStyle:
    """The style facts needed to classify large text."""

    font_size: str | float | None = None  # '16px', '14pt', '1.5em', '150%', or px as a number
    font_weight: str | int | None = None  # 'bold', 'normal', 700, ...


@dataclass(frozen=True)
class ContrastSample:
    """One colour pair evaluated for one vision type."""

    foreground: Colour
    background: Colour
    deficiency: Deficiency | None
    ratio: str  # two decimals, e.g. '4.50'
    required_ratio: str  # '3.0' or '4.5'
    simulated_foreground: Colour | None = None
    simulated_background: Colour | None = None

    @property
    def key(self) -> str:
        """Combination key built from the observed colours, vision type and required ratio."""
        token = self.deficiency.algorithm if self.deficiency is not None else NORMAL_VISION
        return f'{self.foreground}/{self.background}/{token}/{self.required_ratio}'

    @property
    def seen_foreground(self) -> Colour:
        return self.simulated_foreground or self.foreground

    @property
    def seen_background(self) -> Colour:
        return self.simulated_background or self.background


@dataclass(frozen=True)
class Finding:
    key: str
    sample: ContrastSample
    passed: bool
    report_handle: Any = None
    first_seen: bool = True


@dataclass(frozen=True)
class Candidate:
    """A page element already resolved to opaque colours and a text style."""

    element: str
    foreground: Colour
    background: Colour
    style: TextStyle = field(default_factory=TextStyle)


class Check:
    """A self-registering contrast check.

    Usage in a check module:

        check = Check(name='contrast', title='Contrast', help='Label contrast ratios')

        @check.run
        def run(candidates, report, args):
            ...
    """

    def __init__(self, name: str, title: str = '', help: str = ''):
        self.name = name
        self.title = title or name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, candidates: list[Candidate], report: Report, args: Any) -> None:
        """Execute the check's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Check {self.name} has no run function')
        self._run_fn(candidates, report, args)


@dataclass
class ErrorEntry:
    """One entry in the report for a unique failing colour combination."""

    check: str
    title: str
    description: str
    sample: ContrastSample
    elements: list[str] = field(default_factory=list)


@dataclass
class Label:
    """A ratio label attached to an element. Error labels point back at their entry."""

    check: str
    element: str
    text: str
    success: bool
    vision: str
    entry: int | None = None  # index into Report.entries


@dataclass
class Report:
    """Accumulates results from checks for text/JSON output."""

    source_path: str = ''
    page: str | None = None
    candidate_count: int = 0
    entries: list[ErrorEntry] = field(default_factory=list)
    labels: list[Label] = field(default_factory=list)
    artefacts: dict[str, str] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0

    def add_error(self, check: str, title: str, description: str, sample: ContrastSample) -> int:
        """Add an error entry and return its index, which serves as the report handle."""
        self.entries.append(ErrorEntry(check=check, title=title, description=description, sample=sample))
        return len(self.entries) - 1

    def add_label(self, label: Label) -> None:
        self.labels.append(label)
        if label.entry is not None:
            elements = self.entries[label.entry].elements
            if label.element not in elements:
                elements.append(label.element)

    def record_pass(self) -> None:
        self.pass_count += 1

    def record_fail(self) -> None:
        self.fail_count += 1
