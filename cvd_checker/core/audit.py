"""Evaluation of colour pairs and the audit loop over candidates.

evaluate() is pure: simulate both colours, compute the ratio, look up the
required ratio. run_audit() walks every candidate for every vision type,
deduplicating through a FindingRegistry that lives only for that call.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from cvd_checker.core.contrast import contrast_ratio
from cvd_checker.core.findings import FindingRegistry
from cvd_checker.core.policy import DEFAULT_POLICY, ThresholdPolicy
from cvd_checker.core.simulate import simulate
from cvd_checker.core.types import (
    COLOUR_BLINDNESS,
    Candidate,
    Colour,
    ContrastSample,
    Deficiency,
    Finding,
    TextStyle,
)

CandidateReportFn = Callable[[Candidate, ContrastSample], Any]
CandidateFindingFn = Callable[[Candidate, Finding], None]


def evaluate(
    foreground: Colour,
    background: Colour,
    style: TextStyle | None,
    deficiency: Deficiency | str | None,
    policy: ThresholdPolicy | None = None,
) -> ContrastSample:
    """Evaluate one colour pair as seen with `deficiency` (None for normal vision)."""
    policy = policy or DEFAULT_POLICY
    if deficiency is not None:
        deficiency = Deficiency.parse(deficiency)

    seen_fg = simulate(foreground, deficiency)
    seen_bg = simulate(background, deficiency)
    ratio = contrast_ratio(seen_fg, seen_bg)

    return ContrastSample(
        foreground=foreground,
        background=background,
        deficiency=deficiency,
        ratio=str(ratio),
        required_ratio=policy.required_ratio(style),
        simulated_foreground=seen_fg,
        simulated_background=seen_bg,
    )


def run_audit(
    candidates: Iterable[Candidate],
    report_fn: CandidateReportFn,
    on_success: CandidateFindingFn | None = None,
    on_failure: CandidateFindingFn | None = None,
    deficiencies: Sequence[Deficiency | None] = COLOUR_BLINDNESS,
    policy: ThresholdPolicy | None = None,
) -> list[Finding]:
    """Evaluate every candidate for every vision type in `deficiencies`.

    report_fn(candidate, sample) is called once per unique failing
    combination and its return value becomes the report handle.
    on_success is called for the first occurrence of each passing
    combination, on_failure for every failing occurrence.
    """
    policy = policy or DEFAULT_POLICY
    registry = FindingRegistry()
    findings: list[Finding] = []

    for candidate in candidates:
        for deficiency in deficiencies:
            sample = evaluate(candidate.foreground, candidate.background, candidate.style, deficiency, policy)
            passed = policy.is_sufficient(sample.ratio, sample.required_ratio)
            finding = registry.record_or_reuse(
                sample,
                passed,
                lambda s, c=candidate: report_fn(c, s),
            )
            if passed:
                if finding.first_seen and on_success is not None:
                    on_success(candidate, finding)
            elif on_failure is not None:
                on_failure(candidate, finding)
            findings.append(finding)

    return findings
