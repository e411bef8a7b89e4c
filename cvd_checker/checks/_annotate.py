"""Shared glue between run_audit() and the report: error entries and labels."""

from collections.abc import Sequence
from typing import Any

from cvd_checker.core.audit import run_audit
from cvd_checker.core.env import policy_from_env
from cvd_checker.core.policy import ThresholdPolicy
from cvd_checker.core.types import (
    Candidate,
    Check,
    ContrastSample,
    Deficiency,
    Finding,
    Label,
    Report,
    vision_name,
)

INSUFFICIENT = 'This contrast is insufficient at this size.'


def policy_for(args: Any) -> ThresholdPolicy:
    return getattr(args, 'policy', None) or policy_from_env()


def error_title(sample: ContrastSample) -> str:
    vision = vision_name(sample.deficiency)
    return f'Insufficient contrast for {vision}: {sample.ratio}:1 (needs {sample.required_ratio}:1)'


def error_description(sample: ContrastSample) -> str:
    observed = f'{sample.foreground.hex} on {sample.background.hex}'
    if sample.deficiency is None:
        seen = f'{observed} has a contrast ratio of {sample.ratio}:1.'
    else:
        seen = (
            f'{observed} appears as {sample.seen_foreground.hex} on {sample.seen_background.hex} '
            f'with {sample.deficiency.display_name}, a contrast ratio of {sample.ratio}:1.'
        )
    return f'{seen} Text of this size needs at least {sample.required_ratio}:1.'


def audit_into_report(
    check: Check,
    candidates: list[Candidate],
    report: Report,
    args: Any,
    deficiencies: Sequence[Deficiency | None],
) -> list[Finding]:
    """Run the audit for `check` and record entries, labels and counts on the report."""

    def report_error(candidate: Candidate, sample: ContrastSample) -> int:
        return report.add_error(check.name, error_title(sample), error_description(sample), sample)

    def label_success(candidate: Candidate, finding: Finding) -> None:
        report.add_label(
            Label(
                check=check.name,
                element=candidate.element,
                text=finding.sample.ratio,
                success=True,
                vision=vision_name(finding.sample.deficiency),
            )
        )

    def label_error(candidate: Candidate, finding: Finding) -> None:
        report.add_label(
            Label(
                check=check.name,
                element=candidate.element,
                text=f'{finding.sample.ratio} {INSUFFICIENT}',
                success=False,
                vision=vision_name(finding.sample.deficiency),
                entry=finding.report_handle,
            )
        )

    findings = run_audit(
        candidates,
        report_error,
        on_success=label_success,
        on_failure=label_error,
        deficiencies=deficiencies,
        policy=policy_for(args),
    )
    for finding in findings:
        if finding.passed:
            report.record_pass()
        else:
            report.record_fail()
    return findings
