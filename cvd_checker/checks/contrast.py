"""Label contrast ratios for normal vision.

Same decision rules as cbcontrast, without any colour simulation: the
observed foreground and background are compared directly.

Example:
    uv run cvd-tool contrast ./tmp page.json
"""

from cvd_checker.checks._annotate import audit_into_report
from cvd_checker.core.types import Candidate, Check, Report

check = Check(
    name='contrast',
    title='Contrast',
    help='Labels elements with insufficient contrast for normal vision.',
)


@check.run
def run(candidates: list[Candidate], report: Report, args) -> None:
    audit_into_report(check, candidates, report, args, (None,))
