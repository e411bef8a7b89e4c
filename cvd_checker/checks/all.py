"""Run every contrast check, combine into a single report.

Runs: contrast, cbcontrast.
Skips: swatches (writes an image, run explicitly if needed).

Example:
    uv run cvd-tool all ./tmp page.json
    uv run cvd-tool all ./tmp page.json --json --fail-on-error
"""

from cvd_checker.core.types import Candidate, Check, Report

check = Check(
    name='all',
    title='All checks',
    help='Run every contrast check (except swatches). Combine into a single report.',
)

# Checks never run automatically
SKIP = {'all', 'swatches'}


@check.run
def run(candidates: list[Candidate], report: Report, args) -> None:
    from cvd_checker.registry import all_checks

    for name, found in sorted(all_checks().items()):
        if name in SKIP:
            continue
        found.execute(candidates, report, args)
