"""Label contrast ratios as seen with protanopia, deuteranopia and tritanopia.

Each element's foreground and background are passed through a colour-blindness
simulation for all three deficiencies, then checked against the WCAG AA
minimum for the element's text size (4.5:1, or 3.0:1 for large text).

Output:
  - one error entry per unique failing combination of observed colours,
    deficiency and required ratio, listing every element that has it
  - an error label on every failing element, linked to that entry
  - a success label the first time each passing combination is seen

Example:
    uv run cvd-tool cbcontrast ./tmp page.json
    uv run cvd-tool cbcontrast ./tmp page.json --json --fail-on-error
"""

from cvd_checker.checks._annotate import audit_into_report
from cvd_checker.core.types import COLOUR_BLINDNESS, Candidate, Check, Report

check = Check(
    name='cbcontrast',
    title='Color Blind Contrast',
    help='Labels elements with insufficient contrast for color blind users.',
)


@check.run
def run(candidates: list[Candidate], report: Report, args) -> None:
    audit_into_report(check, candidates, report, args, COLOUR_BLINDNESS)
