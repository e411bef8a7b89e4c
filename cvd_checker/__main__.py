"""cvd-tool: contrast checking for page colours under normal vision and colour blindness.

Usage: uv run cvd-tool <check> <tmp_dir> <candidates.json> [options]

Checks are auto-discovered from cvd_checker/checks/.
Each check module's docstring is its documentation.
Run `cvd-tool help <check>` for full module docs.

The candidates file lists page elements already resolved to a foreground
colour, background colour, font size and font weight. Finding those
elements on a page is left to whatever produces the file.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, cvd-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import os
import sys
from typing import NoReturn

from cvd_checker import registry
from cvd_checker.core.candidates import parse_candidates_file
from cvd_checker.core.env import load_env, policy_from_env
from cvd_checker.core.policy import font_size_px
from cvd_checker.core.report import format_json, format_text
from cvd_checker.core.types import CandidateError, InvalidColourError, Report


def _load_check_module(name: str) -> object:
    """Load the raw module for a check (for docstring access)."""
    return importlib.import_module(f'cvd_checker.checks.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_check_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    checks = registry.all_checks()

    epilog = (
        'Examples:\n'
        '  cvd-tool cbcontrast ./tmp page.json\n'
        '  cvd-tool all ./tmp page.json --json\n'
        '  cvd-tool all ./tmp page.json --fail-on-error\n'
        '  cvd-tool swatches ./tmp page.json\n'
        '  cvd-tool help cbcontrast\n'
        '\n'
        'Threshold env vars (set in .env or environment):\n'
        '  CVD_LARGE_TEXT_PT       any text at least this many pt is large (default 18)\n'
        '  CVD_BOLD_LARGE_TEXT_PT  bold text at least this many pt is large (default 14)\n'
        '  CVD_BODY_FONT_PX        base size for em/rem/% font sizes (default 16)\n'
    )
    parser = argparse.ArgumentParser(
        prog='cvd-tool',
        description='Contrast checking for page colours under normal vision and colour blindness.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='check', help='Check to run')

    for name, found in sorted(checks.items()):
        p = sub.add_parser(name, help=_short_doc(name, found.help))
        p.add_argument('tmp_dir', help='Working directory for artefacts')
        p.add_argument('candidates', help='Path to candidates JSON file')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('--large-pt', type=float, default=None, metavar='N', help='Large text size in pt')
        p.add_argument('--bold-large-pt', type=float, default=None, metavar='N', help='Large bold text size in pt')
        p.add_argument('--body-font-px', type=float, default=None, metavar='N', help='Body font size in px')
        p.add_argument(
            '-f',
            '--fail-on-error',
            action='store_true',
            help='Exit 1 if any element has insufficient contrast (CI gating)',
        )

    help_parser = sub.add_parser('help', help='Print full docs for a check')
    help_parser.add_argument('command', nargs='?', help='Check name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a check."""
    checks = registry.all_checks()

    if command is None:
        print('Available checks:\n')
        for name, found in sorted(checks.items()):
            print(f'  {name:<12} {_short_doc(name, found.help)}')
        print('\nRun: cvd-tool help <check> for full docs.')
        return

    if command not in checks:
        print(f'Unknown check: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(checks))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_check_module(command).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def _fail(message: str) -> NoReturn:
    print(f'cvd-tool: error: {message}', file=sys.stderr)
    sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else, OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'cvd-tool: loaded {env_path}', file=sys.stderr)

    if not args.check:
        parser.print_help()
        sys.exit(1)

    if args.check == 'help':
        _print_help(getattr(args, 'command', None))
        return

    if not os.path.isfile(args.candidates):
        _fail(f'candidates file not found: {args.candidates}')

    try:
        candidate_set = parse_candidates_file(args.candidates)
    except (CandidateError, InvalidColourError) as e:
        _fail(str(e))

    body_px = args.body_font_px
    if body_px is None and candidate_set.body_font_size is not None:
        body_px = font_size_px(candidate_set.body_font_size, 16.0)

    try:
        args.policy = policy_from_env(
            large_pt=args.large_pt,
            bold_large_pt=args.bold_large_pt,
            body_font_px=body_px,
        )
    except ValueError as e:
        _fail(str(e))

    report = Report(
        source_path=args.candidates,
        page=candidate_set.page,
        candidate_count=len(candidate_set.candidates),
    )

    found = registry.get(args.check)
    found.execute(candidate_set.candidates, report, args)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # CI gate, after output so the report is visible even on failure
    if args.fail_on_error and report.fail_count > 0:
        print(f'\nFAIL: {report.fail_count} insufficient contrast finding(s)', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
