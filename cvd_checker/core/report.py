"""Report builder: text and JSON output for cvd-tool results."""

import json
import os
from typing import Any

from cvd_checker.core.types import ContrastSample, ErrorEntry, Report, vision_name


def _sample_dict(sample: ContrastSample) -> dict[str, Any]:
    return {
        'vision': vision_name(sample.deficiency),
        'foreground': sample.foreground.hex,
        'background': sample.background.hex,
        'seen_foreground': sample.seen_foreground.hex,
        'seen_background': sample.seen_background.hex,
        'ratio': sample.ratio,
        'required_ratio': sample.required_ratio,
        'key': sample.key,
    }


def _entry_lines(index: int, entry: ErrorEntry) -> list[str]:
    s = entry.sample
    lines = [f'  \u2717 [{index}] {entry.title}']
    seen = f'{s.seen_foreground.hex} on {s.seen_background.hex}'
    lines.append(f'      {seen}  (observed {s.foreground.hex} on {s.background.hex})')
    if entry.elements:
        lines.append(f'      elements: {", ".join(entry.elements)}')
    return lines


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    header = f'cvd-tool: {report.source_path}'
    if report.page:
        header += f' \u2014 {report.page} ({report.candidate_count} elements)'
    lines.append(header)
    lines.append('')

    checks = []
    for entry in report.entries:
        if entry.check not in checks:
            checks.append(entry.check)
    for label in report.labels:
        if label.check not in checks:
            checks.append(label.check)

    for check in checks:
        lines.append(f'\u2500\u2500 {check}')
        for index, entry in enumerate(report.entries):
            if entry.check == check:
                lines.extend(_entry_lines(index, entry))
        for label in report.labels:
            if label.check != check:
                continue
            mark = '\u2713' if label.success else '\u2717'
            link = f' \u2192 [{label.entry}]' if label.entry is not None else ''
            lines.append(f'  {mark} {label.element}: {label.text} ({label.vision}){link}')
        lines.append('')

    for name, path in report.artefacts.items():
        lines.append(f'{name}: {path}')
    if report.artefacts:
        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        unique = len(report.entries)
        lines.append(f'PASS {report.pass_count}/{total}  FAIL {report.fail_count}/{total}  ({unique} unique errors)')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'source': report.source_path,
        'page': report.page,
        'candidates': report.candidate_count,
    }
    obj['errors'] = [
        {
            'check': e.check,
            'title': e.title,
            'description': e.description,
            'sample': _sample_dict(e.sample),
            'elements': list(e.elements),
        }
        for e in report.entries
    ]
    obj['labels'] = [
        {
            'check': lb.check,
            'element': lb.element,
            'text': lb.text,
            'success': lb.success,
            'vision': lb.vision,
            'error': lb.entry,
        }
        for lb in report.labels
    ]
    if report.artefacts:
        obj['artefacts'] = {k: os.fspath(v) for k, v in report.artefacts.items()}

    obj['summary'] = {
        'total': report.pass_count + report.fail_count,
        'pass': report.pass_count,
        'fail': report.fail_count,
        'unique_errors': len(report.entries),
    }
    return json.dumps(obj, indent=2)
