"""Tests for cvd_checker.core.report — text and JSON formatting."""

import json

from cvd_checker.core.audit import evaluate
from cvd_checker.core.report import format_json, format_text
from cvd_checker.core.types import Colour, Deficiency, Label, Report, TextStyle


def _report() -> Report:
    report = Report(source_path='page.json', page='home', candidate_count=2)
    sample = evaluate(Colour(119, 119, 119), Colour(255, 255, 255), TextStyle('16px'), Deficiency.TRITANOPIA)
    handle = report.add_error('cbcontrast', 'Insufficient contrast', 'too low', sample)
    report.add_label(Label('cbcontrast', 'p.note', '4.48', False, 'tritanopia', entry=handle))
    report.add_label(Label('cbcontrast', 'p.note-2', '4.48', False, 'tritanopia', entry=handle))
    report.add_label(Label('cbcontrast', 'h1', '21.00', True, 'tritanopia'))
    report.record_fail()
    report.record_fail()
    report.record_pass()
    return report


class TestReport:
    def test_add_error_returns_index(self):
        report = Report()
        sample = evaluate(Colour(0, 0, 0), Colour(0, 0, 0), None, None)
        assert report.add_error('contrast', 't', 'd', sample) == 0
        assert report.add_error('contrast', 't', 'd', sample) == 1

    def test_labels_collect_elements_once(self):
        report = _report()
        report.add_label(Label('cbcontrast', 'p.note', '4.48', False, 'tritanopia', entry=0))
        assert report.entries[0].elements == ['p.note', 'p.note-2']


class TestFormatText:
    def test_header(self):
        text = format_text(_report())
        assert text.splitlines()[0] == 'cvd-tool: page.json — home (2 elements)'

    def test_entry_and_labels(self):
        text = format_text(_report())
        assert '✗ [0] Insufficient contrast' in text
        assert 'elements: p.note, p.note-2' in text
        assert '✗ p.note: 4.48 (tritanopia) → [0]' in text
        assert '✓ h1: 21.00 (tritanopia)' in text

    def test_summary(self):
        assert format_text(_report()).endswith('PASS 1/3  FAIL 2/3  (1 unique errors)')

    def test_empty_report_has_no_summary(self):
        assert 'PASS' not in format_text(Report(source_path='x.json'))


class TestFormatJson:
    def test_structure(self):
        parsed = json.loads(format_json(_report()))
        assert parsed['source'] == 'page.json'
        assert parsed['summary'] == {'total': 3, 'pass': 1, 'fail': 2, 'unique_errors': 1}
        error = parsed['errors'][0]
        assert error['elements'] == ['p.note', 'p.note-2']
        assert error['sample']['vision'] == 'tritanopia'
        assert error['sample']['foreground'] == '#777777'
        assert error['sample']['key'] == 'rgb(119, 119, 119)/rgb(255, 255, 255)/tritan/4.5'
        assert parsed['labels'][0]['error'] == 0
        assert parsed['labels'][2]['error'] is None
