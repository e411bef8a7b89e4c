"""Tests for cvd_checker.core.findings — per-run deduplication."""

import pytest
from cvd_checker.core.findings import FindingRegistry
from cvd_checker.core.types import Colour, ContrastSample, Deficiency


def _sample(fg=(119, 119, 119), bg=(255, 255, 255), deficiency=Deficiency.PROTANOPIA, ratio='4.48', required='4.5'):
    return ContrastSample(
        foreground=Colour(*fg),
        background=Colour(*bg),
        deficiency=deficiency,
        ratio=ratio,
        required_ratio=required,
    )


class Reporter:
    def __init__(self):
        self.calls = []

    def __call__(self, sample):
        self.calls.append(sample)
        return f'entry-{len(self.calls)}'


class TestCombinationKey:
    def test_format(self):
        assert _sample().key == 'rgb(119, 119, 119)/rgb(255, 255, 255)/protan/4.5'

    def test_normal_vision_token(self):
        assert _sample(deficiency=None).key.endswith('/normal/4.5')

    def test_translucent_colour_string(self):
        s = _sample(fg=(0, 0, 0, 0.5))
        assert s.key.startswith('rgba(0,0,0,0.5)/')

    def test_independent_samples_equal_keys(self):
        assert _sample().key == _sample().key

    def test_required_ratio_distinguishes(self):
        assert _sample(required='4.5').key != _sample(required='3.0').key

    def test_deficiency_distinguishes(self):
        assert _sample(deficiency=Deficiency.PROTANOPIA).key != _sample(deficiency=Deficiency.TRITANOPIA).key


class TestRecordOrReuse:
    def test_failing_reported_once(self):
        registry = FindingRegistry()
        reporter = Reporter()
        first = registry.record_or_reuse(_sample(), False, reporter)
        second = registry.record_or_reuse(_sample(), False, reporter)
        assert len(reporter.calls) == 1
        assert first.report_handle == 'entry-1'
        assert second.report_handle == first.report_handle
        assert first.first_seen is True
        assert second.first_seen is False
        assert first.key == second.key

    def test_passing_never_reported(self):
        registry = FindingRegistry()
        reporter = Reporter()
        sample = _sample(ratio='7.00')
        first = registry.record_or_reuse(sample, True, reporter)
        second = registry.record_or_reuse(sample, True, reporter)
        assert reporter.calls == []
        assert first.report_handle is None
        assert second.report_handle is None
        assert first.first_seen is True
        assert second.first_seen is False

    def test_distinct_keys_reported_separately(self):
        registry = FindingRegistry()
        reporter = Reporter()
        registry.record_or_reuse(_sample(deficiency=Deficiency.PROTANOPIA), False, reporter)
        registry.record_or_reuse(_sample(deficiency=Deficiency.DEUTERANOPIA), False, reporter)
        assert len(reporter.calls) == 2
        assert len(registry) == 2

    def test_report_error_propagates_and_key_stays_unseen(self):
        registry = FindingRegistry()

        def broken(sample):
            raise RuntimeError('panel unavailable')

        with pytest.raises(RuntimeError, match='panel unavailable'):
            registry.record_or_reuse(_sample(), False, broken)
        assert _sample().key not in registry

        reporter = Reporter()
        finding = registry.record_or_reuse(_sample(), False, reporter)
        assert finding.first_seen is True
        assert len(reporter.calls) == 1

    def test_registries_are_isolated(self):
        reporter = Reporter()
        FindingRegistry().record_or_reuse(_sample(), False, reporter)
        FindingRegistry().record_or_reuse(_sample(), False, reporter)
        assert len(reporter.calls) == 2

    def test_get_and_clear(self):
        registry = FindingRegistry()
        finding = registry.record_or_reuse(_sample(), False, Reporter())
        assert registry.get(finding.key) == finding
        registry.clear()
        assert len(registry) == 0
        assert registry.get(finding.key) is None
