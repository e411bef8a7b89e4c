"""Per-run deduplication of contrast findings.

A FindingRegistry maps each combination key (observed colours, vision type,
required ratio) to the first Finding recorded for it. Failing combinations
are reported once through report_fn; later occurrences reuse the stored
handle so they can link back to the original entry. Passing combinations
never allocate a report entry; only their first occurrence is marked
first_seen so the caller can label it once.

Create one registry per audit run. record_or_reuse holds a lock, so a host
that evaluates elements on several threads may share one registry.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from cvd_checker.core.types import ContrastSample, Finding

ReportFn = Callable[[ContrastSample], Any]


class FindingRegistry:
    def __init__(self) -> None:
        self._findings: dict[str, Finding] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._findings)

    def __contains__(self, key: object) -> bool:
        return key in self._findings

    def get(self, key: str) -> Finding | None:
        return self._findings.get(key)

    def clear(self) -> None:
        with self._lock:
            self._findings.clear()

    def record_or_reuse(self, sample: ContrastSample, passed: bool, report_fn: ReportFn) -> Finding:
        """Record the first finding for the sample's key, or reuse the stored one.

        report_fn is only called for the first failing sample of a key. If it
        raises, the exception propagates and the key stays unseen.
        """
        key = sample.key
        with self._lock:
            existing = self._findings.get(key)
            if existing is not None:
                return Finding(
                    key=key,
                    sample=sample,
                    passed=passed,
                    report_handle=existing.report_handle,
                    first_seen=False,
                )

            handle = None if passed else report_fn(sample)
            finding = Finding(key=key, sample=sample, passed=passed, report_handle=handle, first_seen=True)
            self._findings[key] = finding
            return finding
