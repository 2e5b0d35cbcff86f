"""Report dependencies whose analysis has not finished yet."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List

from component_analysis.result import Diagnostic
from component_analysis.severity import Severity

from . import AnalysisRule


class PendingAnalysisRule(AnalysisRule):
    """Flag reports that are empty or lack a ``finished_at`` timestamp."""

    name = "pending"

    def produce(self, item: Any) -> List[Diagnostic]:
        if self._is_finished(item):
            return []
        return [self._diagnostic(Severity.INFORMATION, " - analysis is pending")]

    @staticmethod
    def _is_finished(item: Any) -> bool:
        # An empty mapping has no keys and so never carries finished_at.
        if not isinstance(item, Mapping):
            return False
        return item.get("finished_at") is not None
