"""Report known security issues (CVEs) affecting a dependency."""

from __future__ import annotations

from typing import Any, List

from loguru import logger

from component_analysis.result import Diagnostic
from component_analysis.severity import Severity

from . import AnalysisRule, is_populated_list

SEPARATOR = "\n-"


class SecurityIssuesRule(AnalysisRule):
    name = "security"
    binding = ("analyses", "security_issues", "summary")

    def produce(self, item: Any) -> List[Diagnostic]:
        if not is_populated_list(item):
            if not isinstance(item, (list, tuple)):
                logger.debug(f"{self.name}: ignoring summary of type {type(item).__name__}")
            return []
        issues = SEPARATOR.join(str(issue) for issue in item)
        return [self._diagnostic(Severity.ERROR, f" is vulnerable:{SEPARATOR}{issues}")]
