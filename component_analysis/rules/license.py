"""Report licenses the user has declared forbidden."""

from __future__ import annotations

from typing import Any, List

from loguru import logger

from component_analysis.result import Diagnostic
from component_analysis.severity import Severity

from . import AnalysisRule, is_populated_list

SEPARATOR = "\n-"


class ForbiddenLicenseRule(AnalysisRule):
    """Emit one diagnostic per configured forbidden license found in the report.

    Diagnostics follow the order of ``config.forbidden_licenses``, not the order
    in which the report lists its licenses.
    """

    name = "license"
    binding = ("analyses", "source_licenses", "summary", "sure_licenses")

    def produce(self, item: Any) -> List[Diagnostic]:
        if not is_populated_list(item):
            if not isinstance(item, (list, tuple)):
                logger.debug(f"{self.name}: ignoring sure_licenses of type {type(item).__name__}")
            return []
        found = set(str(entry) for entry in item)
        return [
            self._diagnostic(Severity.ERROR, f" has a bad license:{SEPARATOR}{forbidden}")
            for forbidden in self.config.forbidden_licenses
            if forbidden in found
        ]
