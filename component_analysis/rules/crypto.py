"""Report cryptographic algorithm implementations shipped inside a dependency."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List

from loguru import logger

from component_analysis.result import Diagnostic
from component_analysis.severity import Severity

from . import AnalysisRule, is_populated_list

SEPARATOR = "\n-"


class CryptoAlgorithmsRule(AnalysisRule):
    name = "crypto"
    binding = ("analyses", "crypto_algorithms", "summary", "content")

    def produce(self, item: Any) -> List[Diagnostic]:
        if not is_populated_list(item):
            return []
        names = [str(entry["name"]) for entry in item if self._has_name(entry)]
        if not names:
            logger.debug(f"{self.name}: no named algorithms among {len(item)} entries")
            return []
        algorithms = SEPARATOR.join(names)
        return [self._diagnostic(Severity.ERROR, f" contains cryptography:{SEPARATOR}{algorithms}")]

    @staticmethod
    def _has_name(entry: Any) -> bool:
        return isinstance(entry, Mapping) and entry.get("name") is not None
