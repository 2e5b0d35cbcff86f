"""Run a fixed sequence of rules over one report."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence

from loguru import logger

from .binding import is_absent
from .config import AnalysisConfig
from .context import DependencyContext
from .result import Diagnostic
from .rules import Rule, RuleFactory
from .rules.crypto import CryptoAlgorithmsRule
from .rules.license import ForbiddenLicenseRule
from .rules.pending import PendingAnalysisRule
from .rules.security import SecurityIssuesRule

DEFAULT_RULES: Sequence[RuleFactory] = (
    PendingAnalysisRule,
    SecurityIssuesRule,
    ForbiddenLicenseRule,
    CryptoAlgorithmsRule,
)


class DiagnosticsPipeline:
    """Feed a report to each rule in order and collect what they emit.

    ``run`` returns the diagnostics of that invocation only. They are also
    appended to ``diagnostics``, which is the caller-supplied list when one is
    given, so repeated runs accumulate there.
    """

    def __init__(
        self,
        rules: Iterable[RuleFactory],
        dependency: DependencyContext,
        config: AnalysisConfig,
        diagnostics: Optional[List[Diagnostic]] = None,
    ) -> None:
        self.dependency = dependency
        self.rules: List[Rule] = [factory(dependency, config) for factory in rules]
        self.diagnostics: List[Diagnostic] = diagnostics if diagnostics is not None else []

    def run(self, report: Any) -> List[Diagnostic]:
        produced: List[Diagnostic] = []
        for rule in self.rules:
            item = rule.consume(report)
            if is_absent(item):
                logger.debug(f"{self.dependency.label}: rule {rule.name} has no data, skipped")
                continue
            emitted = rule.produce(item)
            if emitted:
                logger.debug(f"{self.dependency.label}: rule {rule.name} emitted {len(emitted)} diagnostic(s)")
            produced.extend(emitted)
        self.diagnostics.extend(produced)
        return produced


def analyze(
    report: Any,
    dependency: DependencyContext,
    config: Optional[AnalysisConfig] = None,
) -> List[Diagnostic]:
    """Run the default rule set once over ``report``."""

    pipeline = DiagnosticsPipeline(DEFAULT_RULES, dependency, config or AnalysisConfig())
    return pipeline.run(report)
