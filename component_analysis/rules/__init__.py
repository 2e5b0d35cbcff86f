"""Analysis rules turning parts of a report into diagnostics."""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Protocol

from component_analysis.binding import ABSENT, BindingDescriptor, bind, is_absent
from component_analysis.config import AnalysisConfig
from component_analysis.context import DependencyContext, get_range
from component_analysis.result import Diagnostic
from component_analysis.severity import Severity

SOURCE_LABEL = "Component Analysis"


class Rule(Protocol):
    """Protocol implemented by all rule evaluators."""

    name: str

    def consume(self, report: Any) -> Any:
        """Return the part of ``report`` this rule reads, or ``ABSENT``."""

    def produce(self, item: Any) -> List[Diagnostic]:
        """Build diagnostics from a value previously returned by ``consume``."""


RuleFactory = Callable[[DependencyContext, AnalysisConfig], Rule]


class AnalysisRule:
    """Shared consumption behaviour for rules bound to a report path.

    Subclasses set ``binding`` and implement ``produce``. A rule without a
    binding consumes the whole report.
    """

    name = "analysis"
    binding: Optional[BindingDescriptor] = None

    def __init__(self, context: DependencyContext, config: AnalysisConfig) -> None:
        self.context = context
        self.config = config

    def consume(self, report: Any) -> Any:
        item = bind(report, self.binding) if self.binding is not None else report
        if item is None:
            return ABSENT
        return item

    def consumes(self, report: Any) -> bool:
        return not is_absent(self.consume(report))

    def produce(self, item: Any) -> List[Diagnostic]:
        raise NotImplementedError

    def _diagnostic(self, severity: Severity, message: str) -> Diagnostic:
        return Diagnostic(
            severity=severity,
            range=get_range(self.context.version),
            message=f"Package {self.context.label}{message}",
            source=SOURCE_LABEL,
        )


def is_populated_list(item: Any) -> bool:
    return isinstance(item, (list, tuple)) and len(item) > 0
