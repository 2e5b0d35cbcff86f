"""Diagnostic records produced by the analysis pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

from .severity import Severity

SEVERITY_ORDER: Sequence[Severity] = (
    Severity.ERROR,
    Severity.WARNING,
    Severity.INFORMATION,
    Severity.HINT,
)


@dataclass(frozen=True)
class Position:
    line: int
    character: int

    def to_dict(self) -> Dict[str, int]:
        return {"line": self.line, "character": self.character}


@dataclass(frozen=True)
class Range:
    start: Position
    end: Position

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass(frozen=True)
class Diagnostic:
    """A single finding ready for the editor diagnostics channel."""

    severity: Severity
    range: Range
    message: str
    source: str

    def to_dict(self) -> Dict[str, object]:
        return {
            "severity": self.severity.protocol_value,
            "range": self.range.to_dict(),
            "message": self.message,
            "source": self.source,
        }


@dataclass
class DiagnosticSummary:
    """Aggregate diagnostic counts by severity."""

    error: int = 0
    warning: int = 0
    information: int = 0
    hint: int = 0

    @classmethod
    def from_diagnostics(cls, diagnostics: Iterable[Diagnostic]) -> "DiagnosticSummary":
        summary = cls()
        for diagnostic in diagnostics:
            summary.increment(diagnostic.severity)
        return summary

    def increment(self, severity: Severity) -> None:
        attr = severity.value.lower()
        setattr(self, attr, getattr(self, attr) + 1)

    def as_rows(self) -> List[Tuple[str, int]]:
        """Return severity/count pairs ordered for reporting."""

        return [(severity.value, getattr(self, severity.value.lower())) for severity in SEVERITY_ORDER]

    @property
    def total(self) -> int:
        return sum(getattr(self, severity.value.lower()) for severity in SEVERITY_ORDER)

    def exit_code(self) -> int:
        return 1 if self.error > 0 else 0


def format_summary_table(diagnostics: Sequence[Diagnostic], title: str = "Component Analysis") -> str:
    """Create a human-readable summary table for console output."""

    summary = DiagnosticSummary.from_diagnostics(diagnostics)
    lines: List[str] = []
    lines.append(f"{title} Summary")
    lines.append("=" * 40)
    header = f"{'Severity':<12} | {'Count':>5}"
    lines.append(header)
    lines.append("-" * len(header))
    for severity, count in summary.as_rows():
        lines.append(f"{severity:<12} | {count:>5}")
    lines.append("-" * len(header))
    lines.append(f"Diagnostics : {summary.total}")

    if diagnostics:
        lines.append("")
        lines.append("Diagnostics")
        lines.append("-" * 40)
        for diagnostic in diagnostics:
            start = diagnostic.range.start
            first, _, rest = diagnostic.message.partition("\n")
            lines.append(f"[{diagnostic.severity.value}] {first} ({start.line + 1}:{start.character})")
            for extra in rest.splitlines():
                lines.append(f"  {extra}")
    return "\n".join(lines)
