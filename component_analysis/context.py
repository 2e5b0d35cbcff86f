"""Identity of the dependency whose report is being analyzed."""

from __future__ import annotations

from dataclasses import dataclass, field

from .result import Position, Range


@dataclass(frozen=True)
class PositionedValue:
    """A manifest value along with where it was found.

    ``line`` is 1-based and ``column`` 0-based, matching what manifest parsers
    report; :func:`get_range` converts to the 0-based editor convention.
    """

    value: str
    line: int = 1
    column: int = 0


@dataclass(frozen=True)
class DependencyContext:
    """Name and version of the package under analysis."""

    name: PositionedValue
    version: PositionedValue = field(default_factory=lambda: PositionedValue(""))

    @property
    def label(self) -> str:
        return f"{self.name.value}-{self.version.value}"

    @classmethod
    def from_strings(cls, name: str, version: str, line: int = 1, column: int = 0) -> "DependencyContext":
        return cls(
            name=PositionedValue(name, line, column),
            version=PositionedValue(version, line, column),
        )


def get_range(value: PositionedValue) -> Range:
    """Return the editor range covering ``value`` on its manifest line."""

    line = max(value.line - 1, 0)
    return Range(
        start=Position(line=line, character=value.column),
        end=Position(line=line, character=value.column + len(value.value)),
    )
