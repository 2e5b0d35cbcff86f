"""Path based extraction of nested values from loosely structured reports."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Tuple

BindingDescriptor = Tuple[str, ...]


class _Absent:
    """Marker for a path that does not resolve inside a report."""

    _instance = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


def _step(current: Any, segment: str) -> Any:
    if isinstance(current, Mapping):
        if segment in current:
            return current[segment]
        return ABSENT
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
        try:
            index = int(segment)
        except (TypeError, ValueError):
            return ABSENT
        if -len(current) <= index < len(current):
            return current[index]
    return ABSENT


def bind(root: Any, path: BindingDescriptor) -> Any:
    """Return the value at ``path`` inside ``root`` or ``ABSENT``.

    Mappings are walked by key and sequences by integer index. The walk stops at
    the first segment that cannot be resolved; no partial result is returned and
    no exception escapes. An empty path yields ``root`` itself.
    """

    current = root
    for segment in path:
        current = _step(current, segment)
        if current is ABSENT:
            return ABSENT
    return current


def is_absent(value: Any) -> bool:
    return value is ABSENT
