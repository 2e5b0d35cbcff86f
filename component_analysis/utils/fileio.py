"""Basic file IO helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml


class ReportError(Exception):
    """Raised when a report file cannot be read or parsed."""


def read_yaml_file(path: Path) -> Any:
    """Return the parsed YAML document stored at ``path``."""

    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def read_report(path: Path) -> Any:
    """Load an analysis report saved as JSON or YAML."""

    if not path.exists():
        raise ReportError(f"Report file not found: {path}")
    try:
        if path.suffix.lower() == ".json":
            return json.loads(path.read_text(encoding="utf-8"))
        return read_yaml_file(path)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as exc:
        raise ReportError(f"Failed to parse report {path}: {exc}") from exc
    except OSError as exc:
        raise ReportError(f"Failed to read report {path}: {exc}") from exc
