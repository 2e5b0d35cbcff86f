"""Configuration loading and validation.

Usage:
    config = load_config("component-analysis.yaml")   # raises ConfigError on bad config
    config = AnalysisConfig.from_mapping(settings)    # editor settings object
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Tuple

import yaml

ENV_FORBIDDEN_LICENSES = "COMPONENT_ANALYSIS_FORBIDDEN_LICENSES"


class ConfigError(Exception):
    """Raised when the configuration is missing or invalid."""


@dataclass(frozen=True)
class AnalysisConfig:
    forbidden_licenses: Tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, raw: Mapping) -> "AnalysisConfig":
        """Build a config from an already-parsed settings mapping."""

        return cls(forbidden_licenses=_license_list(raw.get("forbidden_licenses")))


def _license_list(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (set, frozenset)):
        value = sorted(value, key=str)
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return tuple(value)
    raise ConfigError("'forbidden_licenses' must be a string or a list or set of strings")


def load_config(config_path: Optional[str] = None) -> AnalysisConfig:
    """Load configuration from a YAML file.

    The COMPONENT_ANALYSIS_FORBIDDEN_LICENSES environment variable (comma
    separated) overrides the file value. Without a path the defaults apply.

    Raises:
        ConfigError: if the file is missing, malformed, or has the wrong shape.
    """
    raw: Any = {}
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: '{config_path}'")
        try:
            with path.open(encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Failed to parse '{config_path}': {exc}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Failed to read '{config_path}': {exc}") from exc
        if not isinstance(raw, Mapping):
            raise ConfigError(f"'{config_path}' must be a YAML mapping at the top level.")

    config = AnalysisConfig.from_mapping(raw)

    override = os.environ.get(ENV_FORBIDDEN_LICENSES)
    if override:
        licenses = tuple(item.strip() for item in override.split(",") if item.strip())
        config = AnalysisConfig(forbidden_licenses=licenses)
    return config
