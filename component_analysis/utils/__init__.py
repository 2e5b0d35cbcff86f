"""Utility helpers for the analysis pipeline."""

from .fileio import ReportError, read_report, read_yaml_file

__all__ = [
    "ReportError",
    "read_report",
    "read_yaml_file",
]
