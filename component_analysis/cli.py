"""Command-line entry point for running component analysis over a saved report."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Sequence

from loguru import logger

from .config import ConfigError, load_config
from .context import DependencyContext
from .pipeline import DEFAULT_RULES, DiagnosticsPipeline
from .result import Diagnostic, DiagnosticSummary, format_summary_table
from .utils import ReportError, read_report

EXIT_INPUT_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Turn a dependency analysis report into editor diagnostics",
    )
    parser.add_argument("report", help="Path to the analysis report (JSON or YAML).")
    parser.add_argument("--name", required=True, help="Name of the analyzed package.")
    parser.add_argument("--version", required=True, help="Version of the analyzed package.")
    parser.add_argument(
        "--line",
        type=int,
        default=1,
        help="1-based manifest line holding the dependency (defaults to 1).",
    )
    parser.add_argument(
        "--column",
        type=int,
        default=0,
        help="0-based column of the version string on that line.",
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="YAML file listing forbidden_licenses.",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        type=str,
        default=None,
        help="Path to write the diagnostics as JSON (e.g., artifacts/diagnostics.json).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log rule decisions to stderr.",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def write_output(diagnostics: Sequence[Diagnostic], output_path: str | None) -> None:
    print(format_summary_table(diagnostics))

    payload = json.dumps([diagnostic.to_dict() for diagnostic in diagnostics], indent=2)
    if output_path:
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(payload, encoding="utf-8")
        print(f"\nDiagnostics written to {output_path}")
    else:
        print("\nJSON Diagnostics")
        print(payload)


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_config(args.config_path)
        report = read_report(Path(args.report))
    except (ConfigError, ReportError) as exc:
        sys.stderr.write(f"{exc}\n")
        return EXIT_INPUT_ERROR

    dependency = DependencyContext.from_strings(args.name, args.version, args.line, args.column)
    logger.debug(f"analyzing {dependency.label} from {args.report}")
    diagnostics = DiagnosticsPipeline(DEFAULT_RULES, dependency, config).run(report)
    write_output(diagnostics, args.output_path)
    return DiagnosticSummary.from_diagnostics(diagnostics).exit_code()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
