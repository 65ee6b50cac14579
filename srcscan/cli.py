"""Command-line entry point for srcscan."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from .analyzer import FilesSourceAnalyzer
from .config import ScanConfig, load_config
from .errors import SrcscanError
from .logging_config import configure_logging
from .priority import Priority
from .results import DirectoryResults, Summary, summarize
from .rules import RuleSet, load_rule_set

logger = logging.getLogger(__name__)

ERROR_EXIT_CODE = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="srcscan",
        description="Run rules against an explicit list of source files.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Source files to analyze, relative to the base directory.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML config file (defaults to .srcscan.yaml if present).",
    )
    parser.add_argument(
        "--base-dir",
        "-b",
        dest="base_directory",
        default=None,
        help="Directory the listed files are relative to.",
    )
    parser.add_argument(
        "--ruleset",
        "-r",
        default=None,
        help="YAML rule set file; overrides the rules in the config file.",
    )
    parser.add_argument(
        "--max-priority",
        default=None,
        help="Count files with violations at or under this priority (1-3 or HIGH/MEDIUM/LOW).",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        type=str,
        default=None,
        help="Path to write the JSON results tree (e.g., artifacts/srcscan.json).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level for diagnostics written to stderr.",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> ScanConfig:
    config = load_config(args.config)
    if args.base_directory is not None:
        config.base_directory = args.base_directory
    if args.files:
        config.source_files = list(args.files)
    if args.max_priority is not None:
        config.max_priority = Priority.parse(args.max_priority)
    return config


def resolve_rule_set(args: argparse.Namespace, config: ScanConfig) -> RuleSet:
    if args.ruleset:
        return load_rule_set(args.ruleset)
    return config.build_rule_set()


def format_summary(summary: Summary, max_priority: int) -> str:
    """Create a short human-readable summary for console output."""

    lines: List[str] = []
    lines.append("Analysis Summary")
    lines.append("=" * 40)
    lines.append(f"Files analyzed        : {summary.files}")
    lines.append(f"Files with violations : {summary.files_with_violations} (priority <= {max_priority})")
    header = f"{'Priority':<10} | {'Count':>5}"
    lines.append(header)
    lines.append("-" * len(header))
    for priority, count in summary.as_rows():
        lines.append(f"{priority:<10} | {count:>5}")
    lines.append("-" * len(header))
    lines.append(f"Violations            : {summary.total}")
    return "\n".join(lines)


def write_output(results: DirectoryResults, summary: Summary, output_path: str | None) -> None:
    if not output_path:
        return
    payload = json.dumps({"summary": summary.to_dict(), "results": results.to_dict()}, indent=2)
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(payload, encoding="utf-8")
    print(f"\nResults written to {output_path}")


def exit_code(summary: Summary) -> int:
    worst = summary.worst_priority
    if worst is None or worst > Priority.LOW:
        return 0
    return Priority(max(worst, Priority.HIGH)).exit_code


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    try:
        config = resolve_config(args)
        rule_set = resolve_rule_set(args, config)
        analyzer = FilesSourceAnalyzer(config.base_directory, config.source_files)
        results = analyzer.analyze(rule_set)
    except SrcscanError as exc:
        logger.debug("Analysis failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return ERROR_EXIT_CODE

    summary = summarize(results, config.max_priority)
    print(format_summary(summary, int(config.max_priority)))
    write_output(results, summary, args.output_path)
    return exit_code(summary)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
