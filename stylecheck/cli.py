"""Command-line entry point for the naming-convention checker."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .checker import Checker
from .errors import InputNotFound, MalformedRuleDefinition
from .profiles import DEFAULT_PROFILE, PROFILES, Profile, get_profile
from .reporter import ReportFormat, format_rule_table, format_summary, render_run
from .result import Report, RunResult
from .rules import RuleRegistry, default_registry
from .rules.custom import load_rule_file
from .tokenizer import tokenize
from .utils import iter_source_files, read_text_file

logger = logging.getLogger(__name__)

DEFAULT_JOBS = min(os.cpu_count() or 2, 4)
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stylecheck",
        description="Report identifiers that break the naming conventions",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    check = subparsers.add_parser("check", help="Check source files or directories.")
    check.add_argument(
        "paths",
        nargs="*",
        help="Source files or directories to check (directories are walked recursively).",
    )
    check.add_argument(
        "--format",
        choices=[fmt.value for fmt in ReportFormat],
        default=ReportFormat.TEXT.value,
        help="Report format (defaults to text).",
    )
    check.add_argument(
        "--rules",
        dest="rules_path",
        default=None,
        help="YAML file with custom rules merged over the built-in set.",
    )
    check.add_argument(
        "--profile",
        choices=sorted(PROFILES),
        default=DEFAULT_PROFILE,
        help="Host-language profile used to scan declarations.",
    )
    check.add_argument(
        "--out",
        "--output",
        dest="output_path",
        default=None,
        help="Write the report to this file instead of stdout.",
    )
    check.add_argument(
        "--jobs",
        "-j",
        type=int,
        default=DEFAULT_JOBS,
        help="Number of files analysed concurrently (1 disables threading).",
    )
    check.add_argument(
        "--list-rules",
        action="store_true",
        help="Print the effective rule set and exit.",
    )
    check.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log progress to stderr.",
    )
    return parser


def load_registry(rules_path: Optional[str] = None) -> RuleRegistry:
    """Built-in rules plus the optional rule file, frozen for checking."""

    registry = default_registry()
    if rules_path:
        load_rule_file(Path(rules_path)).apply(registry)
    registry.freeze()
    logger.debug("Using %d rule(s): %s", len(registry), ", ".join(rule.id for rule in registry))
    return registry


def analyze_file(path: Path, checker: Checker, profile: Profile) -> Union[Report, InputNotFound]:
    """Check one input unit; read failures are returned, not raised."""

    try:
        text = read_text_file(path)
    except InputNotFound as exc:
        return exc
    logger.debug("Checking %s", path)
    violations = checker.check(tokenize(text, profile))
    return Report.build(str(path), violations, checker.registry.ordering())


def run_check(
    paths: Iterable[str],
    registry: RuleRegistry,
    profile: Profile,
    jobs: int = 1,
) -> RunResult:
    checker = Checker(registry)
    units = list(iter_source_files(paths, profile.extensions))
    analyze = partial(analyze_file, checker=checker, profile=profile)
    if jobs > 1 and len(units) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            outcomes = list(pool.map(analyze, units))
    else:
        outcomes = [analyze(unit) for unit in units]

    result = RunResult()
    for outcome in outcomes:
        if isinstance(outcome, InputNotFound):
            logger.error("Cannot read %s: %s", outcome.path, outcome.reason)
            result.add_error(outcome)
        else:
            result.add_report(outcome)
    return result


def use_color(report_format: ReportFormat, output_path: Optional[str]) -> bool:
    if report_format is not ReportFormat.TEXT or output_path:
        return False
    if os.getenv("NO_COLOR"):
        return False
    return sys.stdout.isatty()


def write_output(result: RunResult, output_path: Optional[str], report_format: ReportFormat) -> None:
    payload = render_run(result, report_format, color=use_color(report_format, output_path))
    if output_path:
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(payload + "\n" if payload else "", encoding="utf-8")
        logger.info("Report written to %s", output_path)
    elif payload:
        print(payload)


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    if not args.paths and not args.list_rules:
        parser.error("check: at least one path is required")
    if args.jobs < 1:
        parser.error("--jobs must be at least 1")

    try:
        registry = load_registry(args.rules_path)
    except MalformedRuleDefinition as exc:
        logger.error("Invalid rule file %s", exc)
        return EXIT_ERROR

    if args.list_rules:
        print(format_rule_table(registry))
        return 0

    profile = get_profile(args.profile)
    report_format = ReportFormat(args.format)
    result = run_check(args.paths, registry, profile, jobs=args.jobs)
    write_output(result, args.output_path, report_format)
    logger.info(format_summary(result))
    return result.exit_code()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
