"""Render reports for people and for CI."""

from __future__ import annotations

import json
from enum import Enum
from typing import Iterable, List

from .result import Report, RunResult, Violation
from .rules import Rule

ANSI_RULE = "\033[31m"
ANSI_POSITION = "\033[1m"
ANSI_RESET = "\033[0m"


class ReportFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


def _text_line(violation: Violation, color: bool) -> str:
    position = f"{violation.line}:{violation.column}"
    rule_id = f"[{violation.rule.id}]"
    if color:
        position = f"{ANSI_POSITION}{position}{ANSI_RESET}"
        rule_id = f"{ANSI_RULE}{rule_id}{ANSI_RESET}"
    return f"{position}: {rule_id} {violation.message}"


def render(report: Report, fmt: ReportFormat = ReportFormat.TEXT, color: bool = False) -> str:
    """Render one report.

    Text is one ``<line>:<col>: [<rule>] <message>`` line per violation;
    JSON is an array of violation objects in the same order.
    """

    if ReportFormat(fmt) is ReportFormat.JSON:
        return json.dumps([violation.to_dict() for violation in report.violations], indent=2)
    return "\n".join(_text_line(violation, color) for violation in report.violations)


def render_run(run: RunResult, fmt: ReportFormat = ReportFormat.TEXT, color: bool = False) -> str:
    """Render every report of a run, path-prefixed in text mode."""

    if ReportFormat(fmt) is ReportFormat.JSON:
        return json.dumps(run.to_dict(), indent=2)
    lines: List[str] = []
    for report in run.reports:
        rendered = render(report, ReportFormat.TEXT, color)
        if rendered:
            lines.extend(f"{report.path}:{line}" for line in rendered.splitlines())
    return "\n".join(lines)


def format_summary(run: RunResult) -> str:
    """One-line summary for the diagnostics stream."""

    summary = run.summary
    status = "PASS" if run.passed else "FAIL"
    text = (
        f"{status}: {summary.violations} violation(s) in {summary.files_with_violations} "
        f"of {summary.files} file(s)"
    )
    if summary.errors:
        text += f", {summary.errors} input error(s)"
    return text


def format_rule_table(rules: Iterable[Rule]) -> str:
    """Tabulate a rule set for ``--list-rules``."""

    rows = [(rule.id, ", ".join(sorted(scope.value for scope in rule.applies_to)), rule.message) for rule in rules]
    if not rows:
        return "No rules registered."
    id_width = max(len("Rule"), *(len(row[0]) for row in rows))
    scope_width = max(len("Scopes"), *(len(row[1]) for row in rows))
    header = f"{'Rule':<{id_width}} | {'Scopes':<{scope_width}} | Message"
    lines = [header, "-" * len(header)]
    for rule_id, scopes, message in rows:
        lines.append(f"{rule_id:<{id_width}} | {scopes:<{scope_width}} | {message}")
    return "\n".join(lines)
