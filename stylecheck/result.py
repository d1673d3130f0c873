"""Core result data structures for the checker."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Tuple

from .errors import InputNotFound
from .identifiers import Identifier
from .rules import Rule


@dataclass(frozen=True)
class Violation:
    """One identifier failing one rule."""

    identifier: Identifier
    rule: Rule

    @property
    def line(self) -> int:
        return self.identifier.line

    @property
    def column(self) -> int:
        return self.identifier.column

    @property
    def message(self) -> str:
        return self.rule.render(self.identifier)

    def to_dict(self) -> Dict[str, object]:
        return {
            "line": self.line,
            "column": self.column,
            "rule": self.rule.id,
            "message": self.message,
            "name": self.identifier.name,
            "scope": self.identifier.scope.value,
        }


@dataclass(frozen=True)
class Report:
    """Violations for a single input unit, ordered by position."""

    path: str
    violations: Tuple[Violation, ...] = ()

    @classmethod
    def build(cls, path: str, violations: Iterable[Violation], ordering: Mapping[str, int]) -> "Report":
        """Sort by (line, column), breaking ties by rule registration order."""

        fallback = len(ordering)
        ordered = sorted(
            violations,
            key=lambda violation: (
                violation.line,
                violation.column,
                ordering.get(violation.rule.id, fallback),
            ),
        )
        return cls(path=path, violations=tuple(ordered))

    @property
    def passed(self) -> bool:
        return not self.violations

    def to_dict(self) -> Dict[str, object]:
        return {
            "path": self.path,
            "violations": [violation.to_dict() for violation in self.violations],
        }


@dataclass
class Summary:
    """Aggregate counts across every analysed input unit."""

    files: int = 0
    files_with_violations: int = 0
    violations: int = 0
    errors: int = 0
    by_rule: Counter = field(default_factory=Counter)

    def add_report(self, report: Report) -> None:
        self.files += 1
        if not report.passed:
            self.files_with_violations += 1
        self.violations += len(report.violations)
        self.by_rule.update(violation.rule.id for violation in report.violations)

    def to_dict(self) -> Dict[str, object]:
        return {
            "files": self.files,
            "files_with_violations": self.files_with_violations,
            "violations": self.violations,
            "errors": self.errors,
            "by_rule": dict(sorted(self.by_rule.items())),
        }


@dataclass
class RunResult:
    """Bundle the reports and input errors of one run."""

    summary: Summary = field(default_factory=Summary)
    reports: List[Report] = field(default_factory=list)
    errors: List[InputNotFound] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.summary.violations == 0 and not self.errors

    def add_report(self, report: Report) -> None:
        self.summary.add_report(report)
        self.reports.append(report)

    def add_error(self, error: InputNotFound) -> None:
        self.summary.errors += 1
        self.errors.append(error)

    def to_dict(self) -> Dict[str, object]:
        return {
            "summary": self.summary.to_dict(),
            "files": [report.to_dict() for report in self.reports],
            "passed": self.passed,
        }

    def exit_code(self) -> int:
        if self.errors:
            return 2
        if self.summary.violations > 0:
            return 1
        return 0
