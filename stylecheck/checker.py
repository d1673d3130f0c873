"""Apply registered rules to tokenized identifiers."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .identifiers import Identifier
from .profiles import CSHARP, Profile
from .result import Report, Violation
from .rules import RuleRegistry, default_registry
from .tokenizer import tokenize


class Checker:
    """Evaluate every applicable rule against every identifier.

    The checker holds no state besides the registry it reads from, so one
    instance can serve any number of threads.
    """

    def __init__(self, registry: RuleRegistry) -> None:
        self.registry = registry

    def check(self, identifiers: Iterable[Identifier]) -> List[Violation]:
        violations: List[Violation] = []
        for identifier in identifiers:
            for rule in self.registry.rules_for(identifier.scope):
                if not rule.predicate(identifier):
                    violations.append(Violation(identifier=identifier, rule=rule))
        return violations


def check_source(
    text: str,
    registry: Optional[RuleRegistry] = None,
    profile: Profile = CSHARP,
    path: str = "<string>",
) -> Report:
    """Tokenize, check and order one input unit."""

    registry = registry if registry is not None else default_registry()
    violations = Checker(registry).check(tokenize(text, profile))
    return Report.build(path, violations, registry.ordering())
