"""Rule registry for the checker."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Iterable, List, Tuple

from stylecheck.errors import RegistryFrozenError
from stylecheck.identifiers import Identifier, Scope

logger = logging.getLogger(__name__)

Predicate = Callable[[Identifier], bool]


@dataclass(frozen=True)
class Rule:
    """A declarative naming requirement.

    ``predicate`` returns ``True`` when the identifier satisfies the rule.
    ``message`` is a ``str.format`` template that may reference ``{name}``,
    ``{scope}`` and ``{type}``.
    """

    id: str
    applies_to: FrozenSet[Scope]
    predicate: Predicate
    message: str

    def render(self, identifier: Identifier) -> str:
        return self.message.format(
            name=identifier.name,
            scope=identifier.scope.value,
            type=identifier.declared_type or "",
        )


class RuleRegistry:
    """Ordered collection of rules keyed by id.

    Registering an id that already exists replaces the earlier rule in
    place, so overrides keep the existing output ordering.
    """

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: List[Rule] = []
        self._frozen = False
        for rule in rules:
            self.register(rule)

    def register(self, rule: Rule) -> None:
        self._ensure_mutable()
        for index, existing in enumerate(self._rules):
            if existing.id == rule.id:
                logger.debug("Overriding rule %s", rule.id)
                self._rules[index] = rule
                return
        self._rules.append(rule)

    def unregister(self, rule_id: str) -> None:
        self._ensure_mutable()
        for index, existing in enumerate(self._rules):
            if existing.id == rule_id:
                del self._rules[index]
                return
        raise KeyError(rule_id)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def rules_for(self, scope: Scope) -> Tuple[Rule, ...]:
        return tuple(rule for rule in self._rules if scope in rule.applies_to)

    def order_of(self, rule_id: str) -> int:
        for index, rule in enumerate(self._rules):
            if rule.id == rule_id:
                return index
        raise KeyError(rule_id)

    def ordering(self) -> Dict[str, int]:
        """Return rule id to registration index, for sorting violations."""

        return {rule.id: index for index, rule in enumerate(self._rules)}

    def __iter__(self):
        return iter(tuple(self._rules))

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, rule_id: object) -> bool:
        return any(rule.id == rule_id for rule in self._rules)

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise RegistryFrozenError("rule registry is frozen; register rules before checking")


def default_registry() -> RuleRegistry:
    """Build a fresh, unfrozen registry seeded with the built-in rules."""

    from .casing import get_rules as casing_rules
    from .implicit_typing import get_rules as implicit_typing_rules

    return RuleRegistry([*casing_rules(), *implicit_typing_rules()])
