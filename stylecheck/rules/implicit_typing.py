"""Flag implicitly typed ``foreach`` loop variables."""

from __future__ import annotations

from typing import List

from stylecheck.identifiers import Identifier, Scope

from . import Rule

FOREACH_CONSTRUCT = "foreach"


def _explicitly_typed_foreach(identifier: Identifier) -> bool:
    if identifier.construct != FOREACH_CONSTRUCT:
        return True
    return not identifier.implicitly_typed


def get_rules() -> List[Rule]:
    return [
        Rule(
            id="foreach-explicit-type",
            applies_to=frozenset({Scope.LOOP_VARIABLE}),
            predicate=_explicitly_typed_foreach,
            message="foreach variable '{name}' must declare its type instead of '{type}'",
        ),
    ]
