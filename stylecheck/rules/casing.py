"""Casing and prefix rules for declared names."""

from __future__ import annotations

from typing import List

from stylecheck.identifiers import Identifier, Scope

from . import Predicate, Rule

PRIVATE_FIELD_PREFIX = "_"
STATIC_FIELD_PREFIX = "s_"
THREAD_STATIC_FIELD_PREFIX = "t_"
INTERFACE_PREFIX = "I"


def is_pascal_case(name: str) -> bool:
    """Uppercase first letter, letters and digits only."""

    return name[:1].isupper() and name.isalnum()


def is_camel_case(name: str) -> bool:
    """Lowercase first letter, letters and digits only."""

    return name[:1].islower() and name.isalnum()


def has_interface_prefix(name: str) -> bool:
    return len(name) > 1 and name.startswith(INTERFACE_PREFIX) and name[1].isupper()


def prefixed_camel_case(prefix: str) -> Predicate:
    def predicate(identifier: Identifier) -> bool:
        name = identifier.name
        return name.startswith(prefix) and is_camel_case(name[len(prefix):])

    return predicate


def _pascal(identifier: Identifier) -> bool:
    return is_pascal_case(identifier.name)


def _camel(identifier: Identifier) -> bool:
    return is_camel_case(identifier.name)


def _interface(identifier: Identifier) -> bool:
    return has_interface_prefix(identifier.name)


def get_rules() -> List[Rule]:
    return [
        Rule(
            id="pascal-case",
            applies_to=frozenset({Scope.PUBLIC_MEMBER, Scope.INTERFACE_NAME, Scope.TYPE_NAME}),
            predicate=_pascal,
            message="{scope} '{name}' must be PascalCase",
        ),
        Rule(
            id="interface-prefix",
            applies_to=frozenset({Scope.INTERFACE_NAME}),
            predicate=_interface,
            message="interface '{name}' must start with 'I' followed by an uppercase letter",
        ),
        Rule(
            id="private-field-prefix",
            applies_to=frozenset({Scope.PRIVATE_FIELD}),
            predicate=prefixed_camel_case(PRIVATE_FIELD_PREFIX),
            message="private field '{name}' must be camelCase prefixed with '_'",
        ),
        Rule(
            id="static-field-prefix",
            applies_to=frozenset({Scope.STATIC_FIELD}),
            predicate=prefixed_camel_case(STATIC_FIELD_PREFIX),
            message="static field '{name}' must be camelCase prefixed with 's_'",
        ),
        Rule(
            id="thread-static-field-prefix",
            applies_to=frozenset({Scope.THREAD_STATIC_FIELD}),
            predicate=prefixed_camel_case(THREAD_STATIC_FIELD_PREFIX),
            message="thread-static field '{name}' must be camelCase prefixed with 't_'",
        ),
        Rule(
            id="camel-case",
            applies_to=frozenset({Scope.PARAMETER, Scope.LOCAL_VARIABLE, Scope.LOOP_VARIABLE}),
            predicate=_camel,
            message="{scope} '{name}' must be camelCase",
        ),
    ]
