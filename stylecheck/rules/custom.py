"""Load user-defined rules from a YAML rule file."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

from stylecheck.errors import MalformedRuleDefinition
from stylecheck.identifiers import Identifier, Scope
from stylecheck.utils import read_yaml_file

from . import Predicate, Rule, RuleRegistry

logger = logging.getLogger(__name__)

ALLOWED_RULE_KEYS = {"id", "scope", "scopes", "pattern", "message", "forbid"}


@dataclass
class RuleFile:
    """Parsed contents of a custom rule file."""

    path: str
    rules: List[Rule] = field(default_factory=list)
    disable: List[str] = field(default_factory=list)

    def apply(self, registry: RuleRegistry) -> None:
        """Merge into ``registry``; same-id rules override built-ins."""

        for rule in self.rules:
            registry.register(rule)
        for rule_id in self.disable:
            try:
                registry.unregister(rule_id)
            except KeyError:
                raise MalformedRuleDefinition(self.path, f"cannot disable unknown rule {rule_id!r}") from None
        logger.debug(
            "Applied %d custom rule(s) and %d disable(s) from %s",
            len(self.rules),
            len(self.disable),
            self.path,
        )


def pattern_predicate(pattern: re.Pattern, forbid: bool = False) -> Predicate:
    def predicate(identifier: Identifier) -> bool:
        matched = pattern.fullmatch(identifier.name) is not None
        return not matched if forbid else matched

    return predicate


def load_rule_file(path: Path) -> RuleFile:
    """Parse ``path`` into a :class:`RuleFile`.

    Every problem is reported as :class:`MalformedRuleDefinition`; a rule file
    is accepted whole or not at all.
    """

    source = str(path)
    try:
        data = read_yaml_file(path)
    except yaml.YAMLError as exc:
        raise MalformedRuleDefinition(source, f"invalid YAML: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise MalformedRuleDefinition(source, f"rule file is not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise MalformedRuleDefinition(source, f"cannot read rule file: {exc.strerror or exc}") from exc
    if data is None:
        raise MalformedRuleDefinition(source, "rule file not found or empty")
    if not isinstance(data, dict):
        raise MalformedRuleDefinition(source, "top level must be a mapping with 'rules' and/or 'disable'")

    unknown = set(data) - {"rules", "disable"}
    if unknown:
        raise MalformedRuleDefinition(source, f"unknown top-level key(s): {', '.join(sorted(map(str, unknown)))}")

    raw_rules = data.get("rules")
    if raw_rules is None:
        raw_rules = []
    if not isinstance(raw_rules, list):
        raise MalformedRuleDefinition(source, "'rules' must be a list")
    rule_file = RuleFile(path=source)
    seen = set()
    for index, entry in enumerate(raw_rules):
        rule = _build_rule(source, index, entry)
        if rule.id in seen:
            raise MalformedRuleDefinition(source, f"rules[{index}]: duplicate id {rule.id!r}")
        seen.add(rule.id)
        rule_file.rules.append(rule)

    raw_disable = data.get("disable")
    if raw_disable is None:
        raw_disable = []
    if isinstance(raw_disable, str):
        raw_disable = [raw_disable]
    if not isinstance(raw_disable, list) or not all(isinstance(item, str) for item in raw_disable):
        raise MalformedRuleDefinition(source, "'disable' must be a list of rule ids")
    rule_file.disable = list(raw_disable)
    return rule_file


def _build_rule(source: str, index: int, entry: Any) -> Rule:
    where = f"rules[{index}]"
    if not isinstance(entry, dict):
        raise MalformedRuleDefinition(source, f"{where}: each rule must be a mapping")
    unknown = set(entry) - ALLOWED_RULE_KEYS
    if unknown:
        raise MalformedRuleDefinition(source, f"{where}: unknown key(s): {', '.join(sorted(map(str, unknown)))}")

    rule_id = entry.get("id")
    if not isinstance(rule_id, str) or not rule_id.strip():
        raise MalformedRuleDefinition(source, f"{where}: 'id' must be a non-empty string")

    scopes = _parse_scopes(source, where, entry)

    raw_pattern = entry.get("pattern")
    if not isinstance(raw_pattern, str):
        raise MalformedRuleDefinition(source, f"{where}: 'pattern' must be a string")
    try:
        pattern = re.compile(raw_pattern)
    except re.error as exc:
        raise MalformedRuleDefinition(source, f"{where}: invalid pattern {raw_pattern!r}: {exc}") from exc

    message = entry.get("message")
    if not isinstance(message, str) or not message:
        raise MalformedRuleDefinition(source, f"{where}: 'message' must be a non-empty string")
    try:
        message.format(name="", scope="", type="")
    except (AttributeError, KeyError, IndexError, ValueError) as exc:
        raise MalformedRuleDefinition(source, f"{where}: bad message template: {exc}") from exc

    forbid = entry.get("forbid", False)
    if not isinstance(forbid, bool):
        raise MalformedRuleDefinition(source, f"{where}: 'forbid' must be true or false")

    return Rule(
        id=rule_id.strip(),
        applies_to=scopes,
        predicate=pattern_predicate(pattern, forbid=forbid),
        message=message,
    )


def _parse_scopes(source: str, where: str, entry: Dict[str, Any]):
    if "scope" in entry and "scopes" in entry:
        raise MalformedRuleDefinition(source, f"{where}: use either 'scope' or 'scopes', not both")
    raw = entry.get("scopes", entry.get("scope"))
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list) or not raw:
        raise MalformedRuleDefinition(source, f"{where}: 'scopes' must be a non-empty list of scope names")
    scopes = set()
    for name in raw:
        try:
            scope = Scope.parse(str(name))
        except ValueError:
            valid = ", ".join(scope.value for scope in Scope if scope is not Scope.UNKNOWN)
            raise MalformedRuleDefinition(source, f"{where}: unknown scope {name!r} (expected one of {valid})") from None
        if scope is Scope.UNKNOWN:
            raise MalformedRuleDefinition(source, f"{where}: rules cannot target the Unknown scope")
        scopes.add(scope)
    return frozenset(scopes)
