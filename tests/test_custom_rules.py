import pytest

from stylecheck.checker import check_source
from stylecheck.errors import MalformedRuleDefinition
from stylecheck.identifiers import Scope
from stylecheck.rules import default_registry
from stylecheck.rules.custom import load_rule_file


def write_rules(tmp_path, text):
    path = tmp_path / "rules.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def registry_from(path):
    registry = default_registry()
    load_rule_file(path).apply(registry)
    registry.freeze()
    return registry


def test_custom_rule_is_appended(tmp_path):
    path = write_rules(
        tmp_path,
        """
rules:
  - id: no-short-locals
    scopes: [LocalVariable, Parameter]
    pattern: '.{3,}'
    message: "'{name}' is too short"
""",
    )
    registry = registry_from(path)

    report = check_source("class A { public void Run(int id) { var ab = 1; } }", registry=registry)

    assert [rule.id for rule in registry][-1] == "no-short-locals"
    assert [(v.identifier.name, v.message) for v in report.violations] == [
        ("id", "'id' is too short"),
        ("ab", "'ab' is too short"),
    ]


def test_custom_rule_overrides_builtin(tmp_path):
    path = write_rules(
        tmp_path,
        """
rules:
  - id: private-field-prefix
    scope: PrivateField
    pattern: 'm_[a-z][A-Za-z0-9]*'
    message: "private field '{name}' must use the m_ prefix"
""",
    )
    registry = registry_from(path)

    assert registry.order_of("private-field-prefix") == 2
    assert check_source("private int m_count;", registry=registry).violations == ()
    report = check_source("private int _count;", registry=registry)
    assert [v.message for v in report.violations] == ["private field '_count' must use the m_ prefix"]


def test_forbid_pattern(tmp_path):
    path = write_rules(
        tmp_path,
        """
rules:
  - id: no-hungarian
    scopes: [PrivateField]
    pattern: '_(str|int|b)[A-Z].*'
    forbid: true
    message: "'{name}' uses Hungarian notation"
""",
    )
    registry = registry_from(path)

    flagged = check_source("private string _strName;", registry=registry)
    clean = check_source("private string _name;", registry=registry)

    assert [v.rule.id for v in flagged.violations] == ["no-hungarian"]
    assert clean.violations == ()


def test_disable_builtin(tmp_path):
    path = write_rules(tmp_path, "disable:\n  - foreach-explicit-type\n")
    registry = registry_from(path)

    assert "foreach-explicit-type" not in registry
    assert check_source("foreach (var ch in laugh) { }", registry=registry).violations == ()


def test_json_rule_file_is_accepted(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text(
        '{"rules": [{"id": "x", "scopes": ["TypeName"], "pattern": "[A-Z]+", "message": "{name}"}]}',
        encoding="utf-8",
    )

    rule_file = load_rule_file(path)

    assert rule_file.rules[0].applies_to == frozenset({Scope.TYPE_NAME})


@pytest.mark.parametrize(
    "text, fragment",
    [
        ("rules: [", "invalid YAML"),
        ("- just\n- a list\n", "top level"),
        ("rulez: []\n", "unknown top-level"),
        ("rules: {}\n", "'rules' must be a list"),
        ("rules:\n  - not-a-mapping\n", "must be a mapping"),
        ("rules:\n  - scopes: [TypeName]\n    pattern: x\n    message: m\n", "'id'"),
        ("rules:\n  - id: a\n    pattern: x\n    message: m\n", "'scopes'"),
        ("rules:\n  - id: a\n    scopes: [Nowhere]\n    pattern: x\n    message: m\n", "unknown scope"),
        ("rules:\n  - id: a\n    scopes: [Unknown]\n    pattern: x\n    message: m\n", "Unknown scope"),
        ("rules:\n  - id: a\n    scopes: [TypeName]\n    pattern: '('\n    message: m\n", "invalid pattern"),
        ("rules:\n  - id: a\n    scopes: [TypeName]\n    pattern: x\n", "'message'"),
        ("rules:\n  - id: a\n    scopes: [TypeName]\n    pattern: x\n    message: '{bogus}'\n", "bad message"),
        ("rules:\n  - id: a\n    scopes: [TypeName]\n    pattern: x\n    message: '{name.upper_first}'\n", "bad message"),
        ("rules:\n  - id: a\n    scopes: [TypeName]\n    pattern: x\n    message: m\n    forbid: maybe\n", "'forbid'"),
        ("rules:\n  - id: a\n    scopes: [TypeName]\n    pattern: x\n    message: m\n    severity: high\n", "unknown key"),
        (
            "rules:\n  - {id: a, scopes: [TypeName], pattern: x, message: m}\n"
            "  - {id: a, scopes: [TypeName], pattern: y, message: m}\n",
            "duplicate id",
        ),
        ("disable: 3\n", "'disable'"),
        ("", "empty"),
    ],
)
def test_malformed_rule_files(tmp_path, text, fragment):
    path = write_rules(tmp_path, text)

    with pytest.raises(MalformedRuleDefinition) as excinfo:
        load_rule_file(path)

    assert fragment in str(excinfo.value)


def test_rule_file_that_is_not_utf8(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_bytes(b"rules:\n  - id: \xff\xfe\n")

    with pytest.raises(MalformedRuleDefinition, match="not valid UTF-8"):
        load_rule_file(path)


def test_missing_rule_file(tmp_path):
    with pytest.raises(MalformedRuleDefinition, match="not found"):
        load_rule_file(tmp_path / "absent.yaml")


def test_disabling_unknown_rule_is_malformed(tmp_path):
    path = write_rules(tmp_path, "disable: [no-such-rule]\n")

    with pytest.raises(MalformedRuleDefinition, match="no-such-rule"):
        load_rule_file(path).apply(default_registry())
