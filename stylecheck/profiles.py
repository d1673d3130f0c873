"""Host-language profiles describing the keywords the tokenizer relies on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Tuple


@dataclass(frozen=True)
class Profile:
    """Keyword and brace vocabulary for one host language."""

    name: str
    extensions: Tuple[str, ...]
    modifiers: FrozenSet[str]
    private_access: FrozenSet[str]
    public_access: FrozenSet[str]
    static_keyword: str
    const_keyword: str
    event_keyword: str
    implicit_type: str
    thread_static_attributes: FrozenSet[str]
    type_keywords: FrozenSet[str]
    interface_keyword: str
    enum_keyword: str
    record_keyword: str
    delegate_keyword: str
    namespace_keyword: str
    using_keyword: str
    operator_keyword: str
    indexer_keyword: str
    for_keyword: str
    foreach_keyword: str
    in_keyword: str
    catch_keyword: str
    fixed_keyword: str
    await_keyword: str
    condition_keywords: FrozenSet[str]
    bare_keywords: FrozenSet[str]
    label_keywords: FrozenSet[str]
    accessor_keywords: FrozenSet[str]
    parameter_modifiers: FrozenSet[str]
    local_modifiers: FrozenSet[str]
    reserved: FrozenSet[str]

    @property
    def access_modifiers(self) -> FrozenSet[str]:
        return self.private_access | self.public_access


_CSHARP_RESERVED = frozenset(
    {
        "abstract", "as", "base", "break", "case", "catch", "checked", "class", "const",
        "continue", "default", "delegate", "do", "else", "enum", "event", "explicit",
        "extern", "false", "finally", "fixed", "for", "foreach", "goto", "if", "implicit",
        "in", "interface", "internal", "is", "lock", "namespace", "new", "null", "operator",
        "out", "override", "params", "private", "protected", "public", "readonly", "ref",
        "return", "sealed", "sizeof", "stackalloc", "static", "struct", "switch", "this",
        "throw", "true", "try", "typeof", "unchecked", "unsafe", "using", "virtual",
        "volatile", "while", "await", "yield", "nameof", "record",
    }
)

CSHARP = Profile(
    name="csharp",
    extensions=(".cs", ".csx"),
    modifiers=frozenset(
        {
            "public", "private", "protected", "internal", "static", "readonly", "const",
            "volatile", "override", "virtual", "abstract", "sealed", "async", "extern",
            "new", "partial", "unsafe", "required", "file", "implicit", "explicit", "ref",
        }
    ),
    private_access=frozenset({"private", "internal"}),
    public_access=frozenset({"public", "protected"}),
    static_keyword="static",
    const_keyword="const",
    event_keyword="event",
    implicit_type="var",
    thread_static_attributes=frozenset({"ThreadStatic", "ThreadStaticAttribute"}),
    type_keywords=frozenset({"class", "struct", "interface", "enum", "record"}),
    interface_keyword="interface",
    enum_keyword="enum",
    record_keyword="record",
    delegate_keyword="delegate",
    namespace_keyword="namespace",
    using_keyword="using",
    operator_keyword="operator",
    indexer_keyword="this",
    for_keyword="for",
    foreach_keyword="foreach",
    in_keyword="in",
    catch_keyword="catch",
    fixed_keyword="fixed",
    await_keyword="await",
    condition_keywords=frozenset({"if", "while", "switch", "lock"}),
    bare_keywords=frozenset({"else", "do", "try", "finally", "unsafe", "checked", "unchecked"}),
    label_keywords=frozenset({"case", "default"}),
    accessor_keywords=frozenset({"get", "set", "init", "add", "remove"}),
    parameter_modifiers=frozenset({"this", "ref", "out", "in", "params", "scoped", "readonly"}),
    local_modifiers=frozenset({"ref", "scoped", "readonly"}),
    reserved=_CSHARP_RESERVED,
)

PROFILES: Dict[str, Profile] = {
    CSHARP.name: CSHARP,
}
DEFAULT_PROFILE = CSHARP.name


def get_profile(name: str) -> Profile:
    try:
        return PROFILES[name]
    except KeyError:
        raise ValueError(f"unknown profile {name!r} (available: {', '.join(sorted(PROFILES))})") from None
