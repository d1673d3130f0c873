"""Identifier and scope definitions produced by the tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional


class Scope(str, Enum):
    """Enumerate the declaration contexts an identifier can be found in."""

    PUBLIC_MEMBER = "PublicMember"
    PRIVATE_FIELD = "PrivateField"
    STATIC_FIELD = "StaticField"
    THREAD_STATIC_FIELD = "ThreadStaticField"
    PARAMETER = "Parameter"
    LOCAL_VARIABLE = "LocalVariable"
    LOOP_VARIABLE = "LoopVariable"
    INTERFACE_NAME = "InterfaceName"
    TYPE_NAME = "TypeName"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value: str) -> "Scope":
        """Look a scope up by its display name (``PrivateField``)."""

        for scope in cls:
            if scope.value == value:
                return scope
        raise ValueError(f"unknown scope {value!r}")


class SourcePosition(NamedTuple):
    line: int
    column: int


@dataclass(frozen=True)
class Identifier:
    """A declared name together with the context it was declared in."""

    name: str
    scope: Scope
    position: SourcePosition
    declared_type: Optional[str] = None
    construct: Optional[str] = None
    implicitly_typed: bool = False

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column
