"""Shallow declaration scanner for C#-family source text.

The scanner never builds a syntax tree. It lexes the text into words and
punctuation (dropping comments, literals and preprocessor lines), then walks
the token stream with a small stack of brace contexts:

* containers (file, namespace, class, struct, record, interface) hold member
  declarations;
* enum bodies hold comma separated member names;
* accessor blocks hold ``get``/``set``/``add``/``remove`` bodies;
* bodies (methods, accessors, lambdas that open a statement block) hold
  statements, from which locals and loop variables are picked.

Whenever a declaration does not fit one of the recognised shapes, the name is
either reported with :attr:`Scope.UNKNOWN` or not reported at all. False
negatives are preferred over guesses.
"""

from __future__ import annotations

import bisect
import logging
from typing import FrozenSet, List, NamedTuple, Optional, Sequence, Set, Tuple

from .identifiers import Identifier, Scope, SourcePosition
from .profiles import CSHARP, Profile

logger = logging.getLogger(__name__)

WORD = "word"
NUMBER = "number"
LITERAL = "literal"
PUNCT = "punct"

MULTI_CHAR_PUNCT = (
    "??=", "=>", "==", "!=", "<=", ">=", "&&", "||", "??", "?.", "::", "++", "--",
    "->", "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=",
)

TOP = "top"
NAMESPACE = "namespace"
TYPE = "type"
INTERFACE = "interface"

OPENERS = {"(": ")", "[": "]", "{": "}"}
CLOSERS = {")", "]", "}"}
ANGLE_CONTENT = {",", ".", "?", "[", "]", "(", ")", "::", "*"}


class Token(NamedTuple):
    kind: str
    text: str
    line: int
    column: int

    @property
    def name(self) -> str:
        return self.text[1:] if self.text.startswith("@") else self.text

    @property
    def position(self) -> SourcePosition:
        return SourcePosition(self.line, self.column)


# ----------------------------------------------------------------------
# Lexing
# ----------------------------------------------------------------------
class _Lexer:
    def __init__(self, text: str) -> None:
        self.text = text
        self.length = len(text)
        self.index = 0
        self.tokens: List[Token] = []
        self._line_starts = [0]
        for offset, char in enumerate(text):
            if char == "\n":
                self._line_starts.append(offset + 1)

    def position(self, offset: int) -> Tuple[int, int]:
        line = bisect.bisect_right(self._line_starts, offset)
        return line, offset - self._line_starts[line - 1] + 1

    def emit(self, kind: str, start: int, end: int) -> None:
        line, column = self.position(start)
        self.tokens.append(Token(kind, self.text[start:end], line, column))

    def peek(self, offset: int = 0) -> str:
        index = self.index + offset
        return self.text[index] if index < self.length else ""

    def run(self) -> List[Token]:
        text = self.text
        at_line_start = True
        while self.index < self.length:
            char = text[self.index]
            if char == "\n":
                at_line_start = True
                self.index += 1
                continue
            if char.isspace():
                self.index += 1
                continue
            if char == "#" and at_line_start:
                self._skip_line()
                continue
            at_line_start = False
            start = self.index
            if char == "/" and self.peek(1) == "/":
                self._skip_line()
            elif char == "/" and self.peek(1) == "*":
                end = text.find("*/", self.index + 2)
                self.index = self.length if end < 0 else end + 2
            elif self._at_string_start():
                self._skip_string()
                self.emit(LITERAL, start, self.index)
            elif char == "'":
                self._skip_char_literal()
                self.emit(LITERAL, start, self.index)
            elif char == "@" and (self.peek(1).isalpha() or self.peek(1) == "_"):
                self.index += 1
                self._consume_word()
                self.emit(WORD, start, self.index)
            elif char.isalpha() or char == "_":
                self._consume_word()
                self.emit(WORD, start, self.index)
            elif char.isdigit() or (char == "." and self.peek(1).isdigit()):
                self._consume_number()
                self.emit(NUMBER, start, self.index)
            else:
                for punct in MULTI_CHAR_PUNCT:
                    if text.startswith(punct, self.index):
                        self.index += len(punct)
                        break
                else:
                    self.index += 1
                self.emit(PUNCT, start, self.index)
        return self.tokens

    def _skip_line(self) -> None:
        end = self.text.find("\n", self.index)
        self.index = self.length if end < 0 else end

    def _consume_word(self) -> None:
        while self.index < self.length and (self.text[self.index].isalnum() or self.text[self.index] == "_"):
            self.index += 1

    def _consume_number(self) -> None:
        while self.index < self.length:
            char = self.text[self.index]
            if char.isalnum() or char == "_":
                self.index += 1
            elif char == "." and self.peek(1).isdigit():
                self.index += 1
            else:
                break

    def _at_string_start(self) -> bool:
        offset = 0
        while self.peek(offset) in ("$", "@") and offset < 4:
            offset += 1
        return self.peek(offset) == '"'

    def _skip_string(self) -> None:
        prefix = ""
        while self.peek() in ("$", "@"):
            prefix += self.peek()
            self.index += 1
        interpolated = "$" in prefix
        quotes = 0
        while self.peek(quotes) == '"':
            quotes += 1
        if quotes >= 3:
            self._skip_raw_string(quotes)
        elif "@" in prefix:
            self._skip_verbatim_string(interpolated)
        else:
            self._skip_regular_string(interpolated)

    def _skip_raw_string(self, quotes: int) -> None:
        closing = '"' * quotes
        end = self.text.find(closing, self.index + quotes)
        self.index = self.length if end < 0 else end + quotes
        while self.peek() == '"':
            self.index += 1

    def _skip_verbatim_string(self, interpolated: bool) -> None:
        self.index += 1
        while self.index < self.length:
            char = self.text[self.index]
            if char == '"':
                if self.peek(1) == '"':
                    self.index += 2
                    continue
                self.index += 1
                return
            if interpolated and char == "{":
                self._skip_hole()
                continue
            self.index += 1

    def _skip_regular_string(self, interpolated: bool) -> None:
        self.index += 1
        while self.index < self.length:
            char = self.text[self.index]
            if char == "\\":
                self.index += 2
                continue
            if char == '"':
                self.index += 1
                return
            if char == "\n":
                return
            if interpolated and char == "{":
                self._skip_hole()
                continue
            self.index += 1

    def _skip_hole(self) -> None:
        if self.peek(1) == "{":
            self.index += 2
            return
        depth = 0
        while self.index < self.length:
            char = self.text[self.index]
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    self.index += 1
                    return
            elif self._at_string_start():
                self._skip_string()
                continue
            elif char == "'":
                self._skip_char_literal()
                continue
            self.index += 1

    def _skip_char_literal(self) -> None:
        self.index += 1
        while self.index < self.length:
            char = self.text[self.index]
            if char == "\\":
                self.index += 2
                continue
            self.index += 1
            if char in ("'", "\n"):
                return


def lex(text: str) -> List[Token]:
    """Split ``text`` into word, number, literal and punctuation tokens."""

    return _Lexer(text).run()


# ----------------------------------------------------------------------
# Declaration scanning
# ----------------------------------------------------------------------
class _Scanner:
    def __init__(self, tokens: Sequence[Token], profile: Profile) -> None:
        self.tokens = tokens
        self.profile = profile
        self.pos = 0
        self.found: List[Identifier] = []

    # -- token helpers --------------------------------------------------
    def tok(self, offset: int = 0) -> Optional[Token]:
        index = self.pos + offset
        return self.tokens[index] if index < len(self.tokens) else None

    def text(self, offset: int = 0) -> str:
        token = self.tok(offset)
        return token.text if token else ""

    def is_word(self, offset: int = 0) -> bool:
        token = self.tok(offset)
        return token is not None and token.kind == WORD

    def is_name(self, offset: int = 0) -> bool:
        token = self.tok(offset)
        return token is not None and token.kind == WORD and token.text not in self.profile.reserved

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def emit(
        self,
        token: Token,
        scope: Scope,
        declared_type: Optional[str] = None,
        construct: Optional[str] = None,
    ) -> None:
        implicit = declared_type == self.profile.implicit_type
        self.found.append(
            Identifier(
                name=token.name,
                scope=scope,
                position=token.position,
                declared_type=declared_type,
                construct=construct,
                implicitly_typed=implicit,
            )
        )

    def skip_balanced(self) -> None:
        """Skip from an opening bracket to just past its partner."""

        depth = 0
        while not self.at_end():
            text = self.text()
            self.pos += 1
            if text in OPENERS:
                depth += 1
            elif text in CLOSERS:
                depth -= 1
                if depth <= 0:
                    return

    def skip_expression(self, stops: FrozenSet[str]) -> None:
        """Skip an initializer up to a stop token at nesting depth zero.

        An unmatched closer also ends the expression; neither is consumed.
        """

        while not self.at_end():
            text = self.text()
            if text in stops or text in CLOSERS:
                return
            if text in OPENERS:
                self.skip_balanced()
            else:
                self.pos += 1

    def skip_statement(self) -> None:
        """Skip to the end of a statement without entering brace blocks."""

        while not self.at_end():
            text = self.text()
            if text == ";":
                self.pos += 1
                return
            if text in ("{", "}"):
                return
            if text in ("(", "["):
                self.skip_balanced()
            else:
                self.pos += 1

    def read_type(self) -> Optional[str]:
        """Consume a type reference and return its text, or ``None``."""

        start = self.pos
        if self.text() == "(":
            self.skip_balanced()
        elif self.is_name():
            self.pos += 1
            while self.text() in (".", "::") and self.is_word(1):
                self.pos += 2
        else:
            return None
        while True:
            text = self.text()
            if text == "<":
                if not self.skip_angle():
                    break
            elif text in ("?", "*"):
                self.pos += 1
            elif text == "[" and self.text(1) in ("]", ","):
                self.skip_balanced()
            elif text in (".", "::") and self.is_word(1):
                self.pos += 2
            else:
                break
        return "".join(token.text for token in self.tokens[start:self.pos])

    def skip_angle(self) -> bool:
        """Skip a generic argument list; restore the position if it is not one."""

        start = self.pos
        depth = 0
        while not self.at_end():
            token = self.tok()
            text = token.text
            if text == "<":
                depth += 1
            elif text == ">":
                depth -= 1
                if depth == 0:
                    self.pos += 1
                    return True
            elif token.kind != WORD and text not in ANGLE_CONTENT:
                break
            self.pos += 1
        self.pos = start
        return False

    def skip_attributes(self) -> Set[str]:
        names: Set[str] = set()
        while self.text() == "[":
            start = self.pos
            self.skip_balanced()
            names.update(token.text for token in self.tokens[start:self.pos] if token.kind == WORD)
        return names

    # -- containers -----------------------------------------------------
    def run(self) -> List[Identifier]:
        try:
            self.members(TOP)
        except RecursionError:
            logger.warning("Declarations nested too deeply; keeping the %d found so far", len(self.found))
        return self.found

    def members(self, container: str) -> None:
        while not self.at_end():
            if self.text() == "}":
                self.pos += 1
                if container != TOP:
                    return
                continue
            start = self.pos
            self.member(container)
            if self.pos == start:
                self.pos += 1

    def member(self, container: str) -> None:
        profile = self.profile
        start = self.pos
        attributes = self.skip_attributes()
        modifiers: Set[str] = set()
        while self.is_word() and self.text() in profile.modifiers:
            modifiers.add(self.text())
            self.pos += 1
        keyword = self.text()

        if keyword == ";":
            self.pos += 1
            return
        if keyword == "{":
            self.pos += 1
            self.body()
            return
        if keyword == profile.namespace_keyword:
            self.namespace()
            return
        if keyword == profile.using_keyword and container in (TOP, NAMESPACE):
            self.using(directive=True)
            return
        if keyword in profile.type_keywords:
            self.type_declaration()
            return
        if keyword == profile.delegate_keyword:
            self.delegate()
            return
        if container == TOP and not modifiers & profile.access_modifiers and not attributes:
            self.pos = start
            self.statement()
            return
        if keyword == "~":
            self.pos += 1
            self.callable_tail()
            return

        if keyword == profile.operator_keyword:
            # conversion operators have no separate return type
            self.operator()
            return
        is_event = keyword == profile.event_keyword
        if is_event:
            self.pos += 1
        if self.is_name() and self.text(1) == "(":
            # constructor
            self.pos += 1
            self.callable_tail()
            return
        declared_type = self.read_type()
        if declared_type is None:
            self.skip_statement()
            return
        if self.text() == profile.operator_keyword:
            self.operator()
            return
        if self.text() == profile.indexer_keyword and self.text(1) == "[":
            self.pos += 1
            self.parameters("]")
            self.member_tail()
            return
        if not self.is_name():
            self.skip_statement()
            return

        name = self.tok()
        self.pos += 1
        explicit_interface = False
        while self.text() in (".", "<") and (self.text() == "<" or self.is_word(1)):
            # explicit interface implementation or generic qualifier
            if self.text() == "<":
                if not self.skip_angle():
                    break
                continue
            explicit_interface = True
            self.pos += 1
            name = self.tok()
            self.pos += 1
        following = self.text()

        member_scope = self.member_scope(container, modifiers, explicit_interface)
        if following == "(":
            self.emit(name, member_scope, declared_type, "method")
            self.callable_tail()
        elif following in ("{", "=>"):
            self.emit(name, member_scope, declared_type, "event" if is_event else "property")
            self.member_tail()
        elif following in ("=", ";", ","):
            if is_event:
                scope = member_scope
            else:
                scope = self.field_scope(container, modifiers, attributes)
            self.declarators(name, scope, declared_type, "event" if is_event else "field", statement_end=True)
        else:
            self.skip_statement()

    def member_scope(self, container: str, modifiers: Set[str], explicit_interface: bool) -> Scope:
        if explicit_interface:
            return Scope.UNKNOWN
        if container == INTERFACE:
            return Scope.PUBLIC_MEMBER
        if modifiers & self.profile.access_modifiers:
            return Scope.PUBLIC_MEMBER
        return Scope.UNKNOWN

    def field_scope(self, container: str, modifiers: Set[str], attributes: Set[str]) -> Scope:
        profile = self.profile
        if profile.const_keyword in modifiers:
            return Scope.PUBLIC_MEMBER
        if attributes & profile.thread_static_attributes:
            return Scope.THREAD_STATIC_FIELD
        if container == INTERFACE:
            return Scope.PUBLIC_MEMBER
        access = modifiers & profile.access_modifiers
        if not access:
            return Scope.UNKNOWN
        if access <= profile.private_access:
            return Scope.STATIC_FIELD if profile.static_keyword in modifiers else Scope.PRIVATE_FIELD
        if access <= profile.public_access:
            return Scope.PUBLIC_MEMBER
        return Scope.UNKNOWN

    def namespace(self) -> None:
        self.pos += 1
        while not self.at_end() and self.text() not in ("{", ";", "}"):
            self.pos += 1
        if self.text() == "{":
            self.pos += 1
            self.members(NAMESPACE)
        elif self.text() == ";":
            self.pos += 1

    def type_declaration(self) -> None:
        profile = self.profile
        keyword = self.text()
        self.pos += 1
        if keyword == profile.record_keyword and self.text() in ("class", "struct"):
            self.pos += 1
        if not self.is_name():
            self.skip_statement()
            return
        scope = Scope.INTERFACE_NAME if keyword == profile.interface_keyword else Scope.TYPE_NAME
        self.emit(self.tok(), scope, construct=keyword)
        self.pos += 1
        if self.text() == "<":
            self.skip_angle()
        if self.text() == "(":
            if keyword == profile.record_keyword:
                # positional record parameters become public properties
                self.skip_balanced()
            else:
                self.parameters(")")
        while not self.at_end() and self.text() not in ("{", ";", "}"):
            if self.text() in OPENERS:
                self.skip_balanced()
            else:
                self.pos += 1
        if self.text() == ";":
            self.pos += 1
        elif self.text() == "{":
            self.pos += 1
            if keyword == profile.enum_keyword:
                self.enum_body()
            else:
                self.members(INTERFACE if keyword == profile.interface_keyword else TYPE)

    def delegate(self) -> None:
        self.pos += 1
        if self.read_type() is None or not self.is_name():
            self.skip_statement()
            return
        self.emit(self.tok(), Scope.TYPE_NAME, construct="delegate")
        self.pos += 1
        if self.text() == "<":
            self.skip_angle()
        if self.text() == "(":
            self.parameters(")")
        self.skip_statement()

    def operator(self) -> None:
        while not self.at_end() and self.text() not in ("(", ";", "{", "}"):
            self.pos += 1
        if self.text() == "(":
            self.callable_tail()
        else:
            self.skip_statement()

    def enum_body(self) -> None:
        while not self.at_end():
            self.skip_attributes()
            text = self.text()
            if text == "}":
                self.pos += 1
                return
            if text == ",":
                self.pos += 1
                continue
            if self.is_name():
                self.emit(self.tok(), Scope.PUBLIC_MEMBER, construct="enum-member")
                self.pos += 1
                if self.text() == "=":
                    self.pos += 1
                    self.skip_expression(frozenset({",", ";"}))
                continue
            self.pos += 1

    def callable_tail(self) -> None:
        """Parameters, then constraints or initializers, then the body."""

        if self.text() == "(":
            self.parameters(")")
        while not self.at_end():
            text = self.text()
            if text == "{":
                self.pos += 1
                self.body()
                return
            if text == "=>":
                self.pos += 1
                self.skip_expression(frozenset({";"}))
                if self.text() == ";":
                    self.pos += 1
                return
            if text == ";":
                self.pos += 1
                return
            if text == "}":
                return
            if text in OPENERS:
                self.skip_balanced()
            else:
                self.pos += 1

    def member_tail(self) -> None:
        """Accessor block or expression body of a property, event or indexer."""

        if self.text() == "{":
            self.pos += 1
            self.accessors()
            if self.text() == "=":
                self.pos += 1
                self.skip_expression(frozenset({";"}))
                if self.text() == ";":
                    self.pos += 1
        elif self.text() == "=>":
            self.pos += 1
            self.skip_expression(frozenset({";"}))
            if self.text() == ";":
                self.pos += 1
        else:
            self.skip_statement()

    def accessors(self) -> None:
        while not self.at_end():
            text = self.text()
            if text == "}":
                self.pos += 1
                return
            if text == "{":
                self.pos += 1
                self.body()
            elif text == "=>":
                self.pos += 1
                self.skip_expression(frozenset({";"}))
            elif text == "[":
                self.skip_balanced()
            else:
                self.pos += 1

    def parameters(self, closer: str) -> None:
        """Consume a bracketed parameter list, reporting each named parameter."""

        self.pos += 1
        while not self.at_end():
            if self.text() == closer:
                self.pos += 1
                return
            if self.text() == ",":
                self.pos += 1
                continue
            self.parameter(closer)

    def parameter(self, closer: str) -> None:
        self.skip_attributes()
        while self.is_word() and self.text() in self.profile.parameter_modifiers:
            self.pos += 1
        declared_type = self.read_type()
        if declared_type is not None and self.is_name() and self.text(1) in (",", "=", closer):
            self.emit(self.tok(), Scope.PARAMETER, declared_type, "parameter")
            self.pos += 1
        self.skip_expression(frozenset({","}))
        if self.text() in CLOSERS and self.text() != closer:
            self.pos += 1

    def declarators(
        self,
        name: Token,
        scope: Scope,
        declared_type: Optional[str],
        construct: str,
        statement_end: bool,
    ) -> None:
        """Report ``name`` and any further comma separated declarators."""

        stops = frozenset({",", ";"})
        self.emit(name, scope, declared_type, construct)
        while not self.at_end():
            if self.text() == "=":
                self.pos += 1
                self.skip_expression(stops)
            if self.text() == "," and self.is_name(1) and self.text(2) in ("=", ",", ";", ")"):
                self.pos += 1
                self.emit(self.tok(), scope, declared_type, construct)
                self.pos += 1
                continue
            if self.text() == ",":
                self.pos += 1
                self.skip_expression(stops)
                continue
            break
        if statement_end and self.text() == ";":
            self.pos += 1

    # -- statements -----------------------------------------------------
    def body(self) -> None:
        """Walk statements up to the brace that closes the current block.

        Nested blocks are tracked with a depth counter so that brace depth is
        not limited by the interpreter stack.
        """

        depth = 1
        while not self.at_end():
            text = self.text()
            if text == "}":
                self.pos += 1
                depth -= 1
                if depth == 0:
                    return
                continue
            if text == "{":
                self.pos += 1
                depth += 1
                continue
            start = self.pos
            self.statement()
            if self.pos == start:
                self.pos += 1

    def statement(self) -> None:
        profile = self.profile
        text = self.text()
        if text == ";":
            self.pos += 1
            return
        if text == profile.await_keyword and self.text(1) in (profile.foreach_keyword, profile.using_keyword):
            self.pos += 1
            text = self.text()
        if text == profile.for_keyword and self.text(1) == "(":
            self.for_header()
        elif text == profile.foreach_keyword and self.text(1) == "(":
            self.foreach_header()
        elif text == profile.catch_keyword:
            self.catch_clause()
        elif text == profile.using_keyword:
            self.using(directive=False)
        elif text == profile.fixed_keyword and self.text(1) == "(":
            self.paren_declaration("fixed")
        elif text in profile.condition_keywords and self.text(1) == "(":
            self.pos += 1
            self.skip_balanced()
        elif text in profile.bare_keywords:
            self.pos += 1
        elif text in profile.label_keywords or (self.is_name() and self.text(1) == ":"):
            self.skip_label()
        elif text == profile.const_keyword:
            self.skip_statement()
        elif not self.local_declaration("local"):
            self.skip_statement()

    def local_declaration(self, construct: str, statement_end: bool = True) -> bool:
        """Try to read ``Type name [= init][, name2 ...];`` at the cursor."""

        start = self.pos
        while self.is_word() and self.text() in self.profile.local_modifiers | {"static", "async"}:
            self.pos += 1
        declared_type = self.read_type()
        if declared_type is not None and self.is_name():
            name = self.tok()
            if self.text(1) in ("=", ";", ","):
                self.pos += 1
                self.declarators(name, Scope.LOCAL_VARIABLE, declared_type, construct, statement_end)
                return True
            if self.text(1) == "(":
                # local function; its name follows member casing and is not reported
                self.pos += 1
                self.callable_tail()
                return True
        self.pos = start
        return False

    def for_header(self) -> None:
        self.pos += 2
        start = self.pos
        declared_type = self.read_type()
        if declared_type is not None and self.is_name() and self.text(1) in ("=", ";", ","):
            name = self.tok()
            self.pos += 1
            self.declarators(name, Scope.LOOP_VARIABLE, declared_type, "for", statement_end=False)
        else:
            self.pos = start
        self.pos = start - 1
        self.skip_balanced()

    def foreach_header(self) -> None:
        self.pos += 2
        start = self.pos
        while self.is_word() and self.text() in self.profile.local_modifiers:
            self.pos += 1
        declared_type = self.read_type()
        if declared_type is not None and self.is_name() and self.text(1) == self.profile.in_keyword:
            self.emit(self.tok(), Scope.LOOP_VARIABLE, declared_type, "foreach")
        self.pos = start - 1
        self.skip_balanced()

    def catch_clause(self) -> None:
        self.pos += 1
        if self.text() != "(":
            return
        start = self.pos
        self.pos += 1
        declared_type = self.read_type()
        if declared_type is not None and self.is_name() and self.text(1) == ")":
            self.emit(self.tok(), Scope.LOCAL_VARIABLE, declared_type, "catch")
        self.pos = start
        self.skip_balanced()

    def using(self, directive: bool) -> None:
        if self.text(1) == "(":
            self.paren_declaration("using")
            return
        self.pos += 1
        if directive and (self.text() == self.profile.static_keyword or self.text(1) == "="):
            self.skip_statement()
            return
        if not self.local_declaration("using"):
            self.skip_statement()

    def paren_declaration(self, construct: str) -> None:
        self.pos += 1
        start = self.pos
        self.pos += 1
        declared_type = self.read_type()
        if declared_type is not None and self.is_name() and self.text(1) == "=":
            name = self.tok()
            self.pos += 1
            self.declarators(name, Scope.LOCAL_VARIABLE, declared_type, construct, statement_end=False)
        self.pos = start
        self.skip_balanced()

    def skip_label(self) -> None:
        while not self.at_end() and self.text() not in (":", ";", "{", "}"):
            if self.text() in ("(", "["):
                self.skip_balanced()
            else:
                self.pos += 1
        if self.text() == ":":
            self.pos += 1


def tokenize(text: str, profile: Profile = CSHARP) -> List[Identifier]:
    """Return the identifiers declared in ``text``, in source order."""

    tokens = lex(text)
    identifiers = _Scanner(tokens, profile).run()
    identifiers.sort(key=lambda identifier: identifier.position)
    logger.debug("Found %d declaration(s) in %d token(s)", len(identifiers), len(tokens))
    return identifiers
