"""Parser for configuration predicate expressions such as
``all(unix, not(target_os = "macos"))``."""

from __future__ import annotations

import string

from cratekit.cfg_ast import Pred
from cratekit.logic_ast import All, Any, Expr, Not, Var

_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_CHARS = _IDENT_START | frozenset(string.digits)


class CfgParseError(ValueError):
    """Raised for malformed input; ``input`` is the text left unparsed."""

    def __init__(self, input: str, message: str = "ill-formed cfg") -> None:
        super().__init__(f"{message}: {input!r}")
        self.input = input


class _Parser:
    def __init__(self, text: str) -> None:
        self.rest = text

    def ensure(self, cond: bool, message: str) -> None:
        if not cond:
            raise CfgParseError(self.rest, message)

    def skip_space(self) -> None:
        self.rest = self.rest.lstrip()

    def skip_tag(self, tag: str) -> bool:
        if self.rest.startswith(tag):
            self.rest = self.rest[len(tag):]
            return True
        return False

    def consume_tag(self, tag: str) -> None:
        self.ensure(self.rest.startswith(tag), f"expected {tag!r}")
        self.rest = self.rest[len(tag):]

    def take_while1(self, accept) -> str:
        end = next((i for i, ch in enumerate(self.rest) if not accept(ch)), len(self.rest))
        self.ensure(end > 0, "expected at least one character")
        taken, self.rest = self.rest[:end], self.rest[end:]
        return taken

    def parse_expr(self) -> Expr:
        if self.rest.startswith("any"):
            return Any(self.parse_call("any"))
        if self.rest.startswith("all"):
            return All(self.parse_call("all"))
        if self.rest.startswith("not"):
            return self.parse_not()
        return Var(self.parse_pred())

    def parse_pred(self) -> Pred:
        key = self.parse_identifier()
        value = None
        if self.rest.lstrip().startswith("="):
            self.skip_space()
            self.skip_tag("=")
            self.skip_space()
            value = self.parse_string_literal()
        return Pred(key, value)

    def parse_identifier(self) -> str:
        self.ensure(self.rest[:1] in _IDENT_START if self.rest else False, "expected identifier")
        return self.take_while1(lambda ch: ch in _IDENT_CHARS)

    def parse_string_literal(self) -> str:
        self.consume_tag('"')
        text = self.take_while1(lambda ch: ch != '"')
        if "\\" in text:
            raise CfgParseError(self.rest, "escaped strings are not supported")
        self.consume_tag('"')
        return text

    def parse_call(self, name: str) -> list[Expr]:
        self.consume_tag(name)
        self.skip_space()
        self.consume_tag("(")
        items = self.parse_expr_list()
        self.skip_space()
        self.consume_tag(")")
        return items

    def parse_not(self) -> Not:
        self.consume_tag("not")
        self.skip_space()
        self.consume_tag("(")
        inner = self.parse_expr()
        self.skip_space()
        self.consume_tag(")")
        return Not(inner)

    def parse_expr_list(self) -> list[Expr]:
        items: list[Expr] = []
        while not self.rest.startswith(")"):
            self.skip_space()
            items.append(self.parse_expr())
            self.skip_space()
            self.skip_tag(",")
        return items


def parse(s: str) -> Expr:
    """Parse a whole configuration expression; raise :class:`CfgParseError` if malformed."""
    parser = _Parser(s)
    parser.skip_space()
    result = parser.parse_expr()
    parser.skip_space()
    parser.ensure(not parser.rest, "unexpected trailing input")
    return result