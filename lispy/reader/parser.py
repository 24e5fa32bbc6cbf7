"""
  Lisp Reader: tokenizer and recursive-descent parser

- Tokens are produced by padding parentheses with spaces and splitting on whitespace.
- No strings, comments or quote shorthand; every other token is an atom.
- The parser builds Pair/Nil list structure directly:

    - "(" ... ")" -> chain of Pair cells ending in Nil
    - "()"        -> Nil
    - 42, -7, 3.5 -> Number
    - anything else -> Symbol

Cursor state lives in a TokenStream created per parse, so independent parses
never share state.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from lispy.errors import LispySyntaxError
from lispy.types.atom import Atom, Number, Symbol
from lispy.types.expression import Expression, make_list

logger = logging.getLogger(__name__)

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")


def tokenize(source: str) -> list[str]:
    """Split source text into a flat list of token strings."""
    return source.replace("(", " ( ").replace(")", " ) ").split()


def atom(token: str) -> Atom:
    """Convert a non-parenthesis token into a Number or a Symbol."""
    # float() reads any digit count; out-of-range literals become inf.
    if NUMBER_RE.fullmatch(token):
        return Number(float(token))
    return Symbol(token)


class TokenStream:
    def __init__(self, tokens: list[str]):
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> str:
        token = self.peek()
        if token is None:
            raise LispySyntaxError("Unexpected EOF while reading")
        self.pos += 1
        return token

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def parse_expr(self) -> Expression:
        token = self.advance()

        if token == "(":
            items: list[Expression] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise LispySyntaxError("Unmatched '('")
                if nxt == ")":
                    self.advance()
                    return make_list(items)
                items.append(self.parse_expr())

        if token == ")":
            raise LispySyntaxError("Unexpected ')'")

        return atom(token)

    def parse_all(self) -> Iterator[Expression]:
        while not self.at_end():
            expr = self.parse_expr()
            logger.debug("read %s", expr)
            yield expr


def parse(source: str) -> Expression:
    """Parse exactly one expression from `source`."""
    stream = TokenStream(tokenize(source))
    if stream.at_end():
        raise LispySyntaxError("Empty input")
    expr = stream.parse_expr()
    if not stream.at_end():
        raise LispySyntaxError(f"Bad trailing tokens: {stream.tokens[stream.pos:]!r}")
    return expr


def parse_all(source: str) -> list[Expression]:
    """Parse every top-level expression in `source`."""
    return list(TokenStream(tokenize(source)).parse_all())
