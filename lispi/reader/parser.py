"""
  Lisp Reader, Lexer and Parser

- Lazy lexing into (kind, text) tokens, stack-based parsing on top
- Emits plain Python values for the evaluator:

    - forms         -> Python list
    - symbols       -> Symbol
    - integers      -> int, floats -> float
    - true / false  -> bool
    - nil           -> Nil
    - strings       -> str

Malformed input raises LispiSyntaxError; input that merely stops inside an
open form or string raises LispiIncompleteInput so a REPL can ask for more.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from lispi import SExpression
from lispi.errors import LispiSyntaxError, LispiIncompleteInput
from lispi.types.nil import Nil
from lispi.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<open_string>"(?:\\.|[^\\"])*\\?\Z)'  # string running off the end
    r'|(?P<symbol>[^\s()";]+)',  # fallback: any other atom
    re.DOTALL,
)

INT_RE = re.compile(r"[+-]?\d+\Z")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+(?:\.\d*)?[eE][+-]?\d+|\.\d+[eE][+-]?\d+)\Z")
SYMBOL_RE = re.compile(r"[A-Za-z_+\-*/=<>!?%.&][A-Za-z0-9_+\-*/=<>!?%.&]*\Z")

LITERALS: dict[str, SExpression] = {
    "nil": Nil,
    "true": True,
    "false": False,
}

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while True:
        while pos < n and source[pos].isspace():
            pos += 1
        if pos >= n:
            return
        match = TOKEN_RE.match(source, pos)
        if match is None:
            raise LispiSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = match.end()
        kind = match.lastgroup
        if kind == "comment":
            continue
        if kind == "open_string":
            raise LispiIncompleteInput(f"Unterminated string: {match.group(kind)}")
        yield kind, match.group(kind)


def unescape(body: str) -> str:
    return re.sub(r"\\(.)", lambda m: ESCAPES.get(m.group(1), m.group(1)), body, flags=re.DOTALL)


def parse_atom(token: str) -> SExpression:
    if token in LITERALS:
        return LITERALS[token]
    if INT_RE.match(token):
        return int(token)
    if FLOAT_RE.match(token):
        return float(token)
    if SYMBOL_RE.match(token):
        return Symbol(token)
    raise LispiSyntaxError(f"Unsupported token '{token}'")


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        """Parse the next expression; None once the input is exhausted.

        Open forms are kept on an explicit stack, so nesting depth is bounded
        by memory rather than by the interpreter's recursion limit.
        """
        if self.peek()[0] is None:
            return None

        open_forms: list[list[SExpression]] = []
        while True:
            tok_type, tok_val = self.advance()
            if tok_type is None:
                raise LispiIncompleteInput("Unmatched '('")

            if tok_type == "lparen":
                open_forms.append([])
                continue

            if tok_type == "rparen":
                if not open_forms:
                    raise LispiSyntaxError("Unmatched closing parenthesis")
                expr = open_forms.pop()
            elif tok_type == "string":
                expr = unescape(tok_val[1:-1])
            elif tok_type == "symbol":
                expr = parse_atom(tok_val)
            else:
                raise LispiSyntaxError(f"Unknown token: {tok_type} {tok_val}")

            if not open_forms:
                return expr
            open_forms[-1].append(expr)

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> list[SExpression]:
    """Parse every top-level expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())
