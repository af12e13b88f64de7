"""Recursive-descent parser producing the expression syntax tree."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Union

from calcc.lexer import Lexer, TokenTag, is_letter

MAX_WITH_VARIABLES = 16
MAX_VARIABLE_NAME_LENGTH = 16


class Operator(enum.Enum):
    """Binary arithmetic operators."""

    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"


@dataclass(frozen=True)
class Number:
    """An integer literal."""

    source_reference: str


@dataclass(frozen=True)
class Identifier:
    """A reference to a bound variable."""

    source_reference: str


@dataclass(frozen=True)
class BinaryOperation:
    """An arithmetic operation on two sub-expressions."""

    source_reference: str
    op: Operator
    left: Node
    right: Node


@dataclass(frozen=True)
class WithDeclaration:
    """A list of variables to read, followed by the expression using them."""

    source_reference: str
    identifiers: tuple[str, ...]
    expr: Node


@dataclass(frozen=True)
class ParseError:
    """A syntax error left in the tree in place of the part that failed."""

    source_reference: str
    description: str
    reference_length: int


Node = Union[Number, Identifier, BinaryOperation, WithDeclaration, ParseError]

_DECLARATION_RECOVERY = frozenset({TokenTag.R_PAREN})
_FACTOR_RECOVERY = frozenset(
    {TokenTag.R_PAREN, TokenTag.STAR, TokenTag.PLUS, TokenTag.MINUS, TokenTag.SLASH}
)
_ADDITIVE = {TokenTag.PLUS: Operator.PLUS, TokenTag.MINUS: Operator.MINUS}
_MULTIPLICATIVE = {TokenTag.STAR: Operator.STAR, TokenTag.SLASH: Operator.SLASH}

_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


def identifier_at(text: str) -> str:
    """Return the run of letters at the start of ``text``."""
    end = 0
    while end < len(text) and is_letter(text[end]):
        end += 1
    return text[:end]


def same_identifier(first: str, second: str) -> bool:
    """Return True if both texts start with the same identifier."""
    return identifier_at(first) == identifier_at(second)


def int_value_at(text: str) -> int:
    """Read an integer at the start of ``text``; decimal, 0-octal or 0x-hex.

    Returns 0 when no integer is there.
    """
    match = _INTEGER.match(text)
    if match is None:
        return 0
    sign, digits = match.groups()
    if digits[:2] in ("0x", "0X"):
        value = int(digits, 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits, 10)
    return -value if sign == "-" else value


class Parser:
    """Parses one ``with`` declaration from source text."""

    def __init__(self, source: str) -> None:
        self.lexer = Lexer(source)

    def parse(self) -> Node:
        """Parse the source and return the root of the tree."""
        return self._parse_with_declaration()

    def _next_is(self, tag: TokenTag) -> bool:
        return self.lexer.next().tag is tag

    def _error(self, source_reference: str, recovery: frozenset[TokenTag], description: str) -> ParseError:
        start = self.lexer.index
        while True:
            tag = self.lexer.peek().tag
            if tag is TokenTag.EOI or tag in recovery:
                break
            self.lexer.next()
        return ParseError(source_reference, description, self.lexer.index - start)

    def _parse_with_declaration(self) -> Node:
        source_reference = self.lexer.source_reference()

        if not self._next_is(TokenTag.WITH):
            return self._error(source_reference, _DECLARATION_RECOVERY, 'Expected "with" keyword')

        identifiers: list[str] = []
        while True:
            token = self.lexer.next()
            if token.tag is not TokenTag.IDENTIFIER:
                return self._error(source_reference, _DECLARATION_RECOVERY, "Expected identifier")
            if len(identifiers) == MAX_WITH_VARIABLES:
                return self._error(
                    source_reference,
                    _DECLARATION_RECOVERY,
                    "Maximum number of bindable variables exceeded",
                )
            identifiers.append(token.source_reference)
            token = self.lexer.next()
            if token.tag is not TokenTag.COMMA:
                break

        if token.tag is not TokenTag.COLON:
            return self._error(source_reference, _DECLARATION_RECOVERY, "Expected colon")

        expr = self._parse_expr()
        return WithDeclaration(source_reference, tuple(identifiers), expr)

    def _parse_expr(self) -> Node:
        source_reference = self.lexer.source_reference()
        left = self._parse_term()

        while (op := _ADDITIVE.get(self.lexer.peek().tag)) is not None:
            self.lexer.next()
            right = self._parse_term()
            left = BinaryOperation(source_reference, op, left, right)
            source_reference = self.lexer.source_reference()

        return left

    def _parse_term(self) -> Node:
        left = self._parse_factor()
        source_reference = self.lexer.source_reference()

        while (op := _MULTIPLICATIVE.get(self.lexer.peek().tag)) is not None:
            self.lexer.next()
            right = self._parse_factor()
            left = BinaryOperation(source_reference, op, left, right)
            source_reference = self.lexer.source_reference()

        return left

    def _parse_factor(self) -> Node:
        source_reference = self.lexer.source_reference()
        tag = self.lexer.next().tag

        if tag is TokenTag.NUMBER:
            return Number(source_reference)
        if tag is TokenTag.IDENTIFIER:
            return Identifier(source_reference)
        if tag is TokenTag.L_PAREN:
            result = self._parse_expr()
            if not self._next_is(TokenTag.R_PAREN):
                return self._error(source_reference, _FACTOR_RECOVERY, "Mismatched parentheses")
            return result
        return self._error(source_reference, _FACTOR_RECOVERY, "Expected number or identifier")


def parse(source: str) -> Node:
    """Parse ``source`` and return the root of the tree."""
    return Parser(source).parse()