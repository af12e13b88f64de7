"""Tokeniser for the calc expression language."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

_WHITESPACE = frozenset(" \t\f\v\r\n")
_KEYWORD = "with"


class TokenTag(enum.Enum):
    """Kinds of token produced by the lexer."""

    EOI = enum.auto()
    UNKNOWN = enum.auto()
    IDENTIFIER = enum.auto()
    NUMBER = enum.auto()
    COMMA = enum.auto()
    COLON = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    L_PAREN = enum.auto()
    R_PAREN = enum.auto()
    WITH = enum.auto()


_PUNCTUATION = {
    "+": TokenTag.PLUS,
    "-": TokenTag.MINUS,
    "*": TokenTag.STAR,
    "/": TokenTag.SLASH,
    "(": TokenTag.L_PAREN,
    ")": TokenTag.R_PAREN,
    ":": TokenTag.COLON,
    ",": TokenTag.COMMA,
}


def is_whitespace(c: str) -> bool:
    """Return True if ``c`` is a whitespace character for the language."""
    return len(c) == 1 and c in _WHITESPACE


def is_letter(c: str) -> bool:
    """Return True if ``c`` is an ASCII letter."""
    return len(c) == 1 and ("a" <= c <= "z" or "A" <= c <= "Z")


def _is_digit(c: str) -> bool:
    return len(c) == 1 and "0" <= c <= "9"


@dataclass(frozen=True)
class Token:
    """A token: its kind, its offset and the source text from that offset on."""

    tag: TokenTag
    position: int
    source_reference: str

    def is_(self, tag: TokenTag) -> bool:
        """Return True if this token is of kind ``tag``."""
        return self.tag is tag


class Lexer:
    """Splits source text into tokens on demand.

    The text ends at the first NUL character, if there is one.
    """

    def __init__(self, buffer: str, index: int = 0) -> None:
        self.buffer = buffer.split("\0", 1)[0]
        self.index = index

    def _char(self, position: int) -> str:
        return self.buffer[position] if position < len(self.buffer) else ""

    def _skip_whitespace(self) -> None:
        while is_whitespace(self._char(self.index)):
            self.index += 1

    def _token(self, tag: TokenTag, position: int) -> Token:
        return Token(tag, position, self.buffer[position:])

    def source_reference(self) -> str:
        """Skip whitespace and return the source text from the current position."""
        self._skip_whitespace()
        return self.buffer[self.index:]

    def peek(self) -> Token:
        """Return the next token without consuming it."""
        saved = self.index
        try:
            return self.next()
        finally:
            self.index = saved

    def next(self) -> Token:
        """Consume and return the next token."""
        self._skip_whitespace()
        start = self.index
        c = self._char(start)

        if not c:
            return self._token(TokenTag.EOI, start)

        if is_letter(c):
            end = start + 1
            while is_letter(self._char(end)):
                end += 1
            word = self.buffer[start:end]
            # Any leading part of the keyword counts as the keyword.
            tag = TokenTag.WITH if _KEYWORD.startswith(word) else TokenTag.IDENTIFIER
            self.index = end
            return self._token(tag, start)

        if _is_digit(c):
            end = start + 1
            while _is_digit(self._char(end)):
                end += 1
            self.index = end
            return self._token(TokenTag.NUMBER, start)

        self.index = start + 1
        return self._token(_PUNCTUATION.get(c, TokenTag.UNKNOWN), start)

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next()).tag is not TokenTag.EOI:
            yield token