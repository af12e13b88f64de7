"""Semantic checks on the syntax tree: variable bindings and syntax errors."""

from __future__ import annotations

import sys
from typing import TextIO

from calcc.parser import (
    MAX_WITH_VARIABLES,
    BinaryOperation,
    Identifier,
    Node,
    ParseError,
    WithDeclaration,
    identifier_at,
    same_identifier,
)

_ERROR_SOURCE_LIMIT = 127


class Sema:
    """Checks that every variable is declared and reports syntax errors.

    Problems are written to ``stream`` (standard error by default).
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.bindings: list[str] = []
        self._stream = stream

    def _report(self, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(message)

    def _bind(self, variable: str) -> None:
        if len(self.bindings) >= MAX_WITH_VARIABLES:
            raise ValueError(f"more than {MAX_WITH_VARIABLES} bound variables")
        self.bindings.append(variable)

    def _is_bound(self, variable: str) -> bool:
        return any(same_identifier(binding, variable) for binding in self.bindings)

    def check(self, ast: Node) -> bool:
        """Return True if ``ast`` is free of errors, reporting any found."""
        match ast:
            case Identifier(source_reference=reference):
                if self._is_bound(reference):
                    return True
                self._report(f"Undeclared variable {identifier_at(reference)}\n")
                return False

            case BinaryOperation(left=left, right=right):
                # Both sides are checked so that every problem is reported.
                left_ok = self.check(left)
                right_ok = self.check(right)
                return left_ok and right_ok

            case WithDeclaration(identifiers=identifiers, expr=expr):
                for identifier in identifiers:
                    self._bind(identifier)
                return self.check(expr)

            case ParseError(source_reference=reference, description=description, reference_length=length):
                source = reference[: min(length, _ERROR_SOURCE_LIMIT)]
                self._report(f"Error:\n{source}\n^{description}\n")
                return False

            case _:
                return True