# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing versions, ranges and identifiers."""

from __future__ import annotations

from typing import Iterable


class ParseError(ValueError):
    """Raised when a version or range literal does not match the grammar.

    The diagnostic points at the furthest position the parser reached and
    lists the tokens it would have accepted there.

    Attributes:
        text: The input that failed to parse
        offset: 0-based index of the failure in ``text``
        line: 1-based line number of the failure
        column: 1-based column number of the failure
        expected: Sorted descriptions of the tokens accepted at ``offset``
    """

    kind = "literal"

    def __init__(self, text: str, offset: int = 0, expected: Iterable[str] = ()):
        self.text = text
        self.offset = offset
        self.line = text.count("\n", 0, offset) + 1
        self.column = offset - (text.rfind("\n", 0, offset) + 1) + 1
        self.expected = tuple(sorted(set(expected)))
        super().__init__(self._describe())

    def _describe(self) -> str:
        message = f"Invalid {self.kind} {self.text!r}"
        if self.expected:
            message += f": expected one of {', '.join(self.expected)}"
        return f"{message} at line {self.line}, column {self.column}"


class InvalidVersionError(ParseError):
    """Raised when a version literal cannot be parsed."""

    kind = "version"


class InvalidRangeError(ParseError):
    """Raised when a range expression cannot be parsed."""

    kind = "range"


class InvalidIdentifierError(ValueError):
    """Raised when an extra or pre-release payload is not alphanumeric."""

    def __init__(self, value: object, message: str = ""):
        self.value = value
        self.message = message or f"Invalid identifier: {value!r}"
        super().__init__(self.message)
