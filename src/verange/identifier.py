# SPDX-License-Identifier: MIT
"""Ordered alphanumeric values for the extra and pre-release fields.

An identifier made only of digits compares numerically (``9 < 10``), anything
containing a letter compares lexically on its lower-cased text. Numeric
identifiers sort before alphanumeric ones.
"""

from __future__ import annotations

import re
from functools import total_ordering
from typing import Union

from .errors import InvalidIdentifierError

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z0-9_.]+")


@total_ordering
class Identifier:
    """An immutable, totally ordered alphanumeric value.

    Examples:
        >>> Identifier("10") > Identifier("9")
        True
        >>> Identifier("Alpha") == Identifier("alpha")
        True
        >>> Identifier("9") < Identifier("alpha")
        True
    """

    __slots__ = ("_text", "_key")

    def __init__(self, text: str):
        if not isinstance(text, str):
            raise InvalidIdentifierError(
                text, f"Identifier must be a string, got {type(text).__name__}"
            )
        if not IDENTIFIER_PATTERN.fullmatch(text):
            raise InvalidIdentifierError(text)

        text = text.lower()
        object.__setattr__(self, "_text", text)
        if text.isdigit():
            object.__setattr__(self, "_key", (0, int(text), ""))
        else:
            object.__setattr__(self, "_key", (1, 0, text))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._text,))

    @classmethod
    def coerce(cls, value: Union[str, "Identifier", None]) -> "Identifier | None":
        """Return ``value`` as an Identifier, leaving ``None`` untouched."""
        if value is None or isinstance(value, cls):
            return value
        return cls(value)

    @property
    def text(self) -> str:
        return self._text

    @property
    def is_numeric(self) -> bool:
        return self._key[0] == 0

    @property
    def sort_key(self) -> tuple:
        return self._key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self._key < other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Identifier({self._text!r})"
