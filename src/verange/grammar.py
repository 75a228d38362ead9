# SPDX-License-Identifier: MIT
"""Parsers for version literals and range expressions.

Accepted version spellings include ``1``, ``v1.2``, ``1.2.3.4``,
``1.2.3-alpha.1+build.5`` and ``1.0.0+windows-rc1``:

    version     := ('v'|'V')? ' '? main extra? after
    main        := NUM '.'? NUM? '.'? NUM?
    extra       := '.' ALNUM
    after       := pre? build? sep_or_end | build pre sep_or_end
    pre         := '-' ALNUM
    build       := '+' ALNUM
    sep_or_end  := (' ' | ',' | ';')+ | end of input

A range expression is either ``*`` on its own or a run of clauses, each an
operator (``==``, ``=``, ``!=``, ``<``, ``<=``, ``>``, ``>=``, ``~``, ``^`` or
nothing, meaning ``=``) followed by a version.

Choices are ordered and optional parts are greedy: once ``main`` has taken a
dot it never gives it back, so ``1.alpha`` is rejected rather than read as
``1`` with an extra component. Pre-release, extra and build payloads are
lower-cased.
"""

from __future__ import annotations

import re
from typing import Optional

from .errors import InvalidRangeError, InvalidVersionError, ParseError
from .ranges import BoundPolicy, Clause, Op, Range
from .semver import Version

_NUM = re.compile(r"[0-9]+")
_ALNUM = re.compile(r"[A-Za-z0-9_.]+")
_SEPARATORS = (" ", ",", ";")

# Longest tokens first so "<=" is not read as "<" followed by "=".
_OPERATORS = ("==", "!=", "<=", ">=", "=", "<", ">", "~", "^")

_END = "end of input"


class _Cursor:
    """Position over the input that remembers the furthest failure."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.furthest = 0
        self.expected: set[str] = set()

    def _miss(self, expected: str) -> None:
        if self.pos > self.furthest:
            self.furthest = self.pos
            self.expected = {expected}
        elif self.pos == self.furthest:
            self.expected.add(expected)

    def literal(self, token: str) -> bool:
        if self.text.startswith(token, self.pos):
            self.pos += len(token)
            return True
        self._miss(repr(token))
        return False

    def pattern(self, regex: re.Pattern, label: str) -> Optional[str]:
        match = regex.match(self.text, self.pos)
        if match is None:
            self._miss(label)
            return None
        self.pos = match.end()
        return match.group()

    def skip_spaces(self) -> None:
        while self.literal(" "):
            pass

    def at_end(self) -> bool:
        if self.pos == len(self.text):
            return True
        self._miss(_END)
        return False

    def fail(self, error: type[ParseError]) -> ParseError:
        return error(self.text, self.furthest, self.expected)


def _number(cursor: _Cursor) -> Optional[int]:
    digits = cursor.pattern(_NUM, "number")
    return None if digits is None else int(digits)


def _suffix(cursor: _Cursor, lead: str) -> Optional[str]:
    start = cursor.pos
    if not cursor.literal(lead):
        return None
    payload = cursor.pattern(_ALNUM, "alphanumeric")
    if payload is None:
        cursor.pos = start
        return None
    return payload.lower()


def _separator_or_end(cursor: _Cursor) -> bool:
    found = False
    while any(cursor.literal(sep) for sep in _SEPARATORS):
        found = True
    return found or cursor.at_end()


def _main(cursor: _Cursor) -> Optional[tuple[int, int, int]]:
    major = _number(cursor)
    if major is None:
        return None
    cursor.literal(".")
    minor = _number(cursor)
    cursor.literal(".")
    patch = _number(cursor)
    return major, minor or 0, patch or 0


def _after_version(cursor: _Cursor) -> Optional[tuple[Optional[str], Optional[str]]]:
    start = cursor.pos
    prerelease = _suffix(cursor, "-")
    build = _suffix(cursor, "+")
    if _separator_or_end(cursor):
        return prerelease, build

    # build before pre-release, as in 1.0.0+windows-rc1
    cursor.pos = start
    build = _suffix(cursor, "+")
    if build is not None:
        prerelease = _suffix(cursor, "-")
        if prerelease is not None and _separator_or_end(cursor):
            return prerelease, build

    cursor.pos = start
    return None


def _version(cursor: _Cursor) -> Optional[Version]:
    start = cursor.pos
    if not cursor.literal("v"):
        cursor.literal("V")
    cursor.literal(" ")

    main = _main(cursor)
    if main is None:
        cursor.pos = start
        return None
    extra = _suffix(cursor, ".")
    after = _after_version(cursor)
    if after is None:
        cursor.pos = start
        return None

    major, minor, patch = main
    prerelease, build = after
    return Version(major, minor, patch, extra=extra, prerelease=prerelease, build=build)


def _operator(cursor: _Cursor) -> Op:
    for token in _OPERATORS:
        if cursor.literal(token):
            return Op.from_token(token)
    return Op.EQ


def _clause(cursor: _Cursor) -> Optional[Clause]:
    start = cursor.pos
    op = _operator(cursor)
    cursor.skip_spaces()
    version = _version(cursor)
    if version is None:
        cursor.pos = start
        return None
    cursor.skip_spaces()
    return op, version


def parse_version(text: str) -> Version:
    """Parse a version literal into a Version.

    Missing minor and patch numbers default to 0 and a leading ``v`` is
    ignored. Surrounding spaces and trailing separators are allowed.

    Args:
        text: The version literal

    Returns:
        The parsed Version

    Raises:
        InvalidVersionError: If ``text`` is not a version literal

    Examples:
        >>> parse_version("v1.2")
        Version(major=1, minor=2, patch=0, extra=None, prerelease=None, build=None)
        >>> str(parse_version("1.2.3.4-RC1+Linux"))
        '1.2.3.4-rc1+linux'
    """
    if not isinstance(text, str):
        raise InvalidVersionError(
            str(text), expected=[f"a string, got {type(text).__name__}"]
        )

    cursor = _Cursor(text)
    cursor.skip_spaces()
    version = _version(cursor)
    if version is not None:
        cursor.skip_spaces()
        if cursor.at_end():
            return version
    raise cursor.fail(InvalidVersionError)


def parse_clauses(text: str) -> list[Clause]:
    """Parse a range expression into its raw (operator, version) clauses.

    The ``*`` form yields no clauses. Shorthand operators are returned as
    written; see :meth:`Range.from_clauses` for how they are normalized.

    Raises:
        InvalidRangeError: If ``text`` is not a range expression
    """
    if not isinstance(text, str):
        raise InvalidRangeError(str(text), expected=[f"a string, got {type(text).__name__}"])

    cursor = _Cursor(text)
    cursor.skip_spaces()
    if cursor.literal("*"):
        cursor.skip_spaces()
        if cursor.at_end():
            return []
        cursor.pos = 0
        cursor.skip_spaces()

    clauses: list[Clause] = []
    while True:
        clause = _clause(cursor)
        if clause is None:
            break
        clauses.append(clause)
    cursor.skip_spaces()
    if not cursor.at_end():
        raise cursor.fail(InvalidRangeError)
    return clauses


def parse_range(text: str, policy: BoundPolicy = BoundPolicy.LOOSEST) -> Range:
    """Parse a range expression into a canonical Range.

    Args:
        text: A range expression such as ``^1.2``, ``>=1.0, <2.0, !=1.5`` or ``*``
        policy: How repeated lower or upper bounds are merged

    Returns:
        The normalized Range. It may be invalid; check :meth:`Range.is_valid`.

    Raises:
        InvalidRangeError: If ``text`` is not a range expression

    Examples:
        >>> str(parse_range("~1.2"))
        '~1.2.0'
        >>> str(parse_range(">1.2.3 <=1.2.5"))
        '>=1.2.4,<1.2.6'
    """
    return Range.from_clauses(parse_clauses(text), policy=policy)
