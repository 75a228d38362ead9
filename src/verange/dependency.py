# SPDX-License-Identifier: MIT
"""A named requirement on a version range."""

from __future__ import annotations

import re
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidRangeError
from .grammar import parse_range
from .ranges import Range
from .semver import Version

DEPENDENCY_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_.\-]*")


class Dependency(BaseModel):
    """A package name together with the range of versions it accepts.

    Both fields round-trip through JSON as strings:

        >>> Dependency.model_validate({"name": "core", "range": "^1.2"}).model_dump(mode="json")
        {'name': 'core', 'range': '^1.2.0'}
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    range: Range = Field(default_factory=Range.any)

    def accepts(self, version: Union[str, Version]) -> bool:
        """Return True if ``version`` satisfies this dependency's range."""
        return self.range.contains(version)

    def __str__(self) -> str:
        return f"{self.name} {self.range}"


def parse_dependency(text: str) -> Dependency:
    """Parse ``name<range>`` such as ``core ^1.2`` or ``core>=1.0,<2``.

    The name runs until the first character that cannot be part of it; the
    rest of the text is the range expression. A bare name accepts any version.

    Raises:
        InvalidRangeError: If there is no name or the range does not parse
    """
    stripped = text.strip()
    match = DEPENDENCY_NAME_PATTERN.match(stripped)
    if match is None:
        raise InvalidRangeError(text, len(text) - len(text.lstrip()), ["dependency name"])
    return Dependency(name=match.group(), range=parse_range(stripped[match.end():]))
