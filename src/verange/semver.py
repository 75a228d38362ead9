# SPDX-License-Identifier: MIT
"""The Version value type.

A version has MAJOR.MINOR.PATCH numbers, an optional fourth ``extra`` component
and optional pre-release and build fragments:
- Extra: 1.2.3.4, 1.2.3.rev2 (ranks below patch, above pre-release)
- Pre-release: -alpha, -alpha.1, -rc2
- Build metadata: +build, +windows, +20240101

Equality (``==``) compares every field, build included. The ordering
operators (``<``, ``<=``, ``>``, ``>=``) only look at major, minor, patch and
extra, so ``1.0.0-alpha`` and ``1.0.0+linux`` both sit on the same point as
``1.0.0`` when checked against a range boundary. Use ``is_older_than`` to ask
whether a pre-release precedes its release.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Optional, Union

from ._pydantic import string_backed_schema
from .identifier import Identifier

IdentifierLike = Union[str, Identifier, None]


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        extra: Optional fourth component (e.g., "4" in 1.2.3.4)
        prerelease: Optional pre-release identifier (e.g., "alpha.1", "rc2")
        build: Optional build metadata, stored lower-cased (e.g., "windows", "build.123")
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    extra: Optional[Identifier] = None
    prerelease: Optional[Identifier] = None
    build: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        # str payloads become Identifiers; InvalidIdentifierError propagates
        object.__setattr__(self, "extra", Identifier.coerce(self.extra))
        object.__setattr__(self, "prerelease", Identifier.coerce(self.prerelease))
        if self.build is not None:
            if not isinstance(self.build, str):
                raise ValueError(f"build must be a string, got {type(self.build).__name__}")
            object.__setattr__(self, "build", self.build.lower())

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse a version literal. See :func:`verange.grammar.parse_version`."""
        from .grammar import parse_version

        return parse_version(text)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> Any:
        return string_backed_schema(cls, cls.parse)

    def __str__(self) -> str:
        """Return the display form ``major.minor.patch[.extra][-pre][+build]``."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.extra is not None:
            version += f".{self.extra}"
        if self.prerelease is not None:
            version += f"-{self.prerelease}"
        if self.build is not None:
            version += f"+{self.build}"
        return version

    @property
    def order_key(self) -> tuple:
        """Key used by the ordering operators: (major, minor, patch, extra)."""
        extra_key = (0,) if self.extra is None else (1, self.extra.sort_key)
        return (self.major, self.minor, self.patch, extra_key)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return the MAJOR.MINOR.PATCH part without any suffixes."""
        return f"{self.major}.{self.minor}.{self.patch}"

    # Range ordering. Pre-release and build never take part.

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.order_key < other.order_key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.order_key <= other.order_key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.order_key > other.order_key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.order_key >= other.order_key

    def is_identical(self, other: "Version") -> bool:
        """Return True if every field, build included, matches ``other``."""
        return self == other

    def is_older_than(self, other: "Version") -> bool:
        """See :func:`verange.compare.is_older_than`."""
        from .compare import is_older_than

        return is_older_than(self, other)

    def is_older_than_with_build(self, other: "Version") -> bool:
        """See :func:`verange.compare.is_older_than_with_build`."""
        from .compare import is_older_than_with_build

        return is_older_than_with_build(self, other)

    # Copy-and-modify builders

    def with_major(self, major: int) -> "Version":
        return dataclasses.replace(self, major=major)

    def with_minor(self, minor: int) -> "Version":
        return dataclasses.replace(self, minor=minor)

    def with_patch(self, patch: int) -> "Version":
        return dataclasses.replace(self, patch=patch)

    def with_extra(self, extra: IdentifierLike) -> "Version":
        """Return a copy with a new extra component.

        Raises:
            InvalidIdentifierError: If ``extra`` is not alphanumeric
        """
        return dataclasses.replace(self, extra=extra)

    def with_prerelease(self, prerelease: IdentifierLike) -> "Version":
        """Return a copy with a new pre-release identifier.

        Raises:
            InvalidIdentifierError: If ``prerelease`` is not alphanumeric
        """
        return dataclasses.replace(self, prerelease=prerelease)

    def with_build(self, build: Optional[str]) -> "Version":
        return dataclasses.replace(self, build=build)


ZERO = Version(0, 0, 0)
