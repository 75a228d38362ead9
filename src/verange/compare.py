# SPDX-License-Identifier: MIT
"""Version comparison.

Two notions of order exist side by side:

- Range ordering (``order_compare``, ``version_key`` and the ``<``/``>=``
  operators on Version) looks at major, minor, patch and extra only. A
  pre-release sits on the same point as its release, which is what range
  boundaries need.
- Temporal precedence (``is_older_than``) also weighs the pre-release, so
  ``1.0.0-alpha`` is older than ``1.0.0``. It answers "is this an upgrade",
  never range membership.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from .identifier import Identifier
from .semver import Version

VersionLike = Union[str, Version]


class TemporalOrder(Enum):
    """How ``is_older_than`` combines its per-field comparisons.

    DISJUNCTIVE reports "older" as soon as any single field is smaller,
    regardless of the more significant fields, so ``2.0.0`` counts as older
    than ``1.5.0`` because its minor is smaller. This is the historical
    behavior and stays the default.
    LEXICOGRAPHIC compares the fields most-significant first.
    """

    DISJUNCTIVE = "disjunctive"
    LEXICOGRAPHIC = "lexicographic"


def _coerce(version: VersionLike) -> Version:
    return Version.parse(version) if isinstance(version, str) else version


def structural_equal(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if all six fields match, build included."""
    return _coerce(version1) == _coerce(version2)


def version_key(version: VersionLike) -> tuple:
    """Return a sort key following range ordering.

    Examples:
        >>> sorted(["1.0.0.1", "2.0", "1"], key=version_key)
        ['1', '1.0.0.1', '2.0']
    """
    return _coerce(version).order_key


def order_compare(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions by range ordering.

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 are order-equal
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> order_compare("1.0.0", "2.0.0")
        -1
        >>> order_compare("1.0.0-alpha", "1.0.0+build")
        0
        >>> order_compare("1.0.0.2", "1.0.0")
        1
    """
    key1 = version_key(version1)
    key2 = version_key(version2)
    if key1 == key2:
        return 0
    return -1 if key1 < key2 else 1


def _extra_key(extra: Optional[Identifier]) -> tuple:
    # absent extra ranks below any extra
    return (0,) if extra is None else (1, extra.sort_key)


def _prerelease_key(prerelease: Optional[Identifier]) -> tuple:
    # a pre-release precedes its release
    return (1,) if prerelease is None else (0, prerelease.sort_key)


def _build_key(build: Optional[str]) -> tuple:
    return (0,) if build is None else (1, build)


def _temporal_fields(version: Version, with_build: bool) -> tuple:
    fields = (
        version.major,
        version.minor,
        version.patch,
        _extra_key(version.extra),
        _prerelease_key(version.prerelease),
    )
    if with_build:
        fields += (_build_key(version.build),)
    return fields


def _precedes(
    version1: VersionLike,
    version2: VersionLike,
    order: TemporalOrder,
    with_build: bool,
) -> bool:
    fields1 = _temporal_fields(_coerce(version1), with_build)
    fields2 = _temporal_fields(_coerce(version2), with_build)
    if order is TemporalOrder.LEXICOGRAPHIC:
        return fields1 < fields2
    return any(a < b for a, b in zip(fields1, fields2))


def is_older_than(
    version1: VersionLike,
    version2: VersionLike,
    order: TemporalOrder = TemporalOrder.DISJUNCTIVE,
) -> bool:
    """Return True if version1 temporally precedes version2.

    Unlike range ordering this weighs the pre-release: a version carrying a
    pre-release is older than the same version without one. Build metadata is
    ignored; see :func:`is_older_than_with_build`.

    With the default DISJUNCTIVE order each of major, minor, patch, extra and
    pre-release is compared on its own and any smaller field makes the result
    True. See :class:`TemporalOrder`.

    Examples:
        >>> is_older_than("1.0.0-alpha", "1.0.0")
        True
        >>> is_older_than("1.0.0-62747", "1.0.0-62748")
        True
        >>> is_older_than("1.0.0", "1.0.0-alpha")
        False
    """
    return _precedes(version1, version2, order, with_build=False)


def is_older_than_with_build(
    version1: VersionLike,
    version2: VersionLike,
    order: TemporalOrder = TemporalOrder.DISJUNCTIVE,
) -> bool:
    """Like :func:`is_older_than`, with the build string compared last.

    A missing build ranks below any build.
    """
    return _precedes(version1, version2, order, with_build=True)
