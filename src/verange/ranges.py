# SPDX-License-Identifier: MIT
"""Version ranges and their normalization.

Every range is kept in one canonical shape: an inclusive lower bound, an
exclusive upper bound, a set of excluded versions and a set of included
versions. Shorthand operators are rewritten into that shape:

    ~1.2.3  ->  >=1.2.3, <1.3.0
    ^1.2.3  ->  >=1.2.3, <2.0.0
    <=1.2.3 ->  <1.2.4
    >1.2.3  ->  >=1.2.4

Bounds produced by the rewrite only keep major, minor and patch; the extra,
pre-release and build of the written version are dropped.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Union

from ._pydantic import string_backed_schema
from .semver import ZERO, Version

logger = logging.getLogger(__name__)


class Op(Enum):
    """Range operators. The value is the canonical token."""

    EQ = "="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="
    TILDE = "~"
    CARET = "^"

    @classmethod
    def from_token(cls, token: str) -> "Op":
        """Map an operator token to its Op; ``==`` and the empty token are ``EQ``.

        Raises:
            ValueError: If ``token`` is not an operator
        """
        if token in ("==", ""):
            return cls.EQ
        return cls(token)


Clause = tuple[Op, Version]


class BoundPolicy(Enum):
    """Which bound wins when a range repeats ``>=`` or ``<`` clauses.

    LOOSEST keeps the smallest lower bound and the largest upper bound, so
    ``>=1.0, >=1.5`` starts at 1.0. This is the historical behavior and the
    default. TIGHTEST keeps the largest lower and smallest upper bound,
    which is the intersection of the clauses.
    """

    LOOSEST = "loosest"
    TIGHTEST = "tightest"


def _tilde(version: Version) -> list[Clause]:
    return [(Op.GE, version), (Op.LT, Version(version.major, version.minor + 1, 0))]


def _caret(version: Version) -> list[Clause]:
    return [(Op.GE, version), (Op.LT, Version(version.major + 1, 0, 0))]


def _less_or_equal(version: Version) -> list[Clause]:
    return [(Op.LT, Version(version.major, version.minor, version.patch + 1))]


def _greater(version: Version) -> list[Clause]:
    return [(Op.GE, Version(version.major, version.minor, version.patch + 1))]


_DESUGAR: dict[Op, Callable[[Version], list[Clause]]] = {
    Op.TILDE: _tilde,
    Op.CARET: _caret,
    Op.LE: _less_or_equal,
    Op.GT: _greater,
}


def desugar(clauses: Iterable[Clause]) -> list[Clause]:
    """Rewrite shorthand clauses into ``=``, ``!=``, ``>=`` and ``<`` clauses."""
    result: list[Clause] = []
    for op, version in clauses:
        expand = _DESUGAR.get(op)
        result.extend(expand(version) if expand else [(op, version)])
    return result


def _select_bounds(
    lowers: list[Version], uppers: list[Version], policy: BoundPolicy
) -> tuple[Optional[Version], Optional[Version]]:
    """Pick one lower and one upper bound from sorted candidates."""
    if policy is BoundPolicy.TIGHTEST:
        return (lowers[-1] if lowers else None, uppers[0] if uppers else None)
    return (lowers[0] if lowers else None, uppers[-1] if uppers else None)


def _unique(versions: Iterable[Version]) -> tuple[Version, ...]:
    return tuple(dict.fromkeys(versions))


@dataclass(frozen=True, slots=True)
class Range:
    """A canonical version range.

    Attributes:
        lower: Inclusive lower bound, or None for no lower bound
        upper: Exclusive upper bound, or None for no upper bound
        excluded: Versions that never match, compared field by field
        included: Versions that always match unless also excluded
    """

    lower: Optional[Version] = None
    upper: Optional[Version] = None
    excluded: tuple[Version, ...] = ()
    included: tuple[Version, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "excluded", _unique(self.excluded))
        object.__setattr__(self, "included", _unique(self.included))

    @classmethod
    def any(cls) -> "Range":
        """Return the range that matches every version."""
        return cls()

    @classmethod
    def parse(cls, text: str, policy: BoundPolicy = BoundPolicy.LOOSEST) -> "Range":
        """Parse a range expression. See :func:`verange.grammar.parse_range`."""
        from .grammar import parse_range

        return parse_range(text, policy=policy)

    @classmethod
    def from_clauses(
        cls, clauses: Iterable[Clause], policy: BoundPolicy = BoundPolicy.LOOSEST
    ) -> "Range":
        """Normalize (operator, version) clauses into a Range.

        Shorthand clauses are desugared, all clauses are sorted by range
        ordering and grouped by operator. The lower and upper bound come from
        the ``>=`` and ``<`` groups according to ``policy``; ``!=`` clauses
        become exclusions and ``=`` clauses inclusions.

        The result is not checked; use :meth:`is_valid`.

        Examples:
            >>> str(Range.from_clauses([(Op.GE, Version(1, 2, 3)), (Op.LE, Version(1, 2, 5))]))
            '>=1.2.3,<1.2.6'
        """
        expanded = desugar(clauses)
        expanded.sort(key=lambda clause: clause[1].order_key)

        groups: dict[Op, list[Version]] = defaultdict(list)
        for op, version in expanded:
            groups[op].append(version)

        lower, upper = _select_bounds(groups[Op.GE], groups[Op.LT], policy)
        logger.debug(
            "Normalized %d clause(s) with %s policy: lower=%s upper=%s",
            len(expanded),
            policy.value,
            lower,
            upper,
        )
        return cls(
            lower=lower,
            upper=upper,
            excluded=tuple(groups[Op.NE]),
            included=tuple(groups[Op.EQ]),
        )

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> Any:
        return string_backed_schema(cls, cls.parse)

    def contains(self, version: Union[str, Version]) -> bool:
        """Return True if ``version`` is in this range.

        Exclusions win over inclusions, inclusions win over bounds. Bounds use
        range ordering, so pre-release and build are ignored there; exclusions
        and inclusions need every field to match.
        """
        if isinstance(version, str):
            version = Version.parse(version)
        if version in self.excluded:
            return False
        if version in self.included:
            return True
        return (self.lower is None or version >= self.lower) and (
            self.upper is None or version < self.upper
        )

    def __contains__(self, version: object) -> bool:
        if not isinstance(version, (str, Version)):
            return False
        return self.contains(version)

    def is_any(self) -> bool:
        """Return True if the range has no constraint beyond ``>=0.0.0``."""
        return (
            (self.lower is None or self.lower == ZERO)
            and self.upper is None
            and not self.excluded
            and not self.included
        )

    def is_valid(self) -> bool:
        """Return True if the bounds are ordered and nothing is both included and excluded.

        Parsing never rejects an invalid range, but ``contains`` and ``str``
        give unreliable answers for one.
        """
        if self.lower is not None and self.upper is not None and self.lower > self.upper:
            return False
        return not any(version in self.excluded for version in self.included)

    def is_exact_match(self) -> bool:
        """Return True if the range names exactly one version.

        That is either a single inclusion or equal bounds, but not both.
        """
        bounds_equal = (
            self.lower is not None and self.upper is not None and self.lower == self.upper
        )
        return len(self.included) + int(bounds_equal) == 1

    def _shorthand(self) -> Optional[str]:
        if self.lower is None or self.upper is None:
            return None
        lower, upper = self.lower, self.upper
        if upper.patch == 0 and upper.minor == 0 and upper.major == lower.major + 1:
            return f"^{lower}"
        if upper.patch == 0 and upper.minor == lower.minor + 1 and upper.major == lower.major:
            return f"~{lower}"
        return None

    def __str__(self) -> str:
        """Render ``*``, a ``^``/``~`` shorthand, or the comma-joined clause list."""
        if self.is_any():
            return "*"
        shorthand = self._shorthand()
        if shorthand is not None:
            return shorthand

        parts: list[str] = []
        if self.lower is not None:
            parts.append(f">={self.lower}")
        if self.upper is not None:
            parts.append(f"<{self.upper}")
        parts.extend(f"!={version}" for version in self.excluded)
        parts.extend(f"={version}" for version in self.included)
        return ",".join(parts)
