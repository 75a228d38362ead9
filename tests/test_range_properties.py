# SPDX-License-Identifier: MIT
"""Property-based tests for version ordering and range normalization.

These tests verify that:
- Plain versions survive rendering and parsing
- Range ordering ignores pre-release and build
- Normalized bounds follow the chosen bound policy
- Shorthand ranges render back to their shorthand
"""

from __future__ import annotations

from hypothesis import given, strategies as st

from verange import (
    BoundPolicy,
    Op,
    Range,
    Version,
    is_older_than,
    order_compare,
    parse_range,
    parse_version,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

numbers = st.integers(min_value=0, max_value=50)
identifiers = st.from_regex(r"[a-z0-9][a-z0-9_.]{0,8}", fullmatch=True)


@st.composite
def plain_versions(draw) -> Version:
    """Generate a version with only major, minor and patch."""
    return Version(draw(numbers), draw(numbers), draw(numbers))


@st.composite
def full_versions(draw) -> Version:
    """Generate a version that may carry every optional field."""
    return Version(
        draw(numbers),
        draw(numbers),
        draw(numbers),
        extra=draw(st.none() | identifiers),
        prerelease=draw(st.none() | identifiers),
        build=draw(st.none() | identifiers),
    )


clause_ops = st.sampled_from(list(Op))


@st.composite
def clause_lists(draw) -> list:
    """Generate a list of (operator, version) clauses."""
    return draw(st.lists(st.tuples(clause_ops, plain_versions()), max_size=6))


# =============================================================================
# Properties
# =============================================================================


class TestVersionProperties:
    """Properties of version parsing and ordering."""

    @given(plain_versions())
    def test_plain_round_trip(self, version: Version):
        """Plain versions parse back from their string form."""
        assert parse_version(str(version)) == version

    @given(full_versions())
    def test_full_round_trip(self, version: Version):
        """Versions with suffixes parse back from their string form."""
        assert parse_version(str(version)) == version

    @given(full_versions(), identifiers, identifiers)
    def test_suffixes_do_not_affect_order(self, version: Version, pre: str, build: str):
        """Pre-release and build never change range ordering."""
        assert order_compare(version, version.with_prerelease(pre).with_build(build)) == 0

    @given(full_versions(), full_versions())
    def test_order_compare_antisymmetric(self, a: Version, b: Version):
        """Swapping arguments negates the comparison."""
        assert order_compare(a, b) == -order_compare(b, a)

    @given(full_versions())
    def test_not_older_than_itself(self, version: Version):
        """No version is older than itself."""
        assert is_older_than(version, version) is False


class TestRangeProperties:
    """Properties of range normalization."""

    @given(clause_lists())
    def test_loosest_bounds_are_extremes(self, clauses: list):
        """LOOSEST picks the smallest lower and largest upper bound."""
        r = Range.from_clauses(clauses)
        lowers = [v for op, v in clauses if op is Op.GE]
        uppers = [v for op, v in clauses if op is Op.LT]
        if lowers and r.lower is not None:
            assert all(r.lower <= v for v in lowers)
        if uppers and r.upper is not None:
            assert all(r.upper >= v for v in uppers)

    @given(clause_lists())
    def test_tightest_never_looser(self, clauses: list):
        """TIGHTEST bounds lie inside LOOSEST bounds."""
        loose = Range.from_clauses(clauses, policy=BoundPolicy.LOOSEST)
        tight = Range.from_clauses(clauses, policy=BoundPolicy.TIGHTEST)
        assert (loose.lower is None) == (tight.lower is None)
        assert (loose.upper is None) == (tight.upper is None)
        if loose.lower is not None:
            assert tight.lower >= loose.lower
        if loose.upper is not None:
            assert tight.upper <= loose.upper

    @given(clause_lists())
    def test_clause_order_irrelevant(self, clauses: list):
        """Reversing the clauses gives an equivalent range."""
        forward = Range.from_clauses(clauses)
        backward = Range.from_clauses(list(reversed(clauses)))
        assert forward.lower == backward.lower
        assert forward.upper == backward.upper
        assert set(forward.excluded) == set(backward.excluded)
        assert set(forward.included) == set(backward.included)

    @given(plain_versions())
    def test_caret_round_trip(self, version: Version):
        """Caret ranges render as caret ranges."""
        assert str(parse_range(f"^{version}")) == f"^{version}"

    @given(plain_versions())
    def test_tilde_contains_its_base(self, version: Version):
        """A tilde range contains its base version and excludes the next minor."""
        r = parse_range(f"~{version}")
        assert r.contains(version)
        assert not r.contains(Version(version.major, version.minor + 1, 0))

    @given(plain_versions(), plain_versions())
    def test_exclusion_always_wins(self, excluded: Version, other: Version):
        """An excluded version is never contained."""
        r = Range.from_clauses([(Op.EQ, excluded), (Op.NE, excluded), (Op.GE, other)])
        assert not r.contains(excluded)
