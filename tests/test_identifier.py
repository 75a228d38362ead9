# SPDX-License-Identifier: MIT
"""Unit tests for the ordered identifier type."""

import copy
import pickle

import pytest

from verange import Identifier, InvalidIdentifierError


class TestIdentifierOrdering:
    """Tests for identifier comparisons."""

    def test_numeric_compares_numerically(self):
        """Digit-only identifiers compare as numbers."""
        assert Identifier("9") < Identifier("10")
        assert Identifier("62747") < Identifier("62748")

    def test_leading_zeros_are_equal(self):
        """Numeric identifiers ignore leading zeros."""
        assert Identifier("007") == Identifier("7")
        assert hash(Identifier("007")) == hash(Identifier("7"))

    def test_alphanumeric_compares_lexically(self):
        """Identifiers with letters compare lexically."""
        assert Identifier("alpha") < Identifier("beta")
        assert Identifier("rc10") < Identifier("rc9")

    def test_numeric_before_alphanumeric(self):
        """Numeric identifiers sort before alphanumeric ones."""
        assert Identifier("999") < Identifier("a")

    def test_case_insensitive(self):
        """Identifiers are case-folded."""
        assert Identifier("Windows") == Identifier("windows")
        assert str(Identifier("RC1")) == "rc1"

    def test_dots_and_underscores(self):
        """Dots and underscores are allowed."""
        assert str(Identifier("alpha.1")) == "alpha.1"
        assert str(Identifier("dev_build")) == "dev_build"

    def test_sorting(self):
        """Identifiers sort into a total order."""
        values = [Identifier(v) for v in ["beta", "10", "alpha", "2"]]
        assert [str(v) for v in sorted(values)] == ["2", "10", "alpha", "beta"]


class TestIdentifierValidation:
    """Tests for rejected identifier payloads."""

    @pytest.mark.parametrize("value", ["", "alpha-1", "a+b", "has space", "é"])
    def test_invalid_payloads(self, value):
        """Characters outside [A-Za-z0-9_.] are rejected."""
        with pytest.raises(InvalidIdentifierError):
            Identifier(value)

    def test_non_string(self):
        """Non-string input is rejected."""
        with pytest.raises(InvalidIdentifierError):
            Identifier(5)  # type: ignore

    def test_is_value_error(self):
        """The identifier error is a ValueError."""
        assert issubclass(InvalidIdentifierError, ValueError)


class TestIdentifierValue:
    """Tests for identifier immutability and copying."""

    def test_immutable(self):
        """Identifiers cannot be modified."""
        ident = Identifier("alpha")
        with pytest.raises(AttributeError):
            ident.foo = "beta"  # type: ignore

    def test_copy_and_pickle(self):
        """Identifiers survive copy and pickle."""
        ident = Identifier("rc.1")
        assert copy.deepcopy(ident) == ident
        assert pickle.loads(pickle.dumps(ident)) == ident

    def test_coerce(self):
        """coerce passes None and Identifiers through."""
        ident = Identifier("a")
        assert Identifier.coerce(None) is None
        assert Identifier.coerce(ident) is ident
        assert Identifier.coerce("b") == Identifier("b")

    def test_is_numeric(self):
        """is_numeric reports digit-only identifiers."""
        assert Identifier("12").is_numeric is True
        assert Identifier("a12").is_numeric is False
