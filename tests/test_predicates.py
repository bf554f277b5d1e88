"""
Tests for predicate objects.
"""

import pytest
from strcursor.predicates import (
    AllOf,
    AnyOf,
    Contains,
    EndsWith,
    LengthGreaterThan,
    LengthLessThan,
    Not,
    StartsWith,
    StringPredicate,
)


class TestSimplePredicates:
    """Test leaf predicates."""

    def test_length_greater_than_is_strict(self):
        p = LengthGreaterThan(5)
        assert p("hourglass")
        assert not p("abcde")
        assert not p("cat")

    def test_length_less_than_is_strict(self):
        p = LengthLessThan(4)
        assert p("cat")
        assert not p("city")

    def test_starts_with(self):
        assert StartsWith("ci")("city")
        assert not StartsWith("ci")("cat")

    def test_ends_with(self):
        assert EndsWith("tion")("manifestation")
        assert not EndsWith("tion")("hourglass")

    def test_contains(self):
        assert Contains("glass")("hourglass")
        assert not Contains("glass")("city")

    def test_empty_string(self):
        """Empty input is a normal value."""
        assert not LengthGreaterThan(0)("")
        assert StartsWith("")("")


class TestComposite:
    """Test Not / AllOf / AnyOf."""

    def test_not(self):
        assert Not(StartsWith("c"))("hourglass")
        assert not Not(StartsWith("c"))("cat")

    def test_all_of(self):
        p = AllOf((StartsWith("c"), LengthGreaterThan(3)))
        assert p("city")
        assert not p("cat")

    def test_any_of(self):
        p = AnyOf((StartsWith("h"), EndsWith("y")))
        assert p("hourglass")
        assert p("city")
        assert not p("cat")

    def test_empty_composites(self):
        assert AllOf(())("anything")
        assert not AnyOf(())("anything")


class TestImmutability:
    """Predicates are frozen value objects."""

    def test_equality(self):
        assert LengthGreaterThan(5) == LengthGreaterThan(5)
        assert Not(Contains("a")) == Not(Contains("a"))

    def test_frozen(self):
        p = LengthGreaterThan(5)
        with pytest.raises(AttributeError):
            p.length = 10

    def test_hashable(self):
        assert len({StartsWith("a"), StartsWith("a"), StartsWith("b")}) == 2

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            StringPredicate()
