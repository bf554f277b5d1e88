"""
Predicate Objects for Filtered Traversal

A filter is anything callable as predicate(value) -> bool. A lambda is
enough for one-off use. The classes below are the named, serializable
alternative: immutable strategy objects that can be composed, compared,
and written to JSON/YAML (see strcursor.serialization).

ARCHITECTURAL RULE:
    Predicates are pure. They must not mutate the value or keep state
    between calls, because FilteredCursor calls them exactly once per
    element and in order.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple


class StringPredicate(ABC):
    """Base class for all predicate objects."""

    @abstractmethod
    def __call__(self, value: str) -> bool:
        pass


@dataclass(frozen=True)
class LengthGreaterThan(StringPredicate):
    """
    True when the value is strictly longer than length.

    Example:
        LengthGreaterThan(5)("hourglass")  -> True
        LengthGreaterThan(5)("city")       -> False
    """

    length: int

    def __call__(self, value: str) -> bool:
        return len(value) > self.length


@dataclass(frozen=True)
class LengthLessThan(StringPredicate):
    """True when the value is strictly shorter than length."""

    length: int

    def __call__(self, value: str) -> bool:
        return len(value) < self.length


@dataclass(frozen=True)
class StartsWith(StringPredicate):
    prefix: str

    def __call__(self, value: str) -> bool:
        return value.startswith(self.prefix)


@dataclass(frozen=True)
class EndsWith(StringPredicate):
    suffix: str

    def __call__(self, value: str) -> bool:
        return value.endswith(self.suffix)


@dataclass(frozen=True)
class Contains(StringPredicate):
    substring: str

    def __call__(self, value: str) -> bool:
        return self.substring in value


@dataclass(frozen=True)
class Not(StringPredicate):
    """
    Negates another predicate.

    Example:
        Not(StartsWith("c"))  keeps "hourglass", drops "cat" and "city"
    """

    operand: StringPredicate

    def __call__(self, value: str) -> bool:
        return not self.operand(value)


@dataclass(frozen=True)
class AllOf(StringPredicate):
    """
    True when every operand is true. An empty AllOf matches everything.

    Operands are evaluated left to right and stop at the first False.
    """

    operands: Tuple[StringPredicate, ...]

    def __call__(self, value: str) -> bool:
        return all(operand(value) for operand in self.operands)


@dataclass(frozen=True)
class AnyOf(StringPredicate):
    """True when at least one operand is true. An empty AnyOf matches nothing."""

    operands: Tuple[StringPredicate, ...]

    def __call__(self, value: str) -> bool:
        return any(operand(value) for operand in self.operands)
