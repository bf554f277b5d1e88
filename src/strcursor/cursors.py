"""
Cursor Types

Defines the two traversal modes over a string collection:
    - SequentialCursor (every element, insertion order)
    - FilteredCursor (only elements satisfying a predicate)

Both share one iteration interface (Cursor):
    has_more() -> bool
    next() -> str

ARCHITECTURAL RULE:
    Cursors are forward-only, finite and non-restartable.
    Once has_more() returns False it returns False forever.
    Calling next() past the end is a caller bug and raises ExhaustedError.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterable, Optional


Predicate = Callable[[str], bool]


class ExhaustedError(Exception):
    """Raised when next() is called on a cursor with no remaining elements."""
    pass


class Cursor(ABC):
    """
    Shared iteration interface for all cursors.

    Subclasses implement has_more() and next(). The Python iterator
    protocol is layered on top so cursors work in for-loops and
    comprehensions; there exhaustion ends the loop via StopIteration
    instead of ExhaustedError.
    """

    @abstractmethod
    def has_more(self) -> bool:
        """Report whether next() would produce an element. No side effects."""

    @abstractmethod
    def next(self) -> str:
        """Return the next element, or raise ExhaustedError."""

    def __iter__(self) -> "Cursor":
        return self

    def __next__(self) -> str:
        if not self.has_more():
            raise StopIteration
        return self.next()


class SequentialCursor(Cursor):
    """
    Yields every element of a snapshot, in order.

    The snapshot is taken at construction, so values appended to the
    source afterwards are never observed.
    """

    def __init__(self, values: Iterable[str]):
        self._values = tuple(values)
        self._position = 0

    def has_more(self) -> bool:
        return self._position < len(self._values)

    def next(self) -> str:
        if not self.has_more():
            raise ExhaustedError("No more elements in the collection.")
        value = self._values[self._position]
        self._position += 1
        return value

    def __repr__(self) -> str:
        return f"<SequentialCursor(position={self._position}, size={len(self._values)})>"


@dataclass
class _Lookahead:
    """One-element buffer: the next matching value, if any."""
    value: Optional[str] = None
    has_more: bool = False


class FilteredCursor(Cursor):
    """
    Yields only the elements of an underlying cursor that satisfy a predicate.

    The underlying cursor can only move forward, so answering has_more()
    without consuming requires buffering one matching element ahead.

    States:
        HAS_BUFFERED  -> lookahead holds the next match
        EXHAUSTED     -> source drained, terminal

    The buffer is refilled on construction and after every next().

    Properties:
        source: Any Cursor (usually a SequentialCursor)
        predicate: Callable str -> bool, called once per source element
    """

    def __init__(self, source: Cursor, predicate: Predicate):
        self._source = source
        self._predicate = predicate
        self._lookahead = _Lookahead()
        self._refill()

    def _refill(self) -> None:
        """Scan the source for the next match, discarding non-matches."""
        while self._source.has_more():
            candidate = self._source.next()
            if self._predicate(candidate):
                self._lookahead.value = candidate
                self._lookahead.has_more = True
                return
        self._lookahead.value = None
        self._lookahead.has_more = False

    def has_more(self) -> bool:
        return self._lookahead.has_more

    def next(self) -> str:
        if not self._lookahead.has_more:
            raise ExhaustedError("No more elements match the filter.")
        current = self._lookahead.value
        # Buffer stays empty until _refill finds the next match.
        self._lookahead.value = None
        self._lookahead.has_more = False
        self._refill()
        return current

    def __repr__(self) -> str:
        state = "HAS_BUFFERED" if self._lookahead.has_more else "EXHAUSTED"
        return f"<FilteredCursor(state={state})>"
