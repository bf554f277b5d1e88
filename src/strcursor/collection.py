"""
String Collection

An ordered, append-only sequence of strings and the factory for its cursors.

INVARIANTS:
    - Insertion order is preserved
    - No deduplication
    - No removal
"""

import logging
from typing import Iterable, List, Optional, Tuple

from strcursor.cursors import FilteredCursor, Predicate, SequentialCursor

logger = logging.getLogger(__name__)


class StringCollection:
    """
    Root container for the strings being traversed.

    Cursors created from a collection work on a snapshot of its contents
    at creation time. Appending while a cursor is outstanding is allowed
    and does not affect that cursor.
    """

    def __init__(self, values: Optional[Iterable[str]] = None):
        self._values: List[str] = []
        for value in values or []:
            self.add(value)

    def add(self, value: str) -> None:
        """
        Append a string to the end of the collection.

        Args:
            value: Any string, including the empty string

        Raises:
            TypeError: If value is not a str

        NOTE:
            The type check guards the untyped Python call site only.
            Any str is accepted, and appending a str never fails.
        """
        if not isinstance(value, str):
            raise TypeError(f"StringCollection only holds str, got {type(value).__name__}")
        self._values.append(value)
        logger.debug("Added string: %s", value)

    def create_cursor(self) -> SequentialCursor:
        """Return a cursor over every current element, in insertion order."""
        logger.debug("Creating sequential cursor.")
        return SequentialCursor(self._values)

    def create_filtered_cursor(self, predicate: Predicate) -> FilteredCursor:
        """
        Return a cursor over the current elements satisfying predicate.

        Args:
            predicate: Callable taking a str and returning a bool.
                Lambdas and the objects in strcursor.predicates both work.

        Raises:
            TypeError: If predicate is not callable
        """
        if not callable(predicate):
            raise TypeError(f"Predicate must be callable, got {type(predicate).__name__}")
        logger.debug("Creating filtered cursor with condition.")
        return FilteredCursor(self.create_cursor(), predicate)

    @property
    def values(self) -> Tuple[str, ...]:
        return tuple(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> SequentialCursor:
        return self.create_cursor()

    def __repr__(self) -> str:
        return f"<StringCollection(size={len(self._values)})>"
