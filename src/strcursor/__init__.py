"""
String Cursor Package

An in-memory, append-only string collection with two traversal modes:
    - Sequential: every element in insertion order
    - Filtered: only elements satisfying a predicate (one-ahead lookahead)

Single process, single caller. No persistence, no thread safety.
"""

from strcursor.cursors import Cursor, ExhaustedError, FilteredCursor, SequentialCursor
from strcursor.collection import StringCollection

__version__ = "0.1.0"

__all__ = [
    "Cursor",
    "ExhaustedError",
    "FilteredCursor",
    "SequentialCursor",
    "StringCollection",
]
