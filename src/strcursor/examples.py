"""
Example collection used by the demo and tests.

Four words of mixed length, so a "longer than 5" filter keeps two of them.
"""
from strcursor.collection import StringCollection


EXAMPLE_VALUES = ["hourglass", "cat", "manifestation", "city"]


def build_example_collection() -> StringCollection:
    collection = StringCollection()
    for value in EXAMPLE_VALUES:
        collection.add(value)
    return collection
