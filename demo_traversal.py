#!/usr/bin/env python3
"""
Demo: Sequential and filtered traversal of a string collection.

Usage:
    python demo_traversal.py              # built-in example collection
    python demo_traversal.py config.yaml  # values and filter from YAML
"""

import logging
import sys

from strcursor.collection import StringCollection
from strcursor.config import TraversalConfig, load_config
from strcursor.examples import build_example_collection
from strcursor.predicates import LengthGreaterThan


def main(argv):
    config = load_config(argv[1]) if len(argv) > 1 else TraversalConfig()

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if len(argv) > 1:
        collection = StringCollection(config.values)
    else:
        collection = build_example_collection()

    cursor = collection.create_cursor()
    print("Sequential traversal:")
    while cursor.has_more():
        print(cursor.next())

    if isinstance(config.predicate, LengthGreaterThan):
        label = f"length > {config.predicate.length}"
    else:
        label = repr(config.predicate)

    filtered = collection.create_filtered_cursor(config.predicate)
    print(f"Filtered traversal ({label}):")
    while filtered.has_more():
        print(filtered.next())


if __name__ == "__main__":
    main(sys.argv)
