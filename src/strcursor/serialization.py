"""
Serialization helpers for string collections and predicate objects.

A collection is stored as {"values": [...]}. A predicate is stored as a
tagged dict such as {"type": "length_gt", "length": 5}, with composites
nesting their operands. Documents of the wrong shape raise TypeError.
Lambdas have no dict form and cannot be serialized.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from strcursor.collection import StringCollection
from strcursor.predicates import (
    StringPredicate,
    LengthGreaterThan,
    LengthLessThan,
    StartsWith,
    EndsWith,
    Contains,
    Not,
    AllOf,
    AnyOf,
)


def predicate_to_dict(p: StringPredicate) -> Dict[str, Any]:
    if isinstance(p, LengthGreaterThan):
        return {"type": "length_gt", "length": p.length}
    if isinstance(p, LengthLessThan):
        return {"type": "length_lt", "length": p.length}
    if isinstance(p, StartsWith):
        return {"type": "starts_with", "prefix": p.prefix}
    if isinstance(p, EndsWith):
        return {"type": "ends_with", "suffix": p.suffix}
    if isinstance(p, Contains):
        return {"type": "contains", "substring": p.substring}
    if isinstance(p, Not):
        return {"type": "not", "operand": predicate_to_dict(p.operand)}
    if isinstance(p, AllOf):
        return {"type": "all", "operands": [predicate_to_dict(o) for o in p.operands]}
    if isinstance(p, AnyOf):
        return {"type": "any", "operands": [predicate_to_dict(o) for o in p.operands]}
    raise TypeError(f"Unsupported predicate type: {type(p)}")


def _require_str(d: Dict[str, Any], key: str) -> str:
    value = d[key]
    if not isinstance(value, str):
        raise TypeError(f"Predicate field '{key}' must be a string, got {type(value).__name__}")
    return value


def _operands_from_dict(d: Dict[str, Any]) -> tuple:
    operands = d.get("operands", [])
    if not isinstance(operands, list):
        raise TypeError(f"Predicate field 'operands' must be a list, got {type(operands).__name__}")
    return tuple(predicate_from_dict(o) for o in operands)


def predicate_from_dict(d: Any) -> StringPredicate:
    if not isinstance(d, dict):
        raise TypeError(f"Unsupported predicate document: {type(d)}")
    t = d.get("type")
    if t == "length_gt":
        return LengthGreaterThan(int(d["length"]))
    if t == "length_lt":
        return LengthLessThan(int(d["length"]))
    if t == "starts_with":
        return StartsWith(_require_str(d, "prefix"))
    if t == "ends_with":
        return EndsWith(_require_str(d, "suffix"))
    if t == "contains":
        return Contains(_require_str(d, "substring"))
    if t == "not":
        return Not(predicate_from_dict(d["operand"]))
    if t == "all":
        return AllOf(_operands_from_dict(d))
    if t == "any":
        return AnyOf(_operands_from_dict(d))
    raise TypeError(f"Unsupported predicate dict type: {t}")


def collection_to_dict(c: StringCollection) -> Dict[str, Any]:
    return {"values": list(c.values)}


def collection_from_dict(d: Any) -> StringCollection:
    if not isinstance(d, dict):
        raise TypeError(f"Unsupported collection document: {type(d)}")
    values = d.get("values", [])
    if not isinstance(values, list):
        raise TypeError(f"Collection 'values' must be a list, got {type(values).__name__}")
    return StringCollection(values)


def collection_to_json(c: StringCollection) -> str:
    return json.dumps(collection_to_dict(c), sort_keys=True)


def collection_from_json(s: str) -> StringCollection:
    d = json.loads(s)
    return collection_from_dict(d)


def collection_to_yaml(c: StringCollection) -> str:
    return yaml.safe_dump(collection_to_dict(c))


def collection_from_yaml(s: str) -> StringCollection:
    d = yaml.safe_load(s)
    return collection_from_dict({} if d is None else d)
