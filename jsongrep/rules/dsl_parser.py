"""
DSL Parser: specification documents to node trees.

Parses query and sort documents (already decoded from JSON or YAML) into
immutable node types.

Query document:
```json
{"query": {"type": "and", "pair": [
    {"type": "raw", "pair": {"p": "/i", "cond": {"type": "gt", "value": {"type": "number", "value": 10}}}},
    {"type": "raw", "pair": {"p": "/s", "cond": {"type": "match", "value": {"type": "string", "value": "[sS]irius"}, "mtype": "regex"}}}
]}}
```

Sort document:
```json
{"sort": [{"p": "/i", "ord": "desc"}, {"p": "/s"}]}
```

Usage:
    query = parse_query(json.loads(text))
    criteria = parse_sort(json.loads(text))
    query = load_query_file("query.yml")
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from ..utils.logger import get_logger
from ..sort.sorter import SortCriterion, SortOrder
from .dsl_nodes import (
    ScalarValue,
    MatchType,
    Equal,
    GreaterThan,
    LessThan,
    Match,
    AllCond,
    AnyCond,
    NotCond,
    RawQuery,
    AllQuery,
    AnyQuery,
    NotQuery,
    Query,
    Condition,
    QueryCondition,
    VALUE_TYPES,
    CONDITION_TYPES,
    QUERY_TYPES,
    MATCH_TYPES,
    SORT_ORDERS,
    DEFAULT_SORT_ORDER,
)


logger = get_logger()

YAML_SUFFIXES = frozenset({".yml", ".yaml"})


class SpecError(ValueError):
    """
    A specification document is malformed.

    Attributes:
        path: Location of the offending element (e.g. "query.pair[1].cond")
    """

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


# =============================================================================
# Helpers
# =============================================================================

def _require_dict(data: Any, path: str) -> dict:
    if not isinstance(data, dict):
        raise SpecError(f"expected an object, got {type(data).__name__}", path)
    return data


def _require_key(data: dict, key: str, path: str) -> Any:
    if key not in data:
        raise SpecError(f"missing required key '{key}'", path)
    return data[key]


def _require_list(data: Any, path: str) -> list:
    if not isinstance(data, list):
        raise SpecError(f"expected a list, got {type(data).__name__}", path)
    return data


def _require_tag(data: dict, allowed: frozenset, path: str) -> str:
    tag = _require_key(data, "type", path)
    if not isinstance(tag, str) or tag not in allowed:
        raise SpecError(
            f"unknown type {tag!r}, expected one of {sorted(allowed)}", f"{path}.type"
        )
    return tag


# =============================================================================
# Values
# =============================================================================

def parse_value(data: Any, path: str = "value") -> ScalarValue:
    """
    Parse a Value document into a ScalarValue.

    Examples:
        {"type": "null"}                      -> Null
        {"type": "bool", "value": true}       -> Bool(True)
        {"type": "number", "value": 10}       -> Int(10)
        {"type": "number", "value": 1.5}      -> Float(1.5)
        {"type": "string", "value": "dwarf"}  -> String('dwarf')
    """
    data = _require_dict(data, path)
    tag = _require_tag(data, VALUE_TYPES, path)
    if tag == "null":
        return ScalarValue.null()

    raw = _require_key(data, "value", path)
    value_path = f"{path}.value"
    if tag == "bool":
        if not isinstance(raw, bool):
            raise SpecError(f"expected a boolean, got {type(raw).__name__}", value_path)
        return ScalarValue.from_literal(raw)
    if tag == "number":
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise SpecError(f"expected a number, got {type(raw).__name__}", value_path)
        return ScalarValue.from_literal(raw)
    if not isinstance(raw, str):
        raise SpecError(f"expected a string, got {type(raw).__name__}", value_path)
    return ScalarValue.from_literal(raw)


# =============================================================================
# Conditions
# =============================================================================

def parse_condition(data: Any, path: str = "cond") -> Condition:
    """
    Parse a Condition document.

    Comparison and match nodes carry a Value under "value"; boolean nodes
    carry a Condition ("not") or a list of Conditions ("and"/"or").
    Empty "and"/"or" lists are accepted and fail at evaluation time.
    """
    data = _require_dict(data, path)
    tag = _require_tag(data, CONDITION_TYPES, path)
    raw = _require_key(data, "value", path)
    value_path = f"{path}.value"

    if tag == "eq":
        return Equal(parse_value(raw, value_path))
    elif tag == "gt":
        return GreaterThan(parse_value(raw, value_path))
    elif tag == "lt":
        return LessThan(parse_value(raw, value_path))
    elif tag == "match":
        mtype = _require_key(data, "mtype", path)
        if not isinstance(mtype, str) or mtype not in MATCH_TYPES:
            raise SpecError(
                f"unknown match type {mtype!r}, expected one of {sorted(MATCH_TYPES)}",
                f"{path}.mtype",
            )
        return Match(parse_value(raw, value_path), MatchType(mtype))
    elif tag == "not":
        return NotCond(parse_condition(raw, value_path))

    children = tuple(
        parse_condition(child, f"{value_path}[{i}]")
        for i, child in enumerate(_require_list(raw, value_path))
    )
    if tag == "and":
        return AllCond(children)
    return AnyCond(children)


# =============================================================================
# Queries
# =============================================================================

def parse_query_condition(data: Any, path: str = "query") -> QueryCondition:
    """Parse a QueryCondition document (payload under "pair")."""
    data = _require_dict(data, path)
    tag = _require_tag(data, QUERY_TYPES, path)
    raw = _require_key(data, "pair", path)
    pair_path = f"{path}.pair"

    if tag == "raw":
        pair = _require_dict(raw, pair_path)
        pointer = _require_key(pair, "p", pair_path)
        if not isinstance(pointer, str):
            raise SpecError(
                f"pointer must be a string, got {type(pointer).__name__}", f"{pair_path}.p"
            )
        cond = parse_condition(_require_key(pair, "cond", pair_path), f"{pair_path}.cond")
        return RawQuery(pointer, cond)
    elif tag == "not":
        return NotQuery(parse_query_condition(raw, pair_path))

    children = tuple(
        parse_query_condition(child, f"{pair_path}[{i}]")
        for i, child in enumerate(_require_list(raw, pair_path))
    )
    if tag == "and":
        return AllQuery(children)
    return AnyQuery(children)


def parse_query(data: Any) -> Query:
    """Parse a query document: {"query": <QueryCondition>}."""
    data = _require_dict(data, "")
    return Query(parse_query_condition(_require_key(data, "query", ""), "query"))


# =============================================================================
# Sort
# =============================================================================

def parse_sort(data: Any) -> list[SortCriterion]:
    """
    Parse a sort document: {"sort": [{"p": <pointer>, "ord": "asc"|"desc"}, ...]}.

    "ord" may be omitted (or null) and defaults to ascending.
    """
    data = _require_dict(data, "")
    entries = _require_list(_require_key(data, "sort", ""), "sort")

    criteria = []
    for i, entry in enumerate(entries):
        entry_path = f"sort[{i}]"
        entry = _require_dict(entry, entry_path)
        pointer = _require_key(entry, "p", entry_path)
        if not isinstance(pointer, str):
            raise SpecError(
                f"pointer must be a string, got {type(pointer).__name__}", f"{entry_path}.p"
            )
        order = entry.get("ord")
        if order is None:
            order = DEFAULT_SORT_ORDER
        if not isinstance(order, str) or order not in SORT_ORDERS:
            raise SpecError(
                f"unknown order {order!r}, expected one of {sorted(SORT_ORDERS)}",
                f"{entry_path}.ord",
            )
        criteria.append(SortCriterion(pointer, SortOrder(order)))
    return criteria


# =============================================================================
# Text / File Loading
# =============================================================================

def _decode_text(text: str, source: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise SpecError(f"invalid JSON: {e}", source) from e


def _decode_file(path: str | Path) -> Any:
    """
    Read and decode a specification file.

    YAML for .yml/.yaml files, JSON otherwise.

    Raises:
        OSError: If the file cannot be read
        SpecError: If the content does not decode
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    logger.debug(f"Loaded specification file {path} ({len(text)} bytes)")

    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise SpecError(f"invalid YAML: {e}", str(path)) from e
    return _decode_text(text, str(path))


def load_query_text(text: str) -> Query:
    """Parse an inline JSON query document."""
    return parse_query(_decode_text(text, "raw_query"))


def load_query_file(path: str | Path) -> Query:
    """Read and parse a query document file (JSON or YAML)."""
    return parse_query(_decode_file(path))


def load_sort_text(text: str) -> list[SortCriterion]:
    """Parse an inline JSON sort document."""
    return parse_sort(_decode_text(text, "raw_sort"))


def load_sort_file(path: str | Path) -> list[SortCriterion]:
    """Read and parse a sort document file (JSON or YAML)."""
    return parse_sort(_decode_file(path))


__all__ = [
    "SpecError",
    "parse_value",
    "parse_condition",
    "parse_query_condition",
    "parse_query",
    "parse_sort",
    "load_query_text",
    "load_query_file",
    "load_sort_text",
    "load_sort_file",
]
