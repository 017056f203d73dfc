"""
Value resolution for queries.

Handles resolving a RawQuery pointer against a document into a ScalarValue.
"""

from __future__ import annotations

import json
from typing import Any

from ..dsl_nodes import ScalarValue
from ...pointer import resolve_pointer
from ..types import EvalResult, ReasonCode


def _dump(document: Any) -> str:
    return json.dumps(document, ensure_ascii=False, separators=(",", ":"))


def resolve_scalar(document: Any, pointer: str) -> ScalarValue | EvalResult:
    """
    Resolve a pointer to a ScalarValue.

    Args:
        document: Decoded JSON document
        pointer: JSON pointer to extract

    Returns:
        ScalarValue on success, or a failure EvalResult:
        INVALID_POINTER when nothing is addressed,
        INVALID_TARGET when the pointer addresses an array or object
    """
    try:
        target = resolve_pointer(document, pointer)
    except KeyError:
        return EvalResult.failure(
            ReasonCode.INVALID_POINTER,
            f"Invalid pointer (pointer: {pointer!r}, value: {_dump(document)})",
            pointer=pointer,
        )

    value = ScalarValue.from_json(target)
    if value is None:
        return EvalResult.failure(
            ReasonCode.INVALID_TARGET,
            f"Invalid target (pointer: {pointer!r}, value: {_dump(document)})",
            pointer=pointer,
        )
    return value
