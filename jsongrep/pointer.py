"""
JSON pointer resolution (RFC 6901).

Shared by the query evaluator (scalar extraction) and the sorter
(sort key extraction). Resolution is read-only; the document is never copied.
"""

from __future__ import annotations

from typing import Any


def split_pointer(pointer: str) -> list[str]:
    """
    Split a pointer into unescaped reference tokens.

    Args:
        pointer: JSON pointer ("" addresses the whole document)

    Returns:
        List of tokens, empty for the root pointer

    Raises:
        KeyError: If the pointer is neither empty nor starts with "/"
    """
    if pointer == "":
        return []
    if not pointer.startswith("/"):
        raise KeyError(pointer)
    return [
        token.replace("~1", "/").replace("~0", "~")
        for token in pointer[1:].split("/")
    ]


def _parse_index(token: str) -> int | None:
    """Parse an array index token; signs and leading zeros are rejected."""
    if not token or not token.isascii() or not token.isdigit():
        return None
    if token.startswith("0") and len(token) != 1:
        return None
    return int(token)


def resolve_pointer(document: Any, pointer: str) -> Any:
    """
    Resolve a JSON pointer against a decoded JSON document.

    Args:
        document: Decoded JSON value (dict, list, str, int, float, bool, None)
        pointer: JSON pointer string

    Returns:
        The addressed value

    Raises:
        KeyError: If the pointer has no target in the document
    """
    target = document
    for token in split_pointer(pointer):
        if isinstance(target, dict):
            if token not in target:
                raise KeyError(pointer)
            target = target[token]
        elif isinstance(target, list):
            index = _parse_index(token)
            if index is None or index >= len(target):
                raise KeyError(pointer)
            target = target[index]
        else:
            raise KeyError(pointer)
    return target
