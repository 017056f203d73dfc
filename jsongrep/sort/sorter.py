"""
Multi-key ordering engine.

Buffers documents, extracts one SortableValue per declared criterion,
and produces the permutation of original positions after sorting.

Key priority follows sequential stable sorting: one stable pass per
criterion in declaration order, so the LAST declared criterion is the
primary key and the first is the weakest tie-breaker.

Usage:
    sorter = Sorter([SortCriterion("/i", SortOrder.DESC)])
    for document in documents:
        sorter.add(document)
    order = sorter.sorted_indexes()
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from ..pointer import resolve_pointer
from ..utils.logger import get_logger
from .values import SortableValue, compare_values


logger = get_logger()

_sort_key = functools.cmp_to_key(compare_values)


class SortOrder(str, Enum):
    """Direction of one sort criterion."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortCriterion:
    """
    One declared sort key.

    Attributes:
        pointer: JSON pointer to the key in each document
        order: ASC (default) or DESC
    """
    pointer: str
    order: SortOrder = SortOrder.ASC

    def __repr__(self) -> str:
        return f"Sort({self.pointer!r}, {self.order.value})"


@dataclass
class _Slot:
    """One buffered document: its arrival index and one key per criterion."""
    index: int
    keys: tuple[SortableValue, ...]


class Sorter:
    """
    Collects documents and orders their arrival indexes.

    Attributes:
        criteria: Declared criteria, in declaration order
    """

    def __init__(self, criteria: Iterable[SortCriterion] = ()):
        self.criteria: tuple[SortCriterion, ...] = tuple(criteria)
        self._slots: list[_Slot] = []

    def _extract(self, document: Any, pointer: str) -> SortableValue:
        try:
            return SortableValue.from_json(resolve_pointer(document, pointer))
        except KeyError:
            # Unresolvable pointer sorts as null
            return SortableValue.null()

    def add(self, document: Any) -> int:
        """
        Buffer a document.

        Returns:
            The 0-based arrival index assigned to the document
        """
        index = len(self._slots)
        keys = tuple(self._extract(document, c.pointer) for c in self.criteria)
        self._slots.append(_Slot(index, keys))
        return index

    def sorted_indexes(self) -> list[int]:
        """
        Return the arrival indexes in sorted order.

        With no criteria, arrival order is returned unchanged.
        """
        slots = list(self._slots)
        for position, criterion in enumerate(self.criteria):
            logger.debug(
                f"Sort pass {position + 1}/{len(self.criteria)}: "
                f"{criterion.pointer} {criterion.order.value}"
            )
            # list.sort stays stable with reverse=True
            slots.sort(
                key=lambda slot: _sort_key(slot.keys[position]),
                reverse=criterion.order == SortOrder.DESC,
            )
        return [slot.index for slot in slots]

    def __len__(self) -> int:
        return len(self._slots)


def build_sorter(source: Iterable[SortCriterion] | dict) -> Sorter:
    """
    Create a Sorter from criteria or from a sort document.

    Args:
        source: Iterable of SortCriterion, or a decoded sort document
                ({"sort": [{"p": ..., "ord": ...}, ...]})

    Raises:
        SpecError: If a sort document is malformed
    """
    if isinstance(source, dict):
        from ..rules.dsl_parser import parse_sort
        return Sorter(parse_sort(source))
    return Sorter(source)


__all__ = [
    "SortOrder",
    "SortCriterion",
    "Sorter",
    "build_sorter",
]
