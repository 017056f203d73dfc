"""
Ordering engine for buffered records.

- values.py: SortableValue comparison keys
- sorter.py: SortCriterion, Sorter and build_sorter()
"""

from .values import SortKind, SortableValue, compare_values
from .sorter import SortOrder, SortCriterion, Sorter, build_sorter

__all__ = [
    "SortKind",
    "SortableValue",
    "compare_values",
    "SortOrder",
    "SortCriterion",
    "Sorter",
    "build_sorter",
]
