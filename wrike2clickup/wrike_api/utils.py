"""Utility functions for reading loosely-typed export fields."""
from typing import Any, List


def is_id(value: Any) -> bool:
    """True for values usable as a Wrike ID (strings and integers)."""
    return isinstance(value, (str, int)) and not isinstance(value, bool)


def as_list(value: Any) -> List[Any]:
    """A list field as a list: None gives [], a lone value is wrapped."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]
