"""Category (group) management for income and expense lines.

Items are any records with a ``group`` attribute; they are returned as new
objects, the inputs are left untouched.
"""
from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def add_group(group_names: Sequence[str], name: str) -> List[str]:
    trimmed = name.strip()
    if not trimmed or trimmed in group_names:
        return list(group_names)
    return [*group_names, trimmed]


def rename_group(
    group_names: Sequence[str], items: Sequence[T], old_name: str, new_name: str
) -> Tuple[List[str], List[T]]:
    trimmed = new_name.strip()
    if not trimmed or trimmed == old_name or trimmed in group_names:
        return list(group_names), list(items)
    names = [trimmed if g == old_name else g for g in group_names]
    moved = [replace(item, group=trimmed) if item.group == old_name else item for item in items]
    return names, moved


def remove_group(group_names: Sequence[str], items: Sequence[T], name: str) -> Tuple[List[str], List[T]]:
    """Remove a group and move its members to the first remaining group.

    The last remaining group cannot be removed.
    """
    if len(group_names) <= 1 or name not in group_names:
        return list(group_names), list(items)
    remaining = [g for g in group_names if g != name]
    fallback = remaining[0]
    moved = [replace(item, group=fallback) if item.group == name else item for item in items]
    return remaining, moved
