"""Collection-level rules, reported at the collection's own path."""

from __future__ import annotations

from collections.abc import Collection, Hashable, Iterable
from typing import Any

from vouch.constants.codes import DUPLICATE_ITEMS, TOO_FEW_ITEMS, TOO_MANY_ITEMS
from vouch.exceptions.rules import RuleConstructionError
from vouch.rules.rule import Rule


def _check_count(kind: str, name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise RuleConstructionError(kind, f"'{name}' must be a non-negative integer, got {value!r}")


def min_items(min: int) -> Rule[Collection[Any]]:
    _check_count("min_items", "min", min)
    return Rule.predicate(
        lambda value: len(value) >= min,
        kind="min_items",
        catch_type_errors=True,
        code=TOO_FEW_ITEMS,
        message=f"Must have at least {min} items",
        params={"min": min},
        meta={"min": min},
        details=lambda value: {"actual": len(value)},
    )


def max_items(max: int) -> Rule[Collection[Any]]:
    _check_count("max_items", "max", max)
    return Rule.predicate(
        lambda value: len(value) <= max,
        kind="max_items",
        catch_type_errors=True,
        code=TOO_MANY_ITEMS,
        message=f"Must have at most {max} items",
        params={"max": max},
        meta={"max": max},
        details=lambda value: {"actual": len(value)},
    )


def count_duplicates(items: Iterable[Any]) -> int:
    """Number of items equal to an earlier item.

    Hashable items use a set; unhashable ones (dicts, lists) fall back to an
    equality scan so mapping-shaped documents can be checked too.
    """
    seen: set[Hashable] = set()
    seen_unhashable: list[Any] = []
    duplicates = 0
    for item in items:
        if isinstance(item, Hashable):
            try:
                if item in seen:
                    duplicates += 1
                else:
                    seen.add(item)
                continue
            except TypeError:
                pass
        if item in seen_unhashable:
            duplicates += 1
        else:
            seen_unhashable.append(item)
    return duplicates


def unique() -> Rule[Collection[Any]]:
    def evaluate(value: Collection[Any]) -> bool:
        return count_duplicates(value) == 0

    rule: Rule[Collection[Any]] = Rule.predicate(
        evaluate,
        kind="unique",
        catch_type_errors=True,
        code=DUPLICATE_ITEMS,
        message="All items must be unique",
        details=lambda value: {"duplicates": count_duplicates(value)},
    )
    return rule
