"""Structural equality of JSON trees."""

from __future__ import annotations

import sys
from typing import Optional

from jsontree.item import Item, JsonType

_COMPARABLE = frozenset(
    {
        JsonType.FALSE,
        JsonType.TRUE,
        JsonType.NULL,
        JsonType.NUMBER,
        JsonType.STRING,
        JsonType.RAW,
        JsonType.ARRAY,
        JsonType.OBJECT,
    }
)


def _close(a: float, b: float) -> bool:
    """True when two doubles differ by no more than one relative epsilon."""
    largest = max(abs(a), abs(b))
    return abs(a - b) <= largest * sys.float_info.epsilon


def _member(item: Item, name: Optional[str], case_sensitive: bool) -> Optional[Item]:
    if case_sensitive:
        return item.get_object_item_case_sensitive(name)
    return item.get_object_item(name)


def compare(a: Optional[Item], b: Optional[Item], case_sensitive: bool) -> bool:
    """Whether two items hold equal values.

    Missing or invalid items are never equal. Numbers are equal when they
    differ by at most a relative double epsilon; object keys are matched
    ignoring ASCII case unless ``case_sensitive`` is set.
    """
    pending = [(a, b)]
    while pending:
        left, right = pending.pop()
        if left is None or right is None or left.type != right.type:
            return False
        if left.type not in _COMPARABLE:
            return False
        if left is right:
            continue

        kind = left.type
        if kind in (JsonType.FALSE, JsonType.TRUE, JsonType.NULL):
            continue
        if kind == JsonType.NUMBER:
            if not _close(left.value_double, right.value_double):
                return False
            continue
        if kind in (JsonType.STRING, JsonType.RAW):
            if left.value_string is None or right.value_string is None:
                return False
            if left.value_string != right.value_string:
                return False
            continue
        if kind == JsonType.ARRAY:
            if len(left.children) != len(right.children):
                return False
            pending.extend(zip(left.children, right.children))
            continue

        # Objects: every key of each side must be found on the other.
        for element in left.children:
            match = _member(right, element.name, case_sensitive)
            if match is None:
                return False
            pending.append((element, match))
        for element in right.children:
            match = _member(left, element.name, case_sensitive)
            if match is None:
                return False
            pending.append((element, match))
    return True