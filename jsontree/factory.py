"""Constructors for every kind of JSON tree item."""

from __future__ import annotations

import struct
from typing import Iterable, Optional

from jsontree.item import Item, JsonType

VERSION_MAJOR = 1
VERSION_MINOR = 7
VERSION_PATCH = 16


def version() -> str:
    """The library version as ``major.minor.patch``."""
    return f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"


def create_null() -> Item:
    return Item(JsonType.NULL)


def create_true() -> Item:
    return Item(JsonType.TRUE)


def create_false() -> Item:
    return Item(JsonType.FALSE)


def create_bool(boolean: bool) -> Item:
    return Item(JsonType.TRUE if boolean else JsonType.FALSE)


def create_number(num: float) -> Item:
    """A number item; its integer view saturates at the int32 limits."""
    item = Item(JsonType.NUMBER)
    item.set_number_value(num)
    return item


def create_string(string: str) -> Item:
    if string is None:
        raise ValueError("string must not be None")
    return Item(JsonType.STRING, value_string=string)


def create_raw(raw: str) -> Item:
    """An item whose text is emitted verbatim when printed."""
    if raw is None:
        raise ValueError("raw text must not be None")
    return Item(JsonType.RAW, value_string=raw)


def create_array() -> Item:
    return Item(JsonType.ARRAY)


def create_object() -> Item:
    return Item(JsonType.OBJECT)


def create_string_reference(string: Optional[str]) -> Item:
    """A string item marked as a reference, whose text cannot be reassigned."""
    return Item(JsonType.STRING, value_string=string, is_reference=True)


def _shared_members(children: Optional[Iterable[Item]]) -> list[Item]:
    if children is None:
        return []
    if isinstance(children, list):
        return children
    return list(children)


def create_object_reference(children: Optional[Iterable[Item]]) -> Item:
    """An object item that shares the given member list rather than owning a copy."""
    return Item(JsonType.OBJECT, children=_shared_members(children), is_reference=True)


def create_array_reference(children: Optional[Iterable[Item]]) -> Item:
    """An array item that shares the given member list rather than owning a copy."""
    return Item(JsonType.ARRAY, children=_shared_members(children), is_reference=True)


def _number_array(numbers: Optional[Iterable[float]]) -> Item:
    if numbers is None:
        raise ValueError("numbers must not be None")
    array = create_array()
    array.children = [create_number(number) for number in numbers]
    return array


def _single_precision(number: float) -> float:
    return struct.unpack("<f", struct.pack("<f", float(number)))[0]


def create_int_array(numbers: Iterable[int]) -> Item:
    return _number_array(numbers)


def create_float_array(numbers: Iterable[float]) -> Item:
    """An array of numbers, each first narrowed to single precision."""
    if numbers is None:
        raise ValueError("numbers must not be None")
    return _number_array(_single_precision(number) for number in numbers)


def create_double_array(numbers: Iterable[float]) -> Item:
    return _number_array(numbers)


def create_string_array(strings: Iterable[str]) -> Item:
    if strings is None:
        raise ValueError("strings must not be None")
    array = create_array()
    array.children = [create_string(string) for string in strings]
    return array