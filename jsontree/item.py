"""JSON tree nodes and the operations that build, query and edit them."""

from __future__ import annotations

import math
import string
from dataclasses import dataclass, field
from enum import IntFlag
from typing import Iterator, Optional

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class JsonType(IntFlag):
    """Kind of value held by an :class:`Item`."""

    INVALID = 0
    FALSE = 1 << 0
    TRUE = 1 << 1
    NULL = 1 << 2
    NUMBER = 1 << 3
    STRING = 1 << 4
    ARRAY = 1 << 5
    OBJECT = 1 << 6
    RAW = 1 << 7


def _fold(name: str) -> str:
    """Lower-case ASCII letters only, leaving other characters alone."""
    return name.translate(_ASCII_FOLD)


def _saturated_int(number: float) -> int:
    if math.isnan(number):
        return 0
    if number >= INT_MAX:
        return INT_MAX
    if number <= INT_MIN:
        return INT_MIN
    return int(number)


@dataclass(eq=False)
class Item:
    """One node of a JSON tree.

    Arrays and objects keep their members in ``children``; members of an
    object carry their key in ``name``. Items compare by identity.
    """

    type: JsonType = JsonType.INVALID
    value_string: Optional[str] = None
    value_double: float = 0.0
    value_int: int = 0
    name: Optional[str] = None
    children: list[Item] = field(default_factory=list)
    is_reference: bool = False

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.children)

    # -- type checks -------------------------------------------------------

    def is_invalid(self) -> bool:
        return self.type == JsonType.INVALID

    def is_false(self) -> bool:
        return self.type == JsonType.FALSE

    def is_true(self) -> bool:
        return self.type == JsonType.TRUE

    def is_bool(self) -> bool:
        return bool(self.type & (JsonType.TRUE | JsonType.FALSE))

    def is_null(self) -> bool:
        return self.type == JsonType.NULL

    def is_number(self) -> bool:
        return self.type == JsonType.NUMBER

    def is_string(self) -> bool:
        return self.type == JsonType.STRING

    def is_array(self) -> bool:
        return self.type == JsonType.ARRAY

    def is_object(self) -> bool:
        return self.type == JsonType.OBJECT

    def is_raw(self) -> bool:
        return self.type == JsonType.RAW

    # -- values ------------------------------------------------------------

    def string_value(self) -> Optional[str]:
        """The text of a string item, or None for any other kind."""
        return self.value_string if self.is_string() else None

    def number_value(self) -> float:
        """The value of a number item, or NaN for any other kind."""
        return self.value_double if self.is_number() else math.nan

    def set_number_value(self, number: float) -> float:
        """Store a number; the integer view saturates at the int32 limits."""
        number = float(number)
        self.value_int = _saturated_int(number)
        self.value_double = number
        return number

    def set_value_string(self, value: str) -> str:
        """Replace the text of a string item that is not a reference."""
        if not (self.type & JsonType.STRING) or self.is_reference:
            raise TypeError("only a string item that is not a reference can take a new value")
        if value is None:
            raise TypeError("value must be a string")
        self.value_string = value
        return value

    def set_bool_value(self, value: bool) -> JsonType:
        """Flip a boolean item; returns the new type, or INVALID if not a boolean."""
        if not self.type & (JsonType.FALSE | JsonType.TRUE):
            return JsonType.INVALID
        kept = self.type & ~(JsonType.FALSE | JsonType.TRUE)
        self.type = JsonType(kept | (JsonType.TRUE if value else JsonType.FALSE))
        return self.type

    # -- lookup ------------------------------------------------------------

    def get_array_item(self, index: int) -> Optional[Item]:
        if index < 0 or index >= len(self.children):
            return None
        return self.children[index]

    def _lookup(self, name: Optional[str], case_sensitive: bool) -> Optional[Item]:
        if name is None:
            return None
        if case_sensitive:
            for child in self.children:
                if child.name is None:
                    return None
                if child.name == name:
                    return child
            return None
        wanted = _fold(name)
        for child in self.children:
            if child.name is not None and _fold(child.name) == wanted:
                return child
        return None

    def get_object_item(self, name: str) -> Optional[Item]:
        """Member with the given key, ignoring ASCII case."""
        return self._lookup(name, case_sensitive=False)

    def get_object_item_case_sensitive(self, name: str) -> Optional[Item]:
        return self._lookup(name, case_sensitive=True)

    def has_object_item(self, name: str) -> bool:
        return self.get_object_item(name) is not None

    def _position(self, item: Optional[Item]) -> Optional[int]:
        if item is None:
            return None
        for position, child in enumerate(self.children):
            if child is item:
                return position
        return None

    # -- adding ------------------------------------------------------------

    def add_item_to_array(self, item: Item) -> None:
        if item is None or item is self:
            raise ValueError("cannot add this item")
        self.children.append(item)

    def add_item_to_object(self, name: str, item: Item) -> None:
        if name is None or item is None or item is self:
            raise ValueError("cannot add this item")
        item.name = name
        self.children.append(item)

    @staticmethod
    def _reference_to(item: Item) -> Item:
        if item is None:
            raise ValueError("cannot reference a missing item")
        return Item(
            type=item.type,
            value_string=item.value_string,
            value_double=item.value_double,
            value_int=item.value_int,
            name=None,
            children=item.children,
            is_reference=True,
        )

    def add_item_reference_to_array(self, item: Item) -> None:
        """Append a reference that shares the item's value and members."""
        self.add_item_to_array(self._reference_to(item))

    def add_item_reference_to_object(self, name: str, item: Item) -> None:
        if name is None:
            raise ValueError("a key is required")
        self.add_item_to_object(name, self._reference_to(item))

    # -- removing ----------------------------------------------------------

    def detach_item(self, item: Item) -> Optional[Item]:
        """Remove the given member and return it; None if it is not a member."""
        position = self._position(item)
        if position is None:
            return None
        return self.children.pop(position)

    def detach_item_from_array(self, which: int) -> Optional[Item]:
        if which < 0:
            return None
        return self.detach_item(self.get_array_item(which))

    def delete_item_from_array(self, which: int) -> None:
        self.detach_item_from_array(which)

    def detach_item_from_object(self, name: str) -> Optional[Item]:
        return self.detach_item(self.get_object_item(name))

    def detach_item_from_object_case_sensitive(self, name: str) -> Optional[Item]:
        return self.detach_item(self.get_object_item_case_sensitive(name))

    def delete_item_from_object(self, name: str) -> None:
        self.detach_item_from_object(name)

    def delete_item_from_object_case_sensitive(self, name: str) -> None:
        self.detach_item_from_object_case_sensitive(name)

    # -- updating ----------------------------------------------------------

    def insert_item_in_array(self, which: int, item: Item) -> None:
        """Insert before position ``which``; past the end it appends."""
        if which < 0:
            raise IndexError("position must not be negative")
        if which >= len(self.children):
            self.add_item_to_array(item)
            return
        if item is None or item is self:
            raise ValueError("cannot insert this item")
        self.children.insert(which, item)

    def replace_item(self, item: Item, replacement: Item) -> None:
        """Put ``replacement`` where member ``item`` stands."""
        if not self.children or replacement is None or item is None:
            raise ValueError("nothing to replace")
        if replacement is item:
            return
        position = self._position(item)
        if position is None:
            raise ValueError("item is not a member")
        self.children[position] = replacement

    def replace_item_in_array(self, which: int, item: Item) -> None:
        if which < 0:
            raise IndexError("position must not be negative")
        target = self.get_array_item(which)
        if target is None:
            raise IndexError("position out of range")
        self.replace_item(target, item)

    def _replace_named(self, name: str, replacement: Item, case_sensitive: bool) -> None:
        if replacement is None or name is None:
            raise ValueError("a key and a replacement are required")
        replacement.name = name
        target = self._lookup(name, case_sensitive)
        if target is None:
            raise KeyError(name)
        self.replace_item(target, replacement)

    def replace_item_in_object(self, name: str, item: Item) -> None:
        self._replace_named(name, item, case_sensitive=False)

    def replace_item_in_object_case_sensitive(self, name: str, item: Item) -> None:
        self._replace_named(name, item, case_sensitive=True)

    # -- create-and-add helpers -------------------------------------------

    def _add_new(self, name: str, item: Item) -> Item:
        self.add_item_to_object(name, item)
        return item

    def add_null(self, name: str) -> Item:
        return self._add_new(name, Item(JsonType.NULL))

    def add_true(self, name: str) -> Item:
        return self._add_new(name, Item(JsonType.TRUE))

    def add_false(self, name: str) -> Item:
        return self._add_new(name, Item(JsonType.FALSE))

    def add_bool(self, name: str, boolean: bool) -> Item:
        return self._add_new(name, Item(JsonType.TRUE if boolean else JsonType.FALSE))

    def add_number(self, name: str, number: float) -> Item:
        item = Item(JsonType.NUMBER)
        item.set_number_value(number)
        return self._add_new(name, item)

    def add_string(self, name: str, string: str) -> Item:
        if string is None:
            raise ValueError("string must not be None")
        return self._add_new(name, Item(JsonType.STRING, value_string=string))

    def add_raw(self, name: str, raw: str) -> Item:
        if raw is None:
            raise ValueError("raw text must not be None")
        return self._add_new(name, Item(JsonType.RAW, value_string=raw))

    def add_object(self, name: str) -> Item:
        return self._add_new(name, Item(JsonType.OBJECT))

    def add_array(self, name: str) -> Item:
        return self._add_new(name, Item(JsonType.ARRAY))

    def add_string_or_null(self, name: str, string: Optional[str]) -> Item:
        """Add a string member, or a null member when ``string`` is None."""
        if string is not None:
            return self.add_string(name, string)
        return self.add_null(name)

    # -- copying -----------------------------------------------------------

    def duplicate(self, recurse: bool) -> Item:
        """A new item with the same value; members are copied when ``recurse``."""
        copy = Item(
            type=self.type,
            value_string=self.value_string,
            value_double=self.value_double,
            value_int=self.value_int,
            name=self.name,
        )
        if recurse:
            copy.children = [child.duplicate(True) for child in self.children]
        return copy