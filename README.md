# jsontree

`jsontree` holds JSON values in memory as a tree of mutable `Item` nodes. You
can build a tree, query it, edit it in place, copy it, and compare two trees.

## Installation

```
pip install jsontree
```

## Items

Every node is a `jsontree.item.Item`. Its `type` is a `JsonType` flag:
`INVALID`, `FALSE`, `TRUE`, `NULL`, `NUMBER`, `STRING`, `ARRAY`, `OBJECT` or
`RAW`. Arrays and objects keep their members in `children`. Object members
carry their key in `name`. `len(item)` counts the members and iterating an
item yields them. Items compare by identity.

Each kind has a type check: `is_null()`, `is_bool()`, `is_number()`,
`is_string()`, `is_array()`, `is_object()`, `is_raw()` and so on.
`string_value()` returns the text of a string item and `None` for any other
kind. `number_value()` returns the value of a number item and NaN for any
other kind.

`set_number_value(n)` stores `n` as a float in `value_double`. It also stores
an integer view in `value_int`, clamped to the 32-bit signed range.
`set_value_string(s)` raises `TypeError` on an item that is not a string, or
on one that is a reference. `set_bool_value(b)` switches a boolean item
between `TRUE` and `FALSE`. On any other item it returns `JsonType.INVALID`
and changes nothing.

## Building documents

```python
from jsontree.factory import create_object, create_int_array, create_string

root = create_object()
root.add_string("name", "Jack")
root.add_number("age", 27)
root.add_bool("admin", False)
root.add_string_or_null("nickname", None)   # adds a null member
root.add_item_to_object("scores", create_int_array([1, 2, 3]))

tags = root.add_array("tags")
tags.add_item_to_array(create_string("x"))
```

`jsontree.factory` has a constructor for each kind:
- `create_null`, `create_true`, `create_false`, `create_bool`
- `create_number`, `create_string`, `create_raw`
- `create_array`, `create_object`

It also builds arrays from a sequence: `create_int_array`,
`create_float_array` (each value is first narrowed to single precision),
`create_double_array` and `create_string_array`.

Three constructors return items marked as references:
- `create_string_reference` builds a string whose text cannot be reassigned.
- `create_object_reference` and `create_array_reference` share the member
  list they are given; when it is already a list, the same list object is
  used.

`version()` returns `"1.7.16"`.

## Querying and editing

```python
root.get_object_item("NAME").string_value()         # "Jack": keys match ignoring ASCII case
root.get_object_item_case_sensitive("NAME")         # None
root.has_object_item("age")                         # True
root.get_object_item("scores").get_array_item(1).number_value()   # 2.0
```

Editing methods:
- `insert_item_in_array(i, item)` inserts before position `i`. A position past
  the end appends; a negative one raises `IndexError`.
- `replace_item_in_array`, `replace_item_in_object` and
  `replace_item_in_object_case_sensitive` put a new item in place of an old
  one. They raise `IndexError` or `KeyError` when there is nothing at that
  position or key.
- `replace_item(item, replacement)` replaces a given member.
- `detach_item_from_array`, `detach_item_from_object` and `detach_item`
  remove a member and return it, or return `None` when there is no such
  member.
- `delete_item_from_array` and `delete_item_from_object` remove a member and
  discard it.
- `add_item_reference_to_array` and `add_item_reference_to_object` add a new
  item that shares the value and the member list of an existing one.
- `duplicate(recurse)` copies an item. With `recurse` set it copies all
  members as well. The copy is never a reference.

## Comparing

```python
from jsontree.compare import compare
from jsontree.factory import create_double_array

compare(create_double_array([1, 2]), create_double_array([1.0, 2.0]), True)   # True
```

Two numbers are equal when they differ by at most one relative double
epsilon. Object members are matched by key whatever their order, ignoring
ASCII case unless `case_sensitive` is true. A missing or `INVALID` item is
never equal to anything.

## What this package does not do

`jsontree` only works with trees in memory. It does not read JSON text into a
tree, write a tree out as JSON text, or strip whitespace and comments from JSON
text. It has no command-line tool.