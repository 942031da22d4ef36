import math

import pytest

from jsontree.item import INT_MAX, INT_MIN, Item, JsonType


def _string(text):
    return Item(JsonType.STRING, value_string=text)


def _array(*texts):
    array = Item(JsonType.ARRAY)
    for text in texts:
        array.add_item_to_array(_string(text))
    return array


def _values(container):
    return [child.value_string for child in container]


def test_new_item_is_invalid_and_empty():
    item = Item()
    assert item.is_invalid()
    assert len(item) == 0
    assert list(item) == []


PREDICATES = {
    JsonType.FALSE: "is_false",
    JsonType.TRUE: "is_true",
    JsonType.NULL: "is_null",
    JsonType.NUMBER: "is_number",
    JsonType.STRING: "is_string",
    JsonType.ARRAY: "is_array",
    JsonType.OBJECT: "is_object",
    JsonType.RAW: "is_raw",
}


@pytest.mark.parametrize("kind", list(PREDICATES))
def test_exactly_one_type_predicate_holds(kind):
    item = Item(kind)
    results = {name: getattr(item, name)() for name in PREDICATES.values()}
    assert [name for name, hit in results.items() if hit] == [PREDICATES[kind]]
    assert not item.is_invalid()


def test_is_bool():
    assert Item(JsonType.TRUE).is_bool()
    assert Item(JsonType.FALSE).is_bool()
    assert not Item(JsonType.NULL).is_bool()


def test_string_value_only_for_strings():
    assert _string("hello").string_value() == "hello"
    assert Item(JsonType.RAW, value_string="[1]").string_value() is None


def test_number_value_is_nan_for_non_numbers():
    number = Item(JsonType.NUMBER)
    number.set_number_value(2.5)
    assert number.number_value() == 2.5
    assert math.isnan(_string("x").number_value())


def test_set_number_value_saturates():
    item = Item(JsonType.NUMBER)
    assert item.set_number_value(1e10) == 1e10
    assert item.value_int == INT_MAX
    assert item.value_double == 1e10
    item.set_number_value(-1e10)
    assert item.value_int == INT_MIN


def test_set_number_value_truncates():
    item = Item(JsonType.NUMBER)
    item.set_number_value(3.7)
    assert item.value_int == 3
    item.set_number_value(-3.7)
    assert item.value_int == -3


def test_set_value_string():
    item = _string("short")
    assert item.set_value_string("a much longer text") == "a much longer text"
    assert item.string_value() == "a much longer text"


def test_set_value_string_rejects_other_kinds_and_references():
    with pytest.raises(TypeError):
        Item(JsonType.NUMBER).set_value_string("x")
    with pytest.raises(TypeError):
        Item(JsonType.STRING, value_string="a", is_reference=True).set_value_string("b")


def test_set_bool_value():
    item = Item(JsonType.TRUE)
    assert item.set_bool_value(False) == JsonType.FALSE
    assert item.is_false()
    assert item.set_bool_value(True) == JsonType.TRUE
    number = Item(JsonType.NUMBER)
    assert number.set_bool_value(True) == JsonType.INVALID
    assert number.is_number()


def test_add_item_to_array_keeps_order():
    array = _array("a", "b", "c")
    assert len(array) == 3
    assert _values(array) == ["a", "b", "c"]
    assert array.get_array_item(1).value_string == "b"


def test_add_item_to_array_rejects_self_and_none():
    array = Item(JsonType.ARRAY)
    with pytest.raises(ValueError):
        array.add_item_to_array(array)
    with pytest.raises(ValueError):
        array.add_item_to_array(None)
    assert len(array) == 0


def test_get_array_item_out_of_range():
    array = _array("a")
    assert array.get_array_item(-1) is None
    assert array.get_array_item(1) is None


def test_object_lookup_ignores_ascii_case():
    obj = Item(JsonType.OBJECT)
    member = _string("v")
    obj.add_item_to_object("Key", member)
    assert member.name == "Key"
    assert obj.get_object_item("KEY") is member
    assert obj.get_object_item_case_sensitive("KEY") is None
    assert obj.get_object_item_case_sensitive("Key") is member


def test_case_folding_is_ascii_only():
    obj = Item(JsonType.OBJECT)
    obj.add_string("\u00c9", "v")
    assert obj.get_object_item("\u00e9") is None
    assert obj.get_object_item("\u00c9") is not None and obj.has_object_item("\u00c9")


def test_case_sensitive_lookup_stops_at_unnamed_member():
    obj = Item(JsonType.OBJECT)
    obj.add_item_to_array(_string("anonymous"))
    named = obj.add_string("k", "v")
    assert obj.get_object_item_case_sensitive("k") is None
    assert obj.get_object_item("k") is named


def test_has_object_item():
    obj = Item(JsonType.OBJECT)
    obj.add_null("present")
    assert obj.has_object_item("PRESENT")
    assert not obj.has_object_item("absent")


def test_reference_in_array_shares_members():
    original = _array("x")
    original.name = "orig"
    holder = Item(JsonType.ARRAY)
    holder.add_item_reference_to_array(original)
    reference = holder.get_array_item(0)
    assert reference is not original
    assert reference.is_reference
    assert reference.name is None
    assert reference.children is original.children
    assert original.name == "orig"


def test_reference_in_object_gets_key():
    original = _string("v")
    obj = Item(JsonType.OBJECT)
    obj.add_item_reference_to_object("ref", original)
    reference = obj.get_object_item("ref")
    assert reference.value_string == "v"
    assert reference.is_reference
    assert original.name is None


def test_detach_item_from_array():
    array = _array("a", "b", "c")
    detached = array.detach_item_from_array(1)
    assert detached.value_string == "b"
    assert _values(array) == ["a", "c"]
    assert array.detach_item_from_array(-1) is None
    assert array.detach_item_from_array(5) is None
    assert len(array) == 2


def test_delete_item_from_array():
    array = _array("a", "b")
    array.delete_item_from_array(0)
    assert _values(array) == ["b"]


def test_detach_item_that_is_not_a_member():
    array = _array("a")
    assert array.detach_item(_string("a")) is None
    assert len(array) == 1


def test_delete_item_from_object():
    obj = Item(JsonType.OBJECT)
    obj.add_string("one", "1")
    obj.add_string("two", "2")
    obj.delete_item_from_object("ONE")
    assert [child.name for child in obj] == ["two"]
    obj.delete_item_from_object("missing")
    assert len(obj) == 1
    obj.delete_item_from_object_case_sensitive("TWO")
    assert len(obj) == 1
    assert obj.detach_item_from_object_case_sensitive("two").value_string == "2"
    assert len(obj) == 0


def test_detach_item_from_object_returns_member():
    obj = Item(JsonType.OBJECT)
    member = obj.add_true("flag")
    assert obj.detach_item_from_object("Flag") is member
    assert not obj.has_object_item("flag")


def test_insert_item_in_array():
    array = _array("b")
    array.insert_item_in_array(0, _string("a"))
    array.insert_item_in_array(10, _string("c"))
    assert _values(array) == ["a", "b", "c"]
    with pytest.raises(IndexError):
        array.insert_item_in_array(-1, _string("z"))


def test_replace_item_in_array():
    array = _array("a", "b")
    replacement = _string("B")
    array.replace_item_in_array(1, replacement)
    assert array.get_array_item(1) is replacement
    assert _values(array) == ["a", "B"]
    with pytest.raises(IndexError):
        array.replace_item_in_array(-1, _string("z"))
    with pytest.raises(IndexError):
        array.replace_item_in_array(7, _string("z"))


def test_replace_item_with_itself_is_a_no_op():
    array = _array("a")
    member = array.get_array_item(0)
    array.replace_item(member, member)
    assert array.get_array_item(0) is member


def test_replace_item_in_empty_parent_raises():
    with pytest.raises(ValueError):
        Item(JsonType.ARRAY).replace_item(_string("a"), _string("b"))


def test_replace_item_in_object():
    obj = Item(JsonType.OBJECT)
    obj.add_string("key", "old")
    replacement = _string("new")
    obj.replace_item_in_object("KEY", replacement)
    assert replacement.name == "KEY"
    assert obj.get_object_item("key") is replacement
    assert len(obj) == 1
    with pytest.raises(KeyError):
        obj.replace_item_in_object_case_sensitive("key", _string("x"))


def test_add_helpers_create_named_members():
    obj = Item(JsonType.OBJECT)
    assert obj.add_null("n").is_null()
    assert obj.add_true("t").is_true()
    assert obj.add_false("f").is_false()
    assert obj.add_bool("b", True).is_true()
    assert obj.add_number("num", 1.5).number_value() == 1.5
    assert obj.add_string("s", "text").string_value() == "text"
    assert obj.add_raw("r", "[1,2]").is_raw()
    assert obj.add_object("o").is_object()
    assert obj.add_array("a").is_array()
    assert [child.name for child in obj] == ["n", "t", "f", "b", "num", "s", "r", "o", "a"]


def test_add_string_rejects_none():
    obj = Item(JsonType.OBJECT)
    with pytest.raises(ValueError):
        obj.add_string("s", None)
    assert len(obj) == 0


def test_add_string_or_null():
    obj = Item(JsonType.OBJECT)
    assert obj.add_string_or_null("missing", None).is_null()
    empty = obj.add_string_or_null("empty", "")
    assert empty.is_string()
    assert empty.string_value() == ""


def test_duplicate_recursive_is_independent():
    original = Item(JsonType.OBJECT, name="root")
    inner = original.add_array("list")
    inner.add_item_to_array(_string("x"))
    copy = original.duplicate(True)
    assert copy is not original
    assert copy.name == "root"
    copied_inner = copy.get_object_item("list")
    assert copied_inner is not inner
    assert _values(copied_inner) == ["x"]
    copied_inner.add_item_to_array(_string("y"))
    assert len(inner) == 1


def test_duplicate_shallow_and_clears_reference():
    original = Item(JsonType.ARRAY, is_reference=True)
    original.add_item_to_array(_string("x"))
    copy = original.duplicate(False)
    assert copy.is_array()
    assert len(copy) == 0
    assert not copy.is_reference