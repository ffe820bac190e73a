import pytest

from array_sorter import ArraySorter, SortConfig, SortDirection
from array_sorter.core.models import KeySpec, ValueKind, classify_value


def test_default_direction_is_ascending():
    assert ArraySorter().direction is SortDirection.ASC
    assert not ArraySorter().keys


def test_config_object_applies_direction_and_keys():
    sorter = ArraySorter(SortConfig(direction=SortDirection.DESC, keys=("test", "keys")))
    assert sorter.direction is SortDirection.DESC
    assert sorter.keys.as_dict() == {0: ("test", "keys")}


def test_mapping_config_is_accepted():
    sorter = ArraySorter({"direction": "DESC", "keys": ["test.prop"], "unused": True})
    assert sorter.direction is SortDirection.DESC
    assert sorter.keys.as_dict() == {0: ("test",), 1: ("prop",)}


def test_empty_mapping_options_fall_back_to_defaults():
    config = SortConfig.from_mapping({"direction": None, "keys": []})
    assert config.direction is SortDirection.ASC
    assert config.keys == ()


def test_single_string_keys_is_one_path():
    assert SortConfig(keys="a.b").keys == ("a.b",)


def test_unsupported_config_type_raises():
    with pytest.raises(TypeError):
        ArraySorter(["id"])


def test_sort_keys_accumulate_per_depth():
    sorter = ArraySorter().add_sort_key("testProp").add_sort_key("anotherProp")
    assert sorter.keys.at(0) == ("testProp", "anotherProp")
    sorter.add_sort_key("testProp.child")
    assert sorter.keys.as_dict() == {0: ("testProp", "anotherProp"), 1: ("child",)}
    assert len(sorter.keys) == 2


def test_duplicate_keys_keep_first_position():
    key_spec = KeySpec()
    key_spec.add_path(("b",))
    key_spec.add_path(("a",))
    key_spec.add_path(("b",))
    assert key_spec.at(0) == ("b", "a")
    assert key_spec.at(3) == ()
    assert list(key_spec) == [(0, ("b", "a"))]
    assert len(key_spec) == 1


def test_set_direction_is_idempotent():
    sorter = ArraySorter()
    assert sorter.set_direction("desc") is sorter
    sorter.set_direction(SortDirection.DESC)
    assert sorter.direction is SortDirection.DESC


@pytest.mark.parametrize("value", ["up", "", 1, None])
def test_invalid_direction_raises(value):
    with pytest.raises(ValueError):
        SortDirection.parse(value)


@pytest.mark.parametrize(
    "value, kind",
    [
        ("x", ValueKind.STRING),
        (1, ValueKind.NUMBER),
        (1.5, ValueKind.NUMBER),
        ({}, ValueKind.RECORD),
        (True, ValueKind.UNSUPPORTED),
        (None, ValueKind.UNSUPPORTED),
        ([1], ValueKind.UNSUPPORTED),
    ],
)
def test_classify_value(value, kind):
    assert classify_value(value) is kind
