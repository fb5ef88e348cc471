import logging

import pytest

from optgroups.exceptions import RegistrationError
from optgroups.parser import GroupTable, OptionGroup


def test_mapping_behaviour():
    foo, bar = OptionGroup("foo"), OptionGroup("bar")
    table = GroupTable({"foo": foo, "bar": bar})
    assert list(table) == ["foo", "bar"]
    assert len(table) == 2
    assert table["bar"] is bar
    assert table.get("baz") is None
    assert "foo" in table
    assert table.keys_text() == "foo, bar"


def test_keys_are_case_sensitive():
    table = GroupTable({"Foo": OptionGroup()})
    assert "foo" not in table


def test_is_read_only():
    table = GroupTable({"foo": OptionGroup()})
    with pytest.raises(TypeError):
        table["bar"] = OptionGroup()  # type: ignore[index]


def test_duplicate_keys_last_write_wins(caplog):
    first, second, other = OptionGroup("1"), OptionGroup("2"), OptionGroup("o")
    with caplog.at_level(logging.WARNING, logger="optgroups"):
        table = GroupTable.from_pairs(("a", first), ("b", other), ("a", second))
    assert table["a"] is second
    assert table.keys_text() == "a, b"
    assert "Group key 'a' supplied more than once" in caplog.text


def test_duplicate_keys_strict():
    with pytest.raises(RegistrationError):
        GroupTable.from_pairs(("a", OptionGroup()), ("a", OptionGroup()), strict=True)


def test_shared_group_instance_rejected():
    shared = OptionGroup()
    with pytest.raises(RegistrationError, match="share the same OptionGroup"):
        GroupTable({"a": shared, "b": shared})


@pytest.mark.parametrize(
    "choices",
    [
        {},
        {1: OptionGroup()},
        {"a": "not a group"},
    ],
)
def test_invalid_tables(choices):
    with pytest.raises(RegistrationError):
        GroupTable(choices)
