from collections import OrderedDict

import pytest

from qolkit.mapping_ops import (
    add_or_insert,
    append_or_insert,
    insert_or_insert,
    push_or_insert,
)


def test_add_existing():
    specimen = {"a": 1}
    add_or_insert(specimen, "a", 3)
    assert specimen == {"a": 4}


def test_add_inserts_missing():
    specimen = {}
    add_or_insert(specimen, "a", 2)
    assert specimen == {"a": 2}


def test_add_puts_new_value_first():
    specimen = {"k": "x"}
    add_or_insert(specimen, "k", "y")
    assert specimen == {"k": "yx"}


def test_add_moves_entry_to_end():
    specimen = OrderedDict([("a", 1), ("b", 2)])
    add_or_insert(specimen, "a", 10)
    assert list(specimen.items()) == [("b", 2), ("a", 11)]


def test_push_existing():
    specimen = {"a": [1]}
    push_or_insert(specimen, "a", 2)
    assert specimen == {"a": [1, 2]}


def test_push_inserts_missing():
    specimen = {}
    push_or_insert(specimen, "a", 3)
    assert specimen == {"a": [3]}


def test_append_existing_drains_source():
    specimen = {"a": [1]}
    extra = [2, 3]
    append_or_insert(specimen, "a", extra)
    assert specimen == {"a": [1, 2, 3]}
    assert extra == []


def test_append_inserts_missing():
    specimen = {}
    extra = [4, 5]
    append_or_insert(specimen, "a", extra)
    assert specimen == {"a": [4, 5]}
    assert extra == []


def test_append_new_list_is_independent():
    specimen = {}
    extra = [1]
    append_or_insert(specimen, "a", extra)
    extra.append(9)
    assert specimen == {"a": [1]}


def test_insert_or_insert_existing():
    specimen = {"a": {1}}
    assert insert_or_insert(specimen, "a", 2) is True
    assert specimen == {"a": {1, 2}}


def test_insert_or_insert_missing():
    specimen = {}
    assert insert_or_insert(specimen, "a", 3) is True
    assert specimen == {"a": {3}}


def test_insert_or_insert_duplicate_reports_false():
    specimen = {"a": {1}}
    assert insert_or_insert(specimen, "a", 1) is False
    assert specimen == {"a": {1}}


@pytest.mark.parametrize("values", [[1, 2, 2, 3], [3, 3, 3]])
def test_insert_or_insert_collects_unique(values):
    specimen = {}
    for v in values:
        insert_or_insert(specimen, "k", v)
    assert specimen == {"k": set(values)}