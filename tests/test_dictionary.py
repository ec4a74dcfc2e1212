import json

import pytest

from schemascan.dictionary import Dict


@pytest.mark.parametrize(
    ("entries", "want"),
    [
        ({"a": "1", "b": "1", "c": "1"}, 2),
        ({"b": "1", "c": "1", "d": "1"}, 3),
    ],
)
def test_delete(entries, want):
    d = Dict()
    for k, v in entries.items():
        d.store(k, v)
    d.delete("a")
    assert len(d.dump()) == want


@pytest.mark.parametrize(
    ("ain", "bin_", "want"),
    [
        ({"a": "1"}, {"b": "2"}, 2),
        ({"a": "1", "b": "1"}, {"b": "2"}, 2),
        ({"a": "1", "b": "1", "c": "1"}, {"b": "2"}, 3),
    ],
)
def test_merge(ain, bin_, want):
    a = Dict()
    b = Dict()
    for k, v in ain.items():
        a.store(k, v)
    for k, v in bin_.items():
        b.store(k, v)
    a.merge(b.dump())
    assert len(a.dump()) == want
    assert a.lookup("a") == "1"
    assert a.lookup("b") == "2"


@pytest.mark.parametrize(
    ("ain", "bin_", "want"),
    [
        ({"a": "1", "b": "1"}, {"b": "2"}, 2),
        ({"a": "1", "b": "1", "c": "1"}, {"b": "2"}, 3),
    ],
)
def test_merge_if_not_present(ain, bin_, want):
    a = Dict()
    b = Dict()
    for k, v in ain.items():
        a.store(k, v)
    for k, v in bin_.items():
        b.store(k, v)
    a.merge_if_not_present(b.dump())
    assert len(a.dump()) == want
    assert a.lookup("a") == "1"
    assert a.lookup("b") == "1"


def test_lookup_missing_returns_key():
    assert Dict().lookup("Columns") == "Columns"


def test_json_round_trip():
    a = Dict({"Column": "Attribute", "Indexes": "Secondary Indexes"})
    b = Dict()
    b.load_json(a.to_json())
    assert b.dump() == a.dump()
    assert json.loads(a.to_json()) == a.dump()


def test_yaml_round_trip():
    a = Dict({"Functions": "Stored procedures and functions"})
    b = Dict()
    b.load_yaml(a.to_yaml())
    assert b.dump() == a.dump()


def test_load_json_merges_into_existing():
    d = Dict({"a": "1"})
    d.load_json('{"b": "2"}')
    assert d.dump() == {"a": "1", "b": "2"}


def test_load_json_rejects_non_string_values():
    with pytest.raises(ValueError):
        Dict().load_json('{"a": 1}')


def test_load_yaml_rejects_list():
    with pytest.raises(ValueError):
        Dict().load_yaml("- a\n- b\n")


def test_items_snapshot():
    d = Dict({"x": "y"})
    assert d.items() == [("x", "y")]