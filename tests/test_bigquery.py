from schemascan.bigquery import (
    Field,
    FlatColumn,
    dictionary,
    flatten_fields,
    labels,
    table_name,
)


def _schema():
    return [
        Field("id", "INTEGER", description="identifier", required=True),
        Field("info", "RECORD", fields=[Field("city", "STRING")]),
    ]


def test_flatten_nested_names():
    columns = flatten_fields(_schema())
    assert [c.name for c in columns] == ["id", "info", "info.city"]


def test_flatten_nullable_and_types():
    columns = flatten_fields(_schema())
    assert [c.nullable for c in columns] == [False, True, True]
    assert [c.type for c in columns] == ["INTEGER", "RECORD", "STRING"]
    assert columns[0] == FlatColumn("id", "INTEGER", "identifier", False)


def test_flatten_prefix_applied():
    columns = flatten_fields([Field("x", "STRING")], "p.")
    assert len(columns) == 1
    assert columns[0].name.startswith("p.")
    assert columns[0].name.endswith("x")


def test_flatten_empty():
    assert flatten_fields([]) == []


def test_labels_sorted():
    assert labels({"env": "prod", "app": "web"}) == ["app:web", "env:prod"]


def test_labels_empty():
    assert labels({}) == []


def test_table_name():
    assert table_name("proj:ds.events", "ds") == "events"


def test_table_name_without_dataset():
    assert table_name("proj:other.events", "ds") == ""


def test_dictionary():
    d = dictionary()
    assert d.lookup("Comment") == "Description"
    assert d.lookup("Columns") == "Columns"