import pytest

from schemascan.mssql import (
    DEFAULT_SCHEMA_NAME,
    convert_column_type,
    convert_system_named,
    convert_table_type,
    dictionary,
    fk_definition,
    key_definition,
    qualified_name,
)


@pytest.mark.parametrize(
    ("code", "expected"),
    [("U", "BASIC TABLE"), ("V", "VIEW"), ("U ", "BASIC TABLE"), (" V ", "VIEW")],
)
def test_convert_table_type_known(code, expected):
    assert convert_table_type(code) == expected


def test_convert_table_type_unknown_is_unchanged():
    assert convert_table_type("TT ") == "TT "


@pytest.mark.parametrize("type_name", ["varchar", "nvarchar", "varbinary"])
def test_convert_column_type_max(type_name):
    assert convert_column_type(type_name, -1) == f"{type_name}(MAX)"


@pytest.mark.parametrize("length", [1, 50, 8000])
def test_convert_column_type_byte_lengths(length):
    assert convert_column_type("varchar", length) == f"varchar({length})"
    assert convert_column_type("varbinary", length) == f"varbinary({length})"


@pytest.mark.parametrize("chars", [1, 25, 4000])
def test_convert_column_type_nvarchar_counts_characters(chars):
    assert convert_column_type("nvarchar", chars * 2) == f"nvarchar({chars})"


def test_convert_column_type_other_types_unchanged():
    assert convert_column_type("int", 4) == "int"
    assert convert_column_type("datetime2", 8) == "datetime2"


def test_convert_system_named_masks_suffix():
    name = "PK__users__3213E83F"
    result = convert_system_named(name, True)
    assert result.endswith("*")
    assert "3213E83F" not in result
    assert name.startswith(result[:-1])


def test_convert_system_named_keeps_user_names():
    assert convert_system_named("PK__users__3213E83F", False) == "PK__users__3213E83F"


def test_convert_system_named_without_underscore():
    assert convert_system_named("plain", True) == "plain"


def test_qualified_name_default_schema_is_omitted():
    assert qualified_name(DEFAULT_SCHEMA_NAME, "users") == "users"


def test_qualified_name_other_schema_is_prefixed():
    assert qualified_name("administrator", "blogs") == "administrator.blogs"


def test_key_definition_primary_key():
    assert key_definition("CLUSTERED", True, True, False, "id") == (
        "PRIMARY KEY",
        "CLUSTERED, unique, part of a PRIMARY KEY constraint, [ id ]",
    )


def test_key_definition_unique_constraint():
    constraint_type, definition = key_definition(
        "NONCLUSTERED", True, False, True, "a, b"
    )
    assert constraint_type == "UNIQUE"
    assert "part of a UNIQUE constraint" in definition
    assert definition.endswith("[ a, b ]")


def test_key_definition_plain_index_and_null_columns():
    constraint_type, definition = key_definition("HEAP", False, False, False, None)
    assert constraint_type == "-"
    assert definition == "HEAP, [  ]"


def test_fk_definition():
    assert fk_definition("user_id", "users", "id", "NO_ACTION", "CASCADE") == (
        "FOREIGN KEY(user_id) REFERENCES users(id) ON UPDATE NO_ACTION ON DELETE CASCADE"
    )


def test_dictionary_translates_functions():
    d = dictionary()
    assert d.lookup("Functions") == "Stored procedures and functions"
    assert d.lookup("Tables") == "Tables"