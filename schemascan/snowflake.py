"""Schema details specific to Snowflake."""

from __future__ import annotations

_DDL_OBJECT_TYPES = {"BASE TABLE": "table", "VIEW": "view"}


def convert_column_nullable(value: str) -> bool:
    return value != "NO"


def ddl_object_type(table_type: str) -> str | None:
    """The GET_DDL object type for a table type, or None when it has no DDL."""
    return _DDL_OBJECT_TYPES.get(table_type)