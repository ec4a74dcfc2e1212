"""Schema details specific to Cloud Spanner."""

from __future__ import annotations

from collections.abc import Iterable


def convert_column_nullable(value: str) -> bool:
    return value != "NO"


def column_type_with_options(column_type: str, options: Iterable[tuple[str, str]]) -> str:
    """Append each column option to the type as " (NAME=value)"."""
    for name, value in options:
        column_type = f"{column_type} ({name}={value})"
    return column_type


def index_definition(
    name: str,
    table: str,
    columns: str,
    storing_columns: str = "",
    parent_table: str | None = None,
    is_unique: bool = False,
    is_null_filtered: bool = False,
) -> str:
    """Build the CREATE INDEX statement of a secondary index."""
    unique = "UNIQUE " if is_unique else ""
    null_filtered = "NULL_FILTERED " if is_null_filtered else ""
    storing = f" STORING ({storing_columns})" if storing_columns else ""
    interleave = f", INTERLEAVE IN {parent_table}" if parent_table else ""
    return (
        f"CREATE {unique}{null_filtered}INDEX {name} ON {table} ({columns})"
        f"{storing}{interleave}"
    )


def interleave_definition(parent_table: str, on_delete_action: str) -> str:
    return f"INTERLEAVE IN PARENT {parent_table} ON DELETE {on_delete_action}"