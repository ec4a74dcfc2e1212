"""Schema details specific to Microsoft SQL Server."""

from __future__ import annotations

import re

from schemascan.dictionary import Dict
from schemascan.postgres import TYPE_FK

DEFAULT_SCHEMA_NAME = "dbo"
TYPE_CHECK = "CHECK"

_SYSTEM_NAMED_SUFFIX = re.compile(r"_[^_]+$")

_TABLE_TYPES = {"U": "BASIC TABLE", "V": "VIEW"}
_SIZED_TYPES = frozenset({"varchar", "nvarchar", "varbinary"})

__all__ = [
    "DEFAULT_SCHEMA_NAME",
    "TYPE_CHECK",
    "TYPE_FK",
    "convert_column_type",
    "convert_system_named",
    "convert_table_type",
    "dictionary",
    "fk_definition",
    "key_definition",
    "qualified_name",
]


def convert_table_type(code: str) -> str:
    """Translate a sys.objects type code into a readable table type."""
    return _TABLE_TYPES.get(code.strip(" "), code)


def _halved(length: int) -> int:
    quotient = abs(length) // 2
    return quotient if length >= 0 else -quotient


def convert_column_type(type_name: str, max_length: int) -> str:
    """Attach the length to variable-length types; -1 means MAX.

    nvarchar lengths are stored in bytes and are reported in characters.
    """
    if type_name not in _SIZED_TYPES:
        return type_name
    if max_length == -1:
        size = "MAX"
    elif type_name == "nvarchar":
        size = str(_halved(max_length))
    else:
        size = str(max_length)
    return f"{type_name}({size})"


def convert_system_named(name: str, is_system_named: bool) -> str:
    """Mask the generated suffix of a system-named object with "*"."""
    if is_system_named:
        return _SYSTEM_NAMED_SUFFIX.sub("*", name)
    return name


def qualified_name(schema_name: str, name: str) -> str:
    """Name an object, prefixing the schema unless it is the default one."""
    if schema_name == DEFAULT_SCHEMA_NAME:
        return name
    return f"{schema_name}.{name}"


def key_definition(
    cluster_type: str,
    is_unique: bool,
    is_primary_key: bool,
    is_unique_constraint: bool,
    columns: str | None,
) -> tuple[str, str]:
    """Describe a key constraint or index.

    Returns (constraint type, definition); the type is "-" for plain indexes.
    """
    constraint_type = "-"
    parts = [cluster_type]
    if is_unique:
        parts.append("unique")
    if is_primary_key:
        constraint_type = "PRIMARY KEY"
        parts.append("part of a PRIMARY KEY constraint")
    if is_unique_constraint:
        constraint_type = "UNIQUE"
        parts.append("part of a UNIQUE constraint")
    parts.append(f"[ {columns or ''} ]")
    return constraint_type, ", ".join(parts)


def fk_definition(
    columns: str,
    parent_table: str,
    parent_columns: str,
    on_update: str,
    on_delete: str,
) -> str:
    return (
        f"FOREIGN KEY({columns}) REFERENCES {parent_table}({parent_columns}) "
        f"ON UPDATE {on_update} ON DELETE {on_delete}"
    )


def dictionary() -> Dict:
    return Dict({"Functions": "Stored procedures and functions"})