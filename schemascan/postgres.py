"""Schema details specific to PostgreSQL and Amazon Redshift servers."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from schemascan.dictionary import Dict
from schemascan.mysql import Version, parse_version

TYPE_FK = "FOREIGN KEY"

_FK = re.compile(r"FOREIGN KEY \((.+)\) REFERENCES ([^\s\)]+)\s?\(([^\)]+)\)")
_VERSION = re.compile(r"([0-9]+(\.[0-9]+)*)")

_GENERATED_COLUMNS_SINCE = parse_version("12")

_CONSTRAINT_TYPES = {
    "p": "PRIMARY KEY",
    "u": "UNIQUE",
    "f": TYPE_FK,
    "c": "CHECK",
    "t": "TRIGGER",
}

_DRIVER_NAMES = {False: "postgres", True: "redshift"}


def parse_fk(definition: str) -> tuple[list[str], str, list[str]]:
    """Return (columns, parent table, parent columns) with double quotes removed."""
    match = _FK.search(definition)
    if match is None:
        raise ValueError(f"can not parse foreign key: {definition}")
    columns = [c.replace('"', "") for c in match.group(1).split(", ")]
    parent_table = match.group(2).replace('"', "")
    parent_columns = [c.replace('"', "") for c in match.group(3).split(", ")]
    return columns, parent_table, parent_columns


def detect_full_table_name(
    name: str, search_paths: Sequence[str], full_table_names: Iterable[str]
) -> str:
    """Resolve an unqualified table name to schema.table using the search path."""
    if "." in name:
        return name
    found = [
        full_name
        for full_name in full_table_names
        if full_name.endswith(name)
        for path in search_paths
        if full_name == f"{path}.{name}"
    ]
    if len(found) != 1:
        raise ValueError(f"can not detect table name: {name}")
    return found[0]


def convert_constraint_type(code: str) -> str:
    """Translate a pg_constraint.contype code into a readable type."""
    return _CONSTRAINT_TYPES.get(code, code)


def server_version(text: str) -> Version:
    """Extract the release number from the output of version()."""
    match = _VERSION.search(text)
    if match is None:
        raise ValueError(f"malformed version: {text}")
    return parse_version(match.group(1))


def supports_generated_columns(version_text: str) -> bool:
    """Whether the server has pg_attribute.attgenerated (PostgreSQL 12 and later)."""
    return not server_version(version_text) < _GENERATED_COLUMNS_SINCE


def array_remove_null(values: Iterable[str | None] | None) -> list[str]:
    """Drop the NULL entries of an aggregated array."""
    if values is None:
        return []
    return [value for value in values if value is not None]


def column_extra_definition(
    default_or_generated: str | None, attrgenerated: str | None
) -> tuple[str | None, str]:
    """Split a column's default expression from its generation expression.

    Returns (default, extra definition).
    """
    kind = attrgenerated or ""
    if kind == "":
        return default_or_generated, ""
    if kind == "s":
        return None, f"GENERATED ALWAYS AS {default_or_generated or ''} STORED"
    raise ValueError(f"unsupported pg_attribute.attrgenerated '{kind}'")


def view_definition(table_type: str, table_name: str, definition: str | None) -> str:
    """Wrap the body returned by pg_get_viewdef in a CREATE statement."""
    body = (definition or "").rstrip(";")
    return f"CREATE {table_type} {table_name} AS (\n{body}\n)"


def driver_name(redshift_mode: bool) -> str:
    """Name under which the driver reports itself for the given mode."""
    return _DRIVER_NAMES[bool(redshift_mode)]


def dictionary() -> Dict:
    return Dict({"Functions": "Stored procedures and functions"})