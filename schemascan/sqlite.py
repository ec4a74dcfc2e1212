"""Schema details specific to SQLite databases."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from schemascan.mysql import parse_fk as _parse_fk

_FTS = re.compile(r"USING\s+fts([34])", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")

_SEPARATOR = "__SEP__"
_SPACE = "__SP__"

_FTS3_SHADOW_SUFFIXES = ("content", "segdir", "segments")
_FTS4_SHADOW_SUFFIXES = ("stat", "docsize")


@dataclass
class CheckConstraint:
    """A CHECK constraint found in a CREATE TABLE statement."""

    definition: str
    table: str
    columns: list[str] = field(default_factory=list)
    name: str = "-"
    type: str = "CHECK"


@dataclass
class ForeignKey:
    """One foreign key, gathered from the rows of PRAGMA foreign_key_list."""

    id: str
    foreign_table_name: str
    column_names: list[str] = field(default_factory=list)
    foreign_column_names: list[str] = field(default_factory=list)
    on_update: str = ""
    on_delete: str = ""
    match: str = ""

    @property
    def name(self) -> str:
        return f"- (Foreign key ID: {self.id})"

    def definition(self) -> str:
        return (
            f"FOREIGN KEY ({', '.join(self.column_names)}) "
            f"REFERENCES {self.foreign_table_name} ({', '.join(self.foreign_column_names)}) "
            f"ON UPDATE {self.on_update} ON DELETE {self.on_delete} MATCH {self.match}"
        )


def convert_column_nullable(value: object) -> bool:
    """PRAGMA table_info reports notnull as 1 for NOT NULL columns."""
    return str(value) != "1"


def _tokenize(sql: str) -> list[str]:
    text = _WHITESPACE.sub(" ", sql)
    text = text.replace(" ", f"{_SEPARATOR}{_SPACE}{_SEPARATOR}")
    for symbol in "(),":
        text = text.replace(symbol, f"{_SEPARATOR}{symbol}{_SEPARATOR}")
    return text.split(_SEPARATOR)


def parse_check_constraints(
    table_name: str, column_names: Sequence[str], sql: str
) -> list[CheckConstraint]:
    """Find the CHECK constraints in a CREATE TABLE statement."""
    constraints: list[CheckConstraint] = []
    definition = ""
    depth = 0
    for token in _tokenize(sql):
        if depth == 0 and token in ("CHECK", "check"):
            definition = token
            continue
        if not definition:
            continue
        if token == _SPACE:
            definition += token
        elif token == "(":
            definition += token
            depth += 1
        elif token == ")":
            definition += token
            depth -= 1
            if depth == 0:
                text = definition.replace(_SPACE, " ")
                # "length" must not match the function call "length("
                columns = [
                    name
                    for name in column_names
                    if text.count(name) > text.count(f"{name}(")
                ]
                constraints.append(CheckConstraint(text, table_name, columns))
                definition = ""
        elif depth > 0:
            definition += token
    return constraints


def parse_fk(definition: str) -> tuple[list[str], str, list[str]]:
    """Return (columns, parent table, parent columns) of a foreign key definition."""
    return _parse_fk(definition)


def shadow_tables(table_name: str, sql: str) -> list[str]:
    """Names of the shadow tables an FTS3/FTS4 virtual table creates.

    An empty list means the statement does not create a full-text table.
    """
    match = _FTS.search(sql)
    if match is None:
        return []
    suffixes = _FTS3_SHADOW_SUFFIXES
    if match.group(1) == "4":
        suffixes += _FTS4_SHADOW_SUFFIXES
    return [f"{table_name}_{suffix}" for suffix in suffixes]


def group_foreign_keys(rows: Iterable[Sequence[object]]) -> list[ForeignKey]:
    """Merge PRAGMA foreign_key_list rows into foreign keys ordered by id.

    Each row is (id, seq, table, from, to, on_update, on_delete, match).
    """
    keys: dict[str, ForeignKey] = {}
    for key_id, _seq, table, column, foreign_column, on_update, on_delete, match in rows:
        key = str(key_id)
        existing = keys.get(key)
        if existing is None:
            keys[key] = ForeignKey(
                id=key,
                foreign_table_name=str(table),
                column_names=[str(column)],
                foreign_column_names=[str(foreign_column)],
                on_update=str(on_update),
                on_delete=str(on_delete),
                match=str(match),
            )
        else:
            existing.column_names.append(str(column))
            existing.foreign_column_names.append(str(foreign_column))
    return sorted(keys.values(), key=lambda fk: fk.id)