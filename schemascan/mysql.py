"""Schema details specific to MySQL and MariaDB servers."""

from __future__ import annotations

import enum
import functools
import re
from dataclasses import dataclass

from schemascan.dictionary import Dict

_FK = re.compile(r"FOREIGN KEY \((.+)\) REFERENCES ([^\s\)]+)\s?\(([^\)]+)\)")
_AUTO_INCREMENT = re.compile(r" AUTO_INCREMENT=[\d]+")
_VERSION = re.compile(
    r"v?(\d+(?:\.\d+)*)(?:-([0-9A-Za-z.\-]+))?(?:\+([0-9A-Za-z.\-~:]+))?"
)

REDACTED_AUTO_INCREMENT = " AUTO_INCREMENT=[Redacted by schemascan]"

_DRIVER_NAMES = {False: "mysql", True: "mariadb"}


class AutoIncrementMode(enum.Enum):
    """How the AUTO_INCREMENT counter appears in a table definition."""

    REDACT = "redact"
    SHOW = "show"
    HIDE = "hide"


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """A dotted release number with an optional pre-release part."""

    release: tuple[int, ...]
    prerelease: tuple[str, ...] = ()

    def _padded(self, length: int) -> tuple[int, ...]:
        return self.release + (0,) * (length - len(self.release))

    def _release_pair(self, other: Version) -> tuple[tuple[int, ...], tuple[int, ...]]:
        length = max(len(self.release), len(other.release))
        return self._padded(length), other._padded(length)

    @staticmethod
    def _identifier_key(identifier: str) -> tuple[int, int | str]:
        if identifier.isdigit():
            return (0, int(identifier))
        return (1, identifier)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        mine, theirs = self._release_pair(other)
        return mine == theirs and self.prerelease == other.prerelease

    def __hash__(self) -> int:
        release = list(self.release)
        while release and release[-1] == 0:
            release.pop()
        return hash((tuple(release), self.prerelease))

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        mine, theirs = self._release_pair(other)
        if mine != theirs:
            return mine < theirs
        if self.prerelease == other.prerelease:
            return False
        if not self.prerelease:
            return False
        if not other.prerelease:
            return True
        return [self._identifier_key(p) for p in self.prerelease] < [
            self._identifier_key(p) for p in other.prerelease
        ]


@dataclass(frozen=True)
class Features:
    """Which optional catalogue columns a server provides."""

    generated_column: bool = True
    check_constraint: bool = True


def parse_version(text: str) -> Version:
    """Parse a version such as "8.0.16" or "5.7.41-log"."""
    match = _VERSION.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"malformed version: {text!r}")
    release = tuple(int(part) for part in match.group(1).split("."))
    prerelease = tuple(match.group(2).split(".")) if match.group(2) else ()
    return Version(release, prerelease)


def detect_features(database_version: str, maria_mode: bool) -> Features:
    """Decide from the server version which features can be queried."""
    if maria_mode:
        generated_since = parse_version("10.2")
        check_since = parse_version("10.2.1")
        version = parse_version(database_version.split("-")[0])
    else:
        generated_since = parse_version("5.7.6")
        check_since = parse_version("8.0.16")
        version = parse_version(database_version)
    return Features(
        generated_column=not version < generated_since,
        check_constraint=not version < check_since,
    )


def convert_column_nullable(value: str) -> bool:
    return value != "NO"


def parse_fk(definition: str) -> tuple[list[str], str, list[str]]:
    """Return (columns, parent table, parent columns) of a foreign key definition."""
    match = _FK.search(definition)
    if match is None:
        raise ValueError(f"can not parse foreign key: {definition}")
    columns = match.group(1).split(", ")
    parent_table = match.group(2).strip('"')
    parent_columns = match.group(3).split(", ")
    return columns, parent_table, parent_columns


def redact_auto_increment(
    definition: str, mode: AutoIncrementMode = AutoIncrementMode.REDACT
) -> str:
    """Apply the AUTO_INCREMENT display mode to a CREATE TABLE statement."""
    if mode is AutoIncrementMode.SHOW:
        return definition
    replacement = "" if mode is AutoIncrementMode.HIDE else REDACTED_AUTO_INCREMENT
    return _AUTO_INCREMENT.sub(lambda _m: replacement, definition)


def extra_definition(extra: str | None, generation_expression: str | None) -> str:
    """Combine a column's EXTRA value with its generation expression."""
    extra = extra or ""
    if not generation_expression:
        return extra
    if extra == "VIRTUAL GENERATED":
        return f"GENERATED ALWAYS AS {generation_expression} VIRTUAL"
    if extra == "STORED GENERATED":
        return f"GENERATED ALWAYS AS {generation_expression} STORED"
    return f"{extra}:{generation_expression}"


def index_definition(key_type: str, name: str, columns: str, index_type: str) -> str:
    if key_type == "PRIMARY KEY":
        return f"{key_type} ({columns}) USING {index_type}"
    return f"{key_type} {name} ({columns}) USING {index_type}"


def trigger_definition(
    name: str, timing: str, event: str, table: str, orientation: str, statement: str
) -> str:
    return (
        f"CREATE TRIGGER {name} {timing} {event} ON {table}\n"
        f"FOR EACH {orientation}\n{statement}"
    )


def constraint_definition(
    constraint_type: str,
    name: str,
    columns: str,
    referenced_table: str | None = None,
    referenced_columns: str | None = None,
) -> str:
    """Build the definition text of a key constraint; unknown types give ""."""
    referenced_table = referenced_table or ""
    referenced_columns = referenced_columns or ""
    if constraint_type == "PRIMARY KEY":
        return f"PRIMARY KEY ({columns})"
    if constraint_type == "UNIQUE":
        return f"UNIQUE KEY {name} ({columns})"
    if constraint_type == "FOREIGN KEY":
        return f"FOREIGN KEY ({columns}) REFERENCES {referenced_table} ({referenced_columns})"
    if constraint_type == "UNKNOWN":
        return f"UNKNOWN CONSTRAINT ({columns}) ({referenced_table}) ({referenced_columns})"
    return ""


def driver_name(maria_mode: bool) -> str:
    """Name under which the driver reports itself for the given mode."""
    return _DRIVER_NAMES[bool(maria_mode)]


def dictionary() -> Dict:
    return Dict({"Functions": "Stored procedures and functions"})