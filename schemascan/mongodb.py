"""Schema details inferred from sampled MongoDB documents."""

from __future__ import annotations

import datetime
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from schemascan.dictionary import Dict


@dataclass
class FieldStats:
    """A field seen in sampled documents and how often it appeared."""

    name: str
    type: str
    occurrences: int
    percents: float
    nullable: bool = False


def value_type(value: object) -> str:
    """Name the BSON type of a decoded value."""
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, str):
        return "string"
    if isinstance(value, int):
        return "int64"
    if isinstance(value, float):
        return "float64"
    if isinstance(value, Mapping):
        return "document"
    if isinstance(value, datetime.datetime):
        return "datetime"
    if isinstance(value, (list, tuple)):
        return "array"
    if value is None:
        return "<nil>"
    if type(value).__name__ == "ObjectId":
        return "objectId"
    return type(value).__name__


def sample_fields(documents: Iterable[Mapping[str, object]]) -> list[FieldStats]:
    """Collect the fields of the documents, sorted by name.

    A field's type is that of its first occurrence.
    """
    types: dict[str, str] = {}
    counts: dict[str, int] = {}
    total = 0
    for document in documents:
        total += 1
        for key, value in document.items():
            types.setdefault(key, value_type(value))
            counts[key] = counts.get(key, 0) + 1
    return [
        FieldStats(
            name=name,
            type=types[name],
            occurrences=counts[name],
            percents=counts[name] / total * 100,
        )
        for name in sorted(types)
    ]


def index_comment(unique: bool | None, version: int) -> str:
    kind = "Unique" if unique else "Non-unique"
    return f"{kind}, Version {version}"


def dictionary() -> Dict:
    return Dict(
        {
            "Column": "Attribute",
            "Columns": "Attributes",
            "Indexes": "Indexes",
        }
    )