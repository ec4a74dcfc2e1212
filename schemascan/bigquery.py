"""Schema details specific to Google BigQuery."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from schemascan.dictionary import Dict


@dataclass
class Field:
    """A field of a BigQuery table schema, possibly holding nested fields."""

    name: str
    type: str
    description: str = ""
    required: bool = False
    fields: list[Field] = field(default_factory=list)


@dataclass(frozen=True)
class FlatColumn:
    """A column of the flattened schema; nested fields are named parent.child."""

    name: str
    type: str
    comment: str = ""
    nullable: bool = True


def flatten_fields(fields: Iterable[Field], prefix: str = "") -> list[FlatColumn]:
    """List every field depth-first, each nested one after its parent."""
    columns: list[FlatColumn] = []
    for item in fields:
        name = f"{prefix}{item.name}"
        columns.append(
            FlatColumn(
                name=name,
                type=item.type,
                comment=item.description,
                nullable=not item.required,
            )
        )
        if item.fields:
            columns.extend(flatten_fields(item.fields, f"{name}."))
    return columns


def labels(mapping: Mapping[str, str]) -> list[str]:
    """Render labels as "key:value", sorted."""
    return sorted(f"{key}:{value}" for key, value in mapping.items())


def table_name(full_id: str, dataset_id: str) -> str:
    """The table name that follows "<dataset>." in a table's full id."""
    return "".join(full_id.split(f"{dataset_id}.")[1:])


def dictionary() -> Dict:
    return Dict({"Comment": "Description"})