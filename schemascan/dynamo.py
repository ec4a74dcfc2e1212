"""Schema details specific to Amazon DynamoDB."""

from __future__ import annotations

import re

from schemascan.dictionary import Dict

_NEWLINE_INDENT = re.compile(r"\n\s*", re.DOTALL)

_PRIMARY_KEY_TYPES = {
    1: "Partition key",
    2: "Partition key and sort key",
}


def collapse_whitespace(text: str) -> str:
    """Replace each line break and the indentation after it by one space."""
    return _NEWLINE_INDENT.sub(" ", text)


def primary_key_type(key_count: int) -> str | None:
    """Describe a key schema by its size, or None when it has no primary key."""
    return _PRIMARY_KEY_TYPES.get(key_count)


def dictionary() -> Dict:
    return Dict(
        {
            "Column": "Attribute",
            "Columns": "Attributes",
            "Constraints": "Primary Key",
            "Indexes": "Secondary Indexes",
        }
    )