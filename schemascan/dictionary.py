"""A thread-safe string-to-string dictionary used for label translation."""

from __future__ import annotations

import json
import threading
from collections.abc import Mapping

import yaml


def _validated(data: object) -> dict[str, str]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError("dictionary data must be a mapping")
    result: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ValueError(f"dictionary entries must be strings: {key!r}: {value!r}")
        result[key] = value
    return result


class Dict:
    """Maps words to replacements; unknown words translate to themselves."""

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._entries: dict[str, str] = {}
        self._lock = threading.RLock()
        if entries:
            self.merge(entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def lookup(self, key: str) -> str:
        """Return the stored value for key, or the key itself."""
        with self._lock:
            return self._entries.get(key, key)

    def store(self, key: str, value: str) -> None:
        with self._lock:
            self._entries[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def items(self) -> list[tuple[str, str]]:
        """A snapshot of the stored pairs."""
        with self._lock:
            return list(self._entries.items())

    def merge(self, other: Mapping[str, str]) -> None:
        """Store every entry of other, replacing existing values."""
        with self._lock:
            self._entries.update(other)

    def merge_if_not_present(self, other: Mapping[str, str]) -> None:
        """Store the entries of other whose keys are not yet present."""
        with self._lock:
            for key, value in other.items():
                self._entries.setdefault(key, value)

    def dump(self) -> dict[str, str]:
        with self._lock:
            return dict(self._entries)

    def to_json(self) -> str:
        return json.dumps(self.dump())

    def load_json(self, data: str | bytes) -> None:
        """Merge the entries of a JSON object into this dictionary."""
        self.merge(_validated(json.loads(data)))

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.dump(), allow_unicode=True)

    def load_yaml(self, data: str | bytes) -> None:
        """Merge the entries of a YAML mapping into this dictionary."""
        self.merge(_validated(yaml.safe_load(data)))