"""Credential and location handling for cloud and document-store sources."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping, Sequence
from datetime import timedelta
from urllib.parse import urlsplit

DEFAULT_IMPERSONATE_SERVICE_ACCOUNT_LIFETIME = "300sec"
DEFAULT_SAMPLE_SIZE = 1000

_GOOGLE_CREDENTIAL_KEYS = ("google_application_credentials", "credentials", "creds")

_UNIT_SECONDS: dict[str, float] = {}
for _names, _seconds in (
    (("ns", "nsec", "nanosecond", "nanoseconds"), 1e-9),
    (("us", "µs", "usec", "microsecond", "microseconds"), 1e-6),
    (("ms", "msec", "millisecond", "milliseconds"), 1e-3),
    (("s", "sec", "secs", "second", "seconds"), 1.0),
    (("m", "min", "mins", "minute", "minutes"), 60.0),
    (("h", "hr", "hrs", "hour", "hours"), 3600.0),
    (("d", "day", "days"), 86400.0),
    (("w", "week", "weeks"), 604800.0),
):
    for _name in _names:
        _UNIT_SECONDS[_name] = _seconds

_DURATION_PART = re.compile(r"\s*(\d+(?:\.\d+)?)\s*([A-Za-zµ]+)\s*")
_INTEGER = re.compile(r"[+-]?\d+")
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1

QueryValues = Mapping[str, "str | Sequence[str]"]


def _first(values: QueryValues, key: str) -> str:
    value = values.get(key)
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return value[0] if value else ""


def parse_duration(text: str) -> timedelta:
    """Parse durations such as "300sec", "1hour" or "1h 30min"."""
    pos = 0
    total = 0.0
    matched = False
    while pos < len(text):
        m = _DURATION_PART.match(text, pos)
        if m is None:
            raise ValueError(f"invalid duration: {text!r}")
        unit = m.group(2)
        seconds = _UNIT_SECONDS.get(unit, _UNIT_SECONDS.get(unit.lower()))
        if seconds is None:
            raise ValueError(f"unknown duration unit {unit!r} in {text!r}")
        total += float(m.group(1)) * seconds
        matched = True
        pos = m.end()
    if not matched:
        raise ValueError(f"invalid duration: {text!r}")
    return timedelta(seconds=total)


def set_env_google_application_credentials(values: QueryValues) -> None:
    """Export a credentials path given in the query as GOOGLE_APPLICATION_CREDENTIALS."""
    for key in _GOOGLE_CREDENTIAL_KEYS:
        value = _first(values, key)
        if value:
            os.environ["GOOGLE_APPLICATION_CREDENTIALS"] = value
            return


def get_impersonate_service_account() -> str:
    return os.environ.get("GOOGLE_IMPERSONATE_SERVICE_ACCOUNT", "")


def get_impersonate_service_account_lifetime() -> timedelta:
    text = os.environ.get("GOOGLE_IMPERSONATE_SERVICE_ACCOUNT_LIFETIME", "")
    return parse_duration(text or DEFAULT_IMPERSONATE_SERVICE_ACCOUNT_LIFETIME)


def _host(url: str) -> tuple[str, list[str]]:
    parts = urlsplit(url)
    host = parts.netloc.rpartition("@")[2]
    return host, parts.path.split("/")


def bigquery_location(url: str) -> tuple[str, str]:
    """Return (project id, dataset id) from a bq:// or bigquery:// URL."""
    project_id, segments = _host(url)
    if len(segments) < 2:
        raise ValueError(f"no dataset in BigQuery URL: {url}")
    return project_id, segments[1]


def spanner_database(url: str) -> str:
    """Return the full database path from a span:// or spanner:// URL."""
    project_id, segments = _host(url)
    if len(segments) < 3:
        raise ValueError(f"no instance or database in Spanner URL: {url}")
    return f"projects/{project_id}/instances/{segments[1]}/databases/{segments[2]}"


def set_env_aws_credentials(values: QueryValues) -> None:
    """Export the first aws_* query parameter as an upper-case environment variable."""
    for key in values:
        if key.startswith("aws_"):
            os.environ[key.upper()] = _first(values, key)
            return


def mongodb_database_name(url: str) -> str:
    segments = urlsplit(url).path.split("/")
    if len(segments) != 2:
        raise ValueError("No database name in the connection string")
    return segments[1]


def mongodb_sample_size(values: QueryValues) -> int:
    """The sampleSize query parameter, or the default when absent or invalid."""
    text = _first(values, "sampleSize")
    if not _INTEGER.fullmatch(text):
        return DEFAULT_SAMPLE_SIZE
    size = int(text)
    if not _INT64_MIN <= size <= _INT64_MAX:
        return DEFAULT_SAMPLE_SIZE
    return size