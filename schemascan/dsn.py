"""Classification and rewriting of data source names."""

from __future__ import annotations

import enum
from urllib.parse import parse_qsl, unquote, urlencode, urlsplit, urlunsplit

MYSQL_OPTION_KEYS = ("show_auto_increment", "hide_auto_increment")


class SourceKind(enum.Enum):
    HTTP = "http"
    GITHUB = "github"
    JSON = "json"
    BIGQUERY = "bigquery"
    SPANNER = "spanner"
    DYNAMODB = "dynamodb"
    MONGODB = "mongodb"
    DATABASE = "database"


_PREFIXES: tuple[tuple[tuple[str, ...], SourceKind], ...] = (
    (("https://", "http://"), SourceKind.HTTP),
    (("github://",), SourceKind.GITHUB),
    (("json://",), SourceKind.JSON),
    (("bq://", "bigquery://"), SourceKind.BIGQUERY),
    (("span://", "spanner://"), SourceKind.SPANNER),
    (("dynamodb://", "dynamo://"), SourceKind.DYNAMODB),
    (("mongodb://", "mongo://"), SourceKind.MONGODB),
)


def source_kind(url: str) -> SourceKind:
    """Decide which kind of source a DSN points at."""
    for prefixes, kind in _PREFIXES:
        if url.startswith(prefixes):
            return kind
    return SourceKind.DATABASE


def github_location(url: str) -> tuple[str, str, str]:
    """Return (owner, repository, path) from a github:// DSN."""
    parts = url.removeprefix("github://").split("/", 2)
    if len(parts) != 3:
        raise ValueError(f"invalid dsn: {url}")
    owner, repo, path = parts
    return owner, repo, path


def _encode(pairs: list[tuple[str, str]]) -> str:
    ordered = sorted(pairs, key=lambda pair: pair[0])
    return urlencode(ordered)


def extract_mysql_options(url: str) -> tuple[str, frozenset[str]]:
    """Strip the auto-increment options from a MySQL DSN.

    Returns the DSN without them and the set of option names found.
    """
    parts = urlsplit(url)
    pairs = parse_qsl(parts.query, keep_blank_values=True)
    options = frozenset(key for key, _ in pairs if key in MYSQL_OPTION_KEYS)
    remaining = [(k, v) for k, v in pairs if k not in MYSQL_OPTION_KEYS]
    return urlunsplit(parts._replace(query=_encode(remaining))), options


def sqlserver_url(url: str) -> str:
    """Add the database named in the path as a query parameter."""
    parts = urlsplit(url)
    pairs = parse_qsl(parts.query, keep_blank_values=True)
    pairs.append(("database", unquote(parts.path).removeprefix("/")))
    return urlunsplit(parts._replace(query=_encode(pairs)))