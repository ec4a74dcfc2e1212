"""Extraction of the tables a view definition reads from."""

from __future__ import annotations

from collections.abc import Iterator

_SPACES = frozenset(" \t\n\r")
_SKIP_SYMBOLS = frozenset(",+-*/%=<>()&|")
_QUOTES = ("'", '"', "`")


def _is_delimiter(ch: str) -> bool:
    return ch in _SPACES or ch in _SKIP_SYMBOLS


def _tokens(src: str) -> Iterator[str]:
    """Split SQL into words, keeping quoted runs together."""
    pos = 0
    end = len(src)
    while pos < end:
        while pos < end and _is_delimiter(src[pos]):
            pos += 1
        if pos >= end:
            return
        start = pos
        open_quotes = {quote: False for quote in _QUOTES}
        while pos < end:
            ch = src[pos]
            if ch in open_quotes:
                open_quotes[ch] = not open_quotes[ch]
            if _is_delimiter(ch) and not any(open_quotes.values()):
                break
            pos += 1
        yield src[start:pos]
        pos += 1


def parse_referenced_tables(src: str) -> list[str]:
    """List the tables referenced by a view's DDL, in order of first appearance."""
    tables: list[str] = []
    with_names: list[str] = []
    after_from = after_join = after_with = False
    for token in _tokens(src):
        keyword = token.upper()
        if keyword == "FROM":
            after_from = True
        elif keyword == "JOIN":
            after_join = True
        elif keyword == "WITH":
            after_with = True
        elif keyword == "SELECT":
            after_from = after_join = after_with = False
        else:
            name = token.replace("`", "")
            if after_from:
                tables.append(name)
            if after_join:
                tables.append(name)
            if after_with:
                with_names.append(name)
            after_from = after_join = after_with = False

    excluded = set(with_names)
    return list(dict.fromkeys(t for t in tables if t not in excluded))