"""Helpers for reading database schemas and describing them: DDL parsing, DSN
routing, credential set-up and per-engine catalogue rules."""

__version__ = "0.1.0"

__all__ = [
    "bigquery",
    "credentials",
    "ddl",
    "dictionary",
    "dsn",
    "dynamo",
    "mongodb",
    "mssql",
    "mysql",
    "postgres",
    "snowflake",
    "spanner",
    "sqlite",
]