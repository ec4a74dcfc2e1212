# schemascan

`schemascan` collects the pieces needed to read a database's structure and
turn it into documentation: a tolerant parser that finds the tables a view
reads from, a word dictionary for relabelling headings, DSN classification,
credential handling for cloud sources, and the per-engine rules that turn raw
catalogue rows into readable definitions.

It is a library; there is no command-line program.

## Installation

```
pip install schemascan
```

To run the test suite:

```
pip install "schemascan[test]"
pytest
```

## What is inside

| Module | Purpose |
| --- | --- |
| `schemascan.ddl` | `parse_referenced_tables` lists the tables a view definition reads from, in order of first appearance, skipping names bound by `WITH`. |
| `schemascan.dictionary` | `Dict`, a thread-safe string-to-string dictionary whose `lookup` falls back to the key itself; it merges (`merge`, `merge_if_not_present`), dumps, and reads and writes JSON or YAML. |
| `schemascan.dsn` | `source_kind` tells which kind of source a DSN points to (`SourceKind`); `github_location` splits a `github://` DSN, `extract_mysql_options` strips the auto-increment options from a MySQL DSN and `sqlserver_url` adds the database as a query parameter. |
| `schemascan.credentials` | Environment set-up for Google Cloud and AWS sources, impersonation lifetimes (`parse_duration`), and parsing of BigQuery, Spanner and MongoDB locations and the MongoDB sample size. |
| `schemascan.mysql` | Version parsing and feature detection for MySQL and MariaDB (`Features`), foreign-key parsing, `AUTO_INCREMENT` handling (`AutoIncrementMode`) and definition builders for indexes, triggers and constraints. |
| `schemascan.postgres` | Foreign-key parsing, search-path table resolution, constraint type names, server version checks, generated-column handling and view definitions (PostgreSQL and Redshift). |
| `schemascan.mssql` | Table and column type conversion, system-named constraint masking, schema-qualified names and key/foreign-key definitions. |
| `schemascan.snowflake` | Nullability and `GET_DDL` object types. |
| `schemascan.sqlite` | `CHECK` constraint extraction (`CheckConstraint`), FTS shadow tables and grouping of foreign-key rows (`ForeignKey`). |
| `schemascan.spanner` | Column option types, index and interleave definitions. |
| `schemascan.bigquery` | Flattening nested fields (`Field`) into dotted columns (`FlatColumn`), labels and table names. |
| `schemascan.dynamo` | Whitespace collapsing and key schema descriptions for DynamoDB tables. |
| `schemascan.mongodb` | Inferring fields, types and occurrence rates from sampled documents (`FieldStats`) and index comments. |

Most engine modules also offer `dictionary()`, returning a `Dict` of the
heading words that engine relabels, and `driver_name(...)` where one module
serves two servers.

## Examples

Find the tables a view depends on:

```python
from schemascan.ddl import parse_referenced_tables

parse_referenced_tables("SELECT * FROM posts")
# ['posts']
```

Relabel headings with a dictionary:

```python
from schemascan.dictionary import Dict

words = Dict()
words.store("Functions", "Stored procedures and functions")
words.lookup("Functions")   # 'Stored procedures and functions'
words.lookup("Tables")      # 'Tables' (unknown keys come back unchanged)
```

Work out what a DSN refers to before connecting:

```python
from schemascan.dsn import SourceKind, source_kind

source_kind("bq://my-project/my_dataset") is SourceKind.BIGQUERY   # True
```

Show SQL Server column types the way they were declared:

```python
from schemascan.mssql import convert_column_type

convert_column_type("nvarchar", 100)   # 'nvarchar(50)'
convert_column_type("varchar", -1)     # 'varchar(MAX)'
```

Pull `CHECK` constraints out of a SQLite table definition:

```python
from schemascan.sqlite import parse_check_constraints

[c.definition for c in parse_check_constraints(
    "t", ["col"], "CREATE TABLE t (col TEXT CHECK(length(col) > 4))"
)]
# ['CHECK(length(col) > 4)']
```

## Environment variables

The credential helpers read and set these variables:

- `GOOGLE_APPLICATION_CREDENTIALS`, set from the `google_application_credentials`,
  `credentials` or `creds` query parameter of a DSN (the first one present);
- `GOOGLE_IMPERSONATE_SERVICE_ACCOUNT` and
  `GOOGLE_IMPERSONATE_SERVICE_ACCOUNT_LIFETIME` (default `300sec`);
- an `AWS_*` variable, set from the first `aws_*` query parameter of a
  DynamoDB DSN.

## What it does not do

`schemascan` does not connect to any database or cloud service and runs no
catalogue queries. It works on the values such queries return and on the DSNs
handed to it; fetching the rows, assembling them into a complete schema and
rendering documentation are left to the caller. There is no command-line tool.