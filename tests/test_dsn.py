import pytest

from schemascan.dsn import (
    SourceKind,
    extract_mysql_options,
    github_location,
    source_kind,
    sqlserver_url,
)


@pytest.mark.parametrize(
    ("url", "kind"),
    [
        ("https://example.com/schema.json", SourceKind.HTTP),
        ("http://example.com/schema.json", SourceKind.HTTP),
        ("github://owner/repo/schema.json", SourceKind.GITHUB),
        ("json://path/to/schema.json", SourceKind.JSON),
        ("bq://project/dataset", SourceKind.BIGQUERY),
        ("bigquery://project/dataset", SourceKind.BIGQUERY),
        ("span://project/instance/db", SourceKind.SPANNER),
        ("spanner://project/instance/db", SourceKind.SPANNER),
        ("dynamodb://ap-northeast-1", SourceKind.DYNAMODB),
        ("dynamo://ap-northeast-1", SourceKind.DYNAMODB),
        ("mongodb://localhost:27017/test", SourceKind.MONGODB),
        ("mongo://localhost:27017/test", SourceKind.MONGODB),
        ("pg://user:password@localhost:5432/testdb", SourceKind.DATABASE),
    ],
)
def test_source_kind(url, kind):
    assert source_kind(url) is kind


def test_github_location():
    assert github_location("github://owner/repo/sample/schema.json") == (
        "owner",
        "repo",
        "sample/schema.json",
    )


def test_github_location_invalid():
    with pytest.raises(ValueError, match="invalid dsn"):
        github_location("github://owner/repo")


def test_extract_mysql_options_flag_only():
    url, options = extract_mysql_options(
        "my://user:password@localhost:3306/testdb?hide_auto_increment"
    )
    assert url == "my://user:password@localhost:3306/testdb"
    assert options == {"hide_auto_increment"}


def test_extract_mysql_options_keeps_other_parameters():
    url, options = extract_mysql_options(
        "my://user:password@localhost:3306/testdb?show_auto_increment=1&parseTime=true"
    )
    assert url == "my://user:password@localhost:3306/testdb?parseTime=true"
    assert options == {"show_auto_increment"}


def test_extract_mysql_options_without_options_is_stable():
    original = "my://user:password@localhost:3306/testdb"
    url, options = extract_mysql_options(original)
    assert url == original
    assert options == frozenset()


def test_sqlserver_url_adds_database():
    got = sqlserver_url("ms://user:password@localhost:1433/testdb")
    assert got == "ms://user:password@localhost:1433/testdb?database=testdb"


def test_sqlserver_url_keeps_existing_parameters():
    got = sqlserver_url("ms://user:password@localhost:1433/testdb?encrypt=disable")
    assert got.startswith("ms://user:password@localhost:1433/testdb?")
    query = got.split("?", 1)[1].split("&")
    assert sorted(query) == ["database=testdb", "encrypt=disable"]