[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schemascan"
version = "0.1.0"
description = "Building blocks for documenting database schemas: DDL parsing, DSN routing and per-engine catalogue helpers"
requires-python = ">=3.10"
keywords = [
    "database",
    "schema",
    "documentation",
    "ddl",
    "mysql",
    "postgresql",
    "sqlite",
    "sqlserver",
    "bigquery",
    "spanner",
    "dynamodb",
    "mongodb",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
    "Typing :: Typed",
]
dependencies = [
    "pyyaml>=6.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["schemascan"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
