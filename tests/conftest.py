"""
Shared pytest fixtures for cmdb tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import json as _json
import os as _os
import pathlib as _pathlib
import typing as _typing

import pytest as _pytest

# The example document used throughout: a "database" stanza with a host and port
DATABASE_DOCUMENT: dict[str, _typing.Any] = {
    "database": {"host": "db1-1.example.com", "port": 5432},
}


@_pytest.fixture(autouse=True)
def clean_cmdb_env(monkeypatch: _pytest.MonkeyPatch) -> None:
    """Remove CMDB_* environment variables so settings use their defaults."""
    for key in list(_os.environ):
        if key.startswith("CMDB_"):
            monkeypatch.delenv(key)


@_pytest.fixture
def write_file(tmp_path: _pathlib.Path) -> _typing.Callable[[str, str], _pathlib.Path]:
    """Return a helper that writes text to a file under tmp_path."""

    def _write(name: str, content: str) -> _pathlib.Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@_pytest.fixture
def yaml_file(write_file: _typing.Callable[[str, str], _pathlib.Path]) -> _pathlib.Path:
    """my.yml holding the database stanza."""
    return write_file(
        "my.yml",
        "database:\n"
        "  host: db1-1.example.com\n"
        "  port: 5432\n",
    )


@_pytest.fixture
def json_file(write_file: _typing.Callable[[str, str], _pathlib.Path]) -> _pathlib.Path:
    """my.json holding the database stanza."""
    return write_file("my.json", _json.dumps(DATABASE_DOCUMENT))
