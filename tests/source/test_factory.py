"""Tests for creating sources from locations."""

import pathlib as _pathlib
import typing as _typing

import pytest as _pytest

import cmdb.config.types as types
import cmdb.errors as errors
import cmdb.source.factory as factory
import cmdb.source.file as file


class TestCreate:
    """Tests for factory.create."""

    def test_creates_file_source(self, yaml_file: _pathlib.Path) -> None:
        source = factory.create(yaml_file)
        assert isinstance(source, file.FileSource)

    def test_prefix_from_file_name(self, yaml_file: _pathlib.Path) -> None:
        """my.yml exposes its keys under "my"."""
        source = factory.create(yaml_file)
        assert source.prefix == "my"
        assert source.to_dict() == {
            "my.database.host": "db1-1.example.com",
            "my.database.port": 5432,
        }

    def test_explicit_prefix(self, yaml_file: _pathlib.Path) -> None:
        source = factory.create(yaml_file, "prod")
        assert source.get("prod.database.host") == "db1-1.example.com"

    def test_explicit_empty_prefix(self, yaml_file: _pathlib.Path) -> None:
        source = factory.create(yaml_file, "")
        assert source.get("database.port") == 5432

    def test_file_uri(self, json_file: _pathlib.Path) -> None:
        source = factory.create(json_file.as_uri())
        assert source.get("my.database.port") == 5432

    def test_config_passed_through(
        self,
        write_file: _typing.Callable[[str, str], _pathlib.Path],
    ) -> None:
        path = write_file("e.yml", "list: []\n")
        with _pytest.raises(errors.BadValue):
            factory.create(path, config=types.FlattenConfig(empty_arrays=False))

    def test_unsupported_scheme(self) -> None:
        with _pytest.raises(errors.UnsupportedSourceError) as exc_info:
            factory.create("consul://kv/my")
        assert exc_info.value.scheme == "consul"

    def test_relative_path_with_colon(
        self,
        tmp_path: _pathlib.Path,
        monkeypatch: _pytest.MonkeyPatch,
    ) -> None:
        """env:prod.yml is a file name, not a URI with scheme "env"."""
        (tmp_path / "env:prod.yml").write_text("a: 1\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        source = factory.create("env:prod.yml", "")
        assert isinstance(source, file.FileSource)
        assert source.get("a") == 1
