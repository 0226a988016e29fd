"""Tests for the CMDB error types."""

import pytest as _pytest

import cmdb.errors as errors


class TestBadData:
    """Tests for BadData."""

    def test_carries_location_and_reason(self) -> None:
        error = errors.BadData("/etc/cmdb/my.txt", "file with unknown extension")
        assert error.location == "/etc/cmdb/my.txt"
        assert error.reason == "file with unknown extension"

    def test_message_names_file(self) -> None:
        error = errors.BadData("/etc/cmdb/my.json", "CMDB data file")
        assert "/etc/cmdb/my.json" in str(error)
        assert "CMDB data file" in str(error)

    def test_is_cmdb_error(self) -> None:
        with _pytest.raises(errors.CmdbError):
            raise errors.BadData("x.yml", "bad")


class TestBadValue:
    """Tests for BadValue."""

    def test_carries_key_and_value(self) -> None:
        error = errors.BadValue("my.yml", "my.hosts", ["a", 1], "mismatched/unsupported element types")
        assert error.location == "my.yml"
        assert error.key == "my.hosts"
        assert error.value == ["a", 1]
        assert error.reason == "mismatched/unsupported element types"

    def test_message_names_key_value_and_file(self) -> None:
        message = str(errors.BadValue("my.yml", "my.port", None))
        assert "'my.port'" in message
        assert "None" in message
        assert "my.yml" in message

    def test_default_reason(self) -> None:
        assert errors.BadValue("my.yml", "k", None).reason == "unsupported value type"


class TestUnsupportedSourceError:
    """Tests for UnsupportedSourceError."""

    def test_carries_scheme(self) -> None:
        error = errors.UnsupportedSourceError("consul://kv/my", "consul")
        assert error.scheme == "consul"
        assert error.location == "consul://kv/my"
        assert "consul" in str(error)
