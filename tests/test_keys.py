"""Tests for dot-notation key paths."""

import cmdb.keys as keys


class TestJoin:
    """Tests for keys.join."""

    def test_joins_with_dot(self) -> None:
        assert keys.join("my", "database") == "my.database"

    def test_empty_prefix_omits_separator(self) -> None:
        """An empty prefix must not produce a leading dot."""
        assert keys.join("", "database") == "database"

    def test_nesting_is_associative(self) -> None:
        """a.b.c is the same path whichever level the prefix stops at."""
        assert keys.join("a", "b.c") == keys.join("", "a.b.c") == keys.join("a.b", "c")

    def test_many_parts(self) -> None:
        assert keys.join("a", "b", "c") == "a.b.c"


class TestSplit:
    """Tests for keys.split."""

    def test_splits_on_dot(self) -> None:
        assert keys.split("my.database.host") == ["my", "database", "host"]

    def test_empty_key(self) -> None:
        assert keys.split("") == []

    def test_inverse_of_join(self) -> None:
        assert keys.join(*keys.split("a.b.c")) == "a.b.c"


class TestEmptyComponents:
    """Only an empty prefix omits the separator."""

    def test_empty_key_under_prefix_is_kept(self) -> None:
        assert keys.join("a", "") == "a."

    def test_empty_key_without_prefix(self) -> None:
        assert keys.join("", "") == ""

    def test_empty_key_in_the_middle(self) -> None:
        assert keys.join("a", "", "b") == "a..b"

    def test_split_keeps_empty_components(self) -> None:
        assert keys.split("a.") == ["a", ""]
