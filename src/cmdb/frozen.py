"""
Read-only views over a source's flattened data.

A source builds its flattened mapping once and never changes it afterwards.
FrozenMapping exposes that dict without allowing assignment; array values come
back as FrozenSequence, which compares equal to a list with the same items.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing


class FrozenMapping(_abc.Mapping[str, _typing.Any]):
    """
    Read-only view of a flattened key path → value dict.

    Example:
        >>> data = FrozenMapping({"my.hosts": ["db1", "db2"]})
        >>> data["my.hosts"] == ["db1", "db2"]
        True
        >>> data["my.hosts"][0] = "db3"  # TypeError: immutable
    """

    __slots__ = ("_data",)

    def __init__(self, data: _abc.Mapping[str, _typing.Any]) -> None:
        # Owned, not shared: later changes to the caller's dict are not visible
        self._data = dict(data)

    def __getitem__(self, key: str) -> _typing.Any:
        return freeze(self._data[key])

    def __iter__(self) -> _typing.Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FrozenMapping({self._data!r})"

    def __eq__(self, other: object) -> bool:
        """Compare equal to any Mapping with same content."""
        if isinstance(other, _abc.Mapping):
            return dict(self) == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        raise TypeError(f"unhashable type: '{type(self).__name__}'")


class FrozenSequence(_abc.Sequence[_typing.Any]):
    """Read-only view of an array value."""

    __slots__ = ("_data",)

    def __init__(self, data: _abc.Sequence[_typing.Any]) -> None:
        self._data = list(data)

    @_typing.overload
    def __getitem__(self, index: int) -> _typing.Any: ...

    @_typing.overload
    def __getitem__(self, index: slice) -> FrozenSequence: ...

    def __getitem__(self, index: int | slice) -> _typing.Any:
        value = self._data[index]
        if isinstance(index, slice):
            return FrozenSequence(value)
        return value

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FrozenSequence({self._data!r})"

    def __eq__(self, other: object) -> bool:
        """Compare equal to any Sequence with same content (except strings)."""
        if isinstance(other, (str, bytes)):
            return NotImplemented
        if isinstance(other, _abc.Sequence):
            return list(self) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        raise TypeError(f"unhashable type: '{type(self).__name__}'")


def freeze(value: _typing.Any) -> _typing.Any:
    """
    Wrap array values in a FrozenSequence; return everything else unchanged.

    Example:
        >>> freeze(["a", "b"])
        FrozenSequence(['a', 'b'])
        >>> freeze("a")
        'a'
    """
    if isinstance(value, FrozenSequence):
        return value
    if isinstance(value, _abc.Sequence) and not isinstance(value, (str, bytes)):
        return FrozenSequence(value)
    return value


def thaw(value: _typing.Any) -> _typing.Any:
    """Return a plain, mutable copy of a value (arrays become lists)."""
    if isinstance(value, _abc.Sequence) and not isinstance(value, (str, bytes)):
        return list(value)
    return value
