"""
Base class for CMDB data sources.

A source is a provider of key/value configuration data with a defined
origin (its URI) and key namespace (its prefix). Sources are read-only:
their data is loaded once when they are constructed.
"""

import abc as _abc
import os as _os
import pathlib as _pathlib
import typing as _typing
import urllib.parse as _urllib_parse

import cmdb.frozen as frozen

# Anything a source can be constructed from
Location: _typing.TypeAlias = str | _os.PathLike[str] | _urllib_parse.SplitResult


def parse_location(uri: Location) -> _urllib_parse.SplitResult:
    """
    Normalize a source location into a parsed URI.

    Accepts a URI string ("file:///etc/cmdb/my.yml"), a plain path string or
    pathlib.Path (treated as a file:// location), or an already-parsed
    SplitResult.

    A string is a URI only if it has a "scheme://" prefix; anything else,
    including relative names with a colon such as "env:prod.yml" or Windows
    paths such as "C:/cmdb/my.yml", is a path. Plain paths are
    percent-encoded so that location_path() gives back the original path.
    """
    if isinstance(uri, _urllib_parse.SplitResult):
        return uri
    if isinstance(uri, _os.PathLike):
        uri = _os.fspath(uri)

    if "://" in uri:
        parsed = _urllib_parse.urlsplit(uri)
        # Single letters are Windows drive letters, not schemes
        if len(parsed.scheme) > 1:
            return parsed
    return _urllib_parse.SplitResult("file", "", _urllib_parse.quote(uri), "", "")


def location_path(uri: _urllib_parse.SplitResult) -> _pathlib.Path:
    """Return the filesystem path named by a parsed location."""
    return _pathlib.Path(_urllib_parse.unquote(uri.path))


def default_prefix(uri: Location) -> str:
    """
    Return the prefix a source gets when none is supplied: its file name stem.

    Example:
        >>> default_prefix("/tmp/my.yml")
        'my'
    """
    return location_path(parse_location(uri)).stem


class Source(_abc.ABC):
    """
    Abstract base class for CMDB data sources.

    Subclasses load their data in __init__ and implement get() and
    each_pair(); everything else is built on those two.
    """

    def __init__(self, uri: Location, prefix: str | None) -> None:
        self._uri = parse_location(uri)
        self._prefix = prefix or ""

    @property
    def uri(self) -> _urllib_parse.SplitResult:
        """Parsed location this source was loaded from."""
        return self._uri

    @property
    def location(self) -> str:
        """Location as a string, used for error attribution.

        file:// locations are shown as their path.
        """
        if self._uri.scheme == "file":
            return _urllib_parse.unquote(self._uri.path)
        return self._uri.geturl()

    @property
    def prefix(self) -> str:
        """Dot-notation prefix of all this source's keys ("" for none)."""
        return self._prefix

    @_abc.abstractmethod
    def get(self, key: str, default: _typing.Any = None) -> _typing.Any:
        """
        Get the value at an exact key path.

        Returns:
            The value, or default if the key is not present. Sources never
            store None, so None always means "not found".
        """
        ...

    @_abc.abstractmethod
    def each_pair(self) -> _typing.Iterator[tuple[str, _typing.Any]]:
        """
        Iterate over every (key, value) pair in this source.

        Each call returns a new iterator over the complete contents.
        """
        ...

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __iter__(self) -> _typing.Iterator[str]:
        return (key for key, _ in self.each_pair())

    def __len__(self) -> int:
        return sum(1 for _ in self.each_pair())

    def to_dict(self) -> dict[str, _typing.Any]:
        """Return a plain, mutable copy of this source's data."""
        return {key: frozen.thaw(value) for key, value in self.each_pair()}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.location!r}, prefix={self._prefix!r})"
