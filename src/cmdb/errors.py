"""
Errors raised while loading CMDB sources.

All errors carry the location of the source they came from, so a failure
while loading many files can be attributed to the one that caused it.

- BadData: the file as a whole could not be used (unknown extension,
  unparseable content, top-level value that is not a mapping).
- BadValue: a single value inside an otherwise well-formed document does
  not fit the accepted value model.
- UnsupportedSourceError: no source type handles the location's scheme.

I/O errors (missing file, permission denied) are not wrapped.
"""

import typing as _typing


class CmdbError(Exception):
    """Base class for errors attributed to a CMDB source location."""

    def __init__(self, location: str, message: str) -> None:
        self.location = location
        super().__init__(message)


class BadData(CmdbError):
    """A source's data file is malformed or cannot be parsed."""

    def __init__(self, location: str, reason: str) -> None:
        self.reason = reason
        super().__init__(location, f"Malformed data in {location}: {reason}")


class BadValue(CmdbError):
    """A value in a source's data does not fit the accepted value model."""

    def __init__(
        self,
        location: str,
        key: str,
        value: _typing.Any,
        reason: str = "unsupported value type",
    ) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(
            location,
            f"Unsupported value for {key!r} in {location}: {value!r} ({reason})",
        )


class UnsupportedSourceError(CmdbError):
    """No source type is registered for a location's URI scheme."""

    def __init__(self, location: str, scheme: str) -> None:
        self.scheme = scheme
        super().__init__(location, f"Unsupported source scheme {scheme!r} in {location}")
