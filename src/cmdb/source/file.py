"""
Data source backed by a YAML or JSON file in the filesystem.

The file is read, parsed, validated and flattened once, when the source is
constructed. Construction either produces a complete source or raises; a
changed file needs a new source.

Example:
    >>> source = FileSource("/tmp/my.yml", "my")  # has a "database" stanza
    >>> source.get("my.database.host")
    'db1-1.example.com'
"""

import json as _json
import logging as _logging
import re as _re
import typing as _typing

import yaml as _yaml

import cmdb.config.types as types
import cmdb.errors as errors
import cmdb.flatten as flatten
import cmdb.frozen as frozen
import cmdb.source.base as base

_logger = _logging.getLogger(__name__)

# Extension patterns, matched case-insensitively against the file name's suffix
JSON_EXTENSION = _re.compile(r"jso?n?$", _re.IGNORECASE)
YAML_EXTENSION = _re.compile(r"ya?ml$", _re.IGNORECASE)

Parser: _typing.TypeAlias = _typing.Callable[[bytes], _typing.Any]


def _parser_for(extension: str) -> Parser | None:
    """Pick a parser by file extension, or None if the extension is unknown."""
    if JSON_EXTENSION.search(extension):
        return _json.loads
    if YAML_EXTENSION.search(extension):
        return _yaml.safe_load
    return None


class FileSource(base.Source):
    """
    Source whose data comes from a YAML/JSON file.

    Every value in the file is exposed under a dot-notation key path
    starting with the source's prefix.
    """

    def __init__(
        self,
        uri: base.Location,
        prefix: str | None,
        *,
        config: types.FlattenConfig | None = None,
    ) -> None:
        """
        Read and flatten a data file.

        Args:
            uri: Location of the file (file:// URI, path string or Path).
            prefix: Dot-notation prefix of all this source's keys, if any.
            config: Accepted leaf shapes; defaults to FlattenConfig().

        Raises:
            OSError: If the file cannot be read.
            BadData: If the file's extension is unknown or its content
                cannot be parsed into a mapping.
            BadValue: If any value in the file is not an accepted leaf.
        """
        super().__init__(uri, prefix)
        path = base.location_path(self._uri)
        raw_bytes = path.read_bytes()

        parser = _parser_for(path.suffix)
        if parser is None:
            raise errors.BadData(
                self.location, "file with unknown extension; expected json or yaml"
            )

        try:
            raw_data = parser(raw_bytes)
        except Exception as e:
            raise errors.BadData(self.location, "CMDB data file") from e

        if raw_data is None:
            raw_data = {}
        elif not isinstance(raw_data, dict):
            raise errors.BadData(self.location, "top-level value must be a mapping")

        data: dict[str, _typing.Any] = {}
        flatten.flatten(
            raw_data,
            self._prefix,
            data,
            location=self.location,
            config=config,
        )
        self._data = frozen.FrozenMapping(data)
        _logger.debug("Loaded %d keys from %s", len(self._data), self.location)

    def get(self, key: str, default: _typing.Any = None) -> _typing.Any:
        """Get the value of key, or default if not found."""
        return self._data.get(key, default)

    def each_pair(self) -> _typing.Iterator[tuple[str, _typing.Any]]:
        """Iterate over every key and value in this source."""
        return iter(self._data.items())

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
