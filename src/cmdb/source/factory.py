"""
Factory for creating sources from their locations.

Picks the source class by the location's URI scheme. Plain paths are
file:// locations.
"""

import logging as _logging

import cmdb.config.types as types
import cmdb.errors as errors
import cmdb.source.base as base
import cmdb.source.file as file

_logger = _logging.getLogger(__name__)

# URI scheme → source class
SOURCE_TYPES: dict[str, type[file.FileSource]] = {
    "file": file.FileSource,
}


def create(
    uri: base.Location,
    prefix: str | None = None,
    *,
    config: types.FlattenConfig | None = None,
) -> base.Source:
    """
    Create a source for a location.

    Args:
        uri: Location of the source's data.
        prefix: Dot-notation prefix for the source's keys. If None, the
            file name without its extension is used, so /tmp/my.yml
            exposes its keys under "my".
        config: Accepted leaf shapes; defaults to FlattenConfig().

    Returns:
        A fully loaded source.

    Raises:
        UnsupportedSourceError: If no source type handles the URI scheme.
    """
    parsed = base.parse_location(uri)
    source_cls = SOURCE_TYPES.get(parsed.scheme.lower())
    if source_cls is None:
        raise errors.UnsupportedSourceError(parsed.geturl(), parsed.scheme)

    if prefix is None:
        prefix = base.default_prefix(parsed)

    _logger.debug("Creating %s for %s", source_cls.__name__, parsed.geturl())
    return source_cls(parsed, prefix, config=config)
