"""
cmdb - file-backed configuration data sources.

Loads YAML/JSON data files and exposes their values as a flat mapping of
dot-notation key paths.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("cmdb")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from cmdb.errors import BadData, BadValue, CmdbError, UnsupportedSourceError  # noqa: E402
from cmdb.keys import join, split  # noqa: E402
from cmdb.source import FileSource, Source, create  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "BadData",
    "BadValue",
    "CmdbError",
    "FileSource",
    "Source",
    "UnsupportedSourceError",
    "create",
    "join",
    "split",
]
