"""
CMDB data sources.

A source loads key/value data from one location and exposes it under a
dot-notation prefix.
"""

from cmdb.source.base import Source, default_prefix, parse_location
from cmdb.source.factory import create
from cmdb.source.file import FileSource

__all__ = ["FileSource", "Source", "create", "default_prefix", "parse_location"]
