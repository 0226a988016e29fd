"""
Configuration module for cmdb.

Uses pydantic-settings for environment variable loading.
"""

from cmdb.config.settings import Settings
from cmdb.config.types import FlattenConfig

__all__ = ["FlattenConfig", "Settings"]
