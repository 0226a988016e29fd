"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with CMDB_ prefix

Nested config uses double underscore delimiter:
  CMDB_FLATTEN__MIXED_BOOLEAN_ARRAYS=false
  CMDB_FLATTEN__EMPTY_ARRAYS=false
"""

import logging as _logging

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import cmdb.config.types as types

# Level names accepted for log_level
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(_pydantic_settings.BaseSettings):
    """
    cmdb configuration settings.

    All settings can be overridden via environment variables with CMDB_ prefix.
    For nested config, use double underscore: CMDB_FLATTEN__EMPTY_ARRAYS=false
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="CMDB_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    flatten: types.FlattenConfig = _pydantic.Field(default_factory=types.FlattenConfig)
    log_level: str = "WARNING"

    @_pydantic.field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for log_level."""
        return _logging.getLevelName(self.log_level)  # type: ignore[no-any-return]
