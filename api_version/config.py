# -*- coding: utf-8 -*-
"""Location: ./api_version/config.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

API Version Configuration.

Settings are read once at start-up from environment variables prefixed with
``API_VERSION_`` or from a ``.env`` file. List values are given as JSON,
e.g. ``API_VERSION_SUPPORTED_VERSIONS=[0, 1, 2]``.

Examples:
    >>> s = Settings(supported_versions=[0, 1, 2])
    >>> s.version_set().default
    Version(2)
    >>> try:
    ...     Settings(supported_versions=[2, 1])
    ... except ValueError:
    ...     print("invalid")
    invalid
"""

# Standard
from typing import List

# Third-Party
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# First-Party
from api_version.models import VersionSet


class Settings(BaseSettings):
    """API version settings."""

    app_name: str = "API Version Gateway"

    # Supported versions, ascending; the last one is the default
    supported_versions: List[int] = Field(default_factory=lambda: [0, 1])

    # Informational only, the middleware always reads x-api-version
    version_header: str = "x-api-version"

    # Paths starting with one of these are never rewritten
    exempt_prefixes: List[str] = Field(default_factory=lambda: ["/docs", "/redoc", "/openapi.json"])

    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = SettingsConfigDict(env_prefix="API_VERSION_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("supported_versions")
    @classmethod
    def _validate_supported_versions(cls, v: List[int]) -> List[int]:
        """Reject version lists that cannot form a VersionSet.

        Args:
            v: Configured versions.

        Returns:
            List[int]: The versions unchanged.
        """
        VersionSet(v)
        return v

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        """Normalize the log level to an upper case level name.

        Args:
            v: Configured level, any case.

        Returns:
            str: Upper case level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}:
            raise ValueError(f"unknown log level {v!r}")
        return level

    def version_set(self) -> VersionSet:
        """Build the configured VersionSet.

        Returns:
            VersionSet: Supported versions.
        """
        return VersionSet(self.supported_versions)


settings = Settings()
