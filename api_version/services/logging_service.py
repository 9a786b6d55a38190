# -*- coding: utf-8 -*-
"""Location: ./api_version/services/logging_service.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Logging Service.

Thin facade over the standard ``logging`` module. The first instance
configures the ``api_version`` logger hierarchy from settings; every module
then asks for a named logger:

    logging_service = LoggingService()
    logger = logging_service.get_logger("api version middleware")
"""

# Standard
import logging
from typing import Dict

# First-Party
from api_version.config import settings

ROOT_LOGGER_NAME = "api_version"


class LoggingService:
    """Hands out loggers below the ``api_version`` namespace."""

    _configured = False
    _loggers: Dict[str, logging.Logger] = {}

    def __init__(self):
        if not LoggingService._configured:
            self.configure(settings.log_level, settings.log_format)

    @classmethod
    def configure(cls, level: str, fmt: str) -> None:
        """Set level and handler of the package root logger.

        The handler is only attached once; later calls just change the level.

        Args:
            level: Level name such as ``INFO``.
            fmt: ``logging.Formatter`` format string.
        """
        root = logging.getLogger(ROOT_LOGGER_NAME)
        root.setLevel(getattr(logging, level.upper()))
        if not root.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(fmt))
            root.addHandler(handler)
        cls._configured = True

    def get_logger(self, name: str) -> logging.Logger:
        """Get a named logger.

        Args:
            name: Component name, spaces allowed (e.g. ``"version header"``).

        Returns:
            logging.Logger: Logger named ``api_version.<name>``.

        Examples:
            >>> LoggingService().get_logger("version header").name
            'api_version.version_header'
        """
        if name not in self._loggers:
            self._loggers[name] = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name.replace(' ', '_')}")
        return self._loggers[name]
