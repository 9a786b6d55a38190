# -*- coding: utf-8 -*-
"""Location: ./tests/unit/api_version/services/test_logging_service.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Tests for the logging service.
"""

# Standard
import logging

# First-Party
from api_version.services.logging_service import LoggingService, ROOT_LOGGER_NAME


def test_named_loggers():
    """Loggers live below the package namespace and are cached."""
    service = LoggingService()
    logger = service.get_logger("api version middleware")
    assert logger.name == "api_version.api_version_middleware"
    assert service.get_logger("api version middleware") is logger


def test_configure_level():
    """configure() changes the level without adding handlers twice."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    previous = root.level
    try:
        LoggingService.configure("DEBUG", "%(message)s")
        handlers = list(root.handlers)
        LoggingService.configure("WARNING", "%(message)s")
        assert root.level == logging.WARNING
        assert root.handlers == handlers
    finally:
        root.setLevel(previous)


def test_rejections_logged(caplog):
    """The middleware logs rejections at info level."""
    # Third-Party
    from fastapi import FastAPI
    from fastapi.testclient import TestClient

    # First-Party
    from api_version.middleware.api_version_middleware import ApiVersionMiddleware

    app = FastAPI()
    app.add_middleware(ApiVersionMiddleware, versions=[0])
    with caplog.at_level(logging.INFO, logger=ROOT_LOGGER_NAME):
        TestClient(app).get("/v0x")
    assert any("Rejecting GET /v0x with 400" in record.getMessage() for record in caplog.records)
