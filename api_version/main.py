# -*- coding: utf-8 -*-
"""Location: ./api_version/main.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

API Version Gateway - FastAPI Application Factory.

Core Functions:
- create_app() -> FastAPI: Creates a configured FastAPI application instance
- configure_middleware(app, versions, version_filter) -> None: Adds version rewriting
- default_version_filter() -> VersionFilter: Filter derived from settings

Route handlers are registered per version (``/v0/...``, ``/v1/...``);
callers omit the version and reach the latest one, or pin an older one with
the ``x-api-version`` header.

Configuration:
- Uses environment variables and .env files via settings
"""

# Standard
from typing import Iterable, Mapping, Optional, Union

# Third-Party
from fastapi import APIRouter, FastAPI

# First-Party
from api_version import __version__
from api_version.config import settings
from api_version.errors import VersionSetError
from api_version.filters import AllRequests, ExcludePrefixes, VersionFilter
from api_version.middleware.api_version_middleware import ApiVersionMiddleware, as_version_set, FilterLike
from api_version.models import VersionSet
from api_version.routers.setup_routes import setup_health_routes, setup_versioned_routes
from api_version.services.logging_service import LoggingService

# Initialize logging service first
logging_service = LoggingService()
logger = logging_service.get_logger("main")


def default_version_filter() -> VersionFilter:
    """Build the filter configured via ``exempt_prefixes``.

    Returns:
        VersionFilter: ExcludePrefixes if prefixes are configured, else AllRequests.
    """
    if settings.exempt_prefixes:
        return ExcludePrefixes(settings.exempt_prefixes)
    return AllRequests()


def configure_middleware(fastapi_app: FastAPI, versions: VersionSet, version_filter: FilterLike) -> None:
    """Configure the version rewriting middleware.

    Args:
        fastapi_app: FastAPI app
        versions: Supported versions, already validated
        version_filter: Filter deciding which requests are rewritten
    """
    fastapi_app.add_middleware(ApiVersionMiddleware, versions=versions, version_filter=version_filter)
    logger.info(f"API versions {[str(v) for v in versions]} enabled, default {versions.default}")


def create_app(
    version_routers: Optional[Mapping[int, APIRouter]] = None,
    version_filter: FilterLike = None,
    versions: Optional[Union[VersionSet, Iterable[int]]] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        version_routers: Router per version number, mounted under ``/v<N>``
        version_filter: Filter deciding which requests are rewritten; defaults to settings
        versions: Supported versions; defaults to ``settings.supported_versions``

    Returns:
        FastAPI: Configured application

    Raises:
        VersionSetError: If the supported versions are invalid
        ValueError: If a router is given for an unsupported version

    Examples:
        >>> app = create_app(versions=[0, 1])
        >>> app.title
        'API Version Gateway'
    """
    try:
        version_set = as_version_set(settings.supported_versions if versions is None else versions)
    except VersionSetError as e:
        logger.error(f"Invalid API version configuration: {e}")
        raise

    fastapi_app = FastAPI(title=settings.app_name, version=__version__)

    setup_health_routes(fastapi_app)
    if version_routers:
        setup_versioned_routes(fastapi_app, version_routers, version_set)

    configure_middleware(fastapi_app, version_set, default_version_filter() if version_filter is None else version_filter)

    return fastapi_app


app = create_app()
