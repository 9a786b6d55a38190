"""Route setup and configuration module.

Mounts one router per supported API version under its ``/v<N>`` prefix, the
paths the version middleware rewrites requests to.
"""

# Standard
from typing import Mapping

# Third-Party
from fastapi import APIRouter, FastAPI

# First-Party
from api_version.models import Version, VersionSet
from api_version.services.logging_service import LoggingService

# Initialize logging service first
logging_service = LoggingService()
logger = logging_service.get_logger("setup routes")


def setup_versioned_routes(app: FastAPI, version_routers: Mapping[int, APIRouter], versions: VersionSet) -> None:
    """Include each router under the prefix of its version.

    Args:
        app: FastAPI application instance to configure
        version_routers: Router per version number
        versions: Supported versions

    Raises:
        ValueError: If a router is given for an unsupported version
    """
    for n, router in sorted(version_routers.items()):
        version = Version(n)
        if version not in versions:
            raise ValueError(f"router given for unsupported version '{version}'")
        app.include_router(router, prefix=version.prefix)
        logger.info(f"Router for API version {version} mounted at {version.prefix}")


def setup_health_routes(app: FastAPI) -> None:
    """Register the root readiness probe, which is never version rewritten.

    Args:
        app: FastAPI application instance to configure
    """

    @app.get("/", include_in_schema=False)
    async def root_probe():
        """Readiness probe.

        Returns:
            dict: Static status payload
        """
        return {"status": "ok"}
