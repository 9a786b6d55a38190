# -*- coding: utf-8 -*-
"""Location: ./api_version/dependencies.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

FastAPI dependencies exposing the negotiated API version to route handlers.

Example:
    @router.get("/items")
    async def list_items(version: Version = Depends(get_api_version)):
        ...
"""

# Third-Party
from fastapi import HTTPException, Request, status

# First-Party
from api_version.middleware.api_version_middleware import requested_version
from api_version.models import Version


def get_api_version(request: Request) -> Version:
    """Get the version the request was rewritten with.

    Args:
        request: Incoming HTTP request

    Returns:
        Version: Negotiated API version

    Raises:
        HTTPException: 404 if the request did not pass through version rewriting,
            e.g. an exempt path or an app without the middleware.
    """
    version = requested_version(request.scope)
    if version is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="no API version negotiated for this request")
    return version
