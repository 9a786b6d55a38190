# -*- coding: utf-8 -*-
"""Location: ./api_version/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

API version negotiation via URL path rewriting for ASGI applications.
"""

__version__ = "0.1.0"

# First-Party
from api_version.errors import EmptyVersionSetError, InvalidVersionError, NotStrictlyIncreasingError, VersionSetError  # noqa: E402
from api_version.filters import AllRequests, CallableFilter, ExcludePrefixes, VersionFilter  # noqa: E402
from api_version.middleware.api_version_middleware import api_version_middleware, ApiVersionMiddleware  # noqa: E402
from api_version.models import Version, VersionSet  # noqa: E402
from api_version.utils.version_header import format_version_header, parse_version_header, X_API_VERSION  # noqa: E402

__all__ = [
    "AllRequests",
    "ApiVersionMiddleware",
    "api_version_middleware",
    "CallableFilter",
    "EmptyVersionSetError",
    "ExcludePrefixes",
    "format_version_header",
    "InvalidVersionError",
    "NotStrictlyIncreasingError",
    "parse_version_header",
    "Version",
    "VersionFilter",
    "VersionSet",
    "VersionSetError",
    "X_API_VERSION",
]
