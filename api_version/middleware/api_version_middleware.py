# -*- coding: utf-8 -*-
"""Location: ./api_version/middleware/api_version_middleware.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

API version rewrite middleware.

Rewrites a request such that a version prefix is added to its path, so that
routes registered as ``/v0/...``, ``/v1/...`` are reached by callers who omit
the version. The version is taken from the optional ``x-api-version`` header;
if there is no such header, or it is malformed, the highest supported version
is used. Only requests passing a filter are rewritten; others are forwarded
unchanged.

Decision order for each request:

1. ``/`` (readiness probe) is forwarded unmodified.
2. A path already starting with a supported version prefix such as ``/v0``
   is rejected with 400.
3. A request the filter rejects is forwarded unmodified.
4. The version is read from the header, falling back to the default.
5. An unsupported version is rejected with 404.
6. The path is prefixed with ``/v<N>``; the query string is kept.

Two integration styles wrap the same decision procedure:

- ``ApiVersionMiddleware``: pure ASGI middleware for ``app.add_middleware``.
- ``api_version_middleware``: function for ``@app.middleware("http")``.
"""

# Standard
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, Mapping, Optional, Union

# Third-Party
from starlette.datastructures import URL, Headers
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp, Receive, Scope, Send

# First-Party
from api_version.filters import as_version_filter, VersionFilter
from api_version.models import Version, VersionSet
from api_version.services.logging_service import LoggingService
from api_version.utils.version_header import decode_version_header

logging_service = LoggingService()
logger = logging_service.get_logger("api version middleware")

PREFIX_COLLISION_MESSAGE = "path must not start with version prefix like '/v0'"

# Request state key holding the Version a request was rewritten with
STATE_KEY = "api_version"

FilterLike = Union[VersionFilter, Callable[[URL], Union[bool, Awaitable[bool]]], None]


@dataclass(frozen=True)
class Forward:
    """Forward the request unmodified."""


@dataclass(frozen=True)
class Rewrite:
    """Forward the request with a version prefixed path.

    Attributes:
        version: Resolved version.
        path: New path, e.g. ``/v1/test``.
    """

    version: Version
    path: str


@dataclass(frozen=True)
class Reject:
    """Answer the request directly, without calling the downstream app.

    Attributes:
        status_code: HTTP status, 400 or 404.
        message: Plain text response body.
    """

    status_code: int
    message: str


Outcome = Union[Forward, Rewrite, Reject]


def unknown_version_message(version: Version) -> str:
    """Body text for a request asking for an unsupported version.

    Args:
        version: Requested version.

    Returns:
        str: Message naming the version.

    Examples:
        >>> unknown_version_message(Version(2))
        "unknown version 'v2'"
    """
    return f"unknown version '{version}'"


def as_version_set(versions: Union[VersionSet, Iterable[int]]) -> VersionSet:
    """Return versions as a VersionSet, validating plain sequences."""
    return versions if isinstance(versions, VersionSet) else VersionSet(versions)


async def decide(path: str, headers: Mapping[str, str], url: URL, versions: VersionSet, version_filter: VersionFilter) -> Outcome:
    """Decide what happens to a single request.

    Args:
        path: Request path without query string.
        headers: Request headers.
        url: Full request URL, passed to the filter.
        versions: Supported versions.
        version_filter: Filter deciding whether the request is rewritten.

    Returns:
        Outcome: Forward, Rewrite or Reject.

    Examples:
        >>> import asyncio
        >>> from api_version.filters import AllRequests
        >>> vs = VersionSet([0, 1])
        >>> asyncio.run(decide("/test", {}, URL("/test"), vs, AllRequests()))
        Rewrite(version=Version(1), path='/v1/test')
        >>> asyncio.run(decide("/", {"x-api-version": "v99"}, URL("/"), vs, AllRequests()))
        Forward()
        >>> asyncio.run(decide("/v0x", {"x-api-version": "v2"}, URL("/v0x"), vs, AllRequests()))
        Reject(status_code=400, message="path must not start with version prefix like '/v0'")
        >>> asyncio.run(decide("/test", {"x-api-version": "v2"}, URL("/test"), vs, AllRequests()))
        Reject(status_code=404, message="unknown version 'v2'")
    """
    # Always serve "/", typically used as readiness probe, unmodified
    if path == "/":
        return Forward()

    # Checked before the filter so exempt paths cannot pre-supply a version either
    if versions.collides_with(path):
        return Reject(400, PREFIX_COLLISION_MESSAGE)

    if not await version_filter.filter(url):
        return Forward()

    version = decode_version_header(headers)
    if version is None:
        version = versions.default
    if not versions.contains(version):
        return Reject(404, unknown_version_message(version))
    logger.debug(f"Using API version {version} for {path}")

    return Rewrite(version, f"/{version.display}{path}")


def rewrite_scope(scope: Scope, rewrite: Rewrite) -> Scope:
    """Build a copy of an ASGI scope carrying the rewritten path.

    ``query_string`` is a separate scope entry and stays as it is.

    Args:
        scope: Original ASGI scope.
        rewrite: Rewrite outcome.

    Returns:
        Scope: New scope with ``path`` and ``raw_path`` updated, sharing the original ``state`` dict.

    Examples:
        >>> s = rewrite_scope({"path": "/a", "raw_path": b"/a", "query_string": b"x=1"}, Rewrite(Version(0), "/v0/a"))
        >>> s["path"], s["raw_path"], s["query_string"], s["state"]["api_version"]
        ('/v0/a', b'/v0/a', b'x=1', Version(0))
    """
    updated = dict(scope)
    updated["path"] = rewrite.path
    raw_path = scope.get("raw_path")
    if isinstance(raw_path, (bytes, bytearray)):
        updated["raw_path"] = rewrite.version.prefix.encode("ascii") + bytes(raw_path)
    # Same state dict, so state set downstream stays visible to outer middleware
    state = scope.setdefault("state", {})
    state[STATE_KEY] = rewrite.version
    updated["state"] = state
    return updated


class ApiVersionMiddleware:
    """
    ASGI middleware adding a version prefix to request paths.

    - ``/`` is never rewritten.
    - Paths starting with a supported version prefix are rejected with 400.
    - Requests the filter rejects pass through unchanged.
    - Unsupported requested versions are rejected with 404.
    - Everything else is forwarded to ``/v<N><path>``.

    Pass a VersionSet built at start-up: Starlette instantiates middleware
    lazily, so invalid plain lists would otherwise only fail on the first request.
    """

    def __init__(self, app: ASGIApp, versions: Union[VersionSet, Iterable[int]], version_filter: FilterLike = None):
        """
        Initialize the middleware.

        Args:
            app: The next ASGI application in the middleware stack.
            versions: Supported versions, non-empty and strictly increasing.
            version_filter: Filter deciding which requests are rewritten; all requests by default.

        Raises:
            VersionSetError: If the versions are invalid.
        """
        self.app = app
        self.versions = as_version_set(versions)
        self.version_filter = as_version_filter(version_filter)

    @classmethod
    def from_range(cls, app: ASGIApp, first: int, last: int, version_filter: FilterLike = None) -> "ApiVersionMiddleware":
        """Create the middleware for the inclusive version range ``first..=last``.

        Args:
            app: The next ASGI application.
            first: Lowest supported version.
            last: Highest supported version.
            version_filter: Optional filter.

        Returns:
            ApiVersionMiddleware: Configured middleware.
        """
        return cls(app, VersionSet.from_range(first, last), version_filter)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """
        Rewrite or reject an HTTP request, then hand it to the next application.

        Args:
            scope (dict): The ASGI connection scope.
            receive (Callable): Awaitable that yields events from the client.
            send (Callable): Awaitable used to send events to the client.
        """
        # Lifespan and websocket scopes are passed through
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        path = scope.get("path", "")
        outcome = await decide(path, Headers(scope=scope), URL(scope=scope), self.versions, self.version_filter)

        if isinstance(outcome, Reject):
            logger.info(f"Rejecting {scope.get('method', '')} {path} with {outcome.status_code}: {outcome.message}")
            response = PlainTextResponse(outcome.message, status_code=outcome.status_code)
            await response(scope, receive, send)
            return

        if isinstance(outcome, Rewrite):
            scope = rewrite_scope(scope, outcome)

        await self.app(scope, receive, send)


def api_version_middleware(versions: Union[VersionSet, Iterable[int]], version_filter: FilterLike = None) -> Callable[[Request, Callable], Awaitable[Response]]:
    """Function based form of ApiVersionMiddleware for ``@app.middleware("http")``.

    The versions are validated here, i.e. when the application is set up.

    Args:
        versions: Supported versions.
        version_filter: Optional filter.

    Returns:
        Callable: ``async (request, call_next) -> Response``.

    Raises:
        VersionSetError: If the versions are invalid.

    Examples:
        >>> from fastapi import FastAPI
        >>> app = FastAPI()
        >>> _ = app.middleware("http")(api_version_middleware([0, 1]))
    """
    version_set = as_version_set(versions)
    resolved_filter = as_version_filter(version_filter)

    async def dispatch(request: Request, call_next: Callable) -> Response:
        """Rewrite or reject the request, then call the next handler.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware or endpoint handler

        Returns:
            Response from next handler or a 400/404 rejection
        """
        path = request.scope["path"]
        outcome = await decide(path, request.headers, request.url, version_set, resolved_filter)

        if isinstance(outcome, Reject):
            logger.info(f"Rejecting {request.method} {path} with {outcome.status_code}: {outcome.message}")
            return PlainTextResponse(outcome.message, status_code=outcome.status_code)

        if isinstance(outcome, Rewrite):
            # call_next routes on this very scope dict, so mutate it in place
            request.scope.update(rewrite_scope(request.scope, outcome))

        return await call_next(request)

    return dispatch


def requested_version(scope: Scope) -> Optional[Version]:
    """Return the version a request was rewritten with, if any.

    Args:
        scope: ASGI scope of the rewritten request.

    Returns:
        Optional[Version]: Version, or None for requests that were not rewritten.
    """
    return (scope.get("state") or {}).get(STATE_KEY)
