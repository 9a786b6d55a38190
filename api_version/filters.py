# -*- coding: utf-8 -*-
"""Location: ./api_version/filters.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Request filters deciding which requests are rewritten.

A filter is evaluated once per request with the request URL. Requests are
only rewritten if the filter returns True; others are forwarded unmodified.
Filters are shared across concurrent requests and must not keep per-request
state.
"""

# Standard
from abc import ABC, abstractmethod
import inspect
from typing import Awaitable, Callable, Iterable, Tuple, Union

# Third-Party
from starlette.datastructures import URL


class VersionFilter(ABC):
    """Determine which requests are rewritten."""

    @abstractmethod
    async def filter(self, url: URL) -> bool:
        """Decide whether a request participates in version rewriting.

        Args:
            url: Full request URL.

        Returns:
            bool: True if the request should be rewritten.
        """


class AllRequests(VersionFilter):
    """Filter making all requests be rewritten."""

    async def filter(self, url: URL) -> bool:
        """Accept every request.

        Args:
            url: Full request URL, unused.

        Returns:
            bool: Always True.
        """
        return True


class ExcludePrefixes(VersionFilter):
    """Exempt requests whose path starts with any of the given prefixes.

    Args:
        prefixes: Path prefixes, e.g. ``["/health", "/docs"]``.

    Examples:
        >>> import asyncio
        >>> f = ExcludePrefixes(["/foo"])
        >>> asyncio.run(f.filter(URL("/foo/bar")))
        False
        >>> asyncio.run(f.filter(URL("/test?foo=1")))
        True
    """

    def __init__(self, prefixes: Iterable[str]):
        self.prefixes: Tuple[str, ...] = tuple(prefixes)

    async def filter(self, url: URL) -> bool:
        """Reject requests under an excluded prefix.

        Args:
            url: Full request URL; only the path is compared.

        Returns:
            bool: False if the path starts with any excluded prefix.
        """
        return not url.path.startswith(self.prefixes)

    def __repr__(self) -> str:
        return f"ExcludePrefixes({list(self.prefixes)!r})"


class CallableFilter(VersionFilter):
    """Adapt a plain function, sync or async, to the VersionFilter interface.

    Args:
        func: Callable taking a URL and returning a bool or an awaitable bool.
    """

    def __init__(self, func: Callable[[URL], Union[bool, Awaitable[bool]]]):
        self.func = func

    async def filter(self, url: URL) -> bool:
        result = self.func(url)
        if inspect.isawaitable(result):
            result = await result
        return bool(result)


def as_version_filter(value) -> VersionFilter:
    """Coerce None, a VersionFilter or a callable into a VersionFilter.

    Args:
        value: None for the default filter, a VersionFilter, or a callable.

    Returns:
        VersionFilter: Filter instance.

    Raises:
        TypeError: If the value is none of the accepted kinds.
    """
    if value is None:
        return AllRequests()
    if isinstance(value, VersionFilter):
        return value
    if callable(value):
        return CallableFilter(value)
    raise TypeError(f"expected a VersionFilter or callable, got {type(value).__name__}")
