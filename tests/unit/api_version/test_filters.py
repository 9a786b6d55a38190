# -*- coding: utf-8 -*-
"""Location: ./tests/unit/api_version/test_filters.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Tests for request filters.
"""

# Third-Party
import pytest
from starlette.datastructures import URL

# First-Party
from api_version.filters import AllRequests, as_version_filter, CallableFilter, ExcludePrefixes, VersionFilter


@pytest.mark.asyncio
async def test_all_requests():
    """The default filter rewrites everything."""
    f = AllRequests()
    assert await f.filter(URL("/anything"))
    assert await f.filter(URL("http://example.com/foo?x=1"))


@pytest.mark.asyncio
async def test_exclude_prefixes():
    """Paths under an excluded prefix are exempt; the query is ignored."""
    f = ExcludePrefixes(["/foo", "/docs"])
    assert not await f.filter(URL("/foo"))
    assert not await f.filter(URL("/foobar"))
    assert not await f.filter(URL("/docs/oauth2-redirect"))
    assert await f.filter(URL("/test?next=/foo"))
    assert await f.filter(URL("/bar/foo"))


@pytest.mark.asyncio
async def test_exclude_no_prefixes():
    """Without prefixes nothing is exempt."""
    assert await ExcludePrefixes([]).filter(URL("/foo"))


@pytest.mark.asyncio
async def test_callable_filter_sync():
    """Plain functions are wrapped."""
    f = CallableFilter(lambda url: url.path != "/private")
    assert await f.filter(URL("/public"))
    assert not await f.filter(URL("/private"))


@pytest.mark.asyncio
async def test_callable_filter_async():
    """Coroutine functions are awaited."""

    async def only_api(url):
        return url.path.startswith("/api")

    f = CallableFilter(only_api)
    assert await f.filter(URL("/api/items"))
    assert not await f.filter(URL("/static/app.js"))


class TestAsVersionFilter:
    """Test coercion of filter arguments."""

    def test_none_is_all_requests(self):
        """None selects the default filter."""
        assert isinstance(as_version_filter(None), AllRequests)

    def test_filter_kept(self):
        """Filter instances are used as they are."""
        f = ExcludePrefixes(["/foo"])
        assert as_version_filter(f) is f

    def test_callable_wrapped(self):
        """Callables become CallableFilter."""
        f = as_version_filter(lambda url: True)
        assert isinstance(f, CallableFilter)
        assert isinstance(f, VersionFilter)

    def test_invalid(self):
        """Other values are rejected."""
        with pytest.raises(TypeError):
            as_version_filter("/foo")
