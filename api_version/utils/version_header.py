# -*- coding: utf-8 -*-
"""Location: ./api_version/utils/version_header.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Codec for the ``x-api-version`` custom HTTP header.

The header value is a version designator starting with ``v`` followed by a
number from 0 to 99 without leading zero, e.g. ``v0`` or ``v42``.
"""

# Standard
import re
from typing import Mapping, Optional

# First-Party
from api_version.errors import InvalidVersionError
from api_version.models import Version
from api_version.services.logging_service import LoggingService

logging_service = LoggingService()
logger = logging_service.get_logger("version header")

# Header name, compared case-insensitively by Starlette's Headers
X_API_VERSION = "x-api-version"

# Compiled regex for header values
VERSION_PATTERN = re.compile(r"^v(0|[1-9][0-9]?)$")


def parse_version_header(value: Optional[str]) -> Version:
    """Decode a header value into a Version.

    Args:
        value: Raw header value.

    Returns:
        Version: The decoded version.

    Raises:
        InvalidVersionError: If the value does not fully match ``v(0|[1-9][0-9]?)``.

    Examples:
        >>> parse_version_header("v0")
        Version(0)
        >>> parse_version_header("v99")
        Version(99)
        >>> for bad in ["", "1", "v", "v01", "v100", "V1", "v1 ", "v-1"]:
        ...     try:
        ...         parse_version_header(bad)
        ...     except InvalidVersionError:
        ...         pass
        ...     else:
        ...         print("accepted", bad)
    """
    if not isinstance(value, str):
        raise InvalidVersionError(value)

    # fullmatch so a trailing newline is not accepted like "$" would
    match = VERSION_PATTERN.fullmatch(value)
    if match is None:
        raise InvalidVersionError(value)

    return Version(int(match.group(1)))


def format_version_header(version: Version) -> str:
    """Encode a Version as a header value, the exact inverse of parse_version_header.

    Args:
        version: Version to encode.

    Returns:
        str: Header value such as ``v1``.

    Raises:
        InvalidVersionError: If the version is above 99 and cannot be expressed in the header.

    Examples:
        >>> format_version_header(Version(7))
        'v7'
    """
    if version.n > 99:
        raise InvalidVersionError(version.display)
    return version.display


def decode_version_header(headers: Mapping[str, str]) -> Optional[Version]:
    """Read the requested version from request headers.

    Only the first ``x-api-version`` value is consulted. A missing header and
    a malformed one are treated the same.

    Args:
        headers: Request headers, e.g. ``starlette.datastructures.Headers``.

    Returns:
        Optional[Version]: The requested version, or None if absent or malformed.

    Examples:
        >>> from starlette.datastructures import Headers
        >>> decode_version_header(Headers({"X-API-Version": "v1"}))
        Version(1)
        >>> decode_version_header(Headers({"x-api-version": "abc"})) is None
        True
        >>> decode_version_header(Headers({})) is None
        True
    """
    value = headers.get(X_API_VERSION)
    if value is None:
        return None

    try:
        return parse_version_header(value)
    except InvalidVersionError as e:
        logger.debug(f"Ignoring malformed {X_API_VERSION} header: {e}")
        return None
