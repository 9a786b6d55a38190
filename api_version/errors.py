# -*- coding: utf-8 -*-
"""Location: ./api_version/errors.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Exceptions raised by the API version package.

Construction errors (``VersionSetError`` and its subclasses) are fatal
configuration errors surfaced once at start-up. ``InvalidVersionError`` is
raised by the header codec and never escapes request handling.
"""


class VersionSetError(ValueError):
    """Base class for errors creating a VersionSet."""


class EmptyVersionSetError(VersionSetError):
    """Raised when no versions are given.

    Examples:
        >>> str(EmptyVersionSetError())
        'versions must not be empty'
    """

    def __init__(self, message: str = "versions must not be empty"):
        super().__init__(message)


class NotStrictlyIncreasingError(VersionSetError):
    """Raised when versions are not strictly monotonically increasing."""

    def __init__(self, message: str = "versions must be strictly monotonically increasing"):
        super().__init__(message)


class InvalidVersionError(ValueError):
    """Raised when a value cannot be decoded into (or encoded from) a version."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"invalid version {value!r}")
