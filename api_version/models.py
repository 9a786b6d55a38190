# -*- coding: utf-8 -*-
"""Location: ./api_version/models.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

API version data models.

This module defines the two value types the rewrite middleware works with:

- Version: a validated, non-negative integer displayed as ``v<N>``.
- VersionSet: the fixed, non-empty, strictly increasing sequence of versions
  a deployment supports. The last element is the default version.

Both are immutable once constructed and safe to share across concurrent
requests without locking.

Examples:
    >>> versions = VersionSet([0, 1, 2])
    >>> str(versions.default)
    'v2'
    >>> Version(1) in versions
    True
    >>> versions.collides_with("/v1/things")
    True
"""

# Standard
from functools import total_ordering
from typing import Callable, Iterable, Iterator, Tuple, Union

# Third-Party
from pydantic import BaseModel, ConfigDict, Field, StrictInt

# First-Party
from api_version.errors import EmptyVersionSetError, NotStrictlyIncreasingError


@total_ordering
class Version(BaseModel):
    """A single API version.

    Equality, hashing and ordering are by the wrapped integer.

    Examples:
        >>> Version(0).display
        'v0'
        >>> Version(3).prefix
        '/v3'
        >>> Version(1) < Version(2)
        True
        >>> Version(7) == Version(7)
        True
        >>> try:
        ...     Version(-1)
        ... except ValueError:
        ...     print("rejected")
        rejected
    """

    model_config = ConfigDict(frozen=True)

    n: StrictInt = Field(ge=0, description="Version number")

    def __init__(self, n: int, **data) -> None:
        super().__init__(n=n, **data)

    @property
    def display(self) -> str:
        """Canonical display form, ``v`` followed by the number without leading zeros."""
        return f"v{self.n}"

    @property
    def prefix(self) -> str:
        """Path prefix for this version, e.g. ``/v1``."""
        return f"/{self.display}"

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.n < other.n

    def __str__(self) -> str:
        return self.display

    def __repr__(self) -> str:
        return f"Version({self.n})"


VersionLike = Union[Version, int]


def _as_version(value: VersionLike) -> Version:
    return value if isinstance(value, Version) else Version(value)


class VersionSet:
    """Immutable ordered set of supported API versions.

    The versions must not be empty and must be strictly monotonically
    increasing, e.g. ``[0, 1, 2]``. The invariants are checked once here
    and never again.

    Args:
        values: Versions as integers or Version instances, in order.

    Raises:
        EmptyVersionSetError: If no versions are given.
        NotStrictlyIncreasingError: If any adjacent pair is not increasing.

    Examples:
        >>> VersionSet([])
        Traceback (most recent call last):
        ...
        api_version.errors.EmptyVersionSetError: versions must not be empty
        >>> VersionSet([1, 1])
        Traceback (most recent call last):
        ...
        api_version.errors.NotStrictlyIncreasingError: versions must be strictly monotonically increasing
        >>> VersionSet([0, 2, 5]).default
        Version(5)
    """

    __slots__ = ("_versions",)

    def __init__(self, values: Iterable[VersionLike]):
        versions = tuple(_as_version(value) for value in values)

        if not versions:
            raise EmptyVersionSetError()

        if any(a >= b for a, b in zip(versions, versions[1:])):
            raise NotStrictlyIncreasingError()

        self._versions: Tuple[Version, ...] = versions

    @classmethod
    def from_range(cls, first: int, last: int) -> "VersionSet":
        """Create a VersionSet for the inclusive range ``first..=last``.

        Args:
            first: Lowest supported version.
            last: Highest supported version, the default.

        Returns:
            VersionSet: The versions ``first``, ``first + 1``, ..., ``last``.

        Examples:
            >>> [str(v) for v in VersionSet.from_range(1, 3)]
            ['v1', 'v2', 'v3']
        """
        return cls(range(first, last + 1))

    @property
    def versions(self) -> Tuple[Version, ...]:
        """All supported versions in ascending order."""
        return self._versions

    @property
    def default(self) -> Version:
        """The latest version, used when a request does not ask for one."""
        return self._versions[-1]

    def contains(self, version: VersionLike) -> bool:
        """Check whether the given version is supported.

        Args:
            version: Version or plain integer.

        Returns:
            bool: True if the version is a member of this set.
        """
        if isinstance(version, bool):
            return False
        if isinstance(version, int) and version < 0:
            return False
        return _as_version(version) in self._versions

    def any(self, predicate: Callable[[Version], bool]) -> bool:
        """Return True if the predicate holds for at least one version."""
        return any(predicate(version) for version in self._versions)

    def collides_with(self, path: str) -> bool:
        """Check whether a path already starts with a supported version prefix.

        This is a plain string prefix test, not a path segment test, so
        ``/v0x`` collides with version 0.

        Args:
            path: Request path without query string.

        Returns:
            bool: True if the path starts with ``/v<N>`` for any supported N.

        Examples:
            >>> versions = VersionSet([0, 1])
            >>> versions.collides_with("/v0x")
            True
            >>> versions.collides_with("/test")
            False
            >>> versions.collides_with("/v2/test")
            False
        """
        return self.any(lambda version: path.startswith(version.prefix))

    def __contains__(self, version: object) -> bool:
        if not isinstance(version, (Version, int)) or isinstance(version, bool):
            return False
        return self.contains(version)

    def __iter__(self) -> Iterator[Version]:
        return iter(self._versions)

    def __len__(self) -> int:
        return len(self._versions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionSet):
            return NotImplemented
        return self._versions == other._versions

    def __hash__(self) -> int:
        return hash(self._versions)

    def __repr__(self) -> str:
        return f"VersionSet([{', '.join(str(v.n) for v in self._versions)}])"
