# -*- coding: utf-8 -*-
"""Location: ./tests/unit/api_version/test_models.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Tests for the Version and VersionSet models.
"""

# Third-Party
from pydantic import ValidationError
import pytest

# First-Party
from api_version.errors import EmptyVersionSetError, NotStrictlyIncreasingError, VersionSetError
from api_version.models import Version, VersionSet


class TestVersion:
    """Test the Version value type."""

    def test_display(self):
        """Display form is 'v' plus the number without leading zeros."""
        assert Version(0).display == "v0"
        assert str(Version(12)) == "v12"
        assert Version(12).prefix == "/v12"

    def test_no_upper_bound_in_memory(self):
        """Only the header grammar is capped at 99."""
        assert str(Version(1000)) == "v1000"

    def test_negative_rejected(self):
        """Negative numbers are not versions."""
        with pytest.raises(ValidationError):
            Version(-1)

    def test_bool_rejected(self):
        """Booleans are not silently coerced."""
        with pytest.raises(ValidationError):
            Version(True)

    def test_ordering_and_equality(self):
        """Versions compare by number."""
        assert Version(1) == Version(1)
        assert Version(1) != Version(2)
        assert Version(1) < Version(2) <= Version(2) < Version(10)
        assert sorted([Version(3), Version(0), Version(2)]) == [Version(0), Version(2), Version(3)]

    def test_hashable_and_immutable(self):
        """Versions can be used in sets and cannot be changed."""
        assert {Version(1), Version(1), Version(2)} == {Version(1), Version(2)}
        with pytest.raises(ValidationError):
            Version(1).n = 2


class TestVersionSet:
    """Test VersionSet construction and queries."""

    @pytest.mark.parametrize("values", [[0], [5], [0, 1], [0, 1, 2], [1, 5, 99], [3, 100, 1000]])
    def test_valid_sets(self, values):
        """Non-empty strictly increasing sequences are accepted; the default is the last element."""
        versions = VersionSet(values)
        assert versions.default == Version(values[-1])
        assert [v.n for v in versions] == values
        assert len(versions) == len(values)

    def test_empty(self):
        """An empty sequence is rejected."""
        with pytest.raises(EmptyVersionSetError):
            VersionSet([])

    @pytest.mark.parametrize("values", [[1, 1], [1, 0], [0, 2, 1], [0, 1, 1, 2]])
    def test_not_strictly_increasing(self, values):
        """Duplicates and descending pairs are rejected."""
        with pytest.raises(NotStrictlyIncreasingError):
            VersionSet(values)

    def test_errors_are_value_errors(self):
        """Construction errors share a base class usable by callers."""
        assert issubclass(EmptyVersionSetError, VersionSetError)
        assert issubclass(NotStrictlyIncreasingError, ValueError)

    def test_accepts_version_instances(self):
        """Version instances and integers are interchangeable."""
        assert VersionSet([Version(0), Version(1)]) == VersionSet([0, 1])

    def test_from_range(self):
        """Inclusive ranges build consecutive versions."""
        assert VersionSet.from_range(0, 2) == VersionSet([0, 1, 2])
        assert VersionSet.from_range(4, 4).default == Version(4)
        with pytest.raises(EmptyVersionSetError):
            VersionSet.from_range(3, 2)

    def test_contains(self):
        """Membership works for versions and plain integers."""
        versions = VersionSet([0, 1])
        assert versions.contains(Version(0))
        assert versions.contains(1)
        assert not versions.contains(Version(2))
        assert not versions.contains(-1)
        assert Version(1) in versions
        assert 2 not in versions
        assert "v1" not in versions

    def test_any(self):
        """any() evaluates a predicate over all versions."""
        versions = VersionSet([0, 1])
        assert versions.any(lambda v: v.n == 1)
        assert not versions.any(lambda v: v.n > 1)

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/v0", True),
            ("/v0/test", True),
            ("/v0x", True),
            ("/v1?x=1", True),
            ("/v2/test", False),
            ("/test", False),
            ("/test/v0", False),
            ("v0", False),
        ],
    )
    def test_collides_with(self, path, expected):
        """Prefix collision is a plain string prefix test against '/v<N>'."""
        assert VersionSet([0, 1]).collides_with(path) is expected

    def test_collides_with_multi_digit_prefix(self):
        """'/v10' starts with '/v1', so it collides when 1 is supported."""
        assert VersionSet([1]).collides_with("/v10/test")
        assert not VersionSet([10]).collides_with("/v1/test")


def test_contains_rejects_bool():
    """Booleans are never members, even though bool is an int subclass."""
    versions = VersionSet([0, 1])
    assert versions.contains(True) is False
    assert versions.contains(False) is False
    assert True not in versions
