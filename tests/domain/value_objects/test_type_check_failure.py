"""Tests for TypeCheckFailure and CheckSite."""

from dataclasses import FrozenInstanceError

import pytest

from doubleguard.domain.exceptions import TypeCheckError
from doubleguard.domain.value_objects import CheckSite, TypeCheckFailure


class TestCheckSite:
    """Test CheckSite properties."""

    def test_inline_is_not_call_boundary(self):
        """Test that inline checks are not at a call boundary."""
        assert not CheckSite.INLINE.is_call_boundary

    @pytest.mark.parametrize("site", [CheckSite.CALL_ARGUMENT, CheckSite.CALL_RETURN])
    def test_call_sites(self, site):
        """Test that argument and return checks are at a call boundary."""
        assert site.is_call_boundary


class TestTypeCheckFailure:
    """Test TypeCheckFailure defaults and immutability."""

    def test_defaults(self):
        """Test that a bare failure is an inline one."""
        failure = TypeCheckFailure(3, str, "bad")
        assert failure.site is CheckSite.INLINE
        assert failure.function_name is None
        assert failure.parameter_name is None

    def test_equality_based_on_fields(self):
        """Test that two failures with the same fields are equal."""
        assert TypeCheckFailure(3, str, "bad") == TypeCheckFailure(3, str, "bad")

    def test_is_immutable(self):
        """Test that fields cannot be modified after creation."""
        failure = TypeCheckFailure(3, str, "bad")
        with pytest.raises(FrozenInstanceError):
            failure.message = "good"


class TestTypeCheckError:
    """Test the error raised for unforgiven failures."""

    def test_carries_failure(self):
        """Test that the error exposes the failure and its message."""
        failure = TypeCheckFailure(3, str, "Expected type str, got type int with value 3")
        error = TypeCheckError(failure)
        assert error.failure is failure
        assert str(error) == failure.message

    def test_is_type_error(self):
        """Test that callers can catch it as TypeError."""
        with pytest.raises(TypeError):
            raise TypeCheckError(TypeCheckFailure(3, str, "bad"))
