"""Custom exceptions for doubleguard.

This module defines the errors surfaced to test code: the type error raised
when a strict check fails and nothing forgives it, and the error raised for
unusable configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .value_objects.type_check_failure import TypeCheckFailure


class TypeCheckError(TypeError):
    """A value did not conform to its declared type.

    Raised by the runtime checker when an error handler slot is empty, and
    by the handler chain when a failure is not forgiven and no handler was
    installed before it. Subclasses ``TypeError`` so callers can catch it
    the same way they catch any other type mismatch.

    Attributes:
        failure: Full context of the failed check

    Example:
        >>> try:
        ...     let(3, str)
        ... except TypeCheckError as err:
        ...     assert err.failure.value == 3
    """

    def __init__(self, failure: TypeCheckFailure):
        self.failure = failure
        super().__init__(failure.message)


class InvalidOptionsError(ValueError):
    """Configuration options failed schema validation."""
