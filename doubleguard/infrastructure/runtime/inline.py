"""Inline type assertions."""

from __future__ import annotations

from typing import Any, TypeVar

from ...domain.helpers import validate
from ...domain.value_objects import CheckSite, TypeCheckFailure
from .configuration import Configuration

T = TypeVar("T")


def let(value: T, expected: Any) -> T:
    """Assert that value conforms to expected and return it unchanged.

    A mismatch is routed through ``Configuration.inline_type_error_handler``,
    which raises TypeCheckError unless a handler says otherwise.

    Args:
        value: Value to check
        expected: Type expression the value must satisfy

    Returns:
        value, unchanged

    Example:
        >>> name = let("Sam", str)
        >>> let(name, Optional[int])
        Traceback (most recent call last):
        ...
        TypeCheckError: Expected type Optional[int], got type str with value 'Sam'
    """
    message = validate(value, expected)
    if message is not None:
        Configuration.handle_inline_type_error(
            TypeCheckFailure(
                value=value,
                expected=expected,
                message=message,
                site=CheckSite.INLINE,
            )
        )
    return value
