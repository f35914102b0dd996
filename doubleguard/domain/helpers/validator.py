"""Strict runtime validation of values against type expressions.

Instance checks compare the value's real type, ``type(value)``, against
the expected class. Objects that only pretend to be something else by
overriding ``__class__`` (as spec'd mocks do) are therefore rejected.
"""

from __future__ import annotations

import collections.abc
import logging
import reprlib
from typing import Any, Callable, Literal, Optional, TypeVar, get_args, get_origin

from ...const import MAX_VALUE_REPR
from .type_expressions import (
    NoneType,
    class_of_targets,
    describe,
    is_class_of,
    is_collection,
    is_union,
    strip_annotated,
    union_members,
)

_LOGGER = logging.getLogger(__name__)

Fallback = Callable[[Any, Any], bool]

_repr = reprlib.Repr()
_repr.maxstring = MAX_VALUE_REPR
_repr.maxother = MAX_VALUE_REPR


def validate(value: Any, expected: Any) -> Optional[str]:
    """Check value against expected.

    Args:
        value: Value to check
        expected: Type expression to check against

    Returns:
        None if value conforms, otherwise a message describing the mismatch

    Example:
        >>> validate("Sam", str) is None
        True
        >>> validate(3, str)
        'Expected type str, got type int with value 3'
    """
    if is_valid(value, expected):
        return None
    return (
        f"Expected type {describe(expected)}, "
        f"got type {describe(type(value))} with value {_repr.repr(value)}"
    )


def is_valid(value: Any, expected: Any, fallback: Optional[Fallback] = None) -> bool:
    """Whether value conforms to expected.

    Args:
        value: Value to check
        expected: Type expression to check against
        fallback: Consulted with ``(value, expected)`` whenever a leaf check
            (instance, class-object, Literal or Callable) fails; a True result
            accepts that leaf. Used to forgive doubles nested in containers.

    Returns:
        True if value conforms
    """
    expected = strip_annotated(expected)

    if expected is Any or expected is object:
        return True
    if expected is None or expected is NoneType:
        return value is None
    if isinstance(expected, TypeVar):
        bound = expected.__bound__
        return bound is None or is_valid(value, bound, fallback)
    if hasattr(expected, "__supertype__"):  # NewType
        return is_valid(value, expected.__supertype__, fallback)
    if is_union(expected):
        return any(is_valid(value, m, fallback) for m in union_members(expected))
    if is_class_of(expected):
        if _is_class_object(value) and _subclasses_any(value, class_of_targets(expected)):
            return True
        return _fall_back(value, expected, fallback)

    origin = get_origin(expected)
    if origin is Literal:
        if any(type(value) is type(arg) and value == arg for arg in get_args(expected)):
            return True
        return _fall_back(value, expected, fallback)
    if origin is collections.abc.Callable:
        return callable(value) or _fall_back(value, expected, fallback)
    if is_collection(expected):
        if not _is_instance(value, origin):
            return _fall_back(value, expected, fallback)
        return _elements_valid(value, origin, get_args(expected), fallback)
    if isinstance(expected, type):
        return _is_instance(value, expected) or _fall_back(value, expected, fallback)

    _LOGGER.debug("Unsupported type expression %r, accepting value", expected)
    return True


def _fall_back(value: Any, expected: Any, fallback: Optional[Fallback]) -> bool:
    return fallback is not None and fallback(value, expected)


def _is_instance(value: Any, cls: type) -> bool:
    try:
        return issubclass(type(value), cls)
    except TypeError:
        # Protocols that are not runtime checkable refuse issubclass
        _LOGGER.debug("Cannot check against %r, accepting value", cls)
        return True


def _is_class_object(value: Any) -> bool:
    return issubclass(type(value), type)


def _subclasses_any(value: type, targets: tuple) -> bool:
    try:
        return any(issubclass(value, target) for target in targets)
    except TypeError:
        # Same as _is_instance: non-runtime Protocols refuse issubclass
        _LOGGER.debug("Cannot check %r against %r, accepting value", value, targets)
        return True


def _elements_valid(
    value: Any, origin: type, args: tuple, fallback: Optional[Fallback]
) -> bool:
    """Check the items of an already type-checked container."""
    if issubclass(origin, tuple):
        if len(args) == 2 and args[1] is Ellipsis:
            return all(is_valid(item, args[0], fallback) for item in value)
        if args == ((),):
            return len(value) == 0
        return len(value) == len(args) and all(
            is_valid(item, arg, fallback) for item, arg in zip(value, args)
        )

    if issubclass(origin, collections.abc.Mapping):
        if len(args) != 2:
            return True
        key_type, value_type = args
        return all(
            is_valid(key, key_type, fallback) and is_valid(item, value_type, fallback)
            for key, item in value.items()
        )

    # Never consume an iterator just to check it
    if isinstance(value, collections.abc.Iterator):
        return True
    if isinstance(value, collections.abc.Iterable) and len(args) == 1:
        return all(is_valid(item, args[0], fallback) for item in value)
    return True
