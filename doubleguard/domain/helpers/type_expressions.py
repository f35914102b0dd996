"""Accessors for type expressions.

Type expressions are ordinary Python annotations. These helpers answer the
structural questions the checker and the forgiveness core ask about them
without either side poking at ``typing`` internals directly.
"""

from __future__ import annotations

import collections.abc
import types
from typing import Annotated, Any, Optional, Tuple, TypeVar, Union, get_args, get_origin

NoneType = type(None)

_UNION_ORIGINS = {Union, getattr(types, "UnionType", Union)}


def strip_annotated(expected: Any) -> Any:
    """Return the underlying type of ``Annotated[X, ...]``, else expected.

    Example:
        >>> strip_annotated(Annotated[int, "meta"])
        <class 'int'>
    """
    while get_origin(expected) is Annotated:
        expected = get_args(expected)[0]
    return expected


def resolve_alias(expected: Any) -> Any:
    """Follow TypeVar bounds and NewType supertypes to a concrete expression.

    Unbound TypeVars are returned unchanged.

    Example:
        >>> resolve_alias(NewType("PersonId", Person))
        <class 'Person'>
        >>> resolve_alias(TypeVar("Shape", bound=Rectangle))
        <class 'Rectangle'>
    """
    while True:
        expected = strip_annotated(expected)
        if isinstance(expected, TypeVar) and expected.__bound__ is not None:
            expected = expected.__bound__
        elif hasattr(expected, "__supertype__"):
            expected = expected.__supertype__
        else:
            return expected


def is_union(expected: Any) -> bool:
    """Whether expected is ``Union[...]`` or ``X | Y``."""
    return get_origin(expected) in _UNION_ORIGINS


def union_members(expected: Any) -> Tuple[Any, ...]:
    """Member expressions of a union, in declaration order."""
    return get_args(expected)


def is_nilable(expected: Any) -> bool:
    """Whether expected is a union that admits None, e.g. ``Optional[X]``."""
    return is_union(expected) and NoneType in union_members(expected)


def unwrap_nilable(expected: Any) -> Any:
    """Drop None from a nilable expression.

    Example:
        >>> unwrap_nilable(Optional[int])
        <class 'int'>
        >>> unwrap_nilable(Union[int, str, None])
        typing.Union[int, str]
    """
    members = tuple(m for m in union_members(expected) if m is not NoneType)
    if len(members) == 1:
        return members[0]
    return Union[members]


def is_class_of(expected: Any) -> bool:
    """Whether expected is a class-object constraint ``Type[X]``."""
    return get_origin(expected) is type and bool(get_args(expected))


def class_of_targets(expected: Any) -> Tuple[type, ...]:
    """Classes a ``Type[...]`` constraint accepts subclasses of.

    ``Type[Any]`` accepts any class, ``Type[A | B]`` accepts subclasses of
    either member.
    """
    (target,) = get_args(expected)
    target = strip_annotated(target)
    if target is Any:
        return (object,)
    candidates = union_members(target) if is_union(target) else (target,)
    return tuple(
        cls for cls in (target_class(c) for c in candidates) if cls is not None
    )


def is_collection(expected: Any) -> bool:
    """Whether expected is a parameterized container like ``List[X]``."""
    origin = get_origin(expected)
    return (
        isinstance(origin, type)
        and origin not in (type, collections.abc.Callable)
        and bool(get_args(expected))
    )


def target_class(expected: Any) -> Optional[type]:
    """Class an instance of which satisfies expected, if there is one.

    Example:
        >>> target_class(List[int])
        <class 'list'>
        >>> target_class(Literal["a"]) is None
        True
    """
    expected = strip_annotated(expected)
    origin = get_origin(expected)
    if origin is not None:
        return origin if isinstance(origin, type) else None
    if isinstance(expected, type):
        return expected
    return None


def describe(expected: Any) -> str:
    """Short human-readable name of a type expression.

    Example:
        >>> describe(int)
        'int'
        >>> describe(Optional[Person])
        'Optional[Person]'
    """
    if expected is None or expected is NoneType:
        return "None"
    if isinstance(expected, type) and get_origin(expected) is None:
        return expected.__qualname__
    if is_union(expected):
        members = union_members(expected)
        if NoneType in members:
            return f"Optional[{describe(unwrap_nilable(expected))}]"
        return f"Union[{', '.join(describe(m) for m in members)}]"
    origin = get_origin(expected)
    if isinstance(origin, type) and get_args(expected):
        args = ", ".join(
            "..." if arg is Ellipsis else describe(arg) for arg in get_args(expected)
        )
        return f"{origin.__qualname__}[{args}]"
    return repr(expected).replace("typing.", "")
