"""Service deciding whether a double may stand in for an expected type."""

from __future__ import annotations

import logging
from typing import Any

from ..helpers.type_expressions import (
    NoneType,
    class_of_targets,
    is_class_of,
    is_nilable,
    is_union,
    resolve_alias,
    target_class,
    union_members,
    unwrap_nilable,
)
from ..helpers import is_valid
from ..value_objects import DoubleClassification, DoubleKind, Permissiveness
from .double_classifier import classify

_LOGGER = logging.getLogger(__name__)


def satisfies(
    classification: DoubleClassification,
    expected: Any,
    mode: Permissiveness,
) -> bool:
    """Whether a classified double satisfies a type expression.

    TypeVar bounds and NewType supertypes are followed first. Then,
    evaluated in order, first match wins:

    1. Nilable: unwrap and judge the inner expression.
    2. Union: satisfied if any member is.
    3. ``Type[X]``: only class doubles of X or a subclass, and only when
       mode is ALL.
    4. Instance type T: instance doubles whose verified type is T or a
       subclass of T (mode INSTANCE_ONLY or above), or object and generic
       doubles of any kind (mode ALL).

    A double whose verified type is unrelated to the expected type is never
    satisfied, whatever the mode. This never raises.

    Args:
        classification: Result of classify() for the offending value
        expected: Type expression the value failed
        mode: Current permissiveness

    Returns:
        True if the failure should be forgiven

    Example:
        >>> person = classify(create_autospec(Person, instance=True))
        >>> satisfies(person, Optional[Person], Permissiveness.INSTANCE_ONLY)
        True
        >>> satisfies(person, int, Permissiveness.ALL)
        False
    """
    if mode is Permissiveness.OFF:
        return False

    expected = resolve_alias(expected)
    if expected is None or expected is NoneType:
        return False

    if is_nilable(expected):
        return satisfies(classification, unwrap_nilable(expected), mode)

    if is_union(expected):
        return any(
            satisfies(classification, member, mode)
            for member in union_members(expected)
        )

    if is_class_of(expected):
        return (
            mode >= Permissiveness.ALL
            and classification.kind is DoubleKind.VERIFYING_CLASS
            and any(
                _descends_from(classification.verified_type, target)
                for target in class_of_targets(expected)
            )
        )

    if classification.kind is DoubleKind.VERIFYING_INSTANCE:
        expected_class = target_class(expected)
        return expected_class is not None and _descends_from(
            classification.verified_type, expected_class
        )

    if classification.kind in (DoubleKind.OBJECT, DoubleKind.GENERIC):
        return mode >= Permissiveness.ALL

    return False


def forgives(value: Any, expected: Any, mode: Permissiveness) -> bool:
    """Whether a failed check of value against expected should pass.

    The value is re-validated with satisfies() consulted for every failing
    leaf. A lone double is judged once the expression has been reduced to
    its leaves (TypeVar bounds, NewType supertypes, union members), and a
    real container holding doubles is accepted when each double would be.

    Args:
        value: The offending value
        expected: Type expression the value failed
        mode: Current permissiveness

    Returns:
        True if the failure should be forgiven
    """
    if mode is Permissiveness.OFF:
        return False

    def _leaf(item: Any, item_expected: Any) -> bool:
        classification = classify(item)
        if classification is None:
            return False
        forgiven = satisfies(classification, item_expected, mode)
        _LOGGER.debug(
            "%s %s against %r",
            "Forgiving" if forgiven else "Not forgiving",
            classification,
            item_expected,
        )
        return forgiven

    return is_valid(value, expected, fallback=_leaf)


def _descends_from(verified_type: Any, ancestor: type) -> bool:
    try:
        return issubclass(verified_type, ancestor)
    except TypeError:
        return False
