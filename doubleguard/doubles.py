"""Factories for test doubles that record how they were built.

The doubles are ordinary ``unittest.mock`` objects. ``unittest.mock`` keeps
only the spec's class, so a mock specced on an instance is
indistinguishable from one specced on that instance's class. These
factories tag each double with its DoubleKind so the classifier does not
have to guess.
"""

from __future__ import annotations

from typing import Any, Optional
from unittest.mock import MagicMock, NonCallableMock, create_autospec

from .const import PROVENANCE_ATTRIBUTE
from .domain.value_objects import DoubleKind


def instance_double(cls: type, **stubs: Any) -> NonCallableMock:
    """Verifying double standing in for an instance of cls.

    Args:
        cls: Class the double impersonates
        **stubs: Method return values or attribute values to configure

    Returns:
        Autospecced mock of an instance of cls

    Raises:
        TypeError: If cls is not a class
        AttributeError: If a stub names something cls does not have

    Example:
        >>> person = instance_double(Person, full_name="Steph Giles")
        >>> person.full_name()
        'Steph Giles'
    """
    _require_class(cls)
    return _tag(create_autospec(cls, instance=True), DoubleKind.VERIFYING_INSTANCE, stubs)


def class_double(cls: type, **stubs: Any) -> MagicMock:
    """Verifying double standing in for the class object cls itself.

    Calling the double returns an instance double of cls.

    Raises:
        TypeError: If cls is not a class
    """
    _require_class(cls)
    return _tag(create_autospec(cls), DoubleKind.VERIFYING_CLASS, stubs)


def object_double(obj: Any, **stubs: Any) -> NonCallableMock:
    """Verifying double of a concrete object, verified against its class."""
    return _tag(create_autospec(obj), DoubleKind.OBJECT, stubs)


def double(name: Optional[str] = None, **attributes: Any) -> MagicMock:
    """Non-verifying double with no type behind it.

    Args:
        name: Name shown in the mock's repr and in logs
        **attributes: Attributes to set on the double

    Example:
        >>> message = double("message", upper="HELLO")
        >>> message.upper
        'HELLO'
    """
    mock = MagicMock(name=name, **attributes)
    vars(mock)[PROVENANCE_ATTRIBUTE] = DoubleKind.GENERIC
    return mock


def _require_class(cls: Any) -> None:
    if not isinstance(cls, type):
        raise TypeError(f"Expected a class, got {type(cls).__name__}")


def _tag(mock: Any, kind: DoubleKind, stubs: dict) -> Any:
    vars(mock)[PROVENANCE_ATTRIBUTE] = kind
    for name, value in stubs.items():
        member = getattr(mock, name)
        if callable(member):
            member.return_value = value
        else:
            setattr(mock, name, value)
    return mock
