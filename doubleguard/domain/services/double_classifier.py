"""Service for recognising unittest.mock test doubles.

Inspection goes through ``vars(value)`` so that looking at a mock never
creates child attributes or records calls on it.
"""

from __future__ import annotations

from typing import Any, Optional
from unittest.mock import NonCallableMock

from ...const import PROVENANCE_ATTRIBUTE
from ..value_objects import DoubleClassification, DoubleKind


def classify(value: Any) -> Optional[DoubleClassification]:
    """Classify value as a test double.

    Rules, first match wins:

    1. Not a mock at all: None.
    2. No spec, or a spec given as a list of attribute names: GENERIC.
    3. Built by a ``doubleguard.doubles`` factory: the recorded kind.
    4. Calling the mock returns a mock specced on the same class
       (``create_autospec(cls)``): VERIFYING_CLASS.
    5. Otherwise (``Mock(spec=cls)``, ``create_autospec(cls, instance=True)``):
       VERIFYING_INSTANCE.

    unittest.mock keeps only the spec's class, so a plain mock specced on
    an instance falls under rule 5. Use ``object_double()`` to get OBJECT.

    Args:
        value: Any value that reached a type check

    Returns:
        DoubleClassification, or None if value is not a double

    Example:
        >>> classify(create_autospec(Person, instance=True)).kind
        <DoubleKind.VERIFYING_INSTANCE: 'verifying_instance'>
        >>> classify(create_autospec(Person)).kind
        <DoubleKind.VERIFYING_CLASS: 'verifying_class'>
        >>> classify("Sam") is None
        True
    """
    if not isinstance(value, NonCallableMock):
        return None

    attributes = vars(value)
    spec_class = attributes.get("_spec_class")
    recorded = attributes.get(PROVENANCE_ATTRIBUTE)
    identity = _identity(value, attributes)

    if spec_class is None or recorded is DoubleKind.GENERIC:
        return DoubleClassification(DoubleKind.GENERIC, identity=identity)
    if isinstance(recorded, DoubleKind):
        return DoubleClassification(recorded, spec_class, identity)
    if _returns_instance_double(attributes, spec_class):
        return DoubleClassification(DoubleKind.VERIFYING_CLASS, spec_class, identity)
    return DoubleClassification(DoubleKind.VERIFYING_INSTANCE, spec_class, identity)


def _returns_instance_double(attributes: dict, spec_class: type) -> bool:
    """Whether the mock's stored return value is a mock of spec_class."""
    returned = attributes.get("_mock_return_value")
    if not isinstance(returned, NonCallableMock):
        return False
    return vars(returned).get("_spec_class") is spec_class


def _identity(value: Any, attributes: dict) -> str:
    name = attributes.get("_mock_name")
    if name:
        return str(name)
    return f"{type(value).__name__}@{id(value):#x}"
