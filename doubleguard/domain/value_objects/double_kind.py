"""Kinds of test double recognised by the classifier.

Extracted from double_classification.py for one-class-per-file compliance.
"""

from enum import Enum


class DoubleKind(Enum):
    """How a double was built and what it stands in for."""

    VERIFYING_INSTANCE = "verifying_instance"  # spec is a class, stands in for an instance
    VERIFYING_CLASS = "verifying_class"  # stands in for the class object itself
    OBJECT = "object"  # spec is a concrete instance
    GENERIC = "generic"  # no spec, or a list of attribute names

    @property
    def is_verifying(self) -> bool:
        """Whether doubles of this kind carry a verified type."""
        return self is not DoubleKind.GENERIC
