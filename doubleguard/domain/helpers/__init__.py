"""Domain helper functions."""

from .type_expressions import (
    NoneType,
    class_of_targets,
    describe,
    is_class_of,
    is_collection,
    is_nilable,
    is_union,
    resolve_alias,
    strip_annotated,
    target_class,
    union_members,
    unwrap_nilable,
)
from .validator import Fallback, is_valid, validate

__all__ = [
    # Type expression accessors
    "NoneType",
    "class_of_targets",
    "describe",
    "is_class_of",
    "is_collection",
    "is_nilable",
    "is_union",
    "resolve_alias",
    "strip_annotated",
    "target_class",
    "union_members",
    "unwrap_nilable",
    # Validation
    "Fallback",
    "is_valid",
    "validate",
]
