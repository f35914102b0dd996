"""doubleguard: strict runtime type checks that can let test doubles through.

A strict checker compares a value's real type against its annotation, so a
``unittest.mock`` double is rejected wherever the class it stands in for is
expected. Test code opts in to forgiveness:

    allow_instance_doubles()  # Mock(spec=Person) passes checks for Person
    allow_doubles()           # also class, object and generic doubles
    reset()                   # back to strict, run after every test

The factories in doubleguard.doubles build the same mocks but record
which kind of double each one is.
"""

from .application.activation import (
    allow_doubles,
    allow_instance_doubles,
    current_mode,
    handler_chain,
    reset,
)
from .doubles import class_double, double, instance_double, object_double
from .domain.exceptions import InvalidOptionsError, TypeCheckError
from .domain.services import classify, forgives, satisfies
from .domain.value_objects import (
    CheckSite,
    DoubleClassification,
    DoubleKind,
    Permissiveness,
    TypeCheckFailure,
)
from .infrastructure.runtime import Configuration, let, sig

__all__ = [
    "CheckSite",
    "Configuration",
    "DoubleClassification",
    "DoubleKind",
    "InvalidOptionsError",
    "Permissiveness",
    "TypeCheckError",
    "TypeCheckFailure",
    "allow_doubles",
    "allow_instance_doubles",
    "class_double",
    "classify",
    "current_mode",
    "double",
    "forgives",
    "handler_chain",
    "instance_double",
    "let",
    "object_double",
    "reset",
    "satisfies",
    "sig",
]
