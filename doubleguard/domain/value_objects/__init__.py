"""Value Objects for the doubleguard domain.

Immutable primitives shared by the runtime checker and the forgiveness
core: what kind of double a value is, how permissive checking currently is,
and what a failed check looked like.
"""

from .check_site import CheckSite
from .double_classification import DoubleClassification
from .double_kind import DoubleKind
from .permissiveness import Permissiveness
from .type_check_failure import TypeCheckFailure

__all__ = [
    "CheckSite",
    "DoubleClassification",
    "DoubleKind",
    "Permissiveness",
    "TypeCheckFailure",
]
