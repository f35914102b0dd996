"""Where a runtime type check took place.

Extracted from type_check_failure.py for one-class-per-file compliance.
"""

from enum import Enum


class CheckSite(Enum):
    """Origin of a type check failure."""

    INLINE = "inline"
    CALL_ARGUMENT = "argument"
    CALL_RETURN = "return"

    @property
    def is_call_boundary(self) -> bool:
        """Whether the check ran at a ``@sig`` call boundary."""
        return self is not CheckSite.INLINE
