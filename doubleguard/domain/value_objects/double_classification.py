"""DoubleClassification value object.

The result of inspecting a value that turned out to be a test double.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .double_kind import DoubleKind


@dataclass(frozen=True)
class DoubleClassification:
    """Immutable description of a recognised double.

    Attributes:
        kind: How the double was built
        verified_type: Real class the double verifies against, None for
            generic doubles
        identity: Mock name or address, for logging only

    Example:
        >>> c = DoubleClassification(DoubleKind.VERIFYING_INSTANCE, Person, "person")
        >>> c.verified_type is Person
        True

    Raises:
        ValueError: If verified_type is missing for a verifying kind or
            present for a generic one
    """

    kind: DoubleKind
    verified_type: Optional[type] = None
    identity: str = ""

    def __post_init__(self) -> None:
        """Validate that verified_type matches the kind."""
        if self.kind.is_verifying and self.verified_type is None:
            raise ValueError(f"{self.kind.value} double requires a verified_type")
        if not self.kind.is_verifying and self.verified_type is not None:
            raise ValueError("generic double cannot carry a verified_type")

    def __str__(self) -> str:
        """String representation for logging.

        Example:
            >>> str(DoubleClassification(DoubleKind.GENERIC, identity="message"))
            'generic double message'
        """
        if self.verified_type is None:
            return f"{self.kind.value} double {self.identity}"
        return (
            f"{self.kind.value} double {self.identity} "
            f"of {self.verified_type.__qualname__}"
        )
