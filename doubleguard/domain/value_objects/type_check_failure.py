"""TypeCheckFailure value object.

Everything an error handler needs to know about one failed check.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .check_site import CheckSite


@dataclass(frozen=True)
class TypeCheckFailure:
    """Immutable context of a failed runtime type check.

    Handlers installed in the runtime Configuration receive one of these.
    The same instance is passed along the handler chain unchanged.

    Attributes:
        value: The offending value
        expected: Type expression the value was checked against
        message: Human-readable description of the mismatch
        site: Whether the check was inline or at a call boundary
        function_name: Qualified name of the checked function, if any
        parameter_name: Name of the checked parameter, if any
    """

    value: Any
    expected: Any
    message: str
    site: CheckSite = CheckSite.INLINE
    function_name: Optional[str] = None
    parameter_name: Optional[str] = None
