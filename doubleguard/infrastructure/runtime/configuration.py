"""Process-wide configuration of the runtime type checker.

The checker exposes exactly one error handler slot per extension point:
inline assertions (``let``) and call boundaries (``@sig``). A slot holding
None means a failed check raises TypeCheckError.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from ...domain.exceptions import TypeCheckError
from ...domain.value_objects import TypeCheckFailure

ErrorHandler = Callable[[TypeCheckFailure], Any]


def raise_type_check_error(failure: TypeCheckFailure) -> None:
    """Default handler: raise TypeCheckError for the failure.

    Raises:
        TypeCheckError: Always
    """
    raise TypeCheckError(failure)


class Configuration:
    """Error handler slots consulted when a runtime check fails.

    Handlers are called with the TypeCheckFailure. Returning normally
    treats the check as passed; raising propagates to the caller of the
    checked code.

    Example:
        >>> Configuration.inline_type_error_handler = lambda failure: None
        >>> let(3, str)  # no longer raises
        3
    """

    inline_type_error_handler: Optional[ErrorHandler] = None
    call_validation_error_handler: Optional[ErrorHandler] = None

    @classmethod
    def handle_inline_type_error(cls, failure: TypeCheckFailure) -> None:
        """Route an inline assertion failure to its handler."""
        handler = cls.inline_type_error_handler or raise_type_check_error
        handler(failure)

    @classmethod
    def handle_call_validation_error(cls, failure: TypeCheckFailure) -> None:
        """Route a call-boundary failure to its handler."""
        handler = cls.call_validation_error_handler or raise_type_check_error
        handler(failure)
