"""Strict runtime type checker.

Provides inline assertions (``let``), call-boundary checks (``@sig``) and
the process-wide Configuration whose error handler slots decide what a
failed check does.
"""

from ...domain.helpers import is_valid, validate
from .configuration import Configuration, ErrorHandler, raise_type_check_error
from .inline import let
from .signatures import sig

__all__ = [
    "Configuration",
    "ErrorHandler",
    "is_valid",
    "let",
    "raise_type_check_error",
    "sig",
    "validate",
]
