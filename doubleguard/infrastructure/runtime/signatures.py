"""Call-boundary type checking decorator."""

from __future__ import annotations

import inspect
import logging
import typing
from functools import wraps
from typing import Any, Callable, Dict, Optional

from ...domain.helpers import validate
from ...domain.value_objects import CheckSite, TypeCheckFailure
from .configuration import Configuration

_LOGGER = logging.getLogger(__name__)


def sig(func: Callable):
    """Decorator checking annotated arguments and return value on every call.

    Annotations are resolved lazily on the first call, so forward
    references to classes defined later in the module work. Parameters
    without annotations are not checked. A mismatch is routed through
    ``Configuration.call_validation_error_handler``.

    Args:
        func: Sync or async function to check

    Example:
        class Greeter:
            @sig
            def __init__(self, person: Person) -> None:
                self._person = person

        Greeter("Sam")  # raises TypeCheckError
    """
    signature = inspect.signature(func)
    hints: Dict[str, Any] = {}
    resolved = False

    def _hints() -> Dict[str, Any]:
        nonlocal resolved
        if not resolved:
            hints.update(typing.get_type_hints(func))
            resolved = True
            _LOGGER.debug(
                "Resolved %d annotations for %s", len(hints), func.__qualname__
            )
        return hints

    def _check_arguments(args: tuple, kwargs: dict) -> None:
        annotations = _hints()
        bound = signature.bind(*args, **kwargs)
        for name, value in bound.arguments.items():
            if name not in annotations:
                continue
            kind = signature.parameters[name].kind
            if kind is inspect.Parameter.VAR_POSITIONAL:
                for item in value:
                    _check(func, name, item, annotations[name])
            elif kind is inspect.Parameter.VAR_KEYWORD:
                for item in value.values():
                    _check(func, name, item, annotations[name])
            else:
                _check(func, name, value, annotations[name])

    def _check_return(result: Any) -> None:
        annotations = _hints()
        if "return" in annotations:
            _check(func, None, result, annotations["return"])

    @wraps(func)
    async def async_wrapper(*args, **kwargs):
        _check_arguments(args, kwargs)
        result = await func(*args, **kwargs)
        _check_return(result)
        return result

    @wraps(func)
    def sync_wrapper(*args, **kwargs):
        _check_arguments(args, kwargs)
        result = func(*args, **kwargs)
        _check_return(result)
        return result

    return async_wrapper if inspect.iscoroutinefunction(func) else sync_wrapper


def _check(func: Callable, parameter: Optional[str], value: Any, expected: Any) -> None:
    message = validate(value, expected)
    if message is None:
        return

    if parameter is None:
        site = CheckSite.CALL_RETURN
        prefix = "Return value"
    else:
        site = CheckSite.CALL_ARGUMENT
        prefix = f"Parameter '{parameter}'"

    Configuration.handle_call_validation_error(
        TypeCheckFailure(
            value=value,
            expected=expected,
            message=f"{prefix}: {message} (in {func.__qualname__})",
            site=site,
            function_name=func.__qualname__,
            parameter_name=parameter,
        )
    )
