"""Public entry points for relaxing type checks on test doubles.

All state lives in one process-wide HandlerChainManager. Call reset()
after every test that activated a mode; the bundled pytest plugin does
this automatically.
"""

from __future__ import annotations

from .services import HandlerChainManager
from ..domain.value_objects import Permissiveness

_HANDLER_CHAIN = HandlerChainManager()


def handler_chain() -> HandlerChainManager:
    """Return the process-wide handler chain."""
    return _HANDLER_CHAIN


def allow_instance_doubles() -> None:
    """Accept verifying instance doubles wherever their class is expected.

    ``Mock(spec=Person)`` and ``create_autospec(Person, instance=True)``
    then pass checks for ``Person`` or any of its base classes. Idempotent.
    """
    _HANDLER_CHAIN.activate(Permissiveness.INSTANCE_ONLY)


def allow_doubles() -> None:
    """Accept every kind of double.

    In addition to instance doubles, class doubles pass ``Type[X]`` checks
    for their class or a base class, and object and generic doubles pass
    any instance check. Idempotent, and never downgraded by a later
    allow_instance_doubles().
    """
    _HANDLER_CHAIN.activate(Permissiveness.ALL)


def reset() -> None:
    """Restore strict checking and the handlers that were installed before."""
    _HANDLER_CHAIN.reset()


def current_mode() -> Permissiveness:
    """Return the active permissiveness."""
    return _HANDLER_CHAIN.mode
