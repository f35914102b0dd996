"""Service owning the forgiving handlers installed in the runtime checker."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ...const import HANDLER_SLOTS
from ...domain.services import forgives
from ...domain.value_objects import Permissiveness, TypeCheckFailure
from ...infrastructure.runtime import (
    Configuration,
    ErrorHandler,
    raise_type_check_error,
)

_LOGGER = logging.getLogger(__name__)


class HandlerChainManager:
    """Install, upgrade and remove the double-forgiving error handlers.

    On first activation a wrapper is installed in each error handler slot
    of the runtime Configuration. The wrapper forgives failures caused by
    doubles the current mode allows, and hands every other failure to the
    handler that occupied the slot before it, unchanged. Activating again
    only raises the mode, never adds a second wrapper.

    Example:
        >>> chain = HandlerChainManager()
        >>> chain.activate(Permissiveness.INSTANCE_ONLY)
        >>> chain.activate(Permissiveness.ALL)
        >>> chain.mode
        <Permissiveness.ALL: 2>
        >>> chain.reset()
        >>> chain.is_installed
        False
    """

    def __init__(self, configuration: Any = Configuration):
        """Initialize handler chain manager.

        Args:
            configuration: Object exposing the error handler slots
        """
        self._configuration = configuration
        self._mode = Permissiveness.OFF
        self._previous: Dict[str, Optional[ErrorHandler]] = {}
        self._originals: Dict[str, Optional[ErrorHandler]] = {}
        self._installed: Dict[str, ErrorHandler] = {}

    @property
    def mode(self) -> Permissiveness:
        """Current permissiveness."""
        return self._mode

    @property
    def is_installed(self) -> bool:
        """Whether any slot currently holds this manager's wrapper."""
        return any(
            getattr(self._configuration, slot) is wrapper
            for slot, wrapper in self._installed.items()
        )

    def previous_handler(self, slot: str) -> Optional[ErrorHandler]:
        """Handler the wrapper in slot delegates to, if any."""
        return self._previous.get(slot)

    def activate(self, mode: Permissiveness) -> None:
        """Install the wrappers if needed and raise the mode to at least mode.

        Args:
            mode: INSTANCE_ONLY or ALL

        Raises:
            ValueError: If mode is OFF (use reset() instead)
        """
        if mode is Permissiveness.OFF:
            raise ValueError("Cannot activate Permissiveness.OFF, call reset() instead")

        for slot in HANDLER_SLOTS:
            current = getattr(self._configuration, slot)
            if current is not None and current is self._installed.get(slot):
                continue
            wrapper = self._wrap(slot, current)
            self._previous[slot] = current
            self._originals.setdefault(slot, current)
            self._installed[slot] = wrapper
            setattr(self._configuration, slot, wrapper)
            _LOGGER.debug(
                "Installed double-forgiving handler in %s (previous: %r)",
                slot,
                current,
            )

        if mode > self._mode:
            _LOGGER.debug(
                "Raising permissiveness from %s to %s",
                self._mode.name,
                mode.name,
            )
            self._mode = mode

    def reset(self) -> None:
        """Remove the wrappers, restoring the first captured handlers, and turn off.

        A slot re-wrapped after someone replaced the wrapper still gets the
        handler it held before the first activation. Slots that no longer
        hold the wrapper are left alone. Safe to call when nothing was
        activated.
        """
        for slot, wrapper in self._installed.items():
            if getattr(self._configuration, slot) is wrapper:
                setattr(self._configuration, slot, self._originals.get(slot))
            else:
                _LOGGER.debug("%s was replaced after activation, leaving it", slot)

        if self._installed or self._mode is not Permissiveness.OFF:
            _LOGGER.debug("Reset permissiveness from %s", self._mode.name)

        self._installed.clear()
        self._previous.clear()
        self._originals.clear()
        self._mode = Permissiveness.OFF

    def _wrap(self, slot: str, previous: Optional[ErrorHandler]) -> ErrorHandler:
        """Build the forgiving handler for slot, delegating to previous."""

        def forgiving_handler(failure: TypeCheckFailure) -> Any:
            if forgives(failure.value, failure.expected, self._mode):
                _LOGGER.debug("Forgave %s failure: %s", slot, failure.message)
                return None
            if previous is None:
                return raise_type_check_error(failure)
            return previous(failure)

        forgiving_handler.__qualname__ = f"{type(self).__name__}.{slot}"
        return forgiving_handler
