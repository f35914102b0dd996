"""pytest integration for doubleguard.

Registered through the ``pytest11`` entry point. Every test starts with the
mode configured in the ini file (``doubleguard_mode``), raised by the
``allow_instance_doubles`` / ``allow_doubles`` markers, and always ends
with reset() so a relaxed mode never leaks into the next test.

Example:
    @pytest.mark.allow_doubles
    def test_greets_double():
        Greeter(create_autospec(Person, instance=True)).greet()
"""

from __future__ import annotations

import logging

import pytest

from .application.activation import handler_chain, reset
from .config import PluginOptions, load_options
from .const import (
    CONF_MODE,
    INI_MODE,
    MARKER_ALLOW_DOUBLES,
    MARKER_ALLOW_INSTANCE_DOUBLES,
    MODE_OFF,
    MODES,
)
from .domain.exceptions import InvalidOptionsError
from .domain.value_objects import Permissiveness

_LOGGER = logging.getLogger(__name__)

_OPTIONS_KEY = pytest.StashKey[PluginOptions]()


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register the ini option."""
    parser.addini(
        INI_MODE,
        help=f"Doubles accepted by runtime type checks in every test: {', '.join(MODES)}",
        default=MODE_OFF,
    )


def pytest_configure(config: pytest.Config) -> None:
    """Validate options and register markers."""
    config.addinivalue_line(
        "markers",
        f"{MARKER_ALLOW_INSTANCE_DOUBLES}: accept verifying instance doubles "
        "in runtime type checks for this test",
    )
    config.addinivalue_line(
        "markers",
        f"{MARKER_ALLOW_DOUBLES}: accept every kind of test double "
        "in runtime type checks for this test",
    )

    try:
        options = load_options({CONF_MODE: config.getini(INI_MODE)})
    except InvalidOptionsError as err:
        raise pytest.UsageError(str(err)) from err
    config.stash[_OPTIONS_KEY] = options


def _mode_for(item: pytest.Item, options: PluginOptions) -> Permissiveness:
    mode = options.default_mode
    if item.get_closest_marker(MARKER_ALLOW_DOUBLES) is not None:
        mode = max(mode, Permissiveness.ALL)
    elif item.get_closest_marker(MARKER_ALLOW_INSTANCE_DOUBLES) is not None:
        mode = max(mode, Permissiveness.INSTANCE_ONLY)
    return mode


@pytest.fixture(autouse=True)
def _doubleguard_lifecycle(request: pytest.FixtureRequest):
    """Activate the test's mode and always reset afterwards."""
    options = request.config.stash.get(_OPTIONS_KEY, PluginOptions())
    mode = _mode_for(request.node, options)
    if mode is not Permissiveness.OFF:
        _LOGGER.debug("Activating %s for %s", mode.name, request.node.nodeid)
        handler_chain().activate(mode)
    try:
        yield
    finally:
        reset()
