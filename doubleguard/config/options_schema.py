"""Voluptuous schema for doubleguard options."""

from __future__ import annotations

import logging
from typing import Any, Dict

import voluptuous as vol

from ..const import CONF_MODE, DOMAIN, MODE_OFF, MODES
from ..domain.exceptions import InvalidOptionsError
from ..domain.value_objects import Permissiveness
from .plugin_options import PluginOptions

_LOGGER = logging.getLogger(__name__)

OPTIONS_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_MODE, default=MODE_OFF): vol.All(
            str, vol.Strip, vol.Lower, vol.In(MODES)
        ),
    }
)


def load_options(raw: Dict[str, Any]) -> PluginOptions:
    """Validate raw options and build PluginOptions.

    Args:
        raw: Option mapping, e.g. read from the pytest ini file

    Returns:
        PluginOptions with defaults applied

    Raises:
        InvalidOptionsError: If an option is unknown or has a bad value

    Example:
        >>> load_options({"mode": " ALL "}).default_mode
        <Permissiveness.ALL: 2>
        >>> load_options({}).default_mode
        <Permissiveness.OFF: 0>
    """
    try:
        validated = OPTIONS_SCHEMA(raw)
    except vol.Invalid as err:
        raise InvalidOptionsError(f"Invalid {DOMAIN} options: {err}") from err

    options = PluginOptions(default_mode=Permissiveness.from_name(validated[CONF_MODE]))
    _LOGGER.debug("Loaded options: %s", options)
    return options
