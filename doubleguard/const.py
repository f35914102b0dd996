"""Constants for the doubleguard library.

Names shared by the runtime checker, the handler chain and the pytest
plugin live here so they are spelled the same everywhere.
"""

from __future__ import annotations

DOMAIN = "doubleguard"

# Process-wide error handler slots on the runtime Configuration
INLINE_HANDLER_SLOT = "inline_type_error_handler"
CALL_HANDLER_SLOT = "call_validation_error_handler"
HANDLER_SLOTS = (INLINE_HANDLER_SLOT, CALL_HANDLER_SLOT)

# Permissiveness names accepted by configuration
MODE_OFF = "off"
MODE_INSTANCE = "instance"
MODE_ALL = "all"
MODES = (MODE_OFF, MODE_INSTANCE, MODE_ALL)

# Option keys
CONF_MODE = "mode"

# pytest integration
INI_MODE = "doubleguard_mode"
MARKER_ALLOW_INSTANCE_DOUBLES = "allow_instance_doubles"
MARKER_ALLOW_DOUBLES = "allow_doubles"

# Attribute written into a double's __dict__ by the doubleguard.doubles factories
PROVENANCE_ATTRIBUTE = "_doubleguard_kind"

# Failure message formatting
MAX_VALUE_REPR = 80
