"""Configuration for doubleguard."""

from .options_schema import OPTIONS_SCHEMA, load_options
from .plugin_options import PluginOptions

__all__ = [
    "OPTIONS_SCHEMA",
    "PluginOptions",
    "load_options",
]
