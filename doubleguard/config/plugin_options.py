"""PluginOptions value object.

Extracted from options_schema.py for one-class-per-file compliance.
"""

from dataclasses import dataclass

from ..domain.value_objects import Permissiveness


@dataclass(frozen=True)
class PluginOptions:
    """Validated options of the pytest integration.

    Attributes:
        default_mode: Permissiveness activated for every test
    """

    default_mode: Permissiveness = Permissiveness.OFF
