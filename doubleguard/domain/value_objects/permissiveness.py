"""Permissiveness levels for forgiving test doubles."""

from __future__ import annotations

from enum import IntEnum

from ...const import MODE_ALL, MODE_INSTANCE, MODE_OFF


class Permissiveness(IntEnum):
    """Ordered forgiveness levels.

    Levels are ordered so that an upgrade is a plain comparison: ``ALL``
    forgives everything ``INSTANCE_ONLY`` does, and more.

    Example:
        >>> Permissiveness.ALL > Permissiveness.INSTANCE_ONLY
        True
        >>> Permissiveness.from_name("instance")
        <Permissiveness.INSTANCE_ONLY: 1>
    """

    OFF = 0
    INSTANCE_ONLY = 1
    ALL = 2

    @classmethod
    def from_name(cls, name: str) -> Permissiveness:
        """Look up a level by its configuration name.

        Args:
            name: One of "off", "instance" or "all"

        Returns:
            Matching Permissiveness level

        Raises:
            ValueError: If name is not a known level
        """
        try:
            return _BY_NAME[name]
        except KeyError:
            raise ValueError(
                f"Unknown permissiveness {name!r}, expected one of {sorted(_BY_NAME)}"
            ) from None

    @property
    def config_name(self) -> str:
        """Name used for this level in configuration."""
        return _NAMES[self]


_BY_NAME = {
    MODE_OFF: Permissiveness.OFF,
    MODE_INSTANCE: Permissiveness.INSTANCE_ONLY,
    MODE_ALL: Permissiveness.ALL,
}
_NAMES = {level: name for name, level in _BY_NAME.items()}
