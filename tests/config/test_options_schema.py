"""Tests for option validation."""

from dataclasses import FrozenInstanceError

import pytest
import voluptuous as vol

from doubleguard.config import OPTIONS_SCHEMA, PluginOptions, load_options
from doubleguard.domain.exceptions import InvalidOptionsError
from doubleguard.domain.value_objects import Permissiveness


class TestOptionsSchema:
    """Test the raw voluptuous schema."""

    def test_default_mode(self):
        """Test that mode defaults to off."""
        assert OPTIONS_SCHEMA({}) == {"mode": "off"}

    def test_normalises_mode(self):
        """Test that surrounding whitespace and case are ignored."""
        assert OPTIONS_SCHEMA({"mode": "  Instance "}) == {"mode": "instance"}

    def test_rejects_unknown_key(self):
        """Test that unknown options are errors."""
        with pytest.raises(vol.Invalid):
            OPTIONS_SCHEMA({"strict": True})


class TestLoadOptions:
    """Test building PluginOptions."""

    @pytest.mark.parametrize(
        "raw,mode",
        [
            ({}, Permissiveness.OFF),
            ({"mode": "off"}, Permissiveness.OFF),
            ({"mode": "instance"}, Permissiveness.INSTANCE_ONLY),
            ({"mode": "ALL"}, Permissiveness.ALL),
        ],
    )
    def test_modes(self, raw, mode):
        """Test each accepted mode."""
        assert load_options(raw).default_mode is mode

    @pytest.mark.parametrize("raw", [{"mode": "everything"}, {"mode": 2}, {"other": "x"}])
    def test_invalid_raises_error(self, raw):
        """Test that bad options raise InvalidOptionsError."""
        with pytest.raises(InvalidOptionsError, match="Invalid doubleguard options"):
            load_options(raw)

    def test_options_are_immutable(self):
        """Test that PluginOptions cannot be modified."""
        options = PluginOptions()
        assert options.default_mode is Permissiveness.OFF
        with pytest.raises(FrozenInstanceError):
            options.default_mode = Permissiveness.ALL
