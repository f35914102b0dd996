"""Pytest configuration and fixtures for doubleguard tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add repository root to Python path so tests.fixtures is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from unittest.mock import Mock, NonCallableMock, create_autospec

from doubleguard import Configuration, reset

from tests.fixtures.sample_types import Person, Rectangle, Zoo


@pytest.fixture(autouse=True)
def restore_error_handlers():
    """Leave the runtime checker strict after every test."""
    yield
    reset()
    Configuration.inline_type_error_handler = None
    Configuration.call_validation_error_handler = None


@pytest.fixture
def another_person():
    """Verifying instance double of Person."""
    double = create_autospec(Person, instance=True)
    double.full_name.return_value = "Yasmin Collins"
    return double


@pytest.fixture
def person_double(another_person):
    """Verifying instance double of Person whose reversed() is another double."""
    double = create_autospec(Person, instance=True)
    double.full_name.return_value = "Steph Giles"
    double.reversed.return_value = another_person
    return double


@pytest.fixture
def real_person():
    """A real Person."""
    return Person("Sam", "Giles")


@pytest.fixture
def string_double():
    """Verifying instance double of str."""
    return NonCallableMock(spec=str)


@pytest.fixture
def animal_double():
    """Verifying instance double of a nested class."""
    return Mock(spec=Zoo.Animal)


@pytest.fixture
def rectangle_class_double():
    """Class double standing in for Rectangle itself."""
    return create_autospec(Rectangle)


@pytest.fixture
def generic_double():
    """Double with no verification target."""
    return Mock(name="message")
