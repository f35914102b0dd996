"""Tests for the double factories."""

from unittest.mock import NonCallableMagicMock

import pytest

from doubleguard import (
    allow_doubles,
    allow_instance_doubles,
    class_double,
    double,
    instance_double,
    let,
    object_double,
)

from tests.fixtures.sample_types import Greeter, Person, Rectangle, rectangular_class


class TestInstanceDouble:
    """Test instance_double()."""

    def test_stubs_method_return_values(self):
        """Test that keyword stubs configure method return values."""
        person = instance_double(Person, full_name="Steph Giles")
        assert person.full_name() == "Steph Giles"

    def test_verifies_against_class(self):
        """Test that the double only has the class's attributes."""
        person = instance_double(Person)
        with pytest.raises(AttributeError):
            person.age
        with pytest.raises(AttributeError):
            instance_double(Person, age=3)

    def test_is_not_callable(self):
        """Test that an instance double of a plain class cannot be called."""
        assert isinstance(instance_double(Person), NonCallableMagicMock)

    def test_requires_class(self):
        """Test that a non-class is refused."""
        with pytest.raises(TypeError, match="Expected a class, got str"):
            instance_double("Person")

    def test_forgiven_in_instance_mode(self):
        """Test the double passes checks once instance doubles are allowed."""
        allow_instance_doubles()
        assert Greeter(instance_double(Person, full_name="Steph Giles")).greet() == (
            "Hello Steph Giles"
        )


class TestClassDouble:
    """Test class_double()."""

    def test_call_returns_instance_double(self):
        """Test that calling the class double builds an instance of the class."""
        klass = class_double(Rectangle)
        assert isinstance(klass(), Rectangle)

    def test_requires_class(self):
        """Test that a non-class is refused."""
        with pytest.raises(TypeError):
            class_double(Rectangle())

    def test_forgiven_only_in_all_mode(self):
        """Test class doubles need allow_doubles()."""
        klass = class_double(Rectangle)
        allow_instance_doubles()
        with pytest.raises(TypeError):
            rectangular_class(klass)

        allow_doubles()
        rectangular_class(klass)


class TestObjectDouble:
    """Test object_double()."""

    def test_stubs(self):
        """Test stubbing a method of the object."""
        hello = object_double("Hello", upper="HELLO")
        assert hello.upper() == "HELLO"

    def test_forgiven_only_in_all_mode(self):
        """Test object doubles need allow_doubles()."""
        hello = object_double("Hello")
        allow_instance_doubles()
        with pytest.raises(TypeError):
            let(hello, str)

        allow_doubles()
        assert let(hello, str) is hello


class TestDouble:
    """Test double()."""

    def test_attributes(self):
        """Test that keyword arguments become attributes."""
        message = double("message", upper="HELLO")
        assert message.upper == "HELLO"

    def test_forgiven_only_in_all_mode(self):
        """Test generic doubles need allow_doubles()."""
        message = double("message")
        allow_instance_doubles()
        with pytest.raises(TypeError):
            let(message, str)

        allow_doubles()
        assert let(message, Person) is message
