"""Sample classes used as type annotations and double targets in tests.

Example:
    >>> from tests.fixtures.sample_types import Person
"""
