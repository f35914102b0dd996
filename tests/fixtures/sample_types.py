"""Real classes with runtime-checked signatures, used as double targets."""

from __future__ import annotations

from typing import Iterable, List, NewType, Optional, Type, TypeVar, Union

from doubleguard import let, sig


class Person:
    """A person with a name."""

    @sig
    def __init__(self, forename: str, surname: str) -> None:
        self._forename = let(forename, str)
        self._surname = let(surname, str)

    @sig
    def full_name(self) -> str:
        return f"{self._forename} {self._surname}"

    @sig
    def reversed(self) -> Optional[Person]:
        return Person(self._surname, self._forename)

    @staticmethod
    @sig
    def identify(
        person: Union[str, Person, List[str]],
    ) -> Union[str, Person, List[str]]:
        return person


PersonLike = TypeVar("PersonLike", bound=Person)
PersonId = NewType("PersonId", Person)


@sig
def introduce(person: PersonLike) -> str:
    """Accept a Person or subclass through a bound TypeVar."""
    return f"This is {person.full_name()}"


class Greeter:
    """Greets a Person."""

    @sig
    def __init__(self, person: Person) -> None:
        self._person = let(person, Person)

    @sig
    def greet(self) -> str:
        return f"Hello {self._person.full_name()}"

    @sig
    def person(self) -> Person:
        return let(self._person, Person)

    @sig
    def reversed(self) -> Optional[Person]:
        return let(self._person.reversed(), Optional[Person])

    @sig
    def greet_others(self, others: Iterable[Person]) -> str:
        names = ", ".join(other.full_name() for other in others)
        return f"Hello {self._person.full_name()}, {names}"


class Zoo:
    """Namespace holding a nested class."""

    class Animal:
        pass


class Rectangle:
    pass


class Square(Rectangle):
    pass


class Triangle:
    pass


@sig
def rectangular_class(klass: Type[Rectangle]) -> None:
    """Accept Rectangle or one of its subclasses."""


class PassthroughSig:
    """Single checked str parameter."""

    @sig
    def __init__(self, message: str) -> None:
        self._message = message


class DoubleMethodArgument:
    """Single checked str parameter, also used as a non-verifying double name."""

    @sig
    def __init__(self, message: str) -> None:
        self._message = message
