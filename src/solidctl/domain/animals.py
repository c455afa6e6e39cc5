"""Animals: polymorphism without type inspection.

Each animal knows its own sound. Code that makes animals speak never asks
which animal it holds.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from solidctl.domain.errors import InvalidArgument
from solidctl.domain.guards import require_text


class Animal(ABC):
    """An animal that can speak."""

    kind: ClassVar[str] = ""

    def __init__(self, name: str | None = None) -> None:
        self.name = require_text(name, "name") if name is not None else self.kind.title()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    @abstractmethod
    def speak(self) -> str:
        """The sound this animal makes."""
        ...


class Dog(Animal):
    kind: ClassVar[str] = "dog"

    def speak(self) -> str:
        return "Woof"


class Cat(Animal):
    kind: ClassVar[str] = "cat"

    def speak(self) -> str:
        return "Meow"


class Bird(Animal):
    kind: ClassVar[str] = "bird"

    def speak(self) -> str:
        return "Tweet"


ANIMAL_REGISTRY: dict[str, type[Animal]] = {}

_BUILTIN_ANIMALS: tuple[type[Animal], ...] = (Dog, Cat, Bird)


def register_animal(name: str, animal_cls: type[Animal]) -> None:
    """Register an animal class under *name*. Built-in names are reserved."""
    normalized = name.strip().lower()
    if not normalized:
        msg = "Animal name must not be empty"
        raise ValueError(msg)
    if not isinstance(animal_cls, type) or not issubclass(animal_cls, Animal):
        msg = f"Animal {normalized!r} must extend Animal"
        raise TypeError(msg)
    existing = ANIMAL_REGISTRY.get(normalized)
    if existing is not None and existing is not animal_cls:
        msg = f"Animal {normalized!r} is already registered"
        raise ValueError(msg)
    ANIMAL_REGISTRY[normalized] = animal_cls


def create_animal(kind: str, name: str | None = None) -> Animal:
    """Instantiate the animal registered under *kind*."""
    normalized = require_text(kind, "kind").lower()
    animal_cls = ANIMAL_REGISTRY.get(normalized)
    if animal_cls is None:
        known = ", ".join(sorted(ANIMAL_REGISTRY))
        raise InvalidArgument(f"Unknown animal {kind!r} (known: {known})", kind=kind)
    return animal_cls(name)


def _register_builtins() -> None:
    for animal_cls in _BUILTIN_ANIMALS:
        ANIMAL_REGISTRY[animal_cls.kind] = animal_cls


_register_builtins()
