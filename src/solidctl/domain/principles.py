"""Catalogue of the design principles covered by the guides.

Each entry names the flaw the guide starts from, the remedy it applies,
and the module in this package that holds the refactored design.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from solidctl.domain.errors import InvalidArgument


class PrincipleFamily(StrEnum):
    OOP = "oop"
    SOLID = "solid"


@dataclass(frozen=True)
class Principle:
    key: str
    name: str
    family: PrincipleFamily
    summary: str
    violation: str
    remedy: str
    module: str


PRINCIPLES: tuple[Principle, ...] = (
    Principle(
        key="encapsulation",
        name="Encapsulation",
        family=PrincipleFamily.OOP,
        summary="An object guards its own state and exposes behavior, not fields.",
        violation="A public balance field that any caller can set below zero.",
        remedy="Private balance changed only through validated deposit/withdraw.",
        module="solidctl.domain.account",
    ),
    Principle(
        key="inheritance",
        name="Inheritance",
        family=PrincipleFamily.OOP,
        summary="Reuse behavior without coupling every subclass to a fragile base.",
        violation="A Vehicle base class with an engine that a bicycle must inherit.",
        remedy="A Vehicle capability plus a composed Engine helper.",
        module="solidctl.domain.vehicles",
    ),
    Principle(
        key="abstraction",
        name="Abstraction",
        family=PrincipleFamily.OOP,
        summary="Callers depend on what an object does, not how it does it.",
        violation="Callers compute areas from raw width/height/radius fields.",
        remedy="A single area() operation each shape implements.",
        module="solidctl.domain.shapes",
    ),
    Principle(
        key="polymorphism",
        name="Polymorphism",
        family=PrincipleFamily.OOP,
        summary="One call site works for every variant.",
        violation="isinstance checks and casts to pick each animal's sound.",
        remedy="Each animal implements speak(); callers never inspect the type.",
        module="solidctl.domain.animals",
    ),
    Principle(
        key="coupling",
        name="Loose coupling",
        family=PrincipleFamily.OOP,
        summary="Collaborators are replaceable without touching their users.",
        violation="An order service that instantiates a concrete credit-card client.",
        remedy="The payment processor is injected through its contract.",
        module="solidctl.services.orders",
    ),
    Principle(
        key="srp",
        name="Single Responsibility",
        family=PrincipleFamily.SOLID,
        summary="A class has one reason to change.",
        violation="A user class that validates, stores, and logs itself.",
        remedy="User validates; a repository stores; a logger logs.",
        module="solidctl.services.users",
    ),
    Principle(
        key="ocp",
        name="Open/Closed",
        family=PrincipleFamily.SOLID,
        summary="Add variants without editing the code that uses them.",
        violation="An area calculator with one if-branch per shape type.",
        remedy="A shape registry and an area() abstraction.",
        module="solidctl.services.capabilities",
    ),
    Principle(
        key="lsp",
        name="Liskov Substitution",
        family=PrincipleFamily.SOLID,
        summary="A subtype must honor every promise of its base type.",
        violation="Square extends Rectangle and breaks independent width/height.",
        remedy="Square and Rectangle are unrelated siblings of AreaMeasurable.",
        module="solidctl.domain.shapes",
    ),
    Principle(
        key="isp",
        name="Interface Segregation",
        family=PrincipleFamily.SOLID,
        summary="No implementer is forced to support operations it cannot perform.",
        violation="A Shape interface with volume() that flat shapes stub out.",
        remedy="Separate AreaMeasurable and VolumeMeasurable abstractions.",
        module="solidctl.domain.shapes",
    ),
    Principle(
        key="dip",
        name="Dependency Inversion",
        family=PrincipleFamily.SOLID,
        summary="High-level policy depends on abstractions, not concrete details.",
        violation="A user service writing to a global list and printing to stdout.",
        remedy="Repository and logger contracts injected at construction.",
        module="solidctl.domain.contracts",
    ),
)


def list_principles(family: str | None = None) -> list[Principle]:
    """Return the catalogue, optionally filtered by *family*."""
    if family is None:
        return list(PRINCIPLES)
    try:
        wanted = PrincipleFamily(family.lower())
    except ValueError:
        raise InvalidArgument(f"Unknown principle family {family!r}", family=family) from None
    return [p for p in PRINCIPLES if p.family == wanted]


def get_principle(key: str) -> Principle:
    """Look up one principle by key (case-insensitive)."""
    normalized = key.strip().lower()
    for principle in PRINCIPLES:
        if principle.key == normalized:
            return principle
    raise InvalidArgument(f"Unknown principle {key!r}", key=key)
