"""Shape capabilities and the shape registry.

Two capability abstractions, segregated so no variant has to stub an
operation it cannot support:

- :class:`AreaMeasurable`: ``area()``; every shape.
- :class:`VolumeMeasurable`: ``volume()``; solids only.

``Square`` and ``Rectangle`` are independent siblings. A square is not
modelled as a rectangle whose sides can be set independently.

New shapes are added with :func:`register_shape` (or through the
``register_shapes`` plugin hook); calling code never changes.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from solidctl.domain.errors import InvalidArgument
from solidctl.domain.guards import require_dimension, require_text


class AreaMeasurable(ABC):
    """Anything with a measurable (surface) area."""

    kind: ClassVar[str] = ""
    dimensions: ClassVar[tuple[str, ...]] = ()

    @abstractmethod
    def area(self) -> float:
        """Area in square units."""
        ...

    @classmethod
    def from_dimensions(cls, values: list[float]) -> AreaMeasurable:
        """Build an instance from positional dimension values."""
        if len(values) != len(cls.dimensions):
            names = "x".join(cls.dimensions)
            msg = f"{cls.kind or cls.__name__} takes {len(cls.dimensions)} dimension(s): {names}"
            raise InvalidArgument(msg, kind=cls.kind, values=values)
        return cls(**dict(zip(cls.dimensions, values, strict=True)))


class VolumeMeasurable(ABC):
    """Anything that encloses a volume."""

    @abstractmethod
    def volume(self) -> float:
        """Volume in cubic units."""
        ...


# ---------------------------------------------------------------------------
# Flat shapes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Circle(AreaMeasurable):
    kind: ClassVar[str] = "circle"
    dimensions: ClassVar[tuple[str, ...]] = ("radius",)

    radius: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius", require_dimension(self.radius, "radius"))

    def area(self) -> float:
        return math.pi * self.radius**2


@dataclass(frozen=True)
class Rectangle(AreaMeasurable):
    kind: ClassVar[str] = "rectangle"
    dimensions: ClassVar[tuple[str, ...]] = ("length", "width")

    length: float
    width: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "length", require_dimension(self.length, "length"))
        object.__setattr__(self, "width", require_dimension(self.width, "width"))

    def area(self) -> float:
        return self.length * self.width


@dataclass(frozen=True)
class Square(AreaMeasurable):
    kind: ClassVar[str] = "square"
    dimensions: ClassVar[tuple[str, ...]] = ("side",)

    side: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "side", require_dimension(self.side, "side"))

    def area(self) -> float:
        return self.side**2


# ---------------------------------------------------------------------------
# Solids
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Cube(AreaMeasurable, VolumeMeasurable):
    kind: ClassVar[str] = "cube"
    dimensions: ClassVar[tuple[str, ...]] = ("side",)

    side: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "side", require_dimension(self.side, "side"))

    def area(self) -> float:
        return 6 * self.side**2

    def volume(self) -> float:
        return self.side**3


@dataclass(frozen=True)
class Sphere(AreaMeasurable, VolumeMeasurable):
    kind: ClassVar[str] = "sphere"
    dimensions: ClassVar[tuple[str, ...]] = ("radius",)

    radius: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius", require_dimension(self.radius, "radius"))

    def area(self) -> float:
        return 4 * math.pi * self.radius**2

    def volume(self) -> float:
        return 4 / 3 * math.pi * self.radius**3


# ---------------------------------------------------------------------------
# Capability report
# ---------------------------------------------------------------------------

_CAPABILITIES: tuple[tuple[str, type], ...] = (
    ("area", AreaMeasurable),
    ("volume", VolumeMeasurable),
)


def capabilities(obj: object) -> frozenset[str]:
    """Names of the capability abstractions *obj* implements."""
    return frozenset(name for name, abstraction in _CAPABILITIES if isinstance(obj, abstraction))


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

SHAPE_REGISTRY: dict[str, type[AreaMeasurable]] = {}

_BUILTIN_SHAPES: tuple[type[AreaMeasurable], ...] = (Circle, Rectangle, Square, Cube, Sphere)


def register_shape(name: str, shape_cls: type[AreaMeasurable]) -> None:
    """Register a shape class under *name*.

    The class must implement :class:`AreaMeasurable`. Built-in names are
    reserved and cannot be overridden.
    """
    normalized = name.strip().lower()
    if not normalized:
        msg = "Shape name must not be empty"
        raise ValueError(msg)
    if not isinstance(shape_cls, type) or not issubclass(shape_cls, AreaMeasurable):
        msg = f"Shape {normalized!r} must implement AreaMeasurable"
        raise TypeError(msg)
    builtin = {cls.kind: cls for cls in _BUILTIN_SHAPES}.get(normalized)
    if builtin is not None and builtin is not shape_cls:
        msg = f"Shape {normalized!r} conflicts with a built-in registration"
        raise ValueError(msg)
    existing = SHAPE_REGISTRY.get(normalized)
    if existing is not None and existing is not shape_cls:
        msg = f"Shape {normalized!r} is already registered"
        raise ValueError(msg)
    SHAPE_REGISTRY[normalized] = shape_cls


def get_shape_class(name: str) -> type[AreaMeasurable]:
    """Look up a registered shape class.

    Raises:
        InvalidArgument: If no shape is registered under *name*.
    """
    normalized = name.strip().lower()
    try:
        return SHAPE_REGISTRY[normalized]
    except KeyError:
        known = ", ".join(sorted(SHAPE_REGISTRY))
        raise InvalidArgument(
            f"Unknown shape {name!r} (known: {known})", kind=name
        ) from None


def parse_shape(token: str) -> AreaMeasurable:
    """Build a shape from a ``kind:dim[xdim...]`` token.

    Examples: ``circle:2``, ``square:3``, ``rectangle:4x5``, ``cube:2``.
    """
    text = require_text(token, "shape")
    kind, sep, dims = text.partition(":")
    if not sep or not dims.strip():
        raise InvalidArgument(f"Shape {text!r} must look like kind:dimensions", shape=text)
    shape_cls = get_shape_class(kind)
    values: list[float] = []
    for raw in dims.lower().split("x"):
        try:
            values.append(float(raw))
        except ValueError:
            raise InvalidArgument(
                f"Dimension {raw!r} in {text!r} is not a number", shape=text
            ) from None
    return shape_cls.from_dimensions(values)


def _register_builtins() -> None:
    for shape_cls in _BUILTIN_SHAPES:
        SHAPE_REGISTRY[shape_cls.kind] = shape_cls


_register_builtins()
