"""Calling code for the capability abstractions.

Every function here accepts the abstraction and calls its operation.
None of them look at the concrete class, so new shapes, animals, or
vehicles work here unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from solidctl.domain.animals import Animal
from solidctl.domain.shapes import AreaMeasurable, VolumeMeasurable, capabilities
from solidctl.domain.vehicles import Vehicle


def total_area(shapes: Iterable[AreaMeasurable]) -> float:
    return sum(shape.area() for shape in shapes)


def total_volume(solids: Iterable[VolumeMeasurable]) -> float:
    return sum(solid.volume() for solid in solids)


def area_report(shapes: Iterable[AreaMeasurable]) -> list[dict[str, Any]]:
    """One row per shape: its kind, area, and supported capabilities."""
    return [
        {
            "shape": repr(shape),
            "kind": shape.kind,
            "area": shape.area(),
            "capabilities": sorted(capabilities(shape)),
        }
        for shape in shapes
    ]


def chorus(animals: Iterable[Animal]) -> list[str]:
    return [f"{animal.name}: {animal.speak()}" for animal in animals]


def drive_all(vehicles: Iterable[Vehicle]) -> list[str]:
    """Start then stop each vehicle, collecting what each one reports."""
    events: list[str] = []
    for vehicle in vehicles:
        events.append(vehicle.start())
        events.append(vehicle.stop())
    return events
