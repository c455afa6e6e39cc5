"""Vehicles: shared behavior through composition, not a base-class engine.

Motorized vehicles *have* an :class:`Engine`; the engine owns the
start/stop state. A bicycle satisfies the same :class:`Vehicle`
capability without pretending to have an engine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from solidctl.domain.errors import InvalidArgument, InvalidState
from solidctl.domain.guards import require_text


class Engine:
    """Start/stop state shared by motorized vehicles."""

    def __init__(self, horsepower: int = 100) -> None:
        if isinstance(horsepower, bool) or not isinstance(horsepower, int) or horsepower <= 0:
            raise InvalidArgument(
                "horsepower must be a positive integer", field="horsepower", value=horsepower
            )
        self.horsepower = horsepower
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            raise InvalidState("Engine is already running")
        self._running = True

    def stop(self) -> None:
        if not self._running:
            raise InvalidState("Engine is not running")
        self._running = False


class Vehicle(ABC):
    """Anything that can be started and stopped."""

    kind: ClassVar[str] = ""

    def __init__(self, model: str) -> None:
        self.model = require_text(model, "model")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self.model!r})"

    @property
    @abstractmethod
    def moving(self) -> bool:
        """Whether the vehicle is currently under way."""
        ...

    @abstractmethod
    def start(self) -> str:
        """Get under way; returns a short description of what happened."""
        ...

    @abstractmethod
    def stop(self) -> str:
        """Come to a halt; returns a short description of what happened."""
        ...


class _Motorized(Vehicle):
    """Vehicle that delegates start/stop to a composed engine."""

    def __init__(self, model: str, engine: Engine | None = None) -> None:
        super().__init__(model)
        self.engine = engine if engine is not None else Engine()

    @property
    def moving(self) -> bool:
        return self.engine.running

    def start(self) -> str:
        self.engine.start()
        return f"{self.model}: engine started ({self.engine.horsepower} hp)"

    def stop(self) -> str:
        self.engine.stop()
        return f"{self.model}: engine stopped"


class Car(_Motorized):
    kind: ClassVar[str] = "car"


class Motorcycle(_Motorized):
    kind: ClassVar[str] = "motorcycle"


class Bicycle(Vehicle):
    kind: ClassVar[str] = "bicycle"

    def __init__(self, model: str) -> None:
        super().__init__(model)
        self._pedalling = False

    @property
    def moving(self) -> bool:
        return self._pedalling

    def start(self) -> str:
        if self._pedalling:
            raise InvalidState(f"{self.model} is already moving")
        self._pedalling = True
        return f"{self.model}: pedalling"

    def stop(self) -> str:
        if not self._pedalling:
            raise InvalidState(f"{self.model} is not moving")
        self._pedalling = False
        return f"{self.model}: braked"


VEHICLE_TYPES: dict[str, type[Vehicle]] = {
    cls.kind: cls for cls in (Car, Motorcycle, Bicycle)
}


def parse_vehicle(token: str) -> Vehicle:
    """Build a vehicle from a ``kind:model`` token, e.g. ``car:Model 3``."""
    text = require_text(token, "vehicle")
    kind, sep, model = text.partition(":")
    vehicle_cls = VEHICLE_TYPES.get(kind.strip().lower())
    if vehicle_cls is None:
        known = ", ".join(sorted(VEHICLE_TYPES))
        raise InvalidArgument(f"Unknown vehicle {kind!r} (known: {known})", kind=kind)
    if not sep:
        raise InvalidArgument(f"Vehicle {text!r} must look like kind:model", vehicle=text)
    return vehicle_cls(model)
