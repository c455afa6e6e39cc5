"""Pluggy hook specifications for solidctl extensions.

Each hook contributes new variants to an open registry. Calling code
that works against the abstraction picks them up unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from solidctl.domain.animals import Animal
    from solidctl.domain.contracts import PaymentProcessor
    from solidctl.domain.shapes import AreaMeasurable

hookspec = pluggy.HookspecMarker("solidctl")


class SolidctlHookSpec:
    """Hook specifications for the solidctl plugin system."""

    @hookspec
    def register_shapes(self) -> dict[str, type[AreaMeasurable]] | None:
        """Return name -> shape class mappings to extend SHAPE_REGISTRY."""

    @hookspec
    def register_animals(self) -> dict[str, type[Animal]] | None:
        """Return name -> animal class mappings to extend ANIMAL_REGISTRY."""

    @hookspec
    def register_payment_processors(self) -> dict[str, type[PaymentProcessor]] | None:
        """Return name -> processor class mappings to extend PAYMENT_PROCESSORS."""
