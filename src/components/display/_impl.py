"""
Display drivers, shape construction and the display manager.

Drivers declare shapes for one entity type. The manager runs every driver
registered for an entity and concatenates their shape sets. Both the
driver registry and the template registry are filled once at process
start and frozen; nothing here holds per-call state.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any

from .models import (
    BuildDisplayContext,
    InvalidEntityError,
    InvalidPlacementError,
    Placement,
    RegistryFrozenError,
    Shape,
    ShapeSet,
)
from .ports import DisplayDriverPort

logger = logging.getLogger(__name__)


# --- Locations ---


def parse_location(location: str) -> Placement:
    """
    Parse a ``"Zone: position"`` location string.

    ``"Header: 2"`` -> Placement("Header", 2). A bare zone name such as
    ``"Content"`` is placed at order 0.

    Raises:
        InvalidPlacementError: empty zone or non-integer position
    """
    zone, _, position = location.partition(":")
    zone = zone.strip()
    if not zone:
        raise InvalidPlacementError(f"Location {location!r} has no zone")

    position = position.strip()
    if not position:
        return Placement(zone=zone)

    try:
        order = int(position)
    except ValueError as e:
        raise InvalidPlacementError(
            f"Location {location!r} has a non-integer position {position!r}"
        ) from e

    return Placement(zone=zone, order=order)


def display_template_name(entity_type: type, part: str) -> str:
    """Conventional template name, e.g. ``Book_Display_Title``."""
    return f"{entity_type.__name__}_Display_{part}"


# --- Shape Construction ---


@dataclass(frozen=True)
class ShapeResult:
    """A shape bound to a model but not placed in any zone yet."""

    template_name: str
    entity: Any

    def location(self, location: str, *, display_type: str | None = None) -> Shape:
        """Return a new shape placed at ``location``."""
        placement = parse_location(location)
        return Shape(
            template_name=self.template_name,
            entity=self.entity,
            zone=placement.zone,
            order=placement.order,
            display_mode=display_type or None,
        )


def view(template_name: str, model: Any) -> ShapeResult:
    """Bind a template name to a model."""
    return ShapeResult(template_name=template_name, entity=model)


def combine(*shapes: Shape | ShapeResult) -> ShapeSet:
    """
    Combine placed shapes into one shape set, numbered in declaration order.

    Raises:
        InvalidPlacementError: a shape was never given a location
        InvalidEntityError: shapes are bound to different entities
    """
    combined: list[Shape] = []
    for index, shape in enumerate(shapes):
        if not isinstance(shape, Shape):
            raise InvalidPlacementError(f"Shape {shape.template_name!r} has no location")
        if combined and shape.entity is not combined[0].entity:
            raise InvalidEntityError(
                f"Shape {shape.template_name!r} is bound to a different entity"
            )
        combined.append(replace(shape, sequence=index))
    return tuple(combined)


def filter_shapes(shapes: ShapeSet, display_type: str | None) -> ShapeSet:
    """Keep shapes without a display mode or with exactly ``display_type``."""
    return tuple(shape for shape in shapes if shape.matches(display_type))


# --- Drivers ---


class DisplayDriver(ABC):
    """
    Base class for display drivers.

    Subclasses set ``entity_type`` and implement ``display``. Callers use
    ``build_display``, which validates the model and applies the display
    type filter.
    """

    entity_type: type = object

    @abstractmethod
    def display(self, model: Any, context: BuildDisplayContext) -> ShapeSet:
        """Declare every shape this driver can produce for ``model``."""
        ...

    def build_display(self, model: Any, context: BuildDisplayContext) -> ShapeSet:
        if model is None:
            raise InvalidEntityError(f"{type(self).__name__} received no entity")
        if not isinstance(model, self.entity_type):
            raise InvalidEntityError(
                f"{type(self).__name__} displays {self.entity_type.__name__}, "
                f"got {type(model).__name__}"
            )

        shapes = filter_shapes(self.display(model, context), context.display_type)
        logger.debug(
            "%s built %d shape(s) for display type %r",
            type(self).__name__,
            len(shapes),
            context.display_type,
        )
        return shapes


class DisplayDriverRegistry:
    """
    Entity type -> drivers, in registration order.

    Filled during startup, then frozen and read-only for the life of the
    process.
    """

    def __init__(self) -> None:
        self._drivers: dict[type, list[DisplayDriverPort]] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, driver: DisplayDriverPort, entity_type: type | None = None) -> None:
        if self._frozen:
            raise RegistryFrozenError("Driver registry is frozen")
        key = entity_type or driver.entity_type
        self._drivers.setdefault(key, []).append(driver)
        logger.debug("Registered %s for %s", type(driver).__name__, key.__name__)

    def freeze(self) -> None:
        self._frozen = True

    def drivers_for(self, entity: Any) -> list[DisplayDriverPort]:
        """Drivers registered for the entity's exact type."""
        return list(self._drivers.get(type(entity), []))

    def entity_types(self) -> list[type]:
        return list(self._drivers)


class DisplayManager:
    """Runs all drivers registered for an entity and combines their shapes."""

    def __init__(self, registry: DisplayDriverRegistry) -> None:
        self._registry = registry

    def build_display(self, entity: Any, display_type: str | None = None) -> ShapeSet:
        """
        Build the shape set for ``entity``.

        Raises:
            InvalidEntityError: entity is None
        """
        if entity is None:
            raise InvalidEntityError("No entity to display")

        drivers = self._registry.drivers_for(entity)
        if not drivers:
            logger.debug("No display drivers registered for %s", type(entity).__name__)
            return ()

        context = BuildDisplayContext(display_type=display_type)
        shapes: list[Shape] = []
        for driver in drivers:
            shapes.extend(driver.build_display(entity, context))

        return tuple(replace(shape, sequence=index) for index, shape in enumerate(shapes))
