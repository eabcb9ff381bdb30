"""
Display component models.

Shapes are immutable: placing a shape returns a new value, nothing is
mutated after construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# --- Errors ---


class DisplayError(Exception):
    """Base class for display composition errors."""


class InvalidEntityError(DisplayError, ValueError):
    """Raised when a driver is asked to display a missing or foreign entity."""


class InvalidPlacementError(DisplayError, ValueError):
    """Raised for malformed location strings or unplaced shapes."""


class RegistryFrozenError(DisplayError, RuntimeError):
    """Raised when registering into a registry after startup."""


class TemplateNotFoundError(DisplayError, KeyError):
    """Raised when a template name has no registered renderer."""


@dataclass(frozen=True)
class DisplayValidationError:
    """Display validation error."""

    code: str
    message: str
    field_name: str | None = None


# --- Shapes ---


@dataclass(frozen=True)
class Placement:
    """Zone and position of a shape, e.g. ``Header: 1``."""

    zone: str
    order: int = 0


@dataclass(frozen=True)
class Shape:
    """
    A renderable fragment bound to an entity and a template name.

    ``display_mode`` of None means the shape is included for every
    display type. ``sequence`` is the declaration index inside the
    owning shape set and breaks ties between equal zone/order pairs.
    """

    template_name: str
    entity: Any
    zone: str
    order: int = 0
    display_mode: str | None = None
    sequence: int = 0

    @property
    def placement(self) -> Placement:
        return Placement(zone=self.zone, order=self.order)

    def matches(self, display_type: str | None) -> bool:
        """Exact, case-sensitive display type match."""
        return self.display_mode is None or self.display_mode == display_type


ShapeSet = tuple[Shape, ...]


@dataclass(frozen=True)
class BuildDisplayContext:
    """Context handed to drivers for one display call."""

    display_type: str | None = None


# --- Component I/O ---


@dataclass(frozen=True)
class BuildDisplayInput:
    """Input for building the display of any registered entity."""

    entity: Any
    display_type: str | None = None


@dataclass(frozen=True)
class BuildDisplayOutput:
    """Output from building a display."""

    shapes: ShapeSet = ()
    display_type: str | None = None
    errors: list[DisplayValidationError] = field(default_factory=list)
    success: bool = True
