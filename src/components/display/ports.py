"""
Display component port definitions.
"""

from __future__ import annotations

from typing import Any, Protocol

from .models import BuildDisplayContext, Shape, ShapeSet


class DisplayDriverPort(Protocol):
    """A driver producing shapes for one entity type."""

    entity_type: type

    def build_display(self, model: Any, context: BuildDisplayContext) -> ShapeSet:
        """Build the filtered shape set for the model."""
        ...


class ShapeRendererPort(Protocol):
    """Renders one shape to an HTML fragment."""

    def __call__(self, shape: Shape) -> str:
        ...


class DisplayRulesPort(Protocol):
    """Port for display configuration."""

    def get_display_types(self) -> tuple[str, ...]:
        """Known display types (e.g. Detail, Summary)."""
        ...

    def get_zones(self) -> tuple[str, ...]:
        """Zone names in layout order."""
        ...
