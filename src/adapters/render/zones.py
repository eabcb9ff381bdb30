"""
Zone layout and template resolution for shape sets.

Template names are resolved against a registry filled once at startup;
a shape set is grouped by zone and each zone rendered in position order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from src.components.display import (
    RegistryFrozenError,
    Shape,
    ShapeRendererPort,
    ShapeSet,
    TemplateNotFoundError,
)

logger = logging.getLogger(__name__)


class TemplateRegistry:
    """Template name -> shape renderer."""

    def __init__(self) -> None:
        self._renderers: dict[str, ShapeRendererPort] = {}
        self._frozen = False

    def register(self, template_name: str, renderer: ShapeRendererPort) -> None:
        if self._frozen:
            raise RegistryFrozenError("Template registry is frozen")
        self._renderers[template_name] = renderer
        logger.debug("Registered template %s", template_name)

    def freeze(self) -> None:
        self._frozen = True

    def __contains__(self, template_name: object) -> bool:
        return template_name in self._renderers

    def resolve(self, template_name: str) -> ShapeRendererPort:
        try:
            return self._renderers[template_name]
        except KeyError:
            raise TemplateNotFoundError(template_name) from None

    def validate(self, template_names: Iterable[str]) -> None:
        """Fail fast when a declared template has no renderer."""
        missing = sorted({name for name in template_names if name not in self._renderers})
        if missing:
            raise TemplateNotFoundError(", ".join(missing))

    def render(self, shape: Shape) -> str:
        return self.resolve(shape.template_name)(shape)


@dataclass(frozen=True)
class Zone:
    """A layout region and its shapes in render order."""

    name: str
    shapes: tuple[Shape, ...]


def arrange(shapes: ShapeSet, zone_order: Sequence[str] = ()) -> list[Zone]:
    """
    Group shapes by zone.

    Shapes inside a zone are ordered by (order, sequence). Zones follow
    ``zone_order``; zones not listed there come last, sorted by name.
    """
    grouped: dict[str, list[Shape]] = {}
    for shape in shapes:
        grouped.setdefault(shape.zone, []).append(shape)

    known = [name for name in zone_order if name in grouped]
    extra = sorted(name for name in grouped if name not in zone_order)

    return [
        Zone(
            name=name,
            shapes=tuple(sorted(grouped[name], key=lambda s: (s.order, s.sequence))),
        )
        for name in known + extra
    ]


def render_zones(zones: Sequence[Zone], templates: TemplateRegistry) -> dict[str, str]:
    """Render each zone to the concatenation of its shapes' fragments."""
    return {
        zone.name: "".join(templates.render(shape) for shape in zone.shapes)
        for zone in zones
    }
