"""
Display component - shape composition for content display.
"""

from ._impl import (
    DisplayDriver,
    DisplayDriverRegistry,
    DisplayManager,
    ShapeResult,
    combine,
    display_template_name,
    filter_shapes,
    parse_location,
    view,
)
from .component import check_display_type, run
from .models import (
    BuildDisplayContext,
    BuildDisplayInput,
    BuildDisplayOutput,
    DisplayError,
    DisplayValidationError,
    InvalidEntityError,
    InvalidPlacementError,
    Placement,
    RegistryFrozenError,
    Shape,
    ShapeSet,
    TemplateNotFoundError,
)
from .ports import DisplayDriverPort, DisplayRulesPort, ShapeRendererPort

__all__ = [
    # Component
    "run",
    "check_display_type",
    # Shape construction
    "view",
    "combine",
    "filter_shapes",
    "parse_location",
    "display_template_name",
    "ShapeResult",
    # Drivers
    "DisplayDriver",
    "DisplayDriverRegistry",
    "DisplayManager",
    # Models
    "BuildDisplayContext",
    "BuildDisplayInput",
    "BuildDisplayOutput",
    "DisplayValidationError",
    "Placement",
    "Shape",
    "ShapeSet",
    # Errors
    "DisplayError",
    "InvalidEntityError",
    "InvalidPlacementError",
    "RegistryFrozenError",
    "TemplateNotFoundError",
    # Ports
    "DisplayDriverPort",
    "DisplayRulesPort",
    "ShapeRendererPort",
]
