"""
Display component - builds shape sets for registered entities.

Invariants:
- Same entity and display type always produce the same shape set
- Shapes without a display mode are always included
- Display mode matching is exact and case-sensitive
"""

from __future__ import annotations

import logging

from ._impl import DisplayManager
from .models import (
    BuildDisplayInput,
    BuildDisplayOutput,
    DisplayValidationError,
    InvalidEntityError,
)
from .ports import DisplayRulesPort

logger = logging.getLogger(__name__)


def check_display_type(
    display_type: str | None,
    rules: DisplayRulesPort | None,
) -> None:
    """Log unknown display types. Unknown types are still displayed."""
    if display_type is None or rules is None:
        return
    known = rules.get_display_types()
    if known and display_type not in known:
        logger.warning(
            "Display type %r is not one of the configured types: %s",
            display_type,
            ", ".join(known),
        )


def run(
    inp: BuildDisplayInput,
    *,
    manager: DisplayManager,
    rules: DisplayRulesPort | None = None,
) -> BuildDisplayOutput:
    """
    Main component entry point (Atomic Component Pattern).

    Args:
        inp: Entity and requested display type
        manager: Display manager holding the registered drivers
        rules: Optional display configuration

    Returns:
        BuildDisplayOutput with the shape set or errors
    """
    if not isinstance(inp, BuildDisplayInput):
        raise ValueError(f"Unknown input type: {type(inp)}")

    check_display_type(inp.display_type, rules)

    try:
        shapes = manager.build_display(inp.entity, inp.display_type)
    except InvalidEntityError as e:
        return BuildDisplayOutput(
            display_type=inp.display_type,
            errors=[
                DisplayValidationError(
                    code="INVALID_ENTITY",
                    message=str(e),
                    field_name="entity",
                )
            ],
            success=False,
        )

    return BuildDisplayOutput(shapes=shapes, display_type=inp.display_type)
