"""
Book display component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.components.display.models import DisplayValidationError, ShapeSet
from src.domain.entities import Book

# --- Input Models ---


@dataclass(frozen=True)
class DisplayBookInput:
    """Input for composing the shapes of one book."""

    book: Book | None
    display_type: str | None = None  # e.g. "Detail", "Summary", "Description"


# --- Output Models ---


@dataclass(frozen=True)
class DisplayBookOutput:
    """Output from book shape composition."""

    shapes: ShapeSet = ()
    display_type: str | None = None
    errors: list[DisplayValidationError] = field(default_factory=list)
    success: bool = True
