"""
Book display endpoint.

Endpoint: GET /api/books/{book_id}/display?display_type=...
- Public route (no auth required)
- Returns the shape set for the book and the rendered HTML per zone
"""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from src.adapters.render.zones import TemplateRegistry, arrange, render_zones
from src.api.deps import (
    get_book_repo,
    get_display_manager,
    get_rules,
    get_template_registry,
)
from src.components.display import BuildDisplayInput, DisplayManager, run
from src.ports.repo import BookRepoPort
from src.rules.models import Rules

logger = logging.getLogger(__name__)

router = APIRouter()


# --- Response Models ---


class ShapeResponse(BaseModel):
    """One placed shape."""

    template_name: str
    zone: str
    order: int
    display_mode: str | None = None


class BookDisplayResponse(BaseModel):
    """Shapes for a book and the HTML rendered into each zone."""

    book_id: UUID
    display_type: str | None = None
    shapes: list[ShapeResponse] = Field(default_factory=list)
    zones: dict[str, str] = Field(
        default_factory=dict, description="Zone name -> rendered HTML, in layout order"
    )


# --- Endpoint ---


@router.get(
    "/{book_id}/display",
    response_model=BookDisplayResponse,
    summary="Display a book",
    description="Build the book's shapes for a display type and render them into zones.",
)
def display_book_endpoint(
    book_id: UUID,
    display_type: str | None = Query(None, description="e.g. Detail, Summary, Description"),
    repo: BookRepoPort = Depends(get_book_repo),
    manager: DisplayManager = Depends(get_display_manager),
    templates: TemplateRegistry = Depends(get_template_registry),
    rules: Rules = Depends(get_rules),
) -> BookDisplayResponse:
    book = repo.get_by_id(book_id)
    if book is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Book not found",
        )

    result = run(
        BuildDisplayInput(entity=book, display_type=display_type),
        manager=manager,
        rules=rules,
    )
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=result.errors[0].message,
        )

    zones = arrange(result.shapes, rules.get_zones())
    logger.info(
        "Displayed book %s (%s): %d shape(s) in %d zone(s)",
        book_id,
        display_type,
        len(result.shapes),
        len(zones),
    )

    return BookDisplayResponse(
        book_id=book.id,
        display_type=display_type,
        shapes=[
            ShapeResponse(
                template_name=shape.template_name,
                zone=shape.zone,
                order=shape.order,
                display_mode=shape.display_mode,
            )
            for shape in result.shapes
        ],
        zones=render_zones(zones, templates),
    )
