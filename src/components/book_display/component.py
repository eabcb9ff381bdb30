"""
Book display component - maps a Book to shapes placed in layout zones.

Shapes declared for every book:
- Book_Display_Title        Header: 1
- Book_Display_Author       Header: 2
- Book_Display_Cover        Cover: 1
- Book_Display_Description  Content: 1, only for the "Description" display type

Invariants:
- Title, Author and Cover are always displayed
- Description is displayed iff the display type is exactly "Description"
- Pure function: same book and display type always produce the same shapes
"""

from __future__ import annotations

from src.components.display import (
    BuildDisplayContext,
    DisplayDriver,
    DisplayDriverRegistry,
    DisplayRulesPort,
    DisplayValidationError,
    InvalidEntityError,
    ShapeSet,
    check_display_type,
    combine,
    display_template_name,
    view,
)
from src.domain.entities import Book

from .models import DisplayBookInput, DisplayBookOutput

DESCRIPTION_DISPLAY_TYPE = "Description"

TITLE_TEMPLATE = display_template_name(Book, "Title")
AUTHOR_TEMPLATE = display_template_name(Book, "Author")
COVER_TEMPLATE = display_template_name(Book, "Cover")
DESCRIPTION_TEMPLATE = display_template_name(Book, "Description")

BOOK_TEMPLATES = (TITLE_TEMPLATE, AUTHOR_TEMPLATE, COVER_TEMPLATE, DESCRIPTION_TEMPLATE)


class BookDisplayDriver(DisplayDriver):
    """Display driver for books."""

    entity_type = Book

    def display(self, model: Book, context: BuildDisplayContext) -> ShapeSet:
        return combine(
            view(TITLE_TEMPLATE, model).location("Header: 1"),
            view(AUTHOR_TEMPLATE, model).location("Header: 2"),
            view(COVER_TEMPLATE, model).location("Cover: 1"),
            view(DESCRIPTION_TEMPLATE, model).location(
                "Content: 1", display_type=DESCRIPTION_DISPLAY_TYPE
            ),
        )


_driver = BookDisplayDriver()


def display_book(book: Book | None, context: BuildDisplayContext | None = None) -> ShapeSet:
    """
    Compose the shape set for a book.

    Raises:
        InvalidEntityError: book is None or not a Book
    """
    return _driver.build_display(book, context or BuildDisplayContext())


def register_book_drivers(registry: DisplayDriverRegistry) -> None:
    """Register the book display driver at startup."""
    registry.register(_driver)


def run(
    inp: DisplayBookInput,
    *,
    rules: DisplayRulesPort | None = None,
) -> DisplayBookOutput:
    """
    Main component entry point (Atomic Component Pattern).

    Args:
        inp: DisplayBookInput with the book and requested display type
        rules: Optional display configuration, used to flag unknown types

    Returns:
        DisplayBookOutput with the shape set or errors
    """
    if not isinstance(inp, DisplayBookInput):
        raise ValueError(f"Unknown input type: {type(inp)}")

    check_display_type(inp.display_type, rules)

    try:
        shapes = display_book(inp.book, BuildDisplayContext(display_type=inp.display_type))
    except InvalidEntityError as e:
        return DisplayBookOutput(
            display_type=inp.display_type,
            errors=[
                DisplayValidationError(
                    code="INVALID_ENTITY",
                    message=str(e),
                    field_name="book",
                )
            ],
            success=False,
        )

    return DisplayBookOutput(shapes=shapes, display_type=inp.display_type)
