"""
Book display component - Book shapes for the Header, Cover and Content zones.
"""

from .component import (
    AUTHOR_TEMPLATE,
    BOOK_TEMPLATES,
    COVER_TEMPLATE,
    DESCRIPTION_DISPLAY_TYPE,
    DESCRIPTION_TEMPLATE,
    TITLE_TEMPLATE,
    BookDisplayDriver,
    display_book,
    register_book_drivers,
    run,
)
from .models import DisplayBookInput, DisplayBookOutput

__all__ = [
    # Component
    "run",
    "display_book",
    "register_book_drivers",
    "BookDisplayDriver",
    # Constants
    "DESCRIPTION_DISPLAY_TYPE",
    "TITLE_TEMPLATE",
    "AUTHOR_TEMPLATE",
    "COVER_TEMPLATE",
    "DESCRIPTION_TEMPLATE",
    "BOOK_TEMPLATES",
    # Models
    "DisplayBookInput",
    "DisplayBookOutput",
]
