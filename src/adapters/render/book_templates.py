import html

from src.adapters.render.zones import TemplateRegistry
from src.components.book_display import (
    AUTHOR_TEMPLATE,
    COVER_TEMPLATE,
    DESCRIPTION_TEMPLATE,
    TITLE_TEMPLATE,
)
from src.components.display import Shape
from src.domain.entities import Book


def render_title(shape: Shape) -> str:
    book: Book = shape.entity
    return f'<h1 class="book-title">{html.escape(book.title)}</h1>'


def render_author(shape: Shape) -> str:
    book: Book = shape.entity
    return f'<p class="author">{html.escape(book.author)}</p>'


def render_cover(shape: Shape) -> str:
    book: Book = shape.entity
    if not book.cover_photo_url:
        return ""
    src = html.escape(book.cover_photo_url, quote=True)
    alt = html.escape(book.title, quote=True)
    return f'<img class="cover" src="{src}" alt="{alt}">'


def render_description(shape: Shape) -> str:
    book: Book = shape.entity
    return f'<div class="description">{html.escape(book.description)}</div>'


def register_book_templates(registry: TemplateRegistry) -> None:
    registry.register(TITLE_TEMPLATE, render_title)
    registry.register(AUTHOR_TEMPLATE, render_author)
    registry.register(COVER_TEMPLATE, render_cover)
    registry.register(DESCRIPTION_TEMPLATE, render_description)
