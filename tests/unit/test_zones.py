"""
Zone layout and template registry tests.
"""

from __future__ import annotations

import pytest

from src.adapters.render.book_templates import register_book_templates
from src.adapters.render.zones import TemplateRegistry, Zone, arrange, render_zones
from src.components.book_display import BOOK_TEMPLATES, display_book
from src.components.display import (
    BuildDisplayContext,
    RegistryFrozenError,
    TemplateNotFoundError,
    combine,
    view,
)
from src.domain.entities import Book


@pytest.fixture
def templates() -> TemplateRegistry:
    registry = TemplateRegistry()
    register_book_templates(registry)
    registry.freeze()
    return registry


class TestTemplateRegistry:
    """Template name resolution."""

    def test_book_templates_registered(self, templates: TemplateRegistry) -> None:
        templates.validate(BOOK_TEMPLATES)
        assert all(name in templates for name in BOOK_TEMPLATES)

    def test_unknown_template(self, templates: TemplateRegistry) -> None:
        with pytest.raises(TemplateNotFoundError):
            templates.resolve("Book_Display_Spine")

    def test_validate_reports_missing(self) -> None:
        with pytest.raises(TemplateNotFoundError, match="Book_Display_Title"):
            TemplateRegistry().validate(BOOK_TEMPLATES)

    def test_frozen(self, templates: TemplateRegistry) -> None:
        with pytest.raises(RegistryFrozenError):
            templates.register("Book_Display_Spine", lambda shape: "")


class TestArrange:
    """Grouping shapes into zones."""

    def test_book_zones(self, dune: Book) -> None:
        shapes = display_book(dune, BuildDisplayContext(display_type="Description"))
        zones = arrange(shapes, ("Header", "Cover", "Content"))
        assert [z.name for z in zones] == ["Header", "Cover", "Content"]
        assert [s.template_name for s in zones[0].shapes] == [
            "Book_Display_Title",
            "Book_Display_Author",
        ]

    def test_orders_by_position_then_declaration(self, dune: Book) -> None:
        shapes = combine(
            view("Second", dune).location("Header: 2"),
            view("FirstA", dune).location("Header: 1"),
            view("FirstB", dune).location("Header: 1"),
        )
        (zone,) = arrange(shapes)
        assert [s.template_name for s in zone.shapes] == ["FirstA", "FirstB", "Second"]

    def test_unconfigured_zones_last_by_name(self, dune: Book) -> None:
        shapes = combine(
            view("A", dune).location("Sidebar: 1"),
            view("B", dune).location("Aside: 1"),
            view("C", dune).location("Header: 1"),
        )
        assert [z.name for z in arrange(shapes, ("Header",))] == ["Header", "Aside", "Sidebar"]

    def test_empty_zones_omitted(self, dune: Book) -> None:
        zones = arrange(display_book(dune), ("Header", "Cover", "Content"))
        assert [z.name for z in zones] == ["Header", "Cover"]

    def test_empty_shape_set(self) -> None:
        assert arrange((), ("Header",)) == []


class TestRenderZones:
    """Rendering book shapes into zone HTML."""

    def test_render_book(self, dune: Book, templates: TemplateRegistry) -> None:
        shapes = display_book(dune, BuildDisplayContext(display_type="Description"))
        html = render_zones(arrange(shapes, ("Header", "Cover", "Content")), templates)
        assert html == {
            "Header": '<h1 class="book-title">Dune</h1><p class="author">Frank Herbert</p>',
            "Cover": (
                '<img class="cover" src="https://example.com/covers/dune.jpg" alt="Dune">'
            ),
            "Content": '<div class="description">Spice &amp; sandworms.</div>',
        }

    def test_missing_cover_renders_empty(self, templates: TemplateRegistry) -> None:
        book = Book(title="Untitled <draft>")
        html = render_zones(arrange(display_book(book)), templates)
        assert html["Cover"] == ""
        assert "&lt;draft&gt;" in html["Header"]

    def test_unknown_template_fails(self, dune: Book, templates: TemplateRegistry) -> None:
        zones = [Zone(name="Header", shapes=combine(view("Nope", dune).location("Header: 1")))]
        with pytest.raises(TemplateNotFoundError):
            render_zones(zones, templates)
