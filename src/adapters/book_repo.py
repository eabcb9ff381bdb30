from uuid import UUID

from src.domain.entities import Book


class InMemoryBookRepo:
    """In-memory book repository."""

    def __init__(self, books: list[Book] | None = None) -> None:
        self._books: dict[UUID, Book] = {}
        for book in books or []:
            self.save(book)

    def get_by_id(self, book_id: UUID) -> Book | None:
        return self._books.get(book_id)

    def save(self, book: Book) -> Book:
        self._books[book.id] = book
        return book
