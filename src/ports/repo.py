from typing import Protocol
from uuid import UUID

from src.domain.entities import Book


class BookRepoPort(Protocol):
    def get_by_id(self, book_id: UUID) -> Book | None:
        ...

    def save(self, book: Book) -> Book:
        ...
