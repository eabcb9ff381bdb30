from pathlib import Path

import pytest

from src.domain.entities import Book
from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def dune() -> Book:
    return Book(
        title="Dune",
        author="Frank Herbert",
        cover_photo_url="https://example.com/covers/dune.jpg",
        description="Spice & sandworms.",
    )


@pytest.fixture
def rules() -> Rules:
    """Rules loaded from the project's real rules.yaml."""
    return load_rules(PROJECT_ROOT / "rules.yaml")
