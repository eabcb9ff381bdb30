import os
from functools import lru_cache
from pathlib import Path

from src.adapters.book_repo import InMemoryBookRepo
from src.adapters.render.book_templates import register_book_templates
from src.adapters.render.zones import TemplateRegistry
from src.components.book_display import BOOK_TEMPLATES, register_book_drivers
from src.components.display import DisplayDriverRegistry, DisplayManager
from src.rules.loader import default_rules_path, load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = default_rules_path(self.base_dir)


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return load_rules(get_settings().rules_path)


# --- Repos ---
# Shared repository (in production, inject from DI container)
_book_repo = InMemoryBookRepo()


def get_book_repo() -> InMemoryBookRepo:
    return _book_repo


# --- Display ---
# Both registries are built once and are read-only afterwards.
@lru_cache
def get_display_manager() -> DisplayManager:
    registry = DisplayDriverRegistry()
    register_book_drivers(registry)
    registry.freeze()
    return DisplayManager(registry)


@lru_cache
def get_template_registry() -> TemplateRegistry:
    templates = TemplateRegistry()
    register_book_templates(templates)
    templates.validate(BOOK_TEMPLATES)
    templates.freeze()
    return templates
