"""
Rules loading tests.

Verifies that the rules loader validates rules.yaml structure and
fails fast with actionable errors.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.rules.loader import RULES_PATH_ENV, default_rules_path, load_rules
from src.rules.models import Rules


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(content)
    return path


class TestLoadRules:
    """Loading the rules file."""

    def test_project_rules_are_valid(self, rules: Rules) -> None:
        assert rules.get_zones() == ("Header", "Cover", "Content")
        assert "Description" in rules.get_display_types()
        assert rules.logging.level == "INFO"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "display: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(path)

    def test_missing_display_section(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "logging:\n  level: DEBUG\n")
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_empty_zones_rejected(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "display:\n  zones: []\n")
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_duplicate_zones_rejected(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "display:\n  zones: [Header, Header]\n")
        with pytest.raises(ValueError, match="unique"):
            load_rules(path)

    def test_unknown_log_level_rejected(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "display:\n  zones: [Header]\nlogging:\n  level: LOUD\n")
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_defaults(self, tmp_path: Path) -> None:
        rules = load_rules(_write(tmp_path, "display:\n  zones: [Header]\n"))
        assert rules.get_display_types() == ()
        assert rules.logging.level == "INFO"

    def test_yaml_inside_markdown_fence(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "# Display rules\n\n```yaml\ndisplay:\n  zones: [Main]\n```\n\nNotes.\n",
        )
        assert load_rules(path).get_zones() == ("Main",)


class TestDefaultRulesPath:
    """Rules path resolution."""

    def test_base_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(RULES_PATH_ENV, raising=False)
        assert default_rules_path(tmp_path) == tmp_path / "rules.yaml"

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(RULES_PATH_ENV, str(tmp_path / "other.yaml"))
        assert default_rules_path() == tmp_path / "other.yaml"
