"""
Global test configuration fixtures for Linguae tests.

This module provides an in-memory translation source, a provider built on it
and a directory of JSON translation files.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from linguae import LinguaeProvider
from tests.utils.sources import StaticSource


@pytest.fixture
def translations() -> dict[str, dict[str, str]]:
    """Translation data for English, German and French."""
    return {
        "en-US": {
            "ui.title": "Welcome",
            "ui.greeting": "Hello ${name}!",
            "ui.only_english": "English only",
            "ui.markup": "[bold]Bold[/bold] text",
        },
        "de-DE": {
            "ui.title": "Willkommen",
            "ui.greeting": "Hallo ${name}!",
        },
        "fr-FR": {
            "ui.title": "Bienvenue",
        },
    }


@pytest.fixture
def source(translations: dict[str, dict[str, str]]) -> StaticSource:
    """In-memory source over ``translations``."""
    return StaticSource(translations)


@pytest.fixture
def provider(source: StaticSource) -> LinguaeProvider:
    """Provider with en-US as default locale."""
    return LinguaeProvider(source, locale="en-US")


@pytest.fixture
def locale_dir(tmp_path: Path) -> Path:
    """Directory holding en_US.json, de_DE.json and a non-JSON file."""
    directory = tmp_path / "locales"
    directory.mkdir()
    _ = (directory / "en_US.json").write_text(
        json.dumps({"ui": {"title": "Welcome", "count": 3}, "ui.close": "Close"}),
        encoding="utf-8",
    )
    _ = (directory / "de_DE.json").write_text(
        json.dumps({"ui.title": "Willkommen"}), encoding="utf-8"
    )
    _ = (directory / "README.txt").write_text("not a locale", encoding="utf-8")
    return directory
