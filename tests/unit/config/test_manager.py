"""Tests for configuration loading and provider construction."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from linguae.config import create_provider, create_source, load_config
from linguae.config.schema import LinguaeConfig
from linguae.exceptions import ConfigurationError
from linguae.placeholder import CURLY
from linguae.sources import (
    GlotPressSource,
    HttpJsonSource,
    HttpTranslationSource,
    JsonFileSource,
    LinguaeSource,
    LokaliseSource,
    POEditorSource,
    TolgeeSource,
    TransifexSource,
    WeblateSource,
    ZanataSource,
)


def write_config(path: Path, data: object) -> Path:
    """Write ``data`` as YAML to ``path``."""
    _ = path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


class TestLoadConfig:
    """Test cases for load_config."""

    def test_load_success(self, tmp_path: Path, locale_dir: Path) -> None:
        """Test loading a valid configuration file."""
        path = write_config(
            tmp_path / "linguae.yml",
            {
                "locale": "de-DE",
                "strict": True,
                "placeholder": {"prefix": "{{", "suffix": "}}"},
                "source": {"type": "json", "location": str(locale_dir)},
            },
        )

        config = load_config(path)

        assert config.locale == "de-DE"
        assert config.strict is True
        assert config.placeholder.prefix == "{{"

    def test_file_not_found(self, tmp_path: Path) -> None:
        """Test loading a configuration that does not exist."""
        with pytest.raises(FileNotFoundError):
            _ = load_config(tmp_path / "missing.yml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test loading invalid YAML."""
        path = tmp_path / "broken.yml"
        _ = path.write_text("invalid: yaml: content: [", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid YAML") as exc_info:
            _ = load_config(path)

        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        """Test that the document must be a mapping."""
        path = write_config(tmp_path / "list.yml", ["a", "b"])

        with pytest.raises(ConfigurationError, match="YAML dictionary"):
            _ = load_config(path)

    def test_validation_error(self, tmp_path: Path) -> None:
        """Test that schema errors are reported as ConfigurationError."""
        path = write_config(tmp_path / "bad.yml", {"source": {"type": "weblate"}})

        with pytest.raises(ConfigurationError) as exc_info:
            _ = load_config(path)

        assert isinstance(exc_info.value.__cause__, ValidationError)
        assert exc_info.value.recoverable is False


class TestCreateSource:
    """Test cases for create_source."""

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ({"type": "json", "location": "https://cdn.example.com"}, HttpJsonSource),
            ({"type": "transifex", "api_token": "t", "resource": "o:a:p:b:r:c"}, TransifexSource),
            ({"type": "lokalise", "api_token": "t", "project_id": "p"}, LokaliseSource),
            ({"type": "poeditor", "api_token": "t", "project_id": "1"}, POEditorSource),
            (
                {
                    "type": "zanata",
                    "base_url": "https://zanata.example.com",
                    "username": "u",
                    "api_key": "k",
                    "project": "app",
                },
                ZanataSource,
            ),
            (
                {
                    "type": "weblate",
                    "api_url": "https://hosted.weblate.org/api",
                    "api_token": "t",
                    "project": "app",
                    "component": "ui",
                },
                WeblateSource,
            ),
            ({"type": "tolgee", "api_key": "k", "project_id": "1"}, TolgeeSource),
            (
                {"type": "glotpress", "base_url": "https://gp.example.com", "project": "app"},
                GlotPressSource,
            ),
        ],
    )
    def test_remote_sources(
        self, data: dict[str, object], expected: type[LinguaeSource]
    ) -> None:
        """Test that each source type builds its source."""
        config = LinguaeConfig.model_validate({"source": {**data, "timeout": 12.5}})

        source = create_source(config.source)

        assert isinstance(source, expected)
        assert isinstance(source, HttpTranslationSource)
        assert source.timeout == 12.5
        source.close()

    def test_local_json(self, locale_dir: Path) -> None:
        """Test that a directory gives a file source."""
        config = LinguaeConfig.model_validate(
            {"source": {"type": "json", "location": str(locale_dir)}}
        )

        source = create_source(config.source)

        assert isinstance(source, JsonFileSource)
        assert source.base_dir == locale_dir


class TestCreateProvider:
    """Test cases for create_provider."""

    def test_provider_from_config(self, locale_dir: Path) -> None:
        """Test building a working provider."""
        config = LinguaeConfig.model_validate(
            {
                "locale": "en_US",
                "strict": True,
                "placeholder": {"prefix": "{{", "suffix": "}}"},
                "source": {"type": "json", "location": str(locale_dir)},
            }
        )

        provider = create_provider(config)

        assert provider.locale.tag == "en-US"
        assert provider.strict is True
        assert provider.pattern == CURLY
        assert provider.translate("ui.title") == "Welcome"
        assert provider.translate("ui.title", "de-DE") == "Willkommen"
        assert provider.translate("ui.close", "de-DE") == "Close"
