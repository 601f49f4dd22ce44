"""Tests for JSON file and JSON URL sources."""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from linguae.exceptions import SourceError
from linguae.locale import Locale
from linguae.sources import HttpJsonSource, JsonFileSource, flatten_translations, json_source
from tests.utils.sources import json_response

EN = Locale.parse("en-US")
DE = Locale.parse("de-DE")


class TestFlattenTranslations:
    """Test cases for flatten_translations."""

    def test_nested_objects(self) -> None:
        """Test that nested keys are joined with dots."""
        data: dict[str, object] = {"ui": {"menu": {"open": "Open"}}, "title": "T"}

        assert flatten_translations(data) == {"ui.menu.open": "Open", "title": "T"}

    def test_scalars_and_null(self) -> None:
        """Test conversion of scalars and dropping of nulls."""
        data: dict[str, object] = {"count": 3, "flag": True, "empty": None}

        assert flatten_translations(data) == {"count": "3", "flag": "True"}


class TestJsonFileSource:
    """Test cases for JsonFileSource."""

    def test_supported_locales(self, locale_dir: Path) -> None:
        """Test that only JSON files count as locales."""
        source = JsonFileSource(locale_dir)

        assert source.supported_locales() == [DE, EN]

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Test listing locales of a directory that does not exist."""
        assert JsonFileSource(tmp_path / "nope").supported_locales() == []

    def test_load_flattens(self, locale_dir: Path) -> None:
        """Test loading and flattening a translation file."""
        source = JsonFileSource(locale_dir)

        assert source.load(EN) == {
            "ui.title": "Welcome",
            "ui.count": "3",
            "ui.close": "Close",
        }

    def test_load_missing_file(self, locale_dir: Path) -> None:
        """Test that a locale without file has no translations."""
        assert JsonFileSource(locale_dir).load(Locale.parse("fr")) == {}

    def test_load_invalid_json(self, locale_dir: Path) -> None:
        """Test that malformed JSON raises SourceError."""
        _ = (locale_dir / "fr.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(SourceError, match="Failed to read"):
            _ = JsonFileSource(locale_dir).load(Locale.parse("fr"))

    def test_load_non_object(self, locale_dir: Path) -> None:
        """Test that a JSON array is rejected."""
        _ = (locale_dir / "fr.json").write_text('["a", "b"]', encoding="utf-8")

        with pytest.raises(SourceError, match="JSON object"):
            _ = JsonFileSource(locale_dir).load(Locale.parse("fr"))

    def test_supports(self, locale_dir: Path) -> None:
        """Test probing for a locale file."""
        source = JsonFileSource(locale_dir)

        assert source.supports(DE)
        assert not source.supports(Locale.parse("fr"))
        assert source.path_for(DE) == locale_dir / "de_DE.json"


class TestHttpJsonSource:
    """Test cases for HttpJsonSource."""

    @staticmethod
    def make_client(documents: dict[str, object]) -> httpx.Client:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path in documents:
                if request.method == "HEAD":
                    return httpx.Response(200)
                return json_response(documents[request.url.path])
            return httpx.Response(404)

        return httpx.Client(transport=httpx.MockTransport(handler))

    def test_load(self) -> None:
        """Test fetching and flattening a document."""
        client = self.make_client({"/i18n/de_DE.json": {"ui": {"title": "Willkommen"}}})
        source = HttpJsonSource("https://cdn.example.com/i18n/", client=client)

        assert source.url_for(DE) == "https://cdn.example.com/i18n/de_DE.json"
        assert source.load(DE) == {"ui.title": "Willkommen"}

    def test_load_not_found(self) -> None:
        """Test that a missing document means no translations."""
        source = HttpJsonSource("https://cdn.example.com/i18n", client=self.make_client({}))

        assert source.load(DE) == {}

    def test_load_not_an_object(self) -> None:
        """Test that a JSON array is rejected."""
        client = self.make_client({"/i18n/de_DE.json": ["x"]})
        source = HttpJsonSource("https://cdn.example.com/i18n", client=client)

        with pytest.raises(SourceError, match="expected object"):
            _ = source.load(DE)

    def test_load_transport_error(self) -> None:
        """Test that network failures raise SourceError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        source = HttpJsonSource("https://cdn.example.com/i18n", client=client)

        with pytest.raises(SourceError, match="request failed"):
            _ = source.load(DE)
        assert not source.supports(DE)

    def test_supports(self) -> None:
        """Test probing with HEAD requests."""
        client = self.make_client({"/i18n/de_DE.json": {}})
        source = HttpJsonSource("https://cdn.example.com/i18n", client=client)

        assert source.supports(DE)
        assert not source.supports(EN)
        assert source.supported_locales() == []

    def test_custom_headers(self) -> None:
        """Test that configured headers are sent."""
        seen: list[str | None] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.headers.get("Authorization"))
            return json_response({})

        client = httpx.Client(transport=httpx.MockTransport(handler))
        source = HttpJsonSource(
            "https://cdn.example.com", headers={"Authorization": "Bearer t"}, client=client
        )

        _ = source.load(DE)

        assert seen == ["Bearer t"]


class TestJsonSourceFactory:
    """Test cases for json_source."""

    def test_local_path(self, locale_dir: Path) -> None:
        """Test that paths give a file source."""
        assert isinstance(json_source(locale_dir), JsonFileSource)
        assert isinstance(json_source(str(locale_dir)), JsonFileSource)

    def test_url(self) -> None:
        """Test that URLs give an HTTP source."""
        source = json_source("https://cdn.example.com/i18n", timeout=5.0)

        assert isinstance(source, HttpJsonSource)
        assert source.timeout == 5.0
        source.close()
