"""
JSON file translation sources.

Translations live in one JSON object per locale named after the locale with
underscores, e.g. ``en_US.json``. ``JsonFileSource`` reads them from a local
directory and ``HttpJsonSource`` fetches them from a base URL.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import override

import httpx

from ..exceptions import SourceError
from ..locale import Locale
from .base import HttpTranslationSource, LinguaeSource, flatten_translations, parse_locales

logger = logging.getLogger(__name__)


class JsonFileSource(LinguaeSource):
    """Reads ``<locale>.json`` files from a directory."""

    def __init__(self, base_dir: Path | str) -> None:
        self.base_dir: Path = Path(base_dir)

    def path_for(self, locale: Locale) -> Path:
        """Path of the translation file for ``locale``."""
        return self.base_dir / f"{locale.file_stem}.json"

    @override
    def supported_locales(self) -> list[Locale]:
        if not self.base_dir.is_dir():
            return []
        try:
            stems: list[object] = [
                path.stem for path in sorted(self.base_dir.glob("*.json"))
            ]
        except OSError as e:
            logger.warning(f"Could not list translation files in {self.base_dir}: {e}")
            return []
        return parse_locales(stems)

    @override
    def load(self, locale: Locale) -> dict[str, str]:
        path = self.path_for(locale)
        if not path.exists():
            logger.debug(f"No translation file for {locale.tag}: {path}")
            return {}

        try:
            with path.open("r", encoding="utf-8") as f:
                data: object = json.load(f)  # pyright: ignore[reportAny]
        except (OSError, json.JSONDecodeError) as e:
            raise SourceError(f"Failed to read {path}: {e}", context=str(path)) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise SourceError(
                f"Translation file must contain a JSON object, got {type(data).__name__}",
                context=str(path),
            )
        return flatten_translations(data)  # pyright: ignore[reportUnknownArgumentType]

    @override
    def supports(self, locale: Locale) -> bool:
        return self.path_for(locale).is_file()


class HttpJsonSource(HttpTranslationSource):
    """Fetches ``<locale>.json`` documents below a base URL."""

    name = "http-json"

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str] | None = None,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(headers=headers, timeout=timeout, client=client)
        self.base_url: str = base_url.rstrip("/")

    def url_for(self, locale: Locale) -> str:
        """URL of the translation document for ``locale``."""
        return f"{self.base_url}/{locale.file_stem}.json"

    @override
    def supported_locales(self) -> list[Locale]:
        return []

    @override
    def load(self, locale: Locale) -> dict[str, str]:
        url = self.url_for(locale)
        try:
            response = self.client.get(url, headers=self.headers)
        except httpx.HTTPError as e:
            raise SourceError(f"{self.name} request failed: {e}", context=url) from e

        if response.status_code != 200 or not response.content:
            logger.debug(f"No translations at {url} (status {response.status_code})")
            return {}

        try:
            data: object = response.json()  # pyright: ignore[reportAny]
        except json.JSONDecodeError as e:
            raise SourceError(f"{self.name} returned invalid JSON: {e}", context=url) from e

        if data is None:
            return {}
        return flatten_translations(self.expect_mapping(data, url))

    @override
    def supports(self, locale: Locale) -> bool:
        try:
            response = self.client.head(self.url_for(locale), headers=self.headers)
        except httpx.HTTPError:
            return False
        return response.status_code == 200


def json_source(location: str | Path, **kwargs: object) -> LinguaeSource:
    """
    Create a JSON source for a directory or a URL.

    Args:
        location: Local directory, or a base URL starting with http(s)://
        **kwargs: Passed to ``HttpJsonSource`` for remote locations

    Returns:
        ``HttpJsonSource`` for URLs, ``JsonFileSource`` otherwise
    """
    if isinstance(location, str) and location.startswith(("http://", "https://")):
        return HttpJsonSource(location, **kwargs)  # pyright: ignore[reportArgumentType]
    return JsonFileSource(location)
