"""Lokalise translation source (API v2)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, override

import httpx

from ..locale import Locale
from .base import DEFAULT_TIMEOUT, HttpTranslationSource

LOKALISE_API_URL = "https://api.lokalise.com/api2"


class LokaliseSource(HttpTranslationSource):
    """Loads project keys with their translations from Lokalise."""

    name = "lokalise"

    def __init__(
        self,
        api_token: str,
        project_id: str,
        platform: str = "web",
        api_url: str = LOKALISE_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(
            headers={"X-Api-Token": api_token}, timeout=timeout, client=client
        )
        self.api_url: str = api_url.rstrip("/")
        self.project_id: str = project_id
        self.platform: str = platform

    @override
    def supported_locales(self) -> list[Locale]:
        return self.safe_locales(
            "GET", f"{self.api_url}/projects/{self.project_id}/languages"
        )

    @override
    def extract_locale_codes(self, payload: Any) -> list[object]:  # pyright: ignore[reportExplicitAny,reportAny]
        if not isinstance(payload, Mapping):
            return []
        return [
            language["lang_iso"]
            for language in payload.get("languages") or []  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
            if isinstance(language, Mapping) and "lang_iso" in language
        ]

    def key_name(self, name: object) -> str:
        """Lokalise key names are per platform; pick the configured one."""
        if isinstance(name, Mapping):
            return str(name.get(self.platform) or name.get("other") or "")  # pyright: ignore[reportUnknownMemberType]
        return str(name)

    @override
    def load(self, locale: Locale) -> dict[str, str]:
        url = f"{self.api_url}/projects/{self.project_id}/keys"
        payload = self.expect_mapping(
            self.request(
                "GET", url, params={"include_translations": 1, "limit": 5000}
            ),
            url,
        )

        translations: dict[str, str] = {}
        with self.payload_errors(url):
            for key in payload.get("keys") or []:  # pyright: ignore[reportGeneralTypeIssues]
                if not isinstance(key, Mapping):
                    continue
                by_language: dict[str, str] = {
                    str(item["language_iso"]): str(item["translation"])
                    for item in key.get("translations") or []
                    if isinstance(item, Mapping) and item.get("translation")
                }
                # exact region match first, then the bare language
                text = by_language.get(locale.file_stem) or by_language.get(
                    locale.language
                )
                if text is not None:
                    translations[self.key_name(key.get("key_name"))] = text
        return translations
