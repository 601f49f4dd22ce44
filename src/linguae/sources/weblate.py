"""Weblate translation source (REST API)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, override

import httpx

from ..locale import Locale
from .base import DEFAULT_TIMEOUT, HttpTranslationSource, flatten_translations


class WeblateSource(HttpTranslationSource):
    """Downloads the JSON translation files of a Weblate component."""

    name = "weblate"

    def __init__(
        self,
        api_url: str,
        api_token: str,
        project: str,
        component: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(
            headers={"Authorization": f"Token {api_token}"},
            timeout=timeout,
            client=client,
        )
        self.api_url: str = api_url.rstrip("/")
        self.project: str = project
        self.component: str = component

    @override
    def supported_locales(self) -> list[Locale]:
        return self.safe_locales(
            "GET",
            f"{self.api_url}/components/{self.project}/{self.component}/translations/",
        )

    @override
    def extract_locale_codes(self, payload: Any) -> list[object]:  # pyright: ignore[reportExplicitAny,reportAny]
        # Weblate returns a paginated object or, on older versions, a plain list
        if isinstance(payload, Mapping):
            payload = payload.get("results") or []  # pyright: ignore[reportUnknownMemberType]
        if not isinstance(payload, list):
            return []
        return [
            item["language_code"]
            for item in payload  # pyright: ignore[reportUnknownVariableType]
            if isinstance(item, Mapping) and "language_code" in item
        ]

    @override
    def load(self, locale: Locale) -> dict[str, str]:
        url = (
            f"{self.api_url}/translations/{self.project}/{self.component}/"
            f"{locale.file_stem}/file/"
        )
        return flatten_translations(self.expect_mapping(self.request("GET", url), url))
