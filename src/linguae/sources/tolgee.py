"""Tolgee translation source (REST API v2)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, override

import httpx

from ..locale import Locale
from .base import DEFAULT_TIMEOUT, HttpTranslationSource, flatten_translations

TOLGEE_API_URL = "https://app.tolgee.io"


class TolgeeSource(HttpTranslationSource):
    """Loads the translations of a Tolgee project."""

    name = "tolgee"

    def __init__(
        self,
        api_key: str,
        project_id: str,
        base_url: str = TOLGEE_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(headers={"X-API-Key": api_key}, timeout=timeout, client=client)
        self.base_url: str = base_url.rstrip("/")
        self.project_id: str = project_id

    @property
    def project_url(self) -> str:
        return f"{self.base_url}/v2/projects/{self.project_id}"

    @override
    def supported_locales(self) -> list[Locale]:
        return self.safe_locales("GET", f"{self.project_url}/languages")

    @override
    def extract_locale_codes(self, payload: Any) -> list[object]:  # pyright: ignore[reportExplicitAny,reportAny]
        if not isinstance(payload, Mapping):
            return []
        embedded = payload.get("_embedded") or {}  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
        return [
            item["tag"]
            for item in embedded.get("languages") or []  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
            if isinstance(item, Mapping) and "tag" in item
        ]

    @override
    def load(self, locale: Locale) -> dict[str, str]:
        url = f"{self.project_url}/translations/{locale.tag}"
        payload = self.expect_mapping(self.request("GET", url), url)

        # the response is keyed by language tag
        scoped = payload.get(locale.tag)
        if isinstance(scoped, Mapping):
            return flatten_translations(scoped)  # pyright: ignore[reportUnknownArgumentType]
        return flatten_translations(payload)
