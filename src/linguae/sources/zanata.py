"""Zanata translation source (REST API)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, override

import httpx

from ..locale import Locale
from .base import DEFAULT_TIMEOUT, HttpTranslationSource, flatten_translations


class ZanataSource(HttpTranslationSource):
    """Loads the translations of one Zanata document."""

    name = "zanata"

    def __init__(
        self,
        base_url: str,
        username: str,
        api_key: str,
        project: str,
        version: str = "master",
        document: str = "messages",
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(
            headers={
                "X-Auth-User": username,
                "X-Auth-Token": api_key,
                "Accept": "application/json",
            },
            timeout=timeout,
            client=client,
        )
        self.base_url: str = base_url.rstrip("/")
        self.project: str = project
        self.version: str = version
        self.document: str = document

    @property
    def iteration_url(self) -> str:
        """REST URL of the configured project version."""
        return f"{self.base_url}/rest/projects/p/{self.project}/iterations/i/{self.version}"

    @override
    def supported_locales(self) -> list[Locale]:
        return self.safe_locales("GET", f"{self.iteration_url}/locales")

    @override
    def extract_locale_codes(self, payload: Any) -> list[object]:  # pyright: ignore[reportExplicitAny,reportAny]
        if not isinstance(payload, list):
            return []
        return [
            item["localeId"]
            for item in payload  # pyright: ignore[reportUnknownVariableType]
            if isinstance(item, Mapping) and "localeId" in item
        ]

    @override
    def load(self, locale: Locale) -> dict[str, str]:
        url = f"{self.iteration_url}/r/{self.document}/translations/{locale.tag}"
        payload = self.expect_mapping(self.request("GET", url), url)

        targets = payload.get("textFlowTargets")
        if not isinstance(targets, list):
            return flatten_translations(payload)

        translations: dict[str, str] = {}
        with self.payload_errors(url):
            for target in targets:  # pyright: ignore[reportUnknownVariableType]
                if not isinstance(target, Mapping):
                    continue
                content = target.get("content")  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
                if content is None and target.get("contents"):  # pyright: ignore[reportUnknownMemberType]
                    content = target["contents"][0]
                if content:
                    translations[str(target["resId"])] = str(content)  # pyright: ignore[reportUnknownArgumentType]
        return translations
