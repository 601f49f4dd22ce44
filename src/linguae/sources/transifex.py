"""Transifex translation source (REST API v3)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, override

import httpx

from ..locale import Locale
from .base import DEFAULT_TIMEOUT, HttpTranslationSource

TRANSIFEX_API_URL = "https://rest.api.transifex.com"


class TransifexSource(HttpTranslationSource):
    """
    Loads the translations of one Transifex resource.

    Args:
        api_token: Transifex API token
        resource: Resource id, e.g. ``o:acme:p:app:r:messages``
        project: Project id used to list languages, derived from the
            resource id when omitted
    """

    name = "transifex"

    def __init__(
        self,
        api_token: str,
        resource: str,
        project: str | None = None,
        api_url: str = TRANSIFEX_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(
            headers={
                "Authorization": f"Bearer {api_token}",
                "Accept": "application/vnd.api+json",
            },
            timeout=timeout,
            client=client,
        )
        self.api_url: str = api_url.rstrip("/")
        self.resource: str = resource
        self.project: str | None = project or (
            resource.rsplit(":r:", 1)[0] if ":r:" in resource else None
        )

    @override
    def supported_locales(self) -> list[Locale]:
        if self.project is None:
            return []
        return self.safe_locales(
            "GET", f"{self.api_url}/projects/{self.project}/languages"
        )

    @override
    def extract_locale_codes(self, payload: Any) -> list[object]:  # pyright: ignore[reportExplicitAny,reportAny]
        if not isinstance(payload, Mapping):
            return []
        codes: list[object] = []
        for item in payload.get("data") or []:  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
            attributes = item.get("attributes") if isinstance(item, Mapping) else None  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
            if isinstance(attributes, Mapping) and attributes.get("code"):  # pyright: ignore[reportUnknownMemberType]
                codes.append(attributes["code"])
        return codes

    @override
    def load(self, locale: Locale) -> dict[str, str]:
        url = f"{self.api_url}/resource_translations"
        payload = self.expect_mapping(
            self.request(
                "GET",
                url,
                params={
                    "filter[resource]": self.resource,
                    "filter[language]": f"l:{locale.file_stem}",
                    "include": "resource_string",
                },
            ),
            url,
        )

        with self.payload_errors(url):
            return self._parse_translations(payload)

    def _parse_translations(self, payload: Mapping[str, object]) -> dict[str, str]:
        keys: dict[str, str] = {}
        for item in payload.get("included") or []:  # pyright: ignore[reportGeneralTypeIssues]
            if isinstance(item, Mapping) and item.get("type") == "resource_strings":
                keys[str(item["id"])] = str(item["attributes"]["key"])

        translations: dict[str, str] = {}
        for item in payload.get("data") or []:  # pyright: ignore[reportGeneralTypeIssues]
            if not isinstance(item, Mapping):
                continue
            string_id = str(item["relationships"]["resource_string"]["data"]["id"])
            strings = item["attributes"].get("strings")
            if not isinstance(strings, Mapping) or strings.get("other") is None:
                continue
            translations[keys.get(string_id, string_id)] = str(strings["other"])
        return translations
