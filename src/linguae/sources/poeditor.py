"""POEditor translation source (API v2)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, override

import httpx

from ..exceptions import SourceError
from ..locale import Locale
from .base import DEFAULT_TIMEOUT, HttpTranslationSource

POEDITOR_API_URL = "https://api.poeditor.com/v2"


class POEditorSource(HttpTranslationSource):
    """Loads project terms from POEditor."""

    name = "poeditor"

    def __init__(
        self,
        api_token: str,
        project_id: str,
        api_url: str = POEDITOR_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(timeout=timeout, client=client)
        self.api_token: str = api_token
        self.project_id: str = project_id
        self.api_url: str = api_url.rstrip("/")

    def call(self, endpoint: str, **fields: str) -> Mapping[str, object]:
        """
        POST a form to ``endpoint`` and return the ``result`` object.

        POEditor answers failures with HTTP 200 and ``response.status`` set
        to ``fail``, so the status field is checked as well.
        """
        url = f"{self.api_url}/{endpoint}"
        payload = self.expect_mapping(
            self.request(
                "POST",
                url,
                data={"api_token": self.api_token, "id": self.project_id, **fields},
            ),
            url,
        )
        status = payload.get("response")
        if isinstance(status, Mapping) and status.get("status") != "success":  # pyright: ignore[reportUnknownMemberType]
            message = status.get("message", "Unknown API error")  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
            raise SourceError(f"poeditor API error: {message}", context=url)

        result = payload.get("result")
        return result if isinstance(result, Mapping) else {}  # pyright: ignore[reportUnknownVariableType]

    @override
    def supported_locales(self) -> list[Locale]:
        return self.guarded_locales(
            lambda: [
                item.get("code")
                for item in self.call("languages/list").get("languages") or []  # pyright: ignore[reportGeneralTypeIssues]
                if isinstance(item, Mapping)
            ],
            f"{self.api_url}/languages/list",
        )

    @override
    def load(self, locale: Locale) -> dict[str, str]:
        result = self.call("terms/list", language=locale.tag.lower())

        translations: dict[str, str] = {}
        with self.payload_errors(f"{self.api_url}/terms/list"):
            for term in result.get("terms") or []:  # pyright: ignore[reportGeneralTypeIssues]
                if not isinstance(term, Mapping):
                    continue
                translation = term.get("translation")
                if not isinstance(translation, Mapping):
                    continue
                content: Any = translation.get("content")  # pyright: ignore[reportExplicitAny]
                if isinstance(content, Mapping):
                    # plural terms carry one entry per form
                    content = content.get("other") or content.get("one")
                if content:
                    translations[str(term["term"])] = str(content)
        return translations
