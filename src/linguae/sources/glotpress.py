"""GlotPress translation source."""

from __future__ import annotations

from typing import override

import httpx

from ..exceptions import SourceError
from ..locale import Locale
from .base import DEFAULT_TIMEOUT, HttpTranslationSource


class GlotPressSource(HttpTranslationSource):
    """Exports a GlotPress translation set as JSON."""

    name = "glotpress"

    def __init__(
        self,
        base_url: str,
        project: str,
        translation_set: str = "default",
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(timeout=timeout, client=client)
        self.base_url: str = base_url.rstrip("/")
        self.project: str = project
        self.translation_set: str = translation_set

    @override
    def supported_locales(self) -> list[Locale]:
        # GlotPress has no public language listing endpoint
        return []

    @override
    def supports(self, locale: Locale) -> bool:
        try:
            return bool(self.load(locale))
        except SourceError:
            return False

    @override
    def load(self, locale: Locale) -> dict[str, str]:
        url = (
            f"{self.base_url}/projects/{self.project}/{locale.tag.lower()}/"
            f"{self.translation_set}/export-translations/"
        )
        payload = self.expect_mapping(
            self.request("GET", url, params={"format": "json"}), url
        )

        translations: dict[str, str] = {}
        for original, translated in payload.items():
            # values are lists holding one entry per plural form
            if isinstance(translated, list):
                translated = translated[0] if translated else None  # pyright: ignore[reportUnknownVariableType]
            if translated:
                translations[original] = str(translated)  # pyright: ignore[reportUnknownArgumentType]
        return translations
