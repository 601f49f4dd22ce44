"""
Per-locale translation cache.

The cache maps a locale tag to the key/value snapshot loaded from a
translation source. A locale is loaded on its first lookup and kept until it
is cleared. Lookups are safe from several threads: values are inserted with
``dict.setdefault`` so the first completed value wins and every later lookup
of the same (locale, key) observes it. No lock is held while a source is
loading, so a ``clear`` can race with a lookup that is still populating the
cache.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, final

if TYPE_CHECKING:
    from .locale import Locale
    from .sources.base import LinguaeSource

logger = logging.getLogger(__name__)


@final
class TranslationCache:
    """Lazily populated ``locale tag -> key -> text`` map."""

    def __init__(self, source: LinguaeSource) -> None:
        """
        Initialize an empty cache backed by ``source``.

        Args:
            source: Translation source used to load missing locales
        """
        self._source: LinguaeSource = source
        self._entries: dict[str, dict[str, str]] = {}
        self._failures: dict[str, Exception] = {}

    @property
    def source(self) -> LinguaeSource:
        """The translation source backing this cache."""
        return self._source

    def entries(self, locale: Locale) -> dict[str, str]:
        """
        Return the translations of ``locale``, loading them on first access.

        A failing source is treated as having no translations for the
        locale: the error is logged, remembered (see ``failure``) and an
        empty map is cached.
        """
        entries = self._entries.get(locale.tag)
        if entries is not None:
            return entries

        try:
            loaded = dict(self._source.load(locale))
            logger.debug(f"Loaded {len(loaded)} translations for {locale.tag}")
        except Exception as e:
            logger.warning(f"Failed to load translations for {locale.tag}: {e}")
            _ = self._failures.setdefault(locale.tag, e)
            loaded = {}

        return self._entries.setdefault(locale.tag, loaded)

    def lookup(self, locale: Locale, key: str) -> str | None:
        """Return the cached value of ``key`` without computing a fallback."""
        return self.entries(locale).get(key)

    def get(self, locale: Locale, key: str, compute: Callable[[], str]) -> str:
        """
        Return the value of ``key`` in ``locale``.

        When the key is absent ``compute`` produces the value, which is then
        memoized so repeated lookups return the same string.

        Args:
            locale: Locale to look in
            key: Translation key
            compute: Called once to produce a value for a missing key

        Returns:
            The cached or computed value
        """
        entries = self.entries(locale)
        value = entries.get(key)
        if value is not None:
            return value
        return entries.setdefault(key, compute())

    def failure(self, locale: Locale) -> Exception | None:
        """Return the error raised while loading ``locale``, if any."""
        return self._failures.get(locale.tag)

    def is_loaded(self, locale: Locale) -> bool:
        """Whether ``locale`` has been loaded since the last clear."""
        return locale.tag in self._entries

    def cached_locales(self) -> list[str]:
        """Tags of all locales currently held in the cache."""
        return sorted(self._entries)

    def clear(self, locale: Locale | None = None) -> None:
        """
        Drop cached translations.

        Args:
            locale: Locale to drop; every locale is dropped when omitted
        """
        if locale is None:
            self._entries.clear()
            self._failures.clear()
            logger.debug("Cleared translation cache")
            return

        _ = self._entries.pop(locale.tag, None)
        _ = self._failures.pop(locale.tag, None)
        logger.debug(f"Cleared translation cache for {locale.tag}")
