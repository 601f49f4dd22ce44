"""
Translation source contract and the shared HTTP client base.

A ``LinguaeSource`` returns the full key/value map of a locale. Listing and
probing locales are best effort and never raise; loading raises
``SourceError`` so the caller decides how to degrade.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import httpx

from ..exceptions import SourceError
from ..locale import Locale

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class LinguaeSource(ABC):
    """Pluggable backend supplying translations per locale."""

    @abstractmethod
    def supported_locales(self) -> list[Locale]:
        """List the locales this source has translations for (may be empty)."""

    @abstractmethod
    def load(self, locale: Locale) -> dict[str, str]:
        """
        Load every translation of ``locale``.

        Raises:
            SourceError: If the data could not be fetched or parsed
        """

    def supports(self, locale: Locale) -> bool:
        """Whether the source has translations for ``locale``."""
        return locale in self.supported_locales()


def flatten_translations(data: Mapping[str, object], prefix: str = "") -> dict[str, str]:
    """
    Flatten a JSON object into a ``key -> text`` map.

    Nested objects are joined with ``.``, ``null`` values are dropped and
    other scalars are converted with ``str()``.

    Examples:
        >>> flatten_translations({"ui": {"title": "Hi"}, "count": 3})
        {'ui.title': 'Hi', 'count': '3'}
    """
    result: dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if value is None:
            continue
        if isinstance(value, Mapping):
            result.update(flatten_translations(value, f"{full_key}."))  # pyright: ignore[reportUnknownArgumentType]
        elif isinstance(value, str):
            result[full_key] = value
        else:
            result[full_key] = str(value)
    return result


def parse_locales(codes: list[object]) -> list[Locale]:
    """Parse language codes returned by a service, skipping invalid ones."""
    locales: list[Locale] = []
    for code in codes:
        if not isinstance(code, str):
            logger.debug(f"Ignoring non-string locale code: {code!r}")
            continue
        try:
            locales.append(Locale.parse(code))
        except ValueError:
            logger.debug(f"Ignoring unparsable locale code: {code!r}")
    return locales


class HttpTranslationSource(LinguaeSource):
    """
    Base class for sources backed by an HTTP API.

    Owns an ``httpx.Client`` unless one is injected. Use the source as a
    context manager or call ``close()`` to release the client.
    """

    name: str = "http"

    def __init__(
        self,
        headers: dict[str, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        self.headers: dict[str, str] = headers or {}
        self.timeout: float = timeout
        self._owns_client: bool = client is None
        self.client: httpx.Client = client or httpx.Client(timeout=timeout)

    def __enter__(self) -> HttpTranslationSource:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this source created it."""
        if self._owns_client:
            self.client.close()

    def request(self, method: str, url: str, **kwargs: Any) -> Any:  # pyright: ignore[reportExplicitAny,reportAny]
        """
        Send a request and decode its JSON body.

        Raises:
            SourceError: On transport errors, error statuses or invalid JSON
        """
        headers = {**self.headers, **kwargs.pop("headers", {})}  # pyright: ignore[reportAny]
        try:
            response = self.client.request(method, url, headers=headers, **kwargs)  # pyright: ignore[reportAny]
            _ = response.raise_for_status()
            return response.json()  # pyright: ignore[reportAny]
        except httpx.HTTPError as e:
            raise SourceError(f"{self.name} request failed: {e}", context=url) from e
        except json.JSONDecodeError as e:
            raise SourceError(
                f"{self.name} returned invalid JSON: {e}", context=url
            ) from e

    @contextmanager
    def payload_errors(self, context: str) -> Iterator[None]:
        """
        Report a response that lacks the fields a parser expected.

        Raises:
            SourceError: For lookup and type errors raised inside the block
        """
        try:
            yield
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise SourceError(
                f"{self.name} returned an unexpected payload: {e!r}", context=context
            ) from e

    def guarded_locales(
        self, fetch_codes: Callable[[], list[object]], context: str
    ) -> list[Locale]:
        """Run a language listing, returning ``[]`` when it fails or is malformed."""
        try:
            with self.payload_errors(context):
                codes = fetch_codes()
        except SourceError as e:
            logger.warning(f"Could not list {self.name} locales: {e}")
            return []
        return parse_locales(codes)

    def safe_locales(self, method: str, url: str, **kwargs: Any) -> list[Locale]:  # pyright: ignore[reportExplicitAny,reportAny]
        """Fetch a language listing, returning ``[]`` on any source error."""
        return self.guarded_locales(
            lambda: self.extract_locale_codes(self.request(method, url, **kwargs)),
            url,
        )

    def extract_locale_codes(self, payload: Any) -> list[object]:  # pyright: ignore[reportExplicitAny,reportAny]
        """Pull language codes out of a language listing response."""
        return []

    @staticmethod
    def expect_mapping(payload: object, context: str) -> Mapping[str, object]:
        """Ensure a decoded JSON payload is an object."""
        if not isinstance(payload, Mapping):
            raise SourceError(
                f"Invalid response format: expected object, got {type(payload).__name__}",
                context=context,
            )
        return payload  # pyright: ignore[reportUnknownVariableType]
