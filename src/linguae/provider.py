"""
The Linguae provider.

``LinguaeProvider`` ties a translation source to a per-locale cache, creates
labels, applies the fallback policy for missing keys and looks up
serializers for output types. Labels keep a reference to the provider that
created them, so the provider is passed explicitly instead of living in a
global.

Usage Examples:
    Basic setup:
        >>> provider = LinguaeProvider(JsonFileSource("locales"), locale="en-US")
        >>> provider.translate("ui.title")
        'Welcome'

    Labels with placeholders:
        >>> label = provider.label("ui.greeting").with_mapping("name", "Alice")
        >>> label.mapped("de-DE")
        'Hallo Alice!'

    Rich text output:
        >>> label.render(Text)
        <text 'Hello Alice!' []>
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from rich.text import Text

from .cache import TranslationCache
from .exceptions import LabelParseError, TranslationLoadError
from .label import (
    Fallback,
    Label,
    LiteralLabel,
    TranslatableLabel,
    parse_label_literal,
    shorten,
)
from .locale import Locale, LocaleLike, to_locale
from .placeholder import Mappings, PlaceholderPattern
from .serialize import (
    LabelSerializer,
    RichTextSerializer,
    SerializerRegistry,
    StringLabelSerializer,
)
from .sources.base import LinguaeSource

T = TypeVar("T")

LabelHandler = Callable[[str], Label]

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-US"


def default_fallback(key: str) -> Fallback:
    """Fallback producing ``[<locale tag>.<key>]``, e.g. ``[en-us.ui.title]``."""

    def fallback(locale: Locale) -> str:
        return f"[{locale.tag.lower()}.{key}]"

    return fallback


class LinguaeProvider:
    """Creates labels and resolves them against a cached translation source."""

    def __init__(
        self,
        source: LinguaeSource,
        locale: LocaleLike = DEFAULT_LOCALE,
        pattern: PlaceholderPattern = PlaceholderPattern.DOLLAR,
        strict: bool = False,
        register_default_serializers: bool = True,
    ) -> None:
        """
        Initialize the provider.

        Args:
            source: Translation source for every locale
            locale: Default locale, used when none is given and as the
                second lookup before the fallback function
            pattern: Default placeholder pattern for label mappings
            strict: Raise ``TranslationLoadError`` after resolving a lookup
                whose locale failed to load, instead of only logging it
            register_default_serializers: Register the ``str`` and
                ``rich.text.Text`` serializers
        """
        self._source: LinguaeSource = source
        self._locale: Locale = to_locale(locale)
        self._pattern: PlaceholderPattern = pattern
        self._strict: bool = strict
        self._cache: TranslationCache = TranslationCache(source)
        self._serializers: SerializerRegistry = SerializerRegistry()
        self._label_handlers: dict[str, LabelHandler] = {
            TranslatableLabel.TAG: self.label,
            LiteralLabel.TAG: self.literal,
        }

        if register_default_serializers:
            self._serializers.register(str, StringLabelSerializer())
            self._serializers.register(Text, RichTextSerializer())

    @property
    def source(self) -> LinguaeSource:
        return self._source

    @property
    def locale(self) -> Locale:
        """The default locale."""
        return self._locale

    @property
    def pattern(self) -> PlaceholderPattern:
        """The default placeholder pattern."""
        return self._pattern

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def cache(self) -> TranslationCache:
        return self._cache

    @property
    def serializers(self) -> SerializerRegistry:
        return self._serializers

    # Labels

    def create_fallback(self, key: str) -> Fallback:
        """Return the fallback used for ``key`` when none is given."""
        return default_fallback(key)

    def mappings(self) -> Mappings:
        """An empty mapping collection using the provider's pattern."""
        return Mappings(default_pattern=self._pattern)

    def label(self, key: str, fallback: Fallback | str | None = None) -> TranslatableLabel:
        """
        Create a translatable label.

        Args:
            key: Translation key
            fallback: Text, or a function of the requested locale, used when
                the key is missing; defaults to ``create_fallback(key)``
        """
        return TranslatableLabel(
            key=key,
            fallback=self._as_fallback(key, fallback),
            provider=self,
            mappings=self.mappings(),
        )

    def literal(self, text: str) -> LiteralLabel:
        """Create a label that resolves to ``text`` for every locale."""
        return LiteralLabel(text=text, provider=self, mappings=self.mappings())

    def _as_fallback(self, key: str, fallback: Fallback | str | None) -> Fallback:
        if fallback is None:
            return self.create_fallback(key)
        if isinstance(fallback, str):
            text = fallback
            return lambda _locale: text
        return fallback

    # Translation

    def translate(
        self,
        key: str,
        locale: LocaleLike | None = None,
        fallback: Fallback | str | None = None,
    ) -> str:
        """
        Resolve ``key`` for ``locale``.

        The locale's translations are loaded once and cached. A missing key
        is looked up in the default locale, then produced by ``fallback``
        applied to the requested locale. Whatever value results is memoized
        until the cache is cleared.

        Args:
            key: Translation key
            locale: Locale to resolve, defaults to the provider locale
            fallback: Text or function used for missing keys

        Returns:
            The translated text

        Raises:
            TranslationLoadError: In strict mode, when the locale failed to
                load (the fallback is still memoized)
        """
        target = self._locale if locale is None else to_locale(locale)
        resolve_missing = self._as_fallback(key, fallback)

        value = self._cache.get(
            target, key, lambda: self._resolve_missing(key, target, resolve_missing)
        )

        if self._strict:
            failure = self._cache.failure(target)
            if failure is not None:
                raise TranslationLoadError(target.tag) from failure

        return value

    def _resolve_missing(self, key: str, locale: Locale, fallback: Fallback) -> str:
        if locale != self._locale:
            default_value = self._cache.lookup(self._locale, key)
            if default_value is not None:
                logger.debug(
                    f"Key {key!r} missing for {locale.tag}, using {self._locale.tag}"
                )
                return default_value

        logger.debug(f"Key {key!r} missing for {locale.tag}, using fallback")
        return fallback(locale)

    def clear_cache(self, locale: LocaleLike | None = None) -> None:
        """Clear cached translations for ``locale``, or for every locale."""
        self._cache.clear(None if locale is None else to_locale(locale))

    def supported_locales(self) -> list[Locale]:
        """Locales reported by the source (best effort)."""
        return self._source.supported_locales()

    def supports(self, locale: LocaleLike) -> bool:
        """Whether the source has translations for ``locale``."""
        return self._source.supports(to_locale(locale))

    # Label literals

    def register_label_handler(self, tag: str, handler: LabelHandler) -> None:
        """Register ``handler`` to build labels from ``<[tag:"content"]>``."""
        self._label_handlers[tag] = handler

    def parse_label(self, text: str) -> Label:
        """
        Parse a ``<[tag:"content"]>`` label literal.

        Raises:
            LabelParseError: If the literal is malformed or the tag unknown
        """
        tag, content = parse_label_literal(text)
        handler = self._label_handlers.get(tag)
        if handler is None:
            raise LabelParseError(
                f'Failed to parse: unknown key "{tag}" from Label <[{tag}:{shorten(content)}]>',
                text,
                2,
            )
        return handler(content)

    # Serialization

    def register_serializer(
        self, output_type: type[T], serializer: LabelSerializer[T]
    ) -> None:
        """Register ``serializer`` for ``output_type``."""
        self._serializers.register(output_type, serializer)

    def serialize(self, label: Label, output_type: type[T]) -> T:
        """
        Serialize ``label`` into ``output_type``.

        Raises:
            SerializerNotRegisteredError: If ``output_type`` has no serializer
            IncompatibleSerializerResultError: If the serializer returned
                something other than ``output_type``
        """
        return self._serializers.serialize(label, output_type)

    def deserialize(self, serialized: object) -> Label:
        """Rebuild a label from a value of any registered type."""
        return self._serializers.deserialize(serialized, self)

    def format(self, text: str, output_type: type[T]) -> T:
        """Format a resolved string into ``output_type``."""
        return self._serializers.format(text, output_type)
