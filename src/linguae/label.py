"""
Labels: deferred, localizable text.

A label is either translatable (a translation key plus a fallback) or
literal (fixed text returned for every locale). Both variants carry their own
placeholder ``Mappings`` and the provider that created them, and both are
immutable: ``with_mapping`` returns a new label.

Labels round-trip through a textual literal form ``<[tag:"content"]>``:
``<[loc:"ui.title"]>`` for a translatable label and ``<[lit:"Hello"]>`` for a
literal one.

Usage Examples:
    >>> title = provider.label("ui.title", "Welcome")
    >>> title.resolve("de-DE")
    'Willkommen'
    >>> greeting = provider.label("ui.greeting").with_mapping("name", "Alice")
    >>> greeting.mapped("en-US")
    'Hello Alice!'
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, TypeAlias, TypeVar, override

from .exceptions import LabelParseError
from .locale import Locale, LocaleLike
from .placeholder import MappingValue, Mappings, PlaceholderPattern

if TYPE_CHECKING:
    from .provider import LinguaeProvider

T = TypeVar("T")

Fallback: TypeAlias = Callable[[Locale], str]

LITERAL_PREFIX = "<["
LITERAL_SUFFIX = "]>"
_SEPARATOR = ':"'


class BaseLabel(ABC):
    """Behaviour shared by both label variants."""

    __slots__ = ()

    TAG: ClassVar[str]

    provider: LinguaeProvider
    mappings: Mappings

    @property
    @abstractmethod
    def content(self) -> str:
        """The text stored in the label literal (key or literal text)."""

    @abstractmethod
    def resolve(self, locale: LocaleLike | None = None) -> str:
        """Resolve the raw text for ``locale`` without applying mappings."""

    def with_mapping(
        self,
        key: str,
        value: MappingValue,
        pattern: PlaceholderPattern | None = None,
    ) -> Label:
        """
        Return a copy of this label with an additional placeholder mapping.

        Args:
            key: Placeholder content to replace
            value: Replacement, or a zero-argument callable producing it
            pattern: Delimiters to match, defaults to the provider's pattern
        """
        mappings = self.mappings.add(key, value, pattern)
        return dataclasses.replace(self, mappings=mappings)  # pyright: ignore[reportArgumentType]

    def with_mappings(self, values: dict[str, MappingValue]) -> Label:
        """Return a copy with one mapping per ``values`` item, in order."""
        mappings = self.mappings
        for key, value in values.items():
            mappings = mappings.add(key, value)
        return dataclasses.replace(self, mappings=mappings)  # pyright: ignore[reportArgumentType]

    def mapped(self, locale: LocaleLike | None = None) -> str:
        """Resolve the text for ``locale`` and apply the label's mappings."""
        return self.mappings.apply(self.resolve(locale))

    def render(
        self,
        output_type: type[T],
        locale: LocaleLike | None = None,
        mapped: bool = True,
    ) -> T:
        """
        Resolve the label and format the text into ``output_type``.

        Args:
            output_type: Type registered with the provider's serializers
            locale: Locale to resolve, defaults to the provider locale
            mapped: Whether to apply the label's mappings first
        """
        text = self.mapped(locale) if mapped else self.resolve(locale)
        return self.provider.format(text, output_type)

    def serialize(self, output_type: type[T]) -> T:
        """Convert this label into ``output_type`` through the provider."""
        return self.provider.serialize(self, output_type)  # pyright: ignore[reportArgumentType]

    @override
    def __str__(self) -> str:
        return self.serialize(str)


@dataclass(frozen=True, slots=True, repr=False)
class TranslatableLabel(BaseLabel):
    """A label resolved through the provider's translation cache."""

    TAG: ClassVar[str] = "loc"

    key: str
    fallback: Fallback = field(compare=False)
    provider: LinguaeProvider = field(compare=False)
    mappings: Mappings = field(compare=False)

    @property
    @override
    def content(self) -> str:
        return self.key

    @override
    def resolve(self, locale: LocaleLike | None = None) -> str:
        return self.provider.translate(self.key, locale, self.fallback)

    @override
    def __repr__(self) -> str:
        return f"TranslatableLabel(key={self.key!r}, mappings={len(self.mappings)})"


@dataclass(frozen=True, slots=True, repr=False)
class LiteralLabel(BaseLabel):
    """A label whose text is the same for every locale."""

    TAG: ClassVar[str] = "lit"

    text: str
    provider: LinguaeProvider = field(compare=False)
    mappings: Mappings = field(compare=False)

    @property
    @override
    def content(self) -> str:
        return self.text

    @override
    def resolve(self, locale: LocaleLike | None = None) -> str:
        return self.text

    @override
    def __repr__(self) -> str:
        return f"LiteralLabel(text={self.text!r}, mappings={len(self.mappings)})"


Label: TypeAlias = TranslatableLabel | LiteralLabel


def format_label_literal(tag: str, content: str) -> str:
    """Render ``<[tag:"content"]>``."""
    return f'{LITERAL_PREFIX}{tag}{_SEPARATOR}{content}"{LITERAL_SUFFIX}'


def parse_label_literal(text: str) -> tuple[str, str]:
    """
    Split a ``<[tag:"content"]>`` literal into its tag and content.

    The content ends at the last double quote, so it may itself contain
    quotes.

    Args:
        text: The label literal

    Returns:
        Tuple of (tag, content)

    Raises:
        LabelParseError: If the delimiters, separator or tag are missing
    """
    if not text.startswith(LITERAL_PREFIX):
        raise LabelParseError(f"Invalid label format: {text}", text, 0)
    if len(text) < len(LITERAL_PREFIX) + len(LITERAL_SUFFIX) or not text.endswith(
        LITERAL_SUFFIX
    ):
        raise LabelParseError(f"Invalid label format: {text}", text, len(text))

    offset = len(LITERAL_PREFIX)
    inner = text[offset : -len(LITERAL_SUFFIX)]

    separator = inner.find(_SEPARATOR)
    if separator == -1:
        raise LabelParseError(
            f"Invalid label key/input structure: {text}", text, offset
        )

    end_quote = inner.rfind('"')
    if end_quote < separator + len(_SEPARATOR):
        raise LabelParseError(
            f"Invalid label key/input structure: {text}",
            text,
            offset + separator + len(_SEPARATOR),
        )

    if inner[end_quote + 1 :].strip():
        raise LabelParseError(
            f"Unexpected trailing input in label: {text}", text, offset + end_quote + 1
        )

    tag = inner[:separator].strip()
    if not tag:
        raise LabelParseError(f"Missing label key: {text}", text, offset)

    return tag, inner[separator + len(_SEPARATOR) : end_quote]


def shorten(content: str, limit: int = 23) -> str:
    """Shorten ``content`` for error messages."""
    return content if len(content) <= limit else f"{content[: limit - 3]}..."
