"""
Placeholder patterns and the mapping engine.

A ``PlaceholderPattern`` describes how placeholders are delimited in
translated text (``${name}``, ``{{name}}``, ``%name%`` ...). A ``Mapping``
replaces every placeholder with a given key by a value, and ``Mappings``
applies an ordered list of mappings to a string.

Usage Examples:
    >>> mappings = Mappings().add("name", "Alice").add("count", lambda: 3)
    >>> mappings.apply("Hello ${name}, you have ${count} messages")
    'Hello Alice, you have 3 messages'

    >>> Mapping(CURLY, "name", "Bob").apply("Hi {{name}}")
    'Hi Bob'
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import ClassVar, TypeAlias, final, override

MappingValue: TypeAlias = object | Callable[[], object]


@final
class PlaceholderPattern:
    """Prefix/suffix delimiters and the compiled rule matching them."""

    DOLLAR: ClassVar[PlaceholderPattern]
    PERCENT: ClassVar[PlaceholderPattern]
    FSTRING: ClassVar[PlaceholderPattern]
    CURLY: ClassVar[PlaceholderPattern]
    MINI_MESSAGE: ClassVar[PlaceholderPattern]

    def __init__(self, prefix: str, suffix: str) -> None:
        """
        Compile the matching rule for ``prefix + content + suffix``.

        The content may not contain the first character of the suffix. With
        an empty suffix the content is a run of word characters.

        Args:
            prefix: Opening delimiter, must not be empty
            suffix: Closing delimiter, may be empty

        Raises:
            ValueError: If the prefix is empty
        """
        if not prefix:
            raise ValueError("Placeholder prefix must not be empty")

        self.prefix: str = prefix
        self.suffix: str = suffix

        if suffix:
            content = f"([^{re.escape(suffix[0])}]+)"
        else:
            content = r"(\w+)"
        self.pattern: re.Pattern[str] = re.compile(
            re.escape(prefix) + content + re.escape(suffix)
        )

    def placeholder(self, key: str) -> str:
        """Render the placeholder text for ``key``."""
        return f"{self.prefix}{key}{self.suffix}"

    def keys(self, text: str) -> list[str]:
        """Return the placeholder keys found in ``text``, in order."""
        return [match.group(1) for match in self.pattern.finditer(text)]

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlaceholderPattern):
            return NotImplemented
        return self.prefix == other.prefix and self.suffix == other.suffix

    @override
    def __hash__(self) -> int:
        return hash((self.prefix, self.suffix))

    @override
    def __repr__(self) -> str:
        return f"PlaceholderPattern({self.prefix!r}, {self.suffix!r})"


PlaceholderPattern.DOLLAR = PlaceholderPattern("${", "}")
PlaceholderPattern.PERCENT = PlaceholderPattern("%", "%")
PlaceholderPattern.FSTRING = PlaceholderPattern("%", "")
PlaceholderPattern.CURLY = PlaceholderPattern("{{", "}}")
PlaceholderPattern.MINI_MESSAGE = PlaceholderPattern("<var:", ">")

DOLLAR = PlaceholderPattern.DOLLAR
PERCENT = PlaceholderPattern.PERCENT
FSTRING = PlaceholderPattern.FSTRING
CURLY = PlaceholderPattern.CURLY
MINI_MESSAGE = PlaceholderPattern.MINI_MESSAGE


# A piece of text being mapped; ``True`` marks text inserted by a replacement.
_Segment: TypeAlias = tuple[str, bool]


@dataclass(frozen=True, slots=True)
class Mapping:
    """A single ``key -> value`` substitution rule."""

    pattern: PlaceholderPattern
    key: str
    value: MappingValue

    def resolve_value(self) -> str:
        """Evaluate the value, calling it first when it is a supplier."""
        value = self.value() if callable(self.value) else self.value
        return str(value)

    def apply(self, text: str) -> str:
        """
        Replace every placeholder for this key in ``text``.

        Matches with other keys are left untouched and the inserted values are
        not scanned again.

        Returns:
            The mapped text, or ``text`` itself when nothing was replaced
        """
        segments = self._split(text)
        if segments is None:
            return text
        return "".join(part for part, _ in segments)

    def _split(self, text: str) -> list[_Segment] | None:
        """Split ``text`` into original and replaced segments, or ``None``."""
        segments: list[_Segment] = []
        last_end = 0
        for match in self.pattern.pattern.finditer(text):
            if match.group(1) != self.key:
                continue
            if match.start() > last_end:
                segments.append((text[last_end : match.start()], False))
            segments.append((self.resolve_value(), True))
            last_end = match.end()

        if not segments:
            return None
        if last_end < len(text):
            segments.append((text[last_end:], False))
        return segments


@dataclass(frozen=True, slots=True)
class Mappings:
    """
    Ordered, immutable collection of mappings.

    ``add`` returns a new collection; the receiver is never modified.
    Mappings are applied in insertion order and each one works on the output
    of the previous ones, except that text inserted by a replacement is never
    scanned again. Two mappings for the same placeholder therefore resolve in
    favour of the one added first.
    """

    mappings: tuple[Mapping, ...] = ()
    default_pattern: PlaceholderPattern = field(
        default=PlaceholderPattern.DOLLAR, compare=False
    )

    def add(
        self,
        key: str,
        value: MappingValue,
        pattern: PlaceholderPattern | None = None,
    ) -> Mappings:
        """
        Return a copy with a mapping for ``key`` appended.

        Args:
            key: Placeholder content to replace
            value: Replacement, or a zero-argument callable producing it
            pattern: Delimiters to match, defaults to ``default_pattern``
        """
        mapping = Mapping(pattern or self.default_pattern, key, value)
        return self.add_mapping(mapping)

    def add_mapping(self, mapping: Mapping) -> Mappings:
        """Return a copy with ``mapping`` appended."""
        return Mappings((*self.mappings, mapping), self.default_pattern)

    def apply(self, text: str) -> str:
        """Apply every mapping to ``text`` in insertion order."""
        if not self.mappings:
            return text

        segments: list[_Segment] = [(text, False)]
        changed = False
        for mapping in self.mappings:
            next_segments: list[_Segment] = []
            for part, replaced in segments:
                split = None if replaced else mapping._split(part)
                if split is None:
                    next_segments.append((part, replaced))
                else:
                    next_segments.extend(split)
                    changed = True
            segments = next_segments

        if not changed:
            return text
        return "".join(part for part, _ in segments)

    def __len__(self) -> int:
        return len(self.mappings)

    def __iter__(self) -> Iterator[Mapping]:
        return iter(self.mappings)

    def __bool__(self) -> bool:
        return bool(self.mappings)
