"""
Locale identifiers.

A ``Locale`` names a language/region combination. It is built from BCP 47
style tags (``en-US``) and from the underscore form used for translation file
names (``en_US``); both spellings compare equal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TypeAlias, override

_LANGUAGE_RE = re.compile(r"^[A-Za-z]{2,8}$")
_SCRIPT_RE = re.compile(r"^[A-Za-z]{4}$")
_REGION_RE = re.compile(r"^(?:[A-Za-z]{2}|[0-9]{3})$")


@dataclass(frozen=True, slots=True)
class Locale:
    """A language tag split into its subtags."""

    language: str
    script: str | None = None
    region: str | None = None

    @classmethod
    def parse(cls, tag: str) -> Locale:
        """
        Parse a language tag.

        Args:
            tag: Tag such as ``en``, ``en-US``, ``en_US`` or ``zh-Hant-TW``

        Returns:
            The parsed locale with normalized casing

        Raises:
            ValueError: If the tag has no valid language subtag
        """
        parts = [part for part in re.split(r"[-_]", tag.strip()) if part]
        if not parts or not _LANGUAGE_RE.match(parts[0]):
            raise ValueError(f"Invalid locale tag: {tag!r}")

        language = parts[0].lower()
        script: str | None = None
        region: str | None = None

        for part in parts[1:]:
            if script is None and region is None and _SCRIPT_RE.match(part):
                script = part.title()
            elif region is None and _REGION_RE.match(part):
                region = part.upper()
            else:
                raise ValueError(f"Invalid locale tag: {tag!r}")

        return cls(language=language, script=script, region=region)

    @property
    def tag(self) -> str:
        """BCP 47 form, e.g. ``en-US``."""
        return "-".join(
            part for part in (self.language, self.script, self.region) if part
        )

    @property
    def file_stem(self) -> str:
        """File name form, e.g. ``en_US``."""
        return self.tag.replace("-", "_")

    @override
    def __str__(self) -> str:
        return self.tag


LocaleLike: TypeAlias = Locale | str


def to_locale(value: LocaleLike) -> Locale:
    """Coerce a tag string or ``Locale`` into a ``Locale``."""
    if isinstance(value, Locale):
        return value
    return Locale.parse(value)
