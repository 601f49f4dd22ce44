"""
Rich text serialization.

Resolved strings are treated as console markup (``[bold]Hi[/bold]``) and
formatted into ``rich.text.Text``. Labels serialize to a ``Text`` holding
their literal form so they can be parsed back.

Only bracketed tags that name a valid style are markup. Anything else in
square brackets, such as the default fallback ``[en-us.ui.title]`` or a
translation like ``see [note] here``, is kept as plain text.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, final, override

from rich.errors import MarkupError, StyleSyntaxError
from rich.markup import RE_TAGS
from rich.style import Style
from rich.text import Text

from ..exceptions import FormatError
from ..label import format_label_literal
from .base import LabelSerializer

if TYPE_CHECKING:
    from ..label import Label
    from ..provider import LinguaeProvider


def is_style_tag(tag: str) -> bool:
    """
    Whether the inside of a ``[...]`` tag is console markup.

    Closing tags are judged by the style they close; ``[/]`` and ``@``
    handler tags always count as markup.
    """
    name = tag[1:].strip() if tag.startswith("/") else tag
    if not name or name.startswith("@"):
        return True
    style_name, equals, parameters = name.partition("=")
    definition = f"{style_name} {parameters}" if equals else style_name
    try:
        _ = Style.parse(definition)
    except StyleSyntaxError:
        return False
    return True


def escape_unknown_tags(markup: str) -> str:
    """Escape every bracketed tag that is not console markup."""

    def replace(match: re.Match[str]) -> str:
        full_text, escapes, tag = match.groups()
        # an odd number of backslashes already escapes the tag
        if len(escapes) % 2 or is_style_tag(tag):
            return full_text
        return f"{escapes}\\[{tag}]"

    return RE_TAGS.sub(replace, markup)


@final
class RichTextSerializer(LabelSerializer[Text]):
    """Serializer for ``rich.text.Text``."""

    def __init__(self, style: str = "", emoji: bool = True) -> None:
        """
        Args:
            style: Base style applied to formatted text
            emoji: Whether ``:emoji:`` codes are rendered
        """
        self.style: str = style
        self.emoji: bool = emoji

    @override
    def serialize(self, label: Label) -> Text:
        return Text(format_label_literal(label.TAG, label.content))

    @override
    def deserialize(self, serialized: Text, provider: LinguaeProvider) -> Label:
        return provider.parse_label(serialized.plain)

    @override
    def format(self, text: str) -> Text:
        try:
            return Text.from_markup(
                escape_unknown_tags(text), style=self.style, emoji=self.emoji
            )
        except MarkupError as e:
            raise FormatError(f"Invalid markup: {e}", context=text) from e
