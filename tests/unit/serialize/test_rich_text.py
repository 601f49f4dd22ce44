"""Tests for rich text serialization."""

from __future__ import annotations

import pytest
from rich.text import Text

from linguae import LinguaeProvider
from linguae.exceptions import FormatError
from linguae.serialize import RichTextSerializer
from linguae.serialize.rich_text import is_style_tag


class TestRichTextSerializer:
    """Test cases for RichTextSerializer."""

    def test_format_markup(self) -> None:
        """Test that console markup becomes styled spans."""
        text = RichTextSerializer().format("[bold]Bold[/bold] text")

        assert text.plain == "Bold text"
        assert len(text.spans) == 1
        assert text.spans[0].start == 0
        assert text.spans[0].end == 4
        assert text.spans[0].style == "bold"

    def test_format_base_style(self) -> None:
        """Test the base style of formatted text."""
        text = RichTextSerializer(style="red").format("plain")

        assert text.style == "red"

    def test_format_without_emoji(self) -> None:
        """Test that emoji codes can be kept verbatim."""
        assert RichTextSerializer(emoji=False).format(":smile:").plain == ":smile:"

    def test_invalid_markup(self) -> None:
        """Test that broken markup raises FormatError."""
        with pytest.raises(FormatError, match="Invalid markup") as exc_info:
            _ = RichTextSerializer().format("oops [/bold]")

        assert exc_info.value.context == "oops [/bold]"

    def test_serialize_and_deserialize(self, provider: LinguaeProvider) -> None:
        """Test that labels round-trip through their literal text."""
        serializer = RichTextSerializer()
        label = provider.label("ui.title")

        serialized = serializer.serialize(label)

        assert isinstance(serialized, Text)
        assert serialized.plain == '<[loc:"ui.title"]>'
        assert serializer.deserialize(serialized, provider) == label


class TestUnknownTags:
    """Test cases for square brackets that are not console markup."""

    def test_fallback_text_kept(self, provider: LinguaeProvider) -> None:
        """Test that a missing key renders its fallback as rich text."""
        label = provider.label("ui.missing")

        text = label.render(Text)

        assert text.plain == "[en-us.ui.missing]"
        assert text.plain == label.mapped()
        assert text.spans == []

    def test_plain_brackets_kept(self) -> None:
        """Test that bracketed words without a style stay in the text."""
        text = RichTextSerializer().format("see [note] here")

        assert text.plain == "see [note] here"

    def test_unknown_tag_inside_markup(self) -> None:
        """Test mixing real markup with plain brackets."""
        text = RichTextSerializer().format(
            "[bold][de-de.ui.x][/bold] and [link=https://example.com]docs[/link]"
        )

        assert text.plain == "[de-de.ui.x] and docs"
        assert text.spans[0].style == "bold"
        assert text.spans[0].end == len("[de-de.ui.x]")

    def test_unknown_open_and_close_tags(self) -> None:
        """Test that a matching pair of unknown tags is kept verbatim."""
        text = RichTextSerializer().format("[note]x[/note]")

        assert text.plain == "[note]x[/note]"

    def test_escaped_tags_unchanged(self) -> None:
        """Test that escaped markup keeps its brackets."""
        assert RichTextSerializer().format("\\[bold]x").plain == "[bold]x"

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("bold", True),
            ("bold red on white", True),
            ("/bold", True),
            ("/", True),
            ("@click", True),
            ("link=https://example.com", True),
            ("en-us.ui.title", False),
            ("note", False),
            ("/note", False),
        ],
    )
    def test_is_style_tag(self, tag: str, expected: bool) -> None:
        """Test which tags count as console markup."""
        assert is_style_tag(tag) is expected
