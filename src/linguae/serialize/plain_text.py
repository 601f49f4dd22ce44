"""Plain string serialization using the ``<[tag:"content"]>`` label literal."""

from __future__ import annotations

from typing import TYPE_CHECKING, final, override

from ..label import format_label_literal
from .base import LabelSerializer

if TYPE_CHECKING:
    from ..label import Label
    from ..provider import LinguaeProvider


@final
class StringLabelSerializer(LabelSerializer[str]):
    """Serializes labels to their literal form; formatting is the identity."""

    @override
    def serialize(self, label: Label) -> str:
        return format_label_literal(label.TAG, label.content)

    @override
    def deserialize(self, serialized: str, provider: LinguaeProvider) -> Label:
        return provider.parse_label(serialized)

    @override
    def format(self, text: str) -> str:
        return text
