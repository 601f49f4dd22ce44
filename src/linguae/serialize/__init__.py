"""Serializers converting labels into output types."""

from .base import LabelSerializer, SerializerRegistry
from .rich_text import RichTextSerializer
from .plain_text import StringLabelSerializer

__all__ = [
    "LabelSerializer",
    "RichTextSerializer",
    "SerializerRegistry",
    "StringLabelSerializer",
]
