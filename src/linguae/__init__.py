"""
Linguae - localization templating with pluggable translation sources.

Resolve translation keys to locale-specific strings, substitute placeholders
and render the result as plain strings or rich text.
"""

import logging

from .cache import TranslationCache
from .exceptions import (
    ConfigurationError,
    ErrorCategory,
    ErrorSeverity,
    FormatError,
    IncompatibleSerializerResultError,
    LabelParseError,
    LinguaeError,
    SerializerNotRegisteredError,
    SourceError,
    TranslationLoadError,
)
from .label import BaseLabel, Label, LiteralLabel, TranslatableLabel
from .locale import Locale
from .placeholder import (
    CURLY,
    DOLLAR,
    FSTRING,
    MINI_MESSAGE,
    PERCENT,
    Mapping,
    Mappings,
    PlaceholderPattern,
)
from .provider import LinguaeProvider, default_fallback
from .serialize import (
    LabelSerializer,
    RichTextSerializer,
    SerializerRegistry,
    StringLabelSerializer,
)
from .sources import (
    GlotPressSource,
    HttpJsonSource,
    JsonFileSource,
    LinguaeSource,
    LokaliseSource,
    POEditorSource,
    TolgeeSource,
    TransifexSource,
    WeblateSource,
    ZanataSource,
    json_source,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.2.0"

__all__ = [
    "BaseLabel",
    "CURLY",
    "ConfigurationError",
    "DOLLAR",
    "ErrorCategory",
    "ErrorSeverity",
    "FSTRING",
    "FormatError",
    "GlotPressSource",
    "HttpJsonSource",
    "IncompatibleSerializerResultError",
    "JsonFileSource",
    "Label",
    "LabelParseError",
    "LabelSerializer",
    "LinguaeError",
    "LinguaeProvider",
    "LinguaeSource",
    "LiteralLabel",
    "Locale",
    "LokaliseSource",
    "MINI_MESSAGE",
    "Mapping",
    "Mappings",
    "PERCENT",
    "POEditorSource",
    "PlaceholderPattern",
    "RichTextSerializer",
    "SerializerNotRegisteredError",
    "SerializerRegistry",
    "SourceError",
    "StringLabelSerializer",
    "TolgeeSource",
    "TransifexSource",
    "TranslatableLabel",
    "TranslationCache",
    "TranslationLoadError",
    "WeblateSource",
    "ZanataSource",
    "default_fallback",
    "json_source",
]
