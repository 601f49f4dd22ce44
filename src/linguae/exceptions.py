"""
Exception classes for Linguae.

This module contains the error hierarchy shared by sources, the provider and
the serializers. It has no internal imports so every other module can use it
without creating import cycles.
"""

from __future__ import annotations

from enum import Enum


class ErrorSeverity(Enum):
    """Error severity levels for classification and handling."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Categories of errors for appropriate handling strategies."""

    SOURCE = "source"
    CONFIGURATION = "configuration"
    SERIALIZATION = "serialization"
    VALIDATION = "validation"
    UNKNOWN = "unknown"


class LinguaeError(Exception):
    """Base exception class for Linguae specific errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: object | None = None,
        recoverable: bool = True,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.context: object | None = context
        self.recoverable: bool = recoverable


class SourceError(LinguaeError):
    """A translation source failed to fetch or parse its data."""

    def __init__(
        self,
        message: str,
        context: object | None = None,
        recoverable: bool = True,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.SOURCE,
            severity=ErrorSeverity.MEDIUM,
            context=context,
            recoverable=recoverable,
        )


class TranslationLoadError(SourceError):
    """Loading the translations of a locale failed (raised in strict mode)."""

    def __init__(self, locale_tag: str) -> None:
        super().__init__(
            f"Failed to load translations for locale: {locale_tag}",
            context=locale_tag,
        )
        self.locale_tag: str = locale_tag


class ConfigurationError(LinguaeError):
    """Configuration-related errors."""

    def __init__(
        self,
        message: str,
        context: object | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            context=context,
            recoverable=False,
        )


class SerializerNotRegisteredError(ConfigurationError):
    """No serializer is registered for the requested output type."""

    def __init__(self, output_type: type) -> None:
        super().__init__(
            f"Unsupported serialization type: {output_type.__qualname__}",
            context=output_type,
        )
        self.output_type: type = output_type


class IncompatibleSerializerResultError(LinguaeError):
    """A serializer produced a value that does not match its output type."""

    def __init__(self, output_type: type, cause: object | None = None) -> None:
        message = (
            f"Serializer for type {output_type.__qualname__} "
            f"returned incompatible type"
        )
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(
            message,
            category=ErrorCategory.SERIALIZATION,
            severity=ErrorSeverity.HIGH,
            context=output_type,
            recoverable=False,
        )
        self.output_type: type = output_type


class FormatError(LinguaeError):
    """A resolved string could not be formatted into an output type."""

    def __init__(self, message: str, context: object | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.SERIALIZATION,
            severity=ErrorSeverity.MEDIUM,
            context=context,
        )


class LabelParseError(LinguaeError):
    """Input is not a valid ``<[tag:"content"]>`` label literal."""

    def __init__(self, message: str, text: str, position: int) -> None:
        super().__init__(
            message,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.LOW,
            context=text,
            recoverable=False,
        )
        self.text: str = text
        self.position: int = position
