"""
Serializer contract and registry.

A ``LabelSerializer`` converts labels to and from one external type and
formats resolved strings into that type. The ``SerializerRegistry`` maps
output types to serializers and checks that each serializer returns what it
promised.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar, cast, final

from ..exceptions import IncompatibleSerializerResultError, SerializerNotRegisteredError

if TYPE_CHECKING:
    from ..label import Label
    from ..provider import LinguaeProvider

T = TypeVar("T")

logger = logging.getLogger(__name__)


class LabelSerializer(ABC, Generic[T]):
    """Converts between labels and one output type."""

    @abstractmethod
    def serialize(self, label: Label) -> T:
        """Turn ``label`` into the output type."""

    @abstractmethod
    def deserialize(self, serialized: T, provider: LinguaeProvider) -> Label:
        """
        Rebuild a label from its serialized form.

        Raises:
            LabelParseError: If ``serialized`` does not describe a label
        """

    @abstractmethod
    def format(self, text: str) -> T:
        """
        Format an already resolved string into the output type.

        Raises:
            FormatError: If the string cannot be represented
        """


@final
class SerializerRegistry:
    """Output type to serializer lookup."""

    def __init__(self) -> None:
        self._serializers: dict[type, LabelSerializer[Any]] = {}  # pyright: ignore[reportExplicitAny]

    def register(self, output_type: type[T], serializer: LabelSerializer[T]) -> None:
        """Register ``serializer`` for ``output_type``, replacing any previous one."""
        if output_type in self._serializers:
            logger.debug(f"Replacing serializer for {output_type.__qualname__}")
        self._serializers[output_type] = serializer

    def unregister(self, output_type: type) -> None:
        """Remove the serializer for ``output_type`` if present."""
        _ = self._serializers.pop(output_type, None)

    def get(self, output_type: type[T]) -> LabelSerializer[T]:
        """
        Return the serializer registered for ``output_type``.

        Raises:
            SerializerNotRegisteredError: If no serializer is registered
        """
        serializer = self._serializers.get(output_type)
        if serializer is None:
            raise SerializerNotRegisteredError(output_type)
        return cast(LabelSerializer[T], serializer)

    def find(self, value: object) -> tuple[type, LabelSerializer[Any]]:  # pyright: ignore[reportExplicitAny]
        """
        Find the serializer for a serialized value by walking its MRO.

        Raises:
            SerializerNotRegisteredError: If no class of ``value`` is registered
        """
        for cls in type(value).__mro__:
            serializer = self._serializers.get(cls)
            if serializer is not None:
                return cls, serializer
        raise SerializerNotRegisteredError(type(value))

    def types(self) -> list[type]:
        """All registered output types."""
        return list(self._serializers)

    def __contains__(self, output_type: object) -> bool:
        return output_type in self._serializers

    def serialize(self, label: Label, output_type: type[T]) -> T:
        """Serialize ``label`` into ``output_type``."""
        serializer = self.get(output_type)
        try:
            result = serializer.serialize(label)
        except TypeError as e:
            raise IncompatibleSerializerResultError(output_type, e) from e
        return self._checked(result, output_type)

    def deserialize(self, serialized: object, provider: LinguaeProvider) -> Label:
        """Rebuild a label from any registered serialized form."""
        output_type, serializer = self.find(serialized)
        try:
            return serializer.deserialize(serialized, provider)
        except TypeError as e:
            raise IncompatibleSerializerResultError(output_type, e) from e

    def format(self, text: str, output_type: type[T]) -> T:
        """Format a resolved string into ``output_type``."""
        serializer = self.get(output_type)
        try:
            result = serializer.format(text)
        except TypeError as e:
            raise IncompatibleSerializerResultError(output_type, e) from e
        return self._checked(result, output_type)

    @staticmethod
    def _checked(result: object, output_type: type[T]) -> T:
        if not isinstance(result, output_type):
            raise IncompatibleSerializerResultError(
                output_type, f"got {type(result).__qualname__}"
            )
        return result
