from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from .shapes import Shape


class VarSource(Protocol):
    """Defines the contract for building the variable mapping from raw pairs."""

    def build(
        self, pairs: Iterable[tuple[str, str]] | Mapping[str, str]
    ) -> Mapping[str, str]:
        """
        Normalizes raw (key, value) pairs into a read-only lookup mapping.

        Args:
            pairs: Iterable of string pairs, or a mapping of strings.
                   Consumed exactly once.

        Returns:
            Mapping from normalized (uppercased) key to raw value
        """
        ...

    def lookup_key(self, name: str) -> str:
        """Returns the mapping key a declared field name is looked up under."""
        ...


class ValueDeserializer(Protocol):
    """
    Defines the deserializer role for a single raw value.

    One method per shape a field may request; ``deserialize`` dispatches to
    the right one.
    """

    def deserialize(self, shape: Shape) -> Any:
        """Resolves the raw value into the requested shape."""
        ...

    def deserialize_scalar(self, kind: type) -> Any:
        """Parses the raw value as a scalar of the given kind."""
        ...

    def deserialize_option(self, inner: Shape) -> Any:
        """Resolves a present value for an optional field."""
        ...

    def deserialize_seq(self, inner: Shape) -> list[Any]:
        """Splits the raw value and resolves every element."""
        ...

    def deserialize_any(self, annotation: Any) -> Any:
        """Hands the raw value to the framework unchanged."""
        ...
