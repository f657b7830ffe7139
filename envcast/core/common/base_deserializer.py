"""Base implementation for single-value deserializers."""

from abc import ABC, abstractmethod
from typing import Any

from ..protocols import ValueDeserializer
from ..shapes import AnyShape, OptionalShape, ScalarShape, SequenceShape, Shape


class BaseValueDeserializer(ValueDeserializer, ABC):
    """
    Abstract base class for value deserializers.

    Dispatches a requested shape to the matching method, keeping the
    source-specific conversion logic abstract.

    Subclasses must implement:
    - deserialize_scalar(): Parse the value as a primitive kind
    - deserialize_seq(): Split the value and resolve each element
    - deserialize_any(): Produce the value handed to the framework as-is

    Subclasses can optionally override:
    - deserialize_option(): How a present optional value is resolved
    """

    def deserialize(self, shape: Shape) -> Any:
        """
        Resolve the value into the requested shape.

        Args:
            shape: Shape required by the target field

        Returns:
            The converted value, ready for framework validation

        Raises:
            TypeError: If the shape is not one this deserializer knows
        """
        if isinstance(shape, ScalarShape):
            return self.deserialize_scalar(shape.kind)
        if isinstance(shape, OptionalShape):
            return self.deserialize_option(shape.inner)
        if isinstance(shape, SequenceShape):
            return self.deserialize_seq(shape.inner)
        if isinstance(shape, AnyShape):
            return self.deserialize_any(shape.annotation)
        raise TypeError(f"Unsupported shape: {shape!r}")

    def deserialize_option(self, inner: Shape) -> Any:
        """
        Resolve a present optional value.

        Absent values never reach a value deserializer, so a present value is
        always "has value" and resolves against the inner shape.
        """
        return self.deserialize(inner)

    @abstractmethod
    def deserialize_scalar(self, kind: type) -> Any:
        """
        Parse the value as a primitive kind.

        Args:
            kind: One of ``bool``, ``int``, ``float`` or ``str``

        Returns:
            The parsed scalar
        """
        pass

    @abstractmethod
    def deserialize_seq(self, inner: Shape) -> list[Any]:
        """
        Split the value and resolve every element against ``inner``.

        Args:
            inner: Shape required by each element

        Returns:
            The resolved elements, in source order
        """
        pass

    @abstractmethod
    def deserialize_any(self, annotation: Any) -> Any:
        """
        Produce the value handed to the framework unchanged.

        Args:
            annotation: The annotation the framework validates against

        Returns:
            The value to validate
        """
        pass
