"""Common base classes for core functionality."""

from .base_deserializer import BaseValueDeserializer

__all__ = ["BaseValueDeserializer"]
