"""Mapping adapter, value shapes and the typed deserializer."""
