"""Prefix-scoped variable sources."""

from collections.abc import Iterable, Mapping
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .core.deserializer import deserialize_pairs
from .core.vars import VarMapping
from .environment import read_environment

T = TypeVar("T")


class PrefixedSource(BaseModel):
    """
    Reusable source configuration that scopes variables by a key prefix.

    Only keys starting with ``prefix`` are visible, and the prefix is
    stripped before field lookup: with prefix ``APP_``, a field ``port`` is
    read from ``APP_PORT``.
    """

    prefix: str = Field(
        ...,
        description="Case-sensitive prefix variables must start with.",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    def deserialize_from_env(self, target: type[T]) -> T:
        """Deserializes ``target`` from the prefixed process environment."""
        return self.deserialize_from_iter(target, read_environment())

    def deserialize_from_iter(
        self,
        target: type[T],
        pairs: Iterable[tuple[str, str]] | Mapping[str, str],
    ) -> T:
        """Deserializes ``target`` from prefixed (key, value) pairs."""
        return deserialize_pairs(target, pairs, VarMapping(self.prefix))
