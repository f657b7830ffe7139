"""Public entry points."""

from collections.abc import Iterable, Mapping
from typing import TypeVar

from .core.deserializer import deserialize_pairs
from .core.vars import VarMapping
from .environment import read_environment
from .prefixed import PrefixedSource

T = TypeVar("T")


def deserialize_from_env(target: type[T]) -> T:
    """
    Deserialize ``target`` from the process environment.

    Args:
        target: Model class (or mapping type) to populate

    Returns:
        A populated instance of ``target``

    Raises:
        MissingValueError: If a required field has no variable and no default
        CustomError: If a variable cannot be parsed or fails validation
    """
    return deserialize_from_iter(target, read_environment())


def deserialize_from_iter(
    target: type[T], pairs: Iterable[tuple[str, str]] | Mapping[str, str]
) -> T:
    """
    Deserialize ``target`` from an iterable of (key, value) string pairs.

    A plain mapping of strings is accepted as well. Keys are matched
    case-insensitively against the uppercased field names.

    Args:
        target: Model class (or mapping type) to populate
        pairs: Source pairs, consumed once

    Returns:
        A populated instance of ``target``

    Raises:
        MissingValueError: If a required field has no variable and no default
        CustomError: If a variable cannot be parsed or fails validation
    """
    return deserialize_pairs(target, pairs, VarMapping())


def with_prefix(prefix: str) -> PrefixedSource:
    """
    Create a source that only sees variables starting with ``prefix``.

    Example:
        >>> config = with_prefix("APP_").deserialize_from_env(Config)
    """
    return PrefixedSource(prefix=prefix)
