"""
Value shapes.

Classifies a field annotation into the structural kind of value the
deserializer must produce for it: a scalar, an optional value, a
comma-separated sequence, or anything else (left to pydantic).
"""

from __future__ import annotations

import collections.abc
import types
from dataclasses import dataclass
from typing import Annotated, Any, Union, get_args, get_origin

SCALAR_KINDS: tuple[type, ...] = (bool, int, float, str)

_SEQUENCE_TYPES = (
    list,
    set,
    frozenset,
    tuple,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
)

_NONE_TYPE = type(None)


@dataclass(frozen=True)
class ScalarShape:
    """A single primitive value parsed from its textual form."""

    kind: type


@dataclass(frozen=True)
class OptionalShape:
    """A value that may be absent; present values resolve to ``inner``."""

    inner: Shape


@dataclass(frozen=True)
class SequenceShape:
    """A comma-separated list whose elements each resolve to ``inner``."""

    inner: Shape


@dataclass(frozen=True)
class AnyShape:
    """Anything else; the raw string is handed to pydantic unchanged."""

    annotation: Any


Shape = Union[ScalarShape, OptionalShape, SequenceShape, AnyShape]


def shape_of(annotation: Any) -> Shape:
    """
    Resolve the shape required by a type annotation.

    ``Annotated`` metadata is ignored here; pydantic enforces it after the
    value has been converted.

    Args:
        annotation: A field annotation (e.g. ``int``, ``list[int] | None``)

    Returns:
        The matching shape
    """
    origin = get_origin(annotation)

    if origin is Annotated:
        return shape_of(get_args(annotation)[0])

    if annotation in SCALAR_KINDS:
        return ScalarShape(annotation)

    if origin is Union or origin is types.UnionType:
        args = get_args(annotation)
        present = tuple(arg for arg in args if arg is not _NONE_TYPE)
        if len(present) == len(args):
            return AnyShape(annotation)
        if len(present) == 1:
            return OptionalShape(shape_of(present[0]))
        return OptionalShape(AnyShape(Union[present]))

    # Bare collection types carry strings
    if annotation in _SEQUENCE_TYPES:
        return SequenceShape(ScalarShape(str))

    if origin in _SEQUENCE_TYPES:
        args = get_args(annotation)
        if not args:
            return SequenceShape(ScalarShape(str))
        if origin is tuple:
            # Only homogeneous tuples split; fixed-length ones go to pydantic
            if len(args) == 2 and args[1] is Ellipsis:
                return SequenceShape(shape_of(args[0]))
            return AnyShape(annotation)
        return SequenceShape(shape_of(args[0]))

    return AnyShape(annotation)
