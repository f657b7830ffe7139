"""
Fixed-width integer types for model fields.

Values are parsed as plain integers first; pydantic then enforces the range,
so an out-of-range variable fails with a ``CustomError`` naming the field.
"""

from typing import Annotated

from pydantic import Field

U8 = Annotated[int, Field(ge=0, le=2**8 - 1)]
U16 = Annotated[int, Field(ge=0, le=2**16 - 1)]
U32 = Annotated[int, Field(ge=0, le=2**32 - 1)]
U64 = Annotated[int, Field(ge=0, le=2**64 - 1)]

I8 = Annotated[int, Field(ge=-(2**7), le=2**7 - 1)]
I16 = Annotated[int, Field(ge=-(2**15), le=2**15 - 1)]
I32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]
I64 = Annotated[int, Field(ge=-(2**63), le=2**63 - 1)]

__all__ = ["U8", "U16", "U32", "U64", "I8", "I16", "I32", "I64"]
