"""Textual parse rules for scalar field kinds."""

import re
from collections.abc import Callable
from typing import Any

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Same literal set pydantic accepts for booleans in lax mode
_TRUE_LITERALS = frozenset({"true", "1", "yes", "on", "t", "y"})
_FALSE_LITERALS = frozenset({"false", "0", "no", "off", "f", "n"})


def parse_bool(raw: str) -> bool:
    lowered = raw.lower()
    if lowered in _TRUE_LITERALS:
        return True
    if lowered in _FALSE_LITERALS:
        return False
    raise ValueError(
        "provided string was not a boolean literal (e.g. `true` or `false`)"
    )


def parse_int(raw: str) -> int:
    if not raw:
        raise ValueError("cannot parse integer from empty string")
    if not _INT_PATTERN.fullmatch(raw):
        raise ValueError("invalid digit found in string")
    return int(raw)


def parse_float(raw: str) -> float:
    if not raw:
        raise ValueError("cannot parse float from empty string")
    # float() tolerates both, textual env values should not
    if raw != raw.strip() or "_" in raw:
        raise ValueError("invalid float literal")
    try:
        return float(raw)
    except ValueError:
        raise ValueError("invalid float literal") from None


def parse_str(raw: str) -> str:
    return raw


SCALAR_PARSERS: dict[type, Callable[[str], Any]] = {
    bool: parse_bool,
    int: parse_int,
    float: parse_float,
    str: parse_str,
}


def parse_scalar(kind: type, raw: str) -> Any:
    """
    Parse a raw string as the given scalar kind.

    Args:
        kind: One of ``bool``, ``int``, ``float`` or ``str``
        raw: The raw variable value

    Returns:
        The parsed value

    Raises:
        ValueError: If the string is not a valid literal for ``kind``
        KeyError: If ``kind`` is not a scalar kind
    """
    return SCALAR_PARSERS[kind](raw)
