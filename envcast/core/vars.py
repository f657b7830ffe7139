"""Builds the variable mapping that field lookups run against."""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .protocols import VarSource

logger = logging.getLogger(__name__)


class VarMapping(VarSource):
    """
    Normalizes raw (key, value) pairs into a read-only mapping.

    With a prefix, only keys starting with it (case-sensitive) are kept and
    the prefix is stripped once. Remaining keys are uppercased; on duplicate
    keys the last pair wins.
    """

    def __init__(self, prefix: str | None = None):
        """
        Initialize the mapping adapter.

        Args:
            prefix: Optional prefix scoping which keys are visible
        """
        self.prefix = prefix
        self._logger = logger.getChild(self.__class__.__name__)

    def build(
        self, pairs: Iterable[tuple[str, str]] | Mapping[str, str]
    ) -> Mapping[str, str]:
        if isinstance(pairs, Mapping):
            pairs = pairs.items()

        variables: dict[str, str] = {}
        seen = 0
        for key, value in pairs:
            seen += 1
            normalized = self._normalize(key)
            if normalized is None:
                continue
            variables[normalized] = value

        if self.prefix is None:
            self._logger.debug(f"Collected {len(variables)} variables")
        else:
            self._logger.debug(
                f"Kept {len(variables)} of {seen} variables "
                f"with prefix '{self.prefix}'"
            )
        return MappingProxyType(variables)

    def lookup_key(self, name: str) -> str:
        return name.upper()

    def _normalize(self, key: str) -> str | None:
        if self.prefix is not None:
            if not key.startswith(self.prefix):
                return None
            key = key[len(self.prefix) :]
        return key.upper()
