"""Parsers for ``[aliases]`` and ``[numbers.*]`` lines and the multimap helper."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Hashable, List, Tuple, TypeVar

from .errors import ResourceFormatError

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(slots=True, frozen=True)
class AliasEntry:
    """Parsed ``alias = canonical`` line.

    ``phrase`` holds the whitespace-split tokens when the alias has more than
    one word and is empty otherwise.
    """

    alias: str
    canonical: str
    phrase: Tuple[str, ...] = ()

    @property
    def is_multiword(self) -> bool:
        return bool(self.phrase)


@dataclass(slots=True, frozen=True)
class NumberEntry:
    alias: str
    value: int


def add_unique(mapping: Dict[K, List[V]], key: K, value: V) -> bool:
    """Append ``value`` to the list stored under ``key``.

    Returns False, leaving ``mapping`` untouched, when the pair is already
    present.
    """

    values = mapping.get(key)
    if values is None:
        mapping[key] = [value]
        return True
    if value in values:
        return False
    values.append(value)
    return True


def _split_fields(line: str, section: str) -> List[str]:
    fields = line.strip().split("=")
    if len(fields) != 2:
        raise ResourceFormatError(f"Illegal line in [{section}] section", line=line)
    return fields


def _unquote(field: str) -> str:
    """Trim whitespace and drop one layer of surrounding double quotes."""

    text = field.strip()
    if text.startswith('"'):
        text = text[1:]
    if text.endswith('"'):
        text = text[:-1]
    return text.strip()


def parse_alias_line(line: str) -> AliasEntry:
    """Parse an ``[aliases]`` line such as ``"turn up" = "increase"``."""

    left, right = _split_fields(line, "aliases")
    alias = _unquote(left)
    canonical = _unquote(right)
    if not alias or not canonical:
        raise ResourceFormatError("Empty alias or canonical word in [aliases] section", line=line)
    tokens = alias.split()
    if len(tokens) > 1:
        return AliasEntry(alias=alias, canonical=canonical, phrase=tuple(tokens))
    return AliasEntry(alias=alias, canonical=canonical)


def parse_number_line(line: str, section: str = "numbers") -> NumberEntry:
    """Parse a ``[numbers.*]`` line such as ``third = 3``."""

    left, right = (field.strip() for field in _split_fields(line, section))
    if not left:
        raise ResourceFormatError(f"Empty alias in [{section}] section", line=line)
    if not _INTEGER_RE.fullmatch(right):
        raise ResourceFormatError(f"Invalid integer {right!r} in [{section}] section", line=line)
    return NumberEntry(alias=left, value=int(right))


__all__ = [
    "AliasEntry",
    "NumberEntry",
    "add_unique",
    "parse_alias_line",
    "parse_number_line",
]
