"""Line scanner for sectioned language resource files.

The format is a small TOML-like dialect::

    # comment
    // comment
    [aliases]
    "coffee" = "copy"

    [stopwords]
    the a an please

Section headers are tracked here; what a data line means is left to the entry
builders. A line is reported together with the section it appeared under and
its 1-based position in the input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from .errors import ResourceStructureError

LOGGER = logging.getLogger(__name__)

COMMENT_PREFIXES: tuple[str, ...] = ("#", "//")

NUMBER_SECTIONS: frozenset[str] = frozenset({"numbers.ordinals", "numbers.plain", "numbers.literals"})
RECOGNIZED_SECTIONS: frozenset[str] = frozenset({"aliases", "stopwords"}) | NUMBER_SECTIONS


@dataclass(slots=True, frozen=True)
class SectionLine:
    """A data line and the section heading it belongs to."""

    section: str
    text: str
    lineno: int


def _clean_line(raw_line: str) -> str:
    """Return the stripped line, or an empty string for blanks and comments."""

    line = raw_line.strip()
    if line.startswith(COMMENT_PREFIXES):
        return ""
    return line


def _section_name(header: str) -> str:
    name = header[1:]
    if name.endswith("]"):
        name = name[:-1]
    return name.strip()


def scan_sections(lines: Iterable[str]) -> Iterator[SectionLine]:
    """Yield every data line of ``lines`` tagged with its current section.

    Raises :class:`ResourceStructureError` for a data line that precedes the
    first heading or sits under a section outside :data:`RECOGNIZED_SECTIONS`.
    """

    section: Optional[str] = None
    for lineno, raw_line in enumerate(lines, start=1):
        line = _clean_line(raw_line)
        if not line:
            continue
        if line.startswith("["):
            section = _section_name(line)
            LOGGER.debug("Entering section [%s] at line %d", section, lineno)
            continue
        if section is None:
            raise ResourceStructureError("Data encountered before section heading", line=line, lineno=lineno)
        if section not in RECOGNIZED_SECTIONS:
            raise ResourceStructureError(f"Unexpected section [{section}]", line=line, lineno=lineno)
        yield SectionLine(section=section, text=line, lineno=lineno)


__all__ = [
    "COMMENT_PREFIXES",
    "NUMBER_SECTIONS",
    "RECOGNIZED_SECTIONS",
    "SectionLine",
    "scan_sections",
]
