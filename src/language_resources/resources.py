"""Language resource loading and the read-only lookup surface.

A resource file lists stop words, single and multi-word aliases and number
words for one language. Loading happens in two phases:

* :class:`LanguageResourceBuilder` accumulates entries line by line and
  rejects malformed or repeated ones.
* :meth:`LanguageResourceBuilder.build` assembles the stop word matcher once
  and returns an immutable :class:`LanguageResource` that only answers
  queries.

The module never opens files. Callers pass text, lines or an open stream.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, TextIO, Tuple, Union

from .entries import add_unique, parse_alias_line, parse_number_line
from .errors import DuplicateEntryError, LanguageResourceError, ResourceStructureError
from .scanner import NUMBER_SECTIONS, scan_sections
from .stopwords import StopwordMatcher, assemble_stopwords

LOGGER = logging.getLogger(__name__)

_DEFAULT_LANGS_DIR = Path("data/langs")
_DEFAULT_FILENAME_TEMPLATE = "{language}.toml"

Phrase = Tuple[str, ...]
ResourceSource = Union[str, TextIO, Iterable[str]]


def default_resource_path(language: str) -> Path:
    """Return the conventional location of the resource file for ``language``."""

    return _DEFAULT_LANGS_DIR / _DEFAULT_FILENAME_TEMPLATE.format(language=language)


def _freeze(mapping: Dict) -> Mapping:
    return MappingProxyType({key: tuple(values) for key, values in mapping.items()})


class LanguageResourceBuilder:
    """Accumulates resource entries; call :meth:`build` exactly once."""

    def __init__(self) -> None:
        self._aliases: Dict[str, List[str]] = {}
        self._multiword_aliases: Dict[str, List[Phrase]] = {}
        self._numbers: Dict[int, List[str]] = {}
        # Ordered set of raw lines; identical stopword lines collapse here.
        self._stopword_lines: Dict[str, None] = {}
        self._sections: Dict[str, None] = {}
        self._built = False

    def _check_open(self) -> None:
        if self._built:
            raise RuntimeError("LanguageResourceBuilder has already been built")

    def add_line(self, section: str, line: str) -> None:
        """Dispatch a data line to the builder for ``section``."""

        self._check_open()
        if section == "aliases":
            self.add_alias(line)
        elif section == "stopwords":
            self.add_stopword_line(line)
        elif section in NUMBER_SECTIONS:
            self.add_number(line, section)
        else:
            raise ResourceStructureError(f"Unexpected section [{section}]", line=line)
        self._sections.setdefault(section, None)

    def add_alias(self, line: str) -> None:
        self._check_open()
        entry = parse_alias_line(line)
        if entry.is_multiword:
            added = add_unique(self._multiword_aliases, entry.canonical, entry.phrase)
            value: object = entry.phrase
        else:
            added = add_unique(self._aliases, entry.canonical, entry.alias)
            value = entry.alias
        if not added:
            raise DuplicateEntryError(entry.canonical, value, line=line)

    def add_number(self, line: str, section: str = "numbers") -> None:
        self._check_open()
        entry = parse_number_line(line, section)
        if not add_unique(self._numbers, entry.value, entry.alias):
            raise DuplicateEntryError(entry.value, entry.alias, line=line)

    def add_stopword_line(self, line: str) -> None:
        self._check_open()
        self._stopword_lines.setdefault(line.strip(), None)

    def build(self) -> "LanguageResource":
        """Finalize the accumulated entries into a :class:`LanguageResource`."""

        self._check_open()
        self._built = True
        matcher = assemble_stopwords(self._stopword_lines)
        resource = LanguageResource(
            aliases=_freeze(self._aliases),
            multiword_aliases=_freeze(self._multiword_aliases),
            numbers=_freeze(self._numbers),
            stopwords=matcher,
            sections=tuple(self._sections),
        )
        LOGGER.info(
            "Built language resource: %d aliased words, %d multi-word aliased words, %d numbers, %d stop words",
            len(self._aliases),
            len(self._multiword_aliases),
            len(self._numbers),
            len(matcher),
        )
        return resource


class LanguageResource:
    """Finalized, read-only stop words, aliases and number words."""

    def __init__(
        self,
        *,
        aliases: Mapping[str, Tuple[str, ...]],
        multiword_aliases: Mapping[str, Tuple[Phrase, ...]],
        numbers: Mapping[int, Tuple[str, ...]],
        stopwords: StopwordMatcher,
        sections: Tuple[str, ...] = (),
    ) -> None:
        self._aliases = aliases
        self._multiword_aliases = multiword_aliases
        self._numbers = numbers
        self._stopwords = stopwords
        self._sections = sections
        self._number_index: Dict[str, int] = {}
        for value, names in numbers.items():
            for name in names:
                self._number_index.setdefault(name, value)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LanguageResource":
        """Load a resource from raw lines, raising on the first bad line."""

        return load_language_resource(lines).unwrap()

    @classmethod
    def from_text(cls, text: str) -> "LanguageResource":
        return load_language_resource(text).unwrap()

    @classmethod
    def from_stream(cls, stream: TextIO) -> "LanguageResource":
        return load_language_resource(stream).unwrap()

    @property
    def stopwords(self) -> Tuple[str, ...]:
        return self._stopwords.tokens

    @property
    def sections(self) -> Tuple[str, ...]:
        """Recognized sections that contributed data, in first-seen order."""

        return self._sections

    def lookup_aliases(self, word: str) -> Optional[Tuple[str, ...]]:
        """Return the single-word aliases of ``word``, or None when it has none."""

        return self._aliases.get(word)

    def lookup_multiword_aliases(self, word: str) -> Optional[Tuple[Phrase, ...]]:
        """Return the alias phrases of ``word`` as token tuples, or None."""

        return self._multiword_aliases.get(word)

    def lookup_number_aliases(self, value: int) -> Optional[Tuple[str, ...]]:
        return self._numbers.get(value)

    def lookup_number(self, word: str) -> Optional[int]:
        """Return the number ``word`` stands for.

        When a word is listed under several numbers the first one loaded wins.
        """

        return self._number_index.get(word)

    def is_stopword(self, word: str) -> bool:
        return self._stopwords.is_stopword(word)

    def contains_stopwords(self, text: str) -> bool:
        """Return True when any stop word occurs anywhere in ``text``."""

        return self._stopwords.contains(text)

    def find_stopwords(self, text: str) -> List[str]:
        return self._stopwords.find_all(text)

    def strip_stopwords(self, text: str) -> str:
        return self._stopwords.strip(text)

    def iter_aliases(self) -> Iterator[Tuple[str, str]]:
        for canonical, aliases in self._aliases.items():
            for alias in aliases:
                yield canonical, alias

    def iter_multiword_aliases(self) -> Iterator[Tuple[str, Phrase]]:
        for canonical, phrases in self._multiword_aliases.items():
            for phrase in phrases:
                yield canonical, phrase

    def iter_numbers(self) -> Iterator[Tuple[int, str]]:
        for value, aliases in self._numbers.items():
            for alias in aliases:
                yield value, alias

    def summary(self) -> Dict[str, int]:
        """Count distinct keys per mapping and stop word tokens."""

        return {
            "aliases": len(self._aliases),
            "multiword_aliases": len(self._multiword_aliases),
            "numbers": len(self._numbers),
            "stopwords": len(self._stopwords),
        }

    def __repr__(self) -> str:
        counts = ", ".join(f"{key}={value}" for key, value in self.summary().items())
        return f"{type(self).__name__}({counts})"


@dataclass(frozen=True)
class LoadOutcome:
    """Result of a load pass: a resource or the error that stopped it."""

    resource: Optional[LanguageResource] = None
    error: Optional[LanguageResourceError] = None

    def __post_init__(self) -> None:
        if (self.resource is None) == (self.error is None):
            raise ValueError("LoadOutcome needs exactly one of resource or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> LanguageResource:
        if self.error is not None:
            raise self.error
        return self.resource  # type: ignore[return-value]


def _iter_lines(source: ResourceSource) -> Iterable[str]:
    if isinstance(source, str):
        return source.splitlines()
    return source


def load_language_resource(source: ResourceSource) -> LoadOutcome:
    """Run the complete load pass over ``source``.

    ``source`` may be the whole file as a string, an open text stream or any
    iterable of lines. Malformed resource lines never raise; they are reported
    through :attr:`LoadOutcome.error` and no resource is produced. Errors from
    reading ``source`` itself, such as :class:`UnicodeDecodeError` from a
    stream, propagate unchanged.
    """

    builder = LanguageResourceBuilder()
    try:
        for item in scan_sections(_iter_lines(source)):
            try:
                builder.add_line(item.section, item.text)
            except LanguageResourceError as exc:
                exc.at(item.lineno)
                raise
    except LanguageResourceError as exc:
        LOGGER.debug("Language resource load failed: %s", exc)
        return LoadOutcome(error=exc)
    return LoadOutcome(resource=builder.build())


__all__ = [
    "LanguageResource",
    "LanguageResourceBuilder",
    "LoadOutcome",
    "default_resource_path",
    "load_language_resource",
]
