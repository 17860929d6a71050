"""Stop word assembly and matching."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Pattern, Tuple

_SPACES_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class StopwordMatcher:
    """Immutable stop word list plus the alternation pattern built from it.

    Membership (:meth:`is_stopword`) is exact; the pattern based operations
    match stop words anywhere in the text, including inside longer words.
    """

    tokens: Tuple[str, ...]
    pattern: Optional[Pattern[str]] = None
    _token_set: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_token_set", frozenset(self.tokens))

    def __len__(self) -> int:
        return len(self.tokens)

    def is_stopword(self, word: str) -> bool:
        return word in self._token_set

    def contains(self, text: str) -> bool:
        if self.pattern is None:
            return False
        return self.pattern.search(text) is not None

    def find_all(self, text: str) -> List[str]:
        if self.pattern is None:
            return []
        return [match.group(0) for match in self.pattern.finditer(text)]

    def strip(self, text: str) -> str:
        """Remove every stop word match, then collapse and trim whitespace."""

        if self.pattern is not None:
            text = self.pattern.sub("", text)
        return _SPACES_RE.sub(" ", text).strip()


def assemble_stopwords(lines: Iterable[str]) -> StopwordMatcher:
    """Tokenize the collected ``[stopwords]`` lines and compile the matcher.

    Tokens keep their line order; a token repeated on different lines is kept
    as many times as it appears.
    """

    tokens: List[str] = []
    for line in lines:
        tokens.extend(line.split())
    if not tokens:
        return StopwordMatcher(tokens=())
    pattern = re.compile("|".join(re.escape(token) for token in tokens))
    return StopwordMatcher(tokens=tuple(tokens), pattern=pattern)


__all__ = ["StopwordMatcher", "assemble_stopwords"]
