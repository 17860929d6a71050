"""Exceptions raised while loading a language resource."""

from __future__ import annotations

from typing import Any, Optional


class LanguageResourceError(ValueError):
    """Base class for fatal problems in a language resource file."""

    def __init__(self, message: str, *, line: Optional[str] = None, lineno: Optional[int] = None) -> None:
        self.message = message
        self.line = line
        self.lineno = lineno
        super().__init__(self._render())

    def _render(self) -> str:
        location = f"line {self.lineno}: " if self.lineno is not None else ""
        if self.line is None:
            return f"{location}{self.message}"
        return f"{location}{self.message}: {self.line!r}"

    def at(self, lineno: int) -> "LanguageResourceError":
        """Attach a line number when the error was raised without one."""

        if self.lineno is None:
            self.lineno = lineno
            self.args = (self._render(),)
        return self


class ResourceStructureError(LanguageResourceError):
    """Data outside any section, or under a section that is not recognized."""


class ResourceFormatError(LanguageResourceError):
    """A data line that does not have the shape its section expects."""


class DuplicateEntryError(LanguageResourceError):
    """A (key, value) pair that was already added to a mapping."""

    def __init__(self, key: Any, value: Any, *, line: Optional[str] = None, lineno: Optional[int] = None) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Redundant attempt to add {key!r} -> {value!r}", line=line, lineno=lineno)


__all__ = [
    "LanguageResourceError",
    "ResourceStructureError",
    "ResourceFormatError",
    "DuplicateEntryError",
]
