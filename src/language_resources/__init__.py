"""Stop word, alias and number-word resources for text normalization."""

from .errors import DuplicateEntryError, LanguageResourceError, ResourceFormatError, ResourceStructureError
from .resources import (
    LanguageResource,
    LanguageResourceBuilder,
    LoadOutcome,
    default_resource_path,
    load_language_resource,
)

__all__ = [
    "LanguageResource",
    "LanguageResourceBuilder",
    "LoadOutcome",
    "default_resource_path",
    "load_language_resource",
    "LanguageResourceError",
    "ResourceStructureError",
    "ResourceFormatError",
    "DuplicateEntryError",
]
