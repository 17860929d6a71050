"""Pytest configuration and shared fixtures."""
from pathlib import Path

import pytest

from language_resources import LanguageResource

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def english_path():
    """Path to the bundled English resource file."""
    return ROOT / "data" / "langs" / "english.toml"


@pytest.fixture
def english(english_path):
    with english_path.open("r", encoding="utf-8") as handle:
        return LanguageResource.from_stream(handle)


@pytest.fixture
def sample_text():
    """Small resource exercising every section."""
    return "\n".join(
        [
            "# sample resource",
            "",
            "[aliases]",
            '"coffee" = "copy"',
            "cuppy = copy",
            '"turn up" = "increase"',
            "",
            "// stop words",
            "[stopwords]",
            "the please",
            "  hey  ",
            "",
            "[numbers.ordinals]",
            "first = 1",
            "[numbers.plain]",
            "one = 1",
            "[numbers.literals]",
            "3rd = 3",
        ]
    )


@pytest.fixture
def sample(sample_text):
    return LanguageResource.from_text(sample_text)
