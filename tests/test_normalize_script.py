import importlib.util
import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def normalize_text():
    spec = importlib.util.spec_from_file_location("normalize_text", ROOT / "scripts" / "normalize_text.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def run(module, monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["normalize_text.py", *argv])
    return module.main()


def test_writes_stripped_lines(normalize_text, monkeypatch, tmp_path, english_path):
    source = tmp_path / "utterances.txt"
    source.write_text("hey please open the third tab\n", encoding="utf-8")
    output = tmp_path / "out.json"
    status = run(
        normalize_text, monkeypatch,
        "--input", str(source), "--output", str(output),
        "--language-file", str(english_path), "--format", "json",
    )
    assert status == 0
    results = json.loads(output.read_text(encoding="utf-8"))
    assert results[0]["stripped"] == "open third tab"
    assert results[0]["words"][1]["number"] == 3


def test_undecodable_language_file_exits_with_status_2(normalize_text, monkeypatch, tmp_path):
    source = tmp_path / "utterances.txt"
    source.write_text("open tab\n", encoding="utf-8")
    language_file = tmp_path / "broken.toml"
    language_file.write_bytes(b"[aliases]\n\xff = copy\n")
    output = tmp_path / "out.csv"
    status = run(
        normalize_text, monkeypatch,
        "--input", str(source), "--output", str(output),
        "--language-file", str(language_file),
    )
    assert status == 2
    assert not output.exists()


def test_malformed_language_file_exits_with_status_2(normalize_text, monkeypatch, tmp_path):
    source = tmp_path / "utterances.txt"
    source.write_text("open tab\n", encoding="utf-8")
    language_file = tmp_path / "bogus.toml"
    language_file.write_text("[bogus]\nx = y\n", encoding="utf-8")
    status = run(
        normalize_text, monkeypatch,
        "--input", str(source), "--output", str(tmp_path / "out.csv"),
        "--language-file", str(language_file),
    )
    assert status == 2
