#!/usr/bin/env python3
"""CLI to normalize utterances with a language resource file.

For every input line the stop words are stripped and each remaining word is
looked up in the alias and number tables.

Usage:
  .venv/bin/python scripts/normalize_text.py --language-file data/langs/english.toml --input utterances.txt --output results.csv
"""

import argparse
import csv
import json
import logging
import sys
from pathlib import Path

# Allow running as a script without installed package
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from language_resources import LanguageResource, default_resource_path, load_language_resource  # type: ignore

LOGGER = logging.getLogger("normalize_text")

DEFAULTS = {
    "language_file": str(default_resource_path("english")),
    "format": "csv",
    "output_profile": "minimal",
}


def read_lines(path: Path) -> list[str]:
    lines: list[str] = []
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            t = line.strip()
            if not t:
                continue
            lines.append(t)
    return lines


def normalize_line(resource: LanguageResource, text: str) -> dict:
    stripped = resource.strip_stopwords(text)
    words = []
    for word in stripped.split():
        aliases = resource.lookup_aliases(word)
        phrases = resource.lookup_multiword_aliases(word)
        words.append(
            {
                "word": word,
                "aliases": list(aliases) if aliases is not None else None,
                "multiword_aliases": [" ".join(p) for p in phrases] if phrases is not None else None,
                "number": resource.lookup_number(word),
            }
        )
    return {
        "text": text,
        "stripped": stripped,
        "contains_stopwords": resource.contains_stopwords(text),
        "stopwords_found": resource.find_stopwords(text),
        "stopword_tokens": [w for w in text.split() if resource.is_stopword(w)],
        "words": words,
    }


def write_output(results: list[dict], output: Path, fmt: str, profile: str) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    if fmt == "json":
        with output.open("w", encoding="utf-8") as f:
            json.dump(results, f, ensure_ascii=False, indent=2)
        return
    if profile == "full":
        fieldnames = ["text", "stripped", "contains_stopwords", "stopwords_found", "stopword_tokens", "numbers"]
    else:
        fieldnames = ["text", "stripped"]
    with output.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for r in results:
            d = {"text": r["text"], "stripped": r["stripped"]}
            if profile == "full":
                d["contains_stopwords"] = r["contains_stopwords"]
                d["stopwords_found"] = "|".join(r["stopwords_found"])
                d["stopword_tokens"] = "|".join(r["stopword_tokens"])
                d["numbers"] = "|".join(
                    f"{w['word']}={w['number']}" for w in r["words"] if w["number"] is not None
                )
            writer.writerow(d)


def load_config(path: Path) -> dict:
    with path.open("r", encoding="utf-8") as f:
        cfg = json.load(f)
    if not isinstance(cfg, dict):
        raise ValueError("config must be a JSON object")
    return {k: v for k, v in cfg.items() if k in DEFAULTS}


def main() -> int:
    parser = argparse.ArgumentParser(description="Strip stop words and look up aliases for each input line")
    parser.add_argument("--input", required=True, help="Path to input text (one utterance per line)")
    parser.add_argument("--output", required=True, help="Path to output file (csv or json)")
    parser.add_argument("--language-file", help=f"Language resource file (default: {DEFAULTS['language_file']})")
    parser.add_argument("--format", choices=["csv", "json"], help="Output format (default: csv)")
    parser.add_argument(
        "--output-profile",
        choices=["minimal", "full"],
        help="CSV schema profile: minimal | full (default: minimal)",
    )
    parser.add_argument("--config", help="Optional JSON config with language_file, format and output_profile keys")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(message)s")

    settings = dict(DEFAULTS)
    if args.config:
        cfg_path = Path(args.config)
        if not cfg_path.exists():
            LOGGER.error("Config file does not exist: %s", cfg_path)
            return 2
        try:
            settings.update(load_config(cfg_path))
        except (json.JSONDecodeError, ValueError) as e:
            LOGGER.error("Failed to parse config: %s", e)
            return 2
    if args.language_file is not None:
        settings["language_file"] = args.language_file
    if args.format is not None:
        settings["format"] = args.format
    if args.output_profile is not None:
        settings["output_profile"] = args.output_profile

    input_path = Path(args.input)
    language_path = Path(settings["language_file"])
    if not input_path.exists():
        LOGGER.error("Input file does not exist: %s", input_path)
        return 2
    if not language_path.exists():
        LOGGER.error("Language file does not exist: %s", language_path)
        return 2

    try:
        with language_path.open("r", encoding="utf-8") as handle:
            outcome = load_language_resource(handle)
    except UnicodeDecodeError as e:
        LOGGER.error("Language file is not valid UTF-8: %s: %s", language_path, e)
        return 2
    if not outcome.ok:
        LOGGER.error("Failed to load %s: %s", language_path, outcome.error)
        return 2
    resource = outcome.unwrap()

    results = [normalize_line(resource, line) for line in read_lines(input_path)]
    write_output(results, Path(args.output), settings["format"], settings["output_profile"])
    LOGGER.info("Wrote %d results to %s", len(results), args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
