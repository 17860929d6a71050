"""Summarize and preview a language resource file.

Usage examples:
  - By language name (uses default path):
      .venv/bin/python scripts/summarize_language.py --language english

  - By explicit path:
      .venv/bin/python scripts/summarize_language.py --input data/langs/english.toml

Optional flags:
    --top-n 20         Number of canonical words with the most aliases to show (default: 20)
    --output-dir       Write CSV tables to a directory (aliases, numbers, stopwords)
    --inputs           Repeatable: explicit resource paths (can appear multiple times)
    --languages        Comma-separated list of language names to summarize
    --verbose          Enable debug logging
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, Tuple

import pandas as pd

# Allow running as a script without installed package
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from language_resources import LanguageResource, default_resource_path, load_language_resource  # type: ignore
from language_resources.tables import to_dataframes, write_csv_tables  # type: ignore

LOGGER = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s - %(message)s")


def load_resource(path: Path) -> LanguageResource:
    if not path.exists():
        raise FileNotFoundError(f"Language resource not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        outcome = load_language_resource(handle)
    return outcome.unwrap()


def summarize_counts(resource: LanguageResource) -> None:
    print("\n== Counts ==")
    for key, value in resource.summary().items():
        print(f"{key}: {value:,}")
    print(f"sections: {', '.join(resource.sections) or '(none)'}")


def top_canonicals(aliases: pd.DataFrame, top_n: int) -> pd.DataFrame:
    if aliases.empty:
        return pd.DataFrame(columns=["canonical", "aliases", "multiword"])
    grouped = aliases.groupby("canonical").agg(aliases=("alias", "count"), multiword=("multiword", "sum"))
    grouped = grouped.reset_index().sort_values(by=["aliases", "canonical"], ascending=[False, True])
    grouped["multiword"] = grouped["multiword"].astype(int)
    return grouped.head(top_n)


def repeated_stopwords(stopwords: pd.DataFrame) -> pd.DataFrame:
    """Stop word tokens listed more than once across lines."""

    if stopwords.empty:
        return pd.DataFrame(columns=["token", "count"])
    counts = stopwords["token"].value_counts()
    repeated = counts[counts > 1]
    return repeated.rename_axis("token").reset_index(name="count")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Summarize a language resource file")
    p.add_argument("--input", type=str, default=None, help="Path to a resource file")
    p.add_argument("--inputs", action="append", help="Repeatable explicit resource paths (overrides --input)")
    p.add_argument("--language", type=str, default=None, help="Language name to infer default path")
    p.add_argument("--languages", type=str, default=None, help="Comma-separated language names to summarize")
    p.add_argument("--top-n", type=int, default=20, help="Top-N canonical words by alias count")
    p.add_argument("--output-dir", type=str, default=None, help="Optional directory to write CSV tables")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args()


def _plan_targets(args: argparse.Namespace) -> Sequence[Tuple[Optional[str], Path]]:
    targets: list[Tuple[Optional[str], Path]] = []
    if args.inputs:
        for s in args.inputs:
            p = Path(s)
            targets.append((p.stem, p))
        return targets
    if args.languages:
        for name in [c.strip() for c in args.languages.split(",") if c.strip()]:
            targets.append((name, default_resource_path(name)))
        return targets
    if args.input:
        p = Path(args.input)
        targets.append((p.stem, p))
        return targets
    if args.language:
        targets.append((args.language, default_resource_path(args.language)))
        return targets
    raise SystemExit("Provide --inputs, --languages, or one of --input/--language to locate resource files")


def main() -> int:
    args = parse_args()
    configure_logging(args.verbose)

    targets = _plan_targets(args)
    status = 0
    for idx, (label, path) in enumerate(targets, start=1):
        LOGGER.info("[%d/%d] Loading language resource from %s", idx, len(targets), path)
        try:
            resource = load_resource(path)
        except (FileNotFoundError, ValueError) as exc:
            LOGGER.error("Failed to load %s: %s", path, exc)
            status = 2
            continue

        print(f"\n==================== {label} ====================")
        summarize_counts(resource)

        tables = to_dataframes(resource)
        top = top_canonicals(tables["aliases"], args.top_n)
        if not top.empty:
            print(f"\n== Top {len(top)} canonical words by alias count ==")
            print(top.to_string(index=False))

        if not tables["numbers"].empty:
            print("\n== Numbers ==")
            numbers = tables["numbers"].groupby("value")["alias"].apply(", ".join)
            print(numbers.to_string())

        repeated = repeated_stopwords(tables["stopwords"])
        if not repeated.empty:
            print(f"\n== Stop words listed more than once ({len(repeated)}) ==")
            print(repeated.to_string(index=False))

        if args.output_dir:
            subdir = Path(args.output_dir) / (label or path.stem)
            write_csv_tables(resource, subdir)
            print(f"\nWrote CSV tables to {subdir}")

    return status


if __name__ == "__main__":
    raise SystemExit(main())
