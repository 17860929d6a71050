"""Tabular views of a loaded :class:`LanguageResource`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

import pandas as pd

try:  # Optional dependency; used when available.
    import polars as pl
except ImportError:  # pragma: no cover - handled at runtime.
    pl = None  # type: ignore[assignment]

from .resources import LanguageResource

LOGGER = logging.getLogger(__name__)

ALIAS_COLUMNS = ["canonical", "alias", "multiword"]
NUMBER_COLUMNS = ["value", "alias"]
STOPWORD_COLUMNS = ["position", "token"]


def aliases_frame(resource: LanguageResource) -> pd.DataFrame:
    """One row per alias; multi-word aliases are joined with single spaces."""

    rows = [
        {"canonical": canonical, "alias": alias, "multiword": False}
        for canonical, alias in resource.iter_aliases()
    ]
    rows.extend(
        {"canonical": canonical, "alias": " ".join(phrase), "multiword": True}
        for canonical, phrase in resource.iter_multiword_aliases()
    )
    return pd.DataFrame(rows, columns=ALIAS_COLUMNS)


def numbers_frame(resource: LanguageResource) -> pd.DataFrame:
    rows = [{"value": value, "alias": alias} for value, alias in resource.iter_numbers()]
    df = pd.DataFrame(rows, columns=NUMBER_COLUMNS)
    if not df.empty:
        df["value"] = df["value"].astype(int)
    return df


def stopwords_frame(resource: LanguageResource) -> pd.DataFrame:
    rows = [{"position": idx, "token": token} for idx, token in enumerate(resource.stopwords)]
    return pd.DataFrame(rows, columns=STOPWORD_COLUMNS)


def to_dataframes(resource: LanguageResource) -> Dict[str, pd.DataFrame]:
    return {
        "aliases": aliases_frame(resource),
        "numbers": numbers_frame(resource),
        "stopwords": stopwords_frame(resource),
    }


def to_polars(resource: LanguageResource) -> Dict[str, "pl.DataFrame"]:
    """Return the same tables as :func:`to_dataframes` converted to polars."""

    if pl is None:
        raise ImportError("polars is not installed")
    return {name: pl.DataFrame(df.to_dict("list")) for name, df in to_dataframes(resource).items()}


def write_csv_tables(resource: LanguageResource, output_dir: str | Path) -> Dict[str, Path]:
    """Write ``aliases.csv``, ``numbers.csv`` and ``stopwords.csv`` to ``output_dir``."""

    outdir = Path(output_dir)
    outdir.mkdir(parents=True, exist_ok=True)
    written: Dict[str, Path] = {}
    for name, df in to_dataframes(resource).items():
        path = outdir / f"{name}.csv"
        df.to_csv(path, index=False)
        written[name] = path
        LOGGER.debug("Wrote %d rows to %s", len(df), path)
    return written


__all__ = [
    "aliases_frame",
    "numbers_frame",
    "stopwords_frame",
    "to_dataframes",
    "to_polars",
    "write_csv_tables",
]
