import pandas as pd
import pytest

from language_resources import LanguageResource
from language_resources.tables import (
    aliases_frame,
    numbers_frame,
    stopwords_frame,
    to_dataframes,
    to_polars,
    write_csv_tables,
)


def test_aliases_frame(sample):
    df = aliases_frame(sample)
    assert list(df.columns) == ["canonical", "alias", "multiword"]
    assert df.to_dict("records") == [
        {"canonical": "copy", "alias": "coffee", "multiword": False},
        {"canonical": "copy", "alias": "cuppy", "multiword": False},
        {"canonical": "increase", "alias": "turn up", "multiword": True},
    ]


def test_numbers_frame(sample):
    df = numbers_frame(sample)
    assert df["value"].tolist() == [1, 1, 3]
    assert df["alias"].tolist() == ["first", "one", "3rd"]


def test_stopwords_frame(sample):
    df = stopwords_frame(sample)
    assert df["token"].tolist() == ["the", "please", "hey"]
    assert df["position"].tolist() == [0, 1, 2]


def test_empty_resource_gives_empty_frames():
    frames = to_dataframes(LanguageResource.from_text(""))
    assert set(frames) == {"aliases", "numbers", "stopwords"}
    assert all(df.empty for df in frames.values())
    assert list(frames["numbers"].columns) == ["value", "alias"]


def test_write_csv_tables(sample, tmp_path):
    written = write_csv_tables(sample, tmp_path / "out")
    assert sorted(written) == ["aliases", "numbers", "stopwords"]
    numbers = pd.read_csv(written["numbers"])
    assert numbers["alias"].tolist() == ["first", "one", "3rd"]


def test_to_polars(sample):
    pytest.importorskip("polars")
    frames = to_polars(sample)
    assert frames["stopwords"]["token"].to_list() == ["the", "please", "hey"]
