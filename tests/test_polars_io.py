import polars as pl
import pytest

from seqjoins.backends.polars.io import read_sequence, write_stats
from seqjoins.core.errors import InvalidParameterError
from seqjoins.reporting.joins import JoinsReporter
from seqjoins.stats.schemes.joins import count_observed


def test_read_named_column_from_csv(tmp_path):
    path = str(tmp_path / "flips.csv")
    pl.DataFrame({"trial": [1, 2, 3, 4], "flip": ["H", "T", "T", "H"]}).write_csv(path)
    seq = read_sequence(path, "flip")
    assert seq == ["H", "T", "T", "H"]
    assert count_observed(seq) == 2


def test_read_single_column_parquet(tmp_path):
    path = str(tmp_path / "bits.parquet")
    pl.DataFrame({"bit": [1, 0, 0, 1, None]}).write_parquet(path)
    assert read_sequence(path) == [1, 0, 0, 1]


def test_column_must_be_named_when_ambiguous(tmp_path):
    path = str(tmp_path / "two.csv")
    pl.DataFrame({"a": [1], "b": [0]}).write_csv(path)
    with pytest.raises(InvalidParameterError, match="name the one"):
        read_sequence(path)
    with pytest.raises(InvalidParameterError, match="No column"):
        read_sequence(path, "c")


def test_unsupported_extension(tmp_path):
    with pytest.raises(InvalidParameterError, match="Unsupported file type"):
        read_sequence(str(tmp_path / "data.xlsx"))


def test_write_stats(tmp_path):
    rep = JoinsReporter.from_samples({"s1": [1, 0, 1, 0], "s2": [1, 1, 0, 0]})
    path = str(tmp_path / "stats.csv")
    write_stats(rep.summary(), path)
    back = pl.read_csv(path)
    assert back.get_column("label").to_list() == ["s1", "s2"]
    assert back.get_column("observed").to_list() == [3, 1]
