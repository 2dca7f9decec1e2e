"""
seqjoins.backends.polars.io
===========================

File I/O for sequences and results via **sources/sinks**.

- Sources read one column of a CSV or Parquet file as a sequence
- Sinks write a results frame (see `JoinsReporter`) to CSV or Parquet

This module contains no test semantics, just I/O.

Doctest (smoke):
>>> import polars as pl
>>> from seqjoins.backends.polars.io import CsvFileSink, read_sequence
>>> CsvFileSink("_tmp.csv").write(pl.DataFrame({"flip": ["H", "T", "T"]}))  # doctest: +SKIP
>>> read_sequence("_tmp.csv", "flip")  # doctest: +SKIP
['H', 'T', 'T']
"""

from __future__ import annotations
import logging
import os
from typing import Any, List, Optional, Protocol

import polars as pl

from seqjoins.core.errors import InvalidParameterError

logger = logging.getLogger(__name__)


class FrameSink(Protocol):
    """A write-only sink: DataFrame -> storage."""
    def write(self, df: pl.DataFrame) -> None: ...


class FrameSource(Protocol):
    """A read-only source: storage -> DataFrame."""
    def read(self) -> pl.DataFrame: ...


class ParquetFileSink:
    def __init__(self, path: str) -> None:
        self.path = path
    def write(self, df: pl.DataFrame) -> None:
        df.write_parquet(self.path)


class CsvFileSink:
    def __init__(self, path: str) -> None:
        self.path = path
    def write(self, df: pl.DataFrame) -> None:
        df.write_csv(self.path)


class ParquetFileSource:
    def __init__(self, path: str) -> None:
        self.path = path
    def read(self) -> pl.DataFrame:
        return pl.read_parquet(self.path)


class CsvFileSource:
    def __init__(self, path: str, has_header: bool = True) -> None:
        self.path = path
        self.has_header = has_header
    def read(self) -> pl.DataFrame:
        return pl.read_csv(self.path, has_header=self.has_header)


def source_for(path: str, **kwargs: Any) -> FrameSource:
    """Pick a source by file extension (.csv, .parquet/.pq)."""
    ext = os.path.splitext(path)[1].lower()
    if ext == ".csv":
        return CsvFileSource(path, **kwargs)
    if ext in (".parquet", ".pq"):
        return ParquetFileSource(path)
    raise InvalidParameterError(f"Unsupported file type {ext!r} for {path}")


def sink_for(path: str) -> FrameSink:
    """Pick a sink by file extension (.csv, .parquet/.pq)."""
    ext = os.path.splitext(path)[1].lower()
    if ext == ".csv":
        return CsvFileSink(path)
    if ext in (".parquet", ".pq"):
        return ParquetFileSink(path)
    raise InvalidParameterError(f"Unsupported file type {ext!r} for {path}")


def read_sequence(
    path: str, column: Optional[str] = None, *, drop_nulls: bool = True
) -> List[Any]:
    """Read one column of a CSV or Parquet file as a list.

    Without `column`, the file must have exactly one column.
    """
    df = source_for(path).read()
    if column is None:
        if df.width != 1:
            raise InvalidParameterError(
                f"{path} has {df.width} columns; name the one holding the sequence"
            )
        column = df.columns[0]
    if column not in df.columns:
        raise InvalidParameterError(f"No column {column!r} in {path}; found {df.columns}")
    series = df.get_column(column)
    if drop_nulls:
        series = series.drop_nulls()
    logger.info(f"Read {series.len()} values from {path}[{column}]")
    return series.to_list()


def write_stats(df: pl.DataFrame, path: str) -> None:
    """Write a results frame to CSV or Parquet, chosen by extension."""
    sink_for(path).write(df)
    logger.info(f"Wrote {df.height} result rows to {path}")
