import io

import polars as pl
import pytest

from seqjoins.core.errors import InvalidParameterError
from seqjoins.reporting.joins import JoinsReporter, dump, format_stats
from seqjoins.stats.schemes.joins import run_test

ONE_JOIN = ["ban"] + ["che"] * 7


def test_line_format():
    result = run_test(ONE_JOIN)
    text = format_stats(result, ["observed", "z_value", "p_value"], precision_p=5)
    assert text == "observed = 1.00, z_value = -1.51, p_value = 0.13057"


def test_labeline_uses_short_names():
    result = run_test(ONE_JOIN, tails=1)
    text = format_stats(result, ["z_value", "p_value"], format="labeline", precision_p=4)
    assert text == "Joins: Z = -1.51, 1p = 0.0653"


def test_table_format_aligns_names():
    result = run_test(ONE_JOIN)
    text = format_stats(result, ["observed", "z_value"], format="table")
    assert text.splitlines() == ["observed = 1.00", "z_value  = -1.51"]


def test_flag_marks_small_p_values():
    alternating = list("ABABABABABABABABABAB")
    assert format_stats(run_test(alternating), ["p_value"], flag=True).endswith("*")
    assert not format_stats(run_test(ONE_JOIN), ["p_value"], flag=True).endswith("*")


def test_degenerate_z_is_reported_as_undefined():
    result = run_test(observed=0, trials=1)
    assert format_stats(result, ["z_value", "p_value"]) == "z_value = undefined, p_value = 1.000000"


def test_unknown_format():
    with pytest.raises(InvalidParameterError):
        format_stats(run_test(ONE_JOIN), format="html")


def test_dump_prints_to_stream():
    out = io.StringIO()
    result = dump(run_test(ONE_JOIN), ["observed"], stream=out)
    assert out.getvalue() == "observed = 1.00\n"
    assert result.observed == 1


def test_reporter_one_row_per_sample():
    rep = JoinsReporter.from_samples(
        {"alternating": "ABABABABABABABABABAB", "clumped": "AAAABBBAAB"}
    )
    df = rep.summary()
    assert df.height == 2
    assert df.get_column("observed").to_list() == [19, 3]
    assert df.schema["z_value"] == pl.Float64


def test_reporter_significant_rows():
    rep = JoinsReporter.from_samples(
        {"alternating": "ABABABABABABABABABAB", "clumped": "AAAABBBAAB"}
    )
    assert rep.significant(0.05).get_column("label").to_list() == ["alternating"]
    with pytest.raises(InvalidParameterError):
        rep.significant(0.0)


def test_reporter_keeps_degenerate_rows_with_null_z():
    rep = JoinsReporter.from_results({"flat": run_test(["a", "a", "a"], state="a")})
    row = rep.summary().row(0, named=True)
    assert row["z_value"] is None
    assert row["p_value"] == 1.0


def test_default_precisions():
    result = run_test([1, 0, 0, 0, 1, 1, 0, 1, 1, 0, 0, 1, 0, 0, 1, 1, 1, 1, 0, 1])
    text = format_stats(result, ["observed", "expected", "p_value"])
    assert text == "observed = 10.00, expected = 9.50, p_value = 1.000000"
