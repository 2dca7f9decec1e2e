import io

import pytest

from seqjoins import Joins, JoinsOptions
from seqjoins.core.errors import InvalidParameterError, MalformedSequenceError

SYNOPSIS = [1, 0, 0, 0, 1, 1, 0, 1, 1, 0, 0, 1, 0, 0, 1, 1, 1, 1, 0, 1]


@pytest.fixture
def joins():
    return Joins().load(SYNOPSIS)


def test_stats_from_loaded_data(joins):
    assert joins.observed() == 10
    assert joins.expected() == pytest.approx(9.5)
    assert joins.variance() == pytest.approx(4.75)
    assert joins.obsdev() == pytest.approx(0.5)
    assert joins.p_value() == pytest.approx(1.0)


def test_passed_data_overrides_loaded(joins):
    assert joins.observed(data=["ban"] + ["che"] * 7) == 1


def test_labelled_samples():
    joins = Joins().load(left=[1, 0, 1, 0], right=[1, 1, 1, 0])
    assert joins.observed(label="left") == 3
    assert joins.observed(label="right") == 1
    with pytest.raises(InvalidParameterError):
        joins.observed()


def test_parameters_without_any_data():
    joins = Joins()
    assert joins.expected(trials=200) == pytest.approx(99.5)
    assert joins.variance(trials=200) == pytest.approx(49.75)
    assert joins.z_value(trials=20, observed=10) == 0.0
    with pytest.raises(InvalidParameterError):
        joins.observed()


def test_default_options_and_per_call_override():
    joins = Joins(options=JoinsOptions(tails=1)).load(["ban"] + ["che"] * 7)
    assert joins.p_value() == pytest.approx(0.13057 / 2, abs=1e-5)
    assert joins.p_value(tails=2) == pytest.approx(0.13057, abs=1e-5)


def test_per_call_none_resets_a_default_option():
    joins = Joins(options=JoinsOptions(tails=1, direction="greater", precision_p=2))
    joins.load(["ban"] + ["che"] * 7)
    assert joins.p_value() == 0.93
    assert joins.p_value(direction=None, precision_p=None) == pytest.approx(0.0653, abs=1e-4)


def test_explicit_none_options_keep_object_defaults():
    joins = Joins(options=JoinsOptions(tails=1)).load(["ban"] + ["che"] * 7)
    assert joins.run_test(options=None).tails == 1
    assert joins.p_value(options=None) == pytest.approx(0.13057 / 2, abs=1e-5)


def test_aliases_share_one_implementation():
    assert Joins.jco is Joins.observed
    assert Joins.joincount_expected is Joins.expected
    assert Joins.jcv is Joins.variance
    assert Joins.zscore is Joins.z_value
    assert Joins.test is Joins.p_value
    assert Joins.standard_deviation is Joins.stdev


def test_stats_hash(joins):
    assert joins.stats_hash(values={"observed": 1, "expected": 1}) == {
        "observed": 10,
        "expected": 9.5,
    }


def test_dump_writes_a_line_and_returns_result(joins):
    out = io.StringIO()
    result = joins.dump(
        values=["observed", "expected", "p_value"], precision_s=3, precision_p=7, stream=out
    )
    assert out.getvalue() == "observed = 10.000, expected = 9.500, p_value = 1.0000000\n"
    assert result.observed == 10


def test_malformed_load_raises():
    joins = Joins()
    with pytest.raises(MalformedSequenceError):
        joins.load(["a", "b", "c"])
    assert len(joins.store) == 0


def test_unload_then_read_fails(joins):
    joins.unload()
    with pytest.raises(InvalidParameterError):
        joins.read()
