import math

import pytest

from seqjoins.core.errors import InvalidParameterError, MalformedSequenceError
from seqjoins.stats.schemes.joins.core import (
    TrialParameters,
    count_observed,
    distinct_symbols,
    expected_joins,
    resolve_trial_parameters,
    variance_joins,
)


# --- Counter ---


@pytest.mark.parametrize("seq", [[], [1], ("x",), ""])
def test_short_sequences_have_no_joins(seq):
    assert count_observed(seq) == 0


@pytest.mark.parametrize("seq", [["a"] * 5, [0, 0], "HHHH"])
def test_single_symbol_has_no_joins(seq):
    assert count_observed(seq) == 0


def test_more_than_two_symbols_is_malformed():
    with pytest.raises(MalformedSequenceError) as exc:
        count_observed([1, 2, 1, 3, 1])
    assert exc.value.distinct == [1, 2, 3]
    assert "1 2 3" in str(exc.value)


def test_malformed_is_a_value_error():
    with pytest.raises(ValueError):
        count_observed("abc")


def test_counts_documented_sequences():
    assert count_observed([1, 0, 0, 0, 1, 0, 0, 1, 0, 1, 1, 0]) == 7
    seq = [0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 0, 1, 1, 0, 0, 0, 1, 1, 1, 1, 0, 0]
    assert count_observed(seq) == 8


def test_counts_reference_sequences():
    assert count_observed(["ban"] + ["che"] * 7) == 1
    assert count_observed(["ban", "ban", "che", "ban", "che", "ban", "ban", "ban"]) == 4
    assert count_observed([1, 0, 1, 0, 1, 0, 0, 0]) == 5


def test_counts_unhashable_symbols():
    assert count_observed([[1], [2], [2], [1]]) == 2


def test_distinct_symbols_keeps_first_appearance_order():
    assert distinct_symbols("abba") == ["a", "b"]


# --- Moments ---


@pytest.mark.parametrize(
    "trials, prob, exp, var",
    [
        (8, 0.5, 3.5, 1.75),
        (200, 0.5, 99.5, 49.75),
        (10, 0.2, 2.88, 2.88),
        (20, 0.3, 7.98, 5.838),
    ],
)
def test_moments_match_closed_form(trials, prob, exp, var):
    assert expected_joins(trials, prob) == pytest.approx(exp)
    assert variance_joins(trials, prob) == pytest.approx(var)


@pytest.mark.parametrize("trials", [2, 9, 57, 300])
@pytest.mark.parametrize("prob", [0.1, 0.25, 0.4])
def test_moments_symmetric_in_p_and_q(trials, prob):
    assert expected_joins(trials, prob) == pytest.approx(expected_joins(trials, 1 - prob))
    assert variance_joins(trials, prob) == pytest.approx(variance_joins(trials, 1 - prob))


@pytest.mark.parametrize("prob", [0.0, 1.0])
def test_one_sided_probability_gives_zero_moments(prob):
    assert expected_joins(50, prob) == 0.0
    assert variance_joins(50, prob) == 0.0


@pytest.mark.parametrize("trials", [0, 1])
def test_fewer_than_two_trials_give_zero_moments(trials):
    assert expected_joins(trials, 0.3) == 0.0
    assert variance_joins(trials, 0.3) == 0.0


@pytest.mark.parametrize("trials", [-1, 2.5, True, "8"])
def test_invalid_trials(trials):
    with pytest.raises(InvalidParameterError):
        expected_joins(trials, 0.5)


@pytest.mark.parametrize("prob", [-0.1, 1.5, math.nan, math.inf, None])
def test_invalid_prob(prob):
    with pytest.raises(InvalidParameterError):
        variance_joins(10, prob)


# --- Parameter resolution ---


def test_trials_default_to_sequence_length_and_prob_to_half():
    params = resolve_trial_parameters([1, 0, 0, 0])
    assert params == TrialParameters(trials=4, prob=0.5)


def test_state_estimates_prob_from_data():
    params = resolve_trial_parameters([1, 1, 1, 0], state=1)
    assert params.prob == 0.75
    assert params.state == 1


def test_state_on_empty_sequence_defaults_to_half():
    params = resolve_trial_parameters([], state="H")
    assert params.trials == 0
    assert params.prob == 0.5


def test_explicit_values_win_over_data():
    params = resolve_trial_parameters([1, 1, 1, 0], trials=30, prob=0.2, state=1)
    assert params.trials == 30
    assert params.prob == 0.2


def test_state_without_data_uses_default_prob():
    assert resolve_trial_parameters(trials=12, state=1).prob == 0.5


def test_resolution_needs_data_or_trials():
    with pytest.raises(InvalidParameterError):
        resolve_trial_parameters(prob=0.3)


def test_resolution_rejects_malformed_data():
    with pytest.raises(MalformedSequenceError):
        resolve_trial_parameters(["a", "b", "c"], trials=3)


def test_trial_parameters_validate_on_construction():
    with pytest.raises(InvalidParameterError):
        TrialParameters(trials=10, prob=2.0)
