"""Tests for score aggregation."""

import pytest

from review_severity.models.severity import SeverityLabel
from review_severity.scoring import (
    SCORE_WEIGHTS,
    InvalidProbabilitiesError,
    aggregate,
    most_likely_label,
)


class TestAggregate:
    @pytest.mark.parametrize(
        "probabilities, expected",
        [
            ([1, 0, 0, 0, 0], 1.0),
            ([0, 1, 0, 0, 0], 0.75),
            ([0, 0, 1, 0, 0], 0.5),
            ([0, 0, 0, 1, 0], 0.25),
            ([0, 0, 0, 0, 1], 0.0),
        ],
    )
    def test_one_hot(self, probabilities, expected):
        assert aggregate(probabilities) == expected

    def test_uniform(self):
        assert aggregate([0.2, 0.2, 0.2, 0.2, 0.2]) == 0.5

    def test_trivial_has_no_weight(self):
        assert SCORE_WEIGHTS[-1] == 0.0
        assert aggregate([0.5, 0, 0, 0, 0.5]) == pytest.approx(0.5)

    def test_out_of_range_is_not_clamped(self):
        assert aggregate([2.0, 0, 0, 0, 0]) == pytest.approx(2.0)
        assert aggregate([-1.0, 0, 0, 0, 0]) == pytest.approx(-1.0)

    def test_accepts_tuple(self):
        assert aggregate((0.1, 0.2, 0.3, 0.4, 0.0)) == pytest.approx(0.1 + 0.15 + 0.15 + 0.1)

    @pytest.mark.parametrize("probabilities", [[], [1.0], [0.2] * 4, [0.1] * 6])
    def test_wrong_count(self, probabilities):
        with pytest.raises(InvalidProbabilitiesError):
            aggregate(probabilities)

    def test_error_is_value_error(self):
        assert issubclass(InvalidProbabilitiesError, ValueError)


class TestMostLikelyLabel:
    def test_argmax(self):
        assert most_likely_label([0.1, 0.6, 0.1, 0.1, 0.1]) is SeverityLabel.MAJOR

    def test_tie_prefers_more_severe(self):
        assert most_likely_label([0, 0, 0.5, 0.5, 0]) is SeverityLabel.MODERATE

    def test_wrong_count(self):
        with pytest.raises(InvalidProbabilitiesError):
            most_likely_label([1.0])
