"""Unit tests for sequence_predictor/metrics.py"""

import numpy as np
import pytest

from sequence_predictor.metrics import (
    DEFAULT_TOLERANCE,
    all_approximately_equal,
    approximately_equal,
    differences,
    even_positions,
    is_integer_like,
    odd_positions,
    ratios,
)


class TestDifferences:

    def test_successive_differences(self):
        assert differences([1, 4, 9, 16]).tolist() == [3, 5, 7]

    def test_length_is_one_less(self):
        assert len(differences([5, 5, 5, 5, 5])) == 4

    def test_single_value_has_no_differences(self):
        assert differences([7]).size == 0


class TestRatios:

    def test_defined_ratios(self):
        r = ratios([2, 4, 12])
        assert not np.ma.is_masked(r)
        assert np.ma.getdata(r).tolist() == [2, 3]

    def test_zero_denominator_is_undefined_not_an_error(self):
        r = ratios([2, 4, 0, 5])
        assert np.ma.is_masked(r)
        assert r.mask.tolist() == [False, False, True]
        assert r.compressed().tolist() == [2, 0]

    def test_overflowing_quotient_is_undefined(self):
        r = ratios([1e-300, 1e300])
        assert r.mask.tolist() == [True]

    def test_zero_over_zero_is_undefined(self):
        assert ratios([0, 0]).mask.tolist() == [True]


class TestApproximateEquality:

    def test_default_tolerance(self):
        assert DEFAULT_TOLERANCE == 1e-4

    def test_vacuously_true_for_short_input(self):
        assert all_approximately_equal([])
        assert all_approximately_equal([3.5])

    def test_within_tolerance_of_first_value(self):
        assert all_approximately_equal([1, 1.00005, 0.99995])
        assert not all_approximately_equal([1, 1.0002])

    def test_explicit_tolerance(self):
        assert all_approximately_equal([1, 1.05], tolerance=0.1)
        assert not all_approximately_equal([1, 1.05], tolerance=0.01)

    def test_scalar_comparison(self):
        assert approximately_equal(2.0, 2.00001)
        assert not approximately_equal(2.0, 2.001)


def test_is_integer_like():
    assert is_integer_like([1.0, 2.00001, -3])
    assert not is_integer_like([1.5, 2])
    assert not is_integer_like([1, float("inf")])


def test_positions_are_counted_from_one():
    seq = [7, 10, 8, 11, 9]
    assert odd_positions(seq).tolist() == [7, 8, 9]
    assert even_positions(seq).tolist() == [10, 11]


@pytest.mark.parametrize("seq", [[1, 2, 3], np.array([1.0, 2.0, 3.0])])
def test_helpers_accept_lists_and_arrays(seq):
    assert differences(seq).tolist() == [1, 1]
