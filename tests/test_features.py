import numpy as np
import pytest

from canvas_playground.features import POLYNOMIAL_TERMS, canonical_terms, classifier_rows, regression_rows


def test_regression_rows_are_powers():
    rows = regression_rows([2.0, -1.0], degree=3)
    np.testing.assert_allclose(rows, [[1, 2, 4, 8], [1, -1, 1, -1]])


def test_regression_rows_degree_zero_is_bias_only():
    rows = regression_rows([0.3, 0.7], degree=0)
    np.testing.assert_array_equal(rows, [[1.0], [1.0]])


def test_negative_degree_is_rejected():
    with pytest.raises(ValueError):
        regression_rows([1.0], degree=-1)


def test_classifier_rows_follow_canonical_order():
    rows = classifier_rows([[2.0, 3.0]], terms=["y*y", "x*x*x", "x*x"])
    np.testing.assert_allclose(rows, [[1, 2, 3, 4, 9, 8]])


def test_classifier_rows_all_terms():
    rows = classifier_rows([[2.0, 3.0]], terms=POLYNOMIAL_TERMS)
    np.testing.assert_allclose(rows, [[1, 2, 3, 4, 6, 9, 8]])


def test_unknown_term_is_rejected():
    with pytest.raises(ValueError):
        canonical_terms(["x*y*y"])
