import numpy as np
import pytest

from canvas_playground.config import ClassifierSettings, RegressionSettings, MAX_ITERATIONS
from canvas_playground.validation import DataValidator


def test_regression_points_pass():
    is_valid, message = DataValidator.validate_regression([[1.0, 2.0], [3.0, 4.0]])
    assert is_valid
    assert message == "Data validation passed."


@pytest.mark.parametrize("points", [
    [],
    [[1.0, np.nan]],
    [[np.inf, 2.0]],
    [[1.0, 2.0, 3.0]],
])
def test_regression_points_rejected(points):
    is_valid, _ = DataValidator.validate_regression(points)
    assert not is_valid


def test_classifier_points_pass():
    is_valid, _ = DataValidator.validate_classifier([[0, 0], [1, 1]], [1, -1])
    assert is_valid


@pytest.mark.parametrize("labels, fragment", [
    ([1, 1], "both classes"),
    ([1, 0], "+1 or -1"),
    ([1], "exactly one label"),
])
def test_classifier_points_rejected(labels, fragment):
    is_valid, message = DataValidator.validate_classifier([[0, 0], [1, 1]], labels)
    assert not is_valid
    assert fragment in message


def test_regression_settings_are_clamped():
    settings = RegressionSettings(iterations=10 ** 9, learning_rate=0.0, degree=42)
    assert settings.iterations == MAX_ITERATIONS
    assert settings.learning_rate == 1e-6
    assert settings.degree == 6


def test_classifier_settings_defaults_and_terms():
    settings = ClassifierSettings(margin=-1, terms=["x*y", "x*x"])
    assert settings.iterations == 10000
    assert settings.learning_rate == 0.001
    assert settings.margin == 0.0
    assert settings.terms == ("x*x", "x*y")


def test_classifier_settings_reject_unknown_terms():
    with pytest.raises(ValueError):
        ClassifierSettings(terms=["z*z"])
