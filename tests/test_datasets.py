import io

import numpy as np
import pytest

from canvas_playground.config import CANVAS_HEIGHT, CANVAS_WIDTH
from canvas_playground.datasets import DatasetGenerator
from canvas_playground.transfer import points_from_csv, points_from_frame, points_to_csv, points_to_frame
from canvas_playground.validation import DataValidator


def test_linear_points_are_seeded():
    first = DatasetGenerator.generate_linear(n_samples=25, seed=7)
    second = DatasetGenerator.generate_linear(n_samples=25, seed=7)
    assert first.shape == (25, 2)
    np.testing.assert_array_equal(first, second)
    assert np.all((first[:, 0] >= 0) & (first[:, 0] <= CANVAS_WIDTH))


def test_polynomial_points_are_valid_regression_data():
    points = DatasetGenerator.generate_polynomial(n_samples=30)
    assert DataValidator.validate_regression(points)[0]


@pytest.mark.parametrize("generator", [DatasetGenerator.generate_blobs, DatasetGenerator.generate_ring])
def test_classifier_samples_have_both_classes(generator):
    points, labels = generator(n_samples=41)
    assert points.shape == (41, 2)
    assert set(labels) == {1.0, -1.0}
    assert DataValidator.validate_classifier(points, labels)[0]


def test_ring_puts_positive_class_inside():
    points, labels = DatasetGenerator.generate_ring()
    center = np.array([CANVAS_WIDTH / 2, CANVAS_HEIGHT / 2])
    radii = np.linalg.norm(points - center, axis=1)
    assert radii[labels == 1].max() < radii[labels == -1].min()


def test_points_survive_csv():
    points = np.array([[10.5, 20.0], [30.0, 40.25]])
    labels = np.array([1.0, -1.0])

    csv = points_to_csv(points, labels)
    assert csv.splitlines()[0] == "x,y,label"

    loaded, loaded_labels = points_from_csv(io.StringIO(csv), with_labels=True)
    np.testing.assert_allclose(loaded, points)
    np.testing.assert_array_equal(loaded_labels, labels)


def test_incomplete_rows_are_dropped():
    df = points_to_frame(np.array([[1.0, 2.0], [3.0, 4.0]]))
    df.loc[1, 'y'] = None
    points, labels = points_from_frame(df)
    np.testing.assert_array_equal(points, [[1.0, 2.0]])
    assert labels is None


def test_missing_columns_are_reported():
    with pytest.raises(ValueError, match="label"):
        points_from_csv(io.StringIO("x,y\n1,2\n"), with_labels=True)
