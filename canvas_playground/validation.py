import numpy as np
from typing import Tuple


class DataValidator:
    """Checks the caller runs before starting a training run.

    The solvers assume non-degenerate input, so empty canvases and
    single-class classifier data have to be caught here.
    """

    @staticmethod
    def _check_points(points: np.ndarray) -> Tuple[bool, str]:
        if points.size == 0:
            return False, "Please add some points first."

        if points.ndim != 2 or points.shape[1] != 2:
            return False, f"Points must be (x, y) pairs, got shape {points.shape}."

        if np.any(np.isnan(points)):
            return False, "Points contain NaN values. Please clean your data."

        if np.any(np.isinf(points)):
            return False, "Points contain infinite values. Please clean your data."

        return True, "Data validation passed."

    @staticmethod
    def validate_regression(points) -> Tuple[bool, str]:
        """Validate (x, y) points for a regression run."""
        return DataValidator._check_points(np.asarray(points, dtype=float))

    @staticmethod
    def validate_classifier(points, labels) -> Tuple[bool, str]:
        """Validate (x, y) points and their +1/-1 labels for a classifier run."""
        points = np.asarray(points, dtype=float)
        labels = np.asarray(labels, dtype=float)

        is_valid, message = DataValidator._check_points(points)
        if not is_valid:
            return is_valid, message

        if labels.shape != (points.shape[0],):
            return False, "Every point needs exactly one label."

        if not np.all(np.isin(labels, (-1.0, 1.0))):
            return False, "Labels must be +1 or -1."

        if len(np.unique(labels)) < 2:
            return False, "Add points of both classes before training."

        return True, "Data validation passed."
