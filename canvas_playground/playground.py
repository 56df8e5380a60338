"""Canvas-level state for the two lessons.

A playground owns the raw screen points the user placed and, while training,
the active :class:`TrainingSession`. Each tick produces a frame whose
coordinates are already mapped back to screen space and ready to draw.
"""

import logging
import numpy as np
from functools import cached_property
from typing import Callable, List, Optional
from dataclasses import dataclass, field

from . import features
from .boundary import extract_boundary
from .config import (ClassifierSettings, RegressionSettings,
                     REGRESSION_SEGMENT_COUNT, REGRESSION_X_RANGE)
from .normalizer import DatasetMeta, compute_meta, denormalize, denormalize_values, normalize, normalize_values
from .session import TrainingSession
from .solvers import LinearRegressionSolver, PerceptronSolver, classify, hypothesis
from .validation import DataValidator

logger = logging.getLogger(__name__)


@dataclass
class RegressionFrame:
    """Drawable state of a regression run after one tick."""
    iterations_left: int
    cost: float
    coefficients: np.ndarray
    render: Callable[[np.ndarray], np.ndarray] = field(repr=False, compare=False)

    @cached_property
    def curve(self) -> np.ndarray:
        """(k, 2) screen points, computed the first time the frame is drawn."""
        return self.render(self.coefficients)


@dataclass
class ClassifierFrame:
    """Drawable state of a classifier run after one tick."""
    iterations_left: int
    cost: float
    coefficients: np.ndarray
    render: Callable[[np.ndarray], List[np.ndarray]] = field(repr=False, compare=False)

    @cached_property
    def curves(self) -> List[np.ndarray]:
        return self.render(self.coefficients)


class _Playground:
    """Shared point bookkeeping."""

    def __init__(self):
        self._points: List[List[float]] = []
        self.session: Optional[TrainingSession] = None
        self.meta: Optional[DatasetMeta] = None

    @property
    def points(self) -> np.ndarray:
        return np.array(self._points, dtype=float).reshape(-1, 2)

    def __len__(self) -> int:
        return len(self._points)

    @property
    def running(self) -> bool:
        return self.session is not None and self.session.running

    def stop(self):
        if self.session is not None:
            self.session.stop()

    def reset(self):
        """Forget every point and any run in progress."""
        self.stop()
        self._points = []
        self.session = None
        self.meta = None


class RegressionPlayground(_Playground):
    """Polynomial regression through points clicked on the canvas."""

    def __init__(self):
        super().__init__()
        self.settings: Optional[RegressionSettings] = None

    def add_point(self, x: float, y: float):
        self._points.append([float(x), float(y)])

    def start(self, settings: RegressionSettings) -> TrainingSession:
        """Normalize the current points and begin a new run."""
        is_valid, message = DataValidator.validate_regression(self.points)
        if not is_valid:
            raise ValueError(message)

        self.stop()
        points = self.points
        self.meta = compute_meta(points[:, :1], output=points[:, 1])
        normalized_x, normalized_y = normalize(points[:, :1], self.meta, output=points[:, 1])

        dataset = features.regression_rows(normalized_x[:, 0], settings.degree)
        solver = LinearRegressionSolver(learning_rate=settings.learning_rate)
        self.settings = settings
        self.session = TrainingSession(solver, dataset, normalized_y, settings.iterations)
        logger.info("Regression of degree %d, learning rate %g", settings.degree, settings.learning_rate)
        return self.session

    def curve(self, coefficients: np.ndarray) -> np.ndarray:
        """Regression curve of ``coefficients`` in screen coordinates."""
        lo, hi = REGRESSION_X_RANGE
        xs = np.linspace(lo, hi, REGRESSION_SEGMENT_COUNT)
        rows = features.regression_rows(xs, self.settings.degree)
        ys = rows @ np.asarray(coefficients, dtype=float)
        screen_x, screen_y = denormalize(xs.reshape(-1, 1), self.meta, output=ys)
        return np.column_stack([screen_x[:, 0], screen_y])

    def tick(self) -> Optional[RegressionFrame]:
        if self.session is None:
            return None
        result = self.session.tick()
        if result is None:
            return None
        return RegressionFrame(
            iterations_left=self.session.iterations_left,
            cost=result.cost,
            coefficients=result.coefficients,
            render=self.curve,
        )

    def predict(self, x: float) -> float:
        """Prediction of the current run for a screen-space x."""
        if self.session is None:
            raise RuntimeError("No training run has been started.")
        normalized_x = normalize_values([x], self.meta.features[0])
        row = features.regression_rows(normalized_x, self.settings.degree)[0]
        return float(denormalize_values(hypothesis(self.session.coefficients, row), self.meta.output))


class ClassifierPlayground(_Playground):
    """Two-class margin perceptron over points clicked on the canvas."""

    def __init__(self):
        super().__init__()
        self._labels: List[float] = []
        self.settings: Optional[ClassifierSettings] = None

    @property
    def labels(self) -> np.ndarray:
        return np.array(self._labels, dtype=float)

    def add_point(self, x: float, y: float, label: int):
        if label not in (1, -1):
            raise ValueError(f"Label must be +1 or -1, got {label}.")
        self._points.append([float(x), float(y)])
        self._labels.append(float(label))

    def reset(self):
        super().reset()
        self._labels = []

    def _rows(self, points: np.ndarray) -> np.ndarray:
        normalized, _ = normalize(points, self.meta)
        return features.classifier_rows(normalized, self.settings.terms)

    def start(self, settings: ClassifierSettings) -> TrainingSession:
        is_valid, message = DataValidator.validate_classifier(self.points, self.labels)
        if not is_valid:
            raise ValueError(message)

        self.stop()
        self.meta = compute_meta(self.points)
        self.settings = settings
        dataset = self._rows(self.points)

        solver = PerceptronSolver(learning_rate=settings.learning_rate, margin=settings.margin)
        self.session = TrainingSession(solver, dataset, self.labels, settings.iterations)
        logger.info(
            "Perceptron with terms %s, learning rate %g, margin %g",
            list(settings.terms), settings.learning_rate, settings.margin,
        )
        return self.session

    def boundary(self, coefficients: np.ndarray) -> List[np.ndarray]:
        """Decision boundary of ``coefficients`` in screen coordinates."""
        curves = extract_boundary(coefficients, self.settings.terms)
        return [denormalize(curve, self.meta)[0] for curve in curves]

    def tick(self) -> Optional[ClassifierFrame]:
        if self.session is None:
            return None
        result = self.session.tick()
        if result is None:
            return None
        return ClassifierFrame(
            iterations_left=self.session.iterations_left,
            cost=result.cost,
            coefficients=result.coefficients,
            render=self.boundary,
        )

    def accuracy(self) -> float:
        """Share of points on the correct side of the current boundary."""
        if self.session is None:
            raise RuntimeError("No training run has been started.")
        session = self.session
        correct = sum(
            classify(session.coefficients, row) == label
            for row, label in zip(session.dataset, session.output)
        )
        return correct / len(session.dataset)
