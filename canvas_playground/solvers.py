import logging
import numpy as np
from typing import Sequence
from dataclasses import dataclass
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


@dataclass
class StepResult:
    """Outcome of a single training step."""
    coefficients: np.ndarray
    cost: float


def hypothesis(coefficients: Sequence[float], row: Sequence[float]) -> float:
    """Model output for one feature row: ``dot(coefficients, row)``.

    Accumulates strictly left to right so repeated runs round identically.
    """
    if len(coefficients) != len(row):
        raise ValueError(
            f"Coefficient vector has {len(coefficients)} entries but the row has {len(row)} features."
        )
    total = 0.0
    for weight, value in zip(coefficients, row):
        total += float(weight) * float(value)
    return total


class BaseSolver(ABC):
    """Abstract base class for single-step solvers."""

    @abstractmethod
    def step(self, coefficients: np.ndarray, dataset: np.ndarray, output: np.ndarray) -> StepResult:
        """Run one pass over the dataset and return the updated coefficients."""
        pass

    @staticmethod
    def _check_shapes(coefficients: np.ndarray, dataset: np.ndarray, output: np.ndarray):
        """Fail loudly on mismatched shapes and return float copies of the inputs."""
        coefficients = np.array(coefficients, dtype=float)
        dataset = np.asarray(dataset, dtype=float)
        output = np.asarray(output, dtype=float)

        if coefficients.ndim != 1:
            raise ValueError(f"Coefficients must be a 1-D vector, got shape {coefficients.shape}.")
        if dataset.ndim != 2:
            raise ValueError(f"Dataset must be 2-dimensional, got shape {dataset.shape}.")
        if dataset.shape[1] != coefficients.shape[0]:
            raise ValueError(
                f"Dataset has {dataset.shape[1]} features but there are {coefficients.shape[0]} coefficients."
            )
        if output.shape != (dataset.shape[0],):
            raise ValueError(
                f"Output has shape {output.shape} but the dataset has {dataset.shape[0]} samples."
            )
        return coefficients, dataset, output


class LinearRegressionSolver(BaseSolver):
    """Batch gradient descent on the sum of squared errors."""

    def __init__(self, learning_rate: float = 0.1):
        self.learning_rate = learning_rate

    def step(self, coefficients: np.ndarray, dataset: np.ndarray, output: np.ndarray) -> StepResult:
        """One full-batch gradient step.

        ``error_i = h(row_i) - y_i``, ``cost = sum(error_i^2)`` and
        ``gradient_j = sum(error_i * row_i[j])``. The factor 2 of the exact
        derivative is folded into the learning rate.
        """
        coefficients, dataset, output = self._check_shapes(coefficients, dataset, output)

        cost = 0.0
        gradient = np.zeros_like(coefficients)
        for row, target in zip(dataset, output):
            error = hypothesis(coefficients, row) - target
            cost += error * error
            # elementwise, so each gradient entry sums samples in dataset order
            gradient += error * row

        new_coefficients = coefficients - self.learning_rate * gradient
        logger.debug("regression step: cost=%.6g", cost)
        return StepResult(coefficients=new_coefficients, cost=float(cost))


class PerceptronSolver(BaseSolver):
    """Margin perceptron with online updates inside each pass.

    A sample scoring inside ``(-margin, margin)`` is treated as predicted
    against its own label, so it always triggers an update.
    """

    def __init__(self, learning_rate: float = 0.001, margin: float = 0.1):
        self.learning_rate = learning_rate
        self.margin = margin

    def predict(self, coefficients: np.ndarray, row: np.ndarray, label: float) -> float:
        """Margin-aware prediction used by the update rule."""
        score = hypothesis(coefficients, row)
        if score >= self.margin:
            return 1.0
        if score <= -self.margin:
            return -1.0
        return -label

    def step(self, coefficients: np.ndarray, dataset: np.ndarray, output: np.ndarray) -> StepResult:
        coefficients, dataset, output = self._check_shapes(coefficients, dataset, output)

        cost = 0.0
        for row, label in zip(dataset, output):
            delta = self.predict(coefficients, row, label) - label
            if delta == 0:
                continue
            coefficients = coefficients + (-self.learning_rate * delta) * row
            cost += delta * delta

        logger.debug("perceptron step: cost=%.6g", cost)
        return StepResult(coefficients=coefficients, cost=float(cost))


def classify(coefficients: Sequence[float], row: Sequence[float]) -> int:
    """Plain sign prediction, +1 on the boundary."""
    return 1 if hypothesis(coefficients, row) >= 0 else -1
