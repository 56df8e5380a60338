from typing import Tuple
from dataclasses import dataclass

from .features import canonical_terms

# Screen coordinates, y grows downwards
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600

MAX_ITERATIONS = 100000
MAX_DEGREE = 6

# Regression curves are sampled over this x range in normalized space
REGRESSION_X_RANGE = (-10.0, 10.0)
REGRESSION_SEGMENT_COUNT = 500

# How often the host redraws while training
REDRAW_EVERY = 25


def _clamp(value, lo, hi):
    return max(lo, min(hi, value))


@dataclass
class RegressionSettings:
    """Parameters of a polynomial regression run."""
    iterations: int = 10000
    learning_rate: float = 0.1
    degree: int = 1

    def __post_init__(self):
        self.iterations = int(_clamp(self.iterations, 1, MAX_ITERATIONS))
        self.learning_rate = float(_clamp(self.learning_rate, 1e-6, 10.0))
        self.degree = int(_clamp(self.degree, 0, MAX_DEGREE))


@dataclass
class ClassifierSettings:
    """Parameters of a margin perceptron run."""
    iterations: int = 10000
    learning_rate: float = 0.001
    margin: float = 0.1
    terms: Tuple[str, ...] = ()

    def __post_init__(self):
        self.iterations = int(_clamp(self.iterations, 1, MAX_ITERATIONS))
        self.learning_rate = float(_clamp(self.learning_rate, 1e-6, 10.0))
        self.margin = float(_clamp(self.margin, 0.0, 10.0))
        self.terms = canonical_terms(self.terms)
