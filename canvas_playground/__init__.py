"""Fit simple models to points on a 2D canvas and watch them converge."""

from .boundary import extract_boundary, line_from_angle, line_from_normal
from .config import ClassifierSettings, RegressionSettings
from .normalizer import DatasetMeta, NormalizationMeta, compute_meta, denormalize, normalize
from .playground import ClassifierFrame, ClassifierPlayground, RegressionFrame, RegressionPlayground
from .session import TrainingSession
from .solvers import LinearRegressionSolver, PerceptronSolver, StepResult, hypothesis
from .validation import DataValidator

__version__ = "0.1.0"
