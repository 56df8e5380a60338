import numpy as np
from typing import Tuple

from .config import CANVAS_HEIGHT, CANVAS_WIDTH


class DatasetGenerator:
    """Generate educational point sets in canvas (screen) coordinates."""

    @staticmethod
    def generate_linear(n_samples: int = 30, noise: float = 20.0, slope: float = 0.5,
                        seed: int = 42) -> np.ndarray:
        """Points scattered around a straight line."""
        rng = np.random.RandomState(seed)
        x = rng.uniform(0.1 * CANVAS_WIDTH, 0.9 * CANVAS_WIDTH, n_samples)
        y = CANVAS_HEIGHT / 2 + slope * (x - CANVAS_WIDTH / 2) + noise * rng.randn(n_samples)
        return np.column_stack([x, y])

    @staticmethod
    def generate_polynomial(n_samples: int = 30, noise: float = 20.0, seed: int = 42) -> np.ndarray:
        """Points scattered around a parabola opening upwards on screen."""
        rng = np.random.RandomState(seed)
        x = rng.uniform(0.1 * CANVAS_WIDTH, 0.9 * CANVAS_WIDTH, n_samples)
        u = (x - CANVAS_WIDTH / 2) / (CANVAS_WIDTH / 2)
        y = 0.2 * CANVAS_HEIGHT + 0.6 * CANVAS_HEIGHT * u ** 2 + noise * rng.randn(n_samples)
        return np.column_stack([x, y])

    @staticmethod
    def generate_blobs(n_samples: int = 40, spread: float = 50.0,
                       seed: int = 42) -> Tuple[np.ndarray, np.ndarray]:
        """Two linearly separable clusters, labels +1 and -1."""
        rng = np.random.RandomState(seed)
        half = n_samples // 2
        centers = np.array([[0.3 * CANVAS_WIDTH, 0.35 * CANVAS_HEIGHT],
                            [0.7 * CANVAS_WIDTH, 0.65 * CANVAS_HEIGHT]])
        positive = centers[0] + spread * rng.randn(half, 2)
        negative = centers[1] + spread * rng.randn(n_samples - half, 2)
        points = np.vstack([positive, negative])
        labels = np.concatenate([np.ones(half), -np.ones(n_samples - half)])
        return points, labels

    @staticmethod
    def generate_ring(n_samples: int = 60, noise: float = 10.0,
                      seed: int = 42) -> Tuple[np.ndarray, np.ndarray]:
        """A disc of +1 points inside a ring of -1 points; needs the squared terms."""
        rng = np.random.RandomState(seed)
        center = np.array([CANVAS_WIDTH / 2, CANVAS_HEIGHT / 2])
        radius = 0.35 * min(CANVAS_WIDTH, CANVAS_HEIGHT)

        half = n_samples // 2
        inner_r = rng.uniform(0, 0.45 * radius, half)
        outer_r = rng.uniform(0.9 * radius, 1.1 * radius, n_samples - half) + noise * rng.randn(n_samples - half)
        angles = rng.uniform(0, 2 * np.pi, n_samples)
        radii = np.concatenate([inner_r, outer_r])

        points = center + np.column_stack([radii * np.cos(angles), radii * np.sin(angles)])
        labels = np.concatenate([np.ones(half), -np.ones(n_samples - half)])
        return points, labels
