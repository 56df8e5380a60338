import numpy as np
from typing import Optional, Tuple
from dataclasses import dataclass


@dataclass(frozen=True)
class NormalizationMeta:
    """Min and max of one column."""
    min: float
    max: float

    @property
    def scale(self) -> float:
        # +1 keeps constant columns (max == min) finite
        return self.max - self.min + 1


@dataclass(frozen=True)
class DatasetMeta:
    """Normalization info for a whole dataset, computed once per training run."""
    features: Tuple[NormalizationMeta, ...]
    output: Optional[NormalizationMeta] = None
    bias_column: Optional[int] = None

    @property
    def n_features(self) -> int:
        return len(self.features)


def _column_meta(values: np.ndarray) -> NormalizationMeta:
    return NormalizationMeta(min=float(np.min(values)), max=float(np.max(values)))


def _as_2d(dataset) -> np.ndarray:
    data = np.asarray(dataset, dtype=float)
    if data.ndim != 2:
        raise ValueError(f"Dataset must be 2-dimensional, got shape {data.shape}.")
    return data


def compute_meta(dataset, output=None, bias_column: Optional[int] = None) -> DatasetMeta:
    """Compute per-column min/max of the dataset (and of the output, if given)."""
    data = _as_2d(dataset)
    if data.shape[0] == 0:
        raise ValueError("Cannot compute normalization info of an empty dataset.")

    if bias_column is not None and not 0 <= bias_column < data.shape[1]:
        raise ValueError(f"Bias column {bias_column} is out of range for {data.shape[1]} columns.")

    features = tuple(_column_meta(data[:, i]) for i in range(data.shape[1]))

    output_meta = None
    if output is not None:
        values = np.asarray(output, dtype=float)
        if values.size == 0:
            raise ValueError("Cannot compute normalization info of an empty output.")
        output_meta = _column_meta(values)

    return DatasetMeta(features=features, output=output_meta, bias_column=bias_column)


def normalize_values(values, meta: NormalizationMeta) -> np.ndarray:
    """Scale a single column into the normalized range."""
    return (np.asarray(values, dtype=float) - meta.min) / meta.scale


def denormalize_values(values, meta: NormalizationMeta) -> np.ndarray:
    """Map a single normalized column back to its original range."""
    return meta.min + np.asarray(values, dtype=float) * meta.scale


def _transform(dataset, output, meta: DatasetMeta, column_fn) -> Tuple[np.ndarray, Optional[np.ndarray]]:
    data = _as_2d(dataset)
    if data.shape[1] != meta.n_features:
        raise ValueError(
            f"Dataset has {data.shape[1]} columns but normalization info covers {meta.n_features}."
        )

    transformed = data.copy()
    for i, column_meta in enumerate(meta.features):
        if i == meta.bias_column:
            continue  # constant feature, passed through
        transformed[:, i] = column_fn(data[:, i], column_meta)

    transformed_output = None
    if output is not None:
        if meta.output is None:
            raise ValueError("No output normalization info available.")
        transformed_output = column_fn(output, meta.output)

    return transformed, transformed_output


def normalize(dataset, meta: DatasetMeta, output=None) -> Tuple[np.ndarray, Optional[np.ndarray]]:
    """Normalize a dataset (and optionally an output column) with previously computed meta.

    Returns a ``(dataset, output)`` pair; ``output`` is None when not supplied.
    """
    return _transform(dataset, output, meta, normalize_values)


def denormalize(dataset, meta: DatasetMeta, output=None) -> Tuple[np.ndarray, Optional[np.ndarray]]:
    """Inverse of :func:`normalize`."""
    return _transform(dataset, output, meta, denormalize_values)
