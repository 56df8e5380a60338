"""Feature-row builders for the two lessons.

Regression rows are powers of a single input, ``[1, x, x^2, ..., x^d]``.
Classifier rows are ``[1, x, y]`` followed by the enabled cross terms, always
in the canonical order of ``POLYNOMIAL_TERMS`` so that coefficient positions
stay stable no matter the order the user ticked the boxes in.
"""

import numpy as np
from typing import Iterable, List, Tuple
from sklearn.preprocessing import PolynomialFeatures

POLYNOMIAL_TERMS: Tuple[str, ...] = ("x*x", "x*y", "y*y", "x*x*x")


def canonical_terms(terms: Iterable[str]) -> Tuple[str, ...]:
    """Validate term names and return them in canonical order."""
    requested = set(terms)
    unknown = requested.difference(POLYNOMIAL_TERMS)
    if unknown:
        raise ValueError(
            f"Unknown polynomial terms {sorted(unknown)}. Choose from {list(POLYNOMIAL_TERMS)}."
        )
    return tuple(term for term in POLYNOMIAL_TERMS if term in requested)


def _term_values(term: str, x: np.ndarray, y: np.ndarray) -> np.ndarray:
    if term == "x*x":
        return x * x
    if term == "x*y":
        return x * y
    if term == "y*y":
        return y * y
    return x * x * x


def regression_rows(xs, degree: int) -> np.ndarray:
    """Build ``[1, x, ..., x^degree]`` for every x."""
    if degree < 0:
        raise ValueError(f"Degree must be non-negative, got {degree}.")
    column = np.asarray(xs, dtype=float).reshape(-1, 1)
    return PolynomialFeatures(degree=degree, include_bias=True).fit_transform(column)


def classifier_rows(points, terms: Iterable[str] = ()) -> np.ndarray:
    """Build ``[1, x, y, <terms>]`` for every (x, y) point."""
    data = np.asarray(points, dtype=float).reshape(-1, 2)
    x, y = data[:, 0], data[:, 1]
    columns: List[np.ndarray] = [np.ones(len(data)), x, y]
    for term in canonical_terms(terms):
        columns.append(_term_values(term, x, y))
    return np.column_stack(columns)

