"""Turn a learned discriminant back into drawable curves.

The discriminant is ``bias + a*x + b*y`` plus any of the cross terms
``x*x``, ``x*y``, ``y*y`` and ``x*x*x``. It is at most quadratic in y, so for
every sampled x the boundary points can be solved for directly: one root when
it is linear in y, two when a ``y*y`` term is present.
"""

import math
import numpy as np
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
from dataclasses import dataclass

from .features import canonical_terms

DEFAULT_X_RANGE = (-5.0, 5.0)
DEFAULT_STEP = 0.01


def _unpack(coefficients: Sequence[float], terms: Iterable[str]) -> Dict[str, float]:
    terms = canonical_terms(terms)
    if len(coefficients) != 3 + len(terms):
        raise ValueError(
            f"Expected {3 + len(terms)} coefficients for terms {list(terms)}, got {len(coefficients)}."
        )
    weights = {"1": 0.0, "x": 0.0, "y": 0.0, "x*x": 0.0, "x*y": 0.0, "y*y": 0.0, "x*x*x": 0.0}
    weights["1"], weights["x"], weights["y"] = (float(c) for c in coefficients[:3])
    for term, weight in zip(terms, coefficients[3:]):
        weights[term] = float(weight)
    return weights


def sample_xs(x_range: Tuple[float, float] = DEFAULT_X_RANGE, step: float = DEFAULT_STEP) -> np.ndarray:
    """Evenly spaced x samples covering ``x_range`` inclusive."""
    lo, hi = x_range
    if step <= 0 or hi <= lo:
        raise ValueError(f"Invalid sampling range {x_range} with step {step}.")
    count = int(round((hi - lo) / step)) + 1
    return lo + step * np.arange(count)


def _runs(mask: np.ndarray, splits: Optional[np.ndarray] = None) -> List[Tuple[int, int]]:
    """[start, end) index pairs of consecutive True entries.

    ``splits[i]`` forces a new run to begin at i even when i - 1 was solvable.
    """
    runs = []
    start = None
    for i, solvable in enumerate(mask):
        if solvable and start is not None and splits is not None and splits[i]:
            runs.append((start, i))
            start = i
        elif solvable and start is None:
            start = i
        elif not solvable and start is not None:
            runs.append((start, i))
            start = None
    if start is not None:
        runs.append((start, len(mask)))
    # a lone point is not drawable
    return [(s, e) for s, e in runs if e - s >= 2]


def _stitch(points: np.ndarray, points_rev: np.ndarray,
            closed_left: bool, closed_right: bool) -> List[np.ndarray]:
    """Join the two root branches of one solvable segment into a continuous path."""
    if not (closed_left or closed_right):
        # the segment runs off both ends of the domain, the roots never meet
        return [points, points_rev]

    candidates = []
    if closed_left:
        candidates.append((float(np.linalg.norm(points[0] - points_rev[0])), "left"))
    if closed_right:
        candidates.append((float(np.linalg.norm(points[-1] - points_rev[-1])), "right"))
    _, side = min(candidates)

    if side == "right":
        path = np.vstack([points, points_rev[::-1]])
    else:
        path = np.vstack([points_rev[::-1], points])

    if closed_left and closed_right:
        path = np.vstack([path, path[:1]])
    return [path]


def _vertical_lines(w: Dict[str, float], x_range: Tuple[float, float]) -> List[np.ndarray]:
    """Boundary of a discriminant that does not depend on y."""
    polynomial = [w["x*x*x"], w["x*x"], w["x"], w["1"]]
    if not any(polynomial):
        return []
    lo, hi = x_range
    roots = sorted({float(r.real) for r in np.roots(polynomial) if abs(r.imag) < 1e-9})
    return [np.array([[r, lo], [r, hi]]) for r in roots if lo <= r <= hi]


def extract_boundary(coefficients: Sequence[float], terms: Iterable[str] = (),
                     x_range: Tuple[float, float] = DEFAULT_X_RANGE,
                     step: float = DEFAULT_STEP) -> List[np.ndarray]:
    """Approximate the zero set of the discriminant as a list of polylines.

    Each curve is a ``(k, 2)`` array in the same (normalized) space as the
    coefficients. Curves are split wherever a sampled x has no real solution.
    """
    w = _unpack(coefficients, terms)
    xs = sample_xs(x_range, step)

    A = w["y*y"]
    B = w["y"] + w["x*y"] * xs
    C = w["1"] + w["x"] * xs + w["x*x"] * xs ** 2 + w["x*x*x"] * xs ** 3

    if A == 0:
        if w["y"] == 0 and w["x*y"] == 0:
            return _vertical_lines(w, x_range)

        solvable = B != 0
        # the asymptote lies between two samples where b + e*x changes sign
        crossings = np.zeros(len(xs), dtype=bool)
        crossings[1:] = np.sign(B[1:]) * np.sign(B[:-1]) < 0
        ys = np.zeros_like(xs)
        ys[solvable] = -C[solvable] / B[solvable]
        return [np.column_stack([xs[s:e], ys[s:e]]) for s, e in _runs(solvable, crossings)]

    discriminant = B * B - 4 * A * C
    solvable = discriminant >= 0
    root = np.sqrt(np.where(solvable, discriminant, 0.0))
    plus = (-B + root) / (2 * A)
    minus = (-B - root) / (2 * A)

    curves = []
    for s, e in _runs(solvable):
        points = np.column_stack([xs[s:e], plus[s:e]])
        points_rev = np.column_stack([xs[s:e], minus[s:e]])
        curves.extend(_stitch(points, points_rev, closed_left=s > 0, closed_right=e < len(xs)))
    return curves


@dataclass
class AngleLine:
    """A line drawn from its orientation and signed distance to a center."""
    start: np.ndarray
    end: np.ndarray
    foot: np.ndarray  # closest point of the line to the center


def line_from_angle(angle: float, distance: float, center: Sequence[float],
                    length: float) -> AngleLine:
    """Line whose normal points at ``angle`` degrees, ``distance`` away from ``center``.

    Angles are measured counter-clockwise on screen, where y grows downwards.
    """
    radians = math.pi * angle / 180
    normal = np.array([math.cos(-radians), math.sin(-radians)])
    foot = np.asarray(center, dtype=float) + normal * distance
    along = np.array([-normal[1], normal[0]]) * (length / 2)
    return AngleLine(start=foot + along, end=foot - along, foot=foot)


def line_from_normal(coefficients: Sequence[float], half_length: float = 20.0) -> Optional[AngleLine]:
    """Straight boundary of ``bias + a*x + b*y`` drawn from its normal ``(a, b)``.

    The foot is the point of the line closest to the origin; the endpoints lie
    ``half_length`` away from it on either side. Returns ``None`` when the
    normal vanishes and there is no line to draw.
    """
    if len(coefficients) != 3:
        raise ValueError(f"Expected 3 coefficients for a straight boundary, got {len(coefficients)}.")
    bias = float(coefficients[0])
    normal = np.asarray(coefficients[1:3], dtype=float)
    magnitude = float(np.linalg.norm(normal))
    if magnitude == 0:
        return None
    unit = normal / magnitude
    foot = unit * (-bias / magnitude)
    along = np.array([unit[1], -unit[0]]) * half_length
    return AngleLine(start=foot + along, end=foot - along, foot=foot)
