import numpy as np
import pandas as pd
from typing import Optional, Tuple

POINT_COLUMNS = ['x', 'y']
LABEL_COLUMN = 'label'


def points_to_frame(points: np.ndarray, labels: Optional[np.ndarray] = None) -> pd.DataFrame:
    """Tabulate canvas points, with a label column for classifier data."""
    df = pd.DataFrame(np.asarray(points, dtype=float).reshape(-1, 2), columns=POINT_COLUMNS)
    if labels is not None:
        df[LABEL_COLUMN] = np.asarray(labels, dtype=int)
    return df


def points_to_csv(points: np.ndarray, labels: Optional[np.ndarray] = None) -> str:
    return points_to_frame(points, labels).to_csv(index=False)


def points_from_frame(df: pd.DataFrame, with_labels: bool = False) -> Tuple[np.ndarray, Optional[np.ndarray]]:
    """Read points (and labels) back from a table, dropping incomplete rows."""
    required = POINT_COLUMNS + ([LABEL_COLUMN] if with_labels else [])
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise ValueError(f"CSV is missing columns {missing}. Expected {required}.")

    clean = df[required].apply(pd.to_numeric, errors='coerce').dropna()
    points = clean[POINT_COLUMNS].to_numpy(dtype=float)
    labels = clean[LABEL_COLUMN].to_numpy(dtype=float) if with_labels else None
    return points, labels


def points_from_csv(buffer, with_labels: bool = False) -> Tuple[np.ndarray, Optional[np.ndarray]]:
    """Load points from a CSV path or file-like object."""
    return points_from_frame(pd.read_csv(buffer), with_labels)
