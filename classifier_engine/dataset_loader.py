"""
Dataset Loader

Reads labeled feature vectors from CSV or JSON files and splits them into
training and test sets. The classifiers never touch files themselves; this
module is for callers such as the command line runner.
"""

import json
import os
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd
from sklearn.model_selection import train_test_split

from .data_model import LabeledPoint, to_points


def load_points_from_csv(
    file_path: str,
    label_column: str = "label",
    feature_columns: Optional[List[str]] = None
) -> Tuple[LabeledPoint, ...]:
    """
    Load labeled points from a CSV file.

    Args:
        file_path: Path to a CSV file with a header row
        label_column: Name of the column holding the class label (default: "label")
        feature_columns: Feature columns in order; all other columns if None

    Returns:
        Tuple of LabeledPoint in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If columns are missing, non-numeric or contain missing values
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Dataset file not found at {file_path}")

    frame = pd.read_csv(file_path)

    if label_column not in frame.columns:
        raise ValueError(f"Label column '{label_column}' not found in {file_path}")

    if feature_columns is None:
        feature_columns = [c for c in frame.columns if c != label_column]
    missing = [c for c in feature_columns if c not in frame.columns]
    if missing:
        raise ValueError(f"Feature columns not found in {file_path}: {', '.join(missing)}")

    features = frame[feature_columns]
    non_numeric = [c for c in feature_columns if not pd.api.types.is_numeric_dtype(features[c])]
    if non_numeric:
        raise ValueError(f"Feature columns must be numeric: {', '.join(non_numeric)}")
    if features.isnull().values.any() or frame[label_column].isnull().any():
        raise ValueError(f"Dataset {file_path} contains missing values")

    return to_points(features.to_numpy(dtype=float), frame[label_column].tolist())


def load_points_from_json(file_path: str) -> Tuple[LabeledPoint, ...]:
    """
    Load labeled points from a JSON file.

    The file holds a list of objects with "features" (list of numbers) and
    "label" (string or number) keys.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the content does not have the expected shape
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Dataset file not found at {file_path}")

    with open(file_path, 'r') as f:
        records = json.load(f)

    if not isinstance(records, list):
        raise ValueError(f"Expected a list of points in {file_path}, got {type(records).__name__}")

    points = []
    for index, record in enumerate(records):
        if not isinstance(record, dict) or 'features' not in record or 'label' not in record:
            raise ValueError(f"Point {index} in {file_path} must have 'features' and 'label' keys")
        try:
            points.append(LabeledPoint(features=record['features'], label=record['label']))
        except ValueError as e:
            raise ValueError(f"Point {index} in {file_path}: {e}") from e
    return tuple(points)


def load_points(file_path: str, label_column: str = "label") -> Tuple[LabeledPoint, ...]:
    """
    Load labeled points, choosing the reader from the file extension.

    Raises:
        ValueError: If the extension is neither .csv nor .json
    """
    extension = os.path.splitext(file_path)[1].lower()
    if extension == '.csv':
        return load_points_from_csv(file_path, label_column=label_column)
    if extension == '.json':
        return load_points_from_json(file_path)
    raise ValueError(f"Unsupported dataset format '{extension}', expected .csv or .json")


def split_points(
    points: Sequence[LabeledPoint],
    test_split: float = 0.3,
    random_state: int = 42,
    stratify: bool = False
) -> Tuple[Tuple[LabeledPoint, ...], Tuple[LabeledPoint, ...]]:
    """
    Split labeled points into training and test sets.

    Args:
        points: Labeled points to split
        test_split: Proportion of points to use for testing (default: 0.3)
        random_state: Random state for reproducibility (default: 42)
        stratify: Keep label proportions equal in both sets

    Returns:
        Tuple of (training, test)

    Raises:
        ValueError: If test_split is not between 0 and 1
    """
    if not 0 < test_split < 1:
        raise ValueError(f"test_split must be between 0 and 1, got {test_split}")

    labels = [p.label_key for p in points] if stratify else None
    training, test = train_test_split(
        list(points), test_size=test_split, random_state=random_state, stratify=labels
    )
    return tuple(training), tuple(test)


def get_dataset_info(points: Sequence[LabeledPoint]) -> Dict:
    """
    Summarize a set of labeled points.

    Returns:
        Dictionary containing:
            - labels: Sorted list of distinct labels
            - sample_count: Number of points
            - samples_per_label: Number of points per label
            - dimension: Feature-vector length (None if there are no points)
    """
    if not points:
        return {
            "labels": [],
            "sample_count": 0,
            "samples_per_label": {},
            "dimension": None
        }

    samples_per_label: Dict[str, int] = {}
    for point in points:
        samples_per_label[point.label_key] = samples_per_label.get(point.label_key, 0) + 1

    return {
        "labels": sorted(samples_per_label),
        "sample_count": len(points),
        "samples_per_label": {label: samples_per_label[label] for label in sorted(samples_per_label)},
        "dimension": points[0].dimension
    }
