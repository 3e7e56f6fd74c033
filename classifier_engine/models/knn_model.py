"""
K-Nearest-Neighbors Classifier

Instance-based classification: each test point is labeled by a majority
vote of its k closest training points under Euclidean distance.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence, Tuple

import numpy as np

from ..data_model import ClassificationOutcome, ClassificationResult, LabeledPoint, validate_dimensions
from ..evaluation import build_result
from ..exceptions import InvalidParameterError
from .common import majority_label, require_training


logger = logging.getLogger(__name__)

MODEL_NAME = 'knn'
DEFAULT_K = 3


def euclidean_distances(training_features: np.ndarray, point: np.ndarray) -> np.ndarray:
    """
    Euclidean distance from one point to every training row.

    Args:
        training_features: Array of shape (n_samples, n_features)
        point: Array of shape (n_features,)

    Returns:
        Array of shape (n_samples,)
    """
    return np.sqrt(np.sum((training_features - point) ** 2, axis=1))


def predict_knn_point(
    training_features: np.ndarray,
    training_labels: Sequence[str],
    point: Sequence[float],
    k: int
) -> Tuple[str, float]:
    """
    Predict the label of a single feature vector.

    Neighbors at equal distance keep their training-set order (stable sort),
    and vote ties go to the label seen first among the k neighbors.

    Returns:
        Tuple of (predicted label, vote fraction of the winner)
    """
    distances = euclidean_distances(training_features, np.asarray(point, dtype=float))
    nearest = np.argsort(distances, kind='stable')[:k]

    label, votes = majority_label(training_labels[i] for i in nearest)
    return label, votes / k


def knn_classify(
    training: Sequence[LabeledPoint],
    test: Sequence[LabeledPoint],
    k: int = DEFAULT_K,
    max_workers: Optional[int] = None
) -> ClassificationResult:
    """
    Classify test points by majority vote of their k nearest training points.

    Args:
        training: Labeled training points
        test: Labeled test points to classify
        k: Number of neighbors (default: 3)
        max_workers: If set, predict test points on a thread pool of this size;
            outcomes are still returned in test-set order

    Returns:
        ClassificationResult with vote-fraction confidences

    Raises:
        InvalidParameterError: If k is not a positive integer
        InsufficientDataError: If there are fewer than k training points
        DimensionMismatchError: If feature lengths are inconsistent
    """
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)) or k < 1:
        raise InvalidParameterError(f"k must be a positive integer, got {k!r}")

    require_training(training, minimum=k)
    dimension = validate_dimensions(training, test)

    training_features = np.array([p.features for p in training], dtype=float).reshape(len(training), dimension)
    training_labels = [p.label_key for p in training]

    logger.debug(f"KNN: {len(training)} training points, {len(test)} test points, k={k}")

    def classify_point(point: LabeledPoint) -> ClassificationOutcome:
        predicted, confidence = predict_knn_point(training_features, training_labels, point.features, k)
        return ClassificationOutcome(
            features=point.features,
            actual_label=point.label_key,
            predicted_label=predicted,
            confidence=confidence
        )

    if max_workers and len(test) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            outcomes = list(executor.map(classify_point, test))
    else:
        outcomes = [classify_point(point) for point in test]

    result = build_result(MODEL_NAME, outcomes)
    logger.debug(f"KNN accuracy: {result.accuracy:.4f}")
    return result
