"""
Shared Data Model

Immutable value objects passed between the classifiers and their callers:
labeled input points, per-point outcomes and the aggregate result. Labels may
arrive as numbers or strings; they are always compared by their canonical
string form so that ``1`` and ``"1"`` name the same class.
"""

import numbers
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Sequence, Tuple, Union

import numpy as np

from .exceptions import DimensionMismatchError


Label = Union[str, int, float]


def normalize_label(label: Label) -> str:
    """
    Convert a label to its canonical string form.

    Integral numbers render without a fractional part, so ``2``, ``2.0`` and
    ``"2"`` all normalize to ``"2"``.

    Args:
        label: String or numeric class identifier

    Returns:
        Canonical string label

    Raises:
        TypeError: If the label is neither a string nor a real number
    """
    if isinstance(label, str):
        return label
    if isinstance(label, (bool, np.bool_)):
        raise TypeError("Labels must be strings or numbers, got bool")
    if isinstance(label, numbers.Integral):
        return str(int(label))
    if isinstance(label, numbers.Real):
        value = float(label)
        if value.is_integer():
            return str(int(value))
        return repr(value)
    raise TypeError(f"Labels must be strings or numbers, got {type(label).__name__}")


@dataclass(frozen=True)
class LabeledPoint:
    """A fixed-length numeric feature vector paired with its class label."""
    features: Tuple[float, ...]
    label: Label

    def __post_init__(self):
        """Coerce features to floats and reject labels that have no string form."""
        try:
            features = tuple(float(v) for v in self.features)
            normalize_label(self.label)
        except TypeError as e:
            raise ValueError(f"Invalid labeled point: {e}") from e
        object.__setattr__(self, 'features', features)

    @property
    def dimension(self) -> int:
        return len(self.features)

    @property
    def label_key(self) -> str:
        """Canonical string form of the label."""
        return normalize_label(self.label)


@dataclass(frozen=True)
class ClassificationOutcome:
    """Prediction for a single test point."""
    features: Tuple[float, ...]
    actual_label: str
    predicted_label: str
    confidence: float

    @property
    def correct(self) -> bool:
        return self.actual_label == self.predicted_label

    def to_dict(self) -> Dict[str, Any]:
        return {
            'features': list(self.features),
            'actualLabel': self.actual_label,
            'predictedLabel': self.predicted_label,
            'confidence': self.confidence,
        }


@dataclass(frozen=True)
class ConfusionMatrix:
    """Counts indexed by [actual_index][predicted_index] over sorted labels."""
    labels: Tuple[str, ...]
    matrix: Tuple[Tuple[int, ...], ...]

    def count(self, actual: Label, predicted: Label) -> int:
        """Number of outcomes with the given actual and predicted labels."""
        actual_key = normalize_label(actual)
        predicted_key = normalize_label(predicted)
        if actual_key not in self.labels or predicted_key not in self.labels:
            return 0
        return self.matrix[self.labels.index(actual_key)][self.labels.index(predicted_key)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'labels': list(self.labels),
            'matrix': [list(row) for row in self.matrix],
        }


@dataclass(frozen=True)
class ClassificationResult:
    """
    Aggregate output of one classifier call.

    Attributes:
        model: Name of the model that produced the result
        accuracy: Fraction of outcomes whose predicted label equals the actual label
        outcomes: Per-test-point outcomes in test-set order
        feature_importance: Optional mapping of feature index to weight
        confusion_matrix: Optional confusion matrix over the outcomes
    """
    model: str
    accuracy: float
    outcomes: Tuple[ClassificationOutcome, ...]
    feature_importance: Optional[Dict[int, float]] = None
    confusion_matrix: Optional[ConfusionMatrix] = None

    def __post_init__(self):
        object.__setattr__(self, 'outcomes', tuple(self.outcomes))
        if self.feature_importance is not None:
            object.__setattr__(self, 'feature_importance', dict(self.feature_importance))

    @property
    def correct_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.correct)

    @property
    def mean_confidence(self) -> float:
        if not self.outcomes:
            return 0.0
        return float(np.mean([outcome.confidence for outcome in self.outcomes]))

    def with_confusion_matrix(self, confusion_matrix: ConfusionMatrix) -> 'ClassificationResult':
        """Return a copy of this result carrying the given confusion matrix."""
        return replace(self, confusion_matrix=confusion_matrix)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the result to a JSON-serializable dictionary.

        Returns:
            Dictionary with keys model, accuracy, predictions and, when
            present, featureImportance and confusionMatrix
        """
        result_dict = {
            'model': self.model,
            'accuracy': self.accuracy,
            'predictions': [outcome.to_dict() for outcome in self.outcomes],
        }
        if self.feature_importance is not None:
            result_dict['featureImportance'] = {
                str(index): weight for index, weight in self.feature_importance.items()
            }
        if self.confusion_matrix is not None:
            result_dict['confusionMatrix'] = self.confusion_matrix.to_dict()
        return result_dict


def to_points(features: Sequence[Sequence[float]], labels: Sequence[Label]) -> Tuple[LabeledPoint, ...]:
    """
    Build labeled points from parallel feature and label sequences.

    Args:
        features: Feature rows, e.g. a numpy array of shape (n_samples, n_features)
        labels: Label per row

    Returns:
        Tuple of LabeledPoint in row order

    Raises:
        ValueError: If the number of rows and labels differ
    """
    if len(features) != len(labels):
        raise ValueError(
            f"Features and labels must have the same length, got {len(features)} and {len(labels)}"
        )
    return tuple(
        LabeledPoint(features=tuple(row), label=label.item() if isinstance(label, np.generic) else label)
        for row, label in zip(features, labels)
    )


def validate_dimensions(training: Sequence[LabeledPoint], test: Sequence[LabeledPoint] = ()) -> int:
    """
    Check that every training and test point has the same feature length.

    The first training point sets the expected length; training points are
    checked before test points.

    Returns:
        The shared feature-vector length (0 when there are no points)

    Raises:
        DimensionMismatchError: On the first point whose length differs
    """
    reference = training[0] if training else (test[0] if test else None)
    if reference is None:
        return 0
    expected = reference.dimension

    for dataset_name, points in (('training', training), ('test', test)):
        for index, point in enumerate(points):
            if point.dimension != expected:
                raise DimensionMismatchError(
                    f"{dataset_name} point {index} has {point.dimension} features, expected {expected}"
                )
    return expected
