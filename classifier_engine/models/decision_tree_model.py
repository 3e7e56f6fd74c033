"""
Decision Stump Classifier

A depth-1 decision tree that always splits on the first feature at the
training mean. Confidence is a fixed heuristic, not a calibrated probability.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..data_model import ClassificationOutcome, ClassificationResult, LabeledPoint, validate_dimensions
from ..evaluation import build_result
from ..exceptions import DimensionMismatchError
from .common import majority_label, require_training


logger = logging.getLogger(__name__)

MODEL_NAME = 'decision_tree'
SPLIT_FEATURE_INDEX = 0
DECISION_TREE_CONFIDENCE = 0.7


@dataclass(frozen=True)
class DecisionStump:
    """Fitted single split: values <= threshold go left, the rest go right."""
    feature_index: int
    threshold: float
    left_label: str
    right_label: str

    def predict(self, features: Sequence[float]) -> str:
        if features[self.feature_index] <= self.threshold:
            return self.left_label
        return self.right_label


def fit_decision_stump(training: Sequence[LabeledPoint]) -> DecisionStump:
    """
    Fit the split threshold and branch labels.

    Each branch takes the majority label of its partition. An empty branch
    falls back to the majority label of the whole training set.

    Raises:
        InsufficientDataError: If training is empty
        DimensionMismatchError: If feature vectors have no split feature
    """
    require_training(training)
    dimension = validate_dimensions(training)
    if dimension <= SPLIT_FEATURE_INDEX:
        raise DimensionMismatchError(
            f"Decision stump splits on feature {SPLIT_FEATURE_INDEX}, but points have {dimension} features"
        )

    values = np.array([p.features[SPLIT_FEATURE_INDEX] for p in training], dtype=float)
    threshold = float(np.mean(values))

    left = [p.label_key for p in training if p.features[SPLIT_FEATURE_INDEX] <= threshold]
    right = [p.label_key for p in training if p.features[SPLIT_FEATURE_INDEX] > threshold]
    fallback, _ = majority_label(p.label_key for p in training)

    left_label = majority_label(left)[0] if left else fallback
    right_label = majority_label(right)[0] if right else fallback

    logger.debug(
        f"Decision stump: threshold={threshold:.4f}, left={left_label} ({len(left)}), "
        f"right={right_label} ({len(right)})"
    )
    return DecisionStump(
        feature_index=SPLIT_FEATURE_INDEX,
        threshold=threshold,
        left_label=left_label,
        right_label=right_label
    )


def decision_tree_classify(
    training: Sequence[LabeledPoint],
    test: Sequence[LabeledPoint]
) -> ClassificationResult:
    """
    Classify test points with a decision stump fitted on the training set.

    Args:
        training: Labeled training points
        test: Labeled test points to classify

    Returns:
        ClassificationResult with constant confidence and feature 0 importance 1.0

    Raises:
        InsufficientDataError: If training is empty
        DimensionMismatchError: If feature lengths are inconsistent
    """
    stump = fit_decision_stump(training)
    validate_dimensions(training, test)

    outcomes = [
        ClassificationOutcome(
            features=point.features,
            actual_label=point.label_key,
            predicted_label=stump.predict(point.features),
            confidence=DECISION_TREE_CONFIDENCE
        )
        for point in test
    ]

    return build_result(
        MODEL_NAME,
        outcomes,
        feature_importance={SPLIT_FEATURE_INDEX: 1.0}
    )
