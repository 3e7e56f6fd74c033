"""
Gaussian Naive Bayes Classifier

Models each feature of each class as an independent normal distribution and
picks the class with the highest log posterior score.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

import numpy as np
from scipy import stats

from ..data_model import ClassificationOutcome, ClassificationResult, LabeledPoint, validate_dimensions
from ..evaluation import build_result
from .common import require_training


logger = logging.getLogger(__name__)

MODEL_NAME = 'naive_bayes'
VARIANCE_FLOOR = 0.01
LOG_EPSILON = 1e-10


@dataclass(frozen=True)
class GaussianClassStats:
    """Prior and per-feature mean/variance for one class."""
    label: str
    prior: float
    means: Tuple[float, ...]
    variances: Tuple[float, ...]


def gaussian_pdf(x: float, mean: float, variance: float) -> float:
    """
    Normal probability density at x.

    With zero standard deviation the density is 1.0 when x equals the mean
    and 0.0 otherwise. Fitted variances are floored, so the classifier itself
    never takes that branch.
    """
    return float(gaussian_pdfs([x], [mean], [variance])[0])


def gaussian_pdfs(x: Sequence[float], means: Sequence[float], variances: Sequence[float]) -> np.ndarray:
    """Element-wise normal densities, with the same zero-deviation rule as gaussian_pdf."""
    x = np.asarray(x, dtype=float)
    means = np.asarray(means, dtype=float)
    stds = np.sqrt(np.asarray(variances, dtype=float))

    degenerate = stds == 0
    densities = stats.norm.pdf(x, loc=means, scale=np.where(degenerate, 1.0, stds))
    return np.where(degenerate, (x == means).astype(float), densities)


def fit_naive_bayes(training: Sequence[LabeledPoint]) -> Dict[str, GaussianClassStats]:
    """
    Estimate class priors and per-feature Gaussian parameters.

    Variances use divisor n. A feature that is constant within a class gets
    VARIANCE_FLOOR; constancy is judged on the values, not on the computed
    variance.

    Returns:
        Mapping of label to its statistics, in order of first appearance

    Raises:
        InsufficientDataError: If training is empty
        DimensionMismatchError: If feature lengths are inconsistent
    """
    require_training(training)
    dimension = validate_dimensions(training)

    grouped: Dict[str, list] = {}
    for point in training:
        grouped.setdefault(point.label_key, []).append(point.features)

    total = len(training)
    class_stats = {}
    for label, rows in grouped.items():
        values = np.array(rows, dtype=float).reshape(len(rows), dimension)
        means = values.mean(axis=0)
        variances = values.var(axis=0)
        constant = values.max(axis=0) == values.min(axis=0)
        variances = np.where(constant | (variances == 0), VARIANCE_FLOOR, variances)

        class_stats[label] = GaussianClassStats(
            label=label,
            prior=len(rows) / total,
            means=tuple(float(m) for m in means),
            variances=tuple(float(v) for v in variances)
        )

    logger.debug(f"Naive Bayes: fitted {len(class_stats)} classes over {dimension} features")
    return class_stats


def log_score(features: Sequence[float], class_stats: GaussianClassStats) -> float:
    """log(prior) plus the sum of per-feature log densities."""
    densities = gaussian_pdfs(features, class_stats.means, class_stats.variances)
    return math.log(class_stats.prior) + float(np.sum(np.log(densities + LOG_EPSILON)))


def predict_naive_bayes_point(
    features: Sequence[float],
    model: Dict[str, GaussianClassStats]
) -> Tuple[str, float]:
    """
    Predict the label of a single feature vector.

    Returns:
        Tuple of (predicted label, normalized posterior of that label)
    """
    scores = [(label, log_score(features, class_stats)) for label, class_stats in model.items()]

    best_label, best_score = scores[0]
    for label, score in scores[1:]:
        if score > best_score:
            best_label, best_score = label, score

    # Shifting by the max leaves the normalized posterior unchanged
    exponentials = [math.exp(score - best_score) for _, score in scores]
    confidence = 1.0 / sum(exponentials)
    return best_label, confidence


def naive_bayes_classify(
    training: Sequence[LabeledPoint],
    test: Sequence[LabeledPoint]
) -> ClassificationResult:
    """
    Classify test points with Gaussian Naive Bayes.

    A single-class training set is accepted: every point is then predicted
    as that class with confidence 1.0.

    Args:
        training: Labeled training points
        test: Labeled test points to classify

    Returns:
        ClassificationResult with posterior-probability confidences

    Raises:
        InsufficientDataError: If training is empty
        DimensionMismatchError: If feature lengths are inconsistent
    """
    model = fit_naive_bayes(training)
    validate_dimensions(training, test)

    outcomes = []
    for point in test:
        predicted, confidence = predict_naive_bayes_point(point.features, model)
        outcomes.append(ClassificationOutcome(
            features=point.features,
            actual_label=point.label_key,
            predicted_label=predicted,
            confidence=confidence
        ))

    return build_result(MODEL_NAME, outcomes)
