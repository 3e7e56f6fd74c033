"""
Supervised classification engine: KNN, decision stump and Gaussian Naive
Bayes over labeled numeric feature vectors.
"""

from .data_model import (
    LabeledPoint,
    ClassificationOutcome,
    ClassificationResult,
    ConfusionMatrix,
    normalize_label,
    to_points,
)
from .exceptions import (
    ClassificationError,
    InsufficientDataError,
    DimensionMismatchError,
    InvalidParameterError,
)
from .evaluation import compute_accuracy, build_confusion_matrix, per_class_accuracy
from .models import (
    knn_classify,
    decision_tree_classify,
    naive_bayes_classify,
    DEFAULT_K,
    DECISION_TREE_CONFIDENCE,
    VARIANCE_FLOOR,
    LOG_EPSILON,
)
from .runner import AVAILABLE_MODELS, classify, compare_models, summarize_results

__version__ = "0.1.0"
__all__ = [
    "LabeledPoint",
    "ClassificationOutcome",
    "ClassificationResult",
    "ConfusionMatrix",
    "normalize_label",
    "to_points",
    "ClassificationError",
    "InsufficientDataError",
    "DimensionMismatchError",
    "InvalidParameterError",
    "compute_accuracy",
    "build_confusion_matrix",
    "per_class_accuracy",
    "knn_classify",
    "decision_tree_classify",
    "naive_bayes_classify",
    "DEFAULT_K",
    "DECISION_TREE_CONFIDENCE",
    "VARIANCE_FLOOR",
    "LOG_EPSILON",
    "AVAILABLE_MODELS",
    "classify",
    "compare_models",
    "summarize_results",
]
