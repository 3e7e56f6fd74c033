"""
Classifier implementations
"""

from .knn_model import knn_classify, DEFAULT_K
from .decision_tree_model import decision_tree_classify, DECISION_TREE_CONFIDENCE
from .naive_bayes_model import naive_bayes_classify, VARIANCE_FLOOR, LOG_EPSILON

__all__ = [
    'knn_classify',
    'decision_tree_classify',
    'naive_bayes_classify',
    'DEFAULT_K',
    'DECISION_TREE_CONFIDENCE',
    'VARIANCE_FLOOR',
    'LOG_EPSILON',
]
