"""
Helpers shared by the classifier implementations.
"""

from typing import Iterable, Sequence, Tuple

from ..data_model import LabeledPoint
from ..exceptions import InsufficientDataError


def majority_label(labels: Iterable[str]) -> Tuple[str, int]:
    """
    Most frequent label, ties broken by first occurrence.

    Args:
        labels: Canonical string labels in iteration order

    Returns:
        Tuple of (winning label, its count)

    Raises:
        ValueError: If labels is empty
    """
    counts = {}
    for label in labels:
        counts[label] = counts.get(label, 0) + 1

    if not counts:
        raise ValueError("Cannot take the majority of an empty label set")

    best_label, best_count = None, 0
    # dicts keep insertion order, so a strict comparison keeps the first seen
    for label, count in counts.items():
        if count > best_count:
            best_label, best_count = label, count
    return best_label, best_count


def require_training(training: Sequence[LabeledPoint], minimum: int = 1) -> None:
    """Raise InsufficientDataError if training has fewer than minimum points."""
    if len(training) < minimum:
        raise InsufficientDataError(
            f"Need at least {minimum} training points, got {len(training)}"
        )
