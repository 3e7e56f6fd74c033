"""
Evaluation Utilities

Accuracy, confusion matrices and result assembly shared by all classifiers.
Labels are compared by their canonical string form.
"""

from typing import Dict, Iterable, Optional, Sequence, Union

from sklearn.metrics import accuracy_score, confusion_matrix

from .data_model import (
    ClassificationOutcome,
    ClassificationResult,
    ConfusionMatrix,
    Label,
    normalize_label,
)


def compute_accuracy(actual: Sequence[Label], predicted: Sequence[Label]) -> float:
    """
    Fraction of positions where the predicted label equals the actual label.

    Args:
        actual: Actual labels
        predicted: Predicted labels, same length as actual

    Returns:
        Accuracy in [0, 1]; 0.0 for an empty sequence

    Raises:
        ValueError: If the sequences differ in length
    """
    if len(actual) != len(predicted):
        raise ValueError(
            f"Actual and predicted labels differ in length: {len(actual)} vs {len(predicted)}"
        )
    if len(actual) == 0:
        return 0.0

    y_true = [normalize_label(label) for label in actual]
    y_pred = [normalize_label(label) for label in predicted]
    return float(accuracy_score(y_true, y_pred))


def build_result(
    model: str,
    outcomes: Iterable[ClassificationOutcome],
    feature_importance: Optional[Dict[int, float]] = None
) -> ClassificationResult:
    """
    Assemble a ClassificationResult from a completed outcome list.

    Args:
        model: Name of the model that produced the outcomes
        outcomes: Per-test-point outcomes in test-set order
        feature_importance: Optional feature weights

    Returns:
        Immutable ClassificationResult with accuracy computed from the outcomes
    """
    outcomes = tuple(outcomes)
    accuracy = compute_accuracy(
        [outcome.actual_label for outcome in outcomes],
        [outcome.predicted_label for outcome in outcomes]
    )
    return ClassificationResult(
        model=model,
        accuracy=accuracy,
        outcomes=outcomes,
        feature_importance=feature_importance
    )


def build_confusion_matrix(
    source: Union[ClassificationResult, Iterable[ClassificationOutcome]]
) -> ConfusionMatrix:
    """
    Build a confusion matrix from a result or a sequence of outcomes.

    The label set is the sorted union of every actual and predicted label,
    and each outcome adds one to matrix[actual_index][predicted_index].

    Args:
        source: ClassificationResult or iterable of ClassificationOutcome

    Returns:
        ConfusionMatrix over the sorted label set
    """
    outcomes = source.outcomes if isinstance(source, ClassificationResult) else tuple(source)

    y_true = [outcome.actual_label for outcome in outcomes]
    y_pred = [outcome.predicted_label for outcome in outcomes]
    labels = sorted(set(y_true) | set(y_pred))

    if not labels:
        return ConfusionMatrix(labels=(), matrix=())

    counts = confusion_matrix(y_true, y_pred, labels=labels)
    return ConfusionMatrix(
        labels=tuple(labels),
        matrix=tuple(tuple(int(value) for value in row) for row in counts)
    )


def per_class_accuracy(result: ClassificationResult) -> Dict[str, float]:
    """
    Accuracy restricted to the outcomes of each actual label.

    Returns:
        Mapping of actual label to the fraction of its outcomes predicted
        correctly, with labels in sorted order
    """
    totals: Dict[str, int] = {}
    correct: Dict[str, int] = {}
    for outcome in result.outcomes:
        totals[outcome.actual_label] = totals.get(outcome.actual_label, 0) + 1
        if outcome.correct:
            correct[outcome.actual_label] = correct.get(outcome.actual_label, 0) + 1

    return {
        label: correct.get(label, 0) / totals[label]
        for label in sorted(totals)
    }
