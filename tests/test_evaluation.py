"""
Unit tests for evaluation utilities.
"""

import pytest
from classifier_engine.data_model import ClassificationOutcome, ClassificationResult
from classifier_engine.evaluation import (
    compute_accuracy,
    build_confusion_matrix,
    build_result,
    per_class_accuracy
)


def outcome(actual, predicted, confidence=1.0):
    return ClassificationOutcome(features=(0.0,), actual_label=actual, predicted_label=predicted, confidence=confidence)


def test_accuracy_compares_stringified_labels():
    """Test that 1 and "1" count as the same label."""
    assert compute_accuracy([1, 2, "3"], ["1", 2.0, 3]) == 1.0


def test_accuracy_fraction():
    """Test a partial match."""
    assert compute_accuracy(["A", "B", "A", "B"], ["A", "A", "A", "A"]) == 0.5


def test_accuracy_empty():
    """Test that no outcomes gives zero accuracy."""
    assert compute_accuracy([], []) == 0.0


def test_accuracy_length_mismatch():
    """Test that both sequences must have the same length."""
    with pytest.raises(ValueError):
        compute_accuracy(["A"], ["A", "B"])


def test_build_result():
    """Test result assembly from outcomes."""
    outcomes = [outcome("A", "A"), outcome("A", "B"), outcome("B", "B")]

    result = build_result("knn", outcomes, feature_importance=None)

    assert result.model == "knn"
    assert result.accuracy == pytest.approx(2 / 3)
    assert result.outcomes == tuple(outcomes)
    assert result.confusion_matrix is None


def test_confusion_matrix_counts():
    """Test matrix[actual][predicted] over sorted labels."""
    outcomes = [outcome("A", "A"), outcome("A", "B"), outcome("B", "B"), outcome("C", "A")]

    matrix = build_confusion_matrix(outcomes)

    assert matrix.labels == ("A", "B", "C")
    assert matrix.matrix == (
        (1, 1, 0),
        (0, 1, 0),
        (1, 0, 0),
    )


def test_confusion_matrix_includes_predicted_only_labels():
    """Test that labels appearing only as predictions get a row and column."""
    matrix = build_confusion_matrix([outcome("A", "Z")])

    assert matrix.labels == ("A", "Z")
    assert matrix.matrix == ((0, 1), (0, 0))


def test_confusion_matrix_from_result():
    """Test building the matrix from a ClassificationResult."""
    result = ClassificationResult(model="knn", accuracy=1.0, outcomes=[outcome("2", "2"), outcome("10", "10")])

    matrix = build_confusion_matrix(result)

    # string sort order
    assert matrix.labels == ("10", "2")
    assert matrix.matrix == ((1, 0), (0, 1))


def test_confusion_matrix_total_matches_outcomes():
    """Test that every outcome is counted exactly once."""
    outcomes = [outcome(a, p) for a, p in [("A", "B"), ("B", "A"), ("B", "B"), ("C", "C"), ("C", "A")]]

    matrix = build_confusion_matrix(outcomes)

    assert sum(sum(row) for row in matrix.matrix) == len(outcomes)


def test_confusion_matrix_empty():
    """Test that no outcomes gives an empty matrix."""
    matrix = build_confusion_matrix([])

    assert matrix.labels == ()
    assert matrix.matrix == ()


def test_per_class_accuracy():
    """Test accuracy per actual label."""
    result = build_result("knn", [outcome("A", "A"), outcome("A", "B"), outcome("B", "B")])

    assert per_class_accuracy(result) == {"A": 0.5, "B": 1.0}
