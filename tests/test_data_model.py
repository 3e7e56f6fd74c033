"""
Unit tests for the shared data model.
"""

import pytest
import numpy as np
from dataclasses import FrozenInstanceError
from classifier_engine.data_model import (
    LabeledPoint,
    ClassificationOutcome,
    ClassificationResult,
    ConfusionMatrix,
    normalize_label,
    to_points,
    validate_dimensions
)
from classifier_engine.exceptions import DimensionMismatchError


@pytest.mark.parametrize("label, expected", [
    ("A", "A"),
    (1, "1"),
    (1.0, "1"),
    (-3, "-3"),
    (2.5, "2.5"),
    (np.int64(7), "7"),
    (np.float32(4.0), "4"),
])
def test_normalize_label(label, expected):
    """Test canonical string forms of string and numeric labels."""
    assert normalize_label(label) == expected


@pytest.mark.parametrize("label", [True, None, [1], {"a": 1}])
def test_normalize_label_rejects_other_types(label):
    """Test that non-numeric, non-string labels are rejected."""
    with pytest.raises(TypeError):
        normalize_label(label)


def test_labeled_point_coerces_features():
    """Test that features become an immutable tuple of floats."""
    point = LabeledPoint(features=[1, 2, 3], label=1)

    assert point.features == (1.0, 2.0, 3.0)
    assert point.dimension == 3
    assert point.label_key == "1"


@pytest.mark.parametrize("features, label", [
    ([1], True),
    ([1], None),
    ([1], ["A"]),
    ([None], "A"),
    ([[1, 2]], "A"),
    (None, "A"),
])
def test_labeled_point_rejects_invalid_values(features, label):
    """Test that unusable labels and features raise ValueError."""
    with pytest.raises(ValueError):
        LabeledPoint(features=features, label=label)


def test_labeled_point_is_immutable():
    """Test that points cannot be modified after construction."""
    point = LabeledPoint(features=[1], label="A")

    with pytest.raises(FrozenInstanceError):
        point.label = "B"


def test_labeled_point_value_equality():
    """Test that points with equal values compare equal."""
    assert LabeledPoint(features=[1, 2], label="A") == LabeledPoint(features=(1.0, 2.0), label="A")


def test_to_points_from_numpy():
    """Test building points from numpy arrays."""
    features = np.array([[0.0, 1.0], [2.0, 3.0]])
    labels = np.array([0, 1])

    points = to_points(features, labels)

    assert points == (
        LabeledPoint(features=(0.0, 1.0), label=0),
        LabeledPoint(features=(2.0, 3.0), label=1),
    )
    assert isinstance(points[0].label, int)


def test_to_points_length_mismatch():
    """Test that features and labels must pair up."""
    with pytest.raises(ValueError):
        to_points([[0.0], [1.0]], ["A"])


def test_validate_dimensions_returns_length():
    """Test the shared dimension of consistent datasets."""
    training = [LabeledPoint([1, 2], "A"), LabeledPoint([3, 4], "B")]
    test = [LabeledPoint([5, 6], "A")]

    assert validate_dimensions(training, test) == 2
    assert validate_dimensions([], []) == 0


def test_validate_dimensions_reports_first_offender():
    """Test that the first mismatching point is named in the error."""
    training = [LabeledPoint([1, 2], "A"), LabeledPoint([3], "B"), LabeledPoint([4], "C")]

    with pytest.raises(DimensionMismatchError, match="training point 1"):
        validate_dimensions(training)


def test_validate_dimensions_checks_test_set():
    """Test that test points are checked against the training length."""
    training = [LabeledPoint([1, 2], "A")]
    test = [LabeledPoint([1, 2], "A"), LabeledPoint([1, 2, 3], "A")]

    with pytest.raises(DimensionMismatchError, match="test point 1"):
        validate_dimensions(training, test)


def test_result_to_dict():
    """Test the serialized field names of a result."""
    outcome = ClassificationOutcome(features=(1.0,), actual_label="X", predicted_label="X", confidence=0.7)
    result = ClassificationResult(
        model="decision_tree",
        accuracy=1.0,
        outcomes=[outcome],
        feature_importance={0: 1.0},
        confusion_matrix=ConfusionMatrix(labels=("X",), matrix=((1,),))
    )

    assert result.to_dict() == {
        "model": "decision_tree",
        "accuracy": 1.0,
        "predictions": [
            {"features": [1.0], "actualLabel": "X", "predictedLabel": "X", "confidence": 0.7}
        ],
        "featureImportance": {"0": 1.0},
        "confusionMatrix": {"labels": ["X"], "matrix": [[1]]},
    }


def test_result_to_dict_omits_optional_fields():
    """Test that absent optional fields are left out."""
    result = ClassificationResult(model="knn", accuracy=0.0, outcomes=[])

    assert set(result.to_dict()) == {"model", "accuracy", "predictions"}


def test_result_summary_properties():
    """Test correct count and mean confidence."""
    outcomes = [
        ClassificationOutcome((0.0,), "A", "A", 1.0),
        ClassificationOutcome((1.0,), "A", "B", 0.5),
    ]
    result = ClassificationResult(model="knn", accuracy=0.5, outcomes=outcomes)

    assert result.outcomes == tuple(outcomes)
    assert result.correct_count == 1
    assert result.mean_confidence == pytest.approx(0.75)


def test_with_confusion_matrix_returns_copy():
    """Test that attaching a matrix leaves the original untouched."""
    result = ClassificationResult(model="knn", accuracy=0.0, outcomes=[])
    matrix = ConfusionMatrix(labels=(), matrix=())

    updated = result.with_confusion_matrix(matrix)

    assert result.confusion_matrix is None
    assert updated.confusion_matrix == matrix
    assert updated.model == "knn"


def test_confusion_matrix_count():
    """Test count lookup by label, including unknown labels."""
    matrix = ConfusionMatrix(labels=("1", "2"), matrix=((3, 1), (0, 2)))

    assert matrix.count(1, 2) == 1
    assert matrix.count("2", "2") == 2
    assert matrix.count("9", "1") == 0
