"""
Unit tests for model selection and side-by-side comparison.
"""

import pytest
import numpy as np
from classifier_engine.data_model import LabeledPoint, to_points
from classifier_engine.exceptions import InsufficientDataError, InvalidParameterError
from classifier_engine.models import knn_classify, decision_tree_classify, naive_bayes_classify
from classifier_engine.runner import (
    AVAILABLE_MODELS,
    classify,
    compare_models,
    summarize_results
)


@pytest.fixture
def clustered_data():
    """Two well separated clusters split into training and test points."""
    np.random.seed(7)
    features = np.vstack([np.random.randn(30, 2), np.random.randn(30, 2) + 6.0])
    labels = ['near'] * 30 + ['far'] * 30
    points = to_points(features, labels)
    training = points[:20] + points[30:50]
    test = points[20:30] + points[50:]
    return training, test


def test_available_models():
    """Test the model names offered to callers."""
    assert AVAILABLE_MODELS == ('knn', 'decision_tree', 'naive_bayes')


def test_classify_dispatches_by_name(clustered_data):
    """Test that each name runs the matching classifier."""
    training, test = clustered_data

    assert classify('knn', training, test, k=5) == knn_classify(training, test, k=5)
    assert classify('decision_tree', training, test) == decision_tree_classify(training, test)
    assert classify('naive_bayes', training, test) == naive_bayes_classify(training, test)


def test_classify_unknown_model(clustered_data):
    """Test that unknown model names are rejected."""
    training, test = clustered_data

    with pytest.raises(InvalidParameterError):
        classify('random_forest', training, test)


def test_classify_with_confusion_matrix(clustered_data):
    """Test that the confusion matrix is attached on request."""
    training, test = clustered_data

    result = classify('knn', training, test, include_confusion_matrix=True)

    assert result.confusion_matrix is not None
    assert result.confusion_matrix.labels == ('far', 'near')
    assert sum(sum(row) for row in result.confusion_matrix.matrix) == len(test)


def test_compare_models_returns_all_in_order(clustered_data):
    """Test that every model runs and results keep the requested order."""
    training, test = clustered_data

    results = compare_models(training, test, models=['naive_bayes', 'knn'], k=3)

    assert list(results) == ['naive_bayes', 'knn']
    assert results['knn'].model == 'knn'
    assert results['naive_bayes'].accuracy == 1.0
    assert all(r.confusion_matrix is not None for r in results.values())


def test_compare_models_default_models(clustered_data):
    """Test that all models run when none are named."""
    training, test = clustered_data

    results = compare_models(training, test, max_workers=1, include_confusion_matrix=False)

    assert list(results) == list(AVAILABLE_MODELS)
    assert all(r.confusion_matrix is None for r in results.values())


def test_compare_models_matches_individual_runs(clustered_data):
    """Test that concurrent runs match sequential runs."""
    training, test = clustered_data

    results = compare_models(training, test, k=5, include_confusion_matrix=False)

    assert results['knn'] == knn_classify(training, test, k=5)
    assert results['decision_tree'] == decision_tree_classify(training, test)


def test_compare_models_unknown_name(clustered_data):
    """Test that unknown names are rejected before running anything."""
    training, test = clustered_data

    with pytest.raises(InvalidParameterError, match='svm'):
        compare_models(training, test, models=['knn', 'svm'])


def test_compare_models_propagates_errors():
    """Test that classifier errors reach the caller."""
    training = [LabeledPoint([0], 'A'), LabeledPoint([1], 'B')]

    with pytest.raises(InsufficientDataError):
        compare_models(training, training, models=['decision_tree', 'knn'], k=5)


def test_compare_models_empty_selection(clustered_data):
    """Test that an empty model list gives no results."""
    training, test = clustered_data

    assert compare_models(training, test, models=[]) == {}


def test_summarize_results_orders_by_accuracy():
    """Test summary rows, best model first."""
    training = [LabeledPoint([0], 'A'), LabeledPoint([1], 'A'), LabeledPoint([10], 'B')]
    test = [LabeledPoint([0.5], 'A'), LabeledPoint([9], 'B')]
    results = {
        'knn': knn_classify(training, test, k=3),
        'decision_tree': decision_tree_classify(training, test),
    }

    rows = summarize_results(results)

    assert [row['model'] for row in rows] == ['decision_tree', 'knn']
    assert rows[0] == {
        'model': 'decision_tree',
        'accuracy': 1.0,
        'correct': 2,
        'total': 2,
        'mean_confidence': pytest.approx(0.7),
    }
    assert rows[1]['accuracy'] == 0.5
