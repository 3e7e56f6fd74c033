"""
Model Runner

Selects classifiers by name and runs several of them side by side on the
same training and test sets. Classifiers are pure functions, so concurrent
runs share nothing and need no locking.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Sequence

from .data_model import ClassificationResult, LabeledPoint
from .evaluation import build_confusion_matrix
from .exceptions import InvalidParameterError
from .models import decision_tree_classify, knn_classify, naive_bayes_classify, DEFAULT_K


logger = logging.getLogger(__name__)

AVAILABLE_MODELS = ('knn', 'decision_tree', 'naive_bayes')


def classify(
    model: str,
    training: Sequence[LabeledPoint],
    test: Sequence[LabeledPoint],
    k: int = DEFAULT_K,
    include_confusion_matrix: bool = False
) -> ClassificationResult:
    """
    Run a single classifier selected by name.

    Args:
        model: One of 'knn', 'decision_tree', 'naive_bayes'
        training: Labeled training points
        test: Labeled test points
        k: Neighbor count, used by KNN only
        include_confusion_matrix: Attach a confusion matrix to the result

    Returns:
        ClassificationResult from the selected classifier

    Raises:
        InvalidParameterError: If the model name is unknown
    """
    if model == 'knn':
        result = knn_classify(training, test, k=k)
    elif model == 'decision_tree':
        result = decision_tree_classify(training, test)
    elif model == 'naive_bayes':
        result = naive_bayes_classify(training, test)
    else:
        raise InvalidParameterError(
            f"Unknown model '{model}', expected one of {', '.join(AVAILABLE_MODELS)}"
        )

    if include_confusion_matrix:
        result = result.with_confusion_matrix(build_confusion_matrix(result))
    return result


def compare_models(
    training: Sequence[LabeledPoint],
    test: Sequence[LabeledPoint],
    models: Optional[Sequence[str]] = None,
    k: int = DEFAULT_K,
    max_workers: Optional[int] = None,
    include_confusion_matrix: bool = True
) -> Dict[str, ClassificationResult]:
    """
    Run several classifiers concurrently on the same data.

    Args:
        training: Labeled training points
        test: Labeled test points
        models: Model names to run (default: all available models)
        k: Neighbor count for KNN
        max_workers: Thread pool size (default: one worker per model)
        include_confusion_matrix: Attach confusion matrices to the results

    Returns:
        Mapping of model name to result, in the requested model order

    Raises:
        InvalidParameterError: If a model name is unknown
        InsufficientDataError, DimensionMismatchError: From the first failing model
    """
    models = list(models) if models is not None else list(AVAILABLE_MODELS)
    unknown = [name for name in models if name not in AVAILABLE_MODELS]
    if unknown:
        raise InvalidParameterError(
            f"Unknown model(s) {', '.join(unknown)}, expected one of {', '.join(AVAILABLE_MODELS)}"
        )
    if not models:
        return {}

    logger.info(f"Running {len(models)} model(s) on {len(training)} training / {len(test)} test points")

    with ThreadPoolExecutor(max_workers=max_workers or len(models)) as executor:
        futures = {
            name: executor.submit(classify, name, training, test, k, include_confusion_matrix)
            for name in models
        }
        results = {name: futures[name].result() for name in models}

    for name, result in results.items():
        logger.info(f"{name}: accuracy {result.accuracy * 100:.2f}%")
    return results


def summarize_results(results: Dict[str, ClassificationResult]) -> List[Dict]:
    """
    Summary rows for a set of results, best accuracy first.

    Returns:
        List of dicts with model, accuracy, correct, total and mean_confidence;
        models with equal accuracy keep their input order
    """
    rows = [
        {
            'model': name,
            'accuracy': result.accuracy,
            'correct': result.correct_count,
            'total': len(result.outcomes),
            'mean_confidence': result.mean_confidence,
        }
        for name, result in results.items()
    ]
    return sorted(rows, key=lambda row: row['accuracy'], reverse=True)
