"""
Command Line Runner

Loads training and test data from CSV or JSON files, runs one or all
classifiers and prints an accuracy summary. Results can be written as JSON
and charts as PNG files.

Examples:
  python -m classifier_engine --train data/train.csv --test data/test.csv --model knn --k 5
  python -m classifier_engine --train data/points.json --test-split 0.3 --model all --output results.json
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from .config import get_config
from .dataset_loader import get_dataset_info, load_points, split_points
from .exceptions import ClassificationError
from .runner import AVAILABLE_MODELS, compare_models, summarize_results
from .utils import setup_logging
from .visualization import (
    create_confidence_histogram,
    create_confusion_matrix_plot,
    create_model_comparison_plot,
    save_plot,
)


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classifier_engine",
        description="Run KNN, decision stump and Gaussian Naive Bayes classifiers on labeled feature vectors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Classify a held-out test file with KNN (k=5)
  python -m classifier_engine --train train.csv --test test.csv --model knn --k 5

  # Compare every model on a 70/30 split and save results
  python -m classifier_engine --train points.json --test-split 0.3 --model all --output results.json
        """
    )

    parser.add_argument(
        '--train',
        type=str,
        required=True,
        help='Path to the training data (.csv or .json)'
    )

    parser.add_argument(
        '--test',
        type=str,
        default=None,
        help='Path to the test data (.csv or .json); split from --train if omitted'
    )

    parser.add_argument(
        '--test-split',
        type=float,
        default=0.3,
        help='Test proportion when --test is omitted (default: 0.3)'
    )

    parser.add_argument(
        '--model',
        type=str,
        choices=list(AVAILABLE_MODELS) + ['all'],
        default=None,
        help='Model to run, or "all" (default: from config, "knn")'
    )

    parser.add_argument(
        '--k',
        type=int,
        default=None,
        help='Number of neighbors for KNN (default: from config, 3)'
    )

    parser.add_argument(
        '--label-column',
        type=str,
        default='label',
        help='Label column name for CSV input (default: label)'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to a JSON configuration file'
    )

    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Write results as JSON to this path'
    )

    parser.add_argument(
        '--plot',
        type=str,
        default=None,
        help='Directory to write PNG charts to'
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=42,
        help='Random seed for the train/test split (default: 42)'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        help='Logging level (default: from config, INFO)'
    )

    return parser


def write_plots(results, plot_dir: str) -> List[str]:
    """Write comparison, confusion matrix and confidence charts; return their paths."""
    os.makedirs(plot_dir, exist_ok=True)
    written = []

    if len(results) > 1:
        path = os.path.join(plot_dir, 'model_comparison.png')
        save_plot(create_model_comparison_plot(results), path)
        written.append(path)

    for name, result in results.items():
        if result.confusion_matrix is not None and result.confusion_matrix.labels:
            path = os.path.join(plot_dir, f'{name}_confusion_matrix.png')
            save_plot(create_confusion_matrix_plot(result.confusion_matrix, title=f'Confusion Matrix ({name})'), path)
            written.append(path)

        path = os.path.join(plot_dir, f'{name}_confidence.png')
        save_plot(create_confidence_histogram(result), path)
        written.append(path)

    return written


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = get_config(args.config)
        setup_logging(args.log_level or config['log_level'])

        model = args.model or config['default_model']
        k = args.k if args.k is not None else config['k']
        models = list(AVAILABLE_MODELS) if model == 'all' else [model]

        training = load_points(args.train, label_column=args.label_column)
        if args.test:
            test = load_points(args.test, label_column=args.label_column)
        else:
            training, test = split_points(training, test_split=args.test_split, random_state=args.seed)

        info = get_dataset_info(training)
        logger.info(
            f"Training set: {info['sample_count']} points, {len(info['labels'])} labels, "
            f"{info['dimension']} features"
        )
        logger.info(f"Test set: {len(test)} points")

        results = compare_models(
            training,
            test,
            models=models,
            k=k,
            max_workers=config['max_workers'],
            include_confusion_matrix=config['include_confusion_matrix']
        )

        print("\n" + "=" * 60)
        print("CLASSIFICATION SUMMARY")
        print("=" * 60)
        print(f"{'Model':<16}{'Accuracy':>12}{'Correct':>12}{'Confidence':>14}")
        for row in summarize_results(results):
            print(
                f"{row['model']:<16}{row['accuracy'] * 100:>11.2f}%"
                f"{row['correct']:>7}/{row['total']:<4}{row['mean_confidence']:>14.3f}"
            )
        print()

        if args.output:
            output_dir = os.path.dirname(args.output)
            if output_dir:
                os.makedirs(output_dir, exist_ok=True)
            with open(args.output, 'w') as f:
                json.dump({name: result.to_dict() for name, result in results.items()}, f, indent=2)
            logger.info(f"Results saved to {args.output}")

        if args.plot:
            for path in write_plots(results, args.plot):
                logger.info(f"Chart saved to {path}")

    except (ClassificationError, ValueError, TypeError, FileNotFoundError) as e:
        print(f"\n✗ ERROR: {str(e)}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
