"""
Visualization utilities for classification results
Generates plots for confusion matrices, model comparisons and confidences
"""

import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np
import io
import base64


def plot_to_base64(fig):
    """Convert matplotlib figure to a base64 PNG data URI"""
    buf = io.BytesIO()
    fig.savefig(buf, format='png', bbox_inches='tight', dpi=100)
    buf.seek(0)
    img_base64 = base64.b64encode(buf.read()).decode('utf-8')
    plt.close(fig)
    return f"data:image/png;base64,{img_base64}"


def save_plot(data_uri, path):
    """Write a base64 PNG data URI produced by plot_to_base64 to a file"""
    encoded = data_uri.split(',', 1)[1]
    with open(path, 'wb') as f:
        f.write(base64.b64decode(encoded))


def create_confusion_matrix_plot(confusion_matrix, title='Confusion Matrix'):
    """
    Generate confusion matrix heatmap

    Args:
        confusion_matrix: ConfusionMatrix with labels and counts
        title: Plot title

    Returns:
        Base64 encoded image string
    """
    labels = list(confusion_matrix.labels)
    counts = np.array(confusion_matrix.matrix, dtype=int).reshape(len(labels), len(labels))

    fig, ax = plt.subplots(figsize=(max(6, len(labels)), max(5, len(labels) * 0.8)))
    sns.heatmap(counts, annot=True, fmt='d', cmap='Blues',
                xticklabels=labels, yticklabels=labels,
                ax=ax, cbar_kws={'label': 'Count'})
    ax.set_title(title, fontsize=14, fontweight='bold')
    ax.set_ylabel('Actual Label', fontsize=12)
    ax.set_xlabel('Predicted Label', fontsize=12)

    return plot_to_base64(fig)


def create_model_comparison_plot(results):
    """
    Bar chart of accuracy and mean confidence per model

    Args:
        results: Dict with model names as keys and ClassificationResult as values

    Returns:
        Base64 encoded image string
    """
    names = list(results.keys())
    accuracies = [results[name].accuracy * 100 for name in names]
    confidences = [results[name].mean_confidence * 100 for name in names]

    x = np.arange(len(names))
    width = 0.35

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.bar(x - width / 2, accuracies, width, label='Accuracy', color='steelblue')
    ax.bar(x + width / 2, confidences, width, label='Mean Confidence', color='darkorange')

    ax.set_title('Model Comparison', fontsize=14, fontweight='bold')
    ax.set_xticks(x)
    ax.set_xticklabels(names)
    ax.set_ylabel('Percent (%)', fontsize=12)
    ax.set_ylim(0, 105)
    ax.legend(fontsize=10)
    ax.grid(True, alpha=0.3, axis='y')

    plt.tight_layout()
    return plot_to_base64(fig)


def create_confidence_histogram(result):
    """
    Histogram of prediction confidences, split by correct and incorrect

    Args:
        result: ClassificationResult

    Returns:
        Base64 encoded image string
    """
    correct = [o.confidence for o in result.outcomes if o.correct]
    incorrect = [o.confidence for o in result.outcomes if not o.correct]
    bins = np.linspace(0, 1, 21)

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.hist(correct, bins=bins, alpha=0.6, label='Correct', color='seagreen')
    ax.hist(incorrect, bins=bins, alpha=0.6, label='Incorrect', color='firebrick')

    ax.set_title(f'Prediction Confidence ({result.model})', fontsize=14, fontweight='bold')
    ax.set_xlabel('Confidence', fontsize=12)
    ax.set_ylabel('Predictions', fontsize=12)
    ax.legend(fontsize=10)
    ax.grid(True, alpha=0.3, axis='y')

    plt.tight_layout()
    return plot_to_base64(fig)
