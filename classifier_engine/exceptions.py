"""
Exception classes for the classification engine.

All errors also subclass ValueError so callers that validate input with
``except ValueError`` keep working.
"""


class ClassificationError(Exception):
    """Base exception for classification engine errors."""
    pass


class InsufficientDataError(ClassificationError, ValueError):
    """Raised when the training set is empty or smaller than k."""
    pass


class DimensionMismatchError(ClassificationError, ValueError):
    """Raised when feature vectors do not share the same length."""
    pass


class InvalidParameterError(ClassificationError, ValueError):
    """Raised when a classifier parameter or model name is invalid."""
    pass
