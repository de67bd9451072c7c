"""Hypothesis test exceptions and warnings."""

__all__ = [
    "EnumerationCostWarning",
    "HypothesisTestError",
    "InvalidMethodError",
    "InvalidSampleError",
    "InvalidTailError",
]


class HypothesisTestError(ValueError):
    """Base exception for hypothesis test errors."""

    pass


class InvalidTailError(HypothesisTestError):
    """Raised when a tail or alternative is not recognized."""

    pass


class InvalidSampleError(HypothesisTestError):
    """Raised when a sample is empty, not 1-dimensional, or contains NaN."""

    pass


class InvalidMethodError(HypothesisTestError):
    """Raised when a p-value method is not recognized."""

    pass


class EnumerationCostWarning(RuntimeWarning):
    """Warning for exact p-values that enumerate many rank combinations."""

    pass
