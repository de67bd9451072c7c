"""Probability module exceptions."""

__all__ = ["ProbabilityError", "DomainError"]


class ProbabilityError(ValueError):
    """Base exception for probability module errors."""

    pass


class DomainError(ProbabilityError):
    """Raised when a distribution parameter is outside its valid domain."""

    pass
