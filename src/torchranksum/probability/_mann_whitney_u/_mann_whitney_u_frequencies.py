"""Null distribution frequency table of the Mann-Whitney U statistic."""

from torch import Tensor

from torchranksum.combinatorics import gaussian_binomial_coefficients
from torchranksum.probability._exceptions import DomainError

# Offset applied before flooring so that statistics computed in floating
# point land on the intended integer support point.
_FLOOR_EPSILON = 1e-7


def _check_sample_sizes(nx: int, ny: int) -> None:
    if nx < 0 or ny < 0:
        raise DomainError(
            f"sample sizes must be non-negative, got nx={nx} and ny={ny}"
        )


def mann_whitney_u_frequencies(nx: int, ny: int) -> Tensor:
    """Number of rank assignments yielding each U in ``0, ..., nx * ny``.

    Returns a ``float64`` tensor of shape ``(nx * ny + 1,)`` summing to
    ``comb(nx + ny, nx)``.
    """
    _check_sample_sizes(nx, ny)
    return gaussian_binomial_coefficients(nx, ny)
