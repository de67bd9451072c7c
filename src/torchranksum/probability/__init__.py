"""Probability distributions used by the rank-sum tests.

This module provides functional operators for:
- the standard (or shifted and scaled) normal distribution, used by the
  normal approximation of the Mann-Whitney U test
- the exact null distribution of the Mann-Whitney U statistic for untied
  samples, used by the exact test

Example
-------
>>> import torch
>>> from torchranksum.probability import (
...     mann_whitney_u_cumulative_distribution,
...     normal_survival,
... )
>>>
>>> # P(U <= 0) for nx = ny = 3
>>> mann_whitney_u_cumulative_distribution(0.0, 3, 3)  # tensor(0.0500)
>>>
>>> # Upper tail of the standard normal
>>> normal_survival(torch.tensor([1.96]))  # tensor([0.0250])
"""

from ._exceptions import DomainError, ProbabilityError
from ._mann_whitney_u import (
    mann_whitney_u_cumulative_distribution,
    mann_whitney_u_frequencies,
    mann_whitney_u_probability_mass,
    mann_whitney_u_survival,
)
from ._normal import (
    normal_cumulative_distribution,
    normal_survival,
)

__all__ = [
    "DomainError",
    "ProbabilityError",
    # Mann-Whitney U distribution
    "mann_whitney_u_cumulative_distribution",
    "mann_whitney_u_frequencies",
    "mann_whitney_u_probability_mass",
    "mann_whitney_u_survival",
    # Normal distribution
    "normal_cumulative_distribution",
    "normal_survival",
]
