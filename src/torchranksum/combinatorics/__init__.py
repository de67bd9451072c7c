from ._combinations import combination_chunks, combination_count
from ._gaussian_binomial_coefficient import gaussian_binomial_coefficients

__all__ = [
    "combination_chunks",
    "combination_count",
    "gaussian_binomial_coefficients",
]
