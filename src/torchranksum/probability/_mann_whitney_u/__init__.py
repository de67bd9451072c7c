from ._mann_whitney_u_cumulative_distribution import (
    mann_whitney_u_cumulative_distribution,
)
from ._mann_whitney_u_frequencies import mann_whitney_u_frequencies
from ._mann_whitney_u_probability_mass import mann_whitney_u_probability_mass
from ._mann_whitney_u_survival import mann_whitney_u_survival

__all__ = [
    "mann_whitney_u_cumulative_distribution",
    "mann_whitney_u_frequencies",
    "mann_whitney_u_probability_mass",
    "mann_whitney_u_survival",
]
