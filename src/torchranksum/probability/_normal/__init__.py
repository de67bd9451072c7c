from ._normal_cumulative_distribution import normal_cumulative_distribution
from ._normal_survival import normal_survival

__all__ = [
    "normal_cumulative_distribution",
    "normal_survival",
]
