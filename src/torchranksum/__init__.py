"""torchranksum: PyTorch rank-sum tests for comparing two independent samples."""

from . import (
    combinatorics,
    probability,
    statistics,
)

__all__ = [
    "combinatorics",
    "probability",
    "statistics",
]

__version__ = "0.1.0"
