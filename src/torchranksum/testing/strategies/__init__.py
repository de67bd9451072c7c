"""Hypothesis strategies for rank-test testing."""

from ._integers_as_floats import integers_as_floats
from ._samples import sample_pairs, samples

__all__ = [
    "integers_as_floats",
    "sample_pairs",
    "samples",
]
