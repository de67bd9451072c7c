"""Testing utilities for rank-based hypothesis tests.

Example usage:

    import hypothesis

    from torchranksum.statistics.hypothesis_test import mann_whitney_u_test
    from torchranksum.testing import integers_as_floats, sample_pairs

    @hypothesis.given(sample_pairs(elements=integers_as_floats(0, 5)))
    def test_statistic_is_bounded(pair):
        x, y = pair
        result = mann_whitney_u_test(x, y)
        assert 0 <= result.statistic <= x.numel() * y.numel()
"""

from .strategies import (
    integers_as_floats,
    sample_pairs,
    samples,
)

__all__ = [
    "integers_as_floats",
    "sample_pairs",
    "samples",
]
