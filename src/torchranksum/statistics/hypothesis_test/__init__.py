from ._approximate_mann_whitney_u_test import (
    ApproximateMannWhitneyUTest,
    approximate_mann_whitney_u_test,
)
from ._exact_mann_whitney_u_test import (
    ExactMannWhitneyUTest,
    exact_mann_whitney_u_test,
)
from ._exceptions import (
    EnumerationCostWarning,
    HypothesisTestError,
    InvalidMethodError,
    InvalidSampleError,
    InvalidTailError,
)
from ._hypothesis_test import HypothesisTest
from ._mann_whitney_u import mann_whitney_u
from ._mann_whitney_u_statistic import (
    MannWhitneyUStatistic,
    mann_whitney_u_statistic,
)
from ._mann_whitney_u_test import (
    EXACT_SAMPLE_SIZE_LIMIT,
    EXACT_UNTIED_SAMPLE_SIZE_LIMIT,
    mann_whitney_u_test,
)
from ._tail import Tail

__all__ = [
    "ApproximateMannWhitneyUTest",
    "EXACT_SAMPLE_SIZE_LIMIT",
    "EXACT_UNTIED_SAMPLE_SIZE_LIMIT",
    "EnumerationCostWarning",
    "ExactMannWhitneyUTest",
    "HypothesisTest",
    "HypothesisTestError",
    "InvalidMethodError",
    "InvalidSampleError",
    "InvalidTailError",
    "MannWhitneyUStatistic",
    "Tail",
    "approximate_mann_whitney_u_test",
    "exact_mann_whitney_u_test",
    "mann_whitney_u",
    "mann_whitney_u_statistic",
    "mann_whitney_u_test",
]
