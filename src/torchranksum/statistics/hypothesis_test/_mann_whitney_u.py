"""Mann-Whitney U test (Wilcoxon rank-sum test)."""

from typing import Sequence

from torch import Tensor

from ._approximate_mann_whitney_u_test import ApproximateMannWhitneyUTest
from ._exact_mann_whitney_u_test import ExactMannWhitneyUTest
from ._exceptions import InvalidMethodError
from ._mann_whitney_u_statistic import mann_whitney_u_statistic
from ._mann_whitney_u_test import _use_exact
from ._tail import Tail

_METHODS = ("auto", "exact", "asymptotic")


def mann_whitney_u(
    x: Tensor | Sequence[float],
    y: Tensor | Sequence[float],
    alternative: str = "two-sided",
    *,
    method: str = "auto",
) -> tuple[Tensor, Tensor]:
    r"""
    Perform the Mann-Whitney U test (Wilcoxon rank-sum test).

    Functional form of :func:`mann_whitney_u_test` returning the statistic
    and a single p-value.

    Mathematical Definition
    -----------------------
    Given two independent samples :math:`X = \{x_1, ..., x_{n_1}\}` and
    :math:`Y = \{y_1, ..., y_{n_2}\}`, the test first computes ranks of
    all observations in the combined sample.

    The U statistic is:

    .. math::
        U_1 = R_1 - \frac{n_1(n_1 + 1)}{2}

    where :math:`R_1` is the sum of ranks for sample :math:`X`.

    Under the null hypothesis, the expected value and variance are:

    .. math::
        \mu_U = \frac{n_1 n_2}{2}, \quad
        \sigma_U^2 = \frac{n_1 n_2 (n + 1)}{12} \cdot T

    where :math:`T` is the tie correction factor:

    .. math::
        T = 1 - \frac{\sum_i (t_i^3 - t_i)}{n^3 - n}

    and :math:`t_i` is the number of ties in group :math:`i`.

    Parameters
    ----------
    x : Tensor or sequence of float
        First sample. Must be 1-dimensional.
    y : Tensor or sequence of float
        Second sample. Must be 1-dimensional.
    alternative : str, optional
        The alternative hypothesis:

        - ``"two-sided"`` (default): The distributions are not equal.
        - ``"less"``: The distribution of x is stochastically less than y.
        - ``"greater"``: The distribution of x is stochastically greater than y.
    method : str, optional
        How the p-value is computed:

        - ``"auto"`` (default): exact for small samples, see
          :func:`mann_whitney_u_test`.
        - ``"exact"``: always exact.
        - ``"asymptotic"``: always the normal approximation.

    Returns
    -------
    statistic : Tensor
        The U statistic for the first sample.
    pvalue : Tensor
        The p-value for the test.

    Raises
    ------
    InvalidTailError
        If ``alternative`` is not recognized.
    InvalidMethodError
        If ``method`` is not recognized.
    RuntimeError
        If the input tensors require gradients. Rank-based tests are not
        differentiable.

    Examples
    --------
    Test if two samples come from the same distribution:

    >>> import torch
    >>> from torchranksum.statistics.hypothesis_test import mann_whitney_u
    >>> x = torch.tensor([1.0, 2.0, 3.0, 4.0, 5.0], dtype=torch.float64)
    >>> y = torch.tensor([6.0, 7.0, 8.0, 9.0, 10.0], dtype=torch.float64)
    >>> stat, pvalue = mann_whitney_u(x, y)
    >>> pvalue < 0.05  # Reject null hypothesis
    tensor(True)

    Using alternative hypotheses:

    >>> stat, pvalue = mann_whitney_u(x, y, alternative="less")
    >>> pvalue < 0.05  # x values tend to be smaller
    tensor(True)

    Notes
    -----
    - **Tie handling**: Ties are handled by assigning average ranks. The
      exact test enumerates the tied ranking; the normal approximation
      applies the tie correction factor to the variance.

    - **Continuity correction**: The normal approximation applies a
      continuity correction of 0.5.

    - **Not differentiable**: This function does not support autograd
      because it relies on ranks, which are not differentiable.

    References
    ----------
    .. [1] Mann, H.B. and Whitney, D.R., "On a test of whether one of two
           random variables is stochastically larger than the other,"
           Annals of Mathematical Statistics, vol. 18, no. 1, pp. 50-60, 1947.

    .. [2] Wilcoxon, F., "Individual comparisons by ranking methods,"
           Biometrics Bulletin, vol. 1, no. 6, pp. 80-83, 1945.

    See Also
    --------
    mann_whitney_u_test : Result object with every tail and descriptive
        accessors.
    scipy.stats.mannwhitneyu : SciPy's Mann-Whitney U test.
    """
    tail = Tail.from_alternative(alternative)
    if method not in _METHODS:
        raise InvalidMethodError(
            f"method={method!r} is invalid, expected one of {list(_METHODS)}"
        )

    stats = mann_whitney_u_statistic(x, y)
    if method == "exact" or (method == "auto" and _use_exact(stats)):
        result = ExactMannWhitneyUTest.from_statistic(stats)
    else:
        result = ApproximateMannWhitneyUTest.from_statistic(stats)

    return result.statistic, result.pvalue(tail)
