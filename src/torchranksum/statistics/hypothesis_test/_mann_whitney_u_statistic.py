"""Mann-Whitney U statistic and its sufficient rank information."""

from typing import Sequence

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchranksum.statistics.descriptive import tied_rank

from ._exceptions import InvalidSampleError


@tensorclass
class MannWhitneyUStatistic:
    """Rank information shared by the exact and approximate tests.

    Attributes
    ----------
    statistic : Tensor
        Mann-Whitney U of the first sample against the second, a ``float64``
        scalar in ``[0, nx * ny]``.
    ranks : Tensor
        Fractional ranks of the concatenated samples, shape ``(nx + ny,)``.
        The smaller sample comes first (the first sample when
        ``nx <= ny``).
    tie_adjustment : Tensor
        Scalar :math:`\\sum_i (t_i^3 - t_i)` over groups of tied values.
    median : Tensor
        Difference of the sample medians, ``median(x) - median(y)``.
    nx : int
        Size of the first sample.
    ny : int
        Size of the second sample.
    """

    statistic: Tensor
    ranks: Tensor
    tie_adjustment: Tensor
    median: Tensor
    nx: int
    ny: int


def _as_sample(sample: Tensor | Sequence[float], name: str) -> Tensor:
    sample = torch.as_tensor(sample)
    if sample.requires_grad:
        raise RuntimeError(
            "mann_whitney_u does not support gradients: ranks are not "
            "differentiable"
        )
    if sample.dim() != 1:
        raise InvalidSampleError(
            f"{name} must be 1-dimensional, got {sample.dim()}D"
        )
    if sample.numel() == 0:
        raise InvalidSampleError(f"{name} must not be empty")
    if sample.is_complex():
        raise InvalidSampleError(f"{name} must be real, got {sample.dtype}")
    sample = sample.to(torch.float64)
    if torch.isnan(sample).any():
        raise InvalidSampleError(f"{name} must not contain NaN")
    return sample


def _median(sample: Tensor) -> Tensor:
    # Mean of the two middle values for even sizes, unlike torch.median.
    return torch.quantile(sample, 0.5)


def mann_whitney_u_statistic(
    x: Tensor | Sequence[float],
    y: Tensor | Sequence[float],
) -> MannWhitneyUStatistic:
    r"""
    Compute the Mann-Whitney U statistic of two samples.

    Mathematical Definition
    -----------------------
    The smaller sample is placed first and the concatenation is ranked with
    :func:`~torchranksum.statistics.descriptive.tied_rank`. With
    :math:`R` the rank sum of the leading group,

    .. math::
        U = \begin{cases}
            R - \frac{n_x(n_x + 1)}{2} & n_x \le n_y \\
            n_x n_y - R + \frac{n_y(n_y + 1)}{2} & n_x > n_y
        \end{cases}

    so :math:`U` is always the statistic of ``x`` against ``y``, whichever
    order is used for ranking. Placing the smaller sample first keeps the
    exact test's enumeration over :math:`\binom{n_x+n_y}{\min(n_x, n_y)}`
    combinations.

    Parameters
    ----------
    x : Tensor or sequence of float
        First sample. Must be 1-dimensional, non-empty, without NaN.
    y : Tensor or sequence of float
        Second sample. Same requirements as ``x``.

    Returns
    -------
    MannWhitneyUStatistic
        Statistic, ranks, tie adjustment, median difference and sample
        sizes.

    Raises
    ------
    InvalidSampleError
        If a sample is empty, not 1-dimensional, complex, or contains NaN.
    RuntimeError
        If a sample requires gradients.

    Examples
    --------
    >>> stats = mann_whitney_u_statistic([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
    >>> stats.statistic
    tensor(0., dtype=torch.float64)
    >>> stats.ranks
    tensor([1., 2., 3., 4., 5., 6.], dtype=torch.float64)
    """
    x = _as_sample(x, "x")
    y = _as_sample(y, "y").to(x.device)

    nx = x.numel()
    ny = y.numel()

    if nx <= ny:
        ranks, tie_adjustment = tied_rank(torch.cat([x, y]))
        statistic = ranks[:nx].sum() - nx * (nx + 1) / 2
    else:
        ranks, tie_adjustment = tied_rank(torch.cat([y, x]))
        statistic = nx * ny - ranks[:ny].sum() + ny * (ny + 1) / 2

    return MannWhitneyUStatistic(
        statistic=statistic,
        ranks=ranks,
        tie_adjustment=tie_adjustment,
        median=_median(x) - _median(y),
        nx=nx,
        ny=ny,
    )
