"""Fractional ranks with tie adjustment."""

import torch
from torch import Tensor


def tied_rank(input: Tensor) -> tuple[Tensor, Tensor]:
    r"""
    Rank a 1-D tensor, giving tied values the mean of their ranks.

    Mathematical Definition
    -----------------------
    Sort the :math:`n` observations and split them into groups of equal
    values. A group occupying 1-based sorted positions :math:`s+1, \ldots,
    s+t` receives the mid-rank

    .. math::
        r = s + \frac{t + 1}{2}

    for every member. The tie adjustment is

    .. math::
        T = \sum_i (t_i^3 - t_i)

    over all groups, where :math:`t_i` is the size of group :math:`i`.

    Parameters
    ----------
    input : Tensor
        1-dimensional tensor of real observations. Must not contain NaN.

    Returns
    -------
    ranks : Tensor
        ``float64`` tensor with the shape of ``input``. Ranks sum to
        :math:`n(n+1)/2`.
    tie_adjustment : Tensor
        ``float64`` scalar :math:`T`. Zero iff all values are distinct,
        :math:`n^3 - n` when all values are equal.

    Examples
    --------
    >>> ranks, tie_adjustment = tied_rank(torch.tensor([10.0, 20.0, 10.0, 30.0]))
    >>> ranks
    tensor([1.5000, 3.0000, 1.5000, 4.0000], dtype=torch.float64)
    >>> tie_adjustment
    tensor(6., dtype=torch.float64)

    Notes
    -----
    Equal elements always receive identical ranks, so the result does not
    depend on how the sort orders ties.
    """
    if input.dim() != 1:
        raise ValueError(f"input must be 1-dimensional, got {input.dim()}D")

    n = input.numel()
    if n == 0:
        return (
            torch.empty(0, dtype=torch.float64, device=input.device),
            torch.zeros((), dtype=torch.float64, device=input.device),
        )

    sorted_values, order = torch.sort(input, stable=True)
    _, counts = torch.unique_consecutive(sorted_values, return_counts=True)

    counts = counts.to(torch.float64)
    starts = torch.cumsum(counts, dim=0) - counts
    group_ranks = starts + (counts + 1.0) / 2.0

    ranks = torch.empty(n, dtype=torch.float64, device=input.device)
    ranks[order] = torch.repeat_interleave(group_ranks, counts.long())

    tie_adjustment = (counts**3 - counts).sum()

    return ranks, tie_adjustment
