"""Mann-Whitney U probability mass function."""

import torch
from torch import Tensor

from ._mann_whitney_u_frequencies import mann_whitney_u_frequencies


def mann_whitney_u_probability_mass(
    u: Tensor | float,
    nx: int,
    ny: int,
) -> Tensor:
    r"""Probability mass function of the Mann-Whitney U statistic under H0.

    .. math::
        P(U = u) = \frac{c_u}{\binom{n_x + n_y}{n_x}}

    where :math:`c_u` is the number of ways to choose :math:`n_x` of the
    ranks :math:`1, \ldots, n_x + n_y` with rank sum
    :math:`u + n_x(n_x + 1)/2`. Assumes no ties.

    Parameters
    ----------
    u : Tensor or float
        Values of the statistic. Non-integer values have probability 0.
    nx : int
        Size of the first sample.
    ny : int
        Size of the second sample.

    Returns
    -------
    Tensor
        ``float64`` probabilities with the shape of ``u``.

    Examples
    --------
    >>> mann_whitney_u_probability_mass(torch.tensor([0.0, 2.0]), 2, 2)
    tensor([0.1667, 0.3333], dtype=torch.float64)
    """
    frequencies = mann_whitney_u_frequencies(nx, ny)
    pmf = frequencies / frequencies.sum()

    u = torch.as_tensor(u, dtype=torch.float64)
    pmf = pmf.to(u.device)
    on_support = (u == torch.round(u)) & (u >= 0) & (u <= nx * ny)
    index = torch.round(u).clamp(0, nx * ny).long()
    return torch.where(on_support, pmf[index], torch.zeros_like(u))
