"""Mann-Whitney U cumulative distribution function."""

import torch
from torch import Tensor

from ._mann_whitney_u_frequencies import (
    _FLOOR_EPSILON,
    mann_whitney_u_frequencies,
)


def mann_whitney_u_cumulative_distribution(
    u: Tensor | float,
    nx: int,
    ny: int,
) -> Tensor:
    r"""Cumulative distribution function of the Mann-Whitney U statistic.

    .. math::
        F(u; n_x, n_y) = P(U \le \lfloor u \rfloor)

    under the null hypothesis of exchangeable, untied observations.

    Parameters
    ----------
    u : Tensor or float
        Points at which to evaluate the CDF.
    nx : int
        Size of the first sample.
    ny : int
        Size of the second sample.

    Returns
    -------
    Tensor
        ``float64`` tensor with the shape of ``u``. 0 below the support,
        1 at and above ``nx * ny``.

    Raises
    ------
    DomainError
        If ``nx`` or ``ny`` is negative.

    Examples
    --------
    >>> mann_whitney_u_cumulative_distribution(0.0, 3, 3)
    tensor(0.0500, dtype=torch.float64)

    See Also
    --------
    mann_whitney_u_survival : Upper tail :math:`P(U > u)`.
    """
    frequencies = mann_whitney_u_frequencies(nx, ny)
    cdf = frequencies.cumsum(dim=0) / frequencies.sum()

    u = torch.as_tensor(u, dtype=torch.float64)
    cdf = cdf.to(u.device)
    q = torch.floor(u + _FLOOR_EPSILON)
    index = q.clamp(0, nx * ny).long()
    return torch.where(q < 0, torch.zeros_like(q), cdf[index])
