"""Mann-Whitney U survival function."""

import torch
from torch import Tensor

from ._mann_whitney_u_frequencies import (
    _FLOOR_EPSILON,
    mann_whitney_u_frequencies,
)


def mann_whitney_u_survival(
    u: Tensor | float,
    nx: int,
    ny: int,
) -> Tensor:
    r"""Survival function of the Mann-Whitney U statistic.

    .. math::
        S(u; n_x, n_y) = P(U > \lfloor u \rfloor)

    Summed directly from the upper tail of the frequency table, so small
    upper-tail probabilities do not suffer from cancellation. The
    right-tailed p-value of an observed integer statistic :math:`U_0` is
    ``mann_whitney_u_survival(U_0 - 1, nx, ny)``.

    Parameters
    ----------
    u : Tensor or float
        Points at which to evaluate the survival function.
    nx : int
        Size of the first sample.
    ny : int
        Size of the second sample.

    Returns
    -------
    Tensor
        ``float64`` tensor with the shape of ``u``. 1 below the support,
        0 at and above ``nx * ny``.

    Examples
    --------
    >>> mann_whitney_u_survival(8.0, 3, 3)
    tensor(0.0500, dtype=torch.float64)

    See Also
    --------
    mann_whitney_u_cumulative_distribution : Lower tail :math:`P(U \le u)`.
    """
    frequencies = mann_whitney_u_frequencies(nx, ny)
    # upper[k] = P(U > k); the trailing zero covers k = nx * ny.
    upper = frequencies.flip(0).cumsum(dim=0).flip(0) / frequencies.sum()
    upper = torch.cat([upper[1:], upper.new_zeros(1)])

    u = torch.as_tensor(u, dtype=torch.float64)
    upper = upper.to(u.device)
    q = torch.floor(u + _FLOOR_EPSILON)
    index = q.clamp(0, nx * ny).long()
    return torch.where(q < 0, torch.ones_like(q), upper[index])
