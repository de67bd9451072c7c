"""Coefficients of Gaussian (q-) binomial coefficients."""

from functools import lru_cache
from typing import Optional

import torch
from torch import Tensor


def _shift(coefficients: Tensor, offset: int) -> Tensor:
    """Multiply a truncated power series by ``q**offset``."""
    size = coefficients.numel()
    if offset >= size:
        return torch.zeros_like(coefficients)
    return torch.cat(
        [coefficients.new_zeros(offset), coefficients[: size - offset]]
    )


def _divide_by_one_minus_q_power(coefficients: Tensor, power: int) -> Tensor:
    """Divide a truncated power series by ``1 - q**power``.

    Equivalent to ``c[j] += c[j - power]`` for increasing ``j``, which is a
    cumulative sum over each residue class modulo ``power``.
    """
    size = coefficients.numel()
    rows = -(-size // power)
    padded = torch.cat(
        [coefficients, coefficients.new_zeros(rows * power - size)]
    )
    return padded.reshape(rows, power).cumsum(dim=0).reshape(-1)[:size]


@lru_cache(maxsize=128)
def _gaussian_binomial_coefficients(m: int, n: int) -> Tensor:
    # Product of (1 - q^(n+i)) / (1 - q^i) for i = 1..m, truncated to degree
    # m * n; the division is exact so truncation does not lose terms.
    coefficients = torch.zeros(m * n + 1, dtype=torch.float64)
    coefficients[0] = 1.0
    for i in range(1, m + 1):
        coefficients = coefficients - _shift(coefficients, n + i)
        coefficients = _divide_by_one_minus_q_power(coefficients, i)
    return coefficients


def gaussian_binomial_coefficients(
    m: int,
    n: int,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    r"""Coefficients of the Gaussian binomial coefficient :math:`\binom{m+n}{m}_q`.

    Mathematical Definition
    -----------------------
    .. math::

       \binom{m+n}{m}_q = \prod_{i=1}^{m} \frac{1 - q^{n+i}}{1 - q^{i}}
                        = \sum_{u=0}^{mn} c_u q^u

    The coefficient :math:`c_u` counts the subsets of size :math:`m` of
    :math:`\{1, \ldots, m+n\}` whose element sum exceeds its minimum
    :math:`m(m+1)/2` by exactly :math:`u`. This is the frequency of the
    value :math:`u` of the Mann-Whitney U statistic over all
    :math:`\binom{m+n}{m}` equally likely rank assignments without ties.

    Parameters
    ----------
    m : int
        First size parameter. Must be non-negative.
    n : int
        Second size parameter. Must be non-negative.
    dtype : torch.dtype, optional
        Output dtype. Default: ``torch.float64``.
    device : torch.device, optional
        Output device.

    Returns
    -------
    Tensor
        Tensor of shape ``(m * n + 1,)``. The coefficients are symmetric,
        ``c[u] == c[m * n - u]``, and sum to :math:`\binom{m+n}{m}`.

    Examples
    --------
    >>> gaussian_binomial_coefficients(2, 2)
    tensor([1., 1., 2., 1., 1.], dtype=torch.float64)

    Notes
    -----
    Coefficients are accumulated in ``float64`` and are exact as long as
    :math:`\binom{m+n}{m} < 2^{53}`. Results are memoized per unordered
    pair ``(m, n)``.
    """
    if m < 0 or n < 0:
        raise ValueError(f"m and n must be non-negative, got {m=} and {n=}")

    m, n = sorted((m, n))
    coefficients = _gaussian_binomial_coefficients(m, n)

    if dtype is None:
        dtype = torch.float64
    return coefficients.to(dtype=dtype, device=device, copy=True)
