"""Lazy enumeration of k-combinations of index sets."""

import itertools
import math
from typing import Iterator, Optional

import torch
from torch import Tensor

_DEFAULT_CHUNK_SIZE = 8192


def combination_count(n: int, k: int) -> int:
    r"""Number of k-combinations of an n-element set.

    .. math::

       \binom{n}{k} = \frac{n!}{k!(n-k)!}

    Returns 0 for ``k < 0`` or ``k > n``.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if k < 0 or k > n:
        return 0
    return math.comb(n, k)


def combination_chunks(
    n: int,
    k: int,
    *,
    chunk_size: int = _DEFAULT_CHUNK_SIZE,
    start: int = 0,
    stop: Optional[int] = None,
    device: Optional[torch.device] = None,
) -> Iterator[Tensor]:
    r"""
    Stream the k-combinations of ``range(n)`` as index tensors.

    Combinations are produced in lexicographic order and grouped into chunks
    so that callers can evaluate them with vectorized tensor operations
    without ever materializing all :math:`\binom{n}{k}` of them.

    Parameters
    ----------
    n : int
        Size of the index set.
    k : int
        Number of indices per combination.
    chunk_size : int, optional
        Maximum number of combinations per chunk. Default: 8192.
    start : int, optional
        Position (in lexicographic order) of the first combination to emit.
        Default: 0.
    stop : int, optional
        Position one past the last combination to emit. ``None`` means the
        end of the sequence.
    device : torch.device, optional
        Device of the emitted index tensors.

    Yields
    ------
    Tensor
        ``int64`` tensor of shape ``(m, k)`` with ``1 <= m <= chunk_size``.

    Examples
    --------
    >>> [chunk.tolist() for chunk in combination_chunks(4, 2, chunk_size=4)]
    [[[0, 1], [0, 2], [0, 3], [1, 2]], [[1, 3], [2, 3]]]

    Disjoint ``start``/``stop`` slices partition the sequence, so a caller
    can split the work across independent workers:

    >>> head = combination_chunks(4, 2, stop=3)
    >>> tail = combination_chunks(4, 2, start=3)

    Notes
    -----
    The generator is restartable: calling ``combination_chunks`` again with
    the same arguments yields the same sequence.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be > 0, got {chunk_size}")
    if start < 0:
        raise ValueError(f"start must be non-negative, got {start}")
    if stop is not None and stop < start:
        raise ValueError(f"stop must be >= start, got {start=} and {stop=}")

    combinations = itertools.islice(
        itertools.combinations(range(n), k), start, stop
    )
    while True:
        chunk = list(itertools.islice(combinations, chunk_size))
        if not chunk:
            return
        yield torch.tensor(chunk, dtype=torch.int64, device=device).reshape(
            len(chunk), k
        )
