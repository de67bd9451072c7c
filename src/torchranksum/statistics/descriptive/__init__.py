"""Descriptive statistics functions.

This module provides the rank transformations shared by the rank-based
hypothesis tests.
"""

from ._tied_rank import tied_rank

__all__ = [
    "tied_rank",
]
