"""Cache the inverse of a matrix so repeated inversions are not recomputed.

Usage::

    m = CacheMatrix(np.random.rand(10, 10))
    inv = cache_solve(m)        # computed
    inv = cache_solve(m)        # returned from the cache
    m.set_matrix(other)         # cache dropped
"""

from .cache_matrix import CacheMatrix
from .cache_solve import cache_solve
from .solvers import invert_matrix

__all__ = ["CacheMatrix", "cache_solve", "invert_matrix"]

__version__ = "0.1.0"
