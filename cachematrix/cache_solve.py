import logging

from .solvers import invert_matrix

logger = logging.getLogger(__name__)


def cache_solve(x, *args, solver=None, **kwargs):
    """
    Return the inverse of the matrix held by ``x``.

    If ``x`` already holds an inverse it is returned as-is and the solver
    is not called; ``args`` and ``kwargs`` are ignored in that case.
    Otherwise the inverse is computed with
    ``solver(x.get_matrix(), *args, **kwargs)``, stored in ``x`` and
    returned.

    Args:
        x: A :class:`cachematrix.CacheMatrix`.
        solver: Inversion routine. Defaults to
            :func:`cachematrix.solvers.invert_matrix`. ``solver`` is never
            forwarded, so a routine that takes its own ``solver`` option
            must have it bound first, e.g. with ``functools.partial``.

    Raises:
        Whatever the solver raises (numpy.linalg.LinAlgError for a
        singular matrix with the bundled backends). Nothing is cached
        when the solver fails.
    """
    inv = x.get_inverse()
    if inv is not None:
        logger.info("getting cached data")
        return inv

    if solver is None:
        solver = invert_matrix

    data = x.get_matrix()
    logger.debug("computing inverse of %s", type(data).__name__)
    inv = solver(data, *args, **kwargs)
    x.set_inverse(inv)

    return inv
