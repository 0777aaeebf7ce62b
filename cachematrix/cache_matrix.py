"""A matrix container that can hold its own inverse."""


class CacheMatrix:
    """
    Holds a square matrix and, once computed, its inverse.

    The matrix is not validated. Callers are responsible for supplying a
    square matrix; :func:`cachematrix.cache_solve` leaves that check to the
    inversion routine.

    Args:
        x: Matrix to wrap (ndarray, nested list or tensor).
    """

    def __init__(self, x):
        self._x = x
        self._inv = None

    def set_matrix(self, y):
        """Replace the matrix. Always drops the cached inverse."""
        self._x = y
        self._inv = None

    def get_matrix(self):
        """Return the current matrix."""
        return self._x

    def set_inverse(self, inverse):
        """Store the inverse of the current matrix. Not checked against it."""
        self._inv = inverse

    def get_inverse(self):
        """Return the cached inverse, or None if it has not been computed."""
        return self._inv

    def is_cached(self) -> bool:
        return self._inv is not None

    def __repr__(self):
        kind = type(self._x).__name__
        return f"CacheMatrix({kind}, cached={self.is_cached()})"
