"""Interchangeable matrix inversion backends.

``invert_matrix`` is the default inversion routine used by
:func:`cachematrix.cache_solve`.
"""

import numpy as np

from . import gauss_jordan, lu_decomposition, lu_numpy

__all__ = [
    "METHODS",
    "invert_matrix",
    "invert_numpy",
    "invert_lu_numpy",
    "invert_lu",
    "invert_gauss_jordan",
    "invert_torch",
]

METHODS = ("numpy", "lu_numpy", "lu", "gauss_jordan", "torch")


def _as_square(A):
    A = np.asarray(A)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise np.linalg.LinAlgError(
            f"Matrix must be square (n x n), got shape {A.shape}"
        )
    return A


def _as_real_square(A, method):
    A = _as_square(A)
    if np.iscomplexobj(A):
        raise TypeError(
            f"method {method!r} does not support complex matrices, use 'numpy'"
        )
    return A.astype(np.float64)


def invert_matrix(A, method="numpy", **options):
    """
    Invert a square matrix using the specified method.

    Parameters:
        A (array_like): Square matrix to invert.
        method (str): 'numpy', 'lu_numpy', 'lu', 'gauss_jordan' or 'torch'
        **options: Passed on to the selected backend.

    Returns:
        A_inv: Inverse of matrix A. An ndarray for every method except
        'torch', which returns a torch.Tensor.

    Raises:
        numpy.linalg.LinAlgError: A is singular or not square.
        ValueError: method is unknown.
        TypeError: A is complex and method works in real arithmetic.
    """
    if method == "numpy":
        return invert_numpy(A, **options)
    elif method == "lu_numpy":
        return invert_lu_numpy(A, **options)
    elif method == "lu":
        return invert_lu(A, **options)
    elif method == "gauss_jordan":
        return invert_gauss_jordan(A, **options)
    elif method == "torch":
        return invert_torch(A, **options)
    else:
        raise ValueError(f"Unknown method: {method}")


def invert_numpy(A):
    """Invert matrix with numpy.linalg.inv. Keeps the dtype of A, complex included."""
    return np.linalg.inv(_as_square(A))


def invert_lu_numpy(A):
    """Invert matrix using the NumPy LU decomposition."""
    return lu_numpy.invert_matrix(_as_real_square(A, "lu_numpy"))


def invert_lu(A):
    """Invert matrix using pure Python LU decomposition."""
    return np.array(lu_decomposition.invert_matrix(_as_real_square(A, "lu").tolist()))


def invert_gauss_jordan(A):
    """Invert matrix using pure Python Gauss-Jordan elimination."""
    return np.array(gauss_jordan.invert_matrix(_as_real_square(A, "gauss_jordan").tolist()))


def invert_torch(A, **options):
    """Invert matrix with PyTorch (requires the ``torch`` extra)."""
    from . import lu_torch

    if not isinstance(A, lu_torch.torch.Tensor):
        A = _as_square(A)
    return lu_torch.invert_matrix(A, **options)
