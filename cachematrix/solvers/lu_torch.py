import logging
from typing import Tuple

import numpy as np
import torch

logger = logging.getLogger(__name__)


class LUPyTorch:
    """
    Matrix inversion using PyTorch's GPU-accelerated operations.
    """

    def __init__(self, device: str = 'cuda'):
        """
        Args:
            device: 'cuda' for GPU, 'cpu' for CPU
        """
        self.device = torch.device(device if torch.cuda.is_available() else 'cpu')
        if device == 'cuda' and not torch.cuda.is_available():
            logger.warning("CUDA not available, falling back to CPU")

    def lu_decomposition(self, A: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
        """
        Compute LU decomposition with partial pivoting: PA = LU

        torch.linalg.lu factors A = P' L U, so the permutation returned
        here is P = P'^T.

        Args:
            A: Input matrix [n, n]

        Returns:
            L: Lower triangular with ones on diagonal [n, n]
            U: Upper triangular [n, n]
            P: Permutation matrix [n, n]
        """
        A = A.to(self.device)
        P, L, U = torch.linalg.lu(A)
        return L, U, P.T

    def invert_triangular(self, T: torch.Tensor, lower: bool = True) -> torch.Tensor:
        """
        Invert triangular matrix using PyTorch's optimized routine.

        Args:
            T: Triangular matrix [n, n]
            lower: True for lower triangular, False for upper

        Returns:
            T_inv: Inverse of T [n, n]
        """
        n = T.shape[0]
        I = torch.eye(n, dtype=T.dtype, device=self.device)
        return torch.linalg.solve_triangular(T, I, upper=not lower)

    def invert_via_lu(self, A: torch.Tensor) -> torch.Tensor:
        """
        Invert matrix using LU decomposition: A^(-1) = U^(-1) @ L^(-1) @ P

        Raises:
            torch.linalg.LinAlgError: if A is not square or a pivot of U is
                at or below n * eps * max|A|
        """
        if A.ndim != 2 or A.shape[0] != A.shape[1]:
            raise torch.linalg.LinAlgError("Matrix must be square")

        L, U, P = self.lu_decomposition(A)

        # solve_triangular does not fail on a tiny pivot, it returns garbage
        n = A.shape[0]
        tol = n * torch.finfo(U.dtype).eps * A.abs().max() if n else 0.0
        if torch.any(torch.diagonal(U).abs() <= tol):
            raise torch.linalg.LinAlgError("Singular matrix")

        L_inv = self.invert_triangular(L, lower=True)
        U_inv = self.invert_triangular(U, lower=False)

        return U_inv @ L_inv @ P

    def invert_direct(self, A: torch.Tensor) -> torch.Tensor:
        """
        Direct inversion using PyTorch's built-in.
        """
        A = A.to(self.device)
        return torch.linalg.inv(A)


def invert_matrix(A, device: str = 'cpu', algorithm: str = 'lu',
                  dtype: torch.dtype = torch.float64) -> torch.Tensor:
    """
    Invert an array-like with PyTorch.

    algorithm is 'lu' for LUPyTorch.invert_via_lu or 'direct' for
    torch.linalg.inv.

    Raises:
        TypeError: A is complex and dtype is real.
    """
    if not isinstance(A, torch.Tensor):
        A = torch.as_tensor(np.asarray(A))
    if A.is_complex() and not dtype.is_complex:
        raise TypeError(f"Cannot invert a complex matrix as {dtype}")

    lu = LUPyTorch(device=device)
    A_t = A.to(dtype=dtype)

    if algorithm == 'lu':
        return lu.invert_via_lu(A_t)
    elif algorithm == 'direct':
        return lu.invert_direct(A_t)
    else:
        raise ValueError(f"Unknown algorithm: {algorithm}")
