# Pure Python Gauss-Jordan inversion
import sys

from numpy.linalg import LinAlgError


def identity(n):
    return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]


def pivot_tolerance(A):
    """Pivots at or below n * eps * max|A| are treated as zero."""
    n = len(A)
    scale = max((abs(v) for row in A for v in row), default=0.0)
    return n * sys.float_info.epsilon * scale


def invert_matrix(A):
    n = len(A)
    tol = pivot_tolerance(A)
    I = identity(n)
    M = [[float(v) for v in A[i]] + I[i] for i in range(n)]

    for i in range(n):
        # Partial pivoting; unpivoted rows keep the scale of A
        max_row = max(range(i, n), key=lambda r: abs(M[r][i]))
        if abs(M[max_row][i]) <= tol:
            raise LinAlgError("Singular matrix")
        M[i], M[max_row] = M[max_row], M[i]

        # Normalize row
        pivot = M[i][i]
        for j in range(2*n):
            M[i][j] /= pivot

        # Eliminate column
        for k in range(n):
            if k != i:
                factor = M[k][i]
                for j in range(2*n):
                    M[k][j] -= factor * M[i][j]

    # Extract inverse
    return [row[n:] for row in M]
