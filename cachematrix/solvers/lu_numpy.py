import numpy as np


def lu_decomposition(A):
    A = np.array(A, dtype=np.float64)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise np.linalg.LinAlgError("Last 2 dimensions of the array must be square")
    n = A.shape[0]
    # Pivots at or below n * eps * max|A| are treated as zero
    tol = n * np.finfo(np.float64).eps * (np.max(np.abs(A)) if n else 0.0)
    L = np.eye(n)
    U = A.copy()
    P = np.eye(n)
    for i in range(n):
        # Pivot selection
        max_row = np.argmax(np.abs(U[i:, i])) + i
        if abs(U[max_row, i]) <= tol:
            raise np.linalg.LinAlgError("Singular matrix")

        # Swap rows in U
        U[[i, max_row]] = U[[max_row, i]]
        P[[i, max_row]] = P[[max_row, i]]

        # Swap rows in L (only left part)
        if i > 0:
            L[[i, max_row], :i] = L[[max_row, i], :i]

        # Elimination
        for j in range(i+1, n):
            factor = U[j, i] / U[i, i]
            L[j, i] = factor
            U[j, i+1:] -= factor * U[i, i+1:]
            U[j, i] = 0.0
    return P, L, U

def invert_matrix(A):
    P, L, U = lu_decomposition(A)

    # PA = LU  =>  A^-1 = U^-1 L^-1 P
    Y = np.linalg.solve(L, P)
    X = np.linalg.solve(U, Y)

    return X
