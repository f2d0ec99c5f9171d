"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""

import numpy as np

from geoLOSModel.geoCore.constants import MATH
from geoLOSModel.geoErrorsWarning.geoErrors import erSingularMatrix


def cross(a, b):
    """Cross product of two 3-vectors, returned as a new array."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    return np.array([a[1] * b[2] - a[2] * b[1],
                     a[2] * b[0] - a[0] * b[2],
                     a[0] * b[1] - a[1] * b[0]])


def dot(a, b):
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    return float(a[0] * b[0] + a[1] * b[1] + a[2] * b[2])


def multiply_3x3(m1, m2):
    return np.asarray(m1, dtype=float) @ np.asarray(m2, dtype=float)


def invert_3x3(matrix):
    """
    Invert a 3x3 matrix by cofactor expansion.
    Args:
        matrix: array-like (3,3)

    Returns: inverse matrix (3,3)

    Raises LOSModelConfigError when |det| <= 1e-9.
    """
    m = np.asarray(matrix, dtype=float)

    A = m[1, 1] * m[2, 2] - m[2, 1] * m[1, 2]
    B = -(m[0, 1] * m[2, 2] - m[2, 1] * m[0, 2])
    C = m[0, 1] * m[1, 2] - m[1, 1] * m[0, 2]
    D = -(m[1, 0] * m[2, 2] - m[2, 0] * m[1, 2])
    E = m[0, 0] * m[2, 2] - m[2, 0] * m[0, 2]
    F = -(m[0, 0] * m[1, 2] - m[1, 0] * m[0, 2])
    G = m[1, 0] * m[2, 1] - m[2, 0] * m[1, 1]
    H = -(m[0, 0] * m[2, 1] - m[2, 0] * m[0, 1])
    K = m[0, 0] * m[1, 1] - m[1, 0] * m[0, 1]

    Z = m[0, 0] * A + m[0, 1] * D + m[0, 2] * G
    if abs(Z) <= MATH.SINGULAR_LIMIT:
        erSingularMatrix()

    return np.array([[A, B, C],
                     [D, E, F],
                     [G, H, K]]) / Z


def _house(x):
    """
    Householder vector of x (Golub & Van Loan, alg. 5.1.1).
    Returns (v, vtv, px) with v[0] = 1 and P x = (px, 0, ..., 0).
    """
    v = np.array(x, dtype=float)
    u = float(np.sqrt(np.sum(v * v)))
    sign_x0 = 1.0
    if u >= MATH.HOUSEHOLDER_LIMIT:
        sign_x0 = -1.0 if x[0] < 0.0 else 1.0
        beta = x[0] + sign_x0 * u
        v[1:] /= beta
        vtv = 2.0 * ((u * u) + (u * abs(x[0]))) / (beta * beta)
    else:
        vtv = 1.0
    v[0] = 1.0
    return v, vtv, -sign_x0 * u


def _row_house(a, v, vtv):
    """Replace a by P a, P being the Householder matrix defined by v."""
    alpha = -(2.0 / vtv) * (v @ a)
    a += np.outer(v, alpha)


def qr_factorization(a, m: int, n: int, row_major: bool = False):
    """
    Householder QR factorization without pivoting, in place.
    Args:
        a: flat float array of m*n elements, stored by columns unless row_major is set
        m: number of rows
        n: number of columns
        row_major: reorder a from row-major to column-major storage first

    Returns: (a, v). The upper triangle of a holds R, the entries below the diagonal of column k hold
    the Householder vector k (its leading 1 implied) and v[k] holds its v'v product.
    """
    a = np.asarray(a)
    if a.dtype != np.float64:
        raise TypeError("qr_factorization works in place on a float64 array")
    if a.size != m * n:
        raise ValueError(f"Matrix of {a.size} elements does not match {m}x{n}")

    if row_major:
        a[:] = a.reshape(m, n).T.ravel()

    cols = a.reshape(n, m).T  # view: cols[i, j] is element (i, j)
    v = np.zeros(m)

    for k in range(min(m - 1, n)):
        hv, vtv, px = _house(cols[k:, k].copy())
        v[k:] = hv
        cols[k, k] = px
        cols[k + 1:, k] = hv[1:]
        if k + 1 < n:
            _row_house(cols[k:, k + 1:], hv, vtv)
        v[k] = vtv
    return a, v
