"""Derivatives of tensor-product Bezier patches in the same Bernstein basis."""

import numpy as np

from .common import Direction


def derivative_of_tensor_product_bezier(
    tensor_product_coeffs, dx_i, coeff_dim: int, basis_bidegree: int
) -> np.ndarray:
    """Coefficients of the derivative of a tensor-product Bezier patch.

    ``tensor_product_coeffs`` is a ``coeff_dim x (n+1)**2`` array whose column
    ``i*(n+1) + j`` is control point ``a_ij``. The derivative with respect to
    ``dx_i`` is returned in the same degree-``n`` basis, using degree
    elevation of the degree ``n-1`` derivative:
    ``C_ij = (n-i) a_{i+1,j} + (2i-n) a_ij - i a_{i-1,j}`` in the interior and
    ``n (a_{1,j} - a_{0,j})``, ``n (a_{n,j} - a_{n-1,j})`` on the edges.
    """
    direction = Direction(dx_i)
    n = int(basis_bidegree)
    if n < 1:
        raise ValueError("basis bidegree must be at least 1")
    coeffs = np.asarray(tensor_product_coeffs, dtype=float)
    if coeffs.ndim != 2 or coeffs.shape[0] != coeff_dim:
        raise ValueError(f"expected {coeff_dim} rows of coefficients, got shape {coeffs.shape}")
    if coeffs.shape[1] != (n + 1) ** 2:
        raise ValueError(
            f"expected {(n + 1) ** 2} coefficient columns, got {coeffs.shape[1]}"
        )

    grid = coeffs.reshape(coeff_dim, n + 1, n + 1)
    axis = 1 if direction is Direction.U else 2
    grid = np.moveaxis(grid, axis, 1)

    derivative = np.zeros_like(grid)
    derivative[:, 0] = n * (grid[:, 1] - grid[:, 0])
    derivative[:, n] = n * (grid[:, n] - grid[:, n - 1])
    k = np.arange(1, n, dtype=float)[None, :, None]
    derivative[:, 1:n] = (
        (n - k) * grid[:, 2:] + (2 * k - n) * grid[:, 1:n] - k * grid[:, : n - 1]
    )

    derivative = np.moveaxis(derivative, 1, axis)
    return derivative.reshape(coeff_dim, (n + 1) ** 2)