"""Blossoming and de Casteljau evaluation of Bezier curves and patches.

Control points follow the convention where a parameter value of 1 selects
the first control point and a value of 0 the last one. Tensor-product
control points are stored x-major: point ``di*(n+1) + dj`` is ``b_{di,dj}``.
"""

import math
from typing import Sequence, Tuple

import numpy as np

Interval = Tuple[float, float]


def _as_points(control_points) -> np.ndarray:
    points = np.asarray(control_points, dtype=float)
    if points.ndim == 1:
        points = points[:, None]
    if points.ndim != 2 or points.shape[0] == 0:
        raise ValueError("control points must be a non-empty list of points")
    return points


def _as_parameters(parameter_values) -> np.ndarray:
    params = np.asarray(parameter_values, dtype=float)
    if params.ndim == 1 and params.size == 0:
        return params.reshape(0, 2)
    if params.ndim != 2 or params.shape[1] != 2:
        raise ValueError("parameter values must be a list of (x, y) pairs")
    return params


def blossom(control_points, parameter_values: Sequence[float], n: int, i: int = 0) -> np.ndarray:
    """Iteratively evaluate the degree-n blossom at the given parameter values.

    ``i`` is accepted for symmetry with :func:`blossom_recursive` and unused.
    """
    points = _as_points(control_points)
    t_values = [float(t) for t in parameter_values]
    if points.shape[0] != n + 1:
        raise ValueError(f"expected {n + 1} control points, got {points.shape[0]}")
    if len(t_values) != n:
        raise ValueError(f"expected {n} parameter values, got {len(t_values)}")
    stack = points.copy()
    for size in range(n, 0, -1):
        ti = t_values[size - 1]
        stack[:size] = ti * stack[:size] + (1.0 - ti) * stack[1 : size + 1]
    return stack[0]


def de_casteljau(control_points, t: float) -> np.ndarray:
    """Evaluate a Bezier curve at t with the iterative blossom."""
    points = _as_points(control_points)
    degree = points.shape[0] - 1
    return blossom(points, [t] * degree, degree, 0)


def blossom_recursive(
    control_points, parameter_values: Sequence[float], n: int, i: int = 0
) -> np.ndarray:
    """Recursively evaluate the blossom of the control points starting at i."""
    points = _as_points(control_points)
    t_values = [float(t) for t in parameter_values]
    return _blossom_recursive(points, t_values, n, i)


def _blossom_recursive(points: np.ndarray, t_values, r: int, i: int) -> np.ndarray:
    if r == 0:
        return points[i].copy()
    ti = t_values[-1]
    remaining = t_values[:-1]
    return (1.0 - ti) * _blossom_recursive(points, remaining, r - 1, i + 1) + ti * (
        _blossom_recursive(points, remaining, r - 1, i)
    )


def de_casteljau_recursive(control_points, t: float) -> np.ndarray:
    """Evaluate a Bezier curve at t with the recursive blossom."""
    points = _as_points(control_points)
    degree = points.shape[0] - 1
    return blossom_recursive(points, [t] * degree, degree, 0)


def _tensor_product(control_points, parameter_values, line_blossom) -> np.ndarray:
    points = _as_points(control_points)
    params = _as_parameters(parameter_values)
    degree = math.isqrt(points.shape[0]) - 1
    if params.shape[0] < degree:
        raise ValueError(
            f"expected at least {degree} parameter pairs, got {params.shape[0]}"
        )
    y_values = list(params[:degree, 1])
    x_values = list(params[:degree, 0])
    width = degree + 1
    row_results = np.array(
        [
            line_blossom(points[di * width : (di + 1) * width], y_values, degree, 0)
            for di in range(width)
        ]
    )
    return line_blossom(row_results, x_values, degree, 0)


def tensor_product_blossom(control_points, parameter_values) -> np.ndarray:
    """Blossom of a tensor-product patch at a list of (x, y) parameter pairs."""
    return _tensor_product(control_points, parameter_values, blossom)


def tensor_product_blossom_recursive(control_points, parameter_values) -> np.ndarray:
    """Recursive variant of :func:`tensor_product_blossom`."""
    return _tensor_product(control_points, parameter_values, blossom_recursive)


def compute_control_points_on_subdomain(
    control_points, patch_order: int, x_interval: Interval, y_interval: Interval
) -> np.ndarray:
    """Control points of the patch restricted to x_interval by y_interval.

    The result has ``(patch_order+1)**2`` rows in the same x-major order.
    """
    points = _as_points(control_points)
    if points.shape[0] != (patch_order + 1) ** 2:
        raise ValueError(
            f"expected {(patch_order + 1) ** 2} control points, got {points.shape[0]}"
        )
    x0, x1 = x_interval
    y0, y1 = y_interval
    result = []
    for di in range(patch_order + 1):
        for dj in range(patch_order + 1):
            t_values = [
                (x1 if k < patch_order - di else x0, y1 if k < patch_order - dj else y0)
                for k in range(patch_order)
            ]
            result.append(tensor_product_blossom(points, t_values))
    return np.array(result).reshape(len(result), points.shape[1])