"""Tensor-product sampling patterns built from a one-dimensional pattern."""

from typing import Callable, Sequence

import numpy as np

from .common import Cube, Interval, Rectangle

PARAMETER_DIM = 2
BASE_DOMAIN: Rectangle = ((0.0, 1.0), (0.0, 1.0))

SamplingFunction = Callable[[int, Interval], Sequence[float]]


def _sample_axis(sampling_func: SamplingFunction, num_samples: int, interval: Interval) -> np.ndarray:
    points = np.asarray(sampling_func(num_samples, interval), dtype=float).ravel()
    if points.size != num_samples:
        raise ValueError(
            f"sampling function returned {points.size} points, expected {num_samples}"
        )
    return points


def sample_1d(sampling_func: SamplingFunction, num_samples: int, domain: Rectangle) -> np.ndarray:
    """Sample the first interval of the domain with the given pattern."""
    return _sample_axis(sampling_func, num_samples, domain[0])


def sample_2d(sampling_func: SamplingFunction, num_samples: int, domain: Rectangle) -> np.ndarray:
    """Return a 2 x num_samples**2 array; column j*num_samples + i is (x_i, y_j)."""
    xs = _sample_axis(sampling_func, num_samples, domain[0])
    ys = _sample_axis(sampling_func, num_samples, domain[1])
    grid_x, grid_y = np.meshgrid(xs, ys)
    return np.vstack((grid_x.ravel(), grid_y.ravel()))


def sample_3d(sampling_func: SamplingFunction, num_samples: int, domain: Cube) -> np.ndarray:
    """Return a 3 x num_samples**3 array; column k*n*n + j*n + i is (x_i, y_j, z_k)."""
    xs = _sample_axis(sampling_func, num_samples, domain[0])
    ys = _sample_axis(sampling_func, num_samples, domain[1])
    zs = _sample_axis(sampling_func, num_samples, domain[2])
    grid_z, grid_y, grid_x = np.meshgrid(zs, ys, xs, indexing="ij")
    return np.vstack((grid_x.ravel(), grid_y.ravel(), grid_z.ravel()))