"""Analytic test surfaces over the unit square with their derivatives.

Each surface function returns a list of points: the position, then the
first derivatives (u, v), then the second derivatives (uu, uv, vv), as
requested by the evaluation flags. Derivatives are taken with respect to
the shifted coordinates each surface uses internally.
"""

import math
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

import numpy as np

from .common import EvalFlag

Point = np.ndarray


@dataclass(frozen=True)
class Constants:
    """Parameters of the gaussian bump."""

    mean: Tuple[float, float] = (0.0, 0.0)
    std_dev: Tuple[float, float] = (0.075, 0.075)
    amp: float = 0.5


AnalyticFunction = Callable[[Constants, Sequence[float], int], List[Point]]


def _point(x: float, y: float, z: float) -> Point:
    return np.array([x, y, z], dtype=float)


def _parse(uv: Sequence[float], flags: int) -> Tuple[float, float, EvalFlag]:
    flags = EvalFlag(flags)
    if flags & (EvalFlag.FIRST_DERIV | EvalFlag.SECOND_DERIV) and not flags & EvalFlag.VALUE:
        raise ValueError("derivatives can only be evaluated together with the value")
    if flags & EvalFlag.SECOND_DERIV and not flags & EvalFlag.FIRST_DERIV:
        raise ValueError("second derivatives require first derivatives")
    u, v = (float(c) for c in uv)
    return u, v, flags


def gaussian(constants: Constants, uv: Sequence[float], flags: int) -> List[Point]:
    """Gaussian bump over the square centred at the origin."""
    u, v, flags = _parse(uv, flags)
    x, y = u - 0.5, v - 0.5
    mean_x, mean_y = constants.mean
    sx2 = constants.std_dev[0] ** 2
    sy2 = constants.std_dev[1] ** 2
    values: List[Point] = []
    if not flags & EvalFlag.VALUE:
        return values
    z = constants.amp * math.exp(
        -((x - mean_x) ** 2 / (2.0 * sx2) + (y - mean_y) ** 2 / (2.0 * sy2))
    )
    values.append(_point(x, y, z))
    if flags & EvalFlag.FIRST_DERIV:
        values.append(_point(1, 0, -(x - mean_x) / sx2 * z))
        values.append(_point(0, 1, -(y - mean_y) / sy2 * z))
    if flags & EvalFlag.SECOND_DERIV:
        values.append(_point(0, 0, (x - mean_x) ** 2 / sx2**2 * z - z / sx2))
        values.append(_point(0, 0, (y - mean_y) * (x - mean_x) / (sx2 * sy2) * z))
        values.append(_point(0, 0, (y - mean_y) ** 2 / sy2**2 * z - z / sy2))
    return values


def sin3(constants: Constants, uv: Sequence[float], flags: int) -> List[Point]:
    """Height field amp * sin^2(fx x) * cos^2(fy y) over [-1, 1]^2."""
    u, v, flags = _parse(uv, flags)
    x, y = 2 * u - 1.0, 2 * v - 1.0
    amp = 0.5
    fx = 10.0 / (2 * math.pi)
    fy = 4 / (2 * math.pi)
    values: List[Point] = []
    if not flags & EvalFlag.VALUE:
        return values
    sx, cx = math.sin(fx * x), math.cos(fx * x)
    sy, cy = math.sin(fy * y), math.cos(fy * y)
    values.append(_point(x, y, amp * sx**2 * cy**2))
    if flags & EvalFlag.FIRST_DERIV:
        values.append(_point(1, 0, amp * fx * 2.0 * sx * cx * cy**2))
        values.append(_point(0, 1, -amp * fy * 2.0 * sx**2 * sy * cy))
    if flags & EvalFlag.SECOND_DERIV:
        values.append(_point(0, 0, 2 * amp * fx * fx * math.cos(2 * fx * x) * cy**2))
        values.append(_point(0, 0, -4 * amp * fx * fy * sx * cx * sy * cy))
        values.append(_point(0, 0, -2 * amp * fy * fy * math.cos(2 * fy * y) * sx**2))
    return values


def sin_plus_sin(constants: Constants, uv: Sequence[float], flags: int) -> List[Point]:
    """Height field amp * (sin^2(fx x) + sin(fy y)) over [-1, 1]^2."""
    u, v, flags = _parse(uv, flags)
    x, y = 2 * u - 1.0, 2 * v - 1.0
    amp = 0.5
    fx, fy = 1.0, 10.0
    values: List[Point] = []
    if not flags & EvalFlag.VALUE:
        return values
    values.append(_point(x, y, amp * (math.sin(fx * x) ** 2 + math.sin(fy * y))))
    if flags & EvalFlag.FIRST_DERIV:
        values.append(_point(1, 0, amp * 2.0 * fx * math.sin(fx * x) * math.cos(fx * x)))
        values.append(_point(0, 1, amp * fy * math.cos(fy * y)))
    if flags & EvalFlag.SECOND_DERIV:
        values.append(_point(0, 0, 2 * amp * fx * fx * math.cos(2 * fx * x)))
        values.append(_point(0, 0, 0))
        values.append(_point(0, 0, -amp * fy * fy * math.sin(fy * y)))
    return values


def exp_sin_cos(constants: Constants, uv: Sequence[float], flags: int) -> List[Point]:
    """Height field amp * exp(sin(fx x) cos(fy y)) over [-1, 1]^2."""
    u, v, flags = _parse(uv, flags)
    x, y = 2 * u - 1.0, 2 * v - 1.0
    amp = 0.1
    fx = fy = 2 * math.pi
    values: List[Point] = []
    if not flags & EvalFlag.VALUE:
        return values
    sx, cx = math.sin(fx * x), math.cos(fx * x)
    sy, cy = math.sin(fy * y), math.cos(fy * y)
    e = math.exp(sx * cy)
    values.append(_point(x, y, amp * e))
    if flags & EvalFlag.FIRST_DERIV:
        values.append(_point(1, 0, amp * fx * cx * cy * e))
        values.append(_point(0, 1, -amp * fy * sx * sy * e))
    if flags & EvalFlag.SECOND_DERIV:
        values.append(_point(0, 0, amp * e * (fx * fx * cx**2 * cy**2 - fx * fx * sx * cy)))
        values.append(_point(0, 0, -amp * fx * fy * cx * sy * e * (sx * cy + 1)))
        values.append(_point(0, 0, amp * e * (fy * fy * sx**2 * sy**2 - fy * fy * sx * cy)))
    return values


def torus(constants: Constants, uv: Sequence[float], flags: int) -> List[Point]:
    """Torus of tube radius 0.5 parametrized by the unit square."""
    u, v, flags = _parse(uv, flags)
    if flags & EvalFlag.SECOND_DERIV:
        raise ValueError("second derivatives of the torus are not available")
    fx = fy = 2 * math.pi
    radius = 0.5
    center_x, center_y = 1.0, 1.0
    values: List[Point] = []
    if not flags & EvalFlag.VALUE:
        return values
    su, cu = math.sin(fx * u), math.cos(fx * u)
    sv, cv = math.sin(fy * v), math.cos(fy * v)
    values.append(
        _point((center_x + radius * cv) * cu, (center_y + radius * cv) * su, radius * sv)
    )
    if flags & EvalFlag.FIRST_DERIV:
        values.append(
            _point((center_x + radius * cv) * (-fx * su), (center_y + radius * cv) * (fx * cu), 0.0)
        )
        values.append(
            _point(radius * cu * (-fy * sv), radius * su * (-fy * sv), fy * radius * cv)
        )
    return values


_FUNCTIONS: Tuple[AnalyticFunction, ...] = (sin3, sin_plus_sin, exp_sin_cos, torus, gaussian)


def select_function(analytic_func: int) -> AnalyticFunction:
    """Surface function by number: sin3, sin_plus_sin, exp_sin_cos, torus, gaussian."""
    if not 0 <= analytic_func < len(_FUNCTIONS):
        raise ValueError(f"unknown analytic function {analytic_func}")
    return _FUNCTIONS[analytic_func]


def evaluate_analytic(func: AnalyticFunction, evaluation_flags: int, uv: Sequence[float]) -> List[Point]:
    """Evaluate a surface function with the default gaussian constants."""
    return func(Constants(), uv, evaluation_flags)