"""B-spline evaluation through precomputed closed-form pieces."""

from enum import IntEnum
from typing import Sequence

from .bspline_codegen import (
    bspline_deg3_deriv0,
    bspline_deg3_deriv1,
    bspline_deg3_deriv2,
    bspline_deg5_deriv0,
    bspline_deg5_deriv1,
    bspline_deg5_deriv2,
)


class EvalType(IntEnum):
    """Which derivative of a B-spline to evaluate."""

    VALUE = 0
    DERIV_1ST = 1
    DERIV_2ND = 2
    DERIV_3RD = 3
    DERIV_4TH = 4


_VALUE_BY_DEGREE = {3: bspline_deg3_deriv0, 5: bspline_deg5_deriv0}
_FIRST_BY_DEGREE = {3: bspline_deg3_deriv1, 5: bspline_deg5_deriv1}
_SECOND_BY_DEGREE = {3: bspline_deg3_deriv2, 5: bspline_deg5_deriv2}


def _drop_consecutive_duplicates(knots: Sequence[float]) -> list:
    unique = []
    for knot in knots:
        if not unique or unique[-1] != knot:
            unique.append(knot)
    return unique


def find_knot_interval(x: float, n: int, knots: Sequence[float]) -> int:
    """Index of the last non-degenerate knot span containing x, or -1."""
    unique = _drop_consecutive_duplicates(knots)
    interval = -1
    for index, (low, high) in enumerate(zip(unique, unique[1:])):
        if low <= x <= high and abs(low - high) > 1e-14:
            interval = index
    return interval


def _require_degree(n: int, allowed: dict) -> None:
    if n not in allowed:
        raise ValueError(f"unsupported B-spline degree {n}")


def _require_interval(x: float, n: int, knots: Sequence[float]) -> int:
    interval = find_knot_interval(x, n, knots)
    if interval == -1:
        raise ValueError(f"{x} lies outside the knot vector")
    return interval


def bspline_value(x: float, i: int, n: int, knots: Sequence[float]) -> float:
    """Value of the i-th degree-n B-spline at x (n is 3 or 5)."""
    _require_degree(n, _VALUE_BY_DEGREE)
    return _VALUE_BY_DEGREE[n](x - i)


def bspline_first_deriv(x: float, i: int, n: int, knots: Sequence[float]) -> float:
    """First derivative of the i-th degree-n B-spline at x (n is 3 or 5)."""
    _require_degree(n, _FIRST_BY_DEGREE)
    _require_interval(x, n, knots)
    return _FIRST_BY_DEGREE[n](x - i)


def bspline_second_deriv(x: float, i: int, n: int, knots: Sequence[float]) -> float:
    """Second derivative of the i-th degree-n B-spline at x (n is 3 or 5)."""
    _require_degree(n, _SECOND_BY_DEGREE)
    _require_interval(x, n, knots)
    return _SECOND_BY_DEGREE[n](x - i)


def bspline_third_deriv(x: float, n: int, knots: Sequence[float]) -> float:
    """Third derivative of the quintic B-spline supported on [0, 6]."""
    if n != 5:
        raise ValueError(f"unsupported B-spline degree {n}")
    interval = _require_interval(x, n, knots)
    x2 = x * x
    pieces = (
        lambda: 0.5 * x2,
        lambda: -2.5 * x2 + 6.0 * x - 3.0,
        lambda: 5.0 * x2 - 24.0 * x + 27.0,
        lambda: -5.0 * x2 + 36.0 * x - 63.0,
        lambda: 2.5 * x2 - 24.0 * x + 57.0,
        lambda: -0.5 * x2 + 6.0 * x - 18.0,
    )
    return pieces[interval]() if interval < len(pieces) else 0.0


def bspline_fourth_deriv(x: float, n: int, knots: Sequence[float]) -> float:
    """Fourth derivative of the quintic B-spline supported on [0, 6]."""
    if n != 5:
        raise ValueError(f"unsupported B-spline degree {n}")
    interval = _require_interval(x, n, knots)
    pieces = (
        lambda: x,
        lambda: -5.0 * x + 6.0,
        lambda: 10.0 * x - 24.0,
        lambda: -10.0 * x + 36.0,
        lambda: 5.0 * x - 24.0,
        lambda: -x + 6.0,
    )
    return pieces[interval]() if interval < len(pieces) else 0.0