"""Closed-form uniform B-splines of degree 3, 4 and 5 and their derivatives.

Each function is supported on ``[-n, 1]`` for degree ``n``, split into unit
pieces that are closed on the left, except the last which is closed on both
ends. Outside the support the value is zero.
"""

from typing import Sequence, Tuple

_Pieces = Tuple[Tuple[float, ...], ...]


def _evaluate_piecewise(pieces: _Pieces, x: float) -> float:
    start = 1 - len(pieces)
    last = len(pieces) - 1
    for offset, coefficients in enumerate(pieces):
        low = start + offset
        if low <= x < low + 1 or (offset == last and x == low + 1):
            return _horner(coefficients, x)
    return 0.0


def _horner(coefficients: Sequence[float], x: float) -> float:
    result = 0.0
    for coefficient in coefficients:
        result = result * x + coefficient
    return result


_DEG3_DERIV0: _Pieces = (
    (1 / 6, 3 / 2, 9 / 2, 9 / 2),
    (-1 / 2, -5 / 2, -7 / 2, -5 / 6),
    (1 / 2, 1 / 2, -1 / 2, 1 / 6),
    (-1 / 6, 1 / 2, -1 / 2, 1 / 6),
)
_DEG3_DERIV1: _Pieces = (
    (1 / 2, 3.0, 9 / 2),
    (-3 / 2, -5.0, -7 / 2),
    (3 / 2, 1.0, -1 / 2),
    (-1 / 2, 1.0, -1 / 2),
)
_DEG3_DERIV2: _Pieces = (
    (1.0, 3.0),
    (-3.0, -5.0),
    (3.0, 1.0),
    (-1.0, 1.0),
)

_DEG4_DERIV0: _Pieces = (
    (1 / 24, 2 / 3, 4.0, 32 / 3, 32 / 3),
    (-1 / 6, -11 / 6, -29 / 4, -71 / 6, -149 / 24),
    (1 / 4, 3 / 2, 11 / 4, 3 / 2, 11 / 24),
    (-1 / 6, -1 / 6, 1 / 4, -1 / 6, 1 / 24),
    (1 / 24, -1 / 6, 1 / 4, -1 / 6, 1 / 24),
)
_DEG4_DERIV1: _Pieces = (
    (1 / 6, 2.0, 8.0, 32 / 3),
    (-2 / 3, -11 / 2, -29 / 2, -71 / 6),
    (1.0, 9 / 2, 11 / 2, 3 / 2),
    (-2 / 3, -1 / 2, 1 / 2, -1 / 6),
    (1 / 6, -1 / 2, 1 / 2, -1 / 6),
)
_DEG4_DERIV2: _Pieces = (
    (1 / 2, 4.0, 8.0),
    (-2.0, -11.0, -29 / 2),
    (3.0, 9.0, 11 / 2),
    (-2.0, -1.0, 1 / 2),
    (1 / 2, -1.0, 1 / 2),
)

_DEG5_DERIV0: _Pieces = (
    (1 / 120, 5 / 24, 25 / 12, 125 / 12, 625 / 24, 625 / 24),
    (-1 / 24, -19 / 24, -71 / 12, -259 / 12, -911 / 24, -3019 / 120),
    (1 / 12, 13 / 12, 16 / 3, 73 / 6, 38 / 3, 313 / 60),
    (-1 / 12, -7 / 12, -4 / 3, -7 / 6, -2 / 3, -7 / 60),
    (1 / 24, 1 / 24, -1 / 12, 1 / 12, -1 / 24, 1 / 120),
    (-1 / 120, 1 / 24, -1 / 12, 1 / 12, -1 / 24, 1 / 120),
)
_DEG5_DERIV1: _Pieces = (
    (1 / 24, 5 / 6, 25 / 4, 125 / 6, 625 / 24),
    (-5 / 24, -19 / 6, -71 / 4, -259 / 6, -911 / 24),
    (5 / 12, 13 / 3, 16.0, 73 / 3, 38 / 3),
    (-5 / 12, -7 / 3, -4.0, -7 / 3, -2 / 3),
    (5 / 24, 1 / 6, -1 / 4, 1 / 6, -1 / 24),
    (-1 / 24, 1 / 6, -1 / 4, 1 / 6, -1 / 24),
)
_DEG5_DERIV2: _Pieces = (
    (1 / 6, 5 / 2, 25 / 2, 125 / 6),
    (-5 / 6, -19 / 2, -71 / 2, -259 / 6),
    (5 / 3, 13.0, 32.0, 73 / 3),
    (-5 / 3, -7.0, -8.0, -7 / 3),
    (5 / 6, 1 / 2, -1 / 2, 1 / 6),
    (-1 / 6, 1 / 2, -1 / 2, 1 / 6),
)


def bspline_deg3_deriv0(x: float) -> float:
    """Cubic B-spline value."""
    return _evaluate_piecewise(_DEG3_DERIV0, x)


def bspline_deg3_deriv1(x: float) -> float:
    """First derivative of the cubic B-spline."""
    return _evaluate_piecewise(_DEG3_DERIV1, x)


def bspline_deg3_deriv2(x: float) -> float:
    """Second derivative of the cubic B-spline."""
    return _evaluate_piecewise(_DEG3_DERIV2, x)


def bspline_deg4_deriv0(x: float) -> float:
    """Quartic B-spline value."""
    return _evaluate_piecewise(_DEG4_DERIV0, x)


def bspline_deg4_deriv1(x: float) -> float:
    """First derivative of the quartic B-spline."""
    return _evaluate_piecewise(_DEG4_DERIV1, x)


def bspline_deg4_deriv2(x: float) -> float:
    """Second derivative of the quartic B-spline."""
    return _evaluate_piecewise(_DEG4_DERIV2, x)


def bspline_deg5_deriv0(x: float) -> float:
    """Quintic B-spline value."""
    return _evaluate_piecewise(_DEG5_DERIV0, x)


def bspline_deg5_deriv1(x: float) -> float:
    """First derivative of the quintic B-spline."""
    return _evaluate_piecewise(_DEG5_DERIV1, x)


def bspline_deg5_deriv2(x: float) -> float:
    """Second derivative of the quintic B-spline."""
    return _evaluate_piecewise(_DEG5_DERIV2, x)