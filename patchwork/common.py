"""Shared enumerations and geometric type aliases."""

from enum import IntEnum, IntFlag
from typing import Tuple

Interval = Tuple[float, float]
Rectangle = Tuple[Interval, Interval]
Cube = Tuple[Interval, Interval, Interval]
Index = Tuple[int, int]


class BasisType(IntEnum):
    """Polynomial basis used to represent a function."""

    BEZIER = 0
    CHEBYSHEV = 1
    BSPLINE = 2


class Direction(IntEnum):
    """Parametric direction of a surface patch."""

    U = 0
    V = 1


class Periodicity(IntEnum):
    """Kind of periodicity of a parametric domain."""

    PERIODIC_XY = 0


class EvalFlag(IntFlag):
    """Which quantities a surface evaluation should produce."""

    VALUE = 1
    FIRST_DERIV = 2
    SECOND_DERIV = 4