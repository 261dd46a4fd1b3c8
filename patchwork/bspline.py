"""Uniform B-spline knot vectors and basis evaluation."""

import math
from enum import IntEnum
from typing import List, Sequence, Tuple

from .bspline_precomp import (
    EvalType,
    bspline_first_deriv,
    bspline_fourth_deriv,
    bspline_second_deriv,
    bspline_third_deriv,
    bspline_value,
)


class SplineType(IntEnum):
    """Boundary treatment of a B-spline basis."""

    OPEN = 0
    PERIODIC = 1


class KnotVector:
    """Distinct knot values with multiplicities, plus their flattened form.

    The flattened knots are fixed when the vector is built; ``flatten``
    always reflects the current multiplicities.
    """

    def __init__(self, knots: Sequence[float] = (), multiplicities: Sequence[int] = ()):
        values = [float(knot) for knot in knots]
        counts = [int(count) for count in multiplicities]
        if len(values) != len(counts):
            raise ValueError(
                f"{len(values)} knots given with {len(counts)} multiplicities"
            )
        self._entries: List[Tuple[float, int]] = list(zip(values, counts))
        self._flattened: List[float] = self.flatten()

    @classmethod
    def uniform(
        cls,
        spline_degree: int,
        num_control_points: int,
        spline_type: SplineType = SplineType.OPEN,
    ) -> "KnotVector":
        """Integer-spaced knots, each of multiplicity one."""
        knots = generate_bspline_knots(spline_degree, num_control_points, spline_type)
        return cls(knots, [1] * len(knots))

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._entries):
            raise IndexError(f"knot index {index} out of range")
        return index

    def knot_multiplicity(self, index: int) -> int:
        """Multiplicity of the distinct knot at index."""
        return self._entries[self._check_index(index)][1]

    def knot_value(self, index: int) -> float:
        """Value of the distinct knot at index."""
        return self._entries[self._check_index(index)][0]

    def set_knot_multiplicity(self, index: int, multiplicity: int) -> None:
        """Change the multiplicity of the distinct knot at index."""
        value = self._entries[self._check_index(index)][0]
        self._entries[index] = (value, int(multiplicity))

    def flatten(self) -> List[float]:
        """Every knot repeated according to its current multiplicity."""
        return [value for value, count in self._entries for _ in range(count)]

    def knot_count(self) -> int:
        """Number of knots in the flattened vector."""
        return len(self._flattened)

    def flattened_knots(self) -> List[float]:
        """Copy of the flattened knots fixed at construction."""
        return list(self._flattened)

    def __getitem__(self, i: int) -> float:
        if not self._flattened:
            raise IndexError("knot vector is empty")
        return self._flattened[i]

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"KnotVector({self._entries!r})"


def generate_bspline_knots(
    n: int, num_control_points: int, spline_type: SplineType
) -> List[float]:
    """Integer knots from -n to num_control_points for an open spline."""
    spline_type = SplineType(spline_type)
    if spline_type is SplineType.OPEN:
        return [float(i) for i in range(-n, num_control_points + 1)]
    raise ValueError("periodic knot vectors are not supported")


def rescale_to_bspline_interval(
    x: float, n: int, num_control_points: int, spline_type: SplineType
) -> float:
    """Map x in [0, 1] onto the parameter range of the spline basis."""
    return (num_control_points - n) * x


def _blend_weights(index: int, k: int, x: float, knots: Sequence[float]) -> Tuple[float, float]:
    first_diff = knots[index + k + 1] - knots[index + 1]
    second_diff = knots[index + k] - knots[index]
    a = (knots[index + k + 1] - x) / first_diff if abs(first_diff) > 0 else 0.0
    b = (x - knots[index]) / second_diff if abs(second_diff) > 0 else 0.0
    return a, b


def de_boor(i: int, k: int, x: float, knots: Sequence[float]) -> float:
    """Recursive Cox-de Boor evaluation of the i-th degree-k B-spline."""
    if k == 0:
        return 1.0 if knots[i] <= x <= knots[i + 1] else 0.0
    a, b = _blend_weights(i, k, x, knots)
    return a * de_boor(i + 1, k - 1, x, knots) + b * de_boor(i, k - 1, x, knots)


def de_boor_iterative(i: int, n: int, x: float, knots: Sequence[float]) -> float:
    """Iterative Cox-de Boor evaluation of the i-th degree-n B-spline."""
    stack = [
        1.0 if knots[i + k] <= x <= knots[i + k + 1] else 0.0 for k in range(n + 1)
    ]
    for k in range(1, n + 1):
        for j in range(len(stack) - 1):
            a, b = _blend_weights(j + i, k, x, knots)
            stack[j] = a * stack[j + 1] + b * stack[j]
        stack.pop()
    return stack[0]


def bspline_precomp(
    i: int, n: int, x: float, knots: Sequence[float], eval_type: EvalType
) -> float:
    """Closed-form B-spline value or derivative selected by eval_type."""
    eval_type = EvalType(eval_type)
    if eval_type is EvalType.VALUE:
        return bspline_value(x, i, n, knots)
    if eval_type is EvalType.DERIV_1ST:
        return bspline_first_deriv(x, i, n, knots)
    if eval_type is EvalType.DERIV_2ND:
        return bspline_second_deriv(x, i, n, knots)
    if eval_type is EvalType.DERIV_3RD:
        return bspline_third_deriv(x, n, knots)
    return bspline_fourth_deriv(x, n, knots)


def evaluate_bspline(
    i: int,
    n: int,
    num_control_points: int,
    x: float,
    spline_type: SplineType = SplineType.OPEN,
) -> float:
    """Value of the i-th basis function at x in [0, 1] by de Boor recursion."""
    if i == num_control_points:
        return 0.0
    knots = generate_bspline_knots(n, num_control_points, spline_type)
    x_rescaled = rescale_to_bspline_interval(x, n, num_control_points, spline_type)
    value = de_boor(i, n, x_rescaled, knots)
    if math.isnan(value) or value >= 1e2:
        return 0.0
    return value


def evaluate_bspline_with_knots(
    i: int,
    n: int,
    num_control_points: int,
    x: float,
    spline_type: SplineType,
    eval_type: EvalType,
    knots: Sequence[float],
) -> float:
    """Closed-form value or derivative of the i-th basis function at x in [0, 1]."""
    x_rescaled = rescale_to_bspline_interval(x, n, num_control_points, spline_type)
    value = bspline_precomp(i, n, x_rescaled, knots, eval_type)
    return 0.0 if math.isnan(value) else value