import pytest

from patchwork.bspline_codegen import (
    bspline_deg3_deriv0,
    bspline_deg3_deriv1,
    bspline_deg5_deriv0,
    bspline_deg5_deriv2,
)
from patchwork.bspline_precomp import (
    bspline_first_deriv,
    bspline_fourth_deriv,
    bspline_second_deriv,
    bspline_third_deriv,
    bspline_value,
    find_knot_interval,
)

KNOTS = [float(k) for k in range(7)]


def test_find_knot_interval_inside_span():
    assert find_knot_interval(0.5, 3, [0.0, 1.0, 2.0, 3.0]) == 0
    assert find_knot_interval(2.5, 3, [0.0, 1.0, 2.0, 3.0]) == 2


def test_find_knot_interval_picks_last_span_at_shared_knot():
    assert find_knot_interval(1.0, 3, [0.0, 1.0, 2.0, 3.0]) == 1


def test_find_knot_interval_outside_returns_minus_one():
    assert find_knot_interval(-0.5, 3, [0.0, 1.0, 2.0]) == -1
    assert find_knot_interval(2.5, 3, [0.0, 1.0, 2.0]) == -1
    assert find_knot_interval(0.5, 3, []) == -1


def test_find_knot_interval_ignores_repeated_knots():
    assert find_knot_interval(0.5, 3, [0.0, 0.0, 0.0, 1.0, 2.0]) == 0
    assert find_knot_interval(1.5, 3, [0.0, 0.0, 1.0, 1.0, 2.0]) == 1


@pytest.mark.parametrize("x", [-2.3, -0.5, 0.0, 0.7, 1.0])
@pytest.mark.parametrize("i", [0, 1, 2])
def test_value_is_shifted_closed_form(x, i):
    assert bspline_value(x + i, i, 3, KNOTS) == bspline_deg3_deriv0(x)
    assert bspline_value(x + i, i, 5, KNOTS) == bspline_deg5_deriv0(x)


def test_first_and_second_deriv_shift():
    assert bspline_first_deriv(2.4, 2, 3, KNOTS) == bspline_deg3_deriv1(0.4)
    assert bspline_second_deriv(3.6, 4, 5, KNOTS) == bspline_deg5_deriv2(-0.4)


@pytest.mark.parametrize("n", [2, 4, 6])
def test_unsupported_degree_rejected(n):
    with pytest.raises(ValueError):
        bspline_value(0.5, 0, n, KNOTS)
    with pytest.raises(ValueError):
        bspline_first_deriv(0.5, 0, n, KNOTS)
    with pytest.raises(ValueError):
        bspline_second_deriv(0.5, 0, n, KNOTS)


@pytest.mark.parametrize("n", [3, 4])
def test_high_derivatives_require_quintic(n):
    with pytest.raises(ValueError):
        bspline_third_deriv(0.5, n, KNOTS)
    with pytest.raises(ValueError):
        bspline_fourth_deriv(0.5, n, KNOTS)


def test_derivatives_outside_knots_rejected():
    for func in (bspline_first_deriv, bspline_second_deriv):
        with pytest.raises(ValueError):
            func(10.0, 0, 5, KNOTS)
    for func in (bspline_third_deriv, bspline_fourth_deriv):
        with pytest.raises(ValueError):
            func(-1.0, 5, KNOTS)


@pytest.mark.parametrize("x", [0.3, 1.25, 2.6, 3.5, 4.1, 5.8])
def test_fourth_deriv_is_derivative_of_third(x):
    h = 1e-6
    fd = (bspline_third_deriv(x + h, 5, KNOTS) - bspline_third_deriv(x - h, 5, KNOTS)) / (2 * h)
    assert bspline_fourth_deriv(x, 5, KNOTS) == pytest.approx(fd, abs=1e-5)


@pytest.mark.parametrize("knot", [1.0, 2.0, 3.0, 4.0, 5.0])
def test_third_and_fourth_deriv_continuous(knot):
    eps = 1e-9
    assert bspline_third_deriv(knot - eps, 5, KNOTS) == pytest.approx(
        bspline_third_deriv(knot, 5, KNOTS), abs=1e-6
    )
    assert bspline_fourth_deriv(knot - eps, 5, KNOTS) == pytest.approx(
        bspline_fourth_deriv(knot, 5, KNOTS), abs=1e-6
    )


def test_third_and_fourth_deriv_vanish_at_support_ends():
    assert bspline_third_deriv(0.0, 5, KNOTS) == pytest.approx(0.0, abs=1e-12)
    assert bspline_third_deriv(6.0, 5, KNOTS) == pytest.approx(0.0, abs=1e-12)
    assert bspline_fourth_deriv(0.0, 5, KNOTS) == pytest.approx(0.0, abs=1e-12)
    assert bspline_fourth_deriv(6.0, 5, KNOTS) == pytest.approx(0.0, abs=1e-12)


def test_high_derivatives_zero_beyond_sixth_span():
    long_knots = [float(k) for k in range(10)]
    assert bspline_third_deriv(7.5, 5, long_knots) == 0.0
    assert bspline_fourth_deriv(8.5, 5, long_knots) == 0.0