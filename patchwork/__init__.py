"""B-spline and Bezier bases, sampling grids and analytic test surfaces for parametric patches."""

__version__ = "0.1.0"