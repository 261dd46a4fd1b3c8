# patchwork

Numerical building blocks for describing smooth surfaces with tensor-product
polynomial patches.

## Modules

- `patchwork.common`: shared enumerations `BasisType`, `Direction`,
  `Periodicity` and the evaluation flags `EvalFlag`
  (`VALUE`, `FIRST_DERIV`, `SECOND_DERIV`).
- `patchwork.bspline_codegen`: closed-form uniform B-splines of degree 3, 4
  and 5 with their first and second derivatives
  (`bspline_deg3_deriv0` … `bspline_deg5_deriv2`). Each is supported on
  `[-n, 1]` and is zero outside it.
- `patchwork.bspline_precomp`: `EvalType`, `find_knot_interval`, and
  `bspline_value`, `bspline_first_deriv`, `bspline_second_deriv` for degree 3
  or 5, plus `bspline_third_deriv` and `bspline_fourth_deriv` for degree 5.
  An unsupported degree, or a point outside the knot vector where a knot span
  is needed, raises `ValueError`.
- `patchwork.bspline`: `SplineType`, the `KnotVector` class (distinct knots
  with multiplicities; `KnotVector.uniform` builds integer-spaced knots),
  `generate_bspline_knots` (open splines only; periodic raises
  `ValueError`), `rescale_to_bspline_interval`, the Cox–de Boor evaluators
  `de_boor` and `de_boor_iterative`, `bspline_precomp`, and
  `evaluate_bspline` / `evaluate_bspline_with_knots` for evaluating basis
  functions at a point of `[0, 1]`.
- `patchwork.bezier`: `blossom`, `blossom_recursive`, `de_casteljau`,
  `de_casteljau_recursive`, `tensor_product_blossom`,
  `tensor_product_blossom_recursive`, and
  `compute_control_points_on_subdomain`, which restricts a tensor-product
  patch to a sub-rectangle. A parameter value of 1 selects the first control
  point and 0 the last; tensor-product control points are stored x-major.
- `patchwork.bezier_derivative`: `derivative_of_tensor_product_bezier`, the
  derivative of a tensor-product Bezier patch in `u` or `v`, expressed in
  the same degree-`n` basis.
- `patchwork.sampling`: `sample_1d`, `sample_2d` and `sample_3d` build
  tensor-product grids from any one-dimensional sampling rule you pass in,
  a callable `(num_samples, (a, b)) -> points`.
- `patchwork.analytic`: analytic surfaces with exact derivatives
  (`gaussian`, `sin3`, `sin_plus_sin`, `exp_sin_cos`, `torus`), the
  `Constants` dataclass for the gaussian bump, `select_function` to choose
  one by number (0–4, in the order sin3, sin_plus_sin, exp_sin_cos, torus,
  gaussian), and `evaluate_analytic`, which calls a surface with default
  `Constants`. The torus has no second derivatives and raises `ValueError`
  if they are requested.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

De Casteljau evaluation of a quadratic Bezier curve:

```python
from patchwork.bezier import de_casteljau

points = [[0.0, 0.0, 0.0], [1.0, 1.0, 0.0], [2.0, 0.0, 0.0]]
print(de_casteljau(points, 0.5))  # [1.  0.5 0. ]
```

A 3 x 3 grid on the unit square from an equispaced rule:

```python
import numpy as np
from patchwork.sampling import sample_2d

grid = sample_2d(lambda n, iv: np.linspace(iv[0], iv[1], n), 3, ((0.0, 1.0), (0.0, 1.0)))
print(grid.shape)  # (2, 9)
```

Evaluating an analytic surface and its derivatives:

```python
from patchwork.analytic import evaluate_analytic, select_function
from patchwork.common import EvalFlag

func = select_function(2)  # exp_sin_cos
flags = EvalFlag.VALUE | EvalFlag.FIRST_DERIV | EvalFlag.SECOND_DERIV
position, x_u, x_v, x_uu, x_uv, x_vv = evaluate_analytic(func, flags, (0.25, 0.5))
```

## What the package does not do

It has no differential-geometry operators: fundamental forms, Gaussian and
mean curvature, surface gradient, divergence and the Laplace–Beltrami
operator are not provided. It also does not fit patches to a mesh, refine
patches adaptively, or read or write mesh files; it supplies the bases,
evaluation routines, sampling grids and test surfaces such work is built on.