import numpy as np
import pytest

from patchwork.sampling import BASE_DOMAIN, PARAMETER_DIM, sample_1d, sample_2d, sample_3d


def linspace(num_samples, interval):
    return np.linspace(interval[0], interval[1], num_samples)


def too_short(num_samples, interval):
    return np.linspace(interval[0], interval[1], num_samples - 1)


def test_sample_2d_on_base_domain_covers_unit_square():
    samples = sample_2d(linspace, 5, BASE_DOMAIN)
    assert samples.shape == (PARAMETER_DIM, 25)
    assert samples.min() == pytest.approx(0.0)
    assert samples.max() == pytest.approx(1.0)


def test_sample_1d_uses_first_interval():
    domain = ((2.0, 4.0), (10.0, 20.0))
    samples = sample_1d(linspace, 5, domain)
    np.testing.assert_allclose(samples, np.linspace(2.0, 4.0, 5))


def test_sample_2d_shape_and_ordering():
    domain = ((0.0, 1.0), (-1.0, 3.0))
    n = 4
    samples = sample_2d(linspace, n, domain)
    assert samples.shape == (2, n * n)
    xs = np.linspace(0.0, 1.0, n)
    ys = np.linspace(-1.0, 3.0, n)
    for j, y in enumerate(ys):
        for i, x in enumerate(xs):
            assert samples[0, j * n + i] == pytest.approx(x)
            assert samples[1, j * n + i] == pytest.approx(y)


def test_sample_2d_includes_corners():
    samples = sample_2d(linspace, 3, BASE_DOMAIN)
    corners = {tuple(samples[:, k]) for k in (0, 2, 6, 8)}
    assert corners == {(0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (1.0, 1.0)}


def test_sample_3d_shape_and_ordering():
    domain = ((0.0, 1.0), (2.0, 3.0), (-5.0, 5.0))
    n = 3
    samples = sample_3d(linspace, n, domain)
    assert samples.shape == (3, n ** 3)
    xs = np.linspace(*domain[0], n)
    ys = np.linspace(*domain[1], n)
    zs = np.linspace(*domain[2], n)
    for k, z in enumerate(zs):
        for j, y in enumerate(ys):
            for i, x in enumerate(xs):
                column = samples[:, k * n * n + j * n + i]
                np.testing.assert_allclose(column, [x, y, z])


def test_samples_stay_in_domain():
    domain = ((-2.0, 0.5), (1.0, 1.5), (3.0, 7.0))
    samples = sample_3d(linspace, 5, domain)
    for axis, (low, high) in enumerate(domain):
        assert samples[axis].min() == pytest.approx(low)
        assert samples[axis].max() == pytest.approx(high)


def test_mismatched_sampling_function_rejected():
    with pytest.raises(ValueError):
        sample_2d(too_short, 4, BASE_DOMAIN)
    with pytest.raises(ValueError):
        sample_3d(too_short, 4, (BASE_DOMAIN[0], BASE_DOMAIN[1], (0.0, 1.0)))
    with pytest.raises(ValueError):
        sample_1d(too_short, 4, BASE_DOMAIN)