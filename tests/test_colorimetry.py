import math

import pytest

from specmath.colorimetry import (
    XYZ_TO_CIELAB_XYZN,
    mese,
    real_fourier_moments_of,
    sigmoid,
    sigmoid_polynomial,
    xyz2cielab,
    xyz2cielab_f,
    xyz2rgb_unsafe,
)
from specmath.constants import RGB_TO_XYZ
from specmath.vector import Vec3


def _uniform_phases(count):
    return [2.0 * math.pi * k / count - math.pi for k in range(count)]


@pytest.mark.parametrize("rgb", [(1.0, 0.0, 0.0), (0.2, 0.5, 0.9), (0.3, 0.3, 0.3)])
def test_xyz2rgb_inverts_rgb_to_xyz(rgb):
    xyz = [sum(m * c for m, c in zip(row, rgb)) for row in RGB_TO_XYZ]
    result = xyz2rgb_unsafe(Vec3(*xyz))
    assert list(result) == pytest.approx(list(rgb), abs=1e-4)


def test_xyz2rgb_is_linear():
    a = Vec3(0.1, 0.2, 0.3)
    b = Vec3(0.4, 0.1, 0.05)
    combined = xyz2rgb_unsafe(a + b * 2.0)
    expected = xyz2rgb_unsafe(a) + xyz2rgb_unsafe(b) * 2.0
    assert list(combined) == pytest.approx(list(expected))


def test_white_point_is_full_lightness_neutral():
    lab = xyz2cielab(XYZ_TO_CIELAB_XYZN)
    assert list(lab) == pytest.approx([100.0, 0.0, 0.0], abs=1e-9)


def test_black_is_zero_lab():
    lab = xyz2cielab((0.0, 0.0, 0.0))
    assert list(lab) == pytest.approx([0.0, 0.0, 0.0], abs=1e-9)


def test_cielab_f_cube_root_branch():
    assert xyz2cielab_f(8.0) == pytest.approx(2.0)


def test_cielab_f_is_nearly_continuous_at_threshold():
    threshold = (6.0 / 29.0) ** 3
    below = xyz2cielab_f(threshold - 1e-7)
    above = xyz2cielab_f(threshold + 1e-5)
    assert above == pytest.approx(below, abs=1e-3)


def test_cielab_f_monotonic():
    samples = [i / 200.0 for i in range(201)]
    values = [xyz2cielab_f(t) for t in samples]
    assert all(b >= a for a, b in zip(values, values[1:]))


def test_lightness_increases_with_y():
    dim = xyz2cielab((10.0, 10.0, 10.0))
    bright = xyz2cielab((50.0, 50.0, 50.0))
    assert bright.x > dim.x


def test_sigmoid_centre():
    assert sigmoid(0.0) == 0.5


@pytest.mark.parametrize("x", [0.1, 1.0, 3.5, 100.0])
def test_sigmoid_symmetry_and_bounds(x):
    assert sigmoid(x) + sigmoid(-x) == pytest.approx(1.0)
    assert 0.0 < sigmoid(-x) < 0.5 < sigmoid(x) < 1.0


def test_sigmoid_polynomial_constant_and_linear():
    assert sigmoid_polynomial(123.0, (0.0, 0.0, 0.7)) == sigmoid(0.7)
    assert sigmoid_polynomial(0.4, (0.0, 1.0, 0.0)) == pytest.approx(sigmoid(0.4))


def test_moments_of_constant_signal():
    phases = _uniform_phases(64)
    moments = real_fourier_moments_of(phases, [3.0] * 64, 5)
    assert len(moments) == 5
    assert moments[0] == pytest.approx(3.0)
    assert moments[1:] == pytest.approx([0.0] * 4, abs=1e-12)


def test_moments_of_cosine():
    phases = _uniform_phases(64)
    values = [math.cos(2.0 * p) for p in phases]
    moments = real_fourier_moments_of(phases, values, 4)
    assert moments == pytest.approx([0.0, 0.0, 0.5, 0.0], abs=1e-12)


def test_moments_need_samples():
    with pytest.raises(ValueError):
        real_fourier_moments_of([], [], 3)


def test_mese_reconstructs_constant():
    phases = _uniform_phases(32)
    result = mese(phases, [2.5, 0.0, 0.0, 0.0], 3)
    assert result == pytest.approx([2.5] * 32)


@pytest.mark.parametrize("gamma", [[1.0, 0.3], [1.0, 0.3, 0.1], [2.0, -0.5, 0.2, 0.1]])
def test_mese_reproduces_its_moments(gamma):
    phases = _uniform_phases(1000)
    m = len(gamma) - 1
    spectrum = mese(phases, gamma, m)
    assert min(spectrum) > 0.0
    moments = real_fourier_moments_of(phases, spectrum, m + 1)
    assert moments == pytest.approx(gamma, abs=1e-6)


def test_mese_uses_only_first_moments():
    phases = _uniform_phases(16)
    assert mese(phases, [1.0, 0.3, 0.2], 1) == pytest.approx(mese(phases, [1.0, 0.3], 1))


def test_mese_rejects_too_few_moments():
    with pytest.raises(ValueError):
        mese([0.0], [1.0, 0.2], 3)