"""Colour-space conversions, sigmoid polynomials and maximum-entropy spectral estimation."""

from __future__ import annotations

import cmath
import math
from typing import Sequence

from specmath.constants import EPSILON, INV_TWO_PI, XYZ_TO_RGB
from specmath.levinson import levinson
from specmath.vector import Vec3

XYZ_TO_CIELAB_XYZN: tuple[float, float, float] = (95.0489, 100.0, 108.8840)

_DELTA = 6.0 / 29.0
_F_TN = 4.0 / 29.0
_DELTA_DIV = 1.0 / (_DELTA * _DELTA)
_DELTA3 = _DELTA * _DELTA * _DELTA


def xyz2rgb_unsafe(xyz: Sequence[float]) -> Vec3:
    """Convert CIE XYZ to linear sRGB without clamping."""
    x, y, z = xyz
    r, g, b = (row[0] * x + row[1] * y + row[2] * z for row in XYZ_TO_RGB)
    return Vec3(r, g, b)


def xyz2cielab_f(t: float) -> float:
    """The CIELAB companding function: cube root above the linear-segment threshold."""
    if t - _DELTA3 > EPSILON:
        return t ** (1.0 / 3.0)
    return (t / 3.0) * _DELTA_DIV + _F_TN


def xyz2cielab(xyz: Sequence[float]) -> Vec3:
    """Convert CIE XYZ (white at Y = 100) to CIELAB."""
    x, y, z = xyz
    xn, yn, zn = XYZ_TO_CIELAB_XYZN
    f_x = xyz2cielab_f(x / xn)
    f_y = xyz2cielab_f(y / yn)
    f_z = xyz2cielab_f(z / zn)
    return Vec3(f_y * 116.0 - 16.0, (f_x - f_y) * 500.0, (f_y - f_z) * 200.0)


def sigmoid(x: float) -> float:
    """Algebraic sigmoid mapping the real line onto (0, 1)."""
    return 0.5 * x / math.sqrt(x * x + 1.0) + 0.5


def sigmoid_polynomial(x: float, coef: Sequence[float]) -> float:
    """Sigmoid of the quadratic ``coef[0] * x**2 + coef[1] * x + coef[2]``."""
    return sigmoid((coef[0] * x + coef[1]) * x + coef[2])


def real_fourier_moments_of(
    phases: Sequence[float], values: Sequence[float], n: int
) -> list[float]:
    """Real parts of the first ``n`` trigonometric moments of sampled values."""
    if not phases:
        raise ValueError("at least one phase sample is required")
    count = len(phases)
    return [
        sum(v * math.cos(i * p) for p, v in zip(phases, values)) / count
        for i in range(n)
    ]


def mese(phases: Sequence[float], gamma: Sequence[float], m: int) -> list[float]:
    """Maximum-entropy spectral estimate at ``phases`` from moments ``gamma[0..m]``."""
    if len(gamma) < m + 1:
        raise ValueError(f"need {m + 1} moments, got {len(gamma)}")
    moments = [INV_TWO_PI * g for g in gamma[: m + 1]]
    data = moments[:0:-1] + moments
    e0 = [1.0] + [0.0] * m
    q = levinson(data, e0)

    numerator = INV_TWO_PI * q[0]
    result = []
    for phase in phases:
        t = sum(INV_TWO_PI * qi * cmath.exp(-1j * i * phase) for i, qi in enumerate(q))
        result.append(numerator / (abs(t) ** 2))
    return result