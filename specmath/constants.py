"""Shared numeric constants: tolerances, colour matrices, spectral range and curves."""

import math

from specmath.cie_x import X_CURVE
from specmath.cie_yz import Y_CURVE, Z_CURVE

PI: float = math.pi
INV_PI: float = 1.0 / PI
TWO_PI: float = 2.0 * PI
INV_TWO_PI: float = 1.0 / TWO_PI

EPSILON: float = 1e-6

FLOAT_FORMAT: str = "%.3f"

# Row-major 3x3 matrices for linear sRGB <-> CIE XYZ (D65).
RGB_TO_XYZ: tuple[tuple[float, float, float], ...] = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

XYZ_TO_RGB: tuple[tuple[float, float, float], ...] = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)

WAVELENGTHS_START: int = 360
WAVELENGTHS_END: int = 830
WAVELENGTHS_STEP: int = 1

WAVELENGTHS: tuple[float, ...] = tuple(
    float(wl) for wl in range(WAVELENGTHS_START, WAVELENGTHS_END + 1, WAVELENGTHS_STEP)
)

CURVES_ARRAY_LEN: int = len(X_CURVE)

__all__ = [
    "PI",
    "INV_PI",
    "TWO_PI",
    "INV_TWO_PI",
    "EPSILON",
    "FLOAT_FORMAT",
    "RGB_TO_XYZ",
    "XYZ_TO_RGB",
    "WAVELENGTHS_START",
    "WAVELENGTHS_END",
    "WAVELENGTHS_STEP",
    "WAVELENGTHS",
    "X_CURVE",
    "Y_CURVE",
    "Z_CURVE",
    "CURVES_ARRAY_LEN",
]