"""Spectral colour maths: CIE data, colour conversions, Fourier moments, MESE and small helpers."""

__version__ = "0.1.0"
__all__ = [
    "vector",
    "constants",
    "levinson",
    "colorimetry",
    "text",
    "csvio",
    "lazy",
    "image",
]