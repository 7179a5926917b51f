[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "specmath"
version = "0.1.0"
description = "Spectral colour maths: CIE colour matching data, CIELAB conversion, Fourier moments, maximum-entropy spectra and small I/O helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["spectrum", "colour", "color", "cie", "cielab", "fourier", "mese", "levinson", "toeplitz"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["specmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
