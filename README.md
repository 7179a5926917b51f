# specmath

Small, dependency-free building blocks for spectral colour work.

## What is in it

- `specmath.vector`
  - `Vec3` – an immutable three-component vector (`x`, `y`, `z`) with
    component-wise `+`, `-`, `*`, `/` (by a vector or a number), negation,
    indexing, iteration and lexicographic ordering. Methods: `filled`,
    `sum`, `abssum`, `min`, `max`, `argmin`, `argmax`, `cast`, and the static
    `distance` and `distance2`. `str(v)` gives `{x, y, z}`.
  - `interpolate(point, a, b, f_a, f_b)` – linear interpolation between two
    samples.
- `specmath.constants` – the CIE 1931 colour-matching functions `X_CURVE`,
  `Y_CURVE`, `Z_CURVE` (360–830 nm in 1 nm steps, `WAVELENGTHS`), the
  `RGB_TO_XYZ` and `XYZ_TO_RGB` matrices (row-major tuples), `EPSILON`, and
  the π constants `PI`, `INV_PI`, `TWO_PI`, `INV_TWO_PI`.
- `specmath.levinson.levinson(data, y)` – solves a Toeplitz system by the
  Levinson recursion; `data` holds the `2N + 1` diagonals centred on index `N`.
- `specmath.colorimetry`
  - `xyz2rgb_unsafe` – CIE XYZ to linear sRGB, unclamped.
  - `xyz2cielab`, `xyz2cielab_f` – CIE XYZ (white at Y = 100) to CIELAB.
  - `sigmoid`, `sigmoid_polynomial` – the algebraic sigmoid and the sigmoid of
    a quadratic.
  - `real_fourier_moments_of(phases, values, n)` – real parts of the first `n`
    trigonometric moments.
  - `mese(phases, gamma, m)` – maximum-entropy spectral estimate from moments
    `gamma[0..m]`.
- `specmath.text`
  - `parse(kind, text)` – turns text into a value of `kind` (`int`, `float`,
    `bool` from `0`/`1`, `str`, …); raises `ValueError` on bad input.
  - `c_format(fmt, *args)` – printf-style formatting.
- `specmath.csvio` – typed readers for delimiter-separated text. Comment lines
  (starting with `#`) and empty lines give `None` and are skipped when loading;
  a column kind of `None` skips that field.
  - `parse_line`, `read_line`, `load_as_vector` – one value per column.
  - `parse_line_m`, `read_line_m`, `load_as_vector_m` – optional leading
    columns, then every remaining field collected into a list.
  - `CsvError` – raised when a line ends before all columns are read.
- `specmath.lazy` – `LazyValue` and `LazyPtr`, built on the first `get()`;
  `make_lazy` and `make_lazy_ptr` wrap a constructor. `LazyPtr.get` raises
  `RuntimeError` if the constructor returns `None`.
- `specmath.image.BaseImage` – a fixed-size grid of pixels stored row by row,
  with `width`, `height`, `pixels`, bounds-checked `at` and `put` (raising
  `IndexError`) and `copy`.

## Installation

```
pip install .
```

## Examples

```python
from specmath.vector import Vec3
from specmath.colorimetry import xyz2cielab, real_fourier_moments_of, mese

lab = xyz2cielab(Vec3(95.0489, 100.0, 108.884))   # white point -> L* = 100

phases = [-3.0, -1.5, 0.0, 1.5, 3.0]
values = [0.2, 0.4, 0.6, 0.4, 0.2]
moments = real_fourier_moments_of(phases, values, 3)
estimate = mese(phases, moments, 2)
```

```python
import io
from specmath.csvio import load_as_vector, parse_line_m

rows = load_as_vector(io.StringIO("r,g,b\n1,2,3\n4,5,6\n"), (int, int, int), skip=1)
# [(1, 2, 3), (4, 5, 6)]

parse_line_m("7,0.5,0.25", float, columns=(int,))
# ([0.5, 0.25], 7)
```

## What it does not do

This is a library only. It has no command-line tools, no lookup-table
generation or storage, no spectrum or illuminant types, no spectrum file
formats and no image loading or saving; `BaseImage` holds pixels in memory
only.

## Tests

```
pip install .[test]
pytest
```