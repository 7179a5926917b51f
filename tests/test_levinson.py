import pytest

from specmath.levinson import levinson


def _toeplitz_apply(data, x):
    n = (len(data) - 1) // 2
    return [
        sum(data[n + r - c] * x[c] for c in range(n + 1))
        for r in range(n + 1)
    ]


@pytest.mark.parametrize(
    "data, y",
    [
        ([0.5, 4.0, 0.5], [1.0, 2.0]),
        ([0.1, 0.2, 0.3, 5.0, 0.3, 0.2, 0.1], [1.0, -1.0, 2.0, 0.5]),
        ([0.4, -0.2, 0.7, 6.0, 0.1, 0.9, -0.3], [3.0, 0.0, -2.0, 1.0]),
        ([1.0, 0.0, 0.0, 10.0, 0.0, 0.0, 1.0], [1.0, 0.0, 0.0, 0.0]),
    ],
)
def test_solution_satisfies_system(data, y):
    x = levinson(data, y)
    assert len(x) == (len(data) + 1) // 2
    for got, want in zip(_toeplitz_apply(data, x), y):
        assert got == pytest.approx(want, abs=1e-10)


def test_single_element_system():
    assert levinson([4.0], [2.0]) == pytest.approx([0.5])


def test_diagonal_matrix_scales_rhs():
    x = levinson([0.0, 0.0, 2.0, 0.0, 0.0], [2.0, 4.0, 6.0])
    assert x == pytest.approx([1.0, 2.0, 3.0])


def test_extra_rhs_values_are_ignored():
    data = [0.5, 4.0, 0.5]
    assert levinson(data, [1.0, 2.0, 99.0]) == pytest.approx(levinson(data, [1.0, 2.0]))


def test_empty_data_rejected():
    with pytest.raises(ValueError):
        levinson([], [1.0])


def test_short_rhs_rejected():
    with pytest.raises(ValueError):
        levinson([0.5, 4.0, 0.5], [1.0])