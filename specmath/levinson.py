"""Levinson recursion for solving Toeplitz linear systems."""

from __future__ import annotations

from typing import Sequence


def levinson(data: Sequence[float], y: Sequence[float]) -> list[float]:
    """Solve ``T x = y`` where ``T`` is Toeplitz with ``T[r][c] = data[N + r - c]``.

    ``data`` holds the ``2N + 1`` diagonals of the matrix, centred on index ``N``;
    the first ``N + 1`` entries of ``y`` form the right-hand side.
    """
    if not data:
        raise ValueError("Toeplitz data must not be empty")
    n = (len(data) - 1) // 2
    if len(y) < n + 1:
        raise ValueError(f"right-hand side needs at least {n + 1} values, got {len(y)}")

    t = 1.0 / data[n]
    forward = [t]
    backward = [t]
    solution = [0.0] * (n + 1)
    solution[0] = y[0] * t

    for i in range(1, n + 1):
        ef = sum(data[n + i - j] * f for j, f in enumerate(forward))
        ex = sum(data[n + i - j] * solution[j] for j in range(i))
        eb = sum(data[n - j - 1] * b for j, b in enumerate(backward))

        div = 1.0 / (1.0 - ef * eb)
        next_forward = [div * f for f in forward] + [0.0]
        next_backward = [-eb * div * f for f in forward] + [0.0]
        for j, b in enumerate(backward, start=1):
            next_forward[j] -= ef * div * b
            next_backward[j] += div * b

        mul = y[i] - ex
        for j in range(i):
            solution[j] += mul * next_backward[j]
        solution[i] = mul * next_backward[i]

        forward = next_forward
        backward = next_backward

    return solution