"""Benchmark cubic spline construction and field evaluation.

A spline is fitted once and then evaluated on fields of query points, as a
host simulation does at every step. Construction is O(n_knots); evaluation is
O(n_points * log(n_knots)).
"""

import time

import torch

from splinefield.spline import (
    cubic_spline_derivative,
    cubic_spline_evaluate,
    cubic_spline_fit,
)


def _knot_data(n_knots: int):
    x = torch.linspace(0, 1, n_knots, dtype=torch.float64)
    y = torch.sin(4 * torch.pi * x) * x * (1 - x)
    return x, y


def benchmark_fit(n_knots: int, n_iterations: int = 20) -> float:
    """Average spline construction time in milliseconds."""
    x, y = _knot_data(n_knots)

    # Warmup
    for _ in range(3):
        _ = cubic_spline_fit(x, y)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = cubic_spline_fit(x, y)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def benchmark_evaluate(
    n_knots: int, n_points: int, n_iterations: int = 20
) -> float:
    """Average time in milliseconds to evaluate value and two derivatives.

    Query points extend slightly past both ends so the clamping path is
    exercised as well.
    """
    spline = cubic_spline_fit(*_knot_data(n_knots))
    c = torch.rand(n_points, dtype=torch.float64) * 1.1 - 0.05

    def evaluate():
        cubic_spline_evaluate(spline, c)
        cubic_spline_derivative(spline, c, 1)
        cubic_spline_derivative(spline, c, 2)

    # Warmup
    for _ in range(3):
        evaluate()

    start = time.perf_counter()
    for _ in range(n_iterations):
        evaluate()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run construction and evaluation benchmarks."""
    knot_counts = [8, 32, 128, 512]
    point_counts = [1_000, 100_000, 1_000_000]

    print("Cubic Spline Benchmark")
    print("=" * 70)
    print(f"{'Knots':>8} {'Fit (ms)':>12}", end="")
    for n_points in point_counts:
        print(f" {f'Eval {n_points:,} (ms)':>20}", end="")
    print()
    print("-" * 70)

    for n_knots in knot_counts:
        print(f"{n_knots:>8} {benchmark_fit(n_knots):>12.3f}", end="")
        for n_points in point_counts:
            t = benchmark_evaluate(n_knots, n_points)
            print(f" {t:>20.3f}", end="")
        print()


if __name__ == "__main__":
    main()
