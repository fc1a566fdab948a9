"""
Demonstration: recover a known quadratic from noise-free samples.

Usage:
    python -m quadfit.demo [--points N] [--seed S] [--dtype float64|float32]
"""

import argparse

import numpy as np

from quadfit.quadratic import QuadraticFitter

# Reference curve the demo samples from
A_TRUE = 1.23
B_TRUE = -9.87
C_TRUE = 1e-2


def qfunc(x):
    """Evaluate the reference quadratic."""
    return A_TRUE * np.power(x, 2) + B_TRUE * x + C_TRUE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Fit a quadratic to samples of y = 1.23x^2 - 9.87x + 0.01'
    )
    parser.add_argument(
        '--points', '-n',
        type=int,
        default=8,
        help='Number of samples drawn on [-1, 1) (default: 8)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=0,
        help='Random seed for the x-values (default: 0)'
    )
    parser.add_argument(
        '--dtype',
        choices=('float64', 'float32'),
        default='float64',
        help='Floating-point precision of the fit'
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.points < 0:
        print(f"ERROR: --points must be non-negative, got {args.points}")
        return 1

    rng = np.random.default_rng(args.seed)
    fitter = QuadraticFitter(args.points, dtype=args.dtype)

    for i in range(args.points):
        x = rng.uniform(-1, 1)
        y = qfunc(x)
        fitter.add(x, y)
        print(f"Point {i}: ({x:.6g}, {y:.6g})")

    a, b, c = fitter.compute()

    print(f"a = {float(a):.6g}")
    print(f"b = {float(b):.6g}")
    print(f"c = {float(c):.6g}")

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
