"""
Finite-size sweep of the percolation threshold.

Runs PercolationStats for a range of grid sizes L and extrapolates the mean
threshold to infinite size by a linear fit of p_c(L) against L**exponent.
For 2D site percolation the correction exponent is -1/nu = -3/4 and
p_c(inf) is about 0.5927.
"""
import argparse
import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np
from scipy.stats import linregress

from percolation_stats import PercolationStats, configure_logging, positive_int

logger = logging.getLogger(__name__)

FINITE_SIZE_EXPONENT = -3 / 4


@dataclass(frozen=True)
class SweepPoint:
    """
    Threshold statistics for one grid size.
    """
    n: int
    trials: int
    mean: float
    stddev: float
    confidence_lo: float
    confidence_hi: float
    elapsed_s: float


@dataclass(frozen=True)
class Extrapolation:
    """
    Linear fit of mean p_c against n**exponent. The intercept is the
    estimate of p_c at infinite size.
    """
    exponent: float
    pc_inf: float
    slope: float
    r_squared: float
    stderr: float


def sweep(
    sizes: Sequence[int],
    trials: int,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> List[SweepPoint]:
    """
    Runs 'trials' trials for every grid size in 'sizes', in order, drawing
    from one generator so a seed fixes the whole sweep.
    """
    if len(sizes) == 0:
        raise ValueError("sizes must be non-empty")
    if trials < 2:
        raise ValueError(f"trials must be >= 2, got {trials}")

    rng = rng if rng is not None else np.random.default_rng(seed)

    points = []
    for n in sizes:
        n = int(n)
        logger.info("simulate n = %d", n)
        t0 = time.time()
        stats = PercolationStats(n, trials, rng=rng)
        lo, hi = stats.confidence_interval()
        point = SweepPoint(
            n=n,
            trials=trials,
            mean=stats.mean(),
            stddev=stats.stddev(),
            confidence_lo=lo,
            confidence_hi=hi,
            elapsed_s=time.time() - t0,
        )
        logger.info("n = %d done in %.2fs, mean = %.6f", n, point.elapsed_s, point.mean)
        points.append(point)

    return points


def extrapolate_threshold(
    sizes: Sequence[float],
    means: Sequence[float],
    exponent: float = FINITE_SIZE_EXPONENT,
) -> Extrapolation:
    sizes = np.asarray(sizes, dtype=float)
    means = np.asarray(means, dtype=float)
    if sizes.shape != means.shape:
        raise ValueError("sizes and means must have the same length")
    if len(np.unique(sizes)) < 2:
        raise ValueError("need at least two distinct sizes to extrapolate")

    X_scaling = sizes ** exponent
    fit = linregress(X_scaling, means)

    return Extrapolation(
        exponent=exponent,
        pc_inf=float(fit.intercept),
        slope=float(fit.slope),
        r_squared=float(fit.rvalue ** 2),
        stderr=float(fit.intercept_stderr),
    )


def format_point(point: SweepPoint) -> str:
    return (
        f"n={point.n:<6d} mean={point.mean:.6f} std={point.stddev:.6f} "
        f"95% CI=[{point.confidence_lo:.6f}, {point.confidence_hi:.6f}] "
        f"runtime={point.elapsed_s:.2f}s"
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Sweep the percolation threshold over grid sizes and extrapolate to infinite size."
    )
    parser.add_argument('--Lmin', type=positive_int, default=10, help="Minimum size of the square grid.")
    parser.add_argument('--Lmax', type=positive_int, default=50, help="Maximum size of the square grid.")
    parser.add_argument('--Lstep', type=positive_int, default=10, help="Step size for increasing the grid size.")
    parser.add_argument('--t', type=positive_int, default=100, help="The number of Monte Carlo trials per size.")
    parser.add_argument('--seed', type=int, default=None, help="Seed for the random generator.")
    parser.add_argument('--exponent', type=float, default=FINITE_SIZE_EXPONENT, help="Finite-size scaling exponent.")
    parser.add_argument('-v', '--verbose', action='count', default=0, help="Log progress to stderr (-vv for debug).")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.Lmin > args.Lmax:
        parser.error(f"--Lmin ({args.Lmin}) must not exceed --Lmax ({args.Lmax})")
    if args.t < 2:
        parser.error("--t must be at least 2 to estimate a standard deviation")

    sizes = np.arange(args.Lmin, args.Lmax + 1, args.Lstep)

    print("="*60)
    print(f"System sizes (n): {args.Lmin} to {args.Lmax}, step {args.Lstep}")
    print(f"Trials per size: {args.t}")
    print("="*60)

    points = sweep(sizes, args.t, seed=args.seed)
    for point in points:
        print(format_point(point))

    if len(points) < 2:
        print("only one size simulated, skipping extrapolation")
        return 0

    fit = extrapolate_threshold([p.n for p in points], [p.mean for p in points], exponent=args.exponent)
    print(f"\n--- Extrapolation Results (exponent {fit.exponent:.2f}) ---")
    print(f"pc(infinity) = {fit.pc_inf:.6f} +/- {fit.stderr:.6f}, R^2 = {fit.r_squared:.4f}")
    print("-"*60)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
