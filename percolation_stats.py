"""
Monte Carlo estimate of the site percolation threshold of an n by n grid.

Each trial opens uniformly random blocked sites of a fresh SquarePercolation
until it percolates, and records the fraction of sites open at that moment.

    python percolation_stats.py 200 100 --seed 42
"""
import argparse
import logging
import math
import sys
from typing import Optional

import numpy as np

from square_percolation import SquarePercolation

logger = logging.getLogger(__name__)

# two-sided 95% quantile of the standard normal
CONFIDENCE_95 = 1.96

# log a progress line every this many trials
PROGRESS_EVERY = 50


def run_trial(n: int, rng: np.random.Generator) -> float:
    """
    Runs a single trial on a fresh n by n grid and returns its percolation
    threshold, the fraction of sites open when it first percolates.

    Blocked sites are picked by rejection sampling: an already open site is
    simply drawn again. That stays cheap while a good share of the grid is
    blocked, which always holds well before a grid percolates.
    """
    simulator = SquarePercolation(n)
    while not simulator.percolates():
        row = int(rng.integers(1, n + 1))
        col = int(rng.integers(1, n + 1))
        while simulator.isOpen(row, col):
            row = int(rng.integers(1, n + 1))
            col = int(rng.integers(1, n + 1))
        simulator.open_site(row, col)

    return simulator.numberOfOpenSites() / (n * n)


class PercolationStats:
    """
    Runs 'trials' independent percolation trials on n by n grids and
    summarises the thresholds they record.

    :param n: The grid size.
    :param trials: The number of trials.
    :param rng: Random generator to draw sites from. Built from 'seed' when
        not given.
    :param seed: Seed for the generator built when 'rng' is None.
    """

    def __init__(
        self,
        n: int,
        trials: int,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ):
        if n <= 0 or trials <= 0:
            raise ValueError(
                f"grid size n and trials count must be positive integers, got n={n}, trials={trials}"
            )

        self.gridSize = n
        self.trialCount = trials
        self._rng = rng if rng is not None else np.random.default_rng(seed)

        self.trialResults = np.empty(trials, dtype=float)
        for i in range(trials):
            self.trialResults[i] = run_trial(n, self._rng)
            if (i + 1) % PROGRESS_EVERY == 0:
                logger.info("n=%d progress: %d/%d trials", n, i + 1, trials)

        logger.debug("n=%d thresholds: %s", n, self.trialResults)

    @property
    def results(self) -> np.ndarray:
        """Thresholds in trial order."""
        return self.trialResults.copy()

    def mean(self) -> float:
        return float(np.mean(self.trialResults))

    def stddev(self) -> float:
        """
        Sample standard deviation of the thresholds. Undefined for a single
        trial, which raises ValueError instead of returning nan.
        """
        if self.trialCount < 2:
            raise ValueError("stddev is undefined for a single trial")
        return float(np.std(self.trialResults, ddof=1))

    def confidenceLo(self) -> float:
        return self.mean() - (CONFIDENCE_95 * self.stddev()) / math.sqrt(self.trialCount)

    def confidenceHi(self) -> float:
        return self.mean() + (CONFIDENCE_95 * self.stddev()) / math.sqrt(self.trialCount)

    def confidence_interval(self):
        return self.confidenceLo(), self.confidenceHi()

    def report(self, file=None) -> None:
        # everything is computed before the first line goes out
        mean = self.mean()
        stddev = self.stddev()
        lo, hi = self.confidence_interval()

        out = file if file is not None else sys.stdout
        print(f"{'mean:':<34}= {mean}", file=out)
        print(f"{'stddev:':<34}= {stddev}", file=out)
        print(f"{'95% confidence interval:':<34}= {lo}, {hi}", file=out)


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {number}")
    return number


def configure_logging(verbosity: int) -> None:
    if verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Estimate the percolation threshold of an n x n grid by Monte Carlo simulation."
    )
    parser.add_argument('n', type=positive_int, help="Size of the square grid (n x n).")
    parser.add_argument('trials', type=positive_int, help="The number of Monte Carlo trials to perform.")
    parser.add_argument('--seed', type=int, default=None, help="Seed for the random generator.")
    parser.add_argument('-v', '--verbose', action='count', default=0, help="Log progress to stderr (-vv for debug).")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.trials < 2:
        parser.error("trials must be at least 2 to estimate a standard deviation")

    stats = PercolationStats(args.n, args.trials, seed=args.seed)
    stats.report()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
