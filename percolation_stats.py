import math

import loguru
import numpy as np

from square_percolation import InvalidArgument, SquarePercolation, isInteger

logger = loguru.logger

CONF95 = 1.96  # 95% confidence constant


class PercolationStats:
    """
    Monte Carlo estimate of the site percolation threshold of an n by n grid.

    Each trial opens uniformly random blocked sites of a fresh grid until it
    percolates and records the fraction of open sites. With a single trial
    stddev() is 0.0 and the confidence interval collapses onto the mean.
    """

    def __init__(self, n: int, trials: int, seed=None):
        if not isInteger(n) or n <= 0:
            raise InvalidArgument(f"grid size n must be a positive integer, got {n!r}")
        if not isInteger(trials) or trials <= 0:
            raise InvalidArgument(f"trials count must be a positive integer, got {trials!r}")

        self.gridSize = int(n)
        self.trialCount = int(trials)
        self.rng = np.random.default_rng(seed)
        self.trialResults = None

        if self.trialCount == 1:
            logger.warning("a single trial gives no spread, stddev() will be 0.0")

        self.runTrials()

    def runTrials(self):
        if self.trialResults is not None:
            raise RuntimeError("trials have already been run")

        results = []
        sites = self.gridSize * self.gridSize

        for i in range(self.trialCount):
            simulator = SquarePercolation(self.gridSize)
            while not simulator.percolates():
                row, col = self.rng.integers(1, self.gridSize + 1, size=2)
                # already open sites are redrawn
                if not simulator.isOpen(row, col):
                    simulator.open_site(row, col)

            result = simulator.numberOfOpenSites() / sites
            logger.debug(f"trial {i + 1}/{self.trialCount}: n={self.gridSize} percolated at {result:.6f}")
            results.append(result)

        self.trialResults = np.array(results, dtype=float)
        self.trialResults.flags.writeable = False

    # sample mean of percolation threshold
    def mean(self) -> float:
        return float(np.mean(self.trialResults))

    # sample standard deviation of percolation threshold
    def stddev(self) -> float:
        if self.trialCount == 1:
            return 0.0
        return float(np.std(self.trialResults, ddof=1))

    def _halfWidth(self) -> float:
        return (CONF95 * self.stddev()) / math.sqrt(self.trialCount)

    # low endpoint of 95% confidence interval
    def confidenceLow(self) -> float:
        return self.mean() - self._halfWidth()

    # high endpoint of 95% confidence interval
    def confidenceHigh(self) -> float:
        return self.mean() + self._halfWidth()

    def confidence_interval(self):
        return self.confidenceLow(), self.confidenceHigh()

    def report(self):
        print("=" * 60)
        print(f"STATS REPORT n = {self.gridSize}, trials = {self.trialCount}")
        print("=" * 60)

        print(f"mean                    = {self.mean()}")
        print(f"stddev                  = {self.stddev()}")
        lo, hi = self.confidence_interval()
        print(f"95% confidence interval = [{lo}, {hi}]")
        print("=" * 60)
