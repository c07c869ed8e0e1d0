import numpy as np
import random
import math
import time
import argparse

from union_find import WeightedQuickUnionUF

# z-score of the two-sided 95% normal interval
CONFIDENCE_Z = 1.96


class Percolation:
    """
    An n-by-n grid of sites, each blocked or open.

    Sites are addressed 1-indexed as (row, col). Site (r, c) is element
    n*(r-1) + c of the union-find universe, element 0 is the virtual top
    and n*n + 1 the virtual bottom, so the whole system percolates exactly
    when the two virtual sites share a component.

    A second union-find without the virtual bottom answers isFull, which
    keeps bottom-row sites from looking full through the virtual bottom
    once the system percolates.
    """

    # create a n by n grid with all sites blocked
    def __init__(self, n: int):
        if n <= 0: raise ValueError("n must be a positive integer")

        self.gridSize = n
        self.gridSquare = n * n
        self.grid = np.zeros((n, n), dtype=bool)

        self.virtualTop = 0
        self.virtualBottom = self.gridSquare + 1

        self.wqfGrid = WeightedQuickUnionUF(self.gridSquare + 2)  # top and bottom
        self.wqfFull = WeightedQuickUnionUF(self.gridSquare + 1)  # top only

        self.openSite = 0

    # open the site[row, col] if it's not open yet
    def open(self, row: int, col: int) -> None:
        if self.isOpen(row, col):
            return

        self.grid[row - 1][col - 1] = True
        self.openSite += 1

        site = self.flattenGrid(row, col)

        ## up, down, right, left
        for nRow, nCol in ((row - 1, col), (row + 1, col), (row, col + 1), (row, col - 1)):
            if self.isOnGrid(nRow, nCol) and self.isOpen(nRow, nCol):
                neighbour = self.flattenGrid(nRow, nCol)
                self.wqfGrid.union(site, neighbour)
                self.wqfFull.union(site, neighbour)

        ## top row
        if row == 1:
            self.wqfGrid.union(self.virtualTop, site)
            self.wqfFull.union(self.virtualTop, site)

        ## bottom row
        if row == self.gridSize:
            self.wqfGrid.union(self.virtualBottom, site)

    # is site[row, col] open?
    def isOpen(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return bool(self.grid[row - 1][col - 1])

    # is site[row, col] open and connected to the top row?
    def isFull(self, row: int, col: int) -> bool:
        if not self.isOpen(row, col):
            return False
        return self.wqfFull.connected(self.virtualTop, self.flattenGrid(row, col))

    def percolates(self) -> bool:
        return self.wqfGrid.connected(self.virtualTop, self.virtualBottom)

    def numberOfOpenSites(self) -> int:
        return self.openSite

    def validState(self, row: int, col: int):
        if not self.isOnGrid(row, col):
            raise IndexError(f"site ({row}, {col}) is outside the {self.gridSize}x{self.gridSize} grid")

    def flattenGrid(self, row: int, col: int) -> int:
        return self.gridSize * (row - 1) + col

    def isOnGrid(self, row: int, col: int) -> bool:
        return 1 <= row <= self.gridSize and 1 <= col <= self.gridSize


class PercolationStats:
    """
    Monte Carlo estimate of the percolation threshold of an n-by-n grid.

    Every trial starts from a fully blocked Percolation, opens uniformly
    random sites (with replacement) until it percolates and records the
    fraction of open sites. All statistics are computed from those
    fractions.
    """

    def __init__(self, n: int, trials: int, seed=None):

        if (n <= 0 or trials <= 0):
            raise ValueError("grid size n and trials count must be positive integers")

        self.trialCount = trials
        self.gridSize = n
        self.rng = random.Random(seed)
        self.trialResults = np.empty(trials, dtype=float)

        for i in range(self.trialCount):
            self.trialResults[i] = self.run_trial()

        self.trialResults.setflags(write=False)

    def run_trial(self) -> float:
        simulator = Percolation(self.gridSize)
        while not simulator.percolates():
            row = self.rng.randint(1, self.gridSize)
            col = self.rng.randint(1, self.gridSize)
            simulator.open(row, col)

        return simulator.numberOfOpenSites() / (self.gridSize * self.gridSize)

    def mean(self) -> float:
        return float(np.mean(self.trialResults))

    def stddev(self) -> float:
        # sample deviation is undefined for a single trial
        if self.trialCount == 1:
            return math.nan
        return float(np.std(self.trialResults, ddof=1))

    def confidenceLo(self) -> float:
        return self.mean() - CONFIDENCE_Z * self.stddev() / math.sqrt(self.trialCount)

    def confidenceHi(self) -> float:
        return self.mean() + CONFIDENCE_Z * self.stddev() / math.sqrt(self.trialCount)

    def trials_confidence_interval(self):
        return self.confidenceLo(), self.confidenceHi()

    def report(self):
        print(f"mean                    = {self.mean():.6f}")
        print(f"stddev                  = {self.stddev():.6f}")
        lo, hi = self.trials_confidence_interval()
        print(f"95% confidence interval = [{lo:.6f}, {hi:.6f}]")


def build_parser():
    parser = argparse.ArgumentParser(
        description="Estimate the percolation threshold of an n-by-n grid by Monte Carlo simulation."
    )

    parser.add_argument(
        'n',
        type=int,
        help="Size of the square grid (n x n)."
    )

    parser.add_argument(
        'trials',
        type=int,
        help="The number of Monte Carlo trials to perform."
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help="Seed for the random site picker, for reproducible runs."
    )

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    t0 = time.time()
    try:
        stats = PercolationStats(args.n, args.trials, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))
    t1 = time.time()

    stats.report()
    print("------")
    print(f"Total time: {t1 - t0:.6f} secs. (for n={args.n}, trials={args.trials})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
