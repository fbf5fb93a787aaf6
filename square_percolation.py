import numpy as np

from union_find import WeightedQuickUnionUF


class SquarePercolation:
    """
    An n by n grid of sites, all blocked to start with. Sites are addressed
    by 1-indexed (row, col) pairs.

    Connectivity lives in a single union-find of n*n + 1 elements, the extra
    one being a virtual top joined to every open site of the first row. There
    is no virtual bottom, so a site is only ever reported full when water
    poured at the top can really reach it (no backwash). percolates() pays
    for that with a scan of the open bottom-row sites.
    """

    def __init__(self, n: int):
        if n <= 0:
            raise ValueError(f"n must be a positive integer, got {n}")

        self.gridSize = n
        self.gridSquare = n * n
        self.grid = np.zeros((n, n), dtype=bool)

        self.wqfFull = WeightedQuickUnionUF(self.gridSquare + 1)
        self.virtualTop = self.gridSquare

        self.openSite = 0

        # ids of open bottom-row sites, the only candidates for percolates()
        self._openBottom = []
        self._percolates = False

    @property
    def size(self) -> int:
        return self.gridSize

    # open the site (row, col) if it's not open yet
    def open_site(self, row: int, col: int) -> None:
        self.validState(row, col)

        if self.isOpen(row, col):
            return

        self.grid[row - 1][col - 1] = True
        self.openSite += 1

        flatIndex = self.flattenGrid(row, col)

        ## top row
        if row == 1:
            self.wqfFull.union(self.virtualTop, flatIndex)

        ## bottom row
        if row == self.gridSize:
            self._openBottom.append(flatIndex)

        ## left, right, up, down
        for r, c in ((row, col - 1), (row, col + 1), (row - 1, col), (row + 1, col)):
            if self.isOnGrid(r, c) and self.isOpen(r, c):
                self.wqfFull.union(flatIndex, self.flattenGrid(r, c))

    # is site (row, col) open?
    def isOpen(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return bool(self.grid[row - 1][col - 1])

    # is site (row, col) connected to the top row through open sites?
    def isFull(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return self.wqfFull.connected(self.flattenGrid(row, col), self.virtualTop)

    def percolates(self) -> bool:
        # opening is irreversible, so once true it stays true
        if not self._percolates:
            for idx in self._openBottom:
                if self.wqfFull.connected(idx, self.virtualTop):
                    self._percolates = True
                    break
        return self._percolates

    def numberOfOpenSites(self) -> int:
        return self.openSite

    def validState(self, row: int, col: int) -> None:
        if not self.isOnGrid(row, col):
            raise IndexError(
                f"site ({row}, {col}) is out of bounds for a {self.gridSize}x{self.gridSize} grid"
            )

    # 0-indexed union-find id of site (row, col)
    def flattenGrid(self, row: int, col: int) -> int:
        return self.gridSize * (row - 1) + (col - 1)

    def isOnGrid(self, row: int, col: int) -> bool:
        return 1 <= row <= self.gridSize and 1 <= col <= self.gridSize

    def __repr__(self) -> str:
        return (
            f"SquarePercolation(n={self.gridSize}, open={self.openSite}, "
            f"percolates={self.percolates()})"
        )
