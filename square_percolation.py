import numpy as np

from site_union_find import SiteUnionFind


def isInteger(value) -> bool:
    # bool is an int subclass but never a valid size or coordinate
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class InvalidArgument(ValueError):
    """Raised when a grid size or trial count is not a positive integer."""


class OutOfRange(IndexError):
    """Raised when a (row, col) site lies outside the n by n grid."""


class SquarePercolation:
    # create a n by n grid with all sites blocked
    def __init__(self, n: int):
        if not isInteger(n) or n <= 0:
            raise InvalidArgument(f"n must be a positive integer, got {n!r}")

        self.gridSize = int(n)
        self.gridSquare = self.gridSize * self.gridSize
        self.grid = np.zeros((self.gridSize, self.gridSize), dtype=bool)

        # wqfGrid has a virtual top and bottom, wqfFull only a virtual top.
        # isFull must not see the virtual bottom or it reports backwash.
        self.wqfGrid = SiteUnionFind(self.gridSquare + 2)
        self.wqfFull = SiteUnionFind(self.gridSquare + 1)

        self.virtualTop = 0
        self.virtualBottom = self.gridSquare + 1

        self.openSite = 0

    # open the site[row, col] if it's not open yet
    def open_site(self, row: int, col: int) -> None:
        self.validState(row, col)

        if self.isOpen(row, col):
            return

        self.grid[row - 1][col - 1] = True
        self.openSite += 1

        flatIndex = self.flattenGrid(row, col)

        ## top row
        if row == 1:
            self.wqfGrid.union(self.virtualTop, flatIndex)
            self.wqfFull.union(self.virtualTop, flatIndex)

        ## bottom row
        if row == self.gridSize:
            self.wqfGrid.union(self.virtualBottom, flatIndex)

        ## left, right, up, down
        for nRow, nCol in ((row, col - 1), (row, col + 1), (row - 1, col), (row + 1, col)):
            if self.isOnGrid(nRow, nCol) and self.isOpen(nRow, nCol):
                neighbour = self.flattenGrid(nRow, nCol)
                self.wqfGrid.union(flatIndex, neighbour)
                self.wqfFull.union(flatIndex, neighbour)

    # is site[row, col] open?
    def isOpen(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return bool(self.grid[row - 1][col - 1])

    # is site[row, col] connected to the top row through open sites?
    def isFull(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return self.wqfFull.connected(self.virtualTop, self.flattenGrid(row, col))

    def numberOfOpenSites(self) -> int:
        return self.openSite

    def percolates(self) -> bool:
        return self.wqfGrid.connected(self.virtualTop, self.virtualBottom)

    def validState(self, row: int, col: int):
        if not self.isOnGrid(row, col):
            raise OutOfRange(f"site ({row}, {col}) is outside the {self.gridSize}x{self.gridSize} grid")

    def flattenGrid(self, row: int, col: int) -> int:
        # index 0 is reserved for the virtual top
        return int(self.gridSize * (row - 1) + col)

    def isOnGrid(self, row: int, col: int) -> bool:
        if not (isInteger(row) and isInteger(col)):
            return False
        return 1 <= row <= self.gridSize and 1 <= col <= self.gridSize
