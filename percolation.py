"""
Site percolation on an n by n square grid.

Sites are addressed by 1-based (row, col) with (1, 1) at the top-left. Each
site has an id in the union-find universe:

    0              virtual top
    1 .. n*n       real sites, row-major: (row - 1) * n + col
    n*n + 1        virtual bottom

Two forests are kept. wqfGrid_TB links both virtual sites and answers
percolates(); wqfGrid_Top only links the virtual top and answers isFull(),
so sites reached through the virtual bottom are never reported full.
"""

import numpy as np

from union_find import WeightedQuickUnionUF

# Constants
BLOCKED = 0
OPEN = 1
VIRTUAL_TOP = 0


class Percolation:
    # create a n by n grid with all sites blocked
    def __init__(self, n: int):
        if n <= 0:
            raise ValueError(f"n must be a positive integer, got {n}")

        self.gridSize = n
        self.gridSquare = n * n

        # flat site states indexed by site id, virtual slots stay blocked
        self.grid = np.full(self.gridSquare + 2, BLOCKED, dtype=np.uint8)

        self.wqfGrid_TB = WeightedQuickUnionUF(self.gridSquare + 2)
        self.wqfGrid_Top = WeightedQuickUnionUF(self.gridSquare + 2)

        self.virtualTop = VIRTUAL_TOP
        self.virtualBottom = self.gridSquare + 1

        self.openSite = 0

    # open the site[i,j] if it's not open yet
    def open(self, row: int, col: int):
        self.validState(row, col)

        flatIndex = self.flattenGrid(row, col)

        if self.grid[flatIndex] == OPEN:
            return

        self.grid[flatIndex] = OPEN
        self.openSite += 1

        ## top row
        if row == 1:
            self.wqfGrid_TB.union(self.virtualTop, flatIndex)
            self.wqfGrid_Top.union(self.virtualTop, flatIndex)

        ## bottom row
        if row == self.gridSize:
            self.wqfGrid_TB.union(self.virtualBottom, flatIndex)

        # connect to open neighbours
        for nRow, nCol in self.neighbours(row, col):
            neighbour = self.flattenGrid(nRow, nCol)
            if self.grid[neighbour] == OPEN:
                self.wqfGrid_TB.union(flatIndex, neighbour)
                self.wqfGrid_Top.union(flatIndex, neighbour)

    # is site[i,j] open?
    def isOpen(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return bool(self.grid[self.flattenGrid(row, col)] == OPEN)

    # is site[i,j] open and reachable from the top row?
    def isFull(self, row: int, col: int) -> bool:
        self.validState(row, col)
        flatIndex = self.flattenGrid(row, col)
        if self.grid[flatIndex] != OPEN:
            return False
        return self.wqfGrid_Top.connected(self.virtualTop, flatIndex)

    def percolates(self) -> bool:
        return self.wqfGrid_TB.connected(self.virtualTop, self.virtualBottom)

    def numberOfOpenSites(self) -> int:
        return self.openSite

    def threshold(self) -> float:
        """Fraction of open sites, the p_c estimate once the grid percolates."""
        return self.openSite / self.gridSquare

    def validState(self, row: int, col: int):
        if not self.isOnGrid(row, col):
            raise IndexError(f"site ({row}, {col}) is outside 1..{self.gridSize}")

    def flattenGrid(self, row: int, col: int) -> int:
        return self.gridSize * (row - 1) + col

    def siteOf(self, siteId: int) -> tuple:
        """
        Inverse of flattenGrid. Virtual ids and anything else outside
        1..n*n have no site and raise IndexError.
        """
        if siteId < 1 or siteId > self.gridSquare:
            raise IndexError(f"id {siteId} is not a grid site (1..{self.gridSquare})")
        row, col = divmod(siteId - 1, self.gridSize)
        return row + 1, col + 1

    def neighbours(self, row: int, col: int) -> list:
        """Up, down, left, right, skipping those off the grid."""
        self.validState(row, col)
        candidates = [(row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)]
        return [(r, c) for r, c in candidates if self.isOnGrid(r, c)]

    def isOnGrid(self, row: int, col: int) -> bool:
        shiftRow = row - 1
        shiftCol = col - 1

        return (shiftRow >= 0 and shiftCol >= 0 and shiftRow < self.gridSize and shiftCol < self.gridSize)

    def report(self):
        print("="*60)
        print(f"PERCOLATION {self.gridSize} x {self.gridSize}")
        print("="*60)

        print(f"open sites = {self.numberOfOpenSites()} / {self.gridSquare}")
        print(f"open fraction = {self.threshold(): .6f}")
        print(f"percolates = {self.percolates()}")
        print("="*60)
