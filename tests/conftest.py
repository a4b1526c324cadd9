import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from percolation import Percolation


@pytest.fixture
def grid3() -> Percolation:
    return Percolation(3)


@pytest.fixture
def make_grid():
    def _make_grid(n, sites=()):
        grid = Percolation(n)
        for row, col in sites:
            grid.open(row, col)
        return grid

    return _make_grid
