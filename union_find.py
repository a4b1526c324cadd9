import numpy as np
from numba import njit, config

# Enable Numba disk caching for faster subsequent runs
config.CACHE_DIR = '.numba_cache'


@njit(cache=True)
def find_root(parent, p):
    root = p
    while parent[root] != root:
        root = parent[root]
    while p != root:
        next_p = parent[p]
        parent[p] = root
        p = next_p
    return root

@njit(cache=True)
def union_sized(parent, size, p, q):
    rootP = find_root(parent, p)
    rootQ = find_root(parent, q)
    if rootP == rootQ:
        return False
    # smaller tree goes under the larger one
    if size[rootP] < size[rootQ]:
        parent[rootP] = rootQ
        size[rootQ] += size[rootP]
    else:
        parent[rootQ] = rootP
        size[rootP] += size[rootQ]
    return True


# weighted quick union-find
class WeightedQuickUnionUF:
    """
    A class for the Weighted Quick-Union-Find data structure
    with path compression.
    """

    def __init__(self, n: int):
        """
        Initializes an empty union-find data structure with 'n' sites
        indexed 0 through n-1. Each site is initially in its own component.

        :param n: The number of sites.
        """
        if n <= 0:
            raise ValueError(f"n must be > 0, got {n}")

        # self.parent[i] = parent of site i
        self.parent = np.arange(n, dtype=np.int64)

        # self.size[i] = number of sites in the tree rooted at i
        self.size = np.ones(n, dtype=np.int64)

        self.count = n

    def __len__(self) -> int:
        return len(self.parent)

    def get_count(self) -> int:
        """
        Returns the number of disjoint sets.
        """
        return self.count

    def _validate(self, p: int):
        n = len(self.parent)
        if p < 0 or p >= n:
            raise IndexError(f"index {p} is not between 0 and {n-1}")

    def find(self, p: int) -> int:
        """
        Returns the root (canonical element) of the set containing site 'p'.
        Every node on the path is relinked directly to the root.
        """
        self._validate(p)
        return int(find_root(self.parent, p))

    def connected(self, p: int, q: int) -> bool:
        self._validate(p)
        self._validate(q)
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int):
        """
        Merges the set containing site 'p' with the set containing site 'q'.
        """
        self._validate(p)
        self._validate(q)

        if union_sized(self.parent, self.size, p, q):
            self.count -= 1
