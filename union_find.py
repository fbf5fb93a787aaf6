# weighted quick union-find
class WeightedQuickUnionUF:
    """
    Weighted quick-union-find over a fixed universe of elements, with
    full path compression in find().

    Sets only ever merge; there is no way to split one again.
    """

    def __init__(self, n: int):
        """
        Creates 'n' singleton sets, one per element 0 through n-1.

        :param n: The number of elements.
        """
        if n <= 0:
            raise ValueError(f"n must be > 0, got {n}")

        # parent[i] = parent of element i, roots point at themselves
        self.parent = list(range(n))

        # size[i] = number of elements in the tree rooted at i
        self.size = [1] * n

        # number of disjoint sets
        self.count = n

    def __len__(self) -> int:
        return len(self.parent)

    def get_count(self) -> int:
        """
        Returns the number of disjoint sets.
        """
        return self.count

    def _validate(self, p: int) -> None:
        n = len(self.parent)
        if p < 0 or p >= n:
            raise IndexError(f"index {p} is not between 0 and {n-1}")

    def find(self, p: int) -> int:
        """
        Returns the representative of the set containing 'p' and links every
        element on the way to it directly under it.
        """
        self._validate(p)

        root = p
        while root != self.parent[root]:
            root = self.parent[root]

        while p != root:
            next_p = self.parent[p]
            self.parent[p] = root
            p = next_p

        return root

    def connected(self, p: int, q: int) -> bool:
        """
        Returns true if 'p' and 'q' are in the same set.
        """
        self._validate(p)
        self._validate(q)
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        """
        Merges the set containing 'p' with the set containing 'q'.
        """
        self._validate(p)
        self._validate(q)

        rootP = self.find(p)
        rootQ = self.find(q)

        if rootP == rootQ:
            return

        # smaller tree goes under the larger root, ties keep rootP
        if self.size[rootP] < self.size[rootQ]:
            self.parent[rootP] = rootQ
            self.size[rootQ] += self.size[rootP]
        else:
            self.parent[rootQ] = rootP
            self.size[rootP] += self.size[rootQ]

        self.count -= 1
