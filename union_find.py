#######################################################################################
# weighted quick union-find (union by size + path compression)
class WeightedQuickUnionUF:
    """
    Disjoint-set structure over the elements 0 .. n-1.

    Components are merged by size (the smaller tree is hung under the
    larger one) and every find flattens the path it walked, so any
    sequence of m operations costs close to O(m log* n).
    """

    def __init__(self, n):
        """
        Creates 'n' singleton components, one per element.

        :param n: The number of elements, must be >= 1.
        """
        if n <= 0:
            raise ValueError("union-find needs at least one element")

        # parent[i] == i marks a root
        self.parent = list(range(n))

        # only meaningful for roots: number of elements below them
        self.size = [1] * n

        self.count = n

    def __len__(self):
        return len(self.parent)

    def get_count(self):
        """
        Returns the current number of components.
        """
        return self.count

    def _validate(self, p):
        n = len(self.parent)
        if p < 0 or p >= n:
            raise IndexError(f"element {p} is not between 0 and {n - 1}")

    def find(self, p):
        """
        Returns the root of the component holding 'p'. All elements on
        the walked path are re-pointed straight at that root.
        """
        self._validate(p)

        root = p
        while root != self.parent[root]:
            root = self.parent[root]

        while p != root:
            self.parent[p], p = root, self.parent[p]

        return root

    def connected(self, p, q):
        """
        True when 'p' and 'q' belong to the same component.
        """
        return self.find(p) == self.find(q)

    def union(self, p, q):
        """
        Merges the components of 'p' and 'q'. Returns False if they were
        already one component, True otherwise.
        """
        rootP = self.find(p)
        rootQ = self.find(q)

        if rootP == rootQ:
            return False

        if self.size[rootP] < self.size[rootQ]:
            rootP, rootQ = rootQ, rootP

        # rootP is now the larger tree
        self.parent[rootQ] = rootP
        self.size[rootP] += self.size[rootQ]

        self.count -= 1
        return True
