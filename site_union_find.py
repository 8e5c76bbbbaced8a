from scipy.cluster.hierarchy import DisjointSet


# union-find over a fixed set of integer sites
class SiteUnionFind:
    """
    Fixed-size front end to scipy's DisjointSet. Sites are the integers
    0 through n-1, all registered up front; scipy does the merging with
    union by size and path halving.
    """

    def __init__(self, n):
        """
        Registers the sites 0 through n-1 with a new DisjointSet.

        :param n: The number of sites, fixed for the lifetime of the object.
        """
        if n <= 0:
            raise ValueError("n must be > 0")

        self.n = n
        self.sets = DisjointSet(range(n))

    def get_count(self):
        """
        Number of components, as tracked by DisjointSet.n_subsets.
        """
        return self.sets.n_subsets

    def _validate(self, p):
        # DisjointSet would raise KeyError; keep IndexError for site indices
        if p < 0 or p >= self.n:
            raise IndexError(f"index {p} is not between 0 and {self.n-1}")

    def find(self, p):
        """
        Returns scipy's canonical root for the component holding site 'p'.
        """
        self._validate(p)
        return self.sets[p]

    def connected(self, p, q):
        self._validate(p)
        self._validate(q)
        return self.sets.connected(p, q)

    def union(self, p, q):
        """
        Delegates to DisjointSet.merge; merging sites already in one
        component is a no-op.
        """
        self._validate(p)
        self._validate(q)
        self.sets.merge(p, q)
