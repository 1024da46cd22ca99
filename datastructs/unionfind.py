class UnionFind:
    """Disjoint sets over 0..n-1, union by size with path compression."""

    def __init__(self, n: int):
        self.parent = list(range(n))
        self.sizes = [1] * n
        self.groups = n

    def root(self, x: int) -> int:
        r = x
        while self.parent[r] != r:
            r = self.parent[r]
        while self.parent[x] != r:
            self.parent[x], x = r, self.parent[x]
        return r

    def unite(self, x: int, y: int) -> bool:
        """Merge the groups of x and y; False if already together."""
        x, y = self.root(x), self.root(y)
        if x == y:
            return False
        if self.sizes[x] > self.sizes[y]:
            x, y = y, x
        self.parent[x] = y
        self.sizes[y] += self.sizes[x]
        self.sizes[x] = 0
        self.groups -= 1
        return True

    def is_same(self, x: int, y: int) -> bool:
        return self.root(x) == self.root(y)

    def group_size(self, x: int) -> int:
        return self.sizes[self.root(x)]

    def __len__(self):
        return self.groups
