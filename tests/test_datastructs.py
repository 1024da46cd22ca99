import math
import operator
import random

from datastructs.graph import Dijkstra, Graph
from datastructs.segtree import LazySegmentTree, SegmentTree, max_add, min_add
from datastructs.sparse_table import MaxSparseTable, MinSparseTable
from datastructs.unionfind import UnionFind


def test_unionfind():
    uf = UnionFind(5)
    assert len(uf) == 5
    assert uf.unite(0, 1)
    assert not uf.unite(1, 0)
    assert len(uf) == 4
    assert uf.root(0) == uf.root(1)
    assert uf.root(0) != uf.root(2)
    assert uf.is_same(0, 1)
    assert not uf.is_same(0, 2)
    assert uf.group_size(0) == 2
    assert uf.group_size(4) == 1
    for i in range(2, 5):
        uf.unite(0, i)
    assert uf.group_size(0) == 5
    assert uf.group_size(3) == 5
    assert len(uf) == 1


def test_sum_segtree_all_ranges():
    v = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3]
    st = SegmentTree(v, operator.add, 0)
    for l in range(len(v)):
        for r in range(l, len(v) + 1):
            assert st.query(l, r) == sum(v[l:r])
    st.set(4, 10)
    v[4] = 10
    assert st.get(4) == 10
    assert st.query() == sum(v)
    assert st.query(3, 6) == 1 + 10 + 9


def test_segtree_from_size():
    st = SegmentTree(5, min, math.inf)
    assert st.query() == math.inf
    st.set(2, 7)
    st.set(4, 3)
    assert st.query(0, 3) == 7
    assert st.query() == 3


def _check_all(v, seg, agg):
    for l in range(len(v)):
        for r in range(l + 1, len(v) + 1):
            assert seg.query(l, r) == agg(v[l:r]), (l, r)


def test_lazy_range_add_range_max():
    v = [3, 1, 4, 1, 5, 9, 2, 6]
    seg = max_add(v)
    _check_all(v, seg, max)
    seg.apply_range(1, 4, 6)
    for i in range(1, 4):
        v[i] += 6
    _check_all(v, seg, max)
    seg.apply_range(3, 8, 2)
    for i in range(3, 8):
        v[i] += 2
    _check_all(v, seg, max)
    seg.apply_at(0, -5)
    v[0] -= 5
    seg.set(7, 100)
    v[7] = 100
    _check_all(v, seg, max)
    assert [seg.get(i) for i in range(len(v))] == v


def test_lazy_random_against_list():
    rng = random.Random(1)
    v = [rng.randint(-50, 50) for _ in range(23)]
    seg = min_add(v)
    for _ in range(200):
        l = rng.randint(0, len(v))
        r = rng.randint(l, len(v))
        if rng.random() < 0.5:
            x = rng.randint(-10, 10)
            seg.apply_range(l, r, x)
            for i in range(l, r):
                v[i] += x
        else:
            assert seg.query(l, r) == (min(v[l:r]) if l < r else math.inf)


def test_lazy_binary_search():
    v = [2, 1, 3, 5, 1, 4]
    seg = LazySegmentTree(v, operator.add, 0, operator.add, operator.add, 0)
    # no maps are applied here, only the binary searches
    for l in range(len(v) + 1):
        for limit in range(0, 17):
            r = seg.max_right(l, lambda s: s <= limit)
            expected = l
            while expected < len(v) and sum(v[l:expected + 1]) <= limit:
                expected += 1
            assert r == expected, (l, limit)
    for r in range(len(v) + 1):
        for limit in range(0, 17):
            l = seg.min_left(r, lambda s: s <= limit)
            expected = r
            while expected > 0 and sum(v[expected - 1:r]) <= limit:
                expected -= 1
            assert l == expected, (r, limit)


def test_sparse_tables():
    v = [-7, 4, 8, 1, 6, 7, 10, -1, 0, 4, 9, 11]
    mn = MinSparseTable(v)
    mx = MaxSparseTable(v)
    for i in range(len(v)):
        for j in range(i, len(v)):
            assert v[mn.query(i, j)] == min(v[i:j + 1])
            assert v[mx.query(i, j)] == max(v[i:j + 1])


def test_dijkstra_directed():
    g = Graph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(0, 2, 4)
    g.add_edge(1, 2, 2)
    g.add_edge(2, 3, 1)
    g.add_edge(1, 3, 5)
    d = Dijkstra(g)
    assert d.build(0) == [0, 1, 3, 4]
    assert d.restore(3) == [0, 1, 2, 3]
    assert d.restore(2) == [0, 1, 2]


def test_dijkstra_unreachable():
    g = Graph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(0, 2, 4)
    g.add_edge(2, 0, 1)
    g.add_edge(1, 2, 2)
    g.add_edge(3, 1, 1)
    g.add_edge(3, 2, 5)
    d = Dijkstra(g)
    d.build(1)
    assert d.dists == [3, 0, 2, math.inf]
    assert d.restore(3) == []
    assert [e.to for e in g.inv[1]] == [0, 3]


def test_undirected_graph():
    g = Graph.undirected(3)
    g.add_edge(0, 1, 2)
    g.add_edge(1, 2, 2)
    g.set_node_weight(1, "hub")
    assert len(g) == 3
    assert g.node_weight(1) == "hub"
    assert [e.to for e in g[1]] == [0, 2]
    d = Dijkstra(g)
    assert d.build(2) == [4, 2, 0]
    assert d.restore(0) == [2, 1, 0]
