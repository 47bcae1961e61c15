import random

import pytest

from algobasis.union_find import UnionFindPathCompression, UnionFindRank, UnionFindSize


def test_fresh_elements_are_their_own_roots():
    for uf in (UnionFindRank(6), UnionFindPathCompression(6), UnionFindSize(6)):
        assert len(uf) == 6
        assert [uf.find(p) for p in range(6)] == list(range(6))
        assert not uf.is_connected(0, 1)


def test_union_connects_and_is_transitive():
    for uf in (UnionFindRank(10), UnionFindPathCompression(10), UnionFindSize(10)):
        uf.union(0, 1)
        uf.union(1, 2)
        uf.union(5, 6)
        assert uf.is_connected(0, 2)
        assert uf.is_connected(2, 0)
        assert uf.is_connected(6, 5)
        assert not uf.is_connected(0, 5)
        assert not uf.is_connected(3, 4)


def test_union_of_same_set_is_harmless():
    for uf in (UnionFindRank(4), UnionFindPathCompression(4), UnionFindSize(4)):
        uf.union(0, 1)
        root = uf.find(0)
        uf.union(1, 0)
        uf.union(0, 0)
        assert uf.find(1) == root
        assert uf.find(0) == root


def test_find_is_idempotent():
    for uf in (UnionFindRank(50), UnionFindPathCompression(50), UnionFindSize(50)):
        rng = random.Random(7)
        for _ in range(60):
            uf.union(rng.randrange(50), rng.randrange(50))
        for p in range(50):
            root = uf.find(p)
            assert uf.find(root) == root


@pytest.mark.parametrize("bad", [-1, 5, 100])
def test_out_of_range_raises(bad):
    for uf in (UnionFindRank(5), UnionFindPathCompression(5), UnionFindSize(5)):
        with pytest.raises(IndexError):
            uf.find(bad)
        with pytest.raises(IndexError):
            uf.union(0, bad)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        UnionFindRank(-1)
    with pytest.raises(ValueError):
        UnionFindPathCompression(-1)
    with pytest.raises(ValueError):
        UnionFindSize(-1)


def test_implementations_agree_on_random_operations():
    n = 200
    rng = random.Random(42)
    forests = [UnionFindRank(n), UnionFindPathCompression(n), UnionFindSize(n)]
    for _ in range(150):
        a, b = rng.randrange(n), rng.randrange(n)
        for uf in forests:
            uf.union(a, b)
    for _ in range(500):
        a, b = rng.randrange(n), rng.randrange(n)
        answers = {uf.is_connected(a, b) for uf in forests}
        assert len(answers) == 1


def test_chain_joins_everything():
    n = 30
    for uf in (UnionFindRank(n), UnionFindPathCompression(n), UnionFindSize(n)):
        for p in range(n - 1):
            uf.union(p, p + 1)
        roots = {uf.find(p) for p in range(n)}
        assert len(roots) == 1