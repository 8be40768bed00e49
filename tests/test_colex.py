"""Tests for the colexicographic order and ranking."""

from itertools import combinations, product

import pytest

from kruskal_katona.colex import (
    colex_cmp, colex_key, colex_le, colex_lt, colex_max, colex_rank,
    colex_sorted, colex_unrank, r_sets,
)


def all_subsets(n):
    return [frozenset(c) for k in range(n + 1) for c in combinations(range(n), k)]


class TestColexOrder:

    def test_largest_differing_element_decides(self):
        assert colex_lt({0, 1}, {0, 2})
        assert colex_lt({0, 2}, {1, 2})
        assert colex_lt({1, 2}, {0, 3})
        assert not colex_lt({0, 3}, {1, 2})

    def test_different_sizes(self):
        assert colex_lt({0, 1, 2}, {3})
        assert colex_lt(set(), {0})
        assert colex_lt({0, 1}, {2})

    def test_irreflexive(self):
        for s in all_subsets(4):
            assert not colex_lt(s, s)
            assert colex_le(s, s)

    def test_trichotomy(self):
        sets = all_subsets(4)
        for a, b in product(sets, repeat=2):
            outcomes = [colex_lt(a, b), a == b, colex_lt(b, a)]
            assert outcomes.count(True) == 1

    def test_transitive(self):
        sets = all_subsets(4)
        for a, b, c in product(sets, repeat=3):
            if colex_lt(a, b) and colex_lt(b, c):
                assert colex_lt(a, c)

    def test_agrees_with_key(self):
        sets = all_subsets(5)
        for a, b in product(sets, repeat=2):
            assert colex_lt(a, b) == (colex_key(a) < colex_key(b))
            assert colex_cmp(a, b) == (colex_key(a) > colex_key(b)) - (colex_key(a) < colex_key(b))

    def test_sorted_and_max(self):
        sets = [frozenset(s) for s in ({2, 3}, {0, 1}, {0, 3})]
        assert colex_sorted(sets) == [{0, 1}, {0, 3}, {2, 3}]
        assert colex_sorted(sets, reverse=True)[0] == {2, 3}
        assert colex_max(sets) == {2, 3}
        assert colex_max([]) is None


class TestColexRank:

    def test_r_sets_order(self):
        assert [sorted(s) for s in r_sets(4, 2)] == [
            [0, 1], [0, 2], [1, 2], [0, 3], [1, 3], [2, 3]]

    def test_rank_values(self):
        assert colex_rank({0, 1}) == 0
        assert colex_rank({0, 3}) == 3
        assert colex_rank({2, 3}) == 5
        assert colex_rank(set()) == 0

    def test_unrank_inverts_rank(self):
        for s in combinations(range(7), 3):
            assert colex_unrank(colex_rank(s), 3) == frozenset(s)

    def test_r_sets_are_sorted_by_key(self):
        sets = r_sets(6, 3)
        assert len(sets) == 20
        assert sets == colex_sorted(sets)

    def test_r_sets_out_of_range(self):
        assert r_sets(3, 4) == []
        assert r_sets(3, 0) == [frozenset()]

    def test_unrank_rejects_bad_ranks(self):
        with pytest.raises(ValueError):
            colex_unrank(-1, 2)
        with pytest.raises(ValueError):
            colex_unrank(1, 0)
        with pytest.raises(ValueError):
            colex_unrank(6, 2, n=4)
        assert colex_unrank(0, 0) == frozenset()
        assert colex_unrank(5, 2, n=4) == {2, 3}
