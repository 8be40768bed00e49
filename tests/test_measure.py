"""Tests for the family measure."""

from kruskal_katona.compression import compress_family
from kruskal_katona.core import Family
from kruskal_katona.families import random_family
from kruskal_katona.measure import measure, measure_drop, set_measure
from kruskal_katona.scheduler import useful_pairs


class TestMeasure:

    def test_small_family(self):
        assert measure(Family([[0, 1], [0, 2]], n=3)) == 3 + 5

    def test_empty_family(self):
        assert measure(Family([], n=4, r=2)) == 0

    def test_set_measure(self):
        assert set_measure({0, 3}) == 9
        assert set_measure(set()) == 0

    def test_large_universe_exact(self):
        fam = Family([[63], [62]], n=64)
        assert measure(fam) == 2 ** 63 + 2 ** 62

    def test_measure_drop(self):
        fam = Family([[1, 2], [2, 3]], n=4)
        assert measure_drop({0}, {2}, fam) == 18 - 12

    def test_strict_decrease_on_changing_compressions(self):
        for seed in range(6):
            fam = random_family(7, 3, 10, seed=seed)
            m = measure(fam)
            for p in useful_pairs(7):
                out = compress_family(p.u, p.v, fam)
                if out != fam:
                    assert measure(out) < m
                else:
                    assert measure(out) == m
