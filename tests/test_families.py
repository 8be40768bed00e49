"""Tests for family builders and compression reports."""

from math import comb

import pytest

from kruskal_katona.core import InvalidFamily
from kruskal_katona.families import (
    all_r_sets, colex_final_segment, lex_initial_segment, random_family,
    star_family,
)
from kruskal_katona.initial_segment import initial_segment
from kruskal_katona.report import compare_families, compression_report, element_degrees


class TestBuilders:

    def test_all_r_sets(self):
        fam = all_r_sets(5, 2)
        assert len(fam) == 10 and fam.r == 2

    def test_random_family_is_seeded(self):
        a = random_family(8, 3, 12, seed=7)
        b = random_family(8, 3, 12, seed=7)
        assert a == b
        assert len(a) == 12

    def test_random_family_too_large(self):
        with pytest.raises(InvalidFamily):
            random_family(4, 2, 7)

    def test_star_family(self):
        fam = star_family(6, 3, center=2)
        assert len(fam) == comb(5, 2)
        assert all(2 in s for s in fam)
        assert len(star_family(6, 3, k=4)) == 4
        with pytest.raises(InvalidFamily):
            star_family(6, 3, center=6)

    def test_lex_initial_segment(self):
        fam = lex_initial_segment(5, 2, 4)
        assert {tuple(sorted(s)) for s in fam} == {(0, 1), (0, 2), (0, 3), (0, 4)}

    def test_colex_final_segment(self):
        fam = colex_final_segment(5, 2, 4)
        assert {tuple(sorted(s)) for s in fam} == {(0, 4), (1, 4), (2, 4), (3, 4)}
        assert colex_final_segment(5, 2, 10) == initial_segment(2, 10, 5)


class TestReport:

    def test_element_degrees(self):
        fam = star_family(5, 2, center=0)
        assert element_degrees(fam).tolist() == [4, 1, 1, 1, 1]

    def test_report_on_star(self):
        rep = compression_report(colex_final_segment(5, 2, 4))
        assert rep['shadow_before'] == 5
        assert rep['shadow_after'] == rep['kk_bound'] == 4
        assert rep['excess_before'] == 1
        assert rep['optimal']
        assert rep['measure_after'] < rep['measure_before']
        assert sum(rep['degrees_after']) == rep['size'] * rep['r']

    def test_compare_families_ranks_by_excess(self):
        reports = compare_families({
            "segment": initial_segment(2, 4, 5),
            "star": colex_final_segment(5, 2, 4),
        })
        assert [rep['name'] for rep in reports] == ["star", "segment"]
        assert reports[1]['num_steps'] == 0
