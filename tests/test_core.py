"""Tests for Family construction and the error taxonomy."""

import numpy as np
import pytest

from kruskal_katona.core import (
    MAX_UNIVERSE_SIZE, Family, InvalidFamily, UniverseOverflow, finite_set,
)


class TestFamilyConstruction:

    def test_members_are_deduplicated(self):
        fam = Family([[0, 1], (1, 0), {0, 1}, [1, 2]], n=3)
        assert len(fam) == 2
        assert fam.r == 2

    def test_mixed_sizes_rejected(self):
        with pytest.raises(InvalidFamily):
            Family([[0, 1], [0, 1, 2]], n=4)

    def test_declared_size_mismatch_rejected(self):
        with pytest.raises(InvalidFamily):
            Family([[0, 1]], n=4, r=3)

    def test_element_outside_universe_rejected(self):
        with pytest.raises(InvalidFamily):
            Family([[0, 4]], n=4)

    def test_negative_element_rejected(self):
        with pytest.raises(InvalidFamily):
            finite_set([-1, 2])

    def test_non_int_element_rejected(self):
        with pytest.raises(InvalidFamily):
            Family([["a", "b"]], n=4)

    def test_universe_overflow(self):
        with pytest.raises(UniverseOverflow):
            Family([], n=MAX_UNIVERSE_SIZE + 1)

    def test_largest_universe_accepted(self):
        fam = Family([[0, MAX_UNIVERSE_SIZE - 1]], n=MAX_UNIVERSE_SIZE)
        assert fam.masks()[0] == np.uint64(1 + 2 ** 63)

    def test_negative_universe_rejected(self):
        with pytest.raises(InvalidFamily):
            Family([], n=-1)

    def test_invalid_family_is_value_error(self):
        assert issubclass(InvalidFamily, ValueError)

    def test_empty_family_defaults_to_size_zero(self):
        fam = Family([], n=5)
        assert fam.r == 0
        assert len(fam) == 0

    def test_empty_family_keeps_declared_size(self):
        assert Family([], n=5, r=3).r == 3

    def test_from_sets_infers_universe(self):
        fam = Family.from_sets([[0, 5], [1, 2]])
        assert fam.n == 6
        assert fam.r == 2


class TestFamilyBehaviour:

    def test_iteration_is_colex(self):
        fam = Family([[0, 3], [1, 2], [0, 1], [0, 2]], n=4)
        assert [sorted(s) for s in fam] == [[0, 1], [0, 2], [1, 2], [0, 3]]

    def test_contains_accepts_any_iterable(self):
        fam = Family([[0, 1]], n=3)
        assert [1, 0] in fam
        assert (0, 2) not in fam

    def test_equality_and_hash(self):
        a = Family([[0, 1], [1, 2]], n=3)
        b = Family([[2, 1], [1, 0]], n=3)
        assert a == b
        assert hash(a) == hash(b)
        assert a != Family([[0, 1], [1, 2]], n=4)

    def test_incidence_matrix(self):
        fam = Family([[0, 2], [1, 2]], n=4)
        mat = fam.incidence()
        assert mat.shape == (2, 4)
        assert mat.sum(axis=0).tolist() == [1, 1, 2, 0]

    def test_masks(self):
        fam = Family([[1, 2], [0, 1]], n=3)
        assert fam.masks().dtype == np.uint64
        assert fam.masks().tolist() == [3, 6]

    def test_with_members_keeps_universe_and_size(self):
        fam = Family([[0, 1]], n=5)
        other = fam.with_members([[3, 4]])
        assert other.n == 5 and other.r == 2
        with pytest.raises(InvalidFamily):
            fam.with_members([[0, 1, 2]])
