"""Exhaustive checks from theory/ run on the smaller universes.

The theory scripts cover larger universes when run directly; here every
family of r-sets is checked for the cases that finish in seconds.
"""

import importlib.util
import os

import pytest

THEORY_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "theory")


def load_theory(filename):
    path = os.path.join(THEORY_DIR, filename)
    module_spec = importlib.util.spec_from_file_location(filename[:-3].lstrip("0123456789_"), path)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


lemmas = load_theory("01_compression_lemmas.py")
theorem = load_theory("02_kruskal_katona.py")


@pytest.mark.parametrize("n, r", [(4, 1), (4, 2), (5, 2)])
def test_compression_lemmas_hold_for_every_family(n, r):
    checked, changed, failures = lemmas.verify_lemmas(n, r)
    assert checked > 0 and changed > 0
    assert failures == []


@pytest.mark.parametrize("n, r", [(4, 2), (5, 2), (5, 3)])
def test_every_family_compresses_to_the_bound(n, r):
    runs, max_steps, failures = theorem.verify_theorem(n, r)
    assert runs == 2 ** len(theorem.r_sets(n, r))
    assert failures == []
