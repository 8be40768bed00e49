"""
Family Builders
===============

Builders for uniform families used as compression inputs in experiments
and tests.

Functions:
    all_r_sets          -- every r-subset of the universe
    random_family       -- k distinct random r-sets (seeded)
    star_family         -- r-sets through a fixed center
    lex_initial_segment -- first k r-sets in lexicographic order
    colex_final_segment -- last k r-sets in colex order

Author: Carmen Esteban
License: MIT
"""

import random
from itertools import combinations, islice
from math import comb

from kruskal_katona.colex import colex_unrank
from kruskal_katona.core import Family, InvalidFamily, check_universe


def _check_count(n, r, k, available=None):
    available = comb(n, r) if available is None else available
    if k < 0 or k > available:
        raise InvalidFamily(
            "cannot pick {} sets, only {} available for n={}, r={}".format(
                k, available, n, r))


def all_r_sets(n, r):
    check_universe(n)
    return Family(combinations(range(n), r), n, r)


def random_family(n, r, k, seed=42):
    """k distinct r-subsets of {0..n-1}, drawn uniformly with a fixed seed."""
    check_universe(n)
    _check_count(n, r, k)
    rng = random.Random(seed)
    ranks = rng.sample(range(comb(n, r)), k)
    return Family([colex_unrank(i, r) for i in ranks], n, r)


def star_family(n, r, center=0, k=None):
    """r-sets containing ``center``; the first k in lex order when k is given."""
    check_universe(n)
    if not 0 <= center < n:
        raise InvalidFamily("center {} outside universe of size {}".format(center, n))
    if r < 1:
        raise InvalidFamily("a star needs r >= 1, got {}".format(r))
    others = [x for x in range(n) if x != center]
    available = comb(n - 1, r - 1)
    k = available if k is None else k
    _check_count(n, r, k, available)
    sets = (frozenset(c) | {center} for c in combinations(others, r - 1))
    return Family(islice(sets, k), n, r)


def lex_initial_segment(n, r, k):
    check_universe(n)
    _check_count(n, r, k)
    return Family(islice(combinations(range(n), r), k), n, r)


def colex_final_segment(n, r, k):
    """The k colex-largest r-subsets of {0..n-1}."""
    check_universe(n)
    _check_count(n, r, k)
    total = comb(n, r)
    return Family([colex_unrank(i, r) for i in range(total - k, total)], n, r)
