"""
Colexicographic Order
=====================

Total order on finite sets of non-negative integers: A < B iff the largest
element of the symmetric difference A ^ B lies in B. Sets of different
sizes are comparable.

Reading a set as the binary number sum(2**x for x in A) turns colex into the
usual order on integers, so ``colex_key`` doubles as a sort key.

Functions:
    colex_key      -- integer sort key
    colex_lt       -- strict comparison
    colex_le       -- non-strict comparison
    colex_cmp      -- three-way comparison (-1, 0, 1)
    colex_sorted   -- sort any collection of sets
    colex_max      -- colex-largest set of a collection
    colex_rank     -- position among all |A|-sets
    colex_unrank   -- inverse of colex_rank
    r_sets         -- all r-subsets of {0..n-1} in colex order

Author: Carmen Esteban
License: MIT
"""

from math import comb


def colex_key(s):
    """Integer whose binary digits are the elements of s."""
    key = 0
    for x in s:
        key |= 1 << x
    return key


def colex_lt(a, b):
    """True iff a comes strictly before b in colex order."""
    diff = set(a) ^ set(b)
    if not diff:
        return False
    return max(diff) in b


def colex_le(a, b):
    return not colex_lt(b, a)


def colex_cmp(a, b):
    """-1 if a < b, 0 if a == b, 1 if a > b (colex)."""
    ka, kb = colex_key(a), colex_key(b)
    return (ka > kb) - (ka < kb)


def colex_sorted(sets, reverse=False):
    return sorted(sets, key=colex_key, reverse=reverse)


def colex_max(sets):
    """Colex-largest set, or None for an empty collection."""
    return max(sets, key=colex_key, default=None)


# =====================================================================
# RANKING
# =====================================================================

def colex_rank(s):
    """Number of |s|-sets that come strictly before s in colex order.

    With the elements sorted a_1 < a_2 < ... < a_r, the rank is
    sum over i of C(a_i, i).
    """
    return sum(comb(a, i) for i, a in enumerate(sorted(s), start=1))


def colex_unrank(rank, r, n=None):
    """The r-set with the given colex rank.

    Greedy: for i = r down to 1 take the largest a with C(a, i) <= rank.
    With ``n`` given, the rank must address an r-subset of {0..n-1}.
    """
    if rank < 0:
        raise ValueError("rank must be >= 0, got {}".format(rank))
    if r < 0:
        raise ValueError("r must be >= 0, got {}".format(r))
    if r == 0 and rank > 0:
        raise ValueError("the empty set is the only 0-set, got rank {}".format(rank))
    if n is not None and rank >= comb(n, r):
        raise ValueError("rank {} out of range for {}-subsets of {} elements".format(
            rank, r, n))
    elements = []
    for i in range(r, 0, -1):
        a = i - 1
        while comb(a + 1, i) <= rank:
            a += 1
        rank -= comb(a, i)
        elements.append(a)
    return frozenset(elements)


def r_sets(n, r):
    """All r-subsets of {0, ..., n-1}, in colex order."""
    if r < 0 or r > n:
        return []
    return [colex_unrank(i, r) for i in range(comb(n, r))]
