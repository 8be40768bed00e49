"""
Shadows
=======

The (lower) shadow of a family of r-sets is the family of all (r-1)-sets
obtained by deleting one element from a member. The Kruskal-Katona theorem
says a family of m r-sets has a shadow of at least ``kruskal_katona_bound(m, r)``
sets, with equality for the colex initial segment.

Functions:
    shadow               -- lower shadow
    up_shadow            -- upper shadow inside the universe
    iterated_shadow      -- k-fold lower shadow
    shadow_size          -- |shadow(family)| without building a Family
    cascade              -- r-cascade representation of m
    kruskal_katona_bound -- minimum shadow size of m r-sets

Author: Carmen Esteban
License: MIT
"""

from math import comb

from kruskal_katona.core import Family


def _shadow_sets(family):
    out = set()
    for s in family.members:
        for x in s:
            out.add(s - {x})
    return out


def shadow(family):
    """All (r-1)-sets obtained by removing one element from a member.

    Parameters
    ----------
    family : Family
        A family of r-sets.

    Returns
    -------
    Family
        Family of (r-1)-sets over the same universe. For r = 0 the shadow
        is the empty family with r = 0.
    """
    if family.r == 0:
        return Family([], family.n, 0)
    return Family(_shadow_sets(family), family.n, family.r - 1)


def shadow_size(family):
    if family.r == 0:
        return 0
    return len(_shadow_sets(family))


def up_shadow(family):
    """All (r+1)-sets obtained by adding one universe element to a member.

    When r == n there are no (r+1)-subsets of the universe and a Family
    cannot carry a member size above n, so the result is the empty family
    with the input's member size r.
    """
    if family.r == family.n:
        return Family([], family.n, family.r)
    out = set()
    for s in family.members:
        for x in range(family.n):
            if x not in s:
                out.add(s | {x})
    return Family(out, family.n, family.r + 1)


def iterated_shadow(family, k):
    """Apply ``shadow`` k times; stops at r = 0."""
    if k < 0:
        raise ValueError("k must be >= 0, got {}".format(k))
    for _ in range(k):
        family = shadow(family)
    return family


# =====================================================================
# KRUSKAL-KATONA BOUND
# =====================================================================

def cascade(m, r):
    """r-cascade representation of m.

    Returns the list of pairs [(a_r, r), (a_{r-1}, r-1), ..., (a_t, t)] with
    a_r > a_{r-1} > ... > a_t >= t >= 1 and m = sum C(a_i, i). Every m >= 0
    has exactly one such representation; m = 0 gives the empty list.
    """
    if m < 0:
        raise ValueError("m must be >= 0, got {}".format(m))
    if r < 1:
        raise ValueError("r must be >= 1, got {}".format(r))
    terms = []
    i = r
    while m > 0 and i >= 1:
        a = i
        while comb(a + 1, i) <= m:
            a += 1
        terms.append((a, i))
        m -= comb(a, i)
        i -= 1
    return terms


def kruskal_katona_bound(m, r):
    """Minimum shadow size over all families of m r-sets.

    With m = sum C(a_i, i) in r-cascade form, the bound is
    sum C(a_i, i - 1).
    """
    if r == 0 or m == 0:
        return 0
    return sum(comb(a, i - 1) for a, i in cascade(m, r))
