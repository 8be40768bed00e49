"""
Colex Initial Segments
======================

A family of r-sets is an initial segment when it holds exactly the first
|F| r-sets in colex order, i.e. whenever A is a member every r-set B that is
colex-smaller than A is a member too.

A family compressed under every useful pair is an initial segment: if A is
in F and B < A is a missing r-set, then (B - A, A - B) is useful (the top of
A ^ B lies in A) and it moves A onto B, which is not in F.
``find_uncompressed_witness`` returns that pair.

Functions:
    initial_segment           -- first k r-sets in colex order
    is_initial_segment        -- membership test
    find_uncompressed_witness -- useful pair proving F is not an initial segment
    check_initial_segment     -- raise NotInitialSegment on failure

Author: Carmen Esteban
License: MIT
"""

from math import comb

from kruskal_katona.colex import colex_rank, colex_unrank
from kruskal_katona.compression import ShiftPair
from kruskal_katona.core import Family, InvalidFamily, NotInitialSegment


def initial_segment(r, k, n=None):
    """The first k r-sets in colex order as a Family.

    Parameters
    ----------
    r : int
        Member size.
    k : int
        Number of members.
    n : int, optional
        Universe size. Defaults to the smallest universe holding the sets.

    Raises
    ------
    InvalidFamily
        If the universe has fewer than k r-sets.
    """
    if r < 0 or k < 0:
        raise InvalidFamily("r and k must be >= 0, got r={}, k={}".format(r, k))
    if r == 0 and k > 1:
        raise InvalidFamily("there is only one 0-set, asked for {}".format(k))
    sets = [colex_unrank(i, r) for i in range(k)]
    if n is None:
        n = max((max(s) + 1 for s in sets if s), default=r)
    elif comb(n, r) < k:
        raise InvalidFamily(
            "only {} {}-subsets of a {}-element universe, asked for {}".format(
                comb(n, r), r, n, k))
    return Family(sets, n, r)


def is_initial_segment(family, r):
    """True iff ``family`` is the colex initial segment of r-sets of its size."""
    if len(family) == 0:
        return True
    if family.r != r:
        return False
    ranks = {colex_rank(s) for s in family.members}
    return max(ranks) == len(family) - 1


def find_uncompressed_witness(family):
    """A useful pair ``family`` is not compressed under, or None.

    Takes the colex-largest member A and the colex-first r-set B missing
    from the family. If B comes before A, the pair (B - A, A - B) moves A
    onto B, so the family is not compressed under it.
    """
    if len(family) == 0:
        return None
    ranks = {colex_rank(s): s for s in family.members}
    top = max(ranks)
    if top == len(family) - 1:
        return None
    missing = next(i for i in range(top) if i not in ranks)
    a = ranks[top]
    b = colex_unrank(missing, family.r)
    return ShiftPair(b - a, a - b)


def check_initial_segment(family, r=None):
    """Raise NotInitialSegment unless ``family`` is an initial segment of r-sets.

    The raised error carries the witness pair from
    ``find_uncompressed_witness`` when there is one.
    """
    r = family.r if r is None else r
    if len(family) and family.r != r:
        raise NotInitialSegment(
            "family has {}-sets, expected {}-sets".format(family.r, r))
    witness = find_uncompressed_witness(family)
    if witness is not None:
        u, v = witness.as_lists()
        raise NotInitialSegment(
            "family is not a colex initial segment: not compressed under "
            "U={} V={}".format(u, v), witness=witness)
