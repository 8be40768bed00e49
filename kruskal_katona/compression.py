"""
UV-Compressions
===============

A shift pair (U, V) of disjoint, equal-size, nonempty sets with
max(U) < max(V) is a *useful* compression. Applied to a set A that contains
V and misses U, it swaps V out for U; the result comes earlier in colex
order because the largest changed element leaves A.

On a family the move is only made when its image is not already a member,
so the family never loses sets.

Classes:
    ShiftPair -- a (U, V) pair

Functions:
    is_useful_compression -- usefulness predicate
    compress              -- per-set compression
    compress_family       -- family-level compression with the conflict rule
    is_compressed         -- family is stable under (U, V)
    moved_members         -- members that compress_family moves
    compression_conflicts -- members blocked by the conflict rule

Author: Carmen Esteban
License: MIT
"""

from dataclasses import dataclass

from kruskal_katona.core import InvalidFamily


@dataclass(frozen=True)
class ShiftPair:
    """A compression move (U, V). Elements are stored as frozensets."""
    u: frozenset
    v: frozenset

    def __post_init__(self):
        object.__setattr__(self, "u", frozenset(self.u))
        object.__setattr__(self, "v", frozenset(self.v))

    @property
    def size(self):
        return len(self.u)

    @property
    def is_useful(self):
        return is_useful_compression(self.u, self.v)

    def sort_key(self):
        """Deterministic tie-break: |U|, then sorted U, then sorted V."""
        return (len(self.u), tuple(sorted(self.u)), tuple(sorted(self.v)))

    def as_lists(self):
        return sorted(self.u), sorted(self.v)

    def __repr__(self):
        return "ShiftPair(u={}, v={})".format(sorted(self.u), sorted(self.v))


def is_useful_compression(u, v):
    """Both nonempty, disjoint, equal size, and max(u) < max(v)."""
    u, v = frozenset(u), frozenset(v)
    if not u or not v:
        return False
    if u & v or len(u) != len(v):
        return False
    return max(u) < max(v)


def compress(u, v, a):
    """Per-set compression: (a - v) | u when v <= a and a misses u, else a."""
    u, v, a = frozenset(u), frozenset(v), frozenset(a)
    if v <= a and not (u & a):
        return (a - v) | u
    return a


def _check_pair(u, v, family):
    u, v = frozenset(u), frozenset(v)
    for x in u | v:
        if x < 0 or x >= family.n:
            raise InvalidFamily(
                "shift pair element {} outside universe of size {}".format(
                    x, family.n))
    return u, v


def _image(u, v, family):
    """Map member -> new member under the conflict rule."""
    members = family.members
    out = {}
    for a in members:
        b = compress(u, v, a)
        if b != a and b in members:
            out[a] = a
        else:
            out[a] = b
    return out


def compress_family(u, v, family):
    """Compress every member of ``family`` with (u, v).

    A member A moves to compress(u, v, A) unless that image is already a
    different member, in which case A stays. Moved images are never members
    of the input, and compress is injective on the sets it changes, so the
    result has exactly ``len(family)`` members.

    Parameters
    ----------
    u, v : iterable of int
        The shift pair. Usefulness is the caller's responsibility.
    family : Family

    Returns
    -------
    Family
        A new family over the same universe and member size.

    Raises
    ------
    InvalidFamily
        If u or v contain elements outside the universe.
    """
    u, v = _check_pair(u, v, family)
    return family.with_members(_image(u, v, family).values())


def is_compressed(u, v, family):
    """True iff compress_family(u, v, family) == family."""
    u, v = _check_pair(u, v, family)
    return not moved_members(u, v, family)


def moved_members(u, v, family):
    """Members that compress_family moves, mapped to their images."""
    u, v = frozenset(u), frozenset(v)
    return {a: b for a, b in _image(u, v, family).items() if a != b}


def compression_conflicts(u, v, family):
    """Members whose compressed image is already in the family."""
    u, v = frozenset(u), frozenset(v)
    members = family.members
    blocked = set()
    for a in members:
        b = compress(u, v, a)
        if b != a and b in members:
            blocked.add(a)
    return frozenset(blocked)
