"""Core definitions: universe bounds, finite sets, Family, errors."""

import numpy as np

from kruskal_katona.colex import colex_key, colex_sorted


# Members are packed into uint64 masks, one bit per universe element.
MAX_UNIVERSE_SIZE = 64


# =====================================================================
# ERRORS
# =====================================================================

class KruskalKatonaError(Exception):
    """Base class for all errors raised by this package."""


class InvalidFamily(KruskalKatonaError, ValueError):
    """Members are not all of the declared size, or leave the universe."""


class UniverseOverflow(KruskalKatonaError, OverflowError):
    """Requested universe is larger than MAX_UNIVERSE_SIZE."""


class NotInitialSegment(KruskalKatonaError):
    """A family failed the colex initial segment characterization.

    ``witness`` is a useful ShiftPair the family is not compressed under,
    or None when the failure is a size mismatch.
    """

    def __init__(self, message, witness=None):
        super().__init__(message)
        self.witness = witness


class InvariantViolation(KruskalKatonaError, AssertionError):
    """A compression step broke one of its guaranteed invariants."""


class IterationLimitExceeded(KruskalKatonaError, RuntimeError):
    """The scheduler ran past its iteration cap."""


# =====================================================================
# UNIVERSE AND SETS
# =====================================================================

def check_universe(n):
    """Validate a universe size and return it as an int."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidFamily("universe size must be an int, got {!r}".format(n))
    n = int(n)
    if n < 0:
        raise InvalidFamily("universe size must be >= 0, got {}".format(n))
    if n > MAX_UNIVERSE_SIZE:
        raise UniverseOverflow(
            "universe size {} exceeds the supported maximum {}".format(
                n, MAX_UNIVERSE_SIZE))
    return n


def finite_set(elements, n=None):
    """Build a frozenset of universe elements, checking range when n is given."""
    s = set()
    for x in elements:
        if isinstance(x, bool) or not isinstance(x, (int, np.integer)):
            raise InvalidFamily("set elements must be ints, got {!r}".format(x))
        x = int(x)
        if x < 0 or (n is not None and x >= n):
            raise InvalidFamily(
                "element {} outside universe 0..{}".format(x, "n-1" if n is None else n - 1))
        s.add(x)
    return frozenset(s)


# =====================================================================
# FAMILY
# =====================================================================

class Family:
    """An immutable family of r-subsets of the universe {0, ..., n-1}.

    Members are stored as a frozenset of frozensets, so duplicates in the
    input collapse. Iteration yields members in colex order.

    Parameters
    ----------
    members : iterable of iterables of int
        The member sets.
    n : int
        Universe size.
    r : int, optional
        Common member size. Inferred from the members when omitted; an
        empty family without ``r`` gets ``r = 0``.

    Raises
    ------
    InvalidFamily
        When members have differing sizes, disagree with ``r``, or contain
        elements outside the universe.
    UniverseOverflow
        When ``n > MAX_UNIVERSE_SIZE``.
    """

    __slots__ = ("_members", "_n", "_r", "_sorted")

    def __init__(self, members, n, r=None):
        n = check_universe(n)
        sets = frozenset(finite_set(m, n) for m in members)
        sizes = {len(s) for s in sets}
        if len(sizes) > 1:
            raise InvalidFamily(
                "family members have mixed sizes {}".format(sorted(sizes)))
        if r is None:
            r = sizes.pop() if sizes else 0
        elif sizes and sizes != {r}:
            raise InvalidFamily(
                "family members have size {}, expected {}".format(
                    sizes.pop(), r))
        if r < 0 or r > n:
            raise InvalidFamily(
                "member size {} impossible in a universe of {}".format(r, n))
        self._members = sets
        self._n = n
        self._r = r
        self._sorted = None

    @classmethod
    def from_sets(cls, sets, n=None, r=None):
        """Build a Family, inferring the universe as max element + 1."""
        sets = [finite_set(s) for s in sets]
        if n is None:
            n = max((max(s) + 1 for s in sets if s), default=0)
            if r is not None:
                n = max(n, r)
        return cls(sets, n, r)

    @property
    def n(self):
        return self._n

    @property
    def r(self):
        return self._r

    @property
    def members(self):
        return self._members

    def with_members(self, members):
        """New Family over the same universe and member size."""
        return Family(members, self._n, self._r)

    def sorted(self):
        """Members as a list in colex order."""
        if self._sorted is None:
            self._sorted = tuple(colex_sorted(self._members))
        return list(self._sorted)

    def masks(self):
        """Members in colex order as an array of uint64 bitmasks."""
        return np.array([colex_key(s) for s in self.sorted()], dtype=np.uint64)

    def incidence(self):
        """Boolean matrix of shape (len(self), n); rows follow colex order."""
        mat = np.zeros((len(self._members), self._n), dtype=bool)
        for i, s in enumerate(self.sorted()):
            mat[i, list(s)] = True
        return mat

    def __len__(self):
        return len(self._members)

    def __iter__(self):
        return iter(self.sorted())

    def __contains__(self, item):
        return frozenset(item) in self._members

    def __eq__(self, other):
        if not isinstance(other, Family):
            return NotImplemented
        return (self._n == other._n and self._r == other._r
                and self._members == other._members)

    def __hash__(self):
        return hash((self._n, self._r, self._members))

    def __repr__(self):
        shown = ", ".join("{" + ",".join(str(x) for x in sorted(s)) + "}"
                          for s in self.sorted()[:8])
        if len(self) > 8:
            shown += ", ..."
        return "Family(n={}, r={}, {} sets: [{}])".format(
            self._n, self._r, len(self), shown)
