"""Integer potential for the compression loop.

measure(F) = sum over members A of sum over x in A of 2**x, which is the sum
of the members' colex keys. A useful compression that changes F replaces a
block whose top bit is max(V) by one that fits strictly below it, so the
measure drops by at least 1 on every changing step.
"""

from kruskal_katona.colex import colex_key
from kruskal_katona.compression import compress_family


def measure(family):
    """Sum of 2**x over every element x of every member.

    Computed from the column sums of the incidence matrix; the result is a
    Python int so universes of up to 64 elements do not overflow.
    """
    if len(family) == 0:
        return 0
    counts = family.incidence().sum(axis=0)
    return sum(int(c) << x for x, c in enumerate(counts))


def set_measure(a):
    return colex_key(a)


def measure_drop(u, v, family):
    """measure(family) - measure(compress_family(u, v, family))."""
    return measure(family) - measure(compress_family(u, v, family))
