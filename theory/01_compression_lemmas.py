"""
KRUSKAL-KATONA: Compression Lemmas
==================================

Exhaustive verification, on small universes, of the facts the compression
loop relies on:

1. compress_family never changes the number of sets
2. every changing useful compression strictly lowers the measure
3. the moved sets only move down in colex order
4. the witness pair of a non-initial-segment is useful and uncompressed

Every family of r-sets of {0..n-1} is checked against every useful pair.

Author: Carmen Esteban
Date: October 2026
"""

import os
import sys
from itertools import combinations

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from kruskal_katona.colex import colex_lt, r_sets
from kruskal_katona.compression import compress, compress_family, is_compressed
from kruskal_katona.core import Family
from kruskal_katona.initial_segment import find_uncompressed_witness, is_initial_segment
from kruskal_katona.measure import measure
from kruskal_katona.scheduler import useful_pairs


def all_families(n, r):
    """Every family of r-subsets of {0..n-1}."""
    universe = r_sets(n, r)
    for mask in range(2 ** len(universe)):
        yield Family([s for i, s in enumerate(universe) if (mask >> i) & 1], n, r)


def verify_lemmas(n, r):
    pairs = list(useful_pairs(n))
    checked = changed = 0
    failures = []
    for fam in all_families(n, r):
        m = measure(fam)
        for p in pairs:
            out = compress_family(p.u, p.v, fam)
            checked += 1
            if len(out) != len(fam):
                failures.append(("cardinality", fam, p))
            if out == fam:
                if not is_compressed(p.u, p.v, fam):
                    failures.append(("is_compressed", fam, p))
                continue
            changed += 1
            if measure(out) >= m:
                failures.append(("measure", fam, p))
            for a in fam.members - out.members:
                if not colex_lt(compress(p.u, p.v, a), a):
                    failures.append(("colex", fam, p))

        witness = find_uncompressed_witness(fam)
        if is_initial_segment(fam, r):
            if witness is not None:
                failures.append(("witness on initial segment", fam, witness))
        elif witness is None or not witness.is_useful or \
                is_compressed(witness.u, witness.v, fam):
            failures.append(("witness", fam, witness))
    return checked, changed, failures


if __name__ == "__main__":
    print("=" * 60)
    print("KRUSKAL-KATONA: Compression Lemmas")
    print("=" * 60)

    all_pass = True
    for n, r in [(4, 1), (4, 2), (5, 2), (5, 3)]:
        checked, changed, failures = verify_lemmas(n, r)
        status = "PASSED" if not failures else "FAILED"
        print("\n  n={}, r={}: {} (family, pair) checks, {} changing: {}".format(
            n, r, checked, changed, status))
        for kind, fam, pair in failures[:5]:
            print("    {}: {} under {}".format(kind, fam, pair))
        if failures:
            all_pass = False

    print("\n" + "=" * 60)
    if all_pass:
        print("ALL VERIFICATIONS PASSED")
    else:
        print("SOME VERIFICATIONS FAILED - CHECK ABOVE")
        sys.exit(1)
    print("=" * 60)
