"""
KRUSKAL-KATONA: Compression Reaches the Bound
=============================================

For every family of r-sets on a small universe:

1. the scheduler terminates in at most measure(F) steps
2. its output is the colex initial segment of the same size
3. no step grows the shadow
4. |shadow(F)| >= kruskal_katona_bound(|F|, r), with equality at the output

(1)-(3) are the scheduler's contract; (4) is the theorem itself.

Author: Carmen Esteban
Date: October 2026
"""

import os
import sys
import time

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from kruskal_katona.colex import r_sets
from kruskal_katona.core import Family
from kruskal_katona.initial_segment import initial_segment, is_initial_segment
from kruskal_katona.measure import measure
from kruskal_katona.scheduler import CompressionScheduler
from kruskal_katona.shadow import kruskal_katona_bound, shadow_size


def verify_theorem(n, r):
    universe = r_sets(n, r)
    scheduler = CompressionScheduler()
    runs = max_steps = 0
    failures = []
    for mask in range(2 ** len(universe)):
        fam = Family([s for i, s in enumerate(universe) if (mask >> i) & 1], n, r)
        result = scheduler.run(fam)
        runs += 1
        max_steps = max(max_steps, result.num_steps)

        if result.num_steps > measure(fam):
            failures.append(("steps", fam))
        if result.family != initial_segment(r, len(fam), n):
            failures.append(("output", fam))
        if not is_initial_segment(result.family, r):
            failures.append(("initial segment", fam))
        if any(s.shadow_after > s.shadow_before for s in result.steps):
            failures.append(("shadow step", fam))

        bound = kruskal_katona_bound(len(fam), r)
        if shadow_size(fam) < bound:
            failures.append(("bound", fam))
        if result.final_shadow != bound:
            failures.append(("tight", fam))
    return runs, max_steps, failures


if __name__ == "__main__":
    print("=" * 60)
    print("KRUSKAL-KATONA: Compression Reaches the Bound")
    print("=" * 60)

    all_pass = True
    for n, r in [(4, 2), (5, 2), (5, 3), (6, 2)]:
        t0 = time.time()
        runs, max_steps, failures = verify_theorem(n, r)
        elapsed = time.time() - t0
        status = "PASSED" if not failures else "FAILED"
        print("\n  n={}, r={}: {} families, max {} steps ({:.1f}s): {}".format(
            n, r, runs, max_steps, elapsed, status))
        for kind, fam in failures[:5]:
            print("    {}: {}".format(kind, fam))
        if failures:
            all_pass = False

    print("\n" + "=" * 60)
    if all_pass:
        print("ALL VERIFICATIONS PASSED")
    else:
        print("SOME VERIFICATIONS FAILED - CHECK ABOVE")
        sys.exit(1)
    print("=" * 60)
