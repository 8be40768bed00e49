#!/usr/bin/env python3
"""
Analyze compression results: shadow drop against the Kruskal-Katona bound,
step counts, and which shift sizes the scheduler used.

Usage:
    python analysis/analyze_results.py           # summary table
    python analysis/analyze_results.py --full    # + per-job shift size profile

Author: Carmen Esteban
"""

import os
import sys
import json
import argparse
from collections import Counter, defaultdict

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
RESULTS_DIR = os.path.join(PROJECT_ROOT, "results")
sys.path.insert(0, PROJECT_ROOT)

from kruskal_katona.shadow import kruskal_katona_bound


def load_results():
    """Load all result JSONs into a list of dicts."""
    results = []
    for fname in sorted(os.listdir(RESULTS_DIR)):
        if not fname.endswith(".json"):
            continue
        path = os.path.join(RESULTS_DIR, fname)
        with open(path) as f:
            data = json.load(f)
        data["_builder"] = fname.split("_", 1)[0]
        data["_file"] = fname
        results.append(data)
    return results


# ---------------------------------------------------------------
# 1. Summary table
# ---------------------------------------------------------------

def print_summary_table(results):
    """One row per run: sizes, shadow before/after, bound, steps."""
    by_builder = defaultdict(list)
    for r in results:
        by_builder[r["_builder"]].append(r)

    print("=" * 70)
    print("COMPRESSION SUMMARY")
    print("=" * 70)
    print(f"{'Builder':<9} {'n':>3} {'r':>3} {'|F|':>5}  {'Shadow':>7}  "
          f"{'Final':>6}  {'Bound':>6}  {'Steps':>6}  {'OK'}")
    print("-" * 70)

    for builder in sorted(by_builder):
        entries = sorted(by_builder[builder], key=lambda r: (r["n"], r["r"], r["size"]))
        for r in entries:
            bound = kruskal_katona_bound(r["size"], r["r"])
            ok = "yes" if r["final_shadow"] == bound and r["is_initial_segment"] else "NO"
            print(f"{builder:<9} {r['n']:>3} {r['r']:>3} {r['size']:>5}  "
                  f"{r['initial_shadow']:>7}  {r['final_shadow']:>6}  "
                  f"{bound:>6}  {len(r['steps']):>6}  {ok}")
        print()


# ---------------------------------------------------------------
# 2. Shift size profile
# ---------------------------------------------------------------

def print_shift_profile(results):
    """How many steps used each |U|, and where the shadow actually dropped."""
    print("=" * 70)
    print("SHIFT SIZE PROFILE")
    print("=" * 70)

    for r in results:
        steps = r["steps"]
        if not steps:
            print(f"\n{r['_file']}: already compressed")
            continue
        sizes = Counter(len(s["u"]) for s in steps)
        drops = [s["index"] for s in steps if s["shadow_after"] < s["shadow_before"]]
        measure_drop = r["initial_measure"] - r["final_measure"]
        print(f"\n{r['_file']}: {len(steps)} steps, measure -{measure_drop}")
        print("  |U| counts: " + ", ".join(
            f"{k}:{c}" for k, c in sorted(sizes.items())))
        print(f"  Shadow dropped at steps: {drops if drops else 'none'}")


# ---------------------------------------------------------------
# Main
# ---------------------------------------------------------------

def main():
    parser = argparse.ArgumentParser(description="Analyze compression results")
    parser.add_argument("--full", action="store_true",
                        help="Include per-job shift size profile")
    args = parser.parse_args()

    if not os.path.isdir(RESULTS_DIR):
        print(f"No results found in {RESULTS_DIR}")
        return
    results = load_results()
    if not results:
        print(f"No results found in {RESULTS_DIR}")
        return

    print(f"Loaded {len(results)} results from {RESULTS_DIR}\n")

    print_summary_table(results)

    if args.full:
        print_shift_profile(results)


if __name__ == "__main__":
    main()
