"""
Compression Scheduler
=====================

Drives a family to its fully compressed fixed point.

Each round scans for useful compressions (U, V) the current family is not
compressed under, picks the one with the smallest |U| (ties broken by
sorted U, then sorted V), applies it, and repeats. The measure drops on
every changing step, so the loop stops after at most measure(F) rounds.

States:
    Running(family, pair) -- more compressions may apply; pair produced it
    Done(family)    -- no useful compression changes the family

Classes:
    SchedulerConfig      - Loop parameters
    CompressionStep      - Record of one applied compression
    SchedulerResult      - Complete run, serializable to JSON
    CompressionScheduler - The state machine

Functions:
    useful_pairs                   -- every useful pair over a universe
    find_useful_compression        -- next compression to apply, or None
    is_fully_compressed            -- no useful compression changes the family
    run_kruskal_katona_compression -- run to Done and return the family

Author: Carmen Esteban
License: MIT
"""

import json
import time
from collections import namedtuple
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field, asdict, fields
from itertools import combinations
from typing import Dict, List, Optional

from kruskal_katona.colex import colex_sorted
from kruskal_katona.compression import ShiftPair, compress_family
from kruskal_katona.core import (
    Family, InvalidFamily, InvariantViolation, IterationLimitExceeded,
)
from kruskal_katona.initial_segment import check_initial_segment, is_initial_segment
from kruskal_katona.measure import measure
from kruskal_katona.shadow import shadow_size


# Running also records the pair that produced it; None for the start state.
Running = namedtuple("Running", ["family", "pair"], defaults=(None,))
Done = namedtuple("Done", ["family"])


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass
class SchedulerConfig:
    """Parameters controlling the compression loop.

    max_iterations: safety cap on applied compressions; None means
        measure(family) + 1, which a correct run never reaches.
    parallel: scan candidate pairs in a process pool.
    chunk_size: members per parallel scan task.
    check_invariants: verify every step and the final initial segment.
    """
    max_iterations: Optional[int] = None
    parallel: bool = False
    max_workers: Optional[int] = None
    chunk_size: int = 256
    check_invariants: bool = True
    verbose: bool = False


# ---------------------------------------------------------------------------
# Step & Result
# ---------------------------------------------------------------------------

@dataclass
class CompressionStep:
    """One applied compression and the quantities it changed."""
    index: int
    u: List[int]
    v: List[int]
    moved: int
    measure_before: int
    measure_after: int
    shadow_before: int
    shadow_after: int


@dataclass
class SchedulerResult:
    """Complete result of a compression run, serializable to JSON."""
    n: int
    r: int
    size: int
    initial_measure: int
    final_measure: int
    initial_shadow: int
    final_shadow: int
    is_initial_segment: bool
    steps: List[CompressionStep] = field(default_factory=list)
    timings: Dict[str, float] = field(default_factory=dict)
    initial: Optional[Family] = field(default=None, repr=False)
    family: Optional[Family] = field(default=None, repr=False)

    @property
    def num_steps(self):
        return len(self.steps)

    def to_json(self):
        d = {f.name: getattr(self, f.name) for f in fields(self)
             if f.name not in ("initial", "family", "steps")}
        d["steps"] = [asdict(s) for s in self.steps]
        # Families as sorted element lists, colex order
        for key in ("initial", "family"):
            fam = getattr(self, key)
            d[key] = [sorted(s) for s in fam] if fam is not None else None
        return json.dumps(d, indent=2, default=str)

    def save(self, path):
        with open(path, "w") as f:
            f.write(self.to_json())


# ---------------------------------------------------------------------------
# Candidate scan
# ---------------------------------------------------------------------------

def useful_pairs(n, k=None):
    """Yield every useful ShiftPair over {0..n-1}, optionally with |U| = k."""
    sizes = [k] if k is not None else range(1, n // 2 + 1)
    for size in sizes:
        for v in combinations(range(n), size):
            rest = [x for x in range(v[-1]) if x not in v]
            for u in combinations(rest, size):
                yield ShiftPair(u, v)


def _best_pair_in(chunk, members, n, k):
    """Smallest (U, V) of size k that moves some set of ``chunk``.

    A pair can only move A when V <= A and U misses A; it leaves the family
    uncompressed exactly when the image is not already a member.
    """
    best = None
    for a in chunk:
        outside = [x for x in range(n) if x not in a]
        for v in combinations(sorted(a), k):
            below = [x for x in outside if x < v[-1]]
            for u in combinations(below, k):
                cand = (u, v)
                if best is not None and cand >= best:
                    # combinations yields u in lexicographic order
                    break
                if ((a - frozenset(v)) | frozenset(u)) not in members:
                    best = cand
                    break
    return best


def _scan_chunk(args):
    """Worker function for parallel scans. Must be at module level for pickle."""
    chunk, members, n, k = args
    return _best_pair_in(chunk, members, n, k)


def find_useful_compression(family, config=None, executor=None):
    """Next compression the scheduler would apply, or None at the fixed point.

    Parameters
    ----------
    family : Family
    config : SchedulerConfig, optional
        Only ``parallel``, ``max_workers`` and ``chunk_size`` are read.
    executor : concurrent.futures.Executor, optional
        Pool for parallel scans. When ``config.parallel`` is set and no
        executor is given, one pool is created for this call.

    Returns
    -------
    ShiftPair or None
        The useful pair with minimal |U| (then lexicographic U, V) that
        ``family`` is not compressed under.
    """
    config = config or SchedulerConfig()
    if config.parallel and executor is None:
        with ProcessPoolExecutor(max_workers=config.max_workers) as pool:
            return find_useful_compression(family, config, pool)

    members = family.members
    ordered = colex_sorted(members)
    max_k = min(family.r, family.n - family.r)
    for k in range(1, max_k + 1):
        if executor is not None and len(ordered) > config.chunk_size:
            tasks = [(ordered[i:i + config.chunk_size], members, family.n, k)
                     for i in range(0, len(ordered), config.chunk_size)]
            found = [b for b in executor.map(_scan_chunk, tasks) if b is not None]
            best = min(found) if found else None
        else:
            best = _best_pair_in(ordered, members, family.n, k)
        if best is not None:
            return ShiftPair(*best)
    return None


def is_fully_compressed(family):
    """True iff every useful compression leaves ``family`` unchanged."""
    return find_useful_compression(family) is None


# ---------------------------------------------------------------------------
# Scheduler
# ---------------------------------------------------------------------------

class CompressionScheduler:
    """Runs the Running -> Done state machine on a family.

    Flow per round:
        1. Scan: find the minimal useful pair the family is not compressed under
        2. Stop: none found -> Done
        3. Apply: compress_family with that pair
        4. Check: cardinality, member size, measure and shadow invariants
    """

    def __init__(self, config=None):
        self.config = config or SchedulerConfig()

    def transition(self, state, executor=None):
        """One state machine step. Done is absorbing.

        The returned Running state carries the pair that produced it.
        """
        if isinstance(state, Done):
            return state
        pair = find_useful_compression(state.family, self.config, executor)
        if pair is None:
            return Done(state.family)
        return Running(compress_family(pair.u, pair.v, state.family), pair)

    def run(self, family):
        """Compress ``family`` until no useful compression applies.

        Returns
        -------
        SchedulerResult

        Raises
        ------
        InvalidFamily
            If ``family`` is not a uniform-size Family.
        IterationLimitExceeded
            If more than ``max_iterations`` compressions are applied.
        InvariantViolation
            If ``check_invariants`` is set and a step breaks an invariant.
        NotInitialSegment
            If ``check_invariants`` is set and the fixed point is not a
            colex initial segment.
        """
        family = _as_family(family)
        cfg = self.config
        t_start = time.time()

        initial_measure = measure(family)
        initial_shadow = shadow_size(family)
        limit = cfg.max_iterations
        if limit is None:
            limit = initial_measure + 1

        if cfg.verbose:
            print(f"=== Compression: n={family.n}, r={family.r}, "
                  f"{len(family)} sets, measure={initial_measure}, "
                  f"shadow={initial_shadow} ===")

        if cfg.parallel:
            with ProcessPoolExecutor(max_workers=cfg.max_workers) as executor:
                state, steps, t_transition, t_check = self._drive(
                    family, limit, executor)
        else:
            state, steps, t_transition, t_check = self._drive(family, limit, None)

        final = state.family
        if cfg.check_invariants:
            check_initial_segment(final, final.r)
        final_measure = steps[-1].measure_after if steps else initial_measure
        final_shadow = steps[-1].shadow_after if steps else initial_shadow

        result = SchedulerResult(
            n=final.n, r=final.r, size=len(final),
            initial_measure=initial_measure, final_measure=final_measure,
            initial_shadow=initial_shadow, final_shadow=final_shadow,
            is_initial_segment=is_initial_segment(final, final.r),
            steps=steps,
            timings={
                "transition": round(t_transition, 4),
                "check": round(t_check, 4),
                "total": round(time.time() - t_start, 4),
            },
            initial=family,
            family=final,
        )

        if cfg.verbose:
            print(f"  Done after {len(steps)} steps: "
                  f"shadow {initial_shadow} -> {final_shadow}")
            print(f"  Timings: {result.timings}")

        return result

    def _drive(self, family, limit, executor):
        """Apply transitions until Done, recording one step per compression."""
        cfg = self.config
        steps = []
        t_transition = t_check = 0.0
        cur_measure, cur_shadow = measure(family), shadow_size(family)
        state = Running(family)
        while True:
            t0 = time.time()
            nxt_state = self.transition(state, executor)
            t_transition += time.time() - t0
            if isinstance(nxt_state, Done):
                return nxt_state, steps, t_transition, t_check
            if len(steps) >= limit:
                raise IterationLimitExceeded(
                    "no fixed point after {} compressions".format(len(steps)))

            t0 = time.time()
            current, nxt, pair = state.family, nxt_state.family, nxt_state.pair
            new_measure = measure(nxt)
            new_shadow = shadow_size(nxt)
            step = CompressionStep(
                index=len(steps),
                u=sorted(pair.u), v=sorted(pair.v),
                moved=len(nxt.members - current.members),
                measure_before=cur_measure, measure_after=new_measure,
                shadow_before=cur_shadow, shadow_after=new_shadow,
            )
            if cfg.check_invariants:
                _check_step(current, nxt, step)
            steps.append(step)
            t_check += time.time() - t0

            if cfg.verbose:
                print(f"  step {step.index}: U={step.u} V={step.v} "
                      f"moved={step.moved} measure={new_measure} "
                      f"shadow={new_shadow}")

            cur_measure, cur_shadow = new_measure, new_shadow
            state = nxt_state


def _as_family(family):
    if isinstance(family, Family):
        return family
    try:
        return Family.from_sets(family)
    except TypeError as e:
        raise InvalidFamily("expected a Family or iterable of sets: {}".format(e))


def _check_step(before, after, step):
    if len(after) != len(before):
        raise InvariantViolation(
            "step {}: family size changed {} -> {}".format(
                step.index, len(before), len(after)))
    if after.r != before.r:
        raise InvariantViolation(
            "step {}: member size changed {} -> {}".format(
                step.index, before.r, after.r))
    if step.measure_after >= step.measure_before:
        raise InvariantViolation(
            "step {}: measure did not decrease ({} -> {})".format(
                step.index, step.measure_before, step.measure_after))
    if step.shadow_after > step.shadow_before:
        raise InvariantViolation(
            "step {}: shadow grew {} -> {}".format(
                step.index, step.shadow_before, step.shadow_after))


def run_kruskal_katona_compression(family, config=None):
    """Compress ``family`` to its fixed point and return the final Family."""
    return CompressionScheduler(config).run(family).family
