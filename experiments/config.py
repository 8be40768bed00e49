"""
Experiment configuration and job definitions.
=============================================

Default scheduler parameters and the queue of families to compress.

Each job compresses one family and records shadow sizes, the
Kruskal-Katona bound and the step trace.

Author: Carmen Esteban
"""

from kruskal_katona.scheduler import SchedulerConfig


# --- Default scheduler parameters ---

DEFAULT_CONFIG = SchedulerConfig(
    max_iterations=None,
    parallel=False,
    max_workers=None,
    chunk_size=256,
    check_invariants=True,
    verbose=True,
)


# --- Job queue ---
# Each entry: (job_name, builder_name, n, r, k)
# Ordered by increasing universe size within each builder.

JOB_QUEUE = [
    # --- Already compressed: zero steps ---
    ("Initial(6,3,10)",    "initial",     6, 3, 10),
    ("Initial(8,3,30)",    "initial",     8, 3, 30),

    # --- Colex-last sets: longest runs ---
    ("Final(6,2,7)",       "final",       6, 2, 7),
    ("Final(7,3,12)",      "final",       7, 3, 12),
    ("Final(8,3,20)",      "final",       8, 3, 20),

    # --- Lex segments: shadow already small, sets far from colex ---
    ("Lex(7,3,15)",        "lex",         7, 3, 15),
    ("Lex(9,4,40)",        "lex",         9, 4, 40),

    # --- Stars ---
    ("Star(7,3)",          "star",        7, 3, None),
    ("Star(9,3)",          "star",        9, 3, None),

    # --- Random families (seed 42) ---
    ("Random(8,3,20)",     "random",      8, 3, 20),
    ("Random(10,3,40)",    "random",     10, 3, 40),
    ("Random(10,4,60)",    "random",     10, 4, 60),
    ("Random(12,4,100)",   "random",     12, 4, 100),
]
