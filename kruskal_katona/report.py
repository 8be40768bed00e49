"""
Compression Report
==================

Summarises a compression run: shadow sizes against the Kruskal-Katona
bound, measure drop, step count and element degrees.

Functions:
    element_degrees    -- how many members contain each universe element
    compression_report -- run the scheduler and summarise
    compare_families   -- reports for several families, ranked by excess shadow

Author: Carmen Esteban
License: MIT
"""

import numpy as np

from kruskal_katona.scheduler import CompressionScheduler
from kruskal_katona.shadow import kruskal_katona_bound


def element_degrees(family):
    """Array of length n: number of members containing each element."""
    return family.incidence().sum(axis=0).astype(np.int64)


def compression_report(family, config=None):
    """Run the scheduler on ``family`` and summarise the outcome.

    Returns
    -------
    dict
        'n', 'r', 'size' : int
        'shadow_before', 'shadow_after' : int
        'kk_bound' : int
            Minimum possible shadow size for this many r-sets.
        'excess_before' : int
            shadow_before - kk_bound.
        'optimal' : bool
            Whether the final shadow meets the bound.
        'measure_before', 'measure_after' : int
        'num_steps' : int
        'degrees_before', 'degrees_after' : list of int
        'result' : SchedulerResult
    """
    result = CompressionScheduler(config).run(family)
    bound = kruskal_katona_bound(result.size, result.r)
    return {
        'n': result.n,
        'r': result.r,
        'size': result.size,
        'shadow_before': result.initial_shadow,
        'shadow_after': result.final_shadow,
        'kk_bound': bound,
        'excess_before': result.initial_shadow - bound,
        'optimal': result.final_shadow == bound,
        'measure_before': result.initial_measure,
        'measure_after': result.final_measure,
        'num_steps': result.num_steps,
        'degrees_before': element_degrees(result.initial).tolist(),
        'degrees_after': element_degrees(result.family).tolist(),
        'result': result,
    }


def compare_families(named_families, config=None):
    """Reports for {name: family}, sorted by excess shadow (largest first)."""
    reports = []
    for name, fam in named_families.items():
        rep = compression_report(fam, config)
        rep['name'] = name
        reports.append(rep)
    reports.sort(key=lambda rep: (-rep['excess_before'], rep['name']))
    return reports
