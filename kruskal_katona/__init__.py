"""
Kruskal-Katona Compression
==========================

Drives a family of equal-size finite sets to the colex initial segment of
the same size by repeated UV-compression, never growing its shadow.

Pieces:
  colex        - colexicographic order, ranks
  shadow       - shadows and the Kruskal-Katona bound
  compression  - UV-compressions on sets and families
  measure      - integer potential that every compression decreases
  scheduler    - the compression loop (Running -> Done)
  initial_segment - colex initial segments and their characterization

Author: Carmen Esteban
License: MIT
"""

__version__ = "0.1.0"
__author__ = "Carmen Esteban"

from kruskal_katona.core import (
    MAX_UNIVERSE_SIZE, Family, finite_set,
    KruskalKatonaError, InvalidFamily, UniverseOverflow, NotInitialSegment,
    InvariantViolation, IterationLimitExceeded,
)
from kruskal_katona.colex import (
    colex_key, colex_lt, colex_le, colex_cmp, colex_sorted, colex_max,
    colex_rank, colex_unrank, r_sets,
)
from kruskal_katona.shadow import (
    shadow, shadow_size, up_shadow, iterated_shadow,
    cascade, kruskal_katona_bound,
)
from kruskal_katona.compression import (
    ShiftPair, is_useful_compression, compress, compress_family,
    is_compressed, moved_members, compression_conflicts,
)
from kruskal_katona.measure import measure, set_measure, measure_drop
from kruskal_katona.initial_segment import (
    initial_segment, is_initial_segment,
    find_uncompressed_witness, check_initial_segment,
)
from kruskal_katona.scheduler import (
    Running, Done,
    SchedulerConfig, CompressionStep, SchedulerResult, CompressionScheduler,
    useful_pairs, find_useful_compression, is_fully_compressed,
    run_kruskal_katona_compression,
)
from kruskal_katona.families import (
    all_r_sets, random_family, star_family,
    lex_initial_segment, colex_final_segment,
)
from kruskal_katona.report import element_degrees, compression_report, compare_families
