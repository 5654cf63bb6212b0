"""Column profiling for csvanalyzer.

This module turns a column's raw values into a Column profile, honouring the
configured sampling cap for type, range and length statistics.
"""

from csvanalyzer.profiling.column_profiler import (
    SUBTYPE_THRESHOLD,
    ColumnProfiler,
    detect_column_type,
    find_length_stats,
    find_min_max,
)
from csvanalyzer.profiling.sampling import SamplingPolicy

__all__ = [
    "SUBTYPE_THRESHOLD",
    "ColumnProfiler",
    "SamplingPolicy",
    "detect_column_type",
    "find_length_stats",
    "find_min_max",
]
