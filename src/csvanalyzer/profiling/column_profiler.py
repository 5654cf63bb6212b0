"""Build a Column profile from one column's raw values."""

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Sequence
from decimal import Decimal

from csvanalyzer.models.analysis import Column, TypeDetails
from csvanalyzer.profiling.sampling import SamplingPolicy
from csvanalyzer.type_detection import (
    NULL_TYPE,
    TIE_BREAK_ORDER,
    TYPE_LABELS,
    classify_value,
    parse_float,
)

logger = logging.getLogger(__name__)

# Minimum share of valid sampled values for a label to be listed as a subtype.
SUBTYPE_THRESHOLD = 0.05

MAX_FORMAT_EXAMPLES = 3
MAX_SAMPLE_VALUES = 5

NUMERIC_TYPES = frozenset({"integer", "float"})
LEXICAL_TYPES = frozenset({"date", "datetime", "time", "string"})


def detect_column_type(
    values: Sequence[str], policy: SamplingPolicy
) -> tuple[str, TypeDetails, int]:
    """Classify the sampled values of a column.

    Args:
    ----
        values: Raw column values in row order
        policy: Sampling bounds

    Returns:
    -------
        (primary type label, classification evidence, values examined)

    """
    sample, sample_size = policy.prefix(values)
    logger.debug(f"Analyzing {sample_size} values out of {len(values)}")

    counts: Counter[str] = Counter()
    format_examples: list[str] = []
    total_valid = 0

    for raw in sample:
        value = raw.strip()
        if not value:
            continue
        total_valid += 1
        counts[classify_value(value)] += 1
        if len(format_examples) < MAX_FORMAT_EXAMPLES and value not in format_examples:
            format_examples.append(value)

    if total_valid == 0:
        return NULL_TYPE, TypeDetails(confidence=1.0), sample_size

    primary_type = min(counts, key=lambda t: (-counts[t], TIE_BREAK_ORDER.index(t)))
    confidence = counts[primary_type] / total_valid

    threshold = total_valid * SUBTYPE_THRESHOLD
    subtypes = [t for t in TYPE_LABELS if counts[t] > 0 and counts[t] >= threshold]

    details = TypeDetails(
        subtypes=subtypes,
        confidence=confidence,
        format_examples=format_examples,
    )
    return primary_type, details, sample_size


def find_min_max(
    values: Sequence[str], type_name: str, policy: SamplingPolicy
) -> tuple[str | None, str | None, int]:
    """Compute the range of the sampled values for the column's type.

    Numeric columns compare parsed floats (values that do not parse are left
    out). Date, time and string columns compare the raw text, so formats that
    do not sort lexicographically such as ``DD/MM/YYYY`` give a textual range.
    Other types have no range.
    """
    sample, sample_size = policy.prefix(values)

    if type_name in NUMERIC_TYPES:
        numbers = [n for n in (parse_float(v.strip()) for v in sample) if n is not None]
        if not numbers:
            return None, None, sample_size
        low, high = _numeric_bounds(numbers)
        return format_number(low), format_number(high), sample_size

    if type_name in LEXICAL_TYPES:
        texts = [v.strip() for v in sample if v.strip()]
        if not texts:
            return None, None, sample_size
        return min(texts), max(texts), sample_size

    return None, None, sample_size


def find_length_stats(
    values: Sequence[str], policy: SamplingPolicy
) -> tuple[int, int, int]:
    """Return (min, max) UTF-8 byte length of non-empty sampled values."""
    sample, sample_size = policy.prefix(values)
    lengths = [len(v.encode("utf-8")) for v in (raw.strip() for raw in sample) if v]
    if not lengths:
        return 0, 0, sample_size
    return min(lengths), max(lengths), sample_size


def _numeric_bounds(numbers: list[float]) -> tuple[float, float]:
    # NaN compares false both ways and is treated as equal to its neighbour:
    # min keeps the earlier of two equals, max takes the later.
    low = high = numbers[0]
    for n in numbers[1:]:
        if low > n:
            low = n
        if not high > n:
            high = n
    return low, high


def format_number(number: float) -> str:
    """Render a float as its shortest plain decimal, ``1.0`` as ``"1"``."""
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class ColumnProfiler:
    """Profiles columns under one sampling policy."""

    def __init__(self, policy: SamplingPolicy | None = None) -> None:
        self.policy = policy or SamplingPolicy()

    def profile(self, name: str, values: Sequence[str]) -> Column:
        """Build the profile of a single column.

        Uniqueness, null count and sample values always cover the whole
        column; type, range and length use the sampled prefix only.

        Args:
        ----
            name: Column header
            values: Every raw value the column received

        Returns:
        -------
            Column profile

        """
        type_name, type_details, type_analyzed = detect_column_type(values, self.policy)
        min_value, max_value, minmax_analyzed = find_min_max(values, type_name, self.policy)
        min_length, max_length, length_analyzed = find_length_stats(values, self.policy)

        total_count = len(values)
        null_count = sum(1 for v in values if not v.strip())
        sample_values = [v for v in values if v.strip()][:MAX_SAMPLE_VALUES]

        return Column(
            name=name,
            type_name=type_name,
            type_details=type_details,
            unique_values=len(set(values)),
            null_count=null_count,
            min_value=min_value,
            max_value=max_value,
            min_length=min_length,
            max_length=max_length,
            sample_values=sample_values,
            valid_count=total_count - null_count,
            total_count=total_count,
            analyzed_count=min(type_analyzed, minmax_analyzed, length_analyzed),
        )
