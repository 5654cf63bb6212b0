"""Delimiter detection and tolerant record parsing."""

from csvanalyzer.parsing.delimiter import CANDIDATE_DELIMITERS, detect_delimiter
from csvanalyzer.parsing.records import HeaderReadError, ParsedTable, read_columns

__all__ = [
    "CANDIDATE_DELIMITERS",
    "HeaderReadError",
    "ParsedTable",
    "detect_delimiter",
    "read_columns",
]
