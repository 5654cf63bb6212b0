"""Analysis data models for csvanalyzer."""

from csvanalyzer.models.analysis import Analysis, Column, TypeDetails

__all__ = [
    "Analysis",
    "Column",
    "TypeDetails",
]
