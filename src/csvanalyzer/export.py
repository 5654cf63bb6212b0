"""Spreadsheet-friendly column summaries of an analysis."""

from __future__ import annotations

import csv
import io
import math

from csvanalyzer.models.analysis import Analysis, Column

TYPE_LABELS = {
    "integer": "Integer",
    "float": "Decimal",
    "boolean": "Boolean",
    "date": "Date",
    "datetime": "Date and time",
    "time": "Time",
    "email": "Email",
    "url": "URL",
    "ip": "IP address",
    "string": "Text",
    "null": "Null",
}

SUMMARY_HEADERS = (
    "Column",
    "Type",
    "Confidence",
    "Analyzed values",
    "Subtypes",
    "Examples",
    "Total values",
    "Unique values",
    "Null values",
    "Min",
    "Max",
    "Min length",
    "Max length",
)

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB")


def get_type_label(type_name: str) -> str:
    return TYPE_LABELS.get(type_name, type_name)


def format_confidence(confidence: float) -> str:
    """Render a confidence ratio as a percentage, e.g. ``0.5 -> "50.0%"``."""
    return f"{confidence * 100:.1f}%"


def format_analyzed_values(analyzed: int, total: int) -> str:
    if analyzed == total:
        return f"{analyzed} (100%)"
    return f"{analyzed} ({analyzed / total * 100:.1f}%)"


def format_file_size(size: int) -> str:
    """Render a byte count with a 1024-based unit, e.g. ``1536 -> "1.5 KB"``."""
    if size <= 0:
        return "0 Bytes"
    exponent = min(int(math.log(size, 1024)), len(_SIZE_UNITS) - 1)
    # log() can land just below an exact power of 1024
    if exponent + 1 < len(_SIZE_UNITS) and size >= 1024 ** (exponent + 1):
        exponent += 1
    value = f"{size / 1024**exponent:.2f}".rstrip("0").rstrip(".")
    return f"{value} {_SIZE_UNITS[exponent]}"


def summary_row(column: Column) -> list[str]:
    """One summary line for a column, in SUMMARY_HEADERS order."""
    details = column.type_details
    return [
        column.name,
        get_type_label(column.type_name),
        format_confidence(details.confidence),
        format_analyzed_values(column.analyzed_count, column.total_count),
        ", ".join(get_type_label(subtype) for subtype in details.subtypes),
        ", ".join(details.format_examples),
        str(column.total_count),
        str(column.unique_values),
        str(column.null_count),
        column.min_value or "",
        column.max_value or "",
        str(column.min_length),
        str(column.max_length),
    ]


def export_summary_csv(analysis: Analysis, delimiter: str = ";", bom: bool = True) -> str:
    """Render the per-column summary table as delimited text.

    Args:
    ----
        analysis: Report to summarize
        delimiter: Field separator; ``;`` opens directly in most spreadsheet locales
        bom: Prefix a UTF-8 byte order mark so spreadsheet tools detect the encoding

    Returns:
    -------
        Summary text with one header line and one line per column

    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=delimiter, lineterminator="\n")
    writer.writerow(SUMMARY_HEADERS)
    for column in analysis.columns:
        writer.writerow(summary_row(column))

    text = buffer.getvalue()
    return "\ufeff" + text if bom else text
