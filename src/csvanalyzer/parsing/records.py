"""Tolerant splitting of delimited text into per-column value buffers."""

from __future__ import annotations

import csv
import io
import logging
import sys
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


def _lift_field_size_limit() -> None:
    """Remove the csv module's 128 KiB per-field cap."""
    limit = sys.maxsize
    while True:
        try:
            csv.field_size_limit(limit)
            return
        except OverflowError:
            # C long is narrower than sys.maxsize on some platforms
            limit //= 2


class HeaderReadError(Exception):
    """Raised when the first record of a document cannot be read as a header."""


@dataclass
class ParsedTable:
    """Header row plus the raw values each column received."""

    headers: list[str]
    columns: dict[str, list[str]]
    skipped_records: int = 0
    duplicate_headers: list[str] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        """Length of the first column's buffer; missing fields are always trailing."""
        if not self.headers:
            return 0
        return len(self.columns[self.headers[0]])


def read_columns(content: str, delimiter: str) -> ParsedTable:
    """Parse a document into a header row and per-column value sequences.

    Every field is trimmed. Rows may be ragged: fields past the header width
    are dropped and missing trailing fields leave the matching columns without
    a value for that row. Blank lines are ignored. A record that fails to
    parse is logged and skipped.

    Args:
    ----
        content: Full document text
        delimiter: Single field separator character

    Returns:
    -------
        ParsedTable with one buffer per distinct header name

    Raises:
    ------
        HeaderReadError: If the document has no readable first record

    """
    _lift_field_size_limit()
    reader = csv.reader(io.StringIO(content, newline=""), delimiter=delimiter)

    headers = _read_header(reader)
    columns: dict[str, list[str]] = {}
    duplicates: list[str] = []
    for name in headers:
        if name in columns:
            duplicates.append(name)
            logger.warning(f"Duplicate header {name!r}: later fields overwrite earlier ones")
        columns.setdefault(name, [])

    width = len(headers)
    skipped = 0
    while True:
        try:
            record = next(reader)
        except StopIteration:
            break
        except csv.Error as e:
            skipped += 1
            logger.warning(f"Skipping unreadable record at line {reader.line_num}: {e}")
            continue

        if not record:
            continue
        if len(record) > width:
            logger.warning(
                f"Record at line {reader.line_num} has {len(record)} fields, "
                f"header has {width}; extra fields ignored"
            )

        # Keyed by name so a duplicate header keeps the row's last value.
        row: dict[str, str] = {}
        for name, value in zip(headers, record, strict=False):
            row[name] = value.strip()
        for name, value in row.items():
            columns[name].append(value)

    return ParsedTable(
        headers=headers,
        columns=columns,
        skipped_records=skipped,
        duplicate_headers=duplicates,
    )


def _read_header(reader) -> list[str]:
    """Return the first non-blank record, trimmed."""
    while True:
        try:
            record = next(reader)
        except StopIteration:
            msg = "Error reading headers: document has no header row"
            raise HeaderReadError(msg) from None
        except csv.Error as e:
            msg = f"Error reading headers: {e}"
            raise HeaderReadError(msg) from e
        if record:
            return [name.strip() for name in record]
