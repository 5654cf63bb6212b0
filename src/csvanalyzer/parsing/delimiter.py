"""Field delimiter detection from the first line of a document."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# Scan order; on equal counts the later candidate wins.
CANDIDATE_DELIMITERS: tuple[str, ...] = (",", ";", "\t", "|")

DEFAULT_DELIMITER = ","


def detect_delimiter(content: str) -> str:
    """Pick the most frequent candidate delimiter in the first line.

    Args:
    ----
        content: Full document text

    Returns:
    -------
        The winning candidate, or ``","`` when the first line contains none

    """
    first_line = content.split("\n", 1)[0]

    best = DEFAULT_DELIMITER
    best_count = 0
    for candidate in CANDIDATE_DELIMITERS:
        count = first_line.count(candidate)
        if count > 0 and count >= best_count:
            best = candidate
            best_count = count

    logger.debug(f"Detected delimiter {best!r} ({best_count} occurrences)")
    return best
