"""Structural analysis of a delimited text document.

``CSVAnalyzer`` is the entry point: it detects the delimiter, splits the
document into per-column value buffers, profiles each column and assembles
an ``Analysis`` report.

Example:
-------
    >>> analyzer = CSVAnalyzer(AnalyzerConfig(sample_size=1000))
    >>> analysis = analyzer.analyze("a,b\\n1,2\\n3,4\\n")
    >>> analysis.get_column("a").type_name
    'integer'

"""

from __future__ import annotations

import logging

from csvanalyzer.config import AnalyzerConfig
from csvanalyzer.models.analysis import Analysis
from csvanalyzer.parsing.delimiter import detect_delimiter
from csvanalyzer.parsing.records import read_columns
from csvanalyzer.profiling.column_profiler import ColumnProfiler
from csvanalyzer.profiling.sampling import SamplingPolicy

logger = logging.getLogger(__name__)


class CSVAnalyzer:
    """Infers a per-column type and statistics profile of a document.

    The analyzer keeps only its configuration; each ``analyze`` call is
    independent, so one instance can serve many documents and threads.
    """

    def __init__(self, config: AnalyzerConfig | None = None) -> None:
        self.config = config or AnalyzerConfig()
        self.profiler = ColumnProfiler(SamplingPolicy.from_config(self.config))

    def analyze(self, content: str) -> Analysis:
        """Analyze one in-memory document.

        Args:
        ----
            content: Document text; the first record is the header row

        Returns:
        -------
            Analysis report with one column profile per header field

        Raises:
        ------
            HeaderReadError: If the header row cannot be read

        """
        logger.info("Starting analysis...")

        delimiter = detect_delimiter(content)
        table = read_columns(content, delimiter)
        logger.info(f"Found {len(table.headers)} columns")

        if table.skipped_records:
            logger.warning(f"Skipped {table.skipped_records} unreadable records")

        profiles = {
            name: self.profiler.profile(name, values)
            for name, values in table.columns.items()
        }
        # Duplicate header names share one profile.
        columns = [profiles[name] for name in table.headers]

        analysis = Analysis(
            row_count=table.row_count,
            column_count=len(table.headers),
            columns=columns,
            detected_delimiter=delimiter,
            sample_size=self.config.sample_size,
        )
        logger.info(
            f"Analysis complete: {analysis.row_count} rows, {analysis.column_count} columns"
        )
        return analysis


def analyze_text(content: str, sample_size: int | None = None) -> Analysis:
    """Analyze ``content`` with an optional sampling cap."""
    return CSVAnalyzer(AnalyzerConfig(sample_size=sample_size)).analyze(content)
