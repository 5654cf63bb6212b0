"""Structural profiling of delimited text documents."""

from csvanalyzer.analyzer import CSVAnalyzer, analyze_text
from csvanalyzer.config import AnalyzerConfig, load_config_from_yaml
from csvanalyzer.export import export_summary_csv
from csvanalyzer.models import Analysis, Column, TypeDetails
from csvanalyzer.parsing import HeaderReadError, detect_delimiter
from csvanalyzer.profiling import ColumnProfiler, SamplingPolicy
from csvanalyzer.schemas import generate_json_schema, generate_sql_ddl
from csvanalyzer.serialization import (
    AnalysisReportValidator,
    SerializationError,
    dump_analysis,
    load_analysis,
    save_analysis,
)
from csvanalyzer.type_detection import classify_value
from csvanalyzer.type_mappings import map_to_json_type, map_to_sql_type

__version__ = "0.1.0"

__all__ = [
    "Analysis",
    "AnalysisReportValidator",
    "AnalyzerConfig",
    "CSVAnalyzer",
    "Column",
    "ColumnProfiler",
    "HeaderReadError",
    "SamplingPolicy",
    "SerializationError",
    "TypeDetails",
    "analyze_text",
    "classify_value",
    "detect_delimiter",
    "dump_analysis",
    "export_summary_csv",
    "generate_json_schema",
    "generate_sql_ddl",
    "load_analysis",
    "load_config_from_yaml",
    "map_to_json_type",
    "map_to_sql_type",
    "save_analysis",
]
