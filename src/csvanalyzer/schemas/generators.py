"""Schema Generators - SQL DDL and JSON Schema generation from an analysis."""

from datetime import UTC, datetime
from typing import Any

from csvanalyzer.export import format_confidence
from csvanalyzer.models.analysis import Analysis, Column
from csvanalyzer.type_mappings import (
    map_to_json_format,
    map_to_json_type,
    map_to_sql_type,
)

# Types stored as free text in SQL
_TEXT_SQL_TYPES = {"VARCHAR"}


def _quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def _distinct_columns(analysis: Analysis) -> list[Column]:
    """Columns in header order with duplicate header names dropped."""
    seen: set[str] = set()
    columns = []
    for column in analysis.columns:
        if column.name in seen:
            continue
        seen.add(column.name)
        columns.append(column)
    return columns


def _is_required(column: Column) -> bool:
    return column.total_count > 0 and column.null_count == 0


def generate_sql_ddl(analysis: Analysis, table_name: str) -> str:
    """Generate a CREATE TABLE statement describing the inferred schema."""
    timestamp = datetime.now(tz=UTC).strftime("%Y-%m-%d %H:%M:%S")
    sampling = (
        f"first {analysis.sample_size} values per column"
        if analysis.sample_size
        else "all values"
    )

    ddl_lines = [
        f"-- DDL for {table_name}",
        f"-- Inferred from {analysis.row_count} rows ({sampling})",
        f"-- Generated: {timestamp}",
        "",
        f"CREATE TABLE {_quote_identifier(table_name)} (",
    ]

    columns = []
    for col in _distinct_columns(analysis):
        data_type = map_to_sql_type(col.type_name)
        if data_type in _TEXT_SQL_TYPES and col.max_length:
            data_type = f"VARCHAR({col.max_length})"
        nullable = " NOT NULL" if _is_required(col) else ""

        comment = (
            f"{col.type_name}, confidence {format_confidence(col.type_details.confidence)}"
        )
        columns.append(
            f"    {_quote_identifier(col.name)} {data_type}{nullable} COMMENT '{comment}'"
        )

    ddl_lines.append(",\n".join(columns))
    ddl_lines.append(");")

    return "\n".join(ddl_lines)


def generate_json_schema(analysis: Analysis, title: str = "Record") -> dict[str, Any]:
    """Generate a draft-07 JSON schema for one record of the analyzed document."""
    schema: dict[str, Any] = {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "title": f"{title} Schema",
        "type": "object",
        "description": f"Inferred from {analysis.row_count} rows",
        "properties": {},
        "required": [],
    }

    for col in _distinct_columns(analysis):
        json_type = map_to_json_type(col.type_name)
        prop: dict[str, Any] = {
            "type": json_type,
            "description": (
                f"Inferred {col.type_name} from {col.analyzed_count} of "
                f"{col.total_count} values "
                f"(confidence {format_confidence(col.type_details.confidence)})"
            ),
        }

        json_format = map_to_json_format(col.type_name)
        if json_format:
            prop["format"] = json_format

        if json_type == "string" and col.max_length:
            prop["maxLength"] = col.max_length

        if json_type == "string" and col.sample_values:
            prop["examples"] = col.sample_values[:3]

        schema["properties"][col.name] = prop

        if _is_required(col):
            schema["required"].append(col.name)

    return schema
