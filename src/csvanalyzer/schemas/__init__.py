"""Schema generation utilities for analysis reports."""

from .generators import (
    generate_json_schema,
    generate_sql_ddl,
)

__all__ = [
    "generate_json_schema",
    "generate_sql_ddl",
]
