"""Report Serialization Module

Converts Analysis reports to JSON or YAML and back. Rendered reports are
checked against the bundled JSON Schema so hosts only ever transport
well-formed documents.
"""

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from pydantic import ValidationError

from csvanalyzer.models.analysis import Analysis

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("json", "yaml")

_SUFFIX_FORMATS = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


class SerializationError(Exception):
    """Raised when a report cannot be converted to or from its transport form."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class AnalysisReportValidator:
    """Validates serialized reports against the JSON Schema."""

    def __init__(self, schema_path: Path | None = None) -> None:
        """Initialize validator with schema.

        Args:
        ----
            schema_path: Path to report JSON Schema file. If None, uses default.

        """
        self.logger = logging.getLogger(self.__class__.__name__)

        if schema_path is None:
            schema_path = Path(__file__).parent / "schemas" / "analysis.schema.json"

        if not schema_path.exists():
            msg = f"Report schema file not found: {schema_path}"
            raise FileNotFoundError(msg)

        with schema_path.open(encoding="utf-8") as f:
            self.schema = json.load(f)

        self.validator = jsonschema.Draft7Validator(self.schema)
        self.logger.debug(f"Report validator initialized with schema: {schema_path}")

    def validate_data(
        self,
        data: dict[str, Any],
        raise_on_error: bool = True,
        source_name: str = "analysis report",
    ) -> bool:
        """Validate a report dictionary.

        Args:
        ----
            data: Report as plain dictionary
            raise_on_error: Whether to raise exception on validation errors
            source_name: Name/path for error messages

        Returns:
        -------
            True if valid, False if invalid (when raise_on_error=False)

        Raises:
        ------
            SerializationError: If validation fails and raise_on_error=True

        """
        errors = []
        found = self.validator.iter_errors(data)
        for error in sorted(found, key=lambda e: [str(p) for p in e.path]):
            message = error.message
            if error.absolute_path:
                message += f" at path: {'.'.join(str(p) for p in error.absolute_path)}"
            errors.append(message)

        if not errors:
            self.logger.debug(f"Report validation passed for {source_name}")
            return True

        error_msg = f"Schema validation failed for {source_name}: {errors[0]}"
        if raise_on_error:
            raise SerializationError(error_msg, errors)
        self.logger.error(error_msg)
        return False


_default_validator: AnalysisReportValidator | None = None


def _get_validator() -> AnalysisReportValidator:
    global _default_validator
    if _default_validator is None:
        _default_validator = AnalysisReportValidator()
    return _default_validator


def analysis_to_dict(analysis: Analysis) -> dict[str, Any]:
    """Return the report as plain JSON-compatible data."""
    return analysis.model_dump(mode="json")


def dump_analysis(
    analysis: Analysis,
    fmt: str = "json",
    *,
    indent: int | None = 2,
    validate: bool = True,
) -> str:
    """Render a report as JSON or YAML text.

    Args:
    ----
        analysis: Report to render
        fmt: ``"json"`` or ``"yaml"``
        indent: JSON indentation, None for compact output
        validate: Check the report against the JSON Schema first

    Returns:
    -------
        Serialized report

    Raises:
    ------
        SerializationError: If the format is unsupported or rendering fails

    """
    if fmt not in SUPPORTED_FORMATS:
        msg = f"Unsupported report format: {fmt!r} (expected one of {', '.join(SUPPORTED_FORMATS)})"
        raise SerializationError(msg)

    data = analysis_to_dict(analysis)
    if validate:
        _get_validator().validate_data(data)

    try:
        if fmt == "json":
            return json.dumps(data, indent=indent, ensure_ascii=False)
        return yaml.safe_dump(
            data, default_flow_style=False, allow_unicode=True, sort_keys=False
        )
    except (TypeError, ValueError, yaml.YAMLError) as e:
        msg = f"Serialization error: {e}"
        raise SerializationError(msg) from e


def save_analysis(analysis: Analysis, path: str | Path, fmt: str | None = None) -> Path:
    """Write a report to ``path``; the format defaults to the file suffix."""
    output = Path(path)
    fmt = fmt or _format_for_path(output)
    text = dump_analysis(analysis, fmt)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    logger.info(f"Saved {fmt} report to {output}")
    return output


def load_analysis(path: str | Path) -> Analysis:
    """Load and validate a report written by ``save_analysis``.

    Raises:
        SerializationError: If the file cannot be parsed or is not a valid report
        FileNotFoundError: If file doesn't exist

    """
    report_file = Path(path)
    if not report_file.exists():
        msg = f"Report file not found: {report_file}"
        raise FileNotFoundError(msg)

    fmt = _format_for_path(report_file)
    text = report_file.read_text(encoding="utf-8")
    try:
        data = json.loads(text) if fmt == "json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        msg = f"Invalid {fmt} in {report_file}: {e}"
        raise SerializationError(msg) from e

    _get_validator().validate_data(data, source_name=str(report_file))
    try:
        return Analysis.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid report in {report_file}"
        raise SerializationError(msg, [err["msg"] for err in e.errors()]) from e


def _format_for_path(path: Path) -> str:
    fmt = _SUFFIX_FORMATS.get(path.suffix.lower())
    if fmt is None:
        msg = f"Cannot infer report format from file name: {path.name}"
        raise SerializationError(msg)
    return fmt
