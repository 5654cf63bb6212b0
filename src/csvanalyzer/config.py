"""Analyzer configuration."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class AnalyzerConfig(BaseModel):
    """Immutable settings read once when an analyzer is built."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    sample_size: int | None = Field(
        default=None,
        ge=1,
        description="Maximum number of values per column examined by type, "
        "min/max and length statistics. None analyzes every value.",
    )


def load_config_from_yaml(yaml_path: str | Path) -> AnalyzerConfig:
    """Load and validate analyzer configuration from a YAML file.

    Args:
        yaml_path: Path to a YAML mapping such as ``sample_size: 1000``

    Returns:
        Validated AnalyzerConfig

    Raises:
        ValidationError: If the configuration values are invalid
        ValueError: If the file does not hold a mapping
        FileNotFoundError: If file doesn't exist

    """
    import yaml

    yaml_file = Path(yaml_path)
    if not yaml_file.exists():
        msg = f"Config file not found: {yaml_file}"
        raise FileNotFoundError(msg)

    with yaml_file.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return AnalyzerConfig()
    if not isinstance(data, dict):
        msg = f"Config file must contain a mapping: {yaml_file}"
        raise ValueError(msg)

    return AnalyzerConfig(**data)


__all__ = ["AnalyzerConfig", "load_config_from_yaml"]
