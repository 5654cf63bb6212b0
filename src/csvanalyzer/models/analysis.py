"""Analysis Pydantic Models

Type-safe models for the structural profile of a delimited text document.
Provides runtime validation and serialization/deserialization.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TypeDetails(BaseModel):
    """Classification evidence for a column."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    subtypes: list[str] = Field(
        default_factory=list,
        description="Type labels whose share of valid sampled values meets the threshold",
    )
    confidence: float = Field(
        ge=0.0, le=1.0, description="Primary type count / valid sampled value count"
    )
    format_examples: list[str] = Field(
        default_factory=list,
        max_length=3,
        description="Up to 3 distinct literal values, in first-seen order",
    )


class Column(BaseModel):
    """Profile of a single column."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(description="Header name")
    type_name: str = Field(description="Best-guess type label")
    type_details: TypeDetails
    unique_values: int = Field(ge=0, description="Distinct raw values, full column")
    null_count: int = Field(ge=0, description="Empty-after-trim values, full column")
    min_value: str | None = Field(default=None, description="Minimum over the sample")
    max_value: str | None = Field(default=None, description="Maximum over the sample")
    min_length: int = Field(default=0, ge=0, description="Shortest byte length")
    max_length: int = Field(default=0, ge=0, description="Longest byte length")
    sample_values: list[str] = Field(
        default_factory=list,
        max_length=5,
        description="Up to 5 non-empty values, first-seen order",
    )
    valid_count: int = Field(ge=0, description="total_count - null_count")
    total_count: int = Field(ge=0, description="Values the column received")
    analyzed_count: int = Field(ge=0, description="Values examined by the sample scans")

    @model_validator(mode="after")
    def check_counts(self) -> "Column":
        """Validate that the per-column counters are consistent."""
        if self.valid_count + self.null_count != self.total_count:
            msg = (
                f"Column {self.name!r}: valid_count + null_count "
                f"must equal total_count ({self.total_count})"
            )
            raise ValueError(msg)
        if self.analyzed_count > self.total_count:
            msg = f"Column {self.name!r}: analyzed_count exceeds total_count"
            raise ValueError(msg)
        if self.unique_values > self.total_count:
            msg = f"Column {self.name!r}: unique_values exceeds total_count"
            raise ValueError(msg)
        return self


class Analysis(BaseModel):
    """Full structural report for one document."""

    row_count: int = Field(ge=0, description="Rows received by the first column")
    column_count: int = Field(ge=0, description="Number of header fields")
    columns: list[Column] = Field(description="Column profiles in header order")
    detected_delimiter: str = Field(
        min_length=1, max_length=1, description="Field separator character"
    )
    sample_size: int | None = Field(
        default=None, ge=1, description="Configured sampling cap, if any"
    )

    @model_validator(mode="after")
    def check_column_count(self) -> "Analysis":
        """Validate that there is one column entry per header field."""
        if self.column_count != len(self.columns):
            msg = (
                f"column_count ({self.column_count}) must equal the number "
                f"of columns ({len(self.columns)})"
            )
            raise ValueError(msg)
        return self

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "row_count": 2,
                "column_count": 1,
                "columns": [
                    {
                        "name": "id",
                        "type_name": "integer",
                        "type_details": {
                            "subtypes": ["integer"],
                            "confidence": 1.0,
                            "format_examples": ["12", "15"],
                        },
                        "unique_values": 2,
                        "null_count": 0,
                        "min_value": "12",
                        "max_value": "15",
                        "min_length": 2,
                        "max_length": 2,
                        "sample_values": ["12", "15"],
                        "valid_count": 2,
                        "total_count": 2,
                        "analyzed_count": 2,
                    }
                ],
                "detected_delimiter": ",",
                "sample_size": None,
            }
        },
    )

    def get_column(self, name: str) -> Column | None:
        """Return the first column profile with the given name."""
        for column in self.columns:
            if column.name == name:
                return column
        return None


__all__ = ["Analysis", "Column", "TypeDetails"]
