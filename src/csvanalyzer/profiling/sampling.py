"""Sampling bounds for per-column statistics."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from csvanalyzer.config import AnalyzerConfig


@dataclass(frozen=True)
class SamplingPolicy:
    """Caps how many leading values of a column each statistic examines."""

    sample_size: int | None = None

    @classmethod
    def from_config(cls, config: AnalyzerConfig) -> SamplingPolicy:
        return cls(sample_size=config.sample_size)

    def effective_size(self, total: int) -> int:
        """Number of values to examine out of ``total``."""
        if self.sample_size is None:
            return total
        return min(self.sample_size, total)

    def prefix(self, values: Sequence[str]) -> tuple[Sequence[str], int]:
        """Return the sampled prefix of ``values`` and its length."""
        size = self.effective_size(len(values))
        return values[:size], size
