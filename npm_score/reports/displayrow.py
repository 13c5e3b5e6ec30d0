"""A single labeled line of a score summary."""

from __future__ import annotations
from dataclasses import dataclass

from npm_score.formatting import DiffResult, Metric, compute_diff


@dataclass
class DisplayRow:
    """A labeled value with an optional reference value to compare against."""

    label: str
    value: Metric | str
    reference_value: Metric | str | None = None
    prefix: str = ""
    label_style: str = ""

    @property
    def diff(self) -> DiffResult | None:
        """The change relative to the reference, or None if not comparable."""
        if not isinstance(self.value, Metric):
            return None
        if not isinstance(self.reference_value, Metric):
            return None
        return compute_diff(self.value, self.reference_value)

    @property
    def display_value(self) -> str:
        return self.prefix + str(self.value)
