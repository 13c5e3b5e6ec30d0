"""Base module for output classes."""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from npm_score.reports.displayrow import DisplayRow
    from npm_score.summary import ScoreSummary


class Output:
    """Base class for outputting score summaries."""

    def __init__(self, summary: ScoreSummary | None = None, options: dict | None = None):
        """Initialize the base."""
        self.summary = summary
        self.output_options = options or {}

    @property
    def summary(self) -> ScoreSummary | None:
        """The summary itself."""
        return self._summary

    @summary.setter
    def summary(self, new_summary: ScoreSummary | None) -> None:
        self._summary = new_summary

    @property
    def output_options(self) -> dict:
        """A list of output options."""
        return self._output_options

    @output_options.setter
    def output_options(self, new_output_options: dict) -> None:
        self._output_options = new_output_options

    def output(self, summary: ScoreSummary | None = None) -> None:
        """Dump a summary to the output stream."""
        if not summary:
            summary = self.summary

        self.output_start(summary)

        for section in summary.sections:
            if section.rule:
                self.output_rule(section.rule)

            self.output_new_section(section.name)

            for row in section.rows:
                self.output_record(section.name, row)

        self.output_close(summary)

    def output_start(self, summary: ScoreSummary) -> None:
        """Start the output with a header."""
        return

    def output_rule(self, character: str) -> None:
        """Separate two sections."""
        return

    def output_new_section(self, name: str) -> None:
        """Create a new section header."""
        return

    def output_record(self, section: str, row: DisplayRow) -> None:
        """Output a single row."""
        raise NotImplementedError

    def output_close(self, summary: ScoreSummary) -> None:
        """Close the output stream."""
        return
