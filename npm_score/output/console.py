"""A module to output score summaries to the console."""

from __future__ import annotations
from typing import Dict, Any, TYPE_CHECKING
from rich.console import Console as RichConsole
from rich.text import Text

from npm_score.output import Output
from npm_score.formatting import pad_end, pad_start, styled

if TYPE_CHECKING:
    from npm_score.reports.displayrow import DisplayRow
    from npm_score.summary import ScoreSummary


class Console(Output):
    """An output class for reporting to a console."""

    LABEL_WIDTH = 16
    VALUE_WIDTH = 14
    DIFF_WIDTH = 10
    RULE_WIDTH = 33

    SEPARATOR = " : "
    FRAME_STYLE = "bold bright_black"
    TITLE_STYLE = "bold yellow"

    def __init__(self, *args: list, **kwargs: Dict[str, Any]):
        """Create a console reporting object."""
        self.console = kwargs.pop("console", None)
        super().__init__(*args, **kwargs)

    # actual routines to print stuff
    def init_console(self) -> None:
        """Initialize the rich console object."""
        if not self.console:
            self.console = RichConsole()

    def print_line(self, line: str) -> None:
        """Print a line that may contain ANSI style codes."""
        self.init_console()
        # rich drops the styling itself when not writing to a terminal
        self.console.print(Text.from_ansi(line), soft_wrap=True)

    def format_rule(self, character: str) -> str:
        return styled(character * Console.RULE_WIDTH, Console.FRAME_STYLE)

    def format_record(self, row: DisplayRow) -> str:
        """Lay out a row as label, separator, value and optional diff columns."""
        label = row.label
        if row.label_style:
            label = styled(label, row.label_style)

        line = pad_end(label, Console.LABEL_WIDTH)
        line += styled(Console.SEPARATOR, Console.FRAME_STYLE)
        line += pad_start(row.display_value, Console.VALUE_WIDTH)

        diff = row.diff
        if diff:
            line += " " + pad_start(diff.text, Console.DIFF_WIDTH)

        return line

    def output_start(self, summary: ScoreSummary) -> None:
        """Print the title banner."""
        self.output_rule("-")
        self.print_line(styled(summary.title, Console.TITLE_STYLE))
        self.output_rule("-")

    def output_rule(self, character: str) -> None:
        """Print a horizontal rule."""
        self.print_line(self.format_rule(character))

    def output_record(self, section: str, row: DisplayRow) -> None:
        """Print a row to the console."""
        self.print_line(self.format_record(row))

    def output_close(self, summary: ScoreSummary) -> None:
        """Close the summary with the rule of its last section."""
        if summary.sections and summary.sections[-1].rule:
            self.output_rule(summary.sections[-1].rule)
