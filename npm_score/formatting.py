"""Text formatting primitives for score reports.

Values that take part in comparisons are carried as tagged `Metric`
objects so a percentage is never confused with a plain count.  Column
alignment is computed on the *visible* width of a string, so embedded
ANSI style codes never perturb the layout.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import math

from rich.color import ColorSystem
from rich.style import Style
from rich.text import Text

PERCENT_POINT_UNIT: str = " pp"
PLAIN_UNIT_PADDING: str = " " * len(PERCENT_POINT_UNIT)

IMPROVED_STYLE: str = "green"
REGRESSED_STYLE: str = "red"


class ValueKind(Enum):
    """The kinds of numeric values that can be displayed and compared."""

    PERCENT = "percent"
    PLAIN = "plain"


def styled(text: str, style: str) -> str:
    """Wrap text in the ANSI codes for a rich style definition."""
    return Style.parse(style).render(text, color_system=ColorSystem.STANDARD)


def to_percent(x: float) -> str:
    """Convert a fraction into a whole percentage string.

    Rounds half up (0.005 -> "1%"), applied to the computed product x*100.
    """
    return f"{percent_points(x)}%"


def percent_points(x: float) -> int:
    """Round x*100 half up to an integer number of percent."""
    return math.floor(x * 100 + 0.5)


def visible_length(s: str) -> int:
    """Return the number of terminal cells s occupies, ignoring style codes."""
    return Text.from_ansi(str(s)).cell_len


def pad_start(s: str, width: int) -> str:
    """Right-align s within width visible cells; never truncates."""
    s = str(s)
    return " " * max(0, width - visible_length(s)) + s


def pad_end(s: str, width: int) -> str:
    """Left-align s within width visible cells; never truncates."""
    s = str(s)
    return s + " " * max(0, width - visible_length(s))


def format_number(value: float) -> str:
    """Print integral numbers without a trailing '.0'."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


@dataclass(frozen=True)
class Metric:
    """A numeric value tagged with how it is displayed and compared."""

    kind: ValueKind
    value: float

    @classmethod
    def percent(cls, fraction: float) -> Metric:
        return cls(ValueKind.PERCENT, fraction)

    @classmethod
    def plain(cls, count: float) -> Metric:
        return cls(ValueKind.PLAIN, count)

    @property
    def displayed(self) -> float:
        """The number a reader actually sees (whole percent for percents)."""
        if self.kind == ValueKind.PERCENT:
            return percent_points(self.value)
        return self.value

    def __str__(self) -> str:
        if self.kind == ValueKind.PERCENT:
            return to_percent(self.value)
        return format_number(self.value)


@dataclass(frozen=True)
class DiffResult:
    """A signed difference between a value and its reference."""

    amount: float
    kind: ValueKind

    @property
    def improved(self) -> bool:
        return self.amount > 0

    @property
    def unit(self) -> str:
        if self.kind == ValueKind.PERCENT:
            return "percentage points"
        return ""

    @property
    def text(self) -> str:
        """The styled diff, including unit marker or alignment padding."""
        if self.improved:
            number = styled("+" + format_number(self.amount), IMPROVED_STYLE)
        else:
            number = styled("-" + format_number(abs(self.amount)), REGRESSED_STYLE)

        # difference of two percentages == percentage point (pp)
        if self.kind == ValueKind.PERCENT:
            return number + PERCENT_POINT_UNIT
        return number + PLAIN_UNIT_PADDING

    def __str__(self) -> str:
        return self.text


def compute_diff(value: Metric, reference: Metric) -> DiffResult | None:
    """Compare a value against its reference.

    Percentages are compared on their displayed whole-percent values, giving
    a difference in percentage points.  Returns None when nothing changed.
    """
    if value.kind != reference.kind:
        raise ValueError(
            f"cannot compare a {value.kind.value} value with a {reference.kind.value} value"
        )

    difference = value.displayed - reference.displayed
    if difference == 0:
        return None

    return DiffResult(difference, value.kind)
