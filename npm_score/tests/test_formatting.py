import re

import pytest

from npm_score.formatting import (
    Metric,
    ValueKind,
    compute_diff,
    pad_end,
    pad_start,
    styled,
    to_percent,
    visible_length,
)


def test_to_percent():
    assert to_percent(0.5) == "50%"
    assert to_percent(0.0) == "0%"
    assert to_percent(1.0) == "100%"
    assert to_percent(0.62) == "62%"

    # round half up
    assert to_percent(0.005) == "1%"
    assert to_percent(0.004) == "0%"


def test_to_percent_shape():
    for step in range(0, 1001):
        assert re.match(r"^\d+%$", to_percent(step / 1000.0))


def test_visible_length():
    assert visible_length("") == 0
    assert visible_length("hello") == 5
    assert visible_length(styled("hello", "bold green")) == 5
    assert visible_length(styled("+1", "red") + " pp") == 5


def test_styled_keeps_text():
    text = styled("TOTAL SCORE", "bold")
    assert text != "TOTAL SCORE"
    assert "TOTAL SCORE" in text
    assert text.startswith("\x1b[")


def test_pad_start():
    assert pad_start("62%", 6) == "   62%"
    assert pad_start(62, 4) == "  62"
    assert pad_start("too long", 3) == "too long"

    colored = styled("62%", "red")
    padded = pad_start(colored, 6)
    assert padded == "   " + colored
    assert visible_length(padded) == 6


def test_pad_end():
    assert pad_end("package", 10) == "package   "
    assert pad_end("package", 2) == "package"

    colored = styled("package", "bold")
    assert visible_length(pad_end(colored, 10)) == visible_length(pad_end("package", 10))
    assert pad_end(colored, 10) == colored + "   "


def test_metric_display():
    assert str(Metric.percent(0.62)) == "62%"
    assert str(Metric.plain(200)) == "200"
    assert str(Metric.plain(3.0)) == "3"
    assert Metric.percent(0.625).displayed == 63


def test_diff_equal_is_none():
    assert compute_diff(Metric.percent(0.5), Metric.percent(0.5)) is None
    assert compute_diff(Metric.plain(42), Metric.plain(42)) is None

    # equal once rounded for display
    assert compute_diff(Metric.percent(0.501), Metric.percent(0.499)) is None


def test_diff_percent_points():
    diff = compute_diff(Metric.percent(0.6), Metric.percent(0.5))
    assert diff.amount == 10
    assert diff.kind == ValueKind.PERCENT
    assert diff.unit == "percentage points"
    assert diff.improved
    assert diff.text == styled("+10", "green") + " pp"

    diff = compute_diff(Metric.percent(0.5), Metric.percent(0.62))
    assert diff.amount == -12
    assert diff.text == styled("-12", "red") + " pp"


def test_diff_plain():
    diff = compute_diff(Metric.plain(42), Metric.plain(50))
    assert diff.amount == -8
    assert not diff.improved
    assert diff.unit == ""
    assert diff.text == styled("-8", "red") + "   "

    diff = compute_diff(Metric.plain(250), Metric.plain(200))
    assert diff.text == styled("+50", "green") + "   "


def test_diff_column_widths_match():
    points = compute_diff(Metric.percent(0.6), Metric.percent(0.5))
    plain = compute_diff(Metric.plain(20), Metric.plain(10))
    assert visible_length(points.text) == visible_length(plain.text)


def test_diff_mixed_kinds():
    with pytest.raises(ValueError):
        compute_diff(Metric.percent(0.5), Metric.plain(50))
