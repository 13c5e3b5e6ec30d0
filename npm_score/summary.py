"""Build the ordered, sectioned rows of a package score summary."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from npm_score.formatting import Metric, styled
from npm_score.reports import PackageReport
from npm_score.reports.displayrow import DisplayRow

TITLE: str = "*** npms package score report ***"
MISSING: str = "-"
OUTDATED_MARKER: str = "outdated  "


@dataclass
class Section:
    """A group of rows, printed after an optional horizontal rule."""

    name: str
    rule: str | None
    rows: List[DisplayRow] = field(default_factory=list)


class ScoreSummary:
    """A simple data storage class holding the rows of a summary."""

    def __init__(self, sections: List[Section], title: str = TITLE):
        """Create a ScoreSummary from its sections."""
        self.sections: List[Section] = sections
        self.title: str = title

    @property
    def title(self) -> str:
        """The banner printed above the summary."""
        return self._title

    @title.setter
    def title(self, new_title: str) -> None:
        self._title = new_title

    @property
    def sections(self) -> List[Section]:
        """The sections, in display order."""
        return self._sections

    @sections.setter
    def sections(self, new_sections: List[Section]) -> None:
        self._sections = new_sections

    def section(self, name: str) -> Section:
        """Find a section by its name."""
        for section in self.sections:
            if section.name == name:
                return section
        raise KeyError(name)

    def row(self, label: str) -> DisplayRow:
        """Find a row by its label in any section."""
        for section in self.sections:
            for row in section.rows:
                if row.label == label:
                    return row
        raise KeyError(label)


def _github_count(report: PackageReport | None, key: str) -> Metric | None:
    if report is None or not report.github:
        return None
    return Metric.plain(report.github[key])


def summarize(
    published_version: str,
    report: PackageReport,
    reference: PackageReport | None = None,
) -> ScoreSummary:
    """Collect the summary rows for report, compared against reference.

    Every row is always produced; comparison values are only attached when a
    reference report is available.
    """
    has_reference = reference is not None

    rated_version = report.version
    outdated = rated_version != published_version
    analyzed_at = report.analyzed_at

    identity = Section("identity", None, [DisplayRow("package", report.name)])

    version = Section(
        "version",
        None,
        [
            DisplayRow("published", published_version),
            DisplayRow("rated", rated_version),
            DisplayRow("analyzed on", analyzed_at.strftime("%x")),
            DisplayRow("analyzed at", analyzed_at.strftime("%X")),
            DisplayRow("up-to-date", "no" if outdated else "yes"),
        ],
    )

    forks = _github_count(report, "forksCount")
    stars = _github_count(report, "starsCount")
    popularity = Section(
        "popularity",
        "-",
        [
            DisplayRow(
                "npm weekly dl",
                Metric.plain(report.weekly_downloads),
                Metric.plain(reference.weekly_downloads) if has_reference else None,
            ),
            DisplayRow(
                "npm dependents",
                Metric.plain(report.dependents_count),
                Metric.plain(reference.dependents_count) if has_reference else None,
            ),
            DisplayRow(
                "npm stars",
                Metric.plain(report.stars_count),
                Metric.plain(reference.stars_count) if has_reference else None,
            ),
            DisplayRow(
                "GitHub forks",
                forks if forks is not None else MISSING,
                _github_count(reference, "forksCount"),
            ),
            DisplayRow(
                "GitHub stars",
                stars if stars is not None else MISSING,
                _github_count(reference, "starsCount"),
            ),
        ],
    )

    scores = Section("score", "-")
    for name in ["quality", "popularity", "maintenance"]:
        scores.rows.append(
            DisplayRow(
                name,
                Metric.percent(getattr(report, name)),
                Metric.percent(getattr(reference, name)) if has_reference else None,
            )
        )

    total = Section(
        "total",
        "=",
        [
            DisplayRow(
                "TOTAL SCORE",
                Metric.percent(report.final),
                Metric.percent(reference.final) if has_reference else None,
                prefix=styled(OUTDATED_MARKER, "red") if outdated else "",
                label_style="bold",
            )
        ],
    )

    return ScoreSummary([identity, version, popularity, scores, total])
