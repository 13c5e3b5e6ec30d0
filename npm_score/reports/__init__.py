"""Read-only views of an npms.io package score report."""

from __future__ import annotations
from datetime import datetime
from typing import Any, Dict


class PackageReport:
    """Accessors for the fields of a package score report.

    The underlying dictionary is never modified.  Missing required fields
    raise KeyError (or IndexError for the download history) on access.
    """

    def __init__(self, contents: Dict[str, Any]):
        """Wrap the 'result' part of a fetched or saved report."""
        self.contents = contents

    @property
    def contents(self) -> Dict[str, Any]:
        """The raw report contents."""
        return self._contents

    @contents.setter
    def contents(self, new_contents: Dict[str, Any]) -> None:
        self._contents = new_contents

    @property
    def collected(self) -> Dict[str, Any]:
        return self.contents["collected"]

    @property
    def name(self) -> str:
        return self.collected["metadata"]["name"]

    @property
    def version(self) -> str:
        """The package version that was rated."""
        return self.collected["metadata"]["version"]

    @property
    def npm(self) -> Dict[str, Any]:
        return self.collected["npm"]

    @property
    def weekly_downloads(self) -> int:
        """Downloads of the previous complete week.

        The first history entry is the running period, so the second one is
        reported.
        """
        return self.npm["downloads"][1]["count"]

    @property
    def dependents_count(self) -> int:
        return self.npm["dependentsCount"]

    @property
    def stars_count(self) -> int:
        return self.npm["starsCount"]

    @property
    def github(self) -> Dict[str, Any] | None:
        """GitHub statistics, or None when no repository is linked."""
        return self.collected.get("github")

    @property
    def score(self) -> Dict[str, Any]:
        return self.contents["score"]

    @property
    def quality(self) -> float:
        return self.score["detail"]["quality"]

    @property
    def popularity(self) -> float:
        return self.score["detail"]["popularity"]

    @property
    def maintenance(self) -> float:
        return self.score["detail"]["maintenance"]

    @property
    def final(self) -> float:
        return self.score["final"]

    @property
    def analyzed_at(self) -> datetime:
        """When the scoring service analyzed the package, in local time."""
        return datetime.fromisoformat(self.contents["analyzedAt"]).astimezone()
