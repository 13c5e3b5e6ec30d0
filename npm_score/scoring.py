"""Fetch, save and load npms.io package score reports."""

from __future__ import annotations
from logging import debug, info
from pathlib import Path
from typing import Any, Dict
from urllib.parse import quote
import json

import httpx

from npm_score.errors import fail
from npm_score.score_config import ScoreConfig, score_default, NS_CFG

DEFAULT_REGISTRY_URL: str = "https://api.npms.io/v2/package/"
DEFAULT_SCORE_FILE: str = "package-score.json"

score_default(NS_CFG.REGISTRY_URL, DEFAULT_REGISTRY_URL)
score_default(NS_CFG.REGISTRY_TIMEOUT, None)
score_default(NS_CFG.REPORT_FILE, DEFAULT_SCORE_FILE)

# A saved report wraps the service's answer as {"query": ..., "result": ...}
SavedReport = Dict[str, Any]


def package_query(package_name: str, base_url: str | None = None) -> str:
    """Return the scoring service URL for a package.

    Scoped names keep their '@' but have the '/' escaped.
    """
    if base_url is None:
        base_url = ScoreConfig().get_dotnest(NS_CFG.REGISTRY_URL, DEFAULT_REGISTRY_URL)
    return base_url + quote(package_name, safe="@")


def _failure_reason(response: httpx.Response) -> str:
    try:
        contents = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    if isinstance(contents, dict) and contents.get("message"):
        return contents["message"]
    return f"HTTP {response.status_code}"


def registry_timeout(timeout: float | str | None = None) -> float | None:
    """Resolve the request timeout in seconds; None waits forever.

    Settings given as '-y registry.timeout=10' arrive as strings.
    """
    if timeout is None:
        timeout = ScoreConfig().get_dotnest(NS_CFG.REGISTRY_TIMEOUT)
    if timeout is None:
        return None
    return float(timeout)


def fetch_package_report(
    package_name: str,
    base_url: str | None = None,
    timeout: float | str | None = None,
    client: httpx.Client | None = None,
) -> SavedReport:
    """Query the scoring service for a package's current report."""
    query = package_query(package_name, base_url)
    timeout = registry_timeout(timeout)

    debug(f"requesting {query}")
    try:
        if client is None:
            with httpx.Client(timeout=timeout) as client:
                response = client.get(query)
        else:
            response = client.get(query)
    except httpx.HTTPError as e:
        fail(f"failed to get package score for {package_name}", e)

    if response.status_code != 200:
        fail(
            f"failed to get package score for {package_name}",
            _failure_reason(response),
        )

    return {"query": query, "result": response.json()}


def save_package_report(filename: str, report: SavedReport) -> None:
    """Write a report as indented JSON."""
    info(f"saving report to {filename}")
    Path(filename).write_text(
        json.dumps(report, indent=2, ensure_ascii=False), encoding="utf-8"
    )


def load_package_report(filename: str) -> SavedReport:
    """Read a report written by save_package_report."""
    debug(f"loading report from {filename}")
    return json.loads(Path(filename).read_text(encoding="utf-8"))
