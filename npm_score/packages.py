"""Discover package names and published versions from the npm side."""

from __future__ import annotations
from logging import debug
from pathlib import Path
import json
import subprocess

from npm_score.errors import fail

PACKAGE_FILE: str = "package.json"


def get_current_package_name(start: str | Path | None = None) -> str | None:
    """Find the name of the package enclosing a directory.

    Walks from start (default: the working directory) towards the root;
    the first readable package.json wins.
    """
    directory = Path(start or Path.cwd()).resolve()
    for candidate in [directory, *directory.parents]:
        try:
            contents = json.loads((candidate / PACKAGE_FILE).read_text(encoding="utf-8"))
        except (OSError, ValueError):
            continue
        debug(f"found {candidate / PACKAGE_FILE}")
        if isinstance(contents, dict):
            return contents.get("name")
        return None

    return None


def get_published_version(package_name: str) -> str:
    """Ask npm for the latest published version of a package."""
    try:
        result = subprocess.run(
            ["npm", "show", package_name, "version"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as e:
        fail("failed to get published package version", e)

    return result.stdout.strip()
