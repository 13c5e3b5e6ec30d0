"""Commit saved score reports to git."""

from __future__ import annotations
from logging import debug, info
from typing import Callable, List
import subprocess

from npm_score.errors import fail

ADD_MESSAGE: str = "Add package score."
UPDATE_MESSAGE: str = "Update package score."


def run_git(arguments: List[str]) -> str:
    """Run a git command and return its stripped output."""
    debug("running git " + " ".join(arguments))
    try:
        result = subprocess.run(
            ["git", *arguments], capture_output=True, text=True, check=True
        )
    except (OSError, subprocess.CalledProcessError) as e:
        fail("git " + arguments[0] + " failed", e)
    return result.stdout.strip()


def commit_report(filename: str, runner: Callable[[List[str]], str] = run_git) -> bool:
    """Commit filename if it is new or modified.

    Returns True when a commit was made.
    """
    status = runner(["status", "--porcelain", filename])

    if status.startswith("??"):
        # unversioned
        runner(["add", filename])
        runner(["commit", "-m", ADD_MESSAGE, filename])
    elif status.startswith("M"):
        runner(["commit", "-m", UPDATE_MESSAGE, filename])
    else:
        debug(f"{filename} unchanged, nothing to commit")
        return False

    info(f"committed {filename}")
    return True
