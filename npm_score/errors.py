"""Failures that are reported to the user without a traceback."""

from __future__ import annotations
from typing import NoReturn


class ScoreError(Exception):
    """A known failure with a human readable message."""


def fail(message: str, err: BaseException | str | None = None) -> NoReturn:
    """Raise a ScoreError, appending the cause when there is one."""
    if err:
        message += f": {err}"
    if isinstance(err, BaseException):
        raise ScoreError(message) from err
    raise ScoreError(message)
