"""The process-wide npm-score settings and their registered defaults."""

from typing import Any

from npm_score.config import Config


class NS_CFG:
    LOG_LEVEL: str = "log_level"
    REGISTRY_URL: str = "registry.url"
    REGISTRY_TIMEOUT: str = "registry.timeout"
    REPORT_FILE: str = "report.file"


class ScoreConfig(object):
    """Every ScoreConfig() call returns the same Config instance."""

    _instance = None

    def __new__(class_obj):
        if not isinstance(class_obj._instance, Config):
            class_obj._instance = Config({NS_CFG.LOG_LEVEL: "info"})
        return class_obj._instance


def score_default(parameter: str, value: Any) -> bool:
    """Register a module default unless a value is already set.

    Returns True when the default was stored.
    """
    config = ScoreConfig()
    try:
        current = config.get_dotnest(parameter, return_none=False)
    except ValueError:
        current = None

    if current is None:
        config.set_dotnest(parameter, value)
        return True

    return False
