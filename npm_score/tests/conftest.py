import copy
from io import StringIO

import pytest
from rich.console import Console as RichConsole

from npm_score.output.console import Console
from npm_score.score_config import ScoreConfig

SAMPLE_RESULT: dict = {
    "analyzedAt": "2024-01-01T00:00:00Z",
    "collected": {
        "metadata": {"name": "foo", "version": "1.0.0"},
        "npm": {
            "downloads": [{"count": 100}, {"count": 200}],
            "dependentsCount": 3,
            "starsCount": 10,
        },
    },
    "score": {
        "final": 0.62,
        "detail": {"quality": 0.7, "popularity": 0.5, "maintenance": 0.66},
    },
}


@pytest.fixture
def sample_result() -> dict:
    return copy.deepcopy(SAMPLE_RESULT)


@pytest.fixture
def github_result() -> dict:
    result = copy.deepcopy(SAMPLE_RESULT)
    result["collected"]["github"] = {"forksCount": 4, "starsCount": 25}
    return result


@pytest.fixture(autouse=True)
def restore_global_config():
    config = ScoreConfig()
    saved = copy.deepcopy(dict(config))
    yield
    config.clear()
    config.update(saved)


@pytest.fixture
def plain_console() -> Console:
    """A Console output writing uncolored text into a string buffer."""
    rich_console = RichConsole(file=StringIO(), force_terminal=False, color_system=None)
    return Console(console=rich_console)
