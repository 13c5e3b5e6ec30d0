import json

import httpx
import pytest

from npm_score.errors import ScoreError
from npm_score.scoring import (
    DEFAULT_REGISTRY_URL,
    fetch_package_report,
    load_package_report,
    package_query,
    registry_timeout,
    save_package_report,
)
from npm_score.score_config import ScoreConfig, NS_CFG


def mock_client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_package_query():
    assert package_query("left-pad") == DEFAULT_REGISTRY_URL + "left-pad"
    assert (
        package_query("@scope/thing", "https://example.com/p/")
        == "https://example.com/p/@scope%2Fthing"
    )


def test_fetch_report(sample_result):
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(200, json=sample_result)

    report = fetch_package_report(
        "foo", base_url="https://example.com/p/", client=mock_client(handler)
    )

    assert requested == ["https://example.com/p/foo"]
    assert report == {"query": "https://example.com/p/foo", "result": sample_result}


def test_fetch_report_not_found():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            404, json={"code": "NOT_FOUND", "message": "Module not found"}
        )

    with pytest.raises(ScoreError) as excinfo:
        fetch_package_report("nope", client=mock_client(handler))

    assert str(excinfo.value) == "failed to get package score for nope: Module not found"


def test_fetch_report_bad_status_without_json():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="bad gateway")

    with pytest.raises(ScoreError, match="HTTP 502"):
        fetch_package_report("foo", client=mock_client(handler))


def test_fetch_report_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ScoreError, match="connection refused") as excinfo:
        fetch_package_report("foo", client=mock_client(handler))

    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_save_and_load(tmp_path, sample_result):
    filename = tmp_path / "package-score.json"
    report = {"query": "https://example.com/p/foo", "result": sample_result}

    save_package_report(str(filename), report)

    assert filename.read_text() == json.dumps(report, indent=2, ensure_ascii=False)
    assert load_package_report(str(filename)) == report


def test_load_malformed(tmp_path):
    filename = tmp_path / "broken.json"
    filename.write_text("{not json")

    with pytest.raises(ValueError):
        load_package_report(str(filename))


def test_save_keeps_unicode(tmp_path, sample_result):
    sample_result["collected"]["metadata"]["description"] = "Zürich ✓ 日本"
    filename = tmp_path / "package-score.json"

    save_package_report(str(filename), {"query": "q", "result": sample_result})

    text = filename.read_text(encoding="utf-8")
    assert "Zürich ✓ 日本" in text
    assert "\\u" not in text


def test_registry_timeout():
    assert registry_timeout(2.5) == 2.5
    assert registry_timeout("10") == 10.0
    assert registry_timeout() is None


def test_registry_timeout_from_settings():
    config = ScoreConfig()
    config.read_configfile_from_arguments(["-y", "registry.timeout=10"])

    assert config.get_dotnest(NS_CFG.REGISTRY_TIMEOUT) == "10"
    assert registry_timeout() == 10.0


def test_fetch_report_timeout_from_settings(monkeypatch, sample_result):
    ScoreConfig().set_dotnest(NS_CFG.REGISTRY_TIMEOUT, "10")
    timeouts = []

    class RecordingClient(httpx.Client):
        def __init__(self, **kwargs):
            timeouts.append(kwargs["timeout"])
            super().__init__(
                transport=httpx.MockTransport(
                    lambda request: httpx.Response(200, json=sample_result)
                ),
                **kwargs,
            )

    monkeypatch.setattr(httpx, "Client", RecordingClient)

    report = fetch_package_report("foo")

    assert timeouts == [10.0]
    assert report["result"] == sample_result
