import pytest
import uvicorn
from fastapi import HTTPException
from fastapi.testclient import TestClient

import logsift.main as main
from logsift.storage import MemoryVersionCache
from logsift.types.issue import AnalysisEnv

class DummySource:
    def __init__(self, version="9.1", error=None):
        self.version = version
        self.error = error

    async def get_latest_release_version(self):
        if self.error:
            raise self.error
        return self.version

def _client(monkeypatch, source, cache=None):
    monkeypatch.setattr(main, "env", AnalysisEnv(releases=source, cache=cache))
    return TestClient(main.app)

def test_health(monkeypatch):
    client = _client(monkeypatch, DummySource())
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}

def test_analyze_returns_issues(monkeypatch):
    client = _client(monkeypatch, DummySource("9.1"))
    body = "Prism Launcher version: 8.4\njava.lang.OutOfMemoryError: Java heap space\n"
    resp = client.post("/api/analyze", content=body.encode("utf-8"), headers={"Content-Type": "text/plain"})
    assert resp.status_code == 200
    titles = [issue["title"] for issue in resp.json()["issues"]]
    assert titles == ["Out of Memory", "Outdated Prism Launcher"]

def test_analyze_lookup_failure_is_502(monkeypatch):
    client = _client(monkeypatch, DummySource(error=ConnectionError("offline")))
    resp = client.post("/api/analyze", content=b"Prism Launcher version: 8.4\n")
    assert resp.status_code == 502

def test_analyze_rejects_huge_logs(monkeypatch):
    monkeypatch.setattr(main.settings, "MAX_LOG_BYTES", 10)
    client = _client(monkeypatch, DummySource())
    resp = client.post("/api/analyze", content=b"x" * 11)
    assert resp.status_code == 413

def test_debug_latest_version_uses_cache(monkeypatch):
    source = DummySource("9.1")
    client = _client(monkeypatch, source, MemoryVersionCache())
    resp = client.get("/api/debug/latest_version")
    assert resp.status_code == 200
    assert resp.json()["latest_version"] == "9.1"

    source.version = "10.0"
    assert client.get("/api/debug/latest_version").json()["latest_version"] == "9.1"

class DummyRequest:
    def __init__(self, chunks, headers=None):
        self.headers = headers or {}
        self._chunks = chunks
        self.consumed = 0

    async def stream(self):
        for chunk in self._chunks:
            self.consumed += 1
            yield chunk

@pytest.mark.asyncio
async def test_read_limited_stops_streaming_past_limit():
    request = DummyRequest([b"x" * 6, b"x" * 6, b"x" * 6])
    with pytest.raises(HTTPException) as exc_info:
        await main._read_limited(request, 10)
    assert exc_info.value.status_code == 413
    assert request.consumed == 2

@pytest.mark.asyncio
async def test_read_limited_trusts_declared_length():
    request = DummyRequest([b"small"], headers={"content-length": "999"})
    with pytest.raises(HTTPException):
        await main._read_limited(request, 10)
    assert request.consumed == 0

@pytest.mark.asyncio
async def test_read_limited_joins_chunks():
    request = DummyRequest([b"Prism ", b"Launcher"])
    assert await main._read_limited(request, 100) == b"Prism Launcher"

def test_run_serves_app_with_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setattr(main.settings, "PORT", 9123)
    main.run()
    assert calls == [("logsift.main:app", {"host": main.settings.HOST, "port": 9123})]
