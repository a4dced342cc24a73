import asyncio
import httpx
from spa_knowledge.knowledge import LOCAL_ENTRIES, LOCAL_LIBRARY_VERSION
from spa_knowledge.services.library import LibraryCache, LibraryLoader
from tests.conftest import FakeClock

URL = "https://cms.example.com/knowledge.json"

def _payload(**overrides):
    body = {"source": "local", "version": 42, "updatedAt": "2025-06-01T00:00:00Z",
            "entries": [e.model_dump(by_alias=True) for e in LOCAL_ENTRIES[:3]]}
    body.update(overrides)
    return body

def _loader(handler, clock=None, **kw):
    calls = []
    def counted(request):
        calls.append(request)
        return handler(request)
    loader = LibraryLoader(remote_url=URL, transport=httpx.MockTransport(counted),
                           clock=clock or FakeClock(), **kw)
    return loader, calls

def _get(loader):
    return asyncio.run(loader.get_library())

def test_no_remote_configured_uses_local():
    loader = LibraryLoader(remote_url="")
    lib = _get(loader)
    assert lib.source == "local"
    assert lib.version == LOCAL_LIBRARY_VERSION
    assert lib.entries == LOCAL_ENTRIES
    assert loader.stats.local_loads == 1 and loader.stats.remote_failures == 0

def test_remote_replaces_local_and_is_tagged_remote():
    loader, calls = _loader(lambda r: httpx.Response(200, json=_payload()))
    lib = _get(loader)
    assert lib.source == "remote"
    assert lib.version == 42
    assert lib.updated_at == "2025-06-01T00:00:00Z"
    assert [e.id for e in lib.entries] == [e.id for e in LOCAL_ENTRIES[:3]]
    assert calls[0].headers["content-type"] == "application/json"
    assert loader.stats.remote_loads == 1

def test_http_error_falls_back_to_local():
    loader, _ = _loader(lambda r: httpx.Response(503))
    lib = _get(loader)
    assert lib.source == "local" and lib.entries == LOCAL_ENTRIES
    assert loader.stats.remote_failures == 1

def test_missing_or_bad_entries_falls_back():
    for body in ({"version": 1}, _payload(entries={"a": 1}), [1, 2, 3]):
        loader, _ = _loader(lambda r, body=body: httpx.Response(200, json=body))
        assert _get(loader).source == "local"

def test_invalid_json_falls_back():
    loader, _ = _loader(lambda r: httpx.Response(200, text="{not json"))
    assert _get(loader).source == "local"

def test_network_failure_and_timeout_fall_back():
    def refused(request):
        raise httpx.ConnectError("connection refused", request=request)
    def slow(request):
        raise httpx.ReadTimeout("timed out", request=request)
    for handler in (refused, slow):
        loader, _ = _loader(handler)
        assert _get(loader).source == "local"
        assert loader.stats.remote_failures == 1

def test_bad_metadata_falls_back():
    loader, _ = _loader(lambda r: httpx.Response(200, json=_payload(version="not-a-number")))
    assert _get(loader).source == "local"

def test_invalid_remote_entries_are_dropped():
    good = LOCAL_ENTRIES[0].model_dump(by_alias=True)
    bad = {"id": "broken.entry", "topic": "No category or version"}
    loader, _ = _loader(lambda r: httpx.Response(200, json=_payload(entries=[good, bad, "junk"])))
    lib = _get(loader)
    assert lib.source == "remote"
    assert [e.id for e in lib.entries] == [LOCAL_ENTRIES[0].id]
    assert loader.stats.dropped_entries == 2

def test_cache_serves_within_ttl_and_refreshes_after():
    clock = FakeClock()
    loader, calls = _loader(lambda r: httpx.Response(200, json=_payload()), clock=clock, ttl_seconds=60)
    first = _get(loader)
    clock.now += 59
    assert _get(loader) is first
    assert len(calls) == 1 and loader.stats.cache_hits == 1
    clock.now += 1
    _get(loader)
    assert len(calls) == 2

def test_failed_fetch_is_cached_too():
    clock = FakeClock()
    loader, calls = _loader(lambda r: httpx.Response(500), clock=clock)
    _get(loader); _get(loader)
    assert len(calls) == 1

def test_injected_cache_can_be_inspected_and_cleared():
    cache = LibraryCache()
    clock = FakeClock(now=500.0)
    loader = LibraryLoader(cache=cache, clock=clock)
    lib = _get(loader)
    assert cache.value is lib and cache.fetched_at == 500.0
    cache.clear()
    assert cache.get(clock(), 60) is None
    _get(loader)
    assert loader.stats.local_loads == 2

def test_concurrent_callers_share_one_fetch():
    loader, calls = _loader(lambda r: httpx.Response(200, json=_payload()))
    async def both():
        return await asyncio.gather(loader.get_library(), loader.get_library())
    a, b = asyncio.run(both())
    assert a is b
    assert len(calls) == 1

def test_malformed_url_falls_back_to_local():
    loader = LibraryLoader(remote_url="https://[::1/kb.json", clock=FakeClock())
    lib = _get(loader)
    assert lib.source == "local" and lib.entries == LOCAL_ENTRIES
    assert loader.stats.remote_failures == 1

def test_deeply_nested_body_falls_back_to_local():
    loader, calls = _loader(lambda r: httpx.Response(200, text="[" * 100000 + "]" * 100000))
    lib = _get(loader)
    assert lib.source == "local" and len(calls) == 1
    assert loader.stats.remote_failures == 1
