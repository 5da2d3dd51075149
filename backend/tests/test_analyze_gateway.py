import httpx
import pytest

ANALYSIS = {
    "star_id": "KIC 10593626",
    "image_url": "https://upstream.test/static/KIC_10593626.png",
    "message": "Curva de luz generada",
    "parameters": {"period": 289.8623, "duration": 7.4, "transit_time": 133.6749},
}

@pytest.mark.anyio
async def test_analyze_relays_upstream_json(ac, upstream):
    use, calls = upstream
    use(lambda req: httpx.Response(200, json=ANALYSIS))
    r = await ac.get("/api/analyze-star/KIC 10593626")
    assert r.status_code == 200
    assert r.json() == ANALYSIS
    assert len(calls) == 1
    assert calls[0].method == "GET"
    assert calls[0].url.raw_path == b"/analyze-star/KIC%2010593626"
    assert calls[0].headers["X-API-Key"] == "test-secret"

@pytest.mark.anyio
@pytest.mark.parametrize("status", [404, 403])
async def test_analyze_rejection_keeps_status_and_details(ac, upstream, status):
    use, _ = upstream
    use(lambda req: httpx.Response(status, text="Star not found"))
    r = await ac.get("/api/analyze-star/KIC-0")
    assert r.status_code == status
    j = r.json()
    assert j["error"] == "No se encontró la curva de luz para esta estrella"
    assert j["details"] == "Star not found"

@pytest.mark.anyio
@pytest.mark.parametrize("path", ["/api/analyze-star", "/api/analyze-star/", "/api/analyze-star/%20%20"])
async def test_analyze_missing_id_is_400_without_upstream_call(ac, upstream, path):
    _, calls = upstream
    r = await ac.get(path)
    assert r.status_code == 400
    assert r.json() == {"error": "Se requiere un ID de estrella"}
    assert calls == []

@pytest.mark.anyio
async def test_analyze_transport_failure_is_500(ac, upstream):
    use, calls = upstream

    def boom(req):
        raise httpx.ReadTimeout("timed out", request=req)

    use(boom)
    r = await ac.get("/api/analyze-star/KIC-1")
    assert r.status_code == 500
    assert r.json() == {"error": "Error al analizar la estrella"}
    assert len(calls) == 1

@pytest.mark.anyio
async def test_analyze_repeated_lookups_are_not_cached(ac, upstream):
    use, calls = upstream
    use(lambda req: httpx.Response(200, json=ANALYSIS))
    await ac.get("/api/analyze-star/KIC-2")
    await ac.get("/api/analyze-star/KIC-2")
    assert len(calls) == 2

@pytest.mark.anyio
async def test_analyze_redirect_from_upstream_is_relayed_as_error(ac, upstream):
    use, _ = upstream
    use(lambda req: httpx.Response(301, text="moved"))
    r = await ac.get("/api/analyze-star/KIC-5")
    assert r.status_code == 301
    assert r.json() == {"error": "No se encontró la curva de luz para esta estrella", "details": "moved"}

@pytest.mark.anyio
async def test_analyze_id_with_slash_reaches_upstream_as_one_segment(ac, upstream):
    use, calls = upstream
    use(lambda req: httpx.Response(200, json=ANALYSIS))
    r = await ac.get("/api/analyze-star/KOI%2F123")
    assert r.status_code == 200
    assert len(calls) == 1
    assert calls[0].url.raw_path == b"/analyze-star/KOI%2F123"
