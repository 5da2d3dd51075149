import os, sys, pytest
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

os.environ.setdefault("EP_API_KEY", "test-secret")
os.environ.setdefault("EP_UPSTREAM_URL", "https://upstream.test")

import httpx
from exopredict.config import settings
from exopredict.main import app
from exopredict.upstream import UpstreamClient, get_upstream

@pytest.fixture
def anyio_backend():
    return "asyncio"

@pytest.fixture
def upstream():
    """Install a fake upstream service; returns (setter, recorded requests)."""
    calls = []
    state = {"handler": lambda req: httpx.Response(200, json={})}

    def handler(request: httpx.Request):
        calls.append(request)
        return state["handler"](request)

    client = UpstreamClient(settings, transport=httpx.MockTransport(handler))
    app.dependency_overrides[get_upstream] = lambda: client

    def use(fn):
        state["handler"] = fn

    yield use, calls
    app.dependency_overrides.pop(get_upstream, None)

@pytest.fixture
async def ac():
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
