"""Thin async client for the remote classification / light-curve service."""
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx
from fastapi import Request

from .config import Settings

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """Non-2xx answer from the remote service."""

    def __init__(self, status_code: int, text: str):
        super().__init__(f"upstream returned {status_code}")
        self.status_code = status_code
        self.text = text


class UpstreamClient:
    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.upstream_url.rstrip("/"),
            headers={settings.api_key_header: settings.api_key.get_secret_value()},
            timeout=settings.timeout_s,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _send(self, method: str, path: str, **kwargs) -> Any:
        logger.debug(f"upstream {method} {path}")
        r = await self._client.request(method, path, **kwargs)
        logger.info(f"upstream {method} {path} -> {r.status_code}")
        if not r.is_success:
            logger.warning(f"upstream rejected {method} {path}: {r.status_code} {r.text[:200]}")
            raise UpstreamError(r.status_code, r.text)
        return r.json()

    async def predict(self, features: Dict[str, Any]) -> Any:
        # POST is not known to be idempotent upstream: one attempt only
        return await self._send("POST", "/predict", json=features)

    async def analyze_star(self, star_id: str) -> Any:
        path = "/analyze-star/" + quote(star_id, safe="")
        attempts = 1 + self.settings.read_retries
        for attempt in range(1, attempts + 1):
            try:
                return await self._send("GET", path)
            except httpx.TransportError:
                if attempt == attempts:
                    raise
                logger.warning(f"transport error on {path}, retrying ({attempt}/{attempts - 1})")


def get_upstream(request: Request) -> UpstreamClient:
    return request.app.state.upstream
