from __future__ import annotations

from typing import Dict

import httpx

from credhub.core.config import settings


def _default_headers() -> Dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if settings.CREDHUB_TOKEN:
        headers["Authorization"] = f"Bearer {settings.CREDHUB_TOKEN}"
    return headers


def create_credhub_http_client() -> httpx.AsyncClient:
    """Create a preconfigured HTTP client for CredHub requests."""

    limits = httpx.Limits(
        max_connections=20,
        max_keepalive_connections=10,
        keepalive_expiry=60.0,
    )
    return httpx.AsyncClient(
        base_url=settings.CREDHUB_API_URL,
        headers=_default_headers(),
        timeout=settings.REQUEST_TIMEOUT_S,
        follow_redirects=False,
        trust_env=False,
        http2=True,
        limits=limits,
    )
