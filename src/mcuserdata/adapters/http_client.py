"""httpx wrapper.

Centralizes timeouts, headers and the mapping of transport failures onto
``NotFoundError`` so every upstream call behaves the same way. Callers may
inject their own ``httpx.AsyncClient`` (or a transport) for tests.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx

from mcuserdata.core.config import AppSettings
from mcuserdata.core.errors import NotFoundError

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` with the configured timeout and headers."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


@asynccontextmanager
async def client_scope(
    settings: AppSettings,
    client: httpx.AsyncClient | None = None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield ``client`` untouched, or a fresh client closed on exit."""

    if client is not None:
        yield client
        return
    async with build_async_client(settings) as owned:
        yield owned


async def fetch_json(client: httpx.AsyncClient, url: str, *, query: str) -> Any:
    """GET ``url`` and return its decoded JSON body.

    ``query`` is the user-facing value being looked up; it is what the raised
    ``NotFoundError`` reports. Transport errors, non-2xx statuses and bodies
    that are not JSON all raise ``NotFoundError``.
    """

    logger.debug("GET %s", url)
    try:
        response = await client.get(url)
    except httpx.HTTPError as exc:
        logger.warning("Request to %s failed: %s", url, exc)
        raise NotFoundError(query, reason=str(exc) or type(exc).__name__) from exc

    if not response.is_success:
        logger.debug("GET %s -> HTTP %s", url, response.status_code)
        raise NotFoundError(query, status_code=response.status_code)

    try:
        return response.json()
    except ValueError as exc:
        raise NotFoundError(
            query,
            status_code=response.status_code,
            reason="response body is not JSON",
        ) from exc
