"""Mojang adapters: identity lookup and session profile decoding.

- ``MojangIdentityResolver``: ``/users/profiles/minecraft/{username}``
- ``SessionProfileDecoder``: ``/session/minecraft/profile/{id}``

Both make exactly one request per call and never retry.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from mcuserdata.adapters.http_client import client_scope, fetch_json
from mcuserdata.core.config import AppSettings
from mcuserdata.core.domain.models import Identity, NormalizedProfile, SessionProfile
from mcuserdata.core.errors import NotFoundError
from mcuserdata.core.interfaces.lookup import IdentityResolver, ProfileDecoder
from mcuserdata.core.textures import normalize_profile

logger = logging.getLogger(__name__)


def _require(value: str, label: str) -> str:
    cleaned = value.strip() if isinstance(value, str) else ""
    if not cleaned:
        raise ValueError(f"{label} must be a non-empty string")
    return cleaned


def _parse_record(model: type[Identity] | type[SessionProfile], data: Any, query: str) -> Any:
    if not isinstance(data, dict) or not data.get("id"):
        raise NotFoundError(query, reason="response has no id")
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise NotFoundError(query, reason=f"unexpected response shape: {exc.error_count()} error(s)") from exc


async def fetch_session_profile(
    player_id: str,
    *,
    settings: AppSettings,
    client: httpx.AsyncClient | None = None,
) -> SessionProfile:
    player_id = _require(player_id, "player_id")
    url = f"{settings.session_base_url}/session/minecraft/profile/{quote(player_id, safe='')}"
    async with client_scope(settings, client) as http:
        data = await fetch_json(http, url, query=player_id)
    return _parse_record(SessionProfile, data, player_id)


class MojangIdentityResolver(IdentityResolver):
    """Resolves usernames (and ids) against the Mojang identity services."""

    def __init__(self, settings: AppSettings | None = None, *, client: httpx.AsyncClient | None = None) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def resolve(self, username: str) -> Identity:
        username = _require(username, "username")
        url = f"{self._settings.api_base_url}/users/profiles/minecraft/{quote(username, safe='')}"

        async with client_scope(self._settings, self._client) as http:
            data = await fetch_json(http, url, query=username)

        identity = _parse_record(Identity, data, username)
        logger.debug("Resolved %s -> %s", username, identity.id)
        return identity

    async def resolve_name(self, player_id: str) -> str:
        profile = await fetch_session_profile(player_id, settings=self._settings, client=self._client)
        return profile.name


class SessionProfileDecoder(ProfileDecoder):
    """Fetches a session profile and decodes its texture payload."""

    def __init__(self, settings: AppSettings | None = None, *, client: httpx.AsyncClient | None = None) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def decode_profile(self, player_id: str) -> NormalizedProfile:
        session = await fetch_session_profile(player_id, settings=self._settings, client=self._client)
        return normalize_profile(session)
