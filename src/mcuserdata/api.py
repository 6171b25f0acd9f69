"""Module-level lookup functions.

Thin wrappers over ``PlayerLookupService`` for callers that do not want to
hold a service instance. Each call builds a fresh service from ``settings``
(or the environment) and opens its own HTTP client.
"""

from __future__ import annotations

from mcuserdata.core.config import AppSettings
from mcuserdata.core.domain.models import BasicData, NormalizedProfile
from mcuserdata.core.services.player_lookup import PlayerLookupService


def _service(settings: AppSettings | None) -> PlayerLookupService:
    return PlayerLookupService(settings)


async def resolve_uuid(name: str, *, settings: AppSettings | None = None) -> str:
    """Return the player id for ``name``."""

    return await _service(settings).resolve_uuid(name)


async def resolve_name(uuid: str, *, settings: AppSettings | None = None) -> str:
    """Return the current player name for ``uuid``."""

    return await _service(settings).resolve_name(uuid)


async def get_profile(name: str, *, settings: AppSettings | None = None) -> NormalizedProfile:
    """Return id, name, timestamp, skin, cape and slim flag for ``name``."""

    return await _service(settings).get_profile(name)


async def get_basic_data(name: str, *, settings: AppSettings | None = None) -> BasicData:
    return await _service(settings).get_basic_data(name)


async def get_skin_url(name: str, *, settings: AppSettings | None = None) -> str:
    return await _service(settings).get_skin_url(name)


async def get_avatar_url(name: str, *, settings: AppSettings | None = None) -> str:
    return await _service(settings).get_avatar_url(name)


async def get_cape_url(name: str, *, settings: AppSettings | None = None) -> str:
    return await _service(settings).get_cape_url(name)


async def get_body_render_url(name: str, *, settings: AppSettings | None = None) -> str:
    return await _service(settings).get_body_render_url(name)


async def get_head_render_url(name: str, *, settings: AppSettings | None = None) -> str:
    return await _service(settings).get_head_render_url(name)
