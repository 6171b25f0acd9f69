"""Minecraft player identity and appearance lookups.

Example::

    import asyncio
    import mcuserdata

    profile = asyncio.run(mcuserdata.get_profile("AsteroidsMC"))
    print(profile.skin, profile.cape, profile.is_slim)
"""

from mcuserdata.api import (
    get_avatar_url,
    get_basic_data,
    get_body_render_url,
    get_cape_url,
    get_head_render_url,
    get_profile,
    get_skin_url,
    resolve_name,
    resolve_uuid,
)
from mcuserdata.core.config import AppSettings
from mcuserdata.core.domain.models import NO_CAPE, BasicData, Identity, NormalizedProfile
from mcuserdata.core.errors import (
    MalformedPayloadError,
    MinecraftUserDataError,
    NotFoundError,
    ProfileMismatchError,
    ProfileNotFoundError,
)
from mcuserdata.core.services.player_lookup import PlayerLookupService

__version__ = "0.1.0"

__all__ = [
    "NO_CAPE",
    "AppSettings",
    "BasicData",
    "Identity",
    "MalformedPayloadError",
    "MinecraftUserDataError",
    "NormalizedProfile",
    "NotFoundError",
    "PlayerLookupService",
    "ProfileMismatchError",
    "ProfileNotFoundError",
    "get_avatar_url",
    "get_basic_data",
    "get_body_render_url",
    "get_cape_url",
    "get_head_render_url",
    "get_profile",
    "get_skin_url",
    "resolve_name",
    "resolve_uuid",
]
