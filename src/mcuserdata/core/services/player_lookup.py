"""Player lookup service.

One method per public operation. The service holds no cross-call state: each
call resolves the identity again and every failure propagates to the caller
unchanged.
"""

from __future__ import annotations

import logging

import httpx

from mcuserdata.adapters.mojang import MojangIdentityResolver, SessionProfileDecoder
from mcuserdata.core.config import AppSettings
from mcuserdata.core.domain.models import BasicData, NormalizedProfile, normalize_player_id
from mcuserdata.core.errors import ProfileMismatchError
from mcuserdata.core.interfaces.lookup import IdentityResolver, ProfileDecoder
from mcuserdata.core.renders import RenderKind, build_render_url

logger = logging.getLogger(__name__)


class PlayerLookupService:
    """Resolves players and derives their appearance URLs."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        resolver: IdentityResolver | None = None,
        decoder: ProfileDecoder | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._resolver = resolver or MojangIdentityResolver(self._settings, client=client)
        self._decoder = decoder or SessionProfileDecoder(self._settings, client=client)

    @property
    def settings(self) -> AppSettings:
        return self._settings

    async def resolve_uuid(self, username: str) -> str:
        identity = await self._resolver.resolve(username)
        return identity.id

    async def resolve_name(self, player_id: str) -> str:
        return await self._resolver.resolve_name(player_id)

    async def get_profile(self, username: str) -> NormalizedProfile:
        """Resolve ``username`` and decode its session profile."""

        identity = await self._resolver.resolve(username)
        profile = await self._decoder.decode_profile(identity.id)
        if normalize_player_id(profile.id) != normalize_player_id(identity.id):
            logger.warning("Identity %s and session profile %s disagree", identity.id, profile.id)
            raise ProfileMismatchError(expected=identity.id, actual=profile.id)
        return profile

    async def get_basic_data(self, username: str) -> BasicData:
        identity = await self._resolver.resolve(username)
        return BasicData(username=identity.name, uuid=identity.id)

    async def render_url(self, kind: RenderKind, username: str) -> str:
        """Resolve ``username`` and template the render URL of ``kind``."""

        identity = await self._resolver.resolve(username)
        return build_render_url(kind, identity.id, base_url=self._settings.render_base_url)

    async def get_skin_url(self, username: str) -> str:
        return await self.render_url(RenderKind.SKIN, username)

    async def get_avatar_url(self, username: str) -> str:
        return await self.render_url(RenderKind.AVATAR, username)

    async def get_cape_url(self, username: str) -> str:
        return await self.render_url(RenderKind.CAPE, username)

    async def get_body_render_url(self, username: str) -> str:
        return await self.render_url(RenderKind.BODY, username)

    async def get_head_render_url(self, username: str) -> str:
        return await self.render_url(RenderKind.HEAD, username)
