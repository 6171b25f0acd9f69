"""Lookup contracts.

The service layer only depends on these protocols; the Mojang adapters are
one implementation, test fakes are another.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from mcuserdata.core.domain.models import Identity, NormalizedProfile


@runtime_checkable
class IdentityResolver(Protocol):
    """Username to identity lookup."""

    async def resolve(self, username: str) -> Identity:
        """Return the identity for ``username`` or raise ``NotFoundError``."""

        ...

    async def resolve_name(self, player_id: str) -> str:
        """Return the current name for ``player_id`` or raise ``NotFoundError``."""

        ...


@runtime_checkable
class ProfileDecoder(Protocol):
    """Player id to normalized profile lookup."""

    async def decode_profile(self, player_id: str) -> NormalizedProfile:
        ...
