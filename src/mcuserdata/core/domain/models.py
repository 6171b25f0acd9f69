"""Domain models (pydantic v2).

Upstream records (identity, session profile, texture payload) keep the
upstream key names through aliases and ignore keys they do not know about.
``NormalizedProfile`` is the only shape this library produces itself.

Every model is request-scoped: nothing here is cached or persisted.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

NO_CAPE = "No cape found"


def normalize_player_id(player_id: str) -> str:
    """Canonical form of a player id: lowercase hex without dashes."""

    return player_id.replace("-", "").strip().lower()


class Identity(BaseModel):
    """Result of the username lookup."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Opaque player id (32 hex characters, no dashes).",
    )
    name: str = Field(
        ...,
        min_length=1,
        description="Canonical, correctly cased player name.",
    )


class ProfileProperty(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(..., description="Property name, usually 'textures'.")
    value: str = Field(..., description="Base64 encoded JSON document.")
    signature: str | None = Field(default=None, description="Yggdrasil signature, when requested.")


class SessionProfile(BaseModel):
    """Session service record for one player id."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    properties: list[ProfileProperty] = Field(default_factory=list)

    @field_validator("properties", mode="before")
    @classmethod
    def _null_properties(cls, value: object) -> object:
        return [] if value is None else value


class SkinMetadata(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    model: str | None = None


class SkinTexture(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    url: str
    metadata: SkinMetadata | None = None


class CapeTexture(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    url: str


class Textures(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    skin: SkinTexture | None = Field(default=None, alias="SKIN")
    cape: CapeTexture | None = Field(default=None, alias="CAPE")


class TexturePayload(BaseModel):
    """Decoded ``textures`` property of a session profile."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    timestamp: int | None = Field(default=None, description="Payload generation time (epoch millis).")
    profile_id: str | None = Field(default=None, alias="profileId")
    profile_name: str | None = Field(default=None, alias="profileName")
    textures: Textures = Field(default_factory=Textures)


class NormalizedProfile(BaseModel):
    """Player profile with its current skin and cape."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Player id as reported by the session service.")
    name: str = Field(..., description="Player name as reported by the session service.")
    timestamp: int | None = Field(default=None, description="Texture payload timestamp (epoch millis), if present.")
    skin: str | None = Field(default=None, description="Skin texture URL, if the player has one.")
    cape: str = Field(default=NO_CAPE, description=f"Cape texture URL, or {NO_CAPE!r}.")
    is_slim: bool = Field(default=False, description="True when the skin uses the slim arm model.")

    @property
    def has_cape(self) -> bool:
        return self.cape != NO_CAPE

    @property
    def created_at(self) -> datetime | None:
        if self.timestamp is None:
            return None
        return datetime.fromtimestamp(self.timestamp / 1000, tz=timezone.utc)


class BasicData(BaseModel):
    """Username and id pair, as returned by ``get_basic_data``."""

    model_config = ConfigDict(frozen=True)

    username: str
    uuid: str
