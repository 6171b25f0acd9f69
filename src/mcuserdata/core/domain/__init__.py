"""Domain models: identities, session profiles and decoded textures."""

from mcuserdata.core.domain.models import (
    NO_CAPE,
    BasicData,
    CapeTexture,
    Identity,
    NormalizedProfile,
    ProfileProperty,
    SessionProfile,
    SkinMetadata,
    SkinTexture,
    TexturePayload,
    Textures,
    normalize_player_id,
)

__all__ = [
    "NO_CAPE",
    "BasicData",
    "CapeTexture",
    "Identity",
    "NormalizedProfile",
    "ProfileProperty",
    "SessionProfile",
    "SkinMetadata",
    "SkinTexture",
    "TexturePayload",
    "Textures",
    "normalize_player_id",
]
