"""Texture payload decoding.

A session profile carries its textures as ``properties[0].value``: a base64
string wrapping a second JSON document. Decoding order is fixed by the
upstream format:

1. outer JSON (already parsed into ``SessionProfile``)
2. base64 decode of the property value
3. inner JSON parsed into ``TexturePayload``

This module is pure: no I/O, no logging side effects beyond debug records.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging

from pydantic import ValidationError

from mcuserdata.core.domain.models import (
    NO_CAPE,
    NormalizedProfile,
    SessionProfile,
    TexturePayload,
    normalize_player_id,
)
from mcuserdata.core.errors import MalformedPayloadError, ProfileMismatchError, ProfileNotFoundError

logger = logging.getLogger(__name__)


def decode_texture_payload(value: str) -> TexturePayload:
    """Decode a base64 texture property into a ``TexturePayload``.

    Raises ``MalformedPayloadError`` on bad base64, bad UTF-8, bad JSON or a
    document that does not have the payload shape.
    """

    try:
        raw = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedPayloadError(f"Texture payload is not valid base64: {exc}") from exc

    try:
        document = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedPayloadError(f"Texture payload is not valid JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise MalformedPayloadError("Texture payload is not a JSON object")

    try:
        return TexturePayload.model_validate(document)
    except ValidationError as exc:
        raise MalformedPayloadError(f"Texture payload has an unexpected shape: {exc}") from exc


def is_slim_model(payload: TexturePayload) -> bool:
    skin = payload.textures.skin
    if skin is None or skin.metadata is None:
        return False
    return skin.metadata.model == "slim"


def normalize_profile(session: SessionProfile) -> NormalizedProfile:
    """Build the ``NormalizedProfile`` for a parsed session profile."""

    if not session.properties:
        raise ProfileNotFoundError(session.id)

    payload = decode_texture_payload(session.properties[0].value)

    if payload.profile_id is not None and normalize_player_id(payload.profile_id) != normalize_player_id(session.id):
        raise ProfileMismatchError(expected=session.id, actual=payload.profile_id)

    skin = payload.textures.skin
    cape = payload.textures.cape
    logger.debug(
        "Decoded textures for %s: skin=%s cape=%s",
        session.name,
        skin is not None,
        cape is not None,
    )

    return NormalizedProfile(
        id=session.id,
        name=session.name,
        timestamp=payload.timestamp,
        skin=skin.url if skin else None,
        cape=cape.url if cape else NO_CAPE,
        is_slim=is_slim_model(payload),
    )
