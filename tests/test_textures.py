from __future__ import annotations

import base64
from datetime import datetime, timezone

import pytest

from conftest import CAPE_URL, PLAYER_ID, PLAYER_NAME, SKIN_URL, encode_payload, texture_document
from mcuserdata.core.domain.models import NO_CAPE, ProfileProperty, SessionProfile
from mcuserdata.core.errors import MalformedPayloadError, ProfileMismatchError, ProfileNotFoundError
from mcuserdata.core.textures import decode_texture_payload, is_slim_model, normalize_profile


def _session(value: str, *, player_id: str = PLAYER_ID) -> SessionProfile:
    return SessionProfile(
        id=player_id,
        name=PLAYER_NAME,
        properties=[ProfileProperty(name="textures", value=value)],
    )


def test_skin_and_cape_are_extracted() -> None:
    value = encode_payload({"textures": {"SKIN": {"url": "X"}, "CAPE": {"url": "Y"}}})

    profile = normalize_profile(_session(value))

    assert profile.skin == "X"
    assert profile.cape == "Y"
    assert profile.is_slim is False
    assert profile.has_cape is True


def test_profile_keeps_session_identity_and_timestamp() -> None:
    value = encode_payload(texture_document(skin={"url": SKIN_URL}, timestamp=1_234))

    profile = normalize_profile(_session(value))

    assert profile.id == PLAYER_ID
    assert profile.name == PLAYER_NAME
    assert profile.timestamp == 1_234
    assert profile.created_at == datetime.fromtimestamp(1.234, tz=timezone.utc)


@pytest.mark.parametrize(
    ("skin", "expected"),
    [
        ({"url": SKIN_URL, "metadata": {"model": "slim"}}, True),
        ({"url": SKIN_URL, "metadata": {"model": "classic"}}, False),
        ({"url": SKIN_URL, "metadata": {}}, False),
        ({"url": SKIN_URL}, False),
        (None, False),
    ],
)
def test_slim_detection(skin: dict | None, expected: bool) -> None:
    payload = decode_texture_payload(encode_payload(texture_document(skin=skin)))

    assert is_slim_model(payload) is expected
    assert normalize_profile(_session(encode_payload(texture_document(skin=skin)))).is_slim is expected


def test_missing_cape_yields_sentinel() -> None:
    profile = normalize_profile(_session(encode_payload(texture_document(skin={"url": SKIN_URL}))))

    assert profile.cape == NO_CAPE
    assert profile.has_cape is False


def test_missing_skin_is_none() -> None:
    profile = normalize_profile(_session(encode_payload(texture_document(cape={"url": CAPE_URL}))))

    assert profile.skin is None
    assert profile.cape == CAPE_URL


def test_unknown_keys_are_ignored() -> None:
    document = texture_document(skin={"url": SKIN_URL, "extra": 1})
    document["signatureRequired"] = True
    document["textures"]["ELYTRA"] = {"url": "ignored"}

    payload = decode_texture_payload(encode_payload(document))

    assert payload.textures.skin is not None
    assert payload.textures.skin.url == SKIN_URL
    assert payload.profile_name == PLAYER_NAME


def test_invalid_base64_raises_malformed_payload() -> None:
    with pytest.raises(MalformedPayloadError) as excinfo:
        decode_texture_payload("this is *not* base64!")

    assert excinfo.value.__cause__ is not None


def test_base64_that_is_not_json_raises_malformed_payload() -> None:
    value = base64.b64encode(b"{not json").decode("ascii")

    with pytest.raises(MalformedPayloadError):
        decode_texture_payload(value)


def test_non_object_json_raises_malformed_payload() -> None:
    with pytest.raises(MalformedPayloadError):
        decode_texture_payload(encode_payload(["SKIN"]))


def test_payload_without_timestamp_is_accepted() -> None:
    profile = normalize_profile(_session(encode_payload({"textures": {"SKIN": {"url": "X"}}})))

    assert profile.timestamp is None
    assert profile.created_at is None
    assert profile.skin == "X"


def test_textures_of_the_wrong_type_raise_malformed_payload() -> None:
    with pytest.raises(MalformedPayloadError):
        decode_texture_payload(encode_payload({"timestamp": 1, "textures": "SKIN"}))


def test_profile_without_properties_raises_profile_not_found() -> None:
    session = SessionProfile(id=PLAYER_ID, name=PLAYER_NAME, properties=[])

    with pytest.raises(ProfileNotFoundError) as excinfo:
        normalize_profile(session)

    assert excinfo.value.player_id == PLAYER_ID


def test_payload_profile_id_must_match_session_id() -> None:
    value = encode_payload(texture_document(profile_id="00000000000000000000000000000000"))

    with pytest.raises(ProfileMismatchError) as excinfo:
        normalize_profile(_session(value))

    assert excinfo.value.expected == PLAYER_ID


def test_dashed_profile_id_matches_undashed_session_id() -> None:
    dashed = "987111ae-0b19-47e6-89e9-db260e7ab860"
    value = encode_payload(texture_document(profile_id=dashed.upper()))

    assert normalize_profile(_session(value)).id == PLAYER_ID
