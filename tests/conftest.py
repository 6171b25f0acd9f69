from __future__ import annotations

import base64
import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from mcuserdata.core.config import AppSettings

PLAYER_ID = "987111ae0b1947e689e9db260e7ab860"
PLAYER_NAME = "AsteroidsMC"
SKIN_URL = "http://textures.minecraft.net/texture/skin-hash"
CAPE_URL = "http://textures.minecraft.net/texture/cape-hash"

API = "https://api.mojang.com"
SESSION = "https://sessionserver.mojang.com"


def encode_payload(document: Any) -> str:
    return base64.b64encode(json.dumps(document).encode("utf-8")).decode("ascii")


def texture_document(
    *,
    skin: dict[str, Any] | None = None,
    cape: dict[str, Any] | None = None,
    profile_id: str | None = PLAYER_ID,
    profile_name: str = PLAYER_NAME,
    timestamp: int = 1_600_000_000_000,
) -> dict[str, Any]:
    textures: dict[str, Any] = {}
    if skin is not None:
        textures["SKIN"] = skin
    if cape is not None:
        textures["CAPE"] = cape
    document: dict[str, Any] = {
        "timestamp": timestamp,
        "profileName": profile_name,
        "textures": textures,
    }
    if profile_id is not None:
        document["profileId"] = profile_id
    return document


def session_body(value: str, *, player_id: str = PLAYER_ID, name: str = PLAYER_NAME) -> dict[str, Any]:
    return {
        "id": player_id,
        "name": name,
        "properties": [{"name": "textures", "value": value}],
    }


class FakeMojang:
    """Routes requests by absolute URL; unknown URLs answer 404."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[str, Callable[[], httpx.Response]] = {}

    def add_json(self, url: str, body: Any, *, status_code: int = 200) -> None:
        self._routes[url] = lambda: httpx.Response(status_code, json=body)

    def add_raw(self, url: str, content: bytes, *, status_code: int = 200) -> None:
        self._routes[url] = lambda: httpx.Response(status_code, content=content)

    def add_error(self, url: str, error: Exception) -> None:
        def _raise() -> httpx.Response:
            raise error

        self._routes[url] = _raise

    def add_player(
        self,
        *,
        name: str = PLAYER_NAME,
        player_id: str = PLAYER_ID,
        document: dict[str, Any] | None = None,
    ) -> None:
        self.add_json(f"{API}/users/profiles/minecraft/{name}", {"id": player_id, "name": name})
        if document is None:
            document = texture_document(
                skin={"url": SKIN_URL, "metadata": {"model": "slim"}},
                cape={"url": CAPE_URL},
                profile_id=player_id,
                profile_name=name,
            )
        self.add_json(
            f"{SESSION}/session/minecraft/profile/{player_id}",
            session_body(encode_payload(document), player_id=player_id, name=name),
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get(str(request.url))
        if route is None:
            return httpx.Response(404, json={"errorMessage": "Couldn't find any profile"})
        return route()

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def mojang() -> FakeMojang:
    return FakeMojang()
