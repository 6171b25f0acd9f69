"""Render service URL templates.

Pure string construction: the render service is never contacted and the
resulting URLs are not validated.
"""

from __future__ import annotations

from enum import Enum


class RenderKind(str, Enum):
    """Image families served by the render service."""

    AVATAR = "avatars"
    HEAD = "renders/head"
    BODY = "renders/body"
    SKIN = "skins"
    CAPE = "capes"


def build_render_url(kind: RenderKind, player_id: str, *, base_url: str) -> str:
    return f"{base_url.rstrip('/')}/{kind.value}/{player_id}"
