"""I/O adapters (HTTP) implementing the core lookup contracts."""

from mcuserdata.adapters.mojang import MojangIdentityResolver, SessionProfileDecoder

__all__ = ["MojangIdentityResolver", "SessionProfileDecoder"]
