"""Core contracts (Protocol) implemented by the adapters."""

from mcuserdata.core.interfaces.lookup import IdentityResolver, ProfileDecoder

__all__ = ["IdentityResolver", "ProfileDecoder"]
