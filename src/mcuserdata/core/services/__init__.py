from mcuserdata.core.services.player_lookup import PlayerLookupService

__all__ = ["PlayerLookupService"]
