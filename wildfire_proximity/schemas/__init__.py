from wildfire_proximity.schemas.location import Coordinate, GeocodeResult
from wildfire_proximity.schemas.wildfire import (
	FireStatus,
	FireRecord,
	RankedFireRecord,
	RiskTier,
	CacheEntry,
	FetchOutcome,
	ACTIVE_STATUSES,
)
from wildfire_proximity.schemas.search import SearchResult, SearchNotice

__all__ = [
	"Coordinate",
	"GeocodeResult",
	"FireStatus",
	"FireRecord",
	"RankedFireRecord",
	"RiskTier",
	"CacheEntry",
	"FetchOutcome",
	"ACTIVE_STATUSES",
	"SearchResult",
	"SearchNotice",
]
