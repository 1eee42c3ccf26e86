from enum import Enum
from typing import List, Optional
from datetime import datetime
from pydantic import ConfigDict, Field
from wildfire_proximity.schemas.base import BaseSchema
from wildfire_proximity.schemas.location import Coordinate
from wildfire_proximity.utils.datetime_utils import parse_timestamp_ms


class FireStatus(str, Enum):
	"""Provincial fire status codes as published by the wildfire feature service."""
	OUT_OF_CONTROL = "OC"
	BEING_HELD = "BH"
	UNDER_CONTROL = "UC"
	OUT = "O"
	UNKNOWN = "UNKNOWN"

	@classmethod
	def from_code(cls, code: Optional[str]) -> "FireStatus":
		"""
		Map a raw status code to a FireStatus.

		Args:
			code: Raw STATUS attribute, e.g. "OC"

		Returns:
			Matching status, or UNKNOWN for missing/unrecognized codes
		"""
		if not code:
			return cls.UNKNOWN
		try:
			return cls(str(code).strip().upper())
		except ValueError:
			return cls.UNKNOWN

	@property
	def is_active(self) -> bool:
		return self in ACTIVE_STATUSES


ACTIVE_STATUSES = frozenset({
	FireStatus.OUT_OF_CONTROL,
	FireStatus.BEING_HELD,
	FireStatus.UNDER_CONTROL,
})


class RiskTier(str, Enum):
	EXTREME = "EXTREME RISK"
	HIGH = "HIGH RISK"
	MODERATE = "MODERATE RISK"
	LOW = "LOW RISK"
	MINIMAL = "MINIMAL RISK"


class FireRecord(BaseSchema):
	"""
	A wildfire or satellite hotspot record.

	Sourced from a feature service or the static fallback set and immutable
	once constructed. Hotspots carry status UNKNOWN and a confidence value
	instead of the managed-fire attributes.
	"""
	model_config = ConfigDict(frozen=True)

	id: str
	name: Optional[str] = None
	status: FireStatus = FireStatus.UNKNOWN
	location: Coordinate
	area_hectares: Optional[float] = None
	start_timestamp: Optional[int] = None  # epoch milliseconds
	provincial_fire_number: Optional[int] = None
	region: Optional[str] = None
	district: Optional[str] = None
	cause: Optional[str] = None
	is_hotspot: bool = False
	hotspot_confidence: Optional[str] = None

	@property
	def start_date(self) -> Optional[datetime]:
		"""Start timestamp as a UTC datetime."""
		return parse_timestamp_ms(self.start_timestamp)

	@property
	def display_name(self) -> str:
		"""Name to show, falling back to the provincial fire number or id."""
		if self.name:
			return self.name
		return f"Fire #{self.provincial_fire_number or self.id}"


class RankedFireRecord(FireRecord):
	"""
	A fire record with its distance to the searched location and the
	derived risk tier. Recomputed on every search.
	"""
	distance_km: float = Field(ge=0.0)
	risk_tier: RiskTier

	@classmethod
	def from_fire(cls, fire: FireRecord, distance_km: float, risk_tier: RiskTier) -> "RankedFireRecord":
		return cls(**dict(fire), distance_km=distance_km, risk_tier=risk_tier)


class CacheEntry(BaseSchema):
	"""Last successful wildfire fetch for a session. Replaced wholesale on refresh."""
	model_config = ConfigDict(frozen=True)

	payload: List[FireRecord]
	fetched_at_epoch_ms: int


class FetchOutcome(BaseSchema):
	"""
	Result of a wildfire fetch.
	`degraded` is True when `records` is the fallback set rather than live data.
	"""
	model_config = ConfigDict(frozen=True)

	records: List[FireRecord]
	degraded: bool = False
