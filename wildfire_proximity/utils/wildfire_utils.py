"""
Utility functions for wildfire data processing.
"""
from typing import List, Sequence
from wildfire_proximity.schemas.location import Coordinate
from wildfire_proximity.schemas.wildfire import FireRecord, FireStatus, RankedFireRecord
from wildfire_proximity.utils.geo_utils import haversine_distance_km
from wildfire_proximity.utils.risk_utils import classify_risk


# Representative recent fires shown when the live feed cannot be reached
FALLBACK_FIRES: tuple = (
	FireRecord(
		id="NL-2025-Kingston",
		name="Kingston Peninsula Fire",
		status=FireStatus.OUT_OF_CONTROL,
		location=Coordinate(latitude=47.75, longitude=-53.18),
		area_hectares=5000,
		start_timestamp=1723334400000,
		provincial_fire_number=301,
		region="ET",
		district="10",
		cause="Lightning",
	),
	FireRecord(
		id="NL-2025-Ochre",
		name="Ochre Pit Cove Area Fire",
		status=FireStatus.OUT_OF_CONTROL,
		location=Coordinate(latitude=47.72, longitude=-53.25),
		area_hectares=1200,
		start_timestamp=1723420800000,
		provincial_fire_number=302,
		region="ET",
		district="10",
		cause="Human",
	),
	FireRecord(
		id="NL-2025-Trinity",
		name="Trinity Bay Fire",
		status=FireStatus.BEING_HELD,
		location=Coordinate(latitude=47.65, longitude=-53.38),
		area_hectares=800,
		start_timestamp=1723248000000,
		provincial_fire_number=303,
		region="ET",
		district="11",
		cause="Lightning",
	),
	FireRecord(
		id="NL-2025-Labrador",
		name="Labrador City Area Fire",
		status=FireStatus.UNDER_CONTROL,
		location=Coordinate(latitude=52.94, longitude=-66.91),
		area_hectares=2500,
		start_timestamp=1723161600000,
		provincial_fire_number=304,
		region="LB",
		district="20",
		cause="Lightning",
	),
)


class WildfireUtils:
	"""Helper class for wildfire-related utility methods."""

	@staticmethod
	def fallback_fires() -> List[FireRecord]:
		"""
		Fixed fallback set used in degraded mode.

		Returns:
			New list of the four fallback records
		"""
		return list(FALLBACK_FIRES)

	@staticmethod
	def rank_by_distance(fires: Sequence[FireRecord], origin: Coordinate) -> List[RankedFireRecord]:
		"""
		Attach distance and risk tier to every fire and sort nearest first.
		The sort is stable, so equal distances keep their fetch order.

		Args:
			fires: Fire records in fetch order
			origin: Searched location

		Returns:
			Ranked records sorted ascending by distance
		"""
		ranked = []
		for fire in fires:
			distance_km = haversine_distance_km(origin, fire.location)
			ranked.append(RankedFireRecord.from_fire(
				fire,
				distance_km=distance_km,
				risk_tier=classify_risk(distance_km, fire.status),
			))
		return sorted(ranked, key=lambda record: record.distance_km)
