from typing import Any, Dict, Optional
from pydantic import Field, ConfigDict
from wildfire_proximity.schemas.base import BaseSchema

class Coordinate(BaseSchema):
	"""Coordinate with latitude and longitude in WGS84 degrees."""
	model_config = ConfigDict(frozen=True)

	latitude: float = Field(ge=-90.0, le=90.0)
	longitude: float = Field(ge=-180.0, le=180.0)

	@staticmethod
	def from_xy(geometry: Optional[Dict[str, Any]]) -> Optional["Coordinate"]:
		"""
		Build a coordinate from an ArcGIS point geometry ({x: lon, y: lat}).

		Args:
			geometry: ArcGIS geometry dictionary, may be None

		Returns:
			Coordinate, or None if either axis is missing
		"""
		if not geometry:
			return None
		x = geometry.get("x")
		y = geometry.get("y")
		if x is None or y is None:
			return None
		return Coordinate(latitude=float(y), longitude=float(x))

class GeocodeResult(BaseSchema):
	"""
	Resolved user location for a single search.
	Not persisted; discarded once the search completes.
	"""
	location: Coordinate
	match_score: float
	normalized_address: str
