from enum import Enum
from typing import List, Optional
from datetime import datetime
from pydantic import Field
from wildfire_proximity.schemas.base import BaseSchema
from wildfire_proximity.schemas.location import GeocodeResult
from wildfire_proximity.schemas.wildfire import RankedFireRecord


class SearchNotice(str, Enum):
	"""Informational conditions attached to a search. Neither is an error."""
	DATA_UNAVAILABLE = "data_unavailable"
	AREA_CLEAR = "area_clear"


DATA_UNAVAILABLE_MESSAGE = "Could not fetch live data. Showing recent examples."
AREA_CLEAR_MESSAGE = "No active wildfires found in the database. Your area is clear."


class SearchResult(BaseSchema):
	"""
	Output of a single search.

	`ranked_fires` holds active wildfires only, sorted by distance.
	`hotspots` is map context and never part of the ranked list.
	"""
	user_location: GeocodeResult
	ranked_fires: List[RankedFireRecord] = Field(default_factory=list)
	hotspots: List[RankedFireRecord] = Field(default_factory=list)
	degraded: bool = False
	area_clear: bool = False
	notice: Optional[SearchNotice] = None
	message: Optional[str] = None
	last_updated: Optional[datetime] = None
