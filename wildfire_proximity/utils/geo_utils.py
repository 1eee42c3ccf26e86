"""
Great-circle distance helpers.
"""
import math
from wildfire_proximity.schemas.location import Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine_distance_km(a: Coordinate, b: Coordinate) -> float:
	"""
	Great-circle distance between two coordinates using the haversine formula.

	Args:
		a: First coordinate
		b: Second coordinate

	Returns:
		Distance in kilometres (never negative, 0 for identical points)
	"""
	lat1 = math.radians(a.latitude)
	lat2 = math.radians(b.latitude)
	d_lat = lat2 - lat1
	d_lon = math.radians(b.longitude - a.longitude)

	h = (
		math.sin(d_lat / 2) ** 2
		+ math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
	)
	# Rounding can push h a hair outside [0, 1]
	h = min(1.0, max(0.0, h))
	return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))
