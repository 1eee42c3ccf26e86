from wildfire_proximity.exceptions.base import (
	WildfireProximityError,
	InvalidInputError,
	AddressNotFoundError,
	GeocodingServiceError,
	DataUnavailableError,
)
from wildfire_proximity.exceptions.handler import handle_search_exceptions

__all__ = [
	"WildfireProximityError",
	"InvalidInputError",
	"AddressNotFoundError",
	"GeocodingServiceError",
	"DataUnavailableError",
	"handle_search_exceptions"
]
