"""
HTTP client for the ArcGIS World geocoding service.
"""
import logging
from typing import Optional
import httpx
from wildfire_proximity.http_client.base_client import BaseHTTPClient
from wildfire_proximity.config import settings
from wildfire_proximity.exceptions import AddressNotFoundError, GeocodingServiceError
from wildfire_proximity.schemas.location import Coordinate, GeocodeResult

logger = logging.getLogger(__name__)


class GeocodingClient(BaseHTTPClient):
	"""
	Resolves free-text addresses to coordinates.
	Queries are biased to the configured region by appending it to the address.
	"""

	def __init__(
		self,
		base_url: Optional[str] = None,
		region_bias: Optional[str] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None
	):
		super().__init__(base_url or settings.geocoding_base_url, transport=transport)
		self.region_bias = region_bias or settings.region_bias

	def build_params(self, address: str) -> dict:
		return {
			"SingleLine": f"{address}, {self.region_bias}",
			"f": "json",
			"outSR": "4326",
			"maxLocations": settings.geocode_max_candidates,
			"countryCode": settings.country_code,
		}

	async def geocode(self, address: str) -> GeocodeResult:
		"""
		Geocode an address, always taking the first (highest ranked) candidate.

		Args:
			address: Non-empty address text

		Returns:
			GeocodeResult for the best candidate

		Raises:
			AddressNotFoundError: the service returned no candidates
			GeocodingServiceError: HTTP or transport failure, or an unusable response
		"""
		try:
			data = await self.get("/findAddressCandidates", params=self.build_params(address))
		except httpx.HTTPStatusError as e:
			raise GeocodingServiceError(f"HTTP error! status: {e.response.status_code}") from e
		except httpx.HTTPError as e:
			raise GeocodingServiceError(str(e) or type(e).__name__) from e
		except ValueError as e:
			raise GeocodingServiceError(f"invalid response body: {str(e)}") from e

		if not isinstance(data, dict):
			raise GeocodingServiceError("invalid response body")
		if data.get("error"):
			error = data["error"]
			reason = error.get("message") if isinstance(error, dict) else str(error)
			raise GeocodingServiceError(f"service error: {reason}")

		candidates = data.get("candidates") or []
		if not candidates:
			raise AddressNotFoundError(address, settings.region_display_name)

		best = candidates[0]
		location = best.get("location") or {}
		try:
			coordinate = Coordinate(latitude=location["y"], longitude=location["x"])
		except (KeyError, TypeError, ValueError) as e:
			raise GeocodingServiceError(f"candidate without a usable location: {str(e)}") from e

		result = GeocodeResult(
			location=coordinate,
			match_score=float(best.get("score") or 0.0),
			normalized_address=best.get("address") or address,
		)
		logger.info(f"Geocoded '{address}' to ({coordinate.latitude}, {coordinate.longitude}) with score {result.match_score}")
		return result
