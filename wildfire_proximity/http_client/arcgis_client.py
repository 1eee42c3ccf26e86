"""
Base client for ArcGIS FeatureServer layer queries.
"""
from typing import Optional, Dict, Any
import httpx
from wildfire_proximity.http_client.base_client import BaseHTTPClient
from wildfire_proximity.exceptions import DataUnavailableError


class ArcGISFeatureClient(BaseHTTPClient):
	"""
	Queries a single FeatureServer layer (`<layer url>/query`).
	Any failure surfaces as DataUnavailableError so callers handle one type.
	"""

	source_name: str = "ArcGIS"

	def __init__(self, layer_url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
		super().__init__(layer_url, transport=transport)

	async def query(self, params: Dict[str, Any]) -> Dict[str, Any]:
		"""
		Run a layer query.

		Args:
			params: Query parameters (where, outFields, f, ...)

		Returns:
			Response JSON with a `features` list

		Raises:
			DataUnavailableError: HTTP/transport failure, invalid JSON, or an
				`error` object in the response body
		"""
		try:
			data = await self.get("/query", params=params)
		except httpx.HTTPStatusError as e:
			raise DataUnavailableError(self.source_name, f"request failed with status: {e.response.status_code}") from e
		except httpx.HTTPError as e:
			raise DataUnavailableError(self.source_name, str(e) or type(e).__name__) from e
		except ValueError as e:
			raise DataUnavailableError(self.source_name, f"invalid response body: {str(e)}") from e

		if not isinstance(data, dict):
			raise DataUnavailableError(self.source_name, "invalid response body")
		if data.get("error"):
			error = data["error"]
			message = error.get("message") if isinstance(error, dict) else str(error)
			raise DataUnavailableError(self.source_name, f"API Error: {message}")

		features = data.get("features")
		if features is not None and not isinstance(features, list):
			raise DataUnavailableError(self.source_name, "features is not a list")
		return data
