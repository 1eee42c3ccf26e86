"""
HTTP clients for fetching wildfire and satellite hotspot features from ArcGIS.
"""
import logging
from typing import Optional, Dict, Any, Tuple
import httpx
from wildfire_proximity.http_client.arcgis_client import ArcGISFeatureClient
from wildfire_proximity.config import settings

logger = logging.getLogger(__name__)


class WildfireClient(ArcGISFeatureClient):
	"""Client for the provincial wildfire feature service."""

	source_name = "Wildfire"

	def __init__(self, layer_url: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
		super().__init__(layer_url or settings.wildfire_arcgis_base_url, transport=transport)

	async def fetch_wildfires(self) -> Dict[str, Any]:
		"""
		Fetch every wildfire record with geometry and all attribute fields.
		Filtering to active fires happens client-side.

		Returns:
			ArcGIS JSON response with wildfire features
		"""
		params = {
			"where": "1=1",
			"outFields": "*",
			"f": "json",
			"returnGeometry": "true",
			"outSR": "4326",
		}
		data = await self.query(params)
		logger.info(f"Fetched {len(data.get('features') or [])} wildfire features")
		return data


class HotspotClient(ArcGISFeatureClient):
	"""Client for the satellite thermal hotspot feature service."""

	source_name = "Hotspot"

	def __init__(
		self,
		layer_url: Optional[str] = None,
		envelope: Optional[Tuple[float, float, float, float]] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None
	):
		super().__init__(layer_url or settings.hotspot_arcgis_base_url, transport=transport)
		self.envelope = envelope or settings.hotspot_envelope

	async def fetch_hotspots(self) -> Dict[str, Any]:
		"""
		Fetch hotspot detections inside the configured envelope.

		Returns:
			ArcGIS JSON response with hotspot features
		"""
		xmin, ymin, xmax, ymax = self.envelope
		params = {
			"where": "1=1",
			"geometry": f"{xmin},{ymin},{xmax},{ymax}",
			"geometryType": "esriGeometryEnvelope",
			"inSR": "4326",
			"spatialRel": "esriSpatialRelIntersects",
			"outFields": "OBJECTID,latitude,longitude,confidence",
			"f": "json",
			"returnGeometry": "true",
			"outSR": "4326",
		}
		data = await self.query(params)
		logger.debug(f"Fetched {len(data.get('features') or [])} hotspot features")
		return data
