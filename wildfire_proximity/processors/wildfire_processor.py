from typing import List
from wildfire_proximity.http_client.wildfire_client import WildfireClient, HotspotClient
from wildfire_proximity.schemas.wildfire import FetchOutcome, FireRecord
from wildfire_proximity.utils.arcgis_wildfire_parser import ArcGISWildfireParser
from wildfire_proximity.utils.wildfire_utils import WildfireUtils
import logging

logger = logging.getLogger(__name__)


class WildfireProcessor:
	"""
	Turns feature service responses into fire records.

	Wildfire fetches never raise: on failure the fixed fallback set is
	returned with `degraded=True`. Hotspot fetches return an empty list on
	failure since hotspots are only map context.
	"""

	def __init__(self, wildfire_client: WildfireClient, hotspot_client: HotspotClient):
		self.wildfire_client = wildfire_client
		self.hotspot_client = hotspot_client

	async def fetch_active_fires(self) -> FetchOutcome:
		"""
		Fetch active wildfires (Out of Control, Being Held, Under Control).

		Returns:
			FetchOutcome with live records, or the fallback set and degraded=True
		"""
		try:
			response = await self.wildfire_client.fetch_wildfires()
			records = ArcGISWildfireParser.parse_active_wildfires(response.get("features") or [])
		except Exception as e:
			logger.warning(f"Error fetching live wildfire data, using fallback: {str(e)}")
			return FetchOutcome(records=WildfireUtils.fallback_fires(), degraded=True)

		logger.info(f"Found {len(records)} active wildfires")
		return FetchOutcome(records=records, degraded=False)

	async def fetch_hotspots(self) -> List[FireRecord]:
		"""
		Fetch satellite hotspots inside the configured envelope.

		Returns:
			Hotspot records, or an empty list on any failure
		"""
		try:
			response = await self.hotspot_client.fetch_hotspots()
			return ArcGISWildfireParser.parse_hotspots(response.get("features") or [])
		except Exception as e:
			logger.debug(f"Hotspot fetch failed, continuing without hotspots: {str(e)}")
			return []
