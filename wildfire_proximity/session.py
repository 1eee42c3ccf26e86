"""
Per-session wiring of clients, cache, state and the invalidation timer.
"""
import logging
import uuid
from typing import Optional
from wildfire_proximity.controllers.search_controller import SearchController
from wildfire_proximity.http_client.geocoding_client import GeocodingClient
from wildfire_proximity.http_client.wildfire_client import WildfireClient, HotspotClient
from wildfire_proximity.processors.wildfire_processor import WildfireProcessor
from wildfire_proximity.services.search_service import SearchService
from wildfire_proximity.services.wildfire_cache_service import WildfireCacheService, Clock
from wildfire_proximity.session_store import SessionStore, create_session_store
from wildfire_proximity.state import SearchState
from wildfire_proximity.tasks.cache_invalidation_task import CacheInvalidationTask

logger = logging.getLogger(__name__)


class WildfireSession:
	"""
	Everything scoped to one user session.

	Usage:
		async with WildfireSession() as session:
			await session.controller.submit("123 Water Street, St. John's")
			print(session.state.ranked_fires)
	"""

	def __init__(
		self,
		session_id: Optional[str] = None,
		store: Optional[SessionStore] = None,
		geocoding_client: Optional[GeocodingClient] = None,
		wildfire_client: Optional[WildfireClient] = None,
		hotspot_client: Optional[HotspotClient] = None,
		clock: Optional[Clock] = None,
		invalidation_interval_seconds: Optional[float] = None
	):
		self.session_id = session_id or uuid.uuid4().hex
		self.store = store or create_session_store(self.session_id)
		self.cache = WildfireCacheService(self.store, clock=clock)
		self.geocoding_client = geocoding_client or GeocodingClient()
		self.wildfire_client = wildfire_client or WildfireClient()
		self.hotspot_client = hotspot_client or HotspotClient()
		self.processor = WildfireProcessor(self.wildfire_client, self.hotspot_client)
		self.search_service = SearchService(self.geocoding_client, self.processor, self.cache)
		self.state = SearchState()
		self.controller = SearchController(self.search_service, self.state)
		self.invalidation_task = CacheInvalidationTask(self.cache, interval_seconds=invalidation_interval_seconds)

	async def start(self) -> None:
		logger.info("Starting wildfire session", extra={"session_id": self.session_id})
		self.invalidation_task.start()

	async def close(self) -> None:
		"""Stop the invalidation timer and close all HTTP clients."""
		await self.invalidation_task.stop()
		await self.geocoding_client.close()
		await self.wildfire_client.close()
		await self.hotspot_client.close()
		logger.info("Closed wildfire session", extra={"session_id": self.session_id})

	async def __aenter__(self):
		await self.start()
		return self

	async def __aexit__(self, exc_type, exc_val, exc_tb):
		await self.close()
