"""
Search orchestration: address in, ranked nearby wildfires out.
"""
import asyncio
import logging
from typing import List, Optional, Tuple
from wildfire_proximity.exceptions import InvalidInputError
from wildfire_proximity.http_client.geocoding_client import GeocodingClient
from wildfire_proximity.processors.wildfire_processor import WildfireProcessor
from wildfire_proximity.schemas.search import (
	SearchResult,
	SearchNotice,
	AREA_CLEAR_MESSAGE,
	DATA_UNAVAILABLE_MESSAGE,
)
from wildfire_proximity.schemas.wildfire import FetchOutcome, FireRecord
from wildfire_proximity.services.wildfire_cache_service import WildfireCacheService
from wildfire_proximity.utils.wildfire_utils import WildfireUtils

logger = logging.getLogger(__name__)


class SearchService:
	"""Composes geocoding, cache-or-fetch, distance and risk ranking."""

	def __init__(
		self,
		geocoding_client: GeocodingClient,
		processor: WildfireProcessor,
		cache: WildfireCacheService
	):
		self.geocoding_client = geocoding_client
		self.processor = processor
		self.cache = cache

	async def search(self, address: str) -> SearchResult:
		"""
		Find active wildfires near an address, nearest first.

		Args:
			address: Free-text address

		Returns:
			SearchResult with ranked fires, hotspot map context and any notice

		Raises:
			InvalidInputError: address is blank (no network call is made)
			AddressNotFoundError: the geocoder found no match
			GeocodingServiceError: the geocoder could not be reached
		"""
		if address is None or not address.strip():
			raise InvalidInputError()
		address = address.strip()

		logger.info(f"Searching for: {address}")
		user_location = await self.geocoding_client.geocode(address)

		(outcome, from_cache), hotspots = await asyncio.gather(
			self._get_active_fires(),
			self.processor.fetch_hotspots(),
		)

		ranked_fires = WildfireUtils.rank_by_distance(outcome.records, user_location.location)
		ranked_hotspots = WildfireUtils.rank_by_distance(hotspots, user_location.location)
		self.cache.set_hotspots(ranked_hotspots)

		result = SearchResult(
			user_location=user_location,
			ranked_fires=ranked_fires,
			hotspots=ranked_hotspots,
			degraded=outcome.degraded,
			# Fallback records have no fetch time of their own
			last_updated=None if outcome.degraded else self.cache.last_updated,
		)
		if outcome.degraded:
			result.notice = SearchNotice.DATA_UNAVAILABLE
			result.message = DATA_UNAVAILABLE_MESSAGE
		elif not ranked_fires:
			result.area_clear = True
			result.notice = SearchNotice.AREA_CLEAR
			result.message = AREA_CLEAR_MESSAGE

		logger.info(
			f"Search complete: {len(ranked_fires)} fires, {len(ranked_hotspots)} hotspots "
			f"(cached={from_cache}, degraded={outcome.degraded})"
		)
		return result

	async def _get_active_fires(self) -> Tuple[FetchOutcome, bool]:
		"""
		Cache-or-fetch for the active fire set. Only live data is cached, so a
		degraded fetch is retried on the next search.

		Returns:
			Tuple of (FetchOutcome, served_from_cache)
		"""
		cached: Optional[List[FireRecord]] = self.cache.get_cached()
		if cached is not None:
			return FetchOutcome(records=cached, degraded=False), True

		logger.info("Fetching fresh wildfire data")
		outcome = await self.processor.fetch_active_fires()
		if not outcome.degraded:
			self.cache.set_cached(outcome.records)
		return outcome, False
