"""
Time-bounded cache for the last successful wildfire fetch of a session.
"""
import logging
from datetime import datetime
from typing import Callable, List, Optional, Sequence
from wildfire_proximity.config import settings
from wildfire_proximity.schemas.wildfire import CacheEntry, FireRecord, RankedFireRecord
from wildfire_proximity.session_store import SessionStore
from wildfire_proximity.utils.datetime_utils import now_epoch_ms, parse_timestamp_ms

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


class WildfireCacheService:
	"""
	Wraps a SessionStore with TTL semantics.

	An entry older than the TTL reads as a miss but stays in the store until
	`clear()` is called. Entries are always replaced wholesale.
	"""

	WILDFIRE_KEY = "wildfireData"
	HOTSPOT_KEY = "hotspotData"

	def __init__(self, store: SessionStore, ttl_ms: Optional[int] = None, clock: Optional[Clock] = None):
		self.store = store
		self.ttl_ms = ttl_ms if ttl_ms is not None else settings.cache_ttl_ms
		self.clock = clock or now_epoch_ms

	def _read_entry(self) -> Optional[CacheEntry]:
		data = self.store.read_as_dict(WildfireCacheService.WILDFIRE_KEY, "wildfire cache")
		if data is None:
			return None
		try:
			return CacheEntry.from_dict(data)
		except Exception as e:
			logger.warning(f"Discarding unreadable wildfire cache entry: {str(e)}")
			return None

	def get_cached(self) -> Optional[List[FireRecord]]:
		"""
		Return the cached fire records if the entry is younger than the TTL.

		Returns:
			Cached records, or None on a miss or a stale entry
		"""
		entry = self._read_entry()
		if entry is None:
			logger.debug("Wildfire cache miss: no entry")
			return None

		age_ms = self.clock() - entry.fetched_at_epoch_ms
		if age_ms >= self.ttl_ms:
			logger.debug(f"Wildfire cache miss: entry is {age_ms} ms old")
			return None

		logger.info(f"Using cached wildfire data ({len(entry.payload)} records, {age_ms} ms old)")
		return list(entry.payload)

	def set_cached(self, records: Sequence[FireRecord]) -> CacheEntry:
		"""
		Store a new cache entry stamped with the current clock time.
		A store failure is logged and the entry is returned unsaved, so the
		caller still has its live records.

		Args:
			records: Fire records to cache

		Returns:
			The CacheEntry built for the write
		"""
		entry = CacheEntry(payload=list(records), fetched_at_epoch_ms=self.clock())
		try:
			self.store.create(WildfireCacheService.WILDFIRE_KEY, entry.to_dict())
		except ValueError as e:
			logger.warning(f"Cache storage error, wildfire data not cached: {str(e)}")
		return entry

	def clear(self) -> bool:
		"""
		Explicitly invalidate the cached wildfire entry.

		Returns:
			True if an entry was removed
		"""
		removed = self.store.delete(WildfireCacheService.WILDFIRE_KEY)
		if removed:
			logger.info("Cleared wildfire cache")
		return removed

	@property
	def last_updated(self) -> Optional[datetime]:
		"""Fetch time of the stored entry, whether or not it is stale."""
		entry = self._read_entry()
		if entry is None:
			return None
		return parse_timestamp_ms(entry.fetched_at_epoch_ms)

	def get_hotspots(self) -> List[RankedFireRecord]:
		"""Hotspots with distances from the last search, for map context."""
		try:
			data = self.store.read(WildfireCacheService.HOTSPOT_KEY)
		except ValueError as e:
			logger.warning(f"Failed to read hotspot cache: {str(e)}")
			return []
		if not isinstance(data, list):
			return []
		try:
			return [RankedFireRecord.from_dict(item) for item in data]
		except Exception as e:
			logger.warning(f"Discarding unreadable hotspot cache entry: {str(e)}")
			return []

	def set_hotspots(self, hotspots: Sequence[RankedFireRecord]) -> bool:
		"""Store ranked hotspots; returns False if the store rejected the write."""
		try:
			return self.store.create(WildfireCacheService.HOTSPOT_KEY, [hotspot.to_dict() for hotspot in hotspots])
		except ValueError as e:
			logger.warning(f"Cache storage error, hotspot data not cached: {str(e)}")
			return False
