"""
Periodic wildfire cache invalidation running on the session's event loop.
"""
import asyncio
import logging
from typing import Optional
from wildfire_proximity.config import settings
from wildfire_proximity.services.wildfire_cache_service import WildfireCacheService

logger = logging.getLogger(__name__)


class CacheInvalidationTask:
	"""
	Clears the wildfire cache on a fixed interval, independent of searches.
	Invalidation only removes the entry; a fetch that writes afterwards keeps
	its fresh entry.
	"""

	def __init__(self, cache: WildfireCacheService, interval_seconds: Optional[float] = None):
		self.cache = cache
		self.interval_seconds = interval_seconds if interval_seconds is not None else settings.cache_invalidation_interval_seconds
		self._task: Optional[asyncio.Task] = None

	@property
	def running(self) -> bool:
		return self._task is not None and not self._task.done()

	def start(self) -> None:
		"""Schedule the invalidation loop. Must be called with a running event loop."""
		if self.running:
			return
		self._task = asyncio.get_running_loop().create_task(self._run())
		logger.info(f"Cache invalidation scheduled every {self.interval_seconds} seconds")

	async def stop(self) -> None:
		"""Cancel the invalidation loop and wait for it to finish."""
		if self._task is None:
			return
		self._task.cancel()
		try:
			await self._task
		except asyncio.CancelledError:
			pass
		self._task = None

	async def _run(self) -> None:
		while True:
			await asyncio.sleep(self.interval_seconds)
			try:
				logger.info("Clearing wildfire cache for auto-refresh")
				self.cache.clear()
			except Exception as e:
				logger.error(f"Cache invalidation failed: {str(e)}")
