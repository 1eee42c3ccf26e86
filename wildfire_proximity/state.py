import logging
from itertools import count
from typing import List, Optional
from datetime import datetime
from wildfire_proximity.schemas.location import GeocodeResult
from wildfire_proximity.schemas.search import SearchResult
from wildfire_proximity.schemas.wildfire import RankedFireRecord
logger = logging.getLogger(__name__)

class SearchState:
	"""
	Presentation-facing state for one session: the latest search result,
	the error or info message and the "last updated" timestamp.

	Overlapping searches are sequenced with a monotonic request token.
	`begin()` issues a token; `publish()` and `fail()` ignore any token older
	than the most recently issued one, so a slow earlier search can never
	overwrite a newer search's output.

	Read-only properties expose the published values; writes go through
	`begin`/`publish`/`fail` only.
	"""

	def __init__(self):
		self._tokens = count(1)
		self._latest_token = 0
		self._result: Optional[SearchResult] = None
		self._error: Optional[str] = None
		self._info: Optional[str] = None
		self._last_updated: Optional[datetime] = None
		self._loading = False

	@property
	def result(self) -> Optional[SearchResult]:
		return self._result

	@property
	def user_location(self) -> Optional[GeocodeResult]:
		return self._result.user_location if self._result else None

	@property
	def ranked_fires(self) -> List[RankedFireRecord]:
		return list(self._result.ranked_fires) if self._result else []

	@property
	def hotspots(self) -> List[RankedFireRecord]:
		return list(self._result.hotspots) if self._result else []

	@property
	def error(self) -> Optional[str]:
		return self._error

	@property
	def info(self) -> Optional[str]:
		return self._info

	@property
	def last_updated(self) -> Optional[datetime]:
		return self._last_updated

	@property
	def loading(self) -> bool:
		return self._loading

	@property
	def latest_token(self) -> int:
		return self._latest_token

	def is_current(self, token: int) -> bool:
		return token == self._latest_token

	def begin(self) -> int:
		"""
		Start a new search: issue a token and reset the visible outputs.

		Returns:
			Request token to pass to publish/fail
		"""
		token = next(self._tokens)
		self._latest_token = token
		self._result = None
		self._error = None
		self._info = None
		self._loading = True
		return token

	def publish(self, token: int, result: SearchResult) -> bool:
		"""
		Publish a finished search.

		Args:
			token: Token returned by begin()
			result: Search result

		Returns:
			True if published, False if the token was stale
		"""
		if not self.is_current(token):
			logger.info(f"Discarding stale search response (token {token}, latest {self._latest_token})")
			return False
		self._result = result
		self._info = result.message
		self._error = None
		if result.last_updated is not None:
			self._last_updated = result.last_updated
		self._loading = False
		return True

	def fail(self, token: int, message: str) -> bool:
		"""
		Publish a user-visible error for a search.

		Args:
			token: Token returned by begin()
			message: Plain-text error message

		Returns:
			True if published, False if the token was stale
		"""
		if not self.is_current(token):
			logger.info(f"Discarding stale search failure (token {token}, latest {self._latest_token})")
			return False
		self._result = None
		self._info = None
		self._error = message
		self._loading = False
		return True
