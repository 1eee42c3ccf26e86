from typing import Optional
from wildfire_proximity.exceptions import handle_search_exceptions
from wildfire_proximity.schemas.search import SearchResult
from wildfire_proximity.services.search_service import SearchService
from wildfire_proximity.state import SearchState


class SearchController:
	"""
	Entry point for the presentation layer. Runs a search and publishes the
	outcome to the session's SearchState.
	"""

	def __init__(self, search_service: SearchService, state: SearchState):
		self.search_service = search_service
		self.state = state

	async def submit(self, address: str) -> Optional[SearchResult]:
		"""
		Run a search for an address and publish it.

		A newer submit supersedes this one: its result is still returned to
		the caller but is not published to the state.

		Args:
			address: Address entered by the user

		Returns:
			SearchResult, or None if the search failed (the error is on the state)
		"""
		token = self.state.begin()
		return await self._run(token, address)

	@handle_search_exceptions
	async def _run(self, token: int, address: str) -> SearchResult:
		result = await self.search_service.search(address)
		self.state.publish(token, result)
		return result
