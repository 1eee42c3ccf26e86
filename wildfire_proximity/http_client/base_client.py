from typing import Optional, Dict, Any
import logging
import httpx
from abc import ABC
from wildfire_proximity.config import settings

logger = logging.getLogger(__name__)

class BaseHTTPClient(ABC):
	"""
	Base async HTTP client for the read-only JSON services used by a search.
	Can be extended for different API clients.
	"""

	def __init__(
		self,
		base_url: str,
		default_headers: Optional[Dict[str, str]] = None,
		timeout: Optional[float] = None,
		max_retries: Optional[int] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None
	):
		self.base_url = base_url.rstrip('/')
		self.default_headers = default_headers or {}
		self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
		self.max_retries = max(1, max_retries if max_retries is not None else settings.http_max_retries)
		self.client = httpx.AsyncClient(
			base_url=self.base_url,
			headers=self.default_headers,
			timeout=self.timeout,
			transport=transport
		)

	async def get(
		self,
		endpoint: str,
		params: Optional[Dict[str, Any]] = None,
		headers: Optional[Dict[str, str]] = None
	) -> Dict[str, Any]:
		"""
		Perform a GET request.

		Args:
			endpoint: API endpoint (relative to base_url)
			params: Query parameters
			headers: Additional headers (merged with default_headers)

		Returns:
			Response JSON as dictionary

		Raises:
			httpx.HTTPStatusError: on a non-2xx response after the last attempt
			httpx.TransportError: on a network failure after the last attempt
			ValueError: if the body is not valid JSON
		"""
		merged_headers = {**self.default_headers, **(headers or {})}

		for attempt in range(self.max_retries):
			try:
				response = await self.client.get(
					endpoint,
					params=params,
					headers=merged_headers
				)
				response.raise_for_status()
				return response.json()
			except (httpx.HTTPStatusError, httpx.TransportError) as e:
				if attempt == self.max_retries - 1:
					raise
				logger.warning(f"GET {endpoint} failed on attempt {attempt + 1}/{self.max_retries}: {str(e)}")

	async def close(self):
		"""Close the HTTP client."""
		await self.client.aclose()

	async def __aenter__(self):
		return self

	async def __aexit__(self, exc_type, exc_val, exc_tb):
		await self.close()
