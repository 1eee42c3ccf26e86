"""
Unit tests for GeocodingClient.
"""
import pytest
import httpx
from wildfire_proximity.exceptions import AddressNotFoundError, GeocodingServiceError
from wildfire_proximity.http_client.geocoding_client import GeocodingClient


def make_client(handler) -> GeocodingClient:
	return GeocodingClient(
		base_url="https://geocode.test/arcgis/rest/services/World/GeocodeServer",
		region_bias="Newfoundland and Labrador, Canada",
		transport=httpx.MockTransport(handler)
	)


CANDIDATES_RESPONSE = {
	"candidates": [
		{
			"address": "123 Water St, St. John's, Newfoundland and Labrador, A1C 1A1",
			"location": {"x": -52.7125, "y": 47.5614},
			"score": 98.5,
		},
		{
			"address": "Water St, Carbonear, Newfoundland and Labrador",
			"location": {"x": -53.2, "y": 47.73},
			"score": 80,
		},
	]
}


class TestGeocode:
	"""Test cases for GeocodingClient.geocode."""

	@pytest.mark.asyncio
	async def test_uses_first_candidate(self):
		"""Test the highest-ranked (first) candidate is returned."""
		client = make_client(lambda request: httpx.Response(200, json=CANDIDATES_RESPONSE))

		result = await client.geocode("123 Water Street, St. John's")
		await client.close()

		assert result.location.latitude == 47.5614
		assert result.location.longitude == -52.7125
		assert result.match_score == 98.5
		assert result.normalized_address.startswith("123 Water St")

	@pytest.mark.asyncio
	async def test_request_parameters(self):
		"""Test the query carries the region bias and fixed parameters."""
		seen = {}

		def handler(request: httpx.Request) -> httpx.Response:
			seen["path"] = request.url.path
			seen["params"] = dict(request.url.params)
			return httpx.Response(200, json=CANDIDATES_RESPONSE)

		client = make_client(handler)
		await client.geocode("123 Water Street")
		await client.close()

		assert seen["path"] == "/arcgis/rest/services/World/GeocodeServer/findAddressCandidates"
		assert seen["params"]["SingleLine"] == "123 Water Street, Newfoundland and Labrador, Canada"
		assert seen["params"]["f"] == "json"
		assert seen["params"]["outSR"] == "4326"
		assert seen["params"]["maxLocations"] == "5"
		assert seen["params"]["countryCode"] == "CA"

	@pytest.mark.asyncio
	@pytest.mark.parametrize("body", [{"candidates": []}, {}])
	async def test_no_candidates_raises_address_not_found(self, body):
		"""Test empty or absent candidates is a user-correctable error."""
		client = make_client(lambda request: httpx.Response(200, json=body))

		with pytest.raises(AddressNotFoundError) as exc_info:
			await client.geocode("nowhere")
		await client.close()

		assert "more specific address" in exc_info.value.message

	@pytest.mark.asyncio
	async def test_http_error_raises_service_error(self):
		"""Test a non-2xx status is an infrastructure error."""
		client = make_client(lambda request: httpx.Response(503, text="unavailable"))

		with pytest.raises(GeocodingServiceError) as exc_info:
			await client.geocode("123 Water Street")
		await client.close()

		assert "503" in exc_info.value.message

	@pytest.mark.asyncio
	async def test_transport_error_raises_service_error(self):
		"""Test a network failure is an infrastructure error."""
		def handler(request):
			raise httpx.ConnectError("connection refused", request=request)

		client = make_client(handler)

		with pytest.raises(GeocodingServiceError):
			await client.geocode("123 Water Street")
		await client.close()

	@pytest.mark.asyncio
	async def test_invalid_json_raises_service_error(self):
		client = make_client(lambda request: httpx.Response(200, text="<html>oops</html>"))

		with pytest.raises(GeocodingServiceError):
			await client.geocode("123 Water Street")
		await client.close()

	@pytest.mark.asyncio
	async def test_no_automatic_retry(self):
		"""Test a failed geocode is attempted exactly once."""
		calls = []

		def handler(request):
			calls.append(request)
			return httpx.Response(500)

		client = make_client(handler)
		with pytest.raises(GeocodingServiceError):
			await client.geocode("123 Water Street")
		await client.close()

		assert len(calls) == 1
