"""
End-to-end tests for WildfireSession with mocked HTTP services.
"""
import pytest
import httpx
from wildfire_proximity.http_client.geocoding_client import GeocodingClient
from wildfire_proximity.http_client.wildfire_client import WildfireClient, HotspotClient
from wildfire_proximity.presentation.display import render_search_state
from wildfire_proximity.schemas.search import DATA_UNAVAILABLE_MESSAGE
from wildfire_proximity.schemas.wildfire import RiskTier
from wildfire_proximity.session import WildfireSession
from wildfire_proximity.session_store import InMemorySessionStore
from tests.conftest import FakeClock, make_feature

GEOCODE_RESPONSE = {
	"candidates": [{
		"address": "123 Water St, St. John's, Newfoundland and Labrador, A1C 1A1",
		"location": {"x": -52.7125, "y": 47.5614},
		"score": 98.5,
	}]
}

WILDFIRE_RESPONSE = {
	"features": [
		make_feature(status="UC", x=-66.91, y=52.94, FIREID="far", NAME="Far Fire"),
		make_feature(status="O", x=-52.72, y=47.60, FIREID="done", NAME="Done Fire"),
		make_feature(status="OC", x=-52.72, y=47.60, FIREID="near", NAME="Near Fire"),
	]
}

HOTSPOT_RESPONSE = {
	"features": [
		{"attributes": {"OBJECTID": 9, "latitude": 47.7, "longitude": -53.0, "confidence": "nominal"}},
	]
}


class Counter:
	"""Mock transport handler that counts calls and returns a fixed response."""

	def __init__(self, status_code=200, payload=None):
		self.status_code = status_code
		self.payload = payload
		self.calls = 0

	def __call__(self, request: httpx.Request) -> httpx.Response:
		self.calls += 1
		return httpx.Response(self.status_code, json=self.payload)


def make_session(wildfire_handler, hotspot_handler=None, clock=None) -> WildfireSession:
	return WildfireSession(
		session_id="test",
		store=InMemorySessionStore(),
		geocoding_client=GeocodingClient(
			base_url="https://geocode.test/GeocodeServer",
			transport=httpx.MockTransport(Counter(payload=GEOCODE_RESPONSE)),
		),
		wildfire_client=WildfireClient(
			layer_url="https://wildfire.test/FeatureServer/1",
			transport=httpx.MockTransport(wildfire_handler),
		),
		hotspot_client=HotspotClient(
			layer_url="https://hotspot.test/FeatureServer/0",
			envelope=(-68.0, 46.5, -52.5, 60.5),
			transport=httpx.MockTransport(hotspot_handler or Counter(payload=HOTSPOT_RESPONSE)),
		),
		clock=clock or FakeClock(),
		invalidation_interval_seconds=3600,
	)


class TestWildfireSession:
	"""Test suite for WildfireSession."""

	@pytest.mark.asyncio
	async def test_live_search(self):
		wildfires = Counter(payload=WILDFIRE_RESPONSE)

		async with make_session(wildfires) as session:
			await session.controller.submit("123 Water Street")
			state = session.state

			assert state.error is None
			assert [f.id for f in state.ranked_fires] == ["near", "far"]
			assert state.ranked_fires[0].risk_tier == RiskTier.EXTREME
			assert [h.id for h in state.hotspots] == ["HS-9"]
			assert state.last_updated is not None
			assert "Near Fire" in render_search_state(state)

	@pytest.mark.asyncio
	async def test_second_search_within_ttl_uses_cache(self):
		wildfires = Counter(payload=WILDFIRE_RESPONSE)
		clock = FakeClock()

		async with make_session(wildfires, clock=clock) as session:
			await session.controller.submit("123 Water Street")
			clock.advance(minutes=5)
			await session.controller.submit("123 Water Street")
			assert wildfires.calls == 1

			clock.advance(minutes=6)
			await session.controller.submit("123 Water Street")
			assert wildfires.calls == 2

	@pytest.mark.asyncio
	async def test_wildfire_outage_falls_back(self):
		"""Test a failing wildfire service yields the fallback set with a notice."""
		wildfires = Counter(status_code=503, payload={})

		async with make_session(wildfires) as session:
			await session.controller.submit("123 Water Street")
			state = session.state

			assert state.error is None
			assert state.info == DATA_UNAVAILABLE_MESSAGE
			assert len(state.ranked_fires) == 4
			assert state.result.degraded is True

	@pytest.mark.asyncio
	async def test_hotspot_outage_is_silent(self):
		wildfires = Counter(payload=WILDFIRE_RESPONSE)
		hotspots = Counter(status_code=500, payload={})

		async with make_session(wildfires, hotspot_handler=hotspots) as session:
			await session.controller.submit("123 Water Street")
			state = session.state

			assert state.error is None
			assert state.info is None
			assert state.hotspots == []
			assert len(state.ranked_fires) == 2

	@pytest.mark.asyncio
	async def test_close_stops_timer(self):
		session = make_session(Counter(payload=WILDFIRE_RESPONSE))
		await session.start()
		assert session.invalidation_task.running is True

		await session.close()

		assert session.invalidation_task.running is False
