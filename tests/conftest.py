"""
Pytest configuration and fixtures.
"""
import pytest
from unittest.mock import AsyncMock
from wildfire_proximity.schemas.location import Coordinate, GeocodeResult
from wildfire_proximity.schemas.wildfire import FireRecord, FireStatus
from wildfire_proximity.services.wildfire_cache_service import WildfireCacheService
from wildfire_proximity.session_store import InMemorySessionStore


class FakeClock:
	"""Manually advanced clock returning epoch milliseconds."""

	def __init__(self, start_ms: int = 1_700_000_000_000):
		self.now_ms = start_ms

	def __call__(self) -> int:
		return self.now_ms

	def advance(self, minutes: float = 0, seconds: float = 0) -> None:
		self.now_ms += int((minutes * 60 + seconds) * 1000)


def make_fire(fire_id: str, latitude: float, longitude: float, status: FireStatus = FireStatus.OUT_OF_CONTROL, **kwargs) -> FireRecord:
	"""Build a FireRecord with sensible defaults."""
	return FireRecord(
		id=fire_id,
		name=kwargs.pop("name", f"Fire {fire_id}"),
		status=status,
		location=Coordinate(latitude=latitude, longitude=longitude),
		**kwargs
	)


def make_feature(status="OC", x=-53.18, y=47.75, **attributes) -> dict:
	"""Build a wildfire service feature."""
	base_attributes = {
		"OBJECTID": 1,
		"FIREID": "NL-TEST-001",
		"NAME": "Test Fire",
		"STATUS": status,
		"AREAEST": 120.5,
		"FIREDATE": 1723334400000,
		"PROVFIRENUM": 17,
		"REGION": "ET",
		"DISTRICT": "10",
		"CAUSE": "Lightning",
	}
	base_attributes.update(attributes)
	geometry = None if x is None and y is None else {"x": x, "y": y}
	return {"attributes": base_attributes, "geometry": geometry}


@pytest.fixture
def clock():
	return FakeClock()


@pytest.fixture
def store():
	return InMemorySessionStore()


@pytest.fixture
def cache(store, clock):
	return WildfireCacheService(store, ttl_ms=10 * 60 * 1000, clock=clock)


@pytest.fixture
def st_johns():
	"""Geocode result for downtown St. John's."""
	return GeocodeResult(
		location=Coordinate(latitude=47.5614, longitude=-52.7125),
		match_score=98.5,
		normalized_address="123 Water St, St. John's, Newfoundland and Labrador, A1C 1A1",
	)


@pytest.fixture
def mock_geocoding_client(st_johns):
	client = AsyncMock()
	client.geocode = AsyncMock(return_value=st_johns)
	client.close = AsyncMock()
	return client


@pytest.fixture
def mock_processor():
	processor = AsyncMock()
	processor.fetch_active_fires = AsyncMock()
	processor.fetch_hotspots = AsyncMock(return_value=[])
	return processor
