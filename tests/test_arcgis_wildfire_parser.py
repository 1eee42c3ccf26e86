"""
Unit tests for ArcGISWildfireParser.
"""
import pytest
from wildfire_proximity.schemas.wildfire import FireStatus
from wildfire_proximity.utils.arcgis_wildfire_parser import ArcGISWildfireParser
from tests.conftest import make_feature


class TestParseWildfire:
	"""Test cases for ArcGISWildfireParser.parse_wildfire."""

	def test_parses_all_attributes(self):
		"""Test a complete feature maps onto every FireRecord field."""
		record = ArcGISWildfireParser.parse_wildfire(make_feature())

		assert record.id == "NL-TEST-001"
		assert record.name == "Test Fire"
		assert record.status == FireStatus.OUT_OF_CONTROL
		assert record.location.latitude == 47.75
		assert record.location.longitude == -53.18
		assert record.area_hectares == 120.5
		assert record.start_timestamp == 1723334400000
		assert record.provincial_fire_number == 17
		assert record.region == "ET"
		assert record.district == "10"
		assert record.cause == "Lightning"
		assert record.is_hotspot is False
		assert record.hotspot_confidence is None

	def test_missing_geometry_returns_none(self):
		"""Test a feature without geometry is unusable."""
		assert ArcGISWildfireParser.parse_wildfire(make_feature(x=None, y=None)) is None

	def test_partial_geometry_returns_none(self):
		"""Test a feature missing one axis is unusable."""
		feature = make_feature()
		feature["geometry"] = {"x": -53.18}
		assert ArcGISWildfireParser.parse_wildfire(feature) is None

	def test_out_of_range_geometry_returns_none(self):
		"""Test a feature in projected (non-WGS84) units is rejected."""
		assert ArcGISWildfireParser.parse_wildfire(make_feature(x=-5900000.0, y=6050000.0)) is None

	def test_falls_back_to_objectid(self):
		"""Test the OBJECTID is used when FIREID is missing."""
		record = ArcGISWildfireParser.parse_wildfire(make_feature(FIREID=None, OBJECTID=42))
		assert record.id == "42"

	def test_null_optional_attributes(self):
		"""Test nulls stay None."""
		record = ArcGISWildfireParser.parse_wildfire(make_feature(
			NAME=None, AREAEST=None, FIREDATE=None, PROVFIRENUM=None, REGION="", CAUSE=None
		))
		assert record.name is None
		assert record.area_hectares is None
		assert record.start_timestamp is None
		assert record.provincial_fire_number is None
		assert record.region is None
		assert record.cause is None
		assert record.display_name == "Fire #NL-TEST-001"

	@pytest.mark.parametrize("code,expected", [
		("OC", FireStatus.OUT_OF_CONTROL),
		("BH", FireStatus.BEING_HELD),
		("UC", FireStatus.UNDER_CONTROL),
		("O", FireStatus.OUT),
		("oc ", FireStatus.OUT_OF_CONTROL),
		("XX", FireStatus.UNKNOWN),
		(None, FireStatus.UNKNOWN),
	])
	def test_status_codes(self, code, expected):
		"""Test raw status codes map onto FireStatus."""
		assert ArcGISWildfireParser.parse_status({"STATUS": code}) == expected


class TestParseActiveWildfires:
	"""Test cases for ArcGISWildfireParser.parse_active_wildfires."""

	def test_keeps_only_active_statuses(self):
		"""Test OC, BH and UC are kept in order while O and unknown are dropped."""
		features = [
			make_feature(status="OC", FIREID="a"),
			make_feature(status="O", FIREID="b"),
			make_feature(status="BH", FIREID="c"),
			make_feature(status="ZZ", FIREID="d"),
			make_feature(status="UC", FIREID="e"),
			make_feature(status=None, FIREID="f"),
		]
		records = ArcGISWildfireParser.parse_active_wildfires(features)
		assert [r.id for r in records] == ["a", "c", "e"]

	def test_drops_records_without_coordinates(self):
		"""Test an active fire without geometry is excluded."""
		features = [
			make_feature(status="OC", FIREID="a", x=None, y=None),
			make_feature(status="OC", FIREID="b"),
		]
		records = ArcGISWildfireParser.parse_active_wildfires(features)
		assert [r.id for r in records] == ["b"]

	def test_empty_features(self):
		assert ArcGISWildfireParser.parse_active_wildfires([]) == []


class TestParseHotspots:
	"""Test cases for ArcGISWildfireParser.parse_hotspots."""

	def test_parses_attribute_coordinates(self):
		"""Test hotspots use the latitude/longitude attributes."""
		features = [{
			"attributes": {"OBJECTID": 9, "latitude": 48.1, "longitude": -56.2, "confidence": "nominal"},
			"geometry": {"x": 0, "y": 0},
		}]
		hotspots = ArcGISWildfireParser.parse_hotspots(features)

		assert len(hotspots) == 1
		hotspot = hotspots[0]
		assert hotspot.id == "HS-9"
		assert hotspot.is_hotspot is True
		assert hotspot.status == FireStatus.UNKNOWN
		assert hotspot.hotspot_confidence == "nominal"
		assert hotspot.location.latitude == 48.1
		assert hotspot.location.longitude == -56.2

	def test_falls_back_to_geometry(self):
		"""Test geometry is used when the attributes lack coordinates."""
		features = [{"attributes": {"OBJECTID": 3, "confidence": "h"}, "geometry": {"x": -57.0, "y": 49.0}}]
		hotspot = ArcGISWildfireParser.parse_hotspots(features)[0]
		assert hotspot.location.latitude == 49.0
		assert hotspot.location.longitude == -57.0

	def test_skips_hotspots_without_coordinates(self):
		features = [{"attributes": {"OBJECTID": 3}, "geometry": None}]
		assert ArcGISWildfireParser.parse_hotspots(features) == []

	def test_malformed_hotspot_does_not_drop_valid_ones(self):
		"""Test a non-numeric geometry skips only that hotspot."""
		features = [
			{"attributes": {"OBJECTID": 1, "latitude": 48.1, "longitude": -56.2}},
			{"attributes": {"OBJECTID": 2}, "geometry": {"x": "bad", "y": 48.0}},
			{"attributes": {"OBJECTID": 3}, "geometry": {"x": None, "y": 48.0}},
		]

		hotspots = ArcGISWildfireParser.parse_hotspots(features)

		assert [h.id for h in hotspots] == ["HS-1"]
