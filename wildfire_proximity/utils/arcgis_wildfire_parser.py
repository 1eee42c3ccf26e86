"""
Parser for ArcGIS wildfire and hotspot feature data.
"""
from typing import Optional, Dict, Any, List
from pydantic import ValidationError
from wildfire_proximity.schemas.location import Coordinate
from wildfire_proximity.schemas.wildfire import FireRecord, FireStatus
from wildfire_proximity.utils.datetime_utils import parse_optional_timestamp_ms
import logging

logger = logging.getLogger(__name__)


class ArcGISWildfireParser:
	"""Parser for extracting and transforming ArcGIS feature data into fire records."""

	@staticmethod
	def parse_status(attributes: Dict[str, Any]) -> FireStatus:
		"""
		Parse the fire status code.

		Args:
			attributes: Feature attributes dictionary

		Returns:
			FireStatus, UNKNOWN when missing or unrecognized
		"""
		return FireStatus.from_code(attributes.get("STATUS"))

	@staticmethod
	def parse_location(feature: Dict[str, Any]) -> Optional[Coordinate]:
		"""
		Parse the point geometry of a wildfire feature.

		Args:
			feature: Complete feature dictionary ({attributes, geometry})

		Returns:
			Coordinate, or None when the geometry is missing or out of range
		"""
		try:
			return Coordinate.from_xy(feature.get("geometry"))
		except (ValidationError, TypeError, ValueError):
			logger.warning(f"Invalid geometry on feature: {feature.get('geometry')}")
			return None

	@staticmethod
	def parse_fire_id(attributes: Dict[str, Any]) -> str:
		"""
		Extract the fire identifier, falling back to the OBJECTID.

		Args:
			attributes: Feature attributes dictionary

		Returns:
			Fire id as string
		"""
		fire_id = attributes.get("FIREID")
		if fire_id:
			return str(fire_id)
		return str(attributes.get("OBJECTID", ""))

	@staticmethod
	def parse_optional_float(value: Any) -> Optional[float]:
		if value is None or value == "":
			return None
		try:
			return float(value)
		except (TypeError, ValueError):
			return None

	@staticmethod
	def parse_optional_int(value: Any) -> Optional[int]:
		if value is None or value == "":
			return None
		try:
			return int(value)
		except (TypeError, ValueError):
			return None

	@staticmethod
	def parse_optional_str(value: Any) -> Optional[str]:
		if value is None:
			return None
		value = str(value).strip()
		return value or None

	@staticmethod
	def parse_wildfire(feature: Dict[str, Any]) -> Optional[FireRecord]:
		"""
		Parse a wildfire feature into a FireRecord.

		Args:
			feature: Feature dictionary from the wildfire service

		Returns:
			FireRecord, or None if the feature has no usable coordinates
		"""
		attributes = feature.get("attributes") or {}
		location = ArcGISWildfireParser.parse_location(feature)
		if location is None:
			return None

		return FireRecord(
			id=ArcGISWildfireParser.parse_fire_id(attributes),
			name=ArcGISWildfireParser.parse_optional_str(attributes.get("NAME")),
			status=ArcGISWildfireParser.parse_status(attributes),
			location=location,
			area_hectares=ArcGISWildfireParser.parse_optional_float(attributes.get("AREAEST")),
			start_timestamp=parse_optional_timestamp_ms(attributes.get("FIREDATE")),
			provincial_fire_number=ArcGISWildfireParser.parse_optional_int(attributes.get("PROVFIRENUM")),
			region=ArcGISWildfireParser.parse_optional_str(attributes.get("REGION")),
			district=ArcGISWildfireParser.parse_optional_str(attributes.get("DISTRICT")),
			cause=ArcGISWildfireParser.parse_optional_str(attributes.get("CAUSE")),
			is_hotspot=False,
		)

	@staticmethod
	def parse_active_wildfires(features: List[Dict[str, Any]]) -> List[FireRecord]:
		"""
		Parse features and keep only active fires with valid coordinates.
		Records with status Out or an unrecognized status are dropped.

		Args:
			features: Feature list from the wildfire service

		Returns:
			Active fire records in feature order
		"""
		records = []
		skipped = 0
		for feature in features:
			record = ArcGISWildfireParser.parse_wildfire(feature)
			if record is None or not record.status.is_active:
				skipped += 1
				continue
			records.append(record)
		if skipped:
			logger.debug(f"Skipped {skipped} inactive or unlocated wildfire features")
		return records

	@staticmethod
	def parse_hotspot(feature: Dict[str, Any]) -> Optional[FireRecord]:
		"""
		Parse a satellite hotspot feature into a FireRecord.
		Coordinates come from the latitude/longitude attributes, with the point
		geometry as a fallback.

		Args:
			feature: Feature dictionary from the hotspot service

		Returns:
			FireRecord with is_hotspot=True, or None without usable coordinates
		"""
		attributes = feature.get("attributes") or {}
		latitude = ArcGISWildfireParser.parse_optional_float(attributes.get("latitude"))
		longitude = ArcGISWildfireParser.parse_optional_float(attributes.get("longitude"))

		try:
			if latitude is not None and longitude is not None:
				location = Coordinate(latitude=latitude, longitude=longitude)
			else:
				location = Coordinate.from_xy(feature.get("geometry"))
		except (ValidationError, TypeError, ValueError):
			logger.warning(f"Invalid coordinates on hotspot feature: {attributes.get('OBJECTID')}")
			location = None
		if location is None:
			return None

		return FireRecord(
			id=f"HS-{attributes.get('OBJECTID', '')}",
			status=FireStatus.UNKNOWN,
			location=location,
			is_hotspot=True,
			hotspot_confidence=ArcGISWildfireParser.parse_optional_str(attributes.get("confidence")),
		)

	@staticmethod
	def parse_hotspots(features: List[Dict[str, Any]]) -> List[FireRecord]:
		"""Parse hotspot features, dropping any without coordinates."""
		hotspots = []
		for feature in features:
			hotspot = ArcGISWildfireParser.parse_hotspot(feature)
			if hotspot is not None:
				hotspots.append(hotspot)
		return hotspots
