"""
Render-time display lookups and a plain-text renderer for search state.
"""
import math
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict
from wildfire_proximity.schemas.wildfire import FireStatus, RankedFireRecord, RiskTier
from wildfire_proximity.state import SearchState
from wildfire_proximity.utils.risk_utils import is_critical_alert

DEFAULT_FIRE_RADIUS_M = 500.0


class DisplayDescriptor(BaseModel):
	"""How a fire or hotspot is drawn on the map and labelled in lists."""
	model_config = ConfigDict(frozen=True)

	label: str
	colour: str
	marker: str  # "circle" for managed fires, "point" for hotspots


STATUS_LABELS: Dict[FireStatus, str] = {
	FireStatus.OUT_OF_CONTROL: "Out-of-Control",
	FireStatus.BEING_HELD: "Being Held",
	FireStatus.UNDER_CONTROL: "Under Control",
	FireStatus.OUT: "Out",
	FireStatus.UNKNOWN: "Unknown",
}

STATUS_COLOURS: Dict[FireStatus, str] = {
	FireStatus.OUT_OF_CONTROL: "red",
	FireStatus.BEING_HELD: "orange",
	FireStatus.UNDER_CONTROL: "green",
}

RISK_COLOURS: Dict[RiskTier, str] = {
	RiskTier.EXTREME: "darkred",
	RiskTier.HIGH: "red",
	RiskTier.MODERATE: "orange",
	RiskTier.LOW: "yellow",
	RiskTier.MINIMAL: "green",
}

HOTSPOT_DESCRIPTOR = DisplayDescriptor(label="Satellite Hotspot", colour="purple", marker="point")

CRITICAL_ALERT_TEXT = (
	"Critical Alert: Out-of-control fire within 50km. Monitor emergency alerts, "
	"prepare evacuation plan, and follow official instructions."
)


def describe_fire(status: FireStatus, is_hotspot: bool) -> DisplayDescriptor:
	"""
	Look up the display descriptor for a (status, is_hotspot) pair.

	Args:
		status: Fire status
		is_hotspot: Whether the record is a satellite detection

	Returns:
		DisplayDescriptor
	"""
	if is_hotspot:
		return HOTSPOT_DESCRIPTOR
	return DisplayDescriptor(
		label=STATUS_LABELS.get(status, "Unknown"),
		colour=STATUS_COLOURS.get(status, "gray"),
		marker="circle",
	)


def risk_colour(tier: RiskTier) -> str:
	return RISK_COLOURS[tier]


def fire_radius_m(area_hectares: Optional[float]) -> float:
	"""
	Radius of a circle with the fire's area. 1 ha = 10,000 m^2.

	Args:
		area_hectares: Estimated burned area

	Returns:
		Radius in metres, DEFAULT_FIRE_RADIUS_M when the area is unknown
	"""
	if not area_hectares or area_hectares <= 0:
		return DEFAULT_FIRE_RADIUS_M
	return math.sqrt(area_hectares * 10000 / math.pi)


def map_center(state: SearchState, default: Tuple[float, float] = (48.95, -56.0)) -> Tuple[Tuple[float, float], int]:
	"""
	Map centre and zoom: the user's location zoomed in, or the province.

	Returns:
		((latitude, longitude), zoom)
	"""
	if state.user_location is None:
		return default, 6
	location = state.user_location.location
	return (location.latitude, location.longitude), 9


def render_fire(index: int, fire: RankedFireRecord) -> List[str]:
	descriptor = describe_fire(fire.status, fire.is_hotspot)
	start_date = fire.start_date.strftime("%Y-%m-%d") if fire.start_date else "Unknown"
	area = f"{fire.area_hectares:g} hectares" if fire.area_hectares else "TBD"
	lines = [
		f"{index}. {fire.display_name}: {fire.distance_km:.1f} km away [{fire.risk_tier.value}]",
		f"   ID: {fire.id} | Region: {fire.region or 'Unknown'}",
		f"   Status: {descriptor.label} | Area: {area} | Start Date: {start_date} | Cause: {fire.cause or 'Unknown'}",
	]
	if is_critical_alert(fire.distance_km, fire.status):
		lines.append(f"   {CRITICAL_ALERT_TEXT}")
	return lines


def render_search_state(state: SearchState) -> str:
	"""
	Plain-text rendering of the published search state.

	Args:
		state: Session search state

	Returns:
		Multi-line text
	"""
	lines: List[str] = []
	if state.error:
		lines.append(f"Error: {state.error}")
		return "\n".join(lines)

	if state.user_location is not None:
		lines.append(f"Location: {state.user_location.normalized_address}")
	if state.last_updated is not None:
		lines.append(f"Data last updated: {state.last_updated.strftime('%Y-%m-%d %H:%M:%S %Z')}")
	if state.info:
		lines.append(state.info)

	fires = state.ranked_fires
	if fires:
		lines.append(f"Active Wildfires Found: {len(fires)}")
		for index, fire in enumerate(fires, start=1):
			lines.extend(render_fire(index, fire))
	if state.hotspots:
		nearest = state.hotspots[0]
		lines.append(f"Satellite hotspots in region: {len(state.hotspots)} (nearest {nearest.distance_km:.1f} km)")
	return "\n".join(lines)
