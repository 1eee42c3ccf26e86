"""
Risk classification for a fire relative to the searched location.
"""
from wildfire_proximity.schemas.wildfire import FireStatus, RiskTier

CRITICAL_ALERT_RADIUS_KM = 50.0


def classify_risk(distance_km: float, status: FireStatus) -> RiskTier:
	"""
	Map (distance, status) to a risk tier. Rules are checked top to bottom
	and the first match wins, so an out-of-control fire at 60 km is LOW.

	Args:
		distance_km: Great-circle distance to the fire
		status: Fire status

	Returns:
		RiskTier
	"""
	if status == FireStatus.OUT_OF_CONTROL:
		if distance_km < 10:
			return RiskTier.EXTREME
		if distance_km < 25:
			return RiskTier.HIGH
		if distance_km < 50:
			return RiskTier.MODERATE
	if status in (FireStatus.OUT_OF_CONTROL, FireStatus.BEING_HELD) and distance_km < 100:
		return RiskTier.LOW
	return RiskTier.MINIMAL


def is_critical_alert(distance_km: float, status: FireStatus) -> bool:
	"""True for an out-of-control fire inside the critical alert radius."""
	return status == FireStatus.OUT_OF_CONTROL and distance_km < CRITICAL_ALERT_RADIUS_KM
