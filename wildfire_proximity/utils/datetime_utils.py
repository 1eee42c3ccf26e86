"""
Datetime utility functions.
"""
from typing import Optional
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)


def parse_timestamp_ms(timestamp_ms: Optional[int]) -> Optional[datetime]:
	"""
	Convert milliseconds timestamp to datetime.

	Args:
		timestamp_ms: Timestamp in milliseconds

	Returns:
		datetime object in UTC, or None if timestamp is None
	"""
	if timestamp_ms is None:
		return None
	return datetime.fromtimestamp(timestamp_ms / 1000.0, tz=timezone.utc)


def now_epoch_ms() -> int:
	"""Current wall-clock time in epoch milliseconds."""
	return int(datetime.now(timezone.utc).timestamp() * 1000)


def parse_optional_timestamp_ms(value) -> Optional[int]:
	"""
	Coerce an ArcGIS date attribute (epoch ms, possibly a float or string) to int.

	Args:
		value: Raw attribute value

	Returns:
		Epoch milliseconds, or None if missing or not numeric
	"""
	if value is None or value == "":
		return None
	try:
		return int(float(value))
	except (TypeError, ValueError):
		logger.warning(f"Ignoring non-numeric timestamp value: {value!r}")
		return None
