"""
Structured JSON logging.

Every record becomes one JSON object per line. Values passed through
`extra=` (for example `session_id`) are copied into the object, so a
session's searches can be followed across modules.
"""
import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional, TextIO

# Attributes every LogRecord carries; anything else came in through `extra=`
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}

NOISY_LOGGERS = ("httpx", "httpcore", "redis", "asyncio")


class JSONFormatter(logging.Formatter):
	"""Formats a record as a single-line JSON object."""

	def format(self, record: logging.LogRecord) -> str:
		log_data: Dict[str, Any] = {
			"timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace("+00:00", "Z"),
			"level": record.levelname,
			"logger": record.name,
			"message": record.getMessage(),
			"location": f"{record.module}:{record.funcName}:{record.lineno}",
		}

		for key, value in record.__dict__.items():
			if key not in _RESERVED_ATTRS and not key.startswith("_"):
				log_data[key] = value

		if record.exc_info:
			log_data["exception"] = self.formatException(record.exc_info)

		return json.dumps(log_data, default=str)


def setup_logging(
	level: str = "INFO",
	stream: Optional[TextIO] = None,
	quiet: Iterable[str] = NOISY_LOGGERS
) -> None:
	"""
	Route all logging through one JSON handler.

	Args:
		level: Logging level name (DEBUG, INFO, WARNING, ...)
		stream: Output stream, stdout by default
		quiet: Third-party loggers capped at WARNING

	When PYTHONDEBUG is set only the package logger level changes, leaving an
	interactive debugger's handlers alone.
	"""
	log_level = getattr(logging, level.upper(), logging.INFO)

	if os.getenv("PYTHONDEBUG", "").lower() in ("1", "true"):
		logging.getLogger("wildfire_proximity").setLevel(log_level)
		return

	handler = logging.StreamHandler(stream or sys.stdout)
	handler.setFormatter(JSONFormatter())

	root_logger = logging.getLogger()
	root_logger.handlers.clear()
	root_logger.addHandler(handler)
	root_logger.setLevel(log_level)

	for name in quiet:
		logging.getLogger(name).setLevel(logging.WARNING)
