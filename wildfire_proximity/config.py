import os
from typing import Optional, Tuple
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Settings:
	# Geocoding (ArcGIS World Geocoder) configuration
	geocoding_base_url: str = os.getenv("GEOCODING_BASE_URL", "https://geocode.arcgis.com/arcgis/rest/services/World/GeocodeServer")
	geocode_max_candidates: int = int(os.getenv("GEOCODE_MAX_CANDIDATES", "5"))

	# Region the search is scoped to
	region_bias: str = os.getenv("REGION_BIAS", "Newfoundland and Labrador, Canada")
	region_display_name: str = os.getenv("REGION_DISPLAY_NAME", "Newfoundland & Labrador")
	country_code: str = os.getenv("COUNTRY_CODE", "CA")

	# Wildfire ArcGIS feature service (provincial Forestry & Agrifoods wildfire layer)
	wildfire_arcgis_base_url: str = os.getenv("WILDFIRE_ARCGIS_BASE_URL", "https://services8.arcgis.com/aCyQID5qQcyrJMm2/arcgis/rest/services/FFA_Wildfire/FeatureServer/1")

	# Satellite thermal hotspot feature service
	hotspot_arcgis_base_url: str = os.getenv("HOTSPOT_ARCGIS_BASE_URL", "https://services9.arcgis.com/RHVPKKiFTONKtxq3/arcgis/rest/services/Satellite_VIIRS_Thermal_Hotspots_and_Fire_Activity/FeatureServer/0")
	# xmin,ymin,xmax,ymax in WGS84, roughly the province's bounding box
	hotspot_envelope_raw: str = os.getenv("HOTSPOT_ENVELOPE", "-67.8,46.6,-52.6,60.4")

	# HTTP client configuration
	http_timeout_seconds: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))
	# 1 means a single attempt; failed geocodes are resubmitted by the user
	http_max_retries: int = int(os.getenv("HTTP_MAX_RETRIES", "1"))

	# Cache configuration
	cache_ttl_minutes: int = int(os.getenv("CACHE_TTL_MINUTES", "10"))
	cache_invalidation_interval_minutes: int = int(os.getenv("CACHE_INVALIDATION_INTERVAL_MINUTES", "10"))

	# Session store configuration ("memory" or "redis")
	session_store_backend: str = os.getenv("SESSION_STORE_BACKEND", "memory")
	session_ttl_seconds: int = int(os.getenv("SESSION_TTL_SECONDS", str(24 * 60 * 60)))

	# Redis configuration (only used by the redis session store)
	redis_host: str = os.getenv("REDIS_HOST", "localhost")
	redis_port: int = int(os.getenv("REDIS_PORT", "6379"))
	redis_db: int = int(os.getenv("REDIS_DB", "0"))
	redis_password: Optional[str] = os.getenv("REDIS_PASSWORD", None)

	log_level: str = os.getenv("LOG_LEVEL", "INFO")

	@property
	def cache_ttl_ms(self) -> int:
		"""Cache time-to-live in milliseconds."""
		return self.cache_ttl_minutes * 60 * 1000

	@property
	def cache_invalidation_interval_seconds(self) -> float:
		return self.cache_invalidation_interval_minutes * 60.0

	@property
	def hotspot_envelope(self) -> Tuple[float, float, float, float]:
		"""Hotspot query envelope as (xmin, ymin, xmax, ymax)."""
		xmin, ymin, xmax, ymax = (float(part) for part in self.hotspot_envelope_raw.split(","))
		return xmin, ymin, xmax, ymax

	@property
	def redis_url(self) -> str:
		if self.redis_password:
			return f"redis://:{self.redis_password}@{self.redis_host}:{self.redis_port}/{self.redis_db}"
		return f"redis://{self.redis_host}:{self.redis_port}/{self.redis_db}"

settings = Settings()
