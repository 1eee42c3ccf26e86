import json
import redis
import logging
from abc import ABC, abstractmethod
from typing import Optional, Any, Dict
from wildfire_proximity.config import settings

logger = logging.getLogger(__name__)

class SessionStore(ABC):
	"""
	Key-value store scoped to one user session.
	Values are JSON serialized on write and deserialized on read.
	"""

	@abstractmethod
	def create(self, key: str, value: Any) -> bool:
		"""Create or overwrite a key."""

	@abstractmethod
	def read(self, key: str) -> Optional[Any]:
		"""Read a key, returning None if it doesn't exist."""

	@abstractmethod
	def delete(self, key: str) -> bool:
		"""Delete a key, returning True if it existed."""

	def exists(self, key: str) -> bool:
		return self.read(key) is not None

	def read_as_dict(self, key: str, entity_type: str = "entity") -> Optional[Dict]:
		"""
		Read a value and normalize it to a dictionary.

		Args:
			key: Store key
			entity_type: Type of entity (for logging)

		Returns:
			Dictionary if successful, None otherwise
		"""
		try:
			data = self.read(key)
		except Exception as e:
			logger.warning(f"Failed to read {entity_type} from session key {key}: {str(e)}")
			return None
		if data is None:
			return None
		if not isinstance(data, dict):
			logger.warning(f"{entity_type.capitalize()} data from session key {key} is not a dictionary: {type(data)}")
			return None
		return data


class InMemorySessionStore(SessionStore):
	"""
	Process-local session store. Holds serialized JSON strings, mirroring
	browser session storage semantics; nothing survives the session.
	"""

	def __init__(self):
		self._data: Dict[str, str] = {}

	def create(self, key: str, value: Any) -> bool:
		try:
			self._data[key] = json.dumps(value, default=str)
			return True
		except (TypeError, ValueError) as e:
			raise ValueError(f"Failed to create key {key}: {str(e)}")

	def read(self, key: str) -> Optional[Any]:
		value = self._data.get(key)
		if value is None:
			return None
		try:
			return json.loads(value)
		except json.JSONDecodeError:
			return value

	def delete(self, key: str) -> bool:
		return self._data.pop(key, None) is not None

	def exists(self, key: str) -> bool:
		return key in self._data


class RedisSessionStore(SessionStore):
	"""
	Redis-backed session store. Keys are namespaced by session id and expire
	with the session so nothing is shared across sessions or users.
	"""

	KEY_PREFIX = "session:"

	def __init__(self, session_id: str, client: Optional[redis.Redis] = None, ttl: Optional[int] = None):
		self.session_id = session_id
		self.ttl = ttl if ttl is not None else settings.session_ttl_seconds
		self.client = client or redis.Redis(
			host=settings.redis_host,
			port=settings.redis_port,
			db=settings.redis_db,
			password=settings.redis_password,
			decode_responses=True,
			socket_connect_timeout=5,
			socket_timeout=5
		)

	def _key(self, key: str) -> str:
		return f"{RedisSessionStore.KEY_PREFIX}{self.session_id}:{key}"

	def create(self, key: str, value: Any) -> bool:
		"""
		Create or update a key-value pair in Redis.

		Args:
			key: Session key
			value: Value to store (will be JSON serialized)

		Returns:
			True if successful
		"""
		try:
			serialized = json.dumps(value, default=str)
			if self.ttl:
				return bool(self.client.setex(self._key(key), self.ttl, serialized))
			return bool(self.client.set(self._key(key), serialized))
		except Exception as e:
			raise ValueError(f"Failed to create key {key}: {str(e)}")

	def read(self, key: str) -> Optional[Any]:
		"""
		Read a value from Redis by key.

		Args:
			key: Session key

		Returns:
			Deserialized value or None if key doesn't exist
		"""
		try:
			value = self.client.get(self._key(key))
			if value is None:
				return None
			return json.loads(value)
		except json.JSONDecodeError:
			# If it's not JSON, return as string
			return value
		except Exception as e:
			raise ValueError(f"Failed to read key {key}: {str(e)}")

	def delete(self, key: str) -> bool:
		try:
			return bool(self.client.delete(self._key(key)))
		except Exception as e:
			raise ValueError(f"Failed to delete key {key}: {str(e)}")

	def exists(self, key: str) -> bool:
		try:
			return bool(self.client.exists(self._key(key)))
		except Exception as e:
			raise ValueError(f"Failed to check existence of key {key}: {str(e)}")

	def ping(self) -> bool:
		"""
		Test Redis connection.

		Returns:
			True if connection is alive
		"""
		try:
			return self.client.ping()
		except Exception as e:
			raise ConnectionError(f"Redis connection failed: {str(e)}")


def create_session_store(session_id: str, backend: Optional[str] = None) -> SessionStore:
	"""
	Build the configured session store. A redis backend that does not answer
	a ping is replaced by an in-memory store so searches keep working.

	Args:
		session_id: Identifier of the session owning the store
		backend: "memory" or "redis", defaults to settings.session_store_backend

	Returns:
		SessionStore instance
	"""
	backend = (backend or settings.session_store_backend).strip().lower()
	if backend == "memory":
		return InMemorySessionStore()
	if backend == "redis":
		store = RedisSessionStore(session_id)
		try:
			store.ping()
		except ConnectionError as e:
			logger.warning(f"{str(e)}; session {session_id} falls back to in-memory storage")
			return InMemorySessionStore()
		return store
	raise ValueError(f"Unknown session store backend: {backend}")
