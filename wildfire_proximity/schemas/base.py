from typing import Any, Dict
from pydantic import BaseModel


class BaseSchema(BaseModel):
	"""
	Base schema class with JSON-friendly serialization/deserialization
	for session store round trips.
	"""

	def to_dict(self) -> Dict[str, Any]:
		"""Convert model to a JSON-compatible dictionary."""
		return self.model_dump(mode="json")

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "BaseSchema":
		"""Create model instance from a dictionary produced by to_dict."""
		return cls.model_validate(data)
