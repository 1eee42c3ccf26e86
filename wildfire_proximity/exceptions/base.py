from typing import Optional

class WildfireProximityError(Exception):
	"""
	Base exception class for all wildfire proximity exceptions.
	`message` is plain text that can be shown to the user as-is.
	"""
	def __init__(self, message: str, detail: Optional[str] = None):
		self.message = message
		self.detail = detail or message
		super().__init__(self.message)

class InvalidInputError(WildfireProximityError):
	"""
	Raised when the submitted address is blank.
	Recoverable locally by re-prompting.
	"""
	def __init__(self, message: str = "Please enter an address"):
		super().__init__(message=message)

class AddressNotFoundError(WildfireProximityError):
	"""
	Raised when the geocoder returns no candidates for an address.
	This is a user input problem, surfaced verbatim.
	"""
	def __init__(self, address: str, region_name: str):
		self.address = address
		message = f"Address not found. Please try a more specific address in {region_name}."
		super().__init__(
			message=message,
			detail=f"No geocoding candidates for '{address}'"
		)

class GeocodingServiceError(WildfireProximityError):
	"""
	Raised on HTTP-level geocoding failure (non-2xx status, transport error
	or an undecodable response). This is an infrastructure problem.
	"""
	def __init__(self, reason: str):
		super().__init__(
			message=f"Geocoding failed: {reason}",
			detail=reason
		)

class DataUnavailableError(WildfireProximityError):
	"""
	Raised by feature service clients when a query fails.
	Never reaches the user: the processor substitutes fallback data.
	"""
	def __init__(self, source: str, reason: str):
		self.source = source
		super().__init__(
			message=f"{source} data unavailable: {reason}",
			detail=reason
		)
