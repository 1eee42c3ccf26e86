import logging
from functools import wraps
from wildfire_proximity.exceptions.base import WildfireProximityError

logger = logging.getLogger(__name__)

def handle_search_exceptions(func):
    """
    Decorator for controller methods that publish to the search state.
    Converts WildfireProximityError into a plain-text error on the state.

    The wrapped coroutine must be a method taking (self, token, ...) where
    `self.state` is a SearchState and `token` is the request token issued by
    `state.begin()`.

    Usage:
        @handle_search_exceptions
        async def _run(self, token, address):
            result = await self.search_service.search(address)
            ...
    """
    @wraps(func)
    async def wrapper(self, token, *args, **kwargs):
        try:
            return await func(self, token, *args, **kwargs)
        except WildfireProximityError as e:
            logger.info(f"Search failed with {type(e).__name__}: {e.detail}")
            self.state.fail(token, e.message)
            return None
        except Exception as e:
            # Catch-all for unexpected errors
            logger.exception(f"Unexpected error during search: {str(e)}")
            self.state.fail(token, f"Search failed: {str(e)}")
            return None
    return wrapper
