import argparse
import asyncio
from wildfire_proximity.config import settings
from wildfire_proximity.logging_config import setup_logging
from wildfire_proximity.presentation.display import render_search_state
from wildfire_proximity.session import WildfireSession


async def run(address: str) -> int:
	async with WildfireSession() as session:
		await session.controller.submit(address)
		print(render_search_state(session.state))
		return 1 if session.state.error else 0


def main() -> int:
	parser = argparse.ArgumentParser(
		description=f"Check active wildfires near an address in {settings.region_display_name}"
	)
	parser.add_argument("address", help="Address to search, e.g. \"123 Water Street, St. John's\"")
	args = parser.parse_args()

	# Structured JSON logging to stdout
	setup_logging(level=settings.log_level)
	return asyncio.run(run(args.address))


if __name__ == "__main__":
	raise SystemExit(main())
