"""Sun-times fetcher: first sunrise/sunset entry for a county."""

import logging

from weatherproxy.ingest.cwa_client import CwaClient
from weatherproxy.models.errors import NotFoundError
from weatherproxy.models.weather import SunTimes

logger = logging.getLogger(__name__)


class SunTimesFetcher:
    def __init__(self, cwa_client: CwaClient):
        self.cwa = cwa_client

    async def fetch(self, location_name: str) -> SunTimes:
        raw = await self.cwa.get_sunrise_sunset(location_name)
        return parse_sun_times(raw, location_name)


def parse_sun_times(raw: dict, location_name: str) -> SunTimes:
    """Extract the first date's sunrise/sunset. Later entries are discarded."""
    locations = ((raw.get("records") or {}).get("locations") or {}).get("location") or []
    match = next(
        (loc for loc in locations if loc.get("CountyName") == location_name), None
    )
    times = (match.get("time") or []) if match else []
    if not times:
        logger.warning("No sunrise/sunset entry for %s", location_name)
        raise NotFoundError(f"unable to retrieve sunrise/sunset data for {location_name}")

    first = times[0]
    return SunTimes(
        date=first.get("Date", ""),
        sun_rise_time=first.get("SunRiseTime", ""),
        sun_set_time=first.get("SunSetTime", ""),
    )
