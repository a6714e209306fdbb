"""CWA open-data API client (async, no retries)."""

import logging

import httpx

from weatherproxy.config.schema import CWA_API_BASE_URL
from weatherproxy.models.errors import UpstreamError

logger = logging.getLogger(__name__)

FORECAST_36H_DATASET = "F-C0032-001"
SUNRISE_SUNSET_DATASET = "A-B0062-001"


class CwaClient:
    def __init__(self, api_key: str, base_url: str = CWA_API_BASE_URL):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    async def get_forecast_36h(self, location_name: str) -> dict:
        """Fetch the 36-hour forecast dataset filtered to one location."""
        return await self._get(FORECAST_36H_DATASET, {"locationName": location_name})

    async def get_sunrise_sunset(self, county_name: str) -> dict:
        """Fetch the sunrise/sunset dataset filtered to one county."""
        return await self._get(SUNRISE_SUNSET_DATASET, {"CountyName": county_name})

    async def _get(self, dataset_id: str, params: dict[str, str]) -> dict:
        url = f"{self.base_url}/v1/rest/datastore/{dataset_id}"
        query = {"Authorization": self.api_key, **params}
        try:
            async with httpx.AsyncClient() as client:
                resp = await client.get(url, params=query)
                resp.raise_for_status()
                return resp.json()
        except ValueError as e:
            logger.error("CWA %s returned invalid JSON for %s: %s", dataset_id, params, e)
            raise UpstreamError("CWA returned invalid JSON") from e
        except httpx.HTTPStatusError as e:
            logger.error(
                "CWA %s returned %d for %s", dataset_id, e.response.status_code, params
            )
            raise UpstreamError.from_response(e.response) from e
        except httpx.RequestError as e:
            logger.error("CWA %s request failed for %s: %s", dataset_id, params, e)
            raise UpstreamError(f"CWA request failed: {e}") from e
