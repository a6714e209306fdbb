"""Forecast fetcher: retrieves the CWA 36-hour forecast and flattens it per period."""

import logging

from weatherproxy.ingest.cwa_client import CwaClient
from weatherproxy.models.errors import NotFoundError
from weatherproxy.models.weather import ForecastPeriod, WeatherData

logger = logging.getLogger(__name__)

# elementName -> (ForecastPeriod field, unit suffix)
ELEMENT_FIELDS: dict[str, tuple[str, str]] = {
    "Wx": ("weather", ""),
    "PoP": ("rain", "%"),
    "MinT": ("min_temp", "°C"),
    "MaxT": ("max_temp", "°C"),
    "CI": ("comfort", ""),
    "WS": ("wind_speed", ""),
}


class ForecastFetcher:
    def __init__(self, cwa_client: CwaClient):
        self.cwa = cwa_client

    async def fetch(self, location_name: str) -> WeatherData:
        """Fetch and flatten the forecast for one location.

        Raises NotFoundError when the response has no matching location and
        UpstreamError when the request itself fails.
        """
        raw = await self.cwa.get_forecast_36h(location_name)
        return parse_forecast(raw, location_name)


def parse_forecast(raw: dict, location_name: str) -> WeatherData:
    """Turn index-aligned element series into one ForecastPeriod per period.

    The first element's time series decides the period count and boundaries.
    Shorter series leave their field empty for the missing periods.
    """
    records = raw.get("records") or {}
    locations = records.get("location") or []
    match = next(
        (loc for loc in locations if loc.get("locationName") == location_name), None
    )
    if match is None:
        logger.warning(
            "No forecast location %s among %d records", location_name, len(locations)
        )
        raise NotFoundError(f"unable to retrieve weather data for {location_name}")

    elements = match.get("weatherElement") or []
    periods = (elements[0].get("time") or []) if elements else []

    forecasts = []
    for i, period in enumerate(periods):
        values: dict[str, str] = {}
        for element in elements:
            mapped = ELEMENT_FIELDS.get(element.get("elementName", ""))
            if mapped is None:
                continue
            series = element.get("time") or []
            if i >= len(series):
                continue
            parameter = series[i].get("parameter") or {}
            name = parameter.get("parameterName")
            if name is None:
                continue
            field_name, suffix = mapped
            values[field_name] = f"{name}{suffix}"

        forecasts.append(
            ForecastPeriod(
                start_time=period.get("startTime", ""),
                end_time=period.get("endTime", ""),
                **values,
            )
        )

    return WeatherData(
        city=match["locationName"],
        update_time=records.get("datasetDescription", ""),
        forecasts=tuple(forecasts),
    )
