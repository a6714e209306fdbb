"""Weather composer: resolves a city, runs the fetchers and builds the envelope."""

import asyncio
import logging
from collections.abc import Mapping

from weatherproxy.config.defaults import CITY_LOCATIONS
from weatherproxy.config.loader import city_table, resolve_api_key
from weatherproxy.config.schema import ProxyConfig
from weatherproxy.ingest.city_resolver import resolve_location_name
from weatherproxy.ingest.cwa_client import CwaClient
from weatherproxy.ingest.forecast_fetcher import ForecastFetcher
from weatherproxy.ingest.sun_fetcher import SunTimesFetcher
from weatherproxy.models.envelope import Envelope, normalize_error
from weatherproxy.models.errors import ConfigurationError

logger = logging.getLogger(__name__)

WEATHER_FALLBACK_MESSAGE = "unable to retrieve weather data"
COMBINED_FALLBACK_MESSAGE = "unable to retrieve data"


class WeatherService:
    def __init__(
        self,
        api_key: str | None,
        forecast_fetcher: ForecastFetcher,
        sun_fetcher: SunTimesFetcher,
        cities: Mapping[str, str] = CITY_LOCATIONS,
    ):
        self.api_key = api_key
        self.forecast_fetcher = forecast_fetcher
        self.sun_fetcher = sun_fetcher
        self.cities = cities

    async def weather_only(self, city_code: str) -> Envelope:
        """36-hour forecast for a city, without sun times."""
        location_name = resolve_location_name(city_code, self.cities)
        try:
            self._require_api_key()
            data = await self.forecast_fetcher.fetch(location_name)
        except Exception as e:
            return self._failure(e, location_name, WEATHER_FALLBACK_MESSAGE)
        return Envelope.success(data)

    async def weather_with_sun(self, city_code: str) -> Envelope:
        """Forecast and sun times fetched concurrently.

        The first failing fetch cancels the other and decides the error
        envelope; a partial result is never returned.
        """
        location_name = resolve_location_name(city_code, self.cities)
        try:
            self._require_api_key()
            async with asyncio.TaskGroup() as tg:
                weather_task = tg.create_task(self.forecast_fetcher.fetch(location_name))
                sun_task = tg.create_task(self.sun_fetcher.fetch(location_name))
        except ExceptionGroup as eg:
            return self._failure(eg.exceptions[0], location_name, COMBINED_FALLBACK_MESSAGE)
        except Exception as e:
            return self._failure(e, location_name, COMBINED_FALLBACK_MESSAGE)
        return Envelope.success(weather_task.result(), sun_task.result())

    def _require_api_key(self) -> None:
        if not self.api_key:
            raise ConfigurationError()

    def _failure(self, exc: Exception, location_name: str, fallback: str) -> Envelope:
        envelope = normalize_error(exc, fallback)
        if envelope.status_code >= 500:
            logger.error(
                "Weather lookup for %s failed: %s", location_name, exc, exc_info=exc
            )
        else:
            logger.info(
                "Weather lookup for %s returned %d: %s",
                location_name, envelope.status_code, envelope.body["message"],
            )
        return envelope


def build_weather_service(config: ProxyConfig, api_key: str | None = None) -> WeatherService:
    """Wire the service from config. The API key defaults to the environment."""
    if api_key is None:
        api_key = resolve_api_key(config)
    cwa = CwaClient(api_key or "", base_url=config.upstream.base_url)
    return WeatherService(
        api_key=api_key,
        forecast_fetcher=ForecastFetcher(cwa),
        sun_fetcher=SunTimesFetcher(cwa),
        cities=city_table(config),
    )
