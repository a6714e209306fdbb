"""Map client city codes to the location names the CWA API expects."""

from collections.abc import Mapping

from weatherproxy.config.defaults import CITY_LOCATIONS


def resolve_location_name(
    city_code: str, cities: Mapping[str, str] = CITY_LOCATIONS
) -> str:
    """Return the mapped location name, or the code itself when unknown."""
    return cities.get(city_code, city_code)
