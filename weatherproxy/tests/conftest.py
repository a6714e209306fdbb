"""Shared test fixtures: CWA payload builders and config."""

from pathlib import Path

import pytest
import yaml

from weatherproxy.config.schema import ProxyConfig, UpstreamConfig

TEST_BASE_URL = "https://test-cwa.example.com/api"
TEST_API_KEY = "CWA-TEST-KEY"

PERIOD_BOUNDS = [
    ("2026-10-19 18:00:00", "2026-10-20 06:00:00"),
    ("2026-10-20 06:00:00", "2026-10-20 18:00:00"),
    ("2026-10-20 18:00:00", "2026-10-21 06:00:00"),
]

ELEMENT_VALUES = {
    "Wx": ["多雲時晴", "晴時多雲", "多雲"],
    "PoP": ["10", "20", "30"],
    "MinT": ["22", "24", "21"],
    "MaxT": ["27", "31", "26"],
    "CI": ["舒適", "悶熱", "舒適"],
    "WS": ["3", "4", "2"],
}


def make_forecast_payload(
    location_name: str = "臺北市",
    elements: dict[str, list[str]] | None = None,
    bounds: list[tuple[str, str]] | None = None,
    extra_locations: list[dict] | None = None,
) -> dict:
    """Build an F-C0032-001 response with index-aligned element series."""
    elements = ELEMENT_VALUES if elements is None else elements
    bounds = PERIOD_BOUNDS if bounds is None else bounds
    weather_elements = [
        {
            "elementName": name,
            "time": [
                {
                    "startTime": bounds[i][0],
                    "endTime": bounds[i][1],
                    "parameter": {"parameterName": value},
                }
                for i, value in enumerate(values)
            ],
        }
        for name, values in elements.items()
    ]
    return {
        "success": "true",
        "records": {
            "datasetDescription": "三十六小時天氣預報",
            "location": [
                *(extra_locations or []),
                {"locationName": location_name, "weatherElement": weather_elements},
            ],
        },
    }


def make_sun_payload(county_name: str = "臺北市", days: int = 2) -> dict:
    """Build an A-B0062-001 response with one entry per day."""
    return {
        "success": "true",
        "records": {
            "locations": {
                "location": [
                    {
                        "CountyName": county_name,
                        "time": [
                            {
                                "Date": f"2026-10-{19 + d}",
                                "SunRiseTime": f"05:4{d}",
                                "SunSetTime": f"17:2{d}",
                            }
                            for d in range(days)
                        ],
                    }
                ]
            }
        },
    }


@pytest.fixture
def forecast_payload() -> dict:
    return make_forecast_payload()


@pytest.fixture
def sun_payload() -> dict:
    return make_sun_payload()


@pytest.fixture
def proxy_config() -> ProxyConfig:
    return ProxyConfig(upstream=UpstreamConfig(base_url=TEST_BASE_URL))


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "server": {"port": 8080},
        "default_city": "tainan",
        "cities": {"alishan": "阿里山"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, allow_unicode=True)
    return path


@pytest.fixture
def make_forecast():
    return make_forecast_payload


@pytest.fixture
def make_sun():
    return make_sun_payload
