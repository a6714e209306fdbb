"""Tests for sunrise/sunset extraction and the sun-times fetcher."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from weatherproxy.ingest.cwa_client import CwaClient
from weatherproxy.ingest.sun_fetcher import SunTimesFetcher, parse_sun_times
from weatherproxy.models.errors import NotFoundError


class TestParseSunTimes:
    def test_first_entry_only(self, sun_payload: dict):
        sun = parse_sun_times(sun_payload, "臺北市")
        assert sun.date == "2026-10-19"
        assert sun.sun_rise_time == "05:40"
        assert sun.sun_set_time == "17:20"

    def test_to_dict(self, sun_payload: dict):
        assert parse_sun_times(sun_payload, "臺北市").to_dict() == {
            "date": "2026-10-19",
            "sunRiseTime": "05:40",
            "sunSetTime": "17:20",
        }

    def test_no_matching_county(self, make_sun):
        with pytest.raises(NotFoundError) as exc_info:
            parse_sun_times(make_sun("高雄市"), "臺北市")
        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "unable to retrieve sunrise/sunset data for 臺北市"

    def test_empty_series(self, make_sun):
        with pytest.raises(NotFoundError):
            parse_sun_times(make_sun("臺北市", days=0), "臺北市")

    @pytest.mark.parametrize(
        "raw",
        [{}, {"records": None}, {"records": {"locations": {}}}, {"records": {"locations": {"location": []}}}],
    )
    def test_missing_structure(self, raw: dict):
        with pytest.raises(NotFoundError):
            parse_sun_times(raw, "臺北市")


class TestSunTimesFetcher:
    def test_fetch_uses_county_name(self, sun_payload: dict):
        mock_cwa = MagicMock(spec=CwaClient)
        mock_cwa.get_sunrise_sunset = AsyncMock(return_value=sun_payload)

        sun = asyncio.run(SunTimesFetcher(mock_cwa).fetch("臺北市"))
        assert sun.date == "2026-10-19"
        mock_cwa.get_sunrise_sunset.assert_awaited_once_with("臺北市")
