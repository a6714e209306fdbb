"""CWA forecast and sun-times data models, flattened for client responses."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ForecastPeriod:
    start_time: str
    end_time: str
    weather: str = ""
    rain: str = ""  # e.g. "20%"
    min_temp: str = ""  # e.g. "18°C"
    max_temp: str = ""
    comfort: str = ""
    wind_speed: str = ""

    def to_dict(self) -> dict:
        return {
            "startTime": self.start_time,
            "endTime": self.end_time,
            "weather": self.weather,
            "rain": self.rain,
            "minTemp": self.min_temp,
            "maxTemp": self.max_temp,
            "comfort": self.comfort,
            "windSpeed": self.wind_speed,
        }


@dataclass(frozen=True)
class WeatherData:
    city: str
    update_time: str  # dataset description, not a period timestamp
    forecasts: tuple[ForecastPeriod, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "city": self.city,
            "updateTime": self.update_time,
            "forecasts": [f.to_dict() for f in self.forecasts],
        }


@dataclass(frozen=True)
class SunTimes:
    date: str
    sun_rise_time: str
    sun_set_time: str

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "sunRiseTime": self.sun_rise_time,
            "sunSetTime": self.sun_set_time,
        }
