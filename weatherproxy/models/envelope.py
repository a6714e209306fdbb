"""Client-facing response envelopes and error normalization."""

from dataclasses import dataclass, field

from weatherproxy.models.errors import ConfigurationError, ProxyError, UpstreamError
from weatherproxy.models.weather import SunTimes, WeatherData

SERVER_ERROR = "server error"
NO_MATCHING_DATA = "no matching data"
CONFIGURATION_ERROR = "server configuration error"
CONFIGURATION_MESSAGE = "set CWA_API_KEY in the environment or a .env file"


@dataclass(frozen=True)
class Envelope:
    status_code: int
    body: dict = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    @classmethod
    def success(cls, data: WeatherData, sun_times: SunTimes | None = None) -> "Envelope":
        body: dict = {"success": True, "data": data.to_dict()}
        if sun_times is not None:
            body["sunTimes"] = sun_times.to_dict()
        return cls(200, body)

    @classmethod
    def error(cls, status_code: int, label: str, message: str) -> "Envelope":
        return cls(status_code, {"error": label, "message": message})


def normalize_error(exc: Exception, fallback_message: str) -> Envelope:
    """Map any failure into the two-field error envelope.

    Status absent or 500 is a server error; anything else keeps its status
    under the "no matching data" label. The message is the local message,
    else the upstream body message, else the fallback.
    """
    if isinstance(exc, ConfigurationError):
        return Envelope.error(500, CONFIGURATION_ERROR, exc.message or CONFIGURATION_MESSAGE)

    if isinstance(exc, ProxyError):
        status = exc.status_code or 500
        message = exc.message
        if not message and isinstance(exc, UpstreamError):
            message = exc.upstream_message
    else:
        status = 500
        message = str(exc)

    label = SERVER_ERROR if status == 500 else NO_MATCHING_DATA
    return Envelope.error(status, label, message or fallback_message)
