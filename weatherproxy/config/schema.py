"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherproxy.config.defaults import DEFAULT_CITY

CWA_API_BASE_URL = "https://opendata.cwa.gov.tw/api"


class UpstreamConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = CWA_API_BASE_URL
    api_key_env: str = "CWA_API_KEY"


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    cors_origins: list[str] = ["*"]


class ProxyConfig(BaseModel):
    model_config = {"extra": "forbid"}

    upstream: UpstreamConfig = UpstreamConfig()
    server: ServerConfig = ServerConfig()
    default_city: str = Field(default=DEFAULT_CITY, min_length=1)
    # Extra city code -> CWA location name entries, merged over the defaults
    cities: dict[str, str] = {}
