"""CWA weather proxy — FastAPI app exposing forecast and sun-times endpoints."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from weatherproxy.config.schema import ProxyConfig
from weatherproxy.models.common import utc_now_iso
from weatherproxy.models.envelope import SERVER_ERROR, Envelope
from weatherproxy.service.weather_service import WeatherService, build_weather_service

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "not found"


def create_app(
    config: ProxyConfig | None = None, service: WeatherService | None = None
) -> FastAPI:
    """Build the app. The service is built from config unless one is injected."""
    config = config or ProxyConfig()
    service = service or build_weather_service(config)
    default_city = config.default_city

    app = FastAPI(title="CWA Weather Proxy", version="0.1.0", redirect_slashes=False)

    # Registered before CORS so error responses still pass through it
    @app.middleware("http")
    async def unhandled_error(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return JSONResponse(
                status_code=500, content={"error": SERVER_ERROR, "message": str(e)}
            )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        # Only GET routes exist, so a wrong method is an unmatched route too
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content={"error": ROUTE_NOT_FOUND})
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.get("/")
    def index():
        """Endpoint directory."""
        return {
            "message": "Welcome to the CWA weather forecast API",
            "endpoints": {
                "weatherAndSunTimes": "/api/weather?city=you_choose_city",
                "forecast": "/api/forecast?city=you_choose_city",
                "health": "/api/health",
            },
        }

    @app.get("/api/health")
    @app.get("/api/health/", include_in_schema=False)
    def health():
        return {"status": "OK", "timestamp": utc_now_iso()}

    @app.get("/api/weather")
    @app.get("/api/weather/", include_in_schema=False)
    async def weather(city: str | None = None):
        """Forecast plus sunrise/sunset, e.g. ?city=chiayi-city."""
        return _respond(await service.weather_with_sun(city or default_city))

    @app.get("/api/forecast")
    @app.get("/api/forecast/", include_in_schema=False)
    async def forecast(city: str | None = None):
        return _respond(await service.weather_only(city or default_city))

    return app


def _respond(envelope: Envelope) -> JSONResponse:
    return JSONResponse(status_code=envelope.status_code, content=envelope.body)
