"""Proxy error taxonomy raised by the fetchers and the composer."""

import httpx


class ProxyError(Exception):
    """Base error. status_code None means the failure has no HTTP status."""

    status_code: int | None = None

    def __init__(self, message: str | None = None, status_code: int | None = None):
        super().__init__(message or "")
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(ProxyError):
    status_code = 500


class NotFoundError(ProxyError):
    status_code = 404


class UpstreamError(ProxyError):
    """Network failure or non-2xx response from the CWA API."""

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        upstream_message: str | None = None,
    ):
        super().__init__(message, status_code)
        self.upstream_message = upstream_message

    @classmethod
    def from_response(cls, response: httpx.Response) -> "UpstreamError":
        """Build from an error response, keeping the body's message field if any."""
        upstream_message = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("message"), str):
            upstream_message = body["message"]
        return cls(status_code=response.status_code, upstream_message=upstream_message)
