"""
REST HTTP client for the Jules API.

Builds URLs and headers, encodes JSON bodies and turns non-2xx responses into
typed errors from jules_api.errors.
"""

import json
import logging
from typing import Any, Optional
from urllib.parse import urlencode

import httpx

from jules_api.config import ClientConfig
from jules_api.errors import (
    AuthenticationError,
    BadRequestError,
    ConnectionError,
    ForbiddenError,
    JulesError,
    NotFoundError,
    RateLimitError,
    ServerError,
)
from jules_api.version import __version__

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-Goog-Api-Key"
SUPPORTED_METHODS = {"GET", "POST", "DELETE"}

ERROR_MAPPING: dict[int, tuple[type[JulesError], str]] = {
    400: (BadRequestError, "Bad request"),
    401: (AuthenticationError, "Invalid API key"),
    403: (ForbiddenError, "Access forbidden"),
    404: (NotFoundError, "Resource not found"),
    429: (RateLimitError, "Rate limit exceeded"),
}


def extract_error_message(body: Optional[str], default: str) -> str:
    """Pull a readable message out of an error body: error.message, error, then message."""
    if not body:
        return default
    try:
        data = json.loads(body)
    except ValueError:
        return default
    if not isinstance(data, dict):
        return default

    error = data.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        return message if isinstance(message, str) and message else default
    if isinstance(error, str):
        return error
    if isinstance(data.get("message"), str):
        return data["message"]
    return default


def error_for_status(status: int, body: Optional[str]) -> JulesError:
    if status in ERROR_MAPPING:
        error_cls, default = ERROR_MAPPING[status]
        return error_cls(extract_error_message(body, default), status=status, response=body)
    if 500 <= status <= 599:
        return ServerError(extract_error_message(body, "Server error"), status=status, response=body)
    return JulesError(f"Unexpected response: {status}", status=status, response=body)


class HttpClient:
    def __init__(self, config: ClientConfig, transport: Optional[httpx.BaseTransport] = None):
        config.ensure_valid()
        self._config = config
        self._base_url = config.base_url.rstrip("/")
        self._client = httpx.Client(
            headers={
                "User-Agent": f"jules-api-python/{__version__}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            timeout=config.timeout,
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_url(self, path: str, params: Optional[dict[str, Any]] = None) -> str:
        if not path.startswith("/"):
            path = f"/{path}"
        url = f"{self._base_url}{path}"
        if params:
            compact = {k: v for k, v in params.items() if v is not None}
            if compact:
                url = f"{url}?{urlencode(compact)}"
        return url

    def _headers(self) -> dict[str, str]:
        return {API_KEY_HEADER: self._config.api_key or ""}

    def request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        body: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        url = self.build_url(path, params if method == "GET" else None)
        content = json.dumps(body if body is not None else {}) if method == "POST" else None

        try:
            resp = self._client.request(method, url, content=content, headers=self._headers())
        except httpx.TimeoutException as e:
            logger.warning(f"{method} {url} timed out after {self._config.timeout}s")
            raise ConnectionError(f"Request timed out after {self._config.timeout} seconds") from e
        except httpx.TransportError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise ConnectionError(f"Connection error: {e}") from e

        logger.debug(f"{method} {url} -> {resp.status_code}")
        return self._handle_response(resp)

    def _handle_response(self, resp: httpx.Response) -> dict[str, Any]:
        body = resp.text
        if 200 <= resp.status_code <= 299:
            if not body or not body.strip():
                return {}
            try:
                data = resp.json()
            except ValueError as e:
                raise JulesError(f"Invalid JSON response: {e}", status=resp.status_code, response=body) from e
            if not isinstance(data, dict):
                raise JulesError(
                    "Invalid JSON response: expected an object", status=resp.status_code, response=body,
                )
            return data

        logger.warning(f"{resp.request.method} {resp.request.url} returned HTTP {resp.status_code}")
        raise error_for_status(resp.status_code, body or None)

    def get(self, path: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        return self.request("GET", path, params=params)

    def post(self, path: str, body: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        return self.request("POST", path, body=body)

    def delete(self, path: str) -> dict[str, Any]:
        return self.request("DELETE", path)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
