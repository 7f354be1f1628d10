"""
Client configuration — explicit arguments win over the environment, which wins over defaults.
"""

import os
from typing import Mapping, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict

from jules_api.errors import ConfigurationError

DEFAULT_BASE_URL = "https://jules.googleapis.com/v1alpha"
DEFAULT_TIMEOUT = 30.0

API_KEY_ENV = "JULES_API_KEY"
BASE_URL_ENV = "JULES_BASE_URL"
TIMEOUT_ENV = "JULES_TIMEOUT"

LOOPBACK_HOSTS = {"localhost", "127.0.0.1", "::1"}


class ClientConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def resolve(
        cls,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "ClientConfig":
        """Build a config from explicit values, falling back to JULES_* env vars, then defaults."""
        env = os.environ if environ is None else environ

        if timeout is None and env.get(TIMEOUT_ENV):
            try:
                timeout = float(env[TIMEOUT_ENV])
            except ValueError:
                raise ConfigurationError(f"{TIMEOUT_ENV} must be a number, got {env[TIMEOUT_ENV]!r}")

        return cls(
            api_key=api_key if api_key is not None else env.get(API_KEY_ENV),
            base_url=base_url or env.get(BASE_URL_ENV) or DEFAULT_BASE_URL,
            timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
        )

    @property
    def is_valid(self) -> bool:
        return bool(self.api_key)

    def ensure_valid(self) -> None:
        """Fail fast on a missing key or an insecure base URL — called before any request."""
        if not self.is_valid:
            raise ConfigurationError(
                f"API key is required. Set {API_KEY_ENV} environment variable or pass api_key to JulesClient"
            )

        parsed = urlparse(self.base_url)
        if not parsed.scheme or not parsed.hostname:
            raise ConfigurationError(f"Invalid base_url: {self.base_url!r}")
        if parsed.scheme == "https":
            return
        if parsed.scheme == "http" and parsed.hostname in LOOPBACK_HOSTS:
            return
        raise ConfigurationError(f"HTTPS required for base_url (got {self.base_url!r})")
