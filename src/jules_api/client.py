"""
JulesClient — main SDK entry point.
"""

from typing import Any, Optional

import httpx

from jules_api.activities import ActivitiesAPI
from jules_api.config import ClientConfig
from jules_api.sessions import SessionsAPI
from jules_api.sources import SourcesAPI
from jules_api.transport.http import HttpClient


class JulesClient:
    """
    Synchronous Jules API client.

    Example:
        with JulesClient(api_key="...") as client:
            source = client.sources.all()[0]
            session = client.sessions.create(
                "Fix the login bug",
                SourceContext.build(source.name, "main"),
            )
            for activity in client.activities.each(session.id):
                print(activity.type, activity.message)
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        if config is None:
            config = ClientConfig.resolve(api_key=api_key, base_url=base_url, timeout=timeout)
        else:
            overrides = {"api_key": api_key, "base_url": base_url, "timeout": timeout}
            config = config.model_copy(update={k: v for k, v in overrides.items() if v is not None})

        self.http = HttpClient(config, transport=transport)
        self.sources = SourcesAPI(self.http)
        self.sessions = SessionsAPI(self.http)
        self.activities = ActivitiesAPI(self.http)

    @property
    def config(self) -> ClientConfig:
        return self.http.config

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "JulesClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
