"""
jules-api — Jules API SDK for Python.

Create coding sessions against connected repositories, approve plans,
exchange messages and follow each session's activity stream.
"""

import logging

from jules_api.client import JulesClient
from jules_api.config import ClientConfig
from jules_api.sources import SourcesAPI
from jules_api.sessions import SessionsAPI
from jules_api.activities import ActivitiesAPI
from jules_api.pagination import Page, PageIterator
from jules_api.errors import (
    JulesError,
    ConfigurationError,
    BadRequestError,
    AuthenticationError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ConnectionError,
)
from jules_api.models.activity import Activity, ActivityType, Originator
from jules_api.models.artifact import Artifact, ArtifactType
from jules_api.models.plan import Plan, PlanStep
from jules_api.models.session import AutomationMode, PullRequest, Session, SessionState
from jules_api.models.source import GitHubBranch, GitHubRepo, Source, SourceContext
from jules_api.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "JulesClient",
    "ClientConfig",
    "SourcesAPI",
    "SessionsAPI",
    "ActivitiesAPI",
    "Page",
    "PageIterator",
    "JulesError",
    "ConfigurationError",
    "BadRequestError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "ConnectionError",
    "Activity",
    "ActivityType",
    "Originator",
    "Artifact",
    "ArtifactType",
    "Plan",
    "PlanStep",
    "AutomationMode",
    "PullRequest",
    "Session",
    "SessionState",
    "GitHubBranch",
    "GitHubRepo",
    "Source",
    "SourceContext",
    "__version__",
]
