"""
Jules API error types — one class per mapped HTTP status.
"""

from typing import Any, Optional


class JulesError(Exception):
    code = "jules_error"

    def __init__(self, message: str, status: Optional[int] = None, response: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.response = response

    @property
    def status_code(self) -> Optional[int]:
        return self.status

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view for JSON output."""
        result: dict[str, Any] = {"error": self.message, "code": self.code}
        if self.status is not None:
            result["status"] = self.status
        return result


class ConfigurationError(JulesError):
    code = "configuration_error"


class BadRequestError(JulesError):
    code = "bad_request"


class AuthenticationError(JulesError):
    code = "authentication_error"


class ForbiddenError(JulesError):
    code = "forbidden"


class NotFoundError(JulesError):
    code = "not_found"


class RateLimitError(JulesError):
    code = "rate_limited"


class ServerError(JulesError):
    code = "server_error"


class ConnectionError(JulesError):
    code = "connection_error"

    def __init__(self, message: str):
        super().__init__(message)
