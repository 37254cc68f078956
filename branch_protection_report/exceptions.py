"""Branch protection report exception classes."""


class ReportError(Exception):
    """Base exception for all branch protection report errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(ReportError):
    """Raised when the organization name or token is missing or invalid."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class ApiError(ReportError):
    """Raised when the GitHub API answers with an error status."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message)
        self.status_code = status_code
        self.request_id = request_id


class AuthenticationError(ApiError):
    """Raised on 401: the token is missing, expired or revoked."""

    pass


class NotFoundError(ApiError):
    """Raised on 404."""

    pass


class OrgNotFoundError(NotFoundError):
    """Raised when the organization being audited does not exist."""

    def __init__(self, org: str, request_id: str | None = None) -> None:
        super().__init__(
            "ORG_NOT_FOUND",
            f"Organization {org} does not exist.",
            status_code=404,
            request_id=request_id,
        )
        self.org = org


class RateLimitedError(ApiError):
    """Raised when a bounded 403 retry policy gives up."""

    def __init__(
        self,
        code: str,
        message: str,
        attempts: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, status_code=403, request_id=request_id)
        self.attempts = attempts


class ServerError(ApiError):
    """Raised on server errors (5xx)."""

    pass


class NetworkError(ApiError):
    """Raised when the request never produced an HTTP response."""

    def __init__(self, message: str) -> None:
        super().__init__("CONNECTION_ERROR", message)
