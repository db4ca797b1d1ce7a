"""Error taxonomy shared by services and the HTTP layer.

Services raise these; ``blog_api.main`` installs exception handlers that turn
them into ``{code, message, timestamp, path}`` JSON bodies.
"""


class BlogAPIError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class ValidationError(BlogAPIError):
    """Malformed or missing input."""

    status_code = 400
    code = "VALIDATION_ERROR"


class AuthenticationError(BlogAPIError):
    """Missing, invalid or expired credentials."""

    status_code = 401
    code = "AUTHENTICATION_FAILED"


class AuthorizationError(BlogAPIError):
    """Valid identity without the role or ownership the operation needs."""

    status_code = 403
    code = "FORBIDDEN"


class NotFoundError(BlogAPIError):
    status_code = 404
    code = "NOT_FOUND"


class ConflictError(BlogAPIError):
    """Uniqueness violation."""

    status_code = 409
    code = "CONFLICT"


class UpstreamError(BlogAPIError):
    """Failure of the image provider.

    ``retryable`` errors (timeouts, connection failures, missing provider
    configuration) are reported as 503 so callers know a retry may succeed.
    """

    status_code = 502
    code = "UPSTREAM_ERROR"

    def __init__(self, message: str, retryable: bool = False):
        super().__init__(message)
        self.retryable = retryable
        if retryable:
            self.status_code = 503
            self.code = "UPSTREAM_UNAVAILABLE"


class InternalError(BlogAPIError):
    """A broken invariant. The detail is logged; clients get a generic message."""

    status_code = 500
    code = "INTERNAL_ERROR"
