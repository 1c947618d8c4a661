"""
Error Types
Every failure a request can hit, tagged with the kind that decides its status code
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    MISSING_CREDENTIAL = "missing_credential"
    UPSTREAM_UNREACHABLE = "upstream_unreachable"
    UPSTREAM_API_ERROR = "upstream_api_error"
    UPSTREAM_AUTH_REQUIRED = "upstream_auth_required"
    NOT_FOUND = "not_found"
    BAD_META_ID = "bad_meta_id"


STATUS_CODES = {
    ErrorKind.MISSING_CREDENTIAL: 400,
    ErrorKind.UPSTREAM_UNREACHABLE: 503,
    ErrorKind.UPSTREAM_API_ERROR: 503,
    ErrorKind.UPSTREAM_AUTH_REQUIRED: 503,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.BAD_META_ID: 400,
}


class AddonError(Exception):
    """Base error reported to the Stremio client as {"error": message}"""

    kind: ErrorKind = ErrorKind.NOT_FOUND

    def __init__(self, message: str, kind: Optional[ErrorKind] = None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]


class RouteNotFound(AddonError):
    """Path matches no addon route; rendered as plain text"""

    kind = ErrorKind.NOT_FOUND

    def __init__(self):
        super().__init__("Not found")


class UpstreamError(AddonError):
    """Failure of the IMDb GraphQL call"""

    kind = ErrorKind.UPSTREAM_API_ERROR


class UpstreamUnreachable(UpstreamError):
    """Timeout, transport failure or non-2xx response"""

    kind = ErrorKind.UPSTREAM_UNREACHABLE

    def __init__(self, detail: str, status: Optional[int] = None):
        super().__init__(f"Request to IMDb GraphQL failed: {status or ''} {detail}")
        self.status = status
        self.detail = detail


class UpstreamAPIError(UpstreamError):
    """GraphQL error list without login markers"""

    kind = ErrorKind.UPSTREAM_API_ERROR

    def __init__(self, messages: str):
        super().__init__(f"IMDb GraphQL error: {messages}")
        self.messages = messages


class UpstreamAuthRequired(UpstreamError):
    """GraphQL error list mentioning auth/login"""

    kind = ErrorKind.UPSTREAM_AUTH_REQUIRED

    def __init__(self):
        super().__init__("Login required or cookie expired.")
