"""Error taxonomy and result types for the data proxy.

Failures are carried as ``ProxyError`` values rather than raised, and are
only turned into the ``{"error": ..., "details": ...}`` JSON envelope at the
HTTP boundary.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Failure categories a proxy call can end in."""

    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    UPSTREAM = "upstream"
    GRAPHQL = "graphql"
    INTERNAL = "internal"


# Used when the upstream never produced an HTTP response
UPSTREAM_UNAVAILABLE_STATUS = 502


@dataclass(frozen=True)
class ProxyError:
    """A terminal proxy failure."""

    kind: ErrorKind
    message: str
    details: Any = None
    upstream_status: int | None = None

    @classmethod
    def bad_request(cls, message: str, details: Any = None) -> "ProxyError":
        return cls(ErrorKind.BAD_REQUEST, message, details)

    @classmethod
    def not_found(cls, message: str) -> "ProxyError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def upstream(
        cls,
        message: str,
        status: int | None = None,
        details: Any = None,
    ) -> "ProxyError":
        return cls(ErrorKind.UPSTREAM, message, details, status)

    @classmethod
    def graphql(cls, errors: Any) -> "ProxyError":
        return cls(ErrorKind.GRAPHQL, "GraphQL error", errors)

    @classmethod
    def internal(cls, message: str = "An unexpected error occurred.") -> "ProxyError":
        return cls(ErrorKind.INTERNAL, message)

    @property
    def status_code(self) -> int:
        match self.kind:
            case ErrorKind.BAD_REQUEST:
                return 400
            case ErrorKind.NOT_FOUND:
                return 404
            case ErrorKind.UPSTREAM:
                return self.upstream_status or UPSTREAM_UNAVAILABLE_STATUS
            case ErrorKind.GRAPHQL | ErrorKind.INTERNAL:
                return 500

    def to_envelope(self) -> dict[str, Any]:
        """Render as the JSON error envelope."""
        envelope: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            envelope["details"] = self.details
        return envelope


@dataclass(frozen=True)
class ProxySuccess:
    """The upstream ``data`` payload of a successful call."""

    data: dict[str, Any]


ProxyResult = ProxySuccess | ProxyError
