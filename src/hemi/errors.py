"""
HEMI - Error Types

Every failure that can end a cycle derives from HemiError and knows
how to describe itself to the dashboard user.
"""

from __future__ import annotations

from typing import Optional

from hemi.types import Role


class HemiError(Exception):
    """Base class for ingestion and scoring failures."""

    @property
    def user_message(self) -> str:
        return str(self)


class MalformedSeriesError(HemiError):
    """Raw series is structurally invalid or too short to score."""

    def __init__(self, role: Optional[Role], reason: str) -> None:
        self.role = role
        self.reason = reason
        name = role.value if role is not None else "unknown"
        super().__init__(f"Invalid data structure received for {name}: {reason}")


class UpstreamAuthError(HemiError):
    """Upstream answered 401 or 403."""

    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(
            f"API Key Invalid or Unauthorized (Status: {status}). "
            "Please verify your API keys."
        )


class UpstreamRequestError(HemiError):
    """Any other non-success HTTP response."""

    def __init__(self, status: int, body: str = "") -> None:
        self.status = status
        self.body = body
        super().__init__(f"API request failed with status {status}: {body}")


class NetworkError(HemiError):
    """The request never reached the upstream provider."""

    def __init__(self, reason: str = "") -> None:
        self.reason = reason
        super().__init__(
            "A network error occurred. This could be due to a CORS policy, a firewall, "
            "or an internet connectivity issue. Ensure you are connected to the internet "
            "and that no proxy or extension is blocking the request."
            + (f" ({reason})" if reason else "")
        )
