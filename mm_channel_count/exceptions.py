"""
Exceptions raised by mm-channel-count.

Every error carries a short message plus optional details, and renders as
``message: details`` so log lines stay on one line.
"""

from typing import List, Optional


class ChannelCountError(Exception):
    """Base exception for all mm-channel-count errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(ChannelCountError):
    """Raised when required settings are missing after merging all sources."""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__("missing required configuration", ", ".join(self.missing))


class ApiError(ChannelCountError):
    """Raised when a Mattermost API call fails or returns a non-200 status."""

    def __init__(self, operation: str, details: Optional[str] = None, status_code: Optional[int] = None):
        self.operation = operation
        self.status_code = status_code
        super().__init__(f"{operation} failed", details)


class LookupFailed(ApiError):
    """Raised by the resolvers when a lookup cannot be completed."""

    label = "lookup failed"

    def __init__(self, cause: ApiError):
        super().__init__(cause.operation, cause.details, cause.status_code)
        self.message = self.label

    def __str__(self):
        cause = self.details or "unknown error"
        return f"{self.label}: {self.operation}: {cause}"


class UserLookupError(LookupFailed):
    label = "user lookup failed"


class TeamLookupError(LookupFailed):
    label = "team lookup failed"


class ChannelLookupError(LookupFailed):
    label = "channel lookup failed"
