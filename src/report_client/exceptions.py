"""Custom exception hierarchy for the weekly report client."""

from __future__ import annotations


class ReportClientError(Exception):
    """Base exception for all report_client errors."""


class ReportNotConfiguredError(ReportClientError):
    """No API key is configured for the report model."""


class ReportAPIError(ReportClientError):
    """A chat completion call returned an error or an unusable response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ReportRateLimitError(ReportAPIError):
    """HTTP 429: too many requests."""

    def __init__(self, message: str = "Rate limited by the report model API") -> None:
        super().__init__(message, status_code=429)


class ReportParseError(ReportClientError):
    """The model answered, but nothing in the answer maps to a report section."""
