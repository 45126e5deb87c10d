"""Weekly report model client: all language-model network I/O lives here."""

from report_client.client import ReportClient
from report_client.exceptions import (
    ReportAPIError,
    ReportClientError,
    ReportNotConfiguredError,
    ReportParseError,
    ReportRateLimitError,
)
from report_client.generator import generate_weekly_report
from report_client.parser import parse_report_text
from report_client.prompt import SYSTEM_PROMPT, build_analysis_prompt

__all__ = [
    "ReportClient",
    "ReportAPIError",
    "ReportClientError",
    "ReportNotConfiguredError",
    "ReportParseError",
    "ReportRateLimitError",
    "SYSTEM_PROMPT",
    "build_analysis_prompt",
    "generate_weekly_report",
    "parse_report_text",
]
