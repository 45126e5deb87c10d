"""Weekly report generation with a local fallback.

``generate_weekly_report`` never raises for model problems: an
unconfigured client, an API failure or an unparseable answer all yield
the deterministic local report instead. Callers treat both the same.
"""

from __future__ import annotations

import logging

from planner_engine.aggregation import build_local_report
from planner_engine.models.report import WeeklyAggregate, WeeklyReport
from planner_engine.stores.base import utc_now_iso
from report_client.client import ReportClient
from report_client.exceptions import ReportClientError
from report_client.parser import parse_report_text
from report_client.prompt import SYSTEM_PROMPT, build_analysis_prompt

logger = logging.getLogger(__name__)


def generate_weekly_report(
    aggregate: WeeklyAggregate,
    client: ReportClient | None = None,
    generated_at: str | None = None,
) -> WeeklyReport:
    """Produce the narrative report for one aggregated week.

    Args:
        aggregate: Output of aggregate_week().
        client: Configured model client, or None to skip the model.
        generated_at: Timestamp override; defaults to now (UTC).

    Returns:
        The parsed model report, or the local report with ``is_demo=True``.
    """
    generated_at = generated_at or utc_now_iso()
    if client is None:
        logger.warning("Report model not configured, using local report for %s", aggregate.start_date)
        return build_local_report(aggregate, generated_at=generated_at)

    try:
        text = client.complete(SYSTEM_PROMPT, build_analysis_prompt(aggregate))
        return parse_report_text(text, aggregate.stats, generated_at=generated_at)
    except ReportClientError as exc:
        logger.warning("Report generation failed for %s, using local report: %s", aggregate.start_date, exc)
        return build_local_report(aggregate, generated_at=generated_at)
