"""Chat completion client for the weekly report model.

Talks to any OpenAI-compatible endpoint; DeepSeek is the default. All
network I/O for report generation lives here.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from openai import OpenAI

from report_client.exceptions import (
    ReportAPIError,
    ReportNotConfiguredError,
    ReportRateLimitError,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.deepseek.com/v1"
DEFAULT_MODEL = "deepseek-chat"
DEFAULT_MAX_TOKENS = 1000
DEFAULT_TEMPERATURE = 0.7
_DEFAULT_TIMEOUT_S = 60.0
_MAX_RETRIES = 3
_BASE_BACKOFF_S = 2


class ReportClient:
    """Facade over the chat completion API used for weekly reports."""

    def __init__(
        self,
        api_key: str | None,
        base_url: str = DEFAULT_BASE_URL,
        model: str = DEFAULT_MODEL,
        timeout: float = _DEFAULT_TIMEOUT_S,
    ) -> None:
        if not api_key:
            raise ReportNotConfiguredError("No API key configured for the report model")
        self.model = model
        # Retries are handled by _safe_call so backoff is uniform.
        self._openai = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout, max_retries=0)

    @classmethod
    def from_openai(cls, openai_client: Any, model: str = DEFAULT_MODEL) -> "ReportClient":
        """Construct from an existing OpenAI-compatible client object."""
        obj = cls.__new__(cls)
        obj.model = model
        obj._openai = openai_client
        return obj

    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> str:
        """Run one chat completion and return the assistant's text.

        Raises:
            ReportRateLimitError: Still rate limited after all retries.
            ReportAPIError: Any other API failure, or an empty answer.
        """
        response = self._safe_call(
            self._openai.chat.completions.create,
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            max_tokens=max_tokens,
            temperature=temperature,
        )
        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as exc:
            raise ReportAPIError(f"Unexpected completion response: {response!r}") from exc
        if not content or not content.strip():
            raise ReportAPIError("Report model returned an empty answer")
        logger.info("Report model %s answered with %d characters", self.model, len(content))
        return content

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _safe_call(self, fn: Callable, *args: Any, **kwargs: Any) -> Any:
        """Call *fn* with retry + exponential backoff on 429."""
        last_exc: Exception | None = None
        for attempt in range(_MAX_RETRIES):
            try:
                return fn(*args, **kwargs)
            except Exception as exc:
                last_exc = exc
                status = getattr(exc, "status_code", None) or getattr(exc, "status", None)
                if status == 429:
                    wait = _BASE_BACKOFF_S * (2 ** attempt)
                    logger.warning(
                        "Rate limited (attempt %d/%d), retrying in %ds",
                        attempt + 1,
                        _MAX_RETRIES,
                        wait,
                    )
                    time.sleep(wait)
                    continue
                raise ReportAPIError(str(exc), status_code=status) from exc

        raise ReportRateLimitError(f"Rate limited after {_MAX_RETRIES} retries: {last_exc}")
